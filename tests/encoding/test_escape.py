import pytest

from docview.encoding.escape import (
    EMPTY_SENTINEL,
    escape,
    is_invalid_xml_char,
    split_items,
    unescape,
)
from docview.errors import MalformedEscapeError


class TestEscapeSingleValue:
    def test_plain(self):
        assert escape("hello", False) == "hello"

    def test_comma_untouched(self):
        assert escape("hello, world", False) == "hello, world"

    def test_leading_bracket(self):
        assert escape("[hello]", False) == "\\[hello]"

    def test_leading_brace(self):
        assert escape("{hello}", False) == "\\{hello}"

    def test_inner_bracket_untouched(self):
        assert escape("he[llo", False) == "he[llo"

    def test_control_char(self):
        assert escape("hello\u000fworld", False) == "hello\\u000fworld"

    def test_backslash_doubled(self):
        assert escape("hello\\world", False) == "hello\\\\world"

    def test_empty(self):
        assert escape("", False) == ""


class TestEscapeMultiValue:
    def test_comma_escaped(self):
        assert escape("hello, world", True) == "hello\\, world"

    def test_leading_bracket_untouched(self):
        assert escape("[hello]", True) == "[hello]"

    def test_leading_brace_untouched(self):
        assert escape("{hello}", True) == "{hello}"

    def test_control_char(self):
        assert escape("hello\u000fworld", True) == "hello\\u000fworld"

    def test_backslash_doubled(self):
        assert escape("hello\\world", True) == "hello\\\\world"


class TestControlCharacters:
    @pytest.mark.parametrize("ch", ["\x00", "\x01", "\x1f", "\ufffe", "\uffff", "\ud800"])
    def test_invalid(self, ch):
        assert is_invalid_xml_char(ch)

    @pytest.mark.parametrize("ch", ["\t", "\n", "\r", " ", "a", "é", "\U0001f600"])
    def test_valid(self, ch):
        assert not is_invalid_xml_char(ch)

    def test_tab_and_newline_kept_verbatim(self):
        assert escape("a\tb\nc\rd", False) == "a\tb\nc\rd"

    def test_nul_escaped_lowercase_hex(self):
        assert escape("\x00\x1b", True) == "\\u0000\\u001b"

    def test_custom_predicate(self):
        assert escape("a\tb", False, is_control=lambda ch: ch == "\t") == "a\\u0009b"


class TestUnescape:
    def test_plain_passthrough(self):
        assert unescape("hello") == "hello"

    def test_escaped_comma(self):
        assert unescape("hello\\,world") == "hello,world"

    def test_escaped_brackets(self):
        assert unescape("\\[a\\]\\{b\\}") == "[a]{b}"

    def test_double_backslash(self):
        assert unescape("a\\\\b") == "a\\b"

    def test_unicode(self):
        assert unescape("he\\u000fllo") == "he\u000fllo"

    def test_unicode_uppercase_hex(self):
        assert unescape("\\u00E9") == "é"

    def test_escaped_other_char(self):
        assert unescape("\\x\\0") == "x0"

    def test_trailing_backslash(self):
        with pytest.raises(MalformedEscapeError, match="trailing backslash"):
            unescape("abc\\")

    def test_short_unicode(self):
        with pytest.raises(MalformedEscapeError, match="four hex digits"):
            unescape("a\\u12")

    def test_non_hex_unicode(self):
        with pytest.raises(MalformedEscapeError) as exc_info:
            unescape("ab\\u12zz")
        assert exc_info.value.position == 2
        assert exc_info.value.token == "ab\\u12zz"

    def test_malformed_escape_is_value_error(self):
        with pytest.raises(ValueError):
            unescape("\\")


class TestEscapeInverse:
    @pytest.mark.parametrize(
        "value",
        [
            "",
            "hello",
            "hello, world",
            "[hello]",
            "{hello}",
            "a\\b\\\\c",
            "\\",
            "\\0",
            "x\x00y\x1f",
            "/content/[a-z]{2,3}/[a-z]{2,3}(/.*)",
            ",,,",
            "\ufffe",
        ],
    )
    @pytest.mark.parametrize("is_multi", [False, True])
    def test_unescape_reverses_escape(self, value, is_multi):
        assert unescape(escape(value, is_multi)) == value

    def test_escape_never_produces_sentinel(self):
        for value in ("", "0", "\\0", "\\"):
            assert escape(value, True) != EMPTY_SENTINEL


class TestSplitItems:
    def test_empty_body(self):
        assert split_items("]") == []

    def test_empty_body_without_close(self):
        assert split_items("") == []

    def test_two_items(self):
        assert split_items("a,b]") == ["a", "b"]

    def test_missing_close(self):
        assert split_items("a,b") == ["a", "b"]

    def test_escaped_comma_kept(self):
        assert split_items("a\\,b,c]") == ["a\\,b", "c"]

    def test_empty_slots(self):
        assert split_items(",,,]") == ["", "", "", ""]

    def test_inner_brackets_are_data(self):
        assert split_items("[a],[b]]") == ["[a]", "[b]"]

    def test_escaped_final_bracket_is_data(self):
        assert split_items("a,b\\]") == ["a", "b\\]"]

    def test_escaped_backslash_before_close(self):
        assert split_items("a\\\\]") == ["a\\\\"]

    def test_escaped_backslash_before_comma(self):
        assert split_items("a\\\\,b]") == ["a\\\\", "b"]
