import json

import pytest
from click.testing import CliRunner

from docview.types.enums import PropertyType
from tools.cli import cli
from tools.parsers import parse_type


@pytest.fixture
def runner():
    return CliRunner()


class TestParseType:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Long", PropertyType.LONG),
            ("long", PropertyType.LONG),
            ("WeakReference", PropertyType.WEAKREFERENCE),
            ("uri", PropertyType.URI),
            ("3", PropertyType.LONG),
            (" undefined ", PropertyType.UNDEFINED),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_type(text) is expected

    def test_every_type_parses_by_name(self):
        for prop_type in PropertyType:
            assert parse_type(prop_type.type_name.upper()) is prop_type

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown property type"):
            parse_type("integer")


class TestEncodeCommand:
    def test_single(self, runner):
        result = runner.invoke(cli, ["encode", "foo", "1234", "--type", "long"])
        assert result.exit_code == 0
        assert result.output.strip() == "{Long}1234"

    def test_multi_sorted(self, runner):
        result = runner.invoke(cli, ["encode", "foo", "b,1", "a", "--multi", "--sort"])
        assert result.exit_code == 0
        assert result.output.strip() == "[a,b\\,1]"

    def test_multi_empty(self, runner):
        result = runner.invoke(cli, ["encode", "foo", "--multi", "--type", "String"])
        assert result.output.strip() == "{String}[]"

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["--json", "encode", "foo", "x"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"name": "foo", "payload": "x"}

    def test_single_needs_one_value(self, runner):
        result = runner.invoke(cli, ["encode", "foo", "a", "b"])
        assert result.exit_code == 1
        assert "needs 1 value" in result.output

    def test_bad_type(self, runner):
        result = runner.invoke(cli, ["encode", "foo", "a", "--type", "nope"])
        assert result.exit_code == 1


class TestDecodeCommand:
    def test_text_output(self, runner):
        result = runner.invoke(cli, ["decode", "foo", "{Long}[1,2]"])
        assert result.exit_code == 0
        assert "Long" in result.output
        assert "[0] '1'" in result.output
        assert "[1] '2'" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["--json", "decode", "foo", "[\\0]"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "name": "foo",
            "values": [""],
            "multiple": True,
            "type": "undefined",
            "reference": False,
        }

    def test_unknown_type(self, runner):
        result = runner.invoke(cli, ["decode", "foo", "{Nope}x"])
        assert result.exit_code == 1
        assert "Unknown property type" in result.output
