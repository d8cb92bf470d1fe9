"""Escape engine for the document-view property grammar.

Grammar::

    payload      := [ '{' type-name '}' ] ( item | '[' [ item (',' item)* ] [']'] )
    escaped-char := '\\' ( ',' | '[' | ']' | '{' | '}' | '\\' | 'u' hex4 )

Backslash is the only escape marker.  Commas are escaped only inside a
multi-value wrapper; a leading ``{`` or ``[`` only in a standalone value.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docview.errors import MalformedEscapeError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

EMPTY_SENTINEL = "\\0"
"""Item standing for a sole empty-string value in a multi-value payload."""

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_invalid_xml_char(ch: str) -> bool:
    """Check whether *ch* may not appear in an XML 1.0 document.

    TAB, LF and CR are the only characters below U+0020 that XML allows.
    Surrogate code points and the non-characters U+FFFE/U+FFFF are
    rejected as well.

    :param ch: A single character.
    :returns: ``True`` if *ch* must be written as a ``\\u`` escape.
    """
    cp = ord(ch)
    if cp < 0x20:
        return cp not in (0x09, 0x0A, 0x0D)
    return 0xD800 <= cp <= 0xDFFF or cp in (0xFFFE, 0xFFFF)


def escape(
    value: str,
    is_multi: bool,
    *,
    is_control: Callable[[str], bool] = is_invalid_xml_char,
) -> str:
    """Escape *value* so it can be written as one item of a payload.

    :param value: Raw property value.
    :param is_multi: ``True`` if the item sits inside a ``[...]`` wrapper.
    :param is_control: Predicate selecting characters to write as ``\\uXXXX``.
    :returns: The escaped item.
    """
    out: list[str] = []
    for i, ch in enumerate(value):
        if ch == "\\":
            out.append("\\\\")
        elif ch == "," and is_multi:
            out.append("\\,")
        elif i == 0 and not is_multi and ch in "[{":
            out.append("\\" + ch)
        elif is_control(ch):
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def unescape(token: str) -> str:
    """Reverse :func:`escape` for one item.

    ``\\uXXXX`` decodes to that code point; a backslash before any other
    character yields the character itself.

    :param token: Escaped item text.
    :returns: The raw value.
    :raises MalformedEscapeError: On a trailing lone backslash or a ``\\u``
        that is not followed by four hex digits.
    """
    if "\\" not in token:
        return token
    out: list[str] = []
    pos = 0
    end = len(token)
    while pos < end:
        ch = token[pos]
        if ch != "\\":
            out.append(ch)
            pos += 1
            continue
        if pos + 1 >= end:
            logger.warning("trailing backslash in %r", token)
            raise MalformedEscapeError(token, pos, "trailing backslash")
        nxt = token[pos + 1]
        if nxt == "u":
            digits = token[pos + 2 : pos + 6]
            if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
                logger.warning("bad unicode escape in %r at %d", token, pos)
                raise MalformedEscapeError(token, pos, "expected four hex digits after \\u")
            out.append(chr(int(digits, 16)))
            pos += 6
        else:
            out.append(nxt)
            pos += 2
    return "".join(out)


def split_items(text: str) -> list[str]:
    """Split the body of a multi-value payload into escaped items.

    *text* starts just after the opening ``[``.  Items are separated by
    unescaped commas.  An unescaped ``]`` that is the last character closes
    the array; if there is none the end of *text* closes it.  Escapes are
    left in place for :func:`unescape`.

    An empty body yields no items, so ``[]`` means zero values while
    ``[,]`` means two empty values.

    :param text: Payload text following the ``[``.
    :returns: Escaped items, in order.
    """
    end = len(text)
    if end and text[-1] == "]" and not _is_escaped(text, end - 1):
        end -= 1
    if end == 0:
        return []

    items: list[str] = []
    start = 0
    pos = 0
    while pos < end:
        ch = text[pos]
        if ch == "\\":
            pos += 2
            continue
        if ch == ",":
            items.append(text[start:pos])
            start = pos + 1
        pos += 1
    items.append(text[start:end])
    return items


def _is_escaped(text: str, index: int) -> bool:
    """Return whether ``text[index]`` is preceded by an odd run of backslashes."""
    run = 0
    i = index - 1
    while i >= 0 and text[i] == "\\":
        run += 1
        i -= 1
    return run % 2 == 1
