"""Encode and decode document-view property payloads.

A payload carries one property's type, multiplicity and values::

    hello                   single value, type undefined
    {Long}1234              single value, type Long
    {String}[a,b\\,c]        multi-value, two items
    [\\0]                    multi-value holding one empty string
    []                      multi-value with no values
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docview.encoding.escape import EMPTY_SENTINEL, escape, split_items, unescape
from docview.errors import ReferenceResolutionError, UnknownTypeTagError
from docview.types.enums import PropertyType, type_from_name, type_name
from docview.types.property import DocViewProperty
from docview.types.values import ReferenceBinary, value_to_string

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)


def decode_property(name: str, payload: str) -> DocViewProperty:
    """Decode *payload* into a :class:`DocViewProperty`.

    A missing closing ``]`` is tolerated; the array then runs to the end
    of the payload.  For a Binary payload, any non-empty value marks the
    property as a reference property.

    :param name: Property name, copied as-is.
    :param payload: Encoded payload.
    :returns: The decoded property.
    :raises UnknownTypeTagError: If the ``{...}`` prefix is unknown or
        unterminated.
    :raises MalformedEscapeError: If an item holds a broken escape.
    """
    prop_type = PropertyType.UNDEFINED
    rest = payload
    if rest.startswith("{"):
        close = rest.find("}")
        if close < 0:
            logger.warning("unterminated type prefix in payload for %r", name)
            raise UnknownTypeTagError(rest[1:])
        prop_type = type_from_name(rest[1:close])
        rest = rest[close + 1 :]

    if rest.startswith("["):
        is_multi = True
        values = [_unescape_item(item) for item in split_items(rest[1:])]
    else:
        is_multi = False
        values = [unescape(rest)]

    is_reference = prop_type == PropertyType.BINARY and any(values)
    logger.debug(
        "decoded %r: type=%s multi=%s count=%d", name, prop_type.name, is_multi, len(values)
    )
    return DocViewProperty(name, values, is_multi, prop_type, is_reference)


def _unescape_item(item: str) -> str:
    if item == EMPTY_SENTINEL:
        return ""
    return unescape(item)


def property_from_values(
    name: str,
    values: Iterable[object],
    prop_type: PropertyType | int = PropertyType.UNDEFINED,
    is_multi: bool = False,
    *,
    sort: bool = False,
    use_binary_references: bool = False,
) -> DocViewProperty:
    """Build a :class:`DocViewProperty` from raw values.

    Binary values are never inlined.  With *use_binary_references* a
    :class:`~docview.types.values.ReferenceBinary` contributes its reference
    id; every other binary value becomes an empty placeholder.

    :param name: Property name.
    :param values: Raw values in source order.
    :param prop_type: Property type.
    :param is_multi: Whether the property is multi-valued.
    :param sort: Sort the rendered values for reproducible output.
    :param use_binary_references: Emit reference ids for reference binaries.
    :returns: The assembled property.
    :raises ReferenceResolutionError: If a reference binary yields no id.
    :raises TypeError: If a non-binary value cannot be rendered.
    """
    prop_type = PropertyType(prop_type)
    is_reference = False
    if prop_type == PropertyType.BINARY:
        items = []
        for index, value in enumerate(values):
            if use_binary_references and isinstance(value, ReferenceBinary):
                items.append(_resolve_reference(index, value))
                is_reference = True
            else:
                items.append("")
    else:
        items = [value_to_string(value) for value in values]

    if sort:
        items.sort()
    return DocViewProperty(name, items, is_multi, prop_type, is_reference)


def _resolve_reference(index: int, value: ReferenceBinary) -> str:
    try:
        reference = value.get_reference()
    except Exception as exc:
        logger.warning("binary reference %d failed: %s", index, exc)
        raise ReferenceResolutionError(index, str(exc)) from exc
    if not reference:
        logger.warning("binary reference %d has no id", index)
        raise ReferenceResolutionError(index, "no reference id available")
    return reference


def format_property(prop: DocViewProperty) -> str:
    """Encode *prop* as a payload string.

    :param prop: Property to encode.
    :returns: The payload.
    """
    return _format(prop.values, prop.type, prop.is_multi)


def encode_property_value(
    values: Iterable[object],
    prop_type: PropertyType | int = PropertyType.UNDEFINED,
    is_multi: bool = False,
    *,
    sort: bool = False,
    use_binary_references: bool = False,
) -> str:
    """Encode raw values straight to a payload string.

    Equivalent to :func:`property_from_values` followed by
    :func:`format_property`.

    :param values: Raw values in source order.
    :param prop_type: Property type.
    :param is_multi: Whether the property is multi-valued.
    :param sort: Sort the rendered values first.
    :param use_binary_references: Emit reference ids for reference binaries.
    :returns: The payload.
    :raises ReferenceResolutionError: If a reference binary yields no id.
    """
    prop = property_from_values(
        "",
        values,
        prop_type,
        is_multi,
        sort=sort,
        use_binary_references=use_binary_references,
    )
    return format_property(prop)


def _format(values: Sequence[str], prop_type: PropertyType, is_multi: bool) -> str:
    parts: list[str] = []
    if prop_type != PropertyType.UNDEFINED:
        parts.append("{" + type_name(prop_type) + "}")
    if is_multi:
        if len(values) == 1 and values[0] == "" and prop_type != PropertyType.BOOLEAN:
            body = EMPTY_SENTINEL
        else:
            body = ",".join(escape(value, True) for value in values)
        parts.append("[" + body + "]")
    else:
        parts.append(escape(values[0], False))
    return "".join(parts)
