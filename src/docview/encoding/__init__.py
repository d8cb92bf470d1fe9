"""Payload grammar: escape engine and property encoder/decoder."""

from docview.encoding.escape import EMPTY_SENTINEL, escape, is_invalid_xml_char, unescape
from docview.encoding.property import (
    decode_property,
    encode_property_value,
    format_property,
    property_from_values,
)

__all__ = [
    "EMPTY_SENTINEL",
    "decode_property",
    "encode_property_value",
    "escape",
    "format_property",
    "is_invalid_xml_char",
    "property_from_values",
    "unescape",
]
