"""Input parsing utilities for the docview CLI."""

from __future__ import annotations

from docview.types.enums import TYPE_NAMES, PropertyType

# Case-insensitive lookup by canonical name ("long", "weakreference", "uri").
_TYPE_LOOKUP: dict[str, PropertyType] = {}
for _pt, _name in TYPE_NAMES.items():
    _TYPE_LOOKUP[_name.lower()] = _pt


def parse_type(text: str) -> PropertyType:
    """Parse a property type from user input.

    Accepts canonical names in any case (``Long``, ``long``,
    ``WeakReference``) or the numeric type code.

    Raises:
        ValueError: If the text cannot be resolved.
    """
    key = text.strip().lower()
    if key in _TYPE_LOOKUP:
        return _TYPE_LOOKUP[key]
    try:
        return PropertyType(int(key))
    except ValueError:
        pass
    msg = f"Unknown property type: {text!r}"
    raise ValueError(msg)
