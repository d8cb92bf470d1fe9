"""Property type enumeration and the ``{type-name}`` tag table."""

from __future__ import annotations

import logging
from enum import IntEnum
from types import MappingProxyType

from docview.errors import UnknownTypeTagError

logger = logging.getLogger(__name__)


class PropertyType(IntEnum):
    """Repository property types, numbered as the repository numbers them."""

    UNDEFINED = 0
    STRING = 1
    BINARY = 2
    LONG = 3
    DOUBLE = 4
    DATE = 5
    BOOLEAN = 6
    NAME = 7
    PATH = 8
    REFERENCE = 9
    WEAKREFERENCE = 10
    URI = 11
    DECIMAL = 12

    @property
    def type_name(self) -> str:
        """Canonical name as written inside a ``{...}`` prefix."""
        return TYPE_NAMES[self]


TYPE_NAMES: MappingProxyType[PropertyType, str] = MappingProxyType(
    {
        PropertyType.UNDEFINED: "undefined",
        PropertyType.STRING: "String",
        PropertyType.BINARY: "Binary",
        PropertyType.LONG: "Long",
        PropertyType.DOUBLE: "Double",
        PropertyType.DATE: "Date",
        PropertyType.BOOLEAN: "Boolean",
        PropertyType.NAME: "Name",
        PropertyType.PATH: "Path",
        PropertyType.REFERENCE: "Reference",
        PropertyType.WEAKREFERENCE: "WeakReference",
        PropertyType.URI: "URI",
        PropertyType.DECIMAL: "Decimal",
    }
)
"""Canonical type names, keyed by type."""

_TYPES_BY_NAME: MappingProxyType[str, PropertyType] = MappingProxyType(
    {name: prop_type for prop_type, name in TYPE_NAMES.items()}
)


def type_name(prop_type: PropertyType | int) -> str:
    """Return the canonical tag name for *prop_type*.

    :param prop_type: A :class:`PropertyType` member or its integer code.
    :returns: The case-sensitive name used in ``{...}`` prefixes.
    :raises ValueError: If *prop_type* is not a known type code.
    """
    return TYPE_NAMES[PropertyType(prop_type)]


def type_from_name(name: str) -> PropertyType:
    """Resolve a tag name to its :class:`PropertyType`.

    Names are matched case-sensitively, exactly as the encoder writes them.

    :param name: Name found between ``{`` and ``}``.
    :returns: The matching :class:`PropertyType`.
    :raises UnknownTypeTagError: If *name* is not in the table.
    """
    try:
        return _TYPES_BY_NAME[name]
    except KeyError:
        logger.warning("unknown property type tag %r", name)
        raise UnknownTypeTagError(name) from None
