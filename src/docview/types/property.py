"""The decoded form of one document-view property."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from docview.types.enums import PropertyType, type_from_name, type_name

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class DocViewProperty:
    """A named, typed property with one or more string values.

    *values* is copied into a tuple on construction, so the property never
    shares a mutable sequence with the caller.  A single-valued property
    always holds exactly one value.
    """

    name: str
    """Property name. Never escaped by the codec."""

    values: tuple[str, ...]
    """Values in source order; duplicates allowed."""

    is_multi: bool
    """Whether the property is a list, even with zero or one element."""

    type: PropertyType = PropertyType.UNDEFINED
    """Property type; ``UNDEFINED`` means no ``{...}`` prefix."""

    is_reference_property: bool = False
    """Binary only: values are external reference ids, not placeholders."""

    def __post_init__(self) -> None:
        values = self.values
        if isinstance(values, str):
            msg = "values must be a sequence of strings, not a single string"
            raise TypeError(msg)
        object.__setattr__(self, "values", tuple(values))
        object.__setattr__(self, "type", PropertyType(self.type))
        if not self.is_multi and len(self.values) != 1:
            msg = f"Single-valued property {self.name!r} needs 1 value, got {len(self.values)}"
            raise ValueError(msg)

    @property
    def value(self) -> str | None:
        """First value, or ``None`` for an empty multi-value property."""
        return self.values[0] if self.values else None

    @classmethod
    def parse(cls, name: str, payload: str) -> DocViewProperty:
        """Decode *payload*. See :func:`~docview.encoding.property.decode_property`."""
        from docview.encoding.property import decode_property

        return decode_property(name, payload)

    @classmethod
    def from_values(
        cls,
        name: str,
        values: Iterable[object],
        prop_type: PropertyType = PropertyType.UNDEFINED,
        is_multi: bool = False,
        *,
        sort: bool = False,
        use_binary_references: bool = False,
    ) -> DocViewProperty:
        """Build a property from raw values.

        See :func:`~docview.encoding.property.property_from_values`.
        """
        from docview.encoding.property import property_from_values

        return property_from_values(
            name,
            values,
            prop_type,
            is_multi,
            sort=sort,
            use_binary_references=use_binary_references,
        )

    def format(self) -> str:
        """Encode this property's payload string."""
        from docview.encoding.property import format_property

        return format_property(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-friendly dict."""
        return {
            "name": self.name,
            "values": list(self.values),
            "multiple": self.is_multi,
            "type": type_name(self.type),
            "reference": self.is_reference_property,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocViewProperty:
        """Reconstruct from a JSON-friendly dict."""
        raw_type = data.get("type", PropertyType.UNDEFINED)
        prop_type = type_from_name(raw_type) if isinstance(raw_type, str) else raw_type
        return cls(
            name=data["name"],
            values=data["values"],
            is_multi=data["multiple"],
            type=prop_type,
            is_reference_property=data.get("reference", False),
        )
