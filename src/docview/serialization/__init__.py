"""JSON interchange for decoded properties.

A pluggable serializer API for writing :class:`~docview.types.property.DocViewProperty`
values (or plain dicts) to an external format and reading them back.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["Serializer", "deserialize", "get_serializer", "serialize"]


@runtime_checkable
class Serializer(Protocol):
    """Interface for format-specific serialization backends."""

    def encode(self, data: dict[str, Any]) -> bytes:
        """Encode a dict to the target format."""
        ...

    def decode(self, raw: bytes) -> dict[str, Any]:
        """Decode bytes in the target format to a dict."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/json')."""
        ...


def get_serializer(format: str = "json", **kwargs: Any) -> Serializer:
    """Get a serializer instance for the given format.

    :param format: Output format. Only ``"json"`` is supported.
    :param kwargs: Format-specific options passed to the serializer constructor.
    :returns: A :class:`Serializer` instance.
    :raises ValueError: If the format is not supported.
    """
    if format == "json":
        from docview.serialization.json import JsonSerializer

        return JsonSerializer(**kwargs)
    msg = f"Unsupported serialization format: {format}"
    raise ValueError(msg)


def serialize(obj: Any, format: str = "json", **kwargs: Any) -> bytes:
    """Serialize a property or dict to the specified format.

    Accepts any object with a ``to_dict()`` method, or a plain dict.
    """
    serializer = get_serializer(format, **kwargs)
    data = obj.to_dict() if hasattr(obj, "to_dict") else obj
    return serializer.encode(data)


def deserialize(raw: bytes, format: str = "json") -> dict[str, Any]:
    """Deserialize bytes to a dict.

    Pass the result to :meth:`DocViewProperty.from_dict
    <docview.types.property.DocViewProperty.from_dict>` to rebuild a property.
    """
    serializer = get_serializer(format)
    return serializer.decode(raw)
