"""Raw value wrappers accepted by the property encoder."""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ReferenceBinary(Protocol):
    """Binary content held in external storage, addressable by a reference id."""

    def get_reference(self) -> str | None:
        """Return the stable reference id, or ``None`` if it is unavailable."""
        ...


@dataclass(frozen=True, slots=True)
class SimpleReferenceBinary:
    """A :class:`ReferenceBinary` that only carries its reference id."""

    reference: str | None

    def get_reference(self) -> str | None:
        return self.reference


def value_to_string(value: object) -> str:
    """Render a raw scalar in the repository's string form.

    ``bool`` renders as ``true``/``false``; datetimes as ISO 8601 with
    millisecond precision.

    :param value: A ``str``, ``bool``, ``int``, ``float``, ``Decimal``,
        ``datetime.datetime`` or ``datetime.date``.
    :returns: String form of *value*.
    :raises TypeError: For any other type.
    """
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float | Decimal):
        return str(value)
    if isinstance(value, datetime.datetime):
        return value.isoformat(timespec="milliseconds")
    if isinstance(value, datetime.date):
        return value.isoformat()
    msg = f"Cannot render {type(value).__name__} as a property value"
    logger.warning(msg)
    raise TypeError(msg)
