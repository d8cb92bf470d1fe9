"""Error types raised by the document-view property codec."""

from __future__ import annotations


class DocViewError(Exception):
    """Base exception for property encoding and decoding errors."""


class UnknownTypeTagError(DocViewError, ValueError):
    """A ``{...}`` type prefix names a type that is not in the type table."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Unknown property type: {type_name!r}")


class MalformedEscapeError(DocViewError, ValueError):
    """A token ends in a lone backslash or carries a broken ``\\u`` escape."""

    def __init__(self, token: str, position: int, reason: str) -> None:
        self.token = token
        self.position = position
        super().__init__(f"Malformed escape at position {position} in {token!r}: {reason}")


class ReferenceResolutionError(DocViewError):
    """A reference binary could not supply its reference identifier.

    Raised for a single value; the caller decides whether to abort the
    whole property or fall back to the empty placeholder.
    """

    def __init__(self, index: int, cause: str) -> None:
        self.index = index
        super().__init__(f"Cannot resolve binary reference for value {index}: {cause}")
