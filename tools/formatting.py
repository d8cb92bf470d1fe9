"""Output formatting for the docview CLI.

Supports human-readable and JSON output modes.
"""

from __future__ import annotations

import sys
from typing import Any

from docview.serialization import serialize


def print_json(data: Any) -> None:
    """Print data as formatted JSON."""
    print(serialize(data, pretty=True).decode("utf-8"))


def print_error(message: str, use_json: bool = False) -> None:
    """Print an error message, respecting output mode."""
    if use_json:
        print(serialize({"error": message}).decode("utf-8"))
    else:
        print(f"Error: {message}", file=sys.stderr)


def print_kv(pairs: list[tuple[str, Any]]) -> None:
    """Print key-value pairs aligned on the colon."""
    if not pairs:
        return
    max_key = max(len(k) for k, _ in pairs)
    for key, value in pairs:
        print(f"  {key.ljust(max_key)}  {value}")
