"""decode command -- show the structure of a payload string."""

from __future__ import annotations

import sys

import click

from docview.encoding.property import decode_property
from docview.errors import DocViewError
from tools.formatting import print_error, print_json, print_kv


@click.command()
@click.argument("name")
@click.argument("payload")
@click.pass_context
def decode(ctx: click.Context, name: str, payload: str) -> None:
    """Decode PAYLOAD of property NAME and print its type and values."""
    use_json: bool = ctx.obj["use_json"]

    try:
        prop = decode_property(name, payload)
    except DocViewError as e:
        print_error(str(e), use_json)
        sys.exit(1)

    if use_json:
        print_json(prop)
        return

    print_kv(
        [
            ("name", prop.name),
            ("type", prop.type.type_name),
            ("multiple", prop.is_multi),
            ("reference", prop.is_reference_property),
        ]
    )
    for i, value in enumerate(prop.values):
        print(f"  [{i}] {value!r}")
