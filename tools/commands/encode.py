"""encode command -- build a payload string from raw values."""

from __future__ import annotations

import sys

import click

from docview.encoding.property import property_from_values
from tools.formatting import print_error, print_json
from tools.parsers import parse_type


@click.command()
@click.argument("name")
@click.argument("values", nargs=-1)
@click.option("--type", "type_text", default="undefined", show_default=True, help="Property type.")
@click.option("--multi", is_flag=True, default=False, help="Encode as a multi-value property.")
@click.option("--sort", is_flag=True, default=False, help="Sort values before encoding.")
@click.pass_context
def encode(
    ctx: click.Context,
    name: str,
    values: tuple[str, ...],
    type_text: str,
    multi: bool,
    sort: bool,
) -> None:
    """Encode VALUES of property NAME as a payload string.

    Without --multi exactly one VALUE is required.
    """
    use_json: bool = ctx.obj["use_json"]

    try:
        prop_type = parse_type(type_text)
        prop = property_from_values(name, values, prop_type, multi, sort=sort)
    except ValueError as e:
        print_error(str(e), use_json)
        sys.exit(1)

    payload = prop.format()
    if use_json:
        print_json({"name": name, "payload": payload})
    else:
        click.echo(payload)
