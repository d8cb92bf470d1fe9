"""Click CLI group and global options for the docview CLI."""

from __future__ import annotations

import logging
import sys

import click

from tools.commands.decode import decode
from tools.commands.encode import encode


@click.group()
@click.option(
    "--json",
    "use_json",
    is_flag=True,
    default=False,
    help="Output JSON instead of text.",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    use_json: bool,
    verbose: bool,
) -> None:
    """Encode and decode document-view property values."""
    ctx.ensure_object(dict)
    ctx.obj["use_json"] = use_json

    # Configure logging
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


# Register commands
cli.add_command(encode)
cli.add_command(decode)


if __name__ == "__main__":
    cli()
