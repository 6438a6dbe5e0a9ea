"""hhoutline CLI - hh-outline command."""

import click

from hhoutline.cli.outline import outline_command
from hhoutline.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="hh-outline")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """hh-outline - Declaration outlines for Hack source files."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(outline_command, name="outline")


if __name__ == "__main__":
    cli()
