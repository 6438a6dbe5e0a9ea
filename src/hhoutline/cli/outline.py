"""hh-outline outline command - print the declaration outline of a Hack file."""

from __future__ import annotations

import io
import json
from pathlib import Path

import click

from hhoutline.config.loader import load_config
from hhoutline.core.errors import OutlineError
from hhoutline.core.logging import configure_logging, get_logger, set_request_id
from hhoutline.outline.ops import outline_json, outline_legacy_json, print_outline_source

log = get_logger(__name__)


@click.command()
@click.argument("path", type=click.Path(allow_dash=True, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["tree", "legacy", "text"]),
    default=None,
    help="Output shape (default: from config, else tree)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file",
)
@click.pass_context
def outline_command(
    ctx: click.Context, path: Path, output_format: str | None, config_path: Path | None
) -> None:
    """Print the outline of a Hack file.

    PATH is the file to outline, or '-' to read from stdin.
    """
    try:
        overrides = {"logging": {"level": "DEBUG"}} if ctx.obj and ctx.obj.get("verbose") else {}
        config = load_config(config_path, **overrides)
    except OutlineError as e:
        raise click.ClickException(str(e)) from e
    configure_logging(config=config.logging)
    set_request_id()

    if str(path) == "-":
        content = click.get_binary_stream("stdin").read()
        filename = ""
    else:
        try:
            content = path.read_bytes()
        except OSError as e:
            raise click.ClickException(f"Cannot read {path}: {e}") from e
        filename = str(path)

    fmt = output_format or config.outline.format
    grammar = config.outline.grammar
    indent = config.outline.indent or None
    log.debug("outline.render", format=fmt, filename=filename, size=len(content))
    try:
        if fmt == "legacy":
            entries = outline_legacy_json(content, filename=filename, grammar=grammar)
            click.echo(json.dumps(entries, indent=indent))
        elif fmt == "tree":
            tree = outline_json(content, filename=filename, grammar=grammar)
            click.echo(json.dumps(tree, indent=indent))
        else:
            buf = io.StringIO()
            print_outline_source(content, buf, filename=filename, grammar=grammar)
            click.echo(buf.getvalue(), nl=False)
    except OutlineError as e:
        raise click.ClickException(str(e)) from e
