"""Command: re-encode a serialized Result in another wire format."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from microresult.commands._base import ResultCommand
from microresult.serialization import to_json

if TYPE_CHECKING:
    from microresult.commands._context import AppContext


@click.command(
    cls=ResultCommand,
    examples="""\
  microresult convert --compact response.json
  microresult convert --verbose < compact.json
  microresult convert --indent 0 response.json""",
)
@click.option(
    "--compact/--verbose",
    "compact",
    default=None,
    help="Wire format to write. Defaults to --wire or [codec] compact.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="JSON indentation. 0 writes a single line. Defaults to [codec] indent.",
)
@click.pass_obj
def convert(app: AppContext, source: IO[str], compact: bool | None, indent: int | None) -> None:
    """Convert a serialized Result between verbose and compact formats."""
    result = app.read_result(source)
    codec = app.settings.codec
    use_compact = codec.compact if compact is None else compact
    use_indent = codec.indent if indent is None else indent
    click.echo(to_json(result, compact=use_compact, indent=use_indent or None))
