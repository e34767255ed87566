"""Command: report predicates, inferred status and contents of a Result."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from microresult.commands._base import ResultCommand

if TYPE_CHECKING:
    from microresult.commands._context import AppContext


@click.command(
    "inspect",
    cls=ResultCommand,
    examples="""\
  microresult inspect response.json
  curl -s https://api.example.com/users/1 | microresult inspect
  microresult --json inspect response.json
  microresult -q inspect response.json""",
)
@click.pass_obj
def inspect_cmd(app: AppContext, source: IO[str]) -> None:
    """Decode a serialized Result (verbose or compact) and describe it.

    Exits with code 1 when the Result carries an error-level entry.
    """
    app.emit(app.read_result(source))
