"""Rich renderers for Result.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from microresult.http import infer_status
from microresult.output.console import create_console, get_output, style_for_level

if TYPE_CHECKING:
    from rich.console import Console

    from microresult.core.result import Result
    from microresult.core.types import ErrorDetail


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: Result[Any], *, verbose: bool = False) -> str:
    """Render a Result to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    _status_line(console, result)
    if result.errors:
        _render_errors(console, result.errors, verbose=verbose)
    if result.data is not None:
        _render_data(console, result.data)
    if result.meta is not None:
        _render_meta(console, result.meta.to_dict())
    return get_output(console).rstrip("\n")


def render_quiet(result: Result[Any]) -> str:
    """Render minimal output for ``--quiet`` mode."""
    return f"{outcome_label(result)} {infer_status(result)}"


def outcome_label(result: Result[Any]) -> str:
    """OK, WARNING or ERROR, by the Result's predicates."""
    if result.is_error():
        return "ERROR"
    if result.has_warning():
        return "WARNING"
    return "OK"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: Result[Any]) -> None:
    label = outcome_label(result)
    status = Text(str(infer_status(result)), style="mr.status")
    console.print(Text(label, style=f"mr.{label.lower()}"), status, end="")
    console.print()


def _render_errors(console: Console, errors: list[ErrorDetail], *, verbose: bool) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="mr.code", no_wrap=True)
    table.add_column("Level")
    table.add_column("Status", justify="right")
    table.add_column("Path", style="mr.path")
    table.add_column("Message")

    for error in errors:
        for depth, link in enumerate(error.chain()):
            code = f"{'  ' * depth}↳ {link.code}" if depth else link.code
            level = link.level or "error"
            table.add_row(
                Text(code),
                Text(level, style=style_for_level(link.level)),
                "" if link.status is None else str(link.status),
                Text(link.path or ""),
                Text(link.message),
            )
    console.print(table)

    if verbose:
        for error in errors:
            if error.meta:
                console.print(Text(f"  {error.code} meta:", style="mr.key"))
                for k, v in error.meta.items():
                    console.print(Text(f"    {k}: {v}"))


def _render_data(console: Console, data: Any) -> None:
    console.print(Text("data:", style="mr.key"))
    console.print(Text(_json.dumps(data, indent=2, default=str)))


def _render_meta(console: Console, meta: dict[str, Any]) -> None:
    console.print(Text("meta:", style="mr.key"))
    for key, value in meta.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"), default=str)
        console.print(Text(f"  {key}: {value}"))
