"""Rich/JSON output helpers.

The CLI renders Result for humans (Rich output, colors) or machines
(--json). The formatter layer adapts Result to the requested output mode.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic_core import to_jsonable_python

from microresult.http import infer_status
from microresult.serialization import encode

if TYPE_CHECKING:
    from microresult.core.result import Result


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags forwarded from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    compact: bool = False


def summarize(result: Result[Any], *, compact: bool = False) -> dict[str, Any]:
    """Predicates, inferred status and the encoded Result as one dict."""
    return {
        "ok": result.is_ok(),
        "okWithData": result.is_ok_with_data(),
        "error": result.is_error(),
        "warning": result.has_warning(),
        "status": infer_status(result),
        "result": encode(result, compact=compact),
    }


def format_result(result: Result[Any], *, settings: OutputSettings | None = None) -> str:
    """Format a Result for display.

    Args:
        result: The Result to format.
        settings: Output mode; defaults to human-readable text.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return _json.dumps(
            summarize(result, compact=settings.compact),
            indent=2,
            ensure_ascii=False,
            default=to_jsonable_python,
        )

    from microresult.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
