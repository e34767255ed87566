"""Rich Console factory and theme for microresult output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RESULT_THEME = Theme(
    {
        "mr.ok": "bold green",
        "mr.error": "bold red",
        "mr.warning": "bold yellow",
        "mr.status": "bold cyan",
        "mr.key": "dim",
        "mr.code": "bold blue",
        "mr.path": "dim",
        "mr.level.info": "cyan",
        "mr.level.warning": "yellow",
        "mr.level.error": "red",
        "mr.level.critical": "bold red",
    }
)

_LEVEL_STYLES: dict[str, str] = {
    "info": "mr.level.info",
    "warning": "mr.level.warning",
    "error": "mr.level.error",
    "critical": "mr.level.critical",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=RESULT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_level(level: str | None) -> str:
    """Return the Rich style name for an error level (missing counts as error)."""
    return _LEVEL_STYLES.get(level or "error", "")
