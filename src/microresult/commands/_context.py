"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Centralizes input decoding and result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import json
import logging
from typing import IO, TYPE_CHECKING, Any

import click

from microresult.config.logging import bind_result_context, configure_logging
from microresult.output.formatters import OutputSettings, format_result
from microresult.serialization import parse_result

if TYPE_CHECKING:
    from microresult.config.settings import MicroResultSettings
    from microresult.core.result import Result

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: MicroResultSettings) -> None:
        self.settings = settings

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )
        logger.debug("Loaded settings (config: %s)", settings.config_path)

    def read_result(self, source: IO[str]) -> Result[Any]:
        """Parse a serialized Result from *source*.

        Unlike :func:`~microresult.serialization.from_json`, malformed input
        is a usage error here, not an ``INVALID_JSON`` Result.
        """
        name = getattr(source, "name", "<input>")
        try:
            result = parse_result(json.load(source))
        except (ValueError, TypeError, RecursionError) as exc:
            msg = f"Not a serialized Result ({name}): {exc}"
            raise click.ClickException(msg) from exc
        bind_result_context(result)
        logger.debug("Decoded %s (%d error entries)", name, len(result.errors))
        return result

    def output_settings(self, *, compact: bool | None = None) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            compact=self.settings.codec.compact if compact is None else compact,
        )

    def emit(self, result: Result[Any]) -> None:
        """Format and output a Result with correct exit semantics.

        * Not an error (``is_error()`` false): writes to stdout. Warnings
          are noted on stderr so they don't pollute piped output.
        * Error: writes to stderr, exits with code 1.
        """
        settings = self.output_settings()
        output = format_result(result, settings=settings)
        if not result.is_error():
            click.echo(output)
            if not settings.json_output and not settings.quiet:
                for warning in result.errors:
                    if warning.level == "warning":
                        click.echo(f"WARNING: {warning.code}: {warning.message}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
