"""structlog setup for the microresult CLI.

All log output goes to stderr so stdout stays a clean Result stream for
pipes. ``--log-json`` switches to JSON lines; ``-v``/``-q`` move the
``microresult`` threshold to DEBUG/ERROR. Once a Result is decoded, its
``traceId`` is bound so every later line carries it.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from microresult.core.result import Result

PACKAGE_LOGGER = "microresult"


def package_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Threshold for the ``microresult`` logger; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def bind_result_context(result: Result[Any]) -> None:
    """Tag subsequent log lines with the trace id *result* carries, if any."""
    structlog.contextvars.unbind_contextvars("trace_id")
    trace_id = result.meta.trace_id if result.meta is not None else None
    if trace_id is not None:
        structlog.contextvars.bind_contextvars(trace_id=trace_id)


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Args:
        verbose: DEBUG for ``microresult.*``, including callback tracebacks
            from ``Result.map``/``flat_map``.
        quiet: ERROR for ``microresult.*`` (dropped-meta warnings hidden).
        log_json: JSON renderer instead of the console renderer.
        stream: Destination; defaults to the current ``sys.stderr``.
    """
    out = stream or sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    renderers: list[structlog.types.Processor]
    if log_json:
        # JSON cannot carry a live exc_info tuple.
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=out.isatty())]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(package_level(verbose=verbose, quiet=quiet))
