"""JSON codec for Result, in verbose and compact wire formats.

Wire layout (both formats)::

    {"errors": [...], "data": ..., "status": ..., <meta keys flattened>}

``errors`` is always present; ``data`` and ``status`` only when set.
The compact format renames ErrorDetail keys through :data:`COMPACT_KEYS`
(``meta`` and ``cause`` keep their names) and applies the same renaming
down the ``cause`` chain. Decoding auto-detects the format from the
first error entry alone.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic_core import to_jsonable_python

from microresult.core.result import Result
from microresult.core.types import ErrorDetail

logger = logging.getLogger(__name__)

INVALID_JSON = "INVALID_JSON"
STATUS_BAD_REQUEST = 400

COMPACT_KEYS: dict[str, str] = {
    "code": "c",
    "message": "m",
    "status": "s",
    "path": "p",
    "level": "l",
}
VERBOSE_KEYS: dict[str, str] = {short: name for name, short in COMPACT_KEYS.items()}

# Top-level keys owned by the Result itself; anything else is meta.
RESERVED_KEYS: frozenset[str] = frozenset({"data", "errors", "status"})

_ERROR_FIELDS = ("code", "message", "status", "path", "level", "meta", "cause")


# --- Encode ---


def encode_error(detail: ErrorDetail, *, compact: bool = False) -> dict[str, Any]:
    """Encode one ErrorDetail, omitting absent fields."""
    out: dict[str, Any] = {}
    for name in _ERROR_FIELDS:
        value = getattr(detail, name)
        if value is None:
            continue
        if name == "cause":
            value = encode_error(value, compact=compact)
        elif name == "meta":
            value = dict(value)
        out[COMPACT_KEYS.get(name, name) if compact else name] = value
    return out


def encode(result: Result[Any], *, compact: bool = False) -> dict[str, Any]:
    """Encode *result* into a JSON-compatible dict with meta flattened."""
    payload: dict[str, Any] = {
        "errors": [encode_error(e, compact=compact) for e in result.errors],
    }
    if result.data is not None:
        payload["data"] = result.data
    if result.status is not None:
        payload["status"] = result.status
    if result.meta is not None:
        for key, value in result.meta.to_dict().items():
            if key in RESERVED_KEYS:
                logger.warning("Dropping meta key %r: it collides with a Result field", key)
                continue
            payload[key] = value
    return payload


def to_json(result: Result[Any], *, compact: bool = False, indent: int | None = None) -> str:
    """Encode *result* to a JSON string.

    Payloads that are pydantic models, dataclasses, datetimes and the
    like are converted with pydantic's JSON rules.
    """
    return json.dumps(
        encode(result, compact=compact),
        indent=indent,
        ensure_ascii=False,
        default=to_jsonable_python,
    )


# --- Decode ---


def expand_error(entry: Mapping[str, Any]) -> dict[str, Any]:
    """Rename compact keys back to verbose ones, recursing into ``cause``."""
    if not isinstance(entry, Mapping):
        msg = f"Error entry must be an object, got {type(entry).__name__}"
        raise TypeError(msg)
    out: dict[str, Any] = {}
    for key, value in entry.items():
        name = VERBOSE_KEYS.get(key, key)
        if name == "cause" and isinstance(value, Mapping):
            value = expand_error(value)
        out[name] = value
    return out


def is_compact(entries: list[Any]) -> bool:
    """Return True when the first entry carries both ``c`` and ``m``.

    Later entries are not inspected: a mixed-format array is decoded
    according to its first entry.
    """
    if not entries:
        return False
    first = entries[0]
    return isinstance(first, Mapping) and "c" in first and "m" in first


def parse_result(obj: Any) -> Result[Any]:
    """Build a Result from a parsed JSON value, raising on malformed input.

    Raises:
        ValueError: *obj* is not an object with an ``errors`` array, or an
            entry does not validate (``pydantic.ValidationError``).
        TypeError: A compact-format entry is not an object.
        RecursionError: The cause chain nests deeper than the interpreter
            recursion limit.
    """
    if not isinstance(obj, Mapping):
        msg = f"Expected a JSON object, got {type(obj).__name__}"
        raise ValueError(msg)
    entries = obj.get("errors")
    if not isinstance(entries, list):
        msg = "Expected an 'errors' array"
        raise ValueError(msg)

    errors = [expand_error(e) for e in entries] if is_compact(entries) else entries
    meta = {key: value for key, value in obj.items() if key not in RESERVED_KEYS}
    return Result(
        data=obj.get("data"),
        errors=errors,
        status=obj.get("status"),
        meta=meta or None,
    )


def invalid_json(exc: BaseException | None = None) -> Result[Any]:
    """Result reported for any decode failure."""
    message = (str(exc) if exc is not None else "") or "Invalid JSON"
    error = ErrorDetail(
        code=INVALID_JSON,
        message=message,
        status=STATUS_BAD_REQUEST,
        level="error",
    )
    return Result(data=None, errors=[error], status=STATUS_BAD_REQUEST)


def decode(obj: Any) -> Result[Any]:
    """Build a Result from a parsed JSON value. Never raises."""
    try:
        return parse_result(obj)
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug("Rejected malformed result payload: %s", exc)
        return invalid_json(exc)


def from_json(text: str | bytes | bytearray) -> Result[Any]:
    """Parse and decode a serialized Result. Never raises."""
    try:
        parsed = json.loads(text)
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug("Rejected unparsable result payload: %s", exc)
        return invalid_json(exc)
    return decode(parsed)
