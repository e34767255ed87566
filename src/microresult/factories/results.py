"""``ok`` / ``err`` builders."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from microresult.core.result import Result
from microresult.core.types import ErrorDetail, ResultMeta

T = TypeVar("T")

ErrorInput = ErrorDetail | Mapping[str, Any]


def ok(
    data: T | None = None,
    meta: ResultMeta | Mapping[str, Any] | None = None,
    status: int | None = None,
) -> Result[T]:
    """Build a successful Result."""
    return Result(data=data, status=status, meta=meta)


def err(
    error: ErrorInput | Sequence[ErrorInput],
    meta: ResultMeta | Mapping[str, Any] | None = None,
    status: int | None = None,
) -> Result[Any]:
    """Build a failed Result from one error or a sequence of errors."""
    errors = [error] if isinstance(error, ErrorDetail | Mapping) else list(error)
    return Result(data=None, errors=errors, status=status, meta=meta)
