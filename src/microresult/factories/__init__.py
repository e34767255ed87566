"""Convenience builders over :class:`~microresult.core.result.Result`."""

from microresult.factories.errors import (
    BadRequest,
    Conflict,
    ErrorTemplate,
    Forbidden,
    InternalError,
    NotFound,
    Unauthorized,
    define_error,
)
from microresult.factories.results import err, ok
from microresult.factories.validation import VALIDATION_ERROR, validation_errors

__all__ = [
    "VALIDATION_ERROR",
    "BadRequest",
    "Conflict",
    "ErrorTemplate",
    "Forbidden",
    "InternalError",
    "NotFound",
    "Unauthorized",
    "define_error",
    "err",
    "ok",
    "validation_errors",
]
