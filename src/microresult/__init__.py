"""microresult — a typed Result value for uniform operation outcomes.

A Result bundles an optional payload, structured errors, an optional
transport status and metadata, and serializes to a JSON wire format in
verbose or compact field naming.
"""

from microresult.core.result import Result, create_result
from microresult.core.types import ErrorDetail, ErrorLevel, Pagination, ResultMeta
from microresult.factories import (
    BadRequest,
    Conflict,
    ErrorTemplate,
    Forbidden,
    InternalError,
    NotFound,
    Unauthorized,
    define_error,
    err,
    ok,
    validation_errors,
)
from microresult.guards import is_result
from microresult.http import HttpResponse, infer_status, to_http_response
from microresult.serialization import decode, encode, from_json, to_json

__version__ = "0.1.0"

__all__ = [
    "BadRequest",
    "Conflict",
    "ErrorDetail",
    "ErrorLevel",
    "ErrorTemplate",
    "Forbidden",
    "HttpResponse",
    "InternalError",
    "NotFound",
    "Pagination",
    "Result",
    "ResultMeta",
    "Unauthorized",
    "__version__",
    "create_result",
    "decode",
    "define_error",
    "encode",
    "err",
    "from_json",
    "infer_status",
    "is_result",
    "ok",
    "to_http_response",
    "to_json",
    "validation_errors",
]
