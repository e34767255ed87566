"""Transport status inference for HTTP/RPC adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from microresult.core.result import Result
from microresult.serialization import STATUS_BAD_REQUEST, encode

STATUS_OK = 200
STATUS_NO_CONTENT = 204


def infer_status(result: Result[Any]) -> int:
    """Infer a transport status code from *result*.

    Priority:
      1. Explicit ``result.status``
      2. Success: 200 with data, 204 without
      3. First error whose status is 5xx
      4. First error's status, else 400
    """
    if result.status is not None:
        return result.status

    if result.is_ok():
        return STATUS_OK if result.data is not None else STATUS_NO_CONTENT

    for error in result.errors:
        if error.status and error.status >= 500:
            return error.status

    first = result.errors[0].status
    return first if first is not None else STATUS_BAD_REQUEST


@dataclass(frozen=True)
class HttpResponse:
    """Status code plus JSON-compatible body, ready for a web framework."""

    status: int
    body: dict[str, Any]


def to_http_response(result: Result[Any], *, compact: bool = False) -> HttpResponse:
    """Infer the status and encode the body in one step."""
    return HttpResponse(status=infer_status(result), body=encode(result, compact=compact))
