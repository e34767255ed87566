"""Batch builder for field validation failures."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from microresult.core.result import Result
from microresult.factories.errors import define_error
from microresult.factories.results import err

VALIDATION_ERROR = "VALIDATION_ERROR"

_validation_error = define_error(VALIDATION_ERROR, "Invalid input data", 400)


def validation_errors(items: Iterable[Mapping[str, str]]) -> Result[Any]:
    """One ``VALIDATION_ERROR`` per ``{"path", "message"}`` item, order kept."""
    errors = [
        _validation_error(message=item.get("message"), path=item.get("path")) for item in items
    ]
    return err(errors, status=400)
