"""Runtime check for Result-shaped values."""

from __future__ import annotations

from typing import Any

from microresult.core.result import Result

_RESULT_METHODS = ("is_ok", "is_ok_with_data", "is_error", "has_warning", "to_dict")


def is_result(value: Any) -> bool:
    """Return True for a Result or any object exposing the Result interface."""
    if isinstance(value, Result):
        return True
    if not hasattr(value, "data") or not isinstance(getattr(value, "errors", None), list):
        return False
    return all(callable(getattr(value, name, None)) for name in _RESULT_METHODS)
