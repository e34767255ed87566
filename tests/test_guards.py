"""Tests for is_result."""

from typing import Any

from microresult.core.result import Result
from microresult.guards import is_result


class _Lookalike:
    data: Any = None
    errors: list[Any] = []

    def is_ok(self) -> bool:
        return True

    def is_ok_with_data(self) -> bool:
        return False

    def is_error(self) -> bool:
        return False

    def has_warning(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"errors": []}


class TestIsResult:
    def test_result_instance(self) -> None:
        assert is_result(Result(data=1)) is True

    def test_duck_typed_object(self) -> None:
        assert is_result(_Lookalike()) is True

    def test_plain_dict(self) -> None:
        assert is_result({"data": 1, "errors": []}) is False

    def test_none(self) -> None:
        assert is_result(None) is False

    def test_missing_method(self) -> None:
        lookalike = _Lookalike()
        lookalike.has_warning = None  # type: ignore[assignment,method-assign]
        assert is_result(lookalike) is False
