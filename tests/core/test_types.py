"""Tests for ErrorDetail, Pagination and ResultMeta."""

import pytest
from pydantic import ValidationError

from microresult.core.types import ErrorDetail, Pagination, ResultMeta


class TestErrorDetail:
    def test_required_fields_only(self) -> None:
        error = ErrorDetail(code="E001", message="bad")
        assert error.code == "E001"
        assert error.message == "bad"
        assert error.status is None
        assert error.path is None
        assert error.level is None
        assert error.meta is None
        assert error.cause is None

    def test_missing_code_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ErrorDetail(message="bad")  # type: ignore[call-arg]

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ErrorDetail(code="E", message="m", level="fatal")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        error = ErrorDetail(code="E", message="m")
        with pytest.raises(ValidationError):
            error.code = "OTHER"  # type: ignore[misc]

    def test_falsy_values_kept(self) -> None:
        error = ErrorDetail(code="E", message="", status=0, path="")
        assert error.status == 0
        assert error.path == ""

    def test_cause_from_mapping(self) -> None:
        error = ErrorDetail(code="OUTER", message="outer", cause={"code": "INNER", "message": "x"})
        assert isinstance(error.cause, ErrorDetail)
        assert error.cause.code == "INNER"

    @pytest.mark.parametrize(
        ("level", "failing"),
        [(None, True), ("error", True), ("critical", True), ("warning", False), ("info", False)],
    )
    def test_is_failing(self, level: str | None, failing: bool) -> None:
        assert ErrorDetail(code="E", message="m", level=level).is_failing is failing

    def test_chain_walks_causes(self) -> None:
        root = ErrorDetail(code="ROOT", message="r")
        middle = ErrorDetail(code="MID", message="m", cause=root)
        top = ErrorDetail(code="TOP", message="t", cause=middle)
        assert [e.code for e in top.chain()] == ["TOP", "MID", "ROOT"]


class TestResultMeta:
    def test_wire_names_accepted(self) -> None:
        meta = ResultMeta.model_validate(
            {"traceId": "abc", "pagination": {"page": 2, "pageSize": 10, "total": 42}}
        )
        assert meta.trace_id == "abc"
        assert meta.pagination == Pagination(page=2, page_size=10, total=42)

    def test_python_names_accepted(self) -> None:
        meta = ResultMeta(trace_id="abc")
        assert meta.to_dict() == {"traceId": "abc"}

    def test_extra_keys_kept(self) -> None:
        meta = ResultMeta.model_validate({"requestId": "r1", "region": "eu"})
        assert meta.to_dict() == {"requestId": "r1", "region": "eu"}

    def test_to_dict_omits_unset_keys(self) -> None:
        meta = ResultMeta.model_validate({"timestamp": "2024-01-01T00:00:00Z"})
        assert meta.to_dict() == {"timestamp": "2024-01-01T00:00:00Z"}

    def test_to_dict_uses_wire_names_for_pagination(self) -> None:
        meta = ResultMeta.model_validate({"pagination": {"page": 1, "pageSize": 20, "total": 3}})
        assert meta.to_dict() == {"pagination": {"page": 1, "pageSize": 20, "total": 3}}

    def test_extra_keys_follow_declared_keys(self) -> None:
        meta = ResultMeta.model_validate({"custom": 1, "traceId": "t"})
        assert list(meta.to_dict()) == ["traceId", "custom"]

    def test_bad_pagination_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResultMeta.model_validate({"pagination": {"page": "first"}})
