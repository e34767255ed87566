"""Tests for ErrorTemplate and define_error."""

import pytest

from microresult.core.types import ErrorDetail
from microresult.factories import NotFound, define_error
from microresult.factories.errors import InternalError


class TestDefineError:
    def test_no_placeholders_no_args(self) -> None:
        generic = define_error("GENERIC", "Something went wrong")
        error = generic()
        assert error == ErrorDetail(code="GENERIC", message="Something went wrong")

    def test_bound_status_and_level(self) -> None:
        error = define_error("LIMIT", "Rate limited", 429, "warning")()
        assert error.status == 429
        assert error.level == "warning"

    def test_interpolates_params_mapping(self) -> None:
        build = define_error("X", "User {id} missing")
        assert build({"id": 42}).message == "User 42 missing"

    def test_interpolates_keywords(self) -> None:
        build = define_error("VALIDATION", "Field {field} must be {type}", 400)
        error = build(field="email", type="string")
        assert error.message == "Field email must be string"
        assert error.status == 400

    def test_keywords_win_over_mapping(self) -> None:
        build = define_error("X", "Hello {name}")
        assert build({"name": "a"}, name="b").message == "Hello b"

    def test_repeated_placeholder(self) -> None:
        build = define_error("X", "{a} and {a}")
        assert build(a=1).message == "1 and 1"

    def test_missing_value_left_untouched(self) -> None:
        build = define_error("X", "User {id} in {org}")
        assert build(id=7).message == "User 7 in {org}"

    def test_none_value_left_untouched(self) -> None:
        build = define_error("X", "User {id} in {org}")
        assert build(id=None, org=0).message == "User {id} in 0"

    def test_message_override_skips_interpolation(self) -> None:
        build = define_error("X", "User {id} missing")
        assert build(id=1, message="Custom {id}").message == "Custom {id}"

    def test_empty_message_override_falls_back(self) -> None:
        build = define_error("X", "Default")
        assert build(message="").message == "Default"

    def test_reserved_keys_not_interpolated(self) -> None:
        build = define_error("X", "at {path}")
        error = build(path="user.email")
        assert error.message == "at {path}"
        assert error.path == "user.email"

    def test_optional_fields_only_when_provided(self) -> None:
        error = define_error("X", "m")(path="", meta={}, cause=None)
        assert error.path is None
        assert error.meta is None
        assert error.cause is None

    def test_cause_chaining(self) -> None:
        db_error = define_error("DB_ERROR", "Database error", 500)
        user_error = define_error("USER_CREATE_FAILED", "Failed to create user", 500)
        error = user_error(cause=db_error(message="Connection timeout"), meta={"user": "u1"})
        assert error.cause is not None
        assert error.cause.code == "DB_ERROR"
        assert error.cause.message == "Connection timeout"
        assert error.meta == {"user": "u1"}

    def test_placeholders(self) -> None:
        build = define_error("X", "{a} {b} {a}")
        assert build.placeholders == ("a", "b")

    def test_template_is_frozen(self) -> None:
        build = define_error("X", "m")
        with pytest.raises(AttributeError):
            build.code = "Y"  # type: ignore[misc]


class TestBuiltins:
    def test_not_found(self) -> None:
        error = NotFound()
        assert error.code == "NOT_FOUND"
        assert error.status == 404

    def test_not_found_with_message(self) -> None:
        assert NotFound(message="User 1 not found").message == "User 1 not found"

    def test_internal_error_is_critical(self) -> None:
        assert InternalError().level == "critical"
