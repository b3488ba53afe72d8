"""Tests for rulebind.errors."""

import pytest

from rulebind.errors import (
    AggregatedValidationError,
    AppError,
    ArgumentNullError,
    ConfigurationError,
    Err,
    ErrorCode,
    ErrorContext,
    InvalidArgumentError,
    InvalidAttributeValueError,
    Ok,
    RulebindError,
    UnboundBindingError,
    ValidationFailedError,
    require_not_none,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        ("exc_type", "builtin"),
        [(ArgumentNullError, TypeError), (UnboundBindingError, RuntimeError), (InvalidArgumentError, ValueError)],
    )
    def test_configuration_errors_match_builtins(self, exc_type, builtin) -> None:
        exc = exc_type("boom")
        assert isinstance(exc, ConfigurationError)
        assert isinstance(exc, builtin)
        assert isinstance(exc, RulebindError)

    def test_validation_failures_are_not_configuration_errors(self) -> None:
        exc = AggregatedValidationError("bad")
        assert isinstance(exc, ValidationFailedError)
        assert not isinstance(exc, ConfigurationError)

    def test_str_is_message(self) -> None:
        assert str(UnboundBindingError("exact text", name="Name")) == "exact text"


class TestToAppError:
    def test_code_and_metadata(self) -> None:
        error = ArgumentNullError("x must not be null", argument="x").to_app_error(origin="setup")
        assert error.code is ErrorCode.E8001_ARGUMENT_NULL
        assert error.code.category == "configuration"
        assert error.metadata == {"argument": "x"}
        assert error.context.origin == "setup"
        assert isinstance(error.cause, ArgumentNullError)

    @pytest.mark.parametrize(
        ("exc_type", "code"),
        [
            (RulebindError, ErrorCode.E9000_INTERNAL_GENERIC),
            (ConfigurationError, ErrorCode.E8000_CONFIGURATION_GENERIC),
            (UnboundBindingError, ErrorCode.E8002_UNBOUND_BINDING),
            (InvalidArgumentError, ErrorCode.E8003_INVALID_ARGUMENT),
            (ValidationFailedError, ErrorCode.E2000_VALIDATION_GENERIC),
            (InvalidAttributeValueError, ErrorCode.E2005_CONSTRAINT_VIOLATION),
            (AggregatedValidationError, ErrorCode.E2040_AGGREGATED_VALIDATION),
        ],
    )
    def test_every_code_has_an_exception(self, exc_type, code) -> None:
        assert exc_type("x").to_app_error().code is code

    def test_codes_are_all_raised_by_some_exception(self) -> None:
        raised = {cls.code for cls in (RulebindError, ConfigurationError, ArgumentNullError, UnboundBindingError,
            InvalidArgumentError, ValidationFailedError, InvalidAttributeValueError, AggregatedValidationError)}
        assert raised == set(ErrorCode)

    def test_validation_category(self) -> None:
        assert AggregatedValidationError("bad").to_app_error().code.category == "validation"
        assert ErrorCode.E9000_INTERNAL_GENERIC.category == "internal"


class TestAppError:
    def test_immutable_updates(self) -> None:
        error = AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message="bad", context=ErrorContext(correlation_id="abc"))
        tagged = error.with_origin("api").with_metadata(field="Name")
        assert error.metadata == {}
        assert tagged.context.origin == "api"
        assert tagged.metadata == {"field": "Name"}
        assert tagged.error_id == "E2000_VALIDATION_GENERIC:abc"

    def test_str_and_dict(self) -> None:
        error = AppError(code=ErrorCode.E2005_CONSTRAINT_VIOLATION, message="missing",
            context=ErrorContext(correlation_id="abc"))
        assert str(error) == "[E2005_CONSTRAINT_VIOLATION] missing (correlation_id=abc)"
        payload = error.to_dict()["error"]
        assert payload["code_num"] == 2005
        assert payload["category"] == "validation"


class TestResultType:
    def test_ok(self) -> None:
        result = Ok(2)
        assert result.is_ok() and not result.is_err()
        assert result.map(lambda v: v * 3).unwrap() == 6
        assert result.match(ok=lambda v: f"ok {v}", err=lambda e: "err") == "ok 2"
        assert list(result) == [2]

    def test_err(self) -> None:
        result = Err(AppError(code=ErrorCode.E9000_INTERNAL_GENERIC, message="boom"))
        assert result.is_err()
        assert result.unwrap_or(5) == 5
        assert result.map(lambda v: v * 3) is result
        assert list(result) == []
        with pytest.raises(ValueError):
            result.unwrap()


class TestRequireNotNone:
    def test_returns_value(self) -> None:
        assert require_not_none(0, "unused") == 0

    def test_raises_with_message(self) -> None:
        with pytest.raises(ArgumentNullError, match="^Thing must not be null$"):
            require_not_none(None, "Thing must not be null")
