"""Exception hierarchy.

Two tiers:

- ``ConfigurationError``: the library is being misused (null class, null
  extractor, unbound binding, ...). Raised immediately, never recovered.
- ``ValidationFailedError``: the data under test is invalid. Only raised when
  the caller asks for it via ``throw_if_invalid`` / ``validate_and_throw``.

``str(exc)`` is always exactly the message so callers can compare it.
"""
from __future__ import annotations

from typing import Any, ClassVar

from .types import AppError, ErrorCode, ErrorContext


class RulebindError(Exception):
    """Base for every error raised by rulebind."""

    code: ClassVar[ErrorCode] = ErrorCode.E9000_INTERNAL_GENERIC

    def __init__(self, message: str, **metadata: Any):
        self.message = message
        self.metadata = metadata
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def to_app_error(self, origin: str = "") -> AppError:
        return AppError(code=self.code, message=self.message, context=ErrorContext(origin=origin),
            metadata=dict(self.metadata), cause=self)


# =============================================================================
# Configuration errors (E8xxx)
# =============================================================================

class ConfigurationError(RulebindError):
    code = ErrorCode.E8000_CONFIGURATION_GENERIC


class ArgumentNullError(ConfigurationError, TypeError):
    """A required argument was ``None``."""
    code = ErrorCode.E8001_ARGUMENT_NULL


class UnboundBindingError(ConfigurationError, RuntimeError):
    """A binding was validated before a rule was attached to it."""
    code = ErrorCode.E8002_UNBOUND_BINDING


class InvalidArgumentError(ConfigurationError, ValueError):
    code = ErrorCode.E8003_INVALID_ARGUMENT


def require_not_none(value: Any, message: str) -> Any:
    """Return *value*, raising ArgumentNullError with *message* if it is None."""
    if value is None:
        raise ArgumentNullError(message)
    return value


# =============================================================================
# Validation failures (E2xxx)
# =============================================================================

class ValidationFailedError(RulebindError):
    code = ErrorCode.E2000_VALIDATION_GENERIC


class AggregatedValidationError(ValidationFailedError):
    """Raised by ``ValidationResultCollection.throw_if_invalid``."""
    code = ErrorCode.E2040_AGGREGATED_VALIDATION


class InvalidAttributeValueError(ValidationFailedError):
    """Raised by ``ValidationResult.throw_if_invalid`` for a single value."""
    code = ErrorCode.E2005_CONSTRAINT_VIOLATION
