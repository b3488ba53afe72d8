"""Error Handling

Key components:
- ErrorCode: Hierarchical error code taxonomy
- AppError: Immutable error record with tracing context
- Ok/Err/Result: Value-based success/failure container
- Exceptions: ConfigurationError (misuse) and ValidationFailedError (bad data)

Usage:
    from rulebind.errors import AggregatedValidationError, Ok, Err

    match collection.to_result(person):
        case Ok(value):
            save(value)
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    AppError,
    Err,
    ErrorCode,
    ErrorContext,
    Ok,
    Result,
)

from .exceptions import (
    AggregatedValidationError,
    ArgumentNullError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidAttributeValueError,
    RulebindError,
    UnboundBindingError,
    ValidationFailedError,
    require_not_none,
)

__all__ = [
    # Core types
    "AppError",
    "Err",
    "ErrorCode",
    "ErrorContext",
    "Ok",
    "Result",
    # Exceptions
    "RulebindError",
    "ConfigurationError",
    "ArgumentNullError",
    "UnboundBindingError",
    "InvalidArgumentError",
    "ValidationFailedError",
    "AggregatedValidationError",
    "InvalidAttributeValueError",
    "require_not_none",
]
