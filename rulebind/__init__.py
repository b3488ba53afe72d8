"""rulebind: fluent field and parameter validation.

Usage:
    from rulebind import DomainValidator
    from rulebind.checks import not_empty, greater_than

    validator = (
        DomainValidator.of(Person)
        .field("Name", "name").must_satisfy(not_empty())
        .field("Age", "age").must_satisfy(greater_than(0))
    )
    validator.validate_and_throw(person)
"""
from rulebind.validation import (
    ConstructorValidator,
    DomainValidator,
    Rule,
    SimpleRule,
    ValidatedBuilder,
    ValidationMode,
    ValidationResult,
    ValidationResultCollection,
    ValueValidator,
    rule,
)
from rulebind.config import Settings, get_settings
from rulebind.errors import (
    AggregatedValidationError,
    ArgumentNullError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidAttributeValueError,
    RulebindError,
    UnboundBindingError,
    ValidationFailedError,
)
from rulebind.logging import configure_from_settings, configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "ConstructorValidator",
    "DomainValidator",
    "Rule",
    "SimpleRule",
    "ValidatedBuilder",
    "ValidationMode",
    "ValidationResult",
    "ValidationResultCollection",
    "ValueValidator",
    "rule",
    "Settings",
    "get_settings",
    "RulebindError",
    "ConfigurationError",
    "ArgumentNullError",
    "UnboundBindingError",
    "InvalidArgumentError",
    "ValidationFailedError",
    "AggregatedValidationError",
    "InvalidAttributeValueError",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
]
