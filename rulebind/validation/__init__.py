"""Fluent Validation Core

Rules are bound to named fields or parameters and run by an aggregation
strategy that either stops at the first failure or collects every failure.

Key Features:
- Compositional rules (AND/OR/NOT combinators) with short-circuit evaluation
- Field, parameter and nested-object bindings with required/optional modes
- Fail-fast or collect-all aggregation, switchable per validator
- Result collections with a formatted summary and opt-in raising

Usage:
    from rulebind.validation import DomainValidator
    from rulebind.checks import not_empty, greater_than

    validator = (
        DomainValidator.of(Person)
        .field("Name", "name").must_satisfy(not_empty())
        .field("Age", "age").must_satisfy(greater_than(0))
    )
    results = validator.validate(person)
    if results.has_failures():
        print(results.error_message)
"""
from .results import UNKNOWN_FIELD, ValidationResult

from .rules import (
    And,
    CustomRule,
    Not,
    Or,
    Rule,
    SimpleRule,
    WithMessage,
    is_none,
    rule,
)

from .collection import ValidationResultCollection

from .strategies import (
    Check,
    CollectAllStrategy,
    FailFastStrategy,
    ValidationMode,
    ValidationStrategy,
    create_strategy,
)

from .bindings import (
    BuilderBinding,
    FieldBinding,
    NestedBinding,
    ParameterBinding,
    RuleBinding,
)

from .validators import ConstructorValidator, DomainValidator, ValueValidator

from .builders import ValidatedBuilder

__all__ = [
    # Outcome
    "UNKNOWN_FIELD",
    "ValidationResult",
    # Rules
    "Rule",
    "SimpleRule",
    "CustomRule",
    "And",
    "Or",
    "Not",
    "WithMessage",
    "is_none",
    "rule",
    # Aggregation
    "ValidationResultCollection",
    "Check",
    "ValidationMode",
    "ValidationStrategy",
    "FailFastStrategy",
    "CollectAllStrategy",
    "create_strategy",
    # Bindings
    "RuleBinding",
    "FieldBinding",
    "ParameterBinding",
    "NestedBinding",
    "BuilderBinding",
    # Facades
    "DomainValidator",
    "ConstructorValidator",
    "ValueValidator",
    "ValidatedBuilder",
]
