"""Rule bindings.

A binding ties a name (field or parameter) to a rule. It is created by a
validator's ``field``/``parameter``/``nested`` call and handed back to the
caller, who attaches the rule with ``must_satisfy`` or ``if_present``. Both
return the owning validator so declarations chain::

    DomainValidator.of(Person)
        .field("Name", lambda p: p.name).must_satisfy(not_empty())
        .field("Email", "email").if_present(contains("@"))

Attaching a rule twice overwrites the first one.
"""
from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from rulebind.errors import ArgumentNullError, InvalidArgumentError, UnboundBindingError, require_not_none
from rulebind.logging import binding_logger

from .results import ValidationResult
from .rules import Rule, is_none

if TYPE_CHECKING:
    from .builders import ValidatedBuilder
    from .validators import ConstructorValidator, DomainValidator

T = TypeVar("T")
F = TypeVar("F")
O = TypeVar("O")
R = TypeVar("R")

Extractor = Callable[[Any], Any]

log = binding_logger()


def resolve_extractor(extractor: Extractor | str) -> Extractor:
    """Turn a dotted attribute path into a getter; pass callables through."""
    if isinstance(extractor, str): return operator.attrgetter(extractor)
    if not callable(extractor):
        raise InvalidArgumentError(f"Extractor must be callable or an attribute path, got {type(extractor).__name__}")
    return extractor


class RuleBinding(ABC, Generic[O, R]):
    """Handle returned while declaring a binding. Attaching a rule returns the owner O."""

    @abstractmethod
    def must_satisfy(self, rule: R) -> O:
        """The value must satisfy *rule*."""

    @abstractmethod
    def if_present(self, rule: R) -> O:
        """The value must satisfy *rule* unless it is None."""


def _unbound(kind: str, name: str) -> UnboundBindingError:
    log.error("binding_unbound", kind=kind, name=name)
    return UnboundBindingError(f"No rule was bound to {kind} '{name}'; call must_satisfy or if_present first", name=name)


class FieldBinding(RuleBinding["DomainValidator[T]", Rule[F]], Generic[T, F]):
    """Binds a rule to a field read from the target through an extractor."""

    def __init__(self, field_name: str, extractor: Extractor | str, parent: DomainValidator[T]):
        self.field_name = require_not_none(field_name, "FieldName of the value to validate must not be null")
        self.extractor = resolve_extractor(
            require_not_none(extractor, "Extractor Method to get value for validation must not be null"))
        self.parent = require_not_none(parent, "Parent Validator must not be null")
        self.rule: Rule[F] | None = None

    @property
    def bound(self) -> bool:
        return self.rule is not None

    def must_satisfy(self, rule: Rule[F]) -> DomainValidator[T]:
        self.rule = require_not_none(rule, "validation must not be null")
        return self.parent

    def if_present(self, rule: Rule[F]) -> DomainValidator[T]:
        self.rule = is_none().or_(require_not_none(rule, "validation must not be null"))
        return self.parent

    def validate(self, target: T) -> ValidationResult:
        require_not_none(target, "Object to validate must not be null")
        if self.rule is None: raise _unbound("field", self.field_name)

        if (result := self.rule.test(self.extractor(target))).is_invalid:
            return result.with_field_name(self.field_name)
        return result

    def __repr__(self) -> str:
        return f"FieldBinding({self.field_name!r}, bound={self.bound})"


class ParameterBinding(RuleBinding["ConstructorValidator[T]", Rule[F]], Generic[T, F]):
    """Binds a rule to a value captured at declaration time."""

    def __init__(self, parameter_name: str, value: F, parent: ConstructorValidator[T]):
        self.parameter_name = require_not_none(parameter_name, "ParameterName must not be null")
        self.value = value
        self.parent = require_not_none(parent, "Constructor Validator must not be null")
        self.rule: Rule[F] | None = None

    @property
    def bound(self) -> bool:
        return self.rule is not None

    def must_satisfy(self, rule: Rule[F]) -> ConstructorValidator[T]:
        self.rule = require_not_none(rule, "validation must not be null")
        return self.parent

    def if_present(self, rule: Rule[F]) -> ConstructorValidator[T]:
        self.rule = is_none().or_(require_not_none(rule, "validation must not be null"))
        return self.parent

    def validate(self) -> ValidationResult:
        if self.rule is None: raise _unbound("parameter", self.parameter_name)

        if (result := self.rule.test(self.value)).is_invalid:
            return result.with_field_name(self.parameter_name)
        return result

    def __repr__(self) -> str:
        return f"ParameterBinding({self.parameter_name!r}, bound={self.bound})"


class NestedBinding(RuleBinding["DomainValidator[T]", "DomainValidator[F]"], Generic[T, F]):
    """Binds a whole sub-validator to a field holding a nested object.

    A nested failure becomes a single failure on this field whose description
    is the nested collection's formatted summary. A required nested value
    that is None raises ArgumentNullError.
    """

    def __init__(self, field_name: str, extractor: Extractor | str, parent: DomainValidator[T]):
        self.field_name = require_not_none(field_name, "FieldName of the value to validate must not be null")
        self.extractor = resolve_extractor(
            require_not_none(extractor, "Extractor Method to get value for validation must not be null"))
        self.parent = require_not_none(parent, "Parent Validator must not be null")
        self.validator: DomainValidator[F] | None = None
        self.required = True

    @property
    def bound(self) -> bool:
        return self.validator is not None

    def must_satisfy(self, validator: DomainValidator[F]) -> DomainValidator[T]:
        self.validator = require_not_none(validator, "The validator for the nested type must not be null")
        self.required = True
        return self.parent

    def if_present(self, validator: DomainValidator[F]) -> DomainValidator[T]:
        self.validator = require_not_none(validator, "The validator for the nested type must not be null")
        self.required = False
        return self.parent

    def validate(self, target: T) -> ValidationResult:
        require_not_none(target, "Object to validate must not be null")
        if self.validator is None: raise _unbound("nested field", self.field_name)

        if (value := self.extractor(target)) is None:
            if self.required: raise ArgumentNullError("Required field value must not be null", field=self.field_name)
            return ValidationResult.ok()

        if (nested := self.validator.validate(value)).has_failures():
            return ValidationResult.fail(nested.error_message, self.field_name)
        return ValidationResult.ok()

    def __repr__(self) -> str:
        return f"NestedBinding({self.field_name!r}, required={self.required}, bound={self.bound})"


class BuilderBinding(RuleBinding["ValidatedBuilder[T]", Rule[F]], Generic[T, F]):
    """Forwards to a ParameterBinding but hands the builder back for chaining."""

    def __init__(self, delegate: ParameterBinding[T, F], builder: ValidatedBuilder[T]):
        self.delegate = require_not_none(delegate, "Delegate binding must not be null")
        self.builder = require_not_none(builder, "Builder must not be null")

    def must_satisfy(self, rule: Rule[F]) -> ValidatedBuilder[T]:
        self.delegate.must_satisfy(rule)
        return self.builder

    def if_present(self, rule: Rule[F]) -> ValidatedBuilder[T]:
        self.delegate.if_present(rule)
        return self.builder
