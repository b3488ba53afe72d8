"""Validator facades.

- ``DomainValidator``: validates fields of an existing object
- ``ConstructorValidator``: validates parameters before an object exists
- ``ValueValidator``: validates one standalone value

Both facades hold an ordered list of bindings and a strategy. The strategy
defaults to ``Settings.DEFAULT_MODE`` (collect-all) and may be switched any
number of times. A switch only affects later ``validate`` calls.

Usage:
    validator = (
        DomainValidator.of(Person)
        .field("Name", "name").must_satisfy(not_empty())
        .and_()
        .field("Age", "age").must_satisfy(greater_than(0))
    )
    validator.fail_fast().validate_and_throw(person)
"""
from __future__ import annotations

import inspect
from functools import partial
from typing import Any, Generic, TypeVar

from rulebind.config import get_settings
from rulebind.errors import InvalidArgumentError, require_not_none

from .bindings import Extractor, FieldBinding, NestedBinding, ParameterBinding
from .collection import ValidationResultCollection
from .results import ValidationResult
from .rules import Rule, is_none
from .strategies import ValidationMode, ValidationStrategy, create_strategy

T = TypeVar("T")
F = TypeVar("F")


def _require_class(target_class: Any) -> type:
    require_not_none(target_class, "Class must not be null")
    if not inspect.isclass(target_class):
        raise InvalidArgumentError(f"Expected a class, got {type(target_class).__name__}")
    return target_class


class _StrategyHolder:
    """Strategy selection shared by both facades."""

    def __init__(self, mode: ValidationMode | None, max_failures: int | None):
        settings = get_settings()
        self._max_failures = max_failures if max_failures is not None else settings.MAX_FAILURES
        self._strategy: ValidationStrategy = create_strategy(mode or settings.DEFAULT_MODE, self._max_failures)

    @property
    def mode(self) -> ValidationMode:
        return self._strategy.mode

    def fail_fast(self):
        self._strategy = create_strategy(ValidationMode.FAIL_FAST)
        return self

    def collect_failures(self):
        self._strategy = create_strategy(ValidationMode.COLLECT_ALL, self._max_failures)
        return self

    def and_(self):
        """No-op for readability: ``.must_satisfy(...).and_().field(...)``."""
        return self


class DomainValidator(_StrategyHolder, Generic[T]):
    """Fluent validator for the fields of an object of type T."""

    def __init__(self, target_class: type[T], *, mode: ValidationMode | None = None, max_failures: int | None = None):
        self.target_class = _require_class(target_class)
        self._bindings: list[FieldBinding[T, Any] | NestedBinding[T, Any]] = []
        super().__init__(mode, max_failures)

    @classmethod
    def of(cls, target_class: type[T], *, mode: ValidationMode | None = None,
           max_failures: int | None = None) -> DomainValidator[T]:
        return cls(target_class, mode=mode, max_failures=max_failures)

    @property
    def bindings(self) -> list[FieldBinding[T, Any] | NestedBinding[T, Any]]:
        return self._bindings.copy()

    def field(self, name: str, extractor: Extractor | str | None = None) -> FieldBinding[T, Any]:
        """Declare a field. Without *extractor* the attribute called *name* is read."""
        require_not_none(name, "FieldName must not be null")
        binding: FieldBinding[T, Any] = FieldBinding(name, extractor if extractor is not None else name, self)
        self._bindings.append(binding)
        return binding

    def nested(self, name: str, extractor: Extractor | str | None = None) -> NestedBinding[T, Any]:
        """Declare a field that is validated by its own DomainValidator."""
        require_not_none(name, "FieldName must not be null")
        binding: NestedBinding[T, Any] = NestedBinding(name, extractor if extractor is not None else name, self)
        self._bindings.append(binding)
        return binding

    def validate(self, target: T) -> ValidationResultCollection:
        require_not_none(target, "Object to validate must not be null")
        return self._strategy.validate([partial(b.validate, target) for b in self._bindings], self.target_class)

    def validate_and_throw(self, target: T) -> None:
        self.validate(target).throw_if_invalid()

    def is_valid(self, target: T) -> bool:
        return not self.validate(target).has_failures()

    def __repr__(self) -> str:
        return f"DomainValidator({self.target_class.__name__}, bindings={len(self._bindings)}, mode={self.mode.value})"


class ConstructorValidator(_StrategyHolder, Generic[T]):
    """Fluent validator for constructor arguments of type T, captured up front."""

    def __init__(self, target_class: type[T], *, mode: ValidationMode | None = None, max_failures: int | None = None):
        self.target_class = _require_class(target_class)
        self._bindings: list[ParameterBinding[T, Any]] = []
        super().__init__(mode, max_failures)

    @classmethod
    def of(cls, target_class: type[T], *, mode: ValidationMode | None = None,
           max_failures: int | None = None) -> ConstructorValidator[T]:
        return cls(target_class, mode=mode, max_failures=max_failures)

    @property
    def bindings(self) -> list[ParameterBinding[T, Any]]:
        return self._bindings.copy()

    def parameter(self, name: str, value: F) -> ParameterBinding[T, F]:
        binding: ParameterBinding[T, F] = ParameterBinding(name, value, self)
        self._bindings.append(binding)
        return binding

    def validate(self) -> ValidationResultCollection:
        return self._strategy.validate([b.validate for b in self._bindings], self.target_class)

    def validate_and_throw(self) -> None:
        self.validate().throw_if_invalid()

    def __repr__(self) -> str:
        return f"ConstructorValidator({self.target_class.__name__}, bindings={len(self._bindings)}, mode={self.mode.value})"


class ValueValidator(Generic[T]):
    """Validates a single value against one rule, naming it in failures."""

    def __init__(self, value_name: str, rule: Rule[T], is_optional: bool = False):
        self.value_name = require_not_none(value_name, "Value Name must not be null")
        self.rule = require_not_none(rule, "Validation must not be null")
        self.is_optional = is_optional

    @classmethod
    def required(cls, rule: Rule[T], value_name: str = "Value") -> ValueValidator[T]:
        return cls(value_name, rule)

    @classmethod
    def optional(cls, rule: Rule[T], value_name: str = "Value") -> ValueValidator[T]:
        """Like ``required`` but None always passes."""
        return cls(value_name, is_none().or_(require_not_none(rule, "Validation must not be null")), is_optional=True)

    def validate(self, value: T) -> ValidationResult:
        if (result := self.rule.test(value)).is_invalid: return result.with_field_name(self.value_name)
        return result

    def validate_and_throw(self, value: T) -> None:
        self.validate(value).throw_if_invalid()
