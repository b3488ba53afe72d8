"""Validated builder: validate constructor arguments, then construct."""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from rulebind.logging import builder_logger

from .bindings import BuilderBinding
from .collection import ValidationResultCollection
from .validators import ConstructorValidator

T = TypeVar("T")
F = TypeVar("F")

log = builder_logger()


class ValidatedBuilder(Generic[T]):
    """Collects constructor arguments with rules and builds T only if all pass.

    Usage:
        person = (
            ValidatedBuilder.for_type(Person)
            .parameter("Name", "Alice").must_satisfy(not_empty())
            .parameter("Age", 30, keyword="age").must_satisfy(greater_than(0))
            .build()
        )

    Positional parameters are passed in declaration order; parameters
    declared with ``keyword`` are passed by that keyword.
    """

    def __init__(self, target_class: type[T]):
        self.validator: ConstructorValidator[T] = ConstructorValidator.of(target_class)
        self.target_class = self.validator.target_class
        self._args: list[Any] = []
        self._kwargs: dict[str, Any] = {}

    @classmethod
    def for_type(cls, target_class: type[T]) -> ValidatedBuilder[T]:
        return cls(target_class)

    def parameter(self, name: str, value: F, *, keyword: str | None = None) -> BuilderBinding[T, F]:
        binding = BuilderBinding(self.validator.parameter(name, value), self)
        if keyword is None: self._args.append(value)
        else: self._kwargs[keyword] = value
        return binding

    def and_(self) -> ValidatedBuilder[T]:
        return self

    def fail_fast(self) -> ValidatedBuilder[T]:
        self.validator.fail_fast()
        return self

    def collect_failures(self) -> ValidatedBuilder[T]:
        self.validator.collect_failures()
        return self

    def validate(self) -> ValidationResultCollection:
        return self.validator.validate()

    def validate_and_throw(self) -> None:
        self.validator.validate_and_throw()

    def build(self) -> T:
        """Validate every parameter, raising AggregatedValidationError on failure, then construct."""
        self.validate_and_throw()
        instance = self.target_class(*self._args, **self._kwargs)
        log.debug("object_built", target=self.target_class.__name__,
            positional=len(self._args), keywords=sorted(self._kwargs))
        return instance
