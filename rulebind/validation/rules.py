"""Compositional Rules

A rule is a pure function from a value to a ``ValidationResult``. Rules
combine via AND/OR/NOT combinators, all of which are immutable.

- AND short-circuits: the right rule only runs when the left one passed
- OR short-circuits: the right rule only runs when the left one failed
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from rulebind.errors import require_not_none

from .results import ValidationResult

T = TypeVar("T")


class Rule(ABC, Generic[T]):
    """Base class for rules.

    Rules are immutable and composable via methods or operators:
    - ``and_`` / ``&``: both must pass
    - ``or_`` / ``|``: at least one must pass
    - ``~``: negates the rule
    """

    __slots__ = ()

    @abstractmethod
    def test(self, value: T) -> ValidationResult:
        """Test a value. Returns ValidationResult."""

    def __call__(self, value: T) -> ValidationResult: return self.test(value)

    def and_(self, other: Rule[T]) -> And[T]:
        return And(self, require_not_none(other, "Rule to combine with must not be null"))

    def or_(self, other: Rule[T]) -> Or[T]:
        return Or(self, require_not_none(other, "Rule to combine with must not be null"))

    def __and__(self, other: Rule[T]) -> And[T]: return self.and_(other)

    def __or__(self, other: Rule[T]) -> Or[T]: return self.or_(other)

    def __invert__(self) -> Not[T]: return Not(self)

    def with_message(self, message: str) -> WithMessage[T]:
        return WithMessage(self, require_not_none(message, "Message must not be null"))


@dataclass(frozen=True, slots=True)
class SimpleRule(Rule[T]):
    """Rule backed by a boolean predicate and a fixed failure message."""
    predicate: Callable[[T], bool]
    message: str

    @classmethod
    def from_predicate(cls, predicate: Callable[[T], bool], message: str) -> SimpleRule[T]:
        return cls(require_not_none(predicate, "Predicate must not be null"),
            require_not_none(message, "Error message must not be null"))

    def test(self, value: T) -> ValidationResult:
        return ValidationResult.ok() if self.predicate(value) else ValidationResult.fail(self.message)


# ============================================================================
# Combinators
# ============================================================================

@dataclass(frozen=True, slots=True)
class And(Rule[T]):
    """AND combinator: returns the first failure, skipping the right rule if the left fails."""
    left: Rule[T]
    right: Rule[T]

    def test(self, value: T) -> ValidationResult:
        if not (left_result := self.left.test(value)).is_valid: return left_result
        return self.right.test(value)


@dataclass(frozen=True, slots=True)
class Or(Rule[T]):
    """OR combinator: the right rule only runs when the left one fails."""
    left: Rule[T]
    right: Rule[T]

    def test(self, value: T) -> ValidationResult:
        if (left_result := self.left.test(value)).is_valid: return left_result
        return self.right.test(value)


@dataclass(frozen=True, slots=True)
class Not(Rule[T]):
    """NOT combinator: negates a rule."""
    rule: Rule[T]
    message: str = "must not satisfy the negated rule"

    def test(self, value: T) -> ValidationResult:
        if self.rule.test(value).is_valid: return ValidationResult.fail(self.message)
        return ValidationResult.ok()


@dataclass(frozen=True, slots=True)
class WithMessage(Rule[T]):
    """Wrapper to override the failure message."""
    rule: Rule[T]
    message: str

    def test(self, value: T) -> ValidationResult:
        if (result := self.rule.test(value)).is_valid: return result
        return ValidationResult.fail(self.message, result.field_name)


# ============================================================================
# Custom Rule
# ============================================================================

@dataclass(frozen=True, slots=True)
class CustomRule(Rule[T]):
    """Rule from a function returning ValidationResult.

    Usage:
        def is_even(n: int) -> ValidationResult:
            if n % 2 != 0:
                return ValidationResult.fail("must be even")
            return ValidationResult.ok()

        even = CustomRule(is_even, name="even")
    """
    fn: Callable[[T], ValidationResult]
    name: str = "custom"

    def test(self, value: T) -> ValidationResult:
        return self.fn(value)


def rule(name: str) -> Callable[[Callable[[Any], ValidationResult]], CustomRule]:
    """Decorator to create a rule from a function.

    Usage:
        @rule("even")
        def is_even(n: int) -> ValidationResult:
            ...
    """
    return lambda fn: CustomRule(require_not_none(fn, "Rule function must not be null"), name=name)


_IS_NONE: SimpleRule[Any] = SimpleRule(lambda value: value is None, "must be null")


def is_none() -> SimpleRule[Any]:
    """Passes only for None. ``is_none() | rule`` makes ``rule`` optional."""
    return _IS_NONE
