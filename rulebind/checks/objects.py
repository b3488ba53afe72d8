"""Rules for arbitrary objects."""
from __future__ import annotations

from typing import Any, Callable, TypeVar

from rulebind.errors import require_not_none
from rulebind.validation.rules import SimpleRule

T = TypeVar("T")


def non_nullable(predicate: Callable[[T], bool], null_message: str) -> Callable[[T], bool]:
    """Wrap *predicate* so that testing None raises ArgumentNullError(null_message)."""
    def check(value: T) -> bool:
        return predicate(require_not_none(value, null_message))
    return check


_NOT_NULL: SimpleRule[Any] = SimpleRule(lambda value: value is not None, "must not be null")


def not_null() -> SimpleRule[Any]:
    return _NOT_NULL


def is_equal_to(other: T) -> SimpleRule[T]:
    require_not_none(other, "Object to equal must not be null")
    return SimpleRule(non_nullable(lambda value: value == other, "Object must not be null"),
        f'must be equal to "{other}"')
