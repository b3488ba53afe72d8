"""Rules for sized collections (lists, tuples, sets, dicts, ...).

``not_empty`` treats None as a failure; every other rule raises
ArgumentNullError when tested against None.
"""
from __future__ import annotations

from collections.abc import Collection
from typing import Any, Callable, TypeVar

from rulebind.errors import InvalidArgumentError, require_not_none
from rulebind.validation.rules import SimpleRule

from .objects import non_nullable

T = TypeVar("T")

_NULL_COLLECTION = "Collection must not be null"

_NOT_EMPTY: SimpleRule[Collection[Any]] = SimpleRule(lambda c: c is not None and len(c) > 0, "must not be empty")


def not_empty() -> SimpleRule[Collection[Any]]:
    return _NOT_EMPTY


def size_between(minimum: int, maximum: int) -> SimpleRule[Collection[Any]]:
    """Size strictly between the bounds."""
    if minimum > maximum:
        raise InvalidArgumentError(f"minimum ({minimum}) cannot be greater than maximum ({maximum})")
    return SimpleRule(non_nullable(lambda c: minimum < len(c) < maximum, _NULL_COLLECTION),
        f"size must be greater than {minimum} and less than {maximum}")


def contains(item: T) -> SimpleRule[Collection[T]]:
    require_not_none(item, "Object which should be contained, must not be null")
    return SimpleRule(non_nullable(lambda c: item in c, _NULL_COLLECTION), f'must contain "{item}"')


def all_match(predicate: Callable[[T], bool]) -> SimpleRule[Collection[T]]:
    require_not_none(predicate, "Predicate all elements should match, must not be null")
    return SimpleRule(non_nullable(lambda c: all(predicate(e) for e in c), _NULL_COLLECTION),
        "all elements must match the predicate")


def any_match(predicate: Callable[[T], bool]) -> SimpleRule[Collection[T]]:
    require_not_none(predicate, "Predicate elements should match, must not be null")
    return SimpleRule(non_nullable(lambda c: any(predicate(e) for e in c), _NULL_COLLECTION),
        "at least one element must match the predicate")


def none_match(predicate: Callable[[T], bool]) -> SimpleRule[Collection[T]]:
    require_not_none(predicate, "Predicate no element should match, must not be null")
    return SimpleRule(non_nullable(lambda c: not any(predicate(e) for e in c), _NULL_COLLECTION),
        "no element may match the predicate")
