"""Rules for integers. All of them raise ArgumentNullError when tested against None."""
from __future__ import annotations

from rulebind.errors import InvalidArgumentError
from rulebind.validation.rules import And, SimpleRule

from .objects import non_nullable

_NULL_INTEGER = "Integer must not be null"


def same_amount(exact: int) -> SimpleRule[int]:
    return SimpleRule(non_nullable(lambda i: i == exact, _NULL_INTEGER), f"must equal {exact}")


def lower_than(maximum: int) -> SimpleRule[int]:
    return SimpleRule(non_nullable(lambda i: i < maximum, _NULL_INTEGER), f"must be lower than {maximum}")


def greater_than(minimum: int) -> SimpleRule[int]:
    return SimpleRule(non_nullable(lambda i: i > minimum, _NULL_INTEGER), f"must be greater than {minimum}")


def in_between(minimum: int, maximum: int) -> And[int]:
    """Exclusive on both ends."""
    if minimum > maximum:
        raise InvalidArgumentError(f"minimum ({minimum}) cannot be greater than maximum ({maximum})")
    return greater_than(minimum).and_(lower_than(maximum))


def in_between_inclusive(minimum: int, maximum: int) -> SimpleRule[int]:
    if minimum > maximum:
        raise InvalidArgumentError(f"minimum ({minimum}) cannot be greater than maximum ({maximum})")
    return SimpleRule(non_nullable(lambda i: minimum <= i <= maximum, _NULL_INTEGER),
        f"must be between {minimum} and {maximum} inclusive")


_EVEN: SimpleRule[int] = SimpleRule(non_nullable(lambda i: i % 2 == 0, _NULL_INTEGER), "must be even")
_ODD: SimpleRule[int] = SimpleRule(non_nullable(lambda i: i % 2 != 0, _NULL_INTEGER), "must be odd")


def is_even() -> SimpleRule[int]:
    return _EVEN


def is_odd() -> SimpleRule[int]:
    return _ODD
