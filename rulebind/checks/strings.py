"""Rules for strings.

``not_empty`` and ``not_blank`` treat None as a failure. Every other rule
raises ArgumentNullError when tested against None; bind them with
``if_present`` when the value is optional.
"""
from __future__ import annotations

import re

from rulebind.errors import InvalidArgumentError, require_not_none
from rulebind.validation.rules import And, SimpleRule

from .objects import non_nullable

_NULL_STRING = "String must not be null"


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------

_NOT_EMPTY: SimpleRule[str] = SimpleRule(lambda s: s is not None and len(s) > 0, "must not be empty")
_NOT_BLANK: SimpleRule[str] = SimpleRule(lambda s: s is not None and bool(s.strip()), "must not be blank")


def not_empty() -> SimpleRule[str]:
    return _NOT_EMPTY


def not_blank() -> SimpleRule[str]:
    """Fails for None, empty and whitespace-only strings."""
    return _NOT_BLANK


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------

def exactly(size: int) -> SimpleRule[str]:
    return SimpleRule(non_nullable(lambda s: len(s) == size, _NULL_STRING), f"must have exactly {size} chars")


def more_than(minimum: int) -> SimpleRule[str]:
    return SimpleRule(non_nullable(lambda s: len(s) > minimum, _NULL_STRING), f"must have more than {minimum} chars")


def less_than(maximum: int) -> SimpleRule[str]:
    return SimpleRule(non_nullable(lambda s: len(s) < maximum, _NULL_STRING), f"must have less than {maximum} chars")


def between(min_size: int, max_size: int) -> And[str]:
    """Length strictly between the bounds; reports whichever bound is violated."""
    if min_size > max_size:
        raise InvalidArgumentError(f"min_size ({min_size}) cannot be greater than max_size ({max_size})")
    return more_than(min_size).and_(less_than(max_size))


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------

def contains(text: str) -> SimpleRule[str]:
    require_not_none(text, "String which should be contained, must not be null")
    return SimpleRule(non_nullable(lambda s: text in s, _NULL_STRING), f'must contain "{text}"')


def contains_ignore_case(text: str) -> SimpleRule[str]:
    require_not_none(text, "String which should be contained, must not be null")
    folded = text.casefold()
    return SimpleRule(non_nullable(lambda s: folded in s.casefold(), _NULL_STRING),
        f'must contain "{text}" (ignoring case)')


def starts_with(prefix: str) -> SimpleRule[str]:
    require_not_none(prefix, "Prefix must not be null")
    return SimpleRule(non_nullable(lambda s: s.startswith(prefix), _NULL_STRING), f'must start with "{prefix}"')


def ends_with(suffix: str) -> SimpleRule[str]:
    require_not_none(suffix, "Suffix must not be null")
    return SimpleRule(non_nullable(lambda s: s.endswith(suffix), _NULL_STRING), f'must end with "{suffix}"')


# ---------------------------------------------------------------------------
# Pattern
# ---------------------------------------------------------------------------

def matches_regex(pattern: str) -> SimpleRule[str]:
    """The whole string must match *pattern*."""
    compiled = re.compile(require_not_none(pattern, "Regular Expression must not be null"))
    return SimpleRule(non_nullable(lambda s: compiled.fullmatch(s) is not None, _NULL_STRING),
        f"must fully match regex '{pattern}'")


def contains_regex(pattern: str) -> SimpleRule[str]:
    """Some substring must match *pattern*."""
    compiled = re.compile(require_not_none(pattern, "Regular Expression must not be null"))
    return SimpleRule(non_nullable(lambda s: compiled.search(s) is not None, _NULL_STRING),
        f"must contain substring matching regex '{pattern}'")
