"""Predefined rules.

Import the submodules for the full set, or the flat names below for the
common ones. Collection rules that share a name with a string rule carry a
``collection_`` prefix here.

Usage:
    from rulebind.checks import not_empty, greater_than, strings

    validator.field("Code", "code").must_satisfy(strings.matches_regex(r"[A-Z]{3}"))
"""
from . import collection, integers, objects, strings

from .objects import is_equal_to, not_null

from .strings import (
    between,
    contains,
    contains_ignore_case,
    contains_regex,
    ends_with,
    exactly,
    less_than,
    matches_regex,
    more_than,
    not_blank,
    not_empty,
    starts_with,
)

from .integers import (
    greater_than,
    in_between,
    in_between_inclusive,
    is_even,
    is_odd,
    lower_than,
    same_amount,
)

from .collection import (
    all_match,
    any_match,
    contains as collection_contains,
    none_match,
    not_empty as collection_not_empty,
    size_between,
)

__all__ = [
    # Submodules
    "collection",
    "integers",
    "objects",
    "strings",
    # Objects
    "not_null",
    "is_equal_to",
    # Strings
    "not_empty",
    "not_blank",
    "exactly",
    "more_than",
    "less_than",
    "between",
    "contains",
    "contains_ignore_case",
    "starts_with",
    "ends_with",
    "matches_regex",
    "contains_regex",
    # Integers
    "same_amount",
    "lower_than",
    "greater_than",
    "in_between",
    "in_between_inclusive",
    "is_even",
    "is_odd",
    # Collections
    "collection_not_empty",
    "size_between",
    "collection_contains",
    "all_match",
    "any_match",
    "none_match",
]
