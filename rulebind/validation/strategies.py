"""Aggregation strategies.

A strategy runs an ordered list of checks (zero-argument callables that
return a ``ValidationResult``) and gathers the failures into a fresh
``ValidationResultCollection``:

- ``FailFastStrategy`` stops at the first failure
- ``CollectAllStrategy`` runs every check
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from rulebind.errors import InvalidArgumentError, require_not_none
from rulebind.logging import validation_logger

from .collection import ValidationResultCollection
from .results import ValidationResult

Check = Callable[[], ValidationResult]

log = validation_logger()


class ValidationMode(str, Enum):
    """Validation accumulation strategy."""
    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


class ValidationStrategy(ABC):
    """Abstract base for aggregation strategies."""

    @property
    @abstractmethod
    def mode(self) -> ValidationMode:
        """Get the accumulation mode."""

    @abstractmethod
    def _run(self, checks: Sequence[Check], results: ValidationResultCollection) -> int:
        """Run checks into *results*. Returns the number of checks evaluated."""

    def validate(self, checks: Sequence[Check], target_class: type) -> ValidationResultCollection:
        require_not_none(checks, "Validations to validate Object by must not be null")
        require_not_none(target_class, "The class of the Object to validate must not be null")

        results = ValidationResultCollection(target_class)
        evaluated = self._run(checks, results)
        log.debug("validation_completed", target=results.target_name, mode=self.mode.value,
            checks=len(checks), evaluated=evaluated, failures=len(results))
        return results


@dataclass(frozen=True, slots=True)
class FailFastStrategy(ValidationStrategy):
    """Fail-fast: stops on first failure."""

    @property
    def mode(self) -> ValidationMode: return ValidationMode.FAIL_FAST

    def _run(self, checks: Sequence[Check], results: ValidationResultCollection) -> int:
        for evaluated, check in enumerate(checks, start=1):
            if (result := check()).is_invalid:
                results.add(result)
                return evaluated
        return len(checks)


@dataclass(frozen=True, slots=True)
class CollectAllStrategy(ValidationStrategy):
    """Collect-all: runs every check, optionally stopping once max_failures are held."""
    max_failures: int | None = None

    def __post_init__(self) -> None:
        if self.max_failures is not None and self.max_failures < 1:
            raise InvalidArgumentError(f"max_failures must be at least 1, got {self.max_failures}")

    @property
    def mode(self) -> ValidationMode: return ValidationMode.COLLECT_ALL

    def _run(self, checks: Sequence[Check], results: ValidationResultCollection) -> int:
        for evaluated, check in enumerate(checks, start=1):
            results.add(check())
            if self.max_failures is not None and len(results) >= self.max_failures: return evaluated
        return len(checks)


def create_strategy(mode: ValidationMode, max_failures: int | None = None) -> ValidationStrategy:
    """Factory for creating strategies based on mode."""
    return FailFastStrategy() if ValidationMode(mode) == ValidationMode.FAIL_FAST else CollectAllStrategy(max_failures=max_failures)
