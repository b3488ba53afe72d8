"""Result collection for one validation run.

Only failed results are kept. The collection formats them into a summary::

    Validation for Person failed with 2 error(s):
     - Field 'Name': must not be empty
     - Field 'Age': must be greater than 0
"""
from __future__ import annotations

from typing import Any, Iterator, TypeVar

from rulebind.errors import (
    AggregatedValidationError,
    AppError,
    Err,
    ErrorCode,
    ErrorContext,
    Ok,
    Result,
    require_not_none,
)
from rulebind.logging import validation_logger

from .results import ValidationResult

T = TypeVar("T")

log = validation_logger()


class ValidationResultCollection:
    """Ordered collection of failed results for one target class."""

    def __init__(self, target_class: type):
        self.target_class = require_not_none(target_class, "The class of the Object to validate must not be null")
        self._results: list[ValidationResult] = []

    @property
    def target_name(self) -> str:
        return getattr(self.target_class, "__name__", str(self.target_class))

    def add(self, result: ValidationResult) -> None:
        """Append *result* if it is a failure. Valid results are discarded."""
        if require_not_none(result, "Result to add must not be null").is_invalid:
            self._results.append(result)

    def has_failures(self) -> bool:
        return bool(self._results)

    @property
    def results(self) -> list[ValidationResult]:
        return self._results.copy()

    @property
    def first_failure(self) -> ValidationResult | None: return self._results[0] if self._results else None

    @property
    def field_errors(self) -> dict[str, list[str]]:
        """Group failure descriptions by field name."""
        grouped: dict[str, list[str]] = {}
        for result in self._results: grouped.setdefault(result.field_name, []).append(result.cause_description)
        return grouped

    @property
    def error_message(self) -> str:
        lines = [f"Validation for {self.target_name} failed with {len(self._results)} error(s):\n"]
        lines.extend(f" - Field '{r.field_name}': {r.cause_description}\n" for r in self._results)
        return "".join(lines)

    def throw_if_invalid(self) -> None:
        if not self.has_failures(): return
        log.info("validation_rejected", target=self.target_name, error_count=len(self._results),
            fields=[r.field_name for r in self._results])
        raise AggregatedValidationError(self.error_message, target=self.target_name, error_count=len(self._results))

    def to_dict(self) -> dict[str, Any]:
        """Serialize for diagnostics and API payloads."""
        return {"target": self.target_name, "valid": not self.has_failures(), "error_count": len(self._results),
            "errors": [r.to_dict() for r in self._results]}

    def to_app_error(self, origin: str = "") -> AppError | None:
        if not self.has_failures(): return None
        return AppError(code=ErrorCode.E2040_AGGREGATED_VALIDATION, message=self.error_message,
            context=ErrorContext(origin=origin),
            metadata={"target": self.target_name, "error_count": len(self._results), "errors": self.field_errors})

    def to_result(self, value: T, origin: str = "") -> Result[T, AppError]:
        """``Ok(value)`` when valid, ``Err(AppError)`` otherwise."""
        if (error := self.to_app_error(origin)) is None: return Ok(value)
        return Err(error)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[ValidationResult]:
        return iter(self._results.copy())

    def __repr__(self) -> str:
        return f"ValidationResultCollection(target={self.target_name}, failures={len(self._results)})"
