"""Validation outcome: the pass/fail verdict for one value."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rulebind.errors import ArgumentNullError, InvalidArgumentError, InvalidAttributeValueError

UNKNOWN_FIELD = "Unknown"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of testing a single value against a rule.

    ``cause_description`` is None exactly when the result is valid. Bindings
    re-tag failures with their field name through ``with_field_name``, which
    returns a new result rather than mutating this one.
    """
    valid: bool
    field_name: str = UNKNOWN_FIELD
    cause_description: str | None = None

    def __post_init__(self) -> None:
        if self.valid != (self.cause_description is None):
            raise InvalidArgumentError("A result carries a cause description if and only if it is invalid")

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, cause_description: str, field_name: str = UNKNOWN_FIELD) -> ValidationResult:
        if cause_description is None:
            raise ArgumentNullError("Cause description must not be null")
        return cls(valid=False, field_name=field_name, cause_description=cause_description)

    @property
    def is_valid(self) -> bool:
        return self.valid

    @property
    def is_invalid(self) -> bool:
        return not self.valid

    def __bool__(self) -> bool:
        return self.valid

    def with_field_name(self, field_name: str) -> ValidationResult:
        return ValidationResult(valid=self.valid, field_name=field_name, cause_description=self.cause_description)

    @property
    def error_message(self) -> str:
        return f'The field: "{self.field_name}" is invalid: {self.cause_description}'

    def throw_if_invalid(self) -> None:
        if self.is_invalid:
            raise InvalidAttributeValueError(self.error_message, field=self.field_name)

    def to_dict(self) -> dict[str, Any]:
        if self.valid: return {"valid": True}
        return {"valid": False, "field": self.field_name, "message": self.cause_description}
