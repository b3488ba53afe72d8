"""Tests for rulebind.validation.collection."""

import pytest

from rulebind.errors import AggregatedValidationError, ArgumentNullError, Err, ErrorCode, Ok
from rulebind.validation import ValidationResult, ValidationResultCollection

from .conftest import Person


@pytest.fixture
def collection() -> ValidationResultCollection:
    return ValidationResultCollection(Person)


class TestAdd:
    def test_valid_results_are_dropped(self, collection: ValidationResultCollection) -> None:
        collection.add(ValidationResult.ok())
        assert len(collection) == 0
        assert not collection.has_failures()

    def test_invalid_result_grows_by_one(self, collection: ValidationResultCollection) -> None:
        collection.add(ValidationResult.fail("bad", "Name"))
        assert len(collection) == 1
        collection.add(ValidationResult.fail("worse", "Age"))
        assert len(collection) == 2
        assert collection.has_failures()

    def test_rejects_null(self, collection: ValidationResultCollection) -> None:
        with pytest.raises(ArgumentNullError):
            collection.add(None)  # type: ignore[arg-type]

    def test_results_is_a_copy(self, collection: ValidationResultCollection) -> None:
        collection.add(ValidationResult.fail("bad"))
        collection.results.clear()
        assert len(collection.results) == 1

    def test_requires_target_class(self) -> None:
        with pytest.raises(ArgumentNullError):
            ValidationResultCollection(None)  # type: ignore[arg-type]


class TestErrorMessage:
    def test_format_keeps_insertion_order(self, collection: ValidationResultCollection) -> None:
        collection.add(ValidationResult.fail("must not be empty", "Name"))
        collection.add(ValidationResult.fail("must be greater than 0", "Age"))
        assert collection.error_message == (
            "Validation for Person failed with 2 error(s):\n"
            " - Field 'Name': must not be empty\n"
            " - Field 'Age': must be greater than 0\n"
        )

    def test_header_only_when_empty(self, collection: ValidationResultCollection) -> None:
        assert collection.error_message == "Validation for Person failed with 0 error(s):\n"


class TestThrowIfInvalid:
    def test_raises_with_message(self, collection: ValidationResultCollection) -> None:
        collection.add(ValidationResult.fail("must be odd", "Count"))
        with pytest.raises(AggregatedValidationError) as exc_info:
            collection.throw_if_invalid()
        assert str(exc_info.value) == collection.error_message
        assert exc_info.value.metadata["error_count"] == 1

    def test_noop_without_failures(self, collection: ValidationResultCollection) -> None:
        collection.throw_if_invalid()


class TestConveniences:
    def test_truthiness_follows_failure_count(self, collection: ValidationResultCollection) -> None:
        assert not collection
        collection.add(ValidationResult.fail("bad"))
        assert collection
        assert len(collection) == 1

    def test_field_errors_groups_by_field(self, collection: ValidationResultCollection) -> None:
        collection.add(ValidationResult.fail("a", "Name"))
        collection.add(ValidationResult.fail("b", "Name"))
        collection.add(ValidationResult.fail("c", "Age"))
        assert collection.field_errors == {"Name": ["a", "b"], "Age": ["c"]}
        assert collection.first_failure.cause_description == "a"

    def test_to_dict(self, collection: ValidationResultCollection) -> None:
        collection.add(ValidationResult.fail("bad", "Name"))
        assert collection.to_dict() == {
            "target": "Person",
            "valid": False,
            "error_count": 1,
            "errors": [{"valid": False, "field": "Name", "message": "bad"}],
        }

    def test_to_result_ok(self, collection: ValidationResultCollection) -> None:
        person = Person(name="Alice", age=30)
        match collection.to_result(person):
            case Ok(value):
                assert value is person
            case Err():
                pytest.fail("expected Ok")

    def test_to_result_err(self, collection: ValidationResultCollection) -> None:
        collection.add(ValidationResult.fail("bad", "Name"))
        result = collection.to_result(Person(name="", age=1), origin="signup")
        assert result.is_err()
        error = result.unwrap_err()
        assert error.code is ErrorCode.E2040_AGGREGATED_VALIDATION
        assert error.context.origin == "signup"
        assert error.metadata["errors"] == {"Name": ["bad"]}
