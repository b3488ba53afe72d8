"""Tests for rulebind.validation.strategies."""

import pytest

from rulebind.errors import ArgumentNullError, InvalidArgumentError
from rulebind.validation import (
    CollectAllStrategy,
    FailFastStrategy,
    ValidationMode,
    ValidationResult,
    create_strategy,
)

from .conftest import Person


class Recorder:
    """Builds checks that record the order in which they ran."""

    def __init__(self) -> None:
        self.ran: list[str] = []

    def check(self, name: str, valid: bool):
        def run() -> ValidationResult:
            self.ran.append(name)
            return ValidationResult.ok() if valid else ValidationResult.fail(f"{name} failed", name)
        return run


class TestFailFast:
    def test_stops_at_first_failure(self) -> None:
        rec = Recorder()
        checks = [rec.check("a", True), rec.check("b", False), rec.check("c", False)]
        results = FailFastStrategy().validate(checks, Person)
        assert rec.ran == ["a", "b"]
        assert [r.field_name for r in results] == ["b"]

    def test_all_pass(self) -> None:
        rec = Recorder()
        results = FailFastStrategy().validate([rec.check("a", True), rec.check("b", True)], Person)
        assert rec.ran == ["a", "b"]
        assert not results.has_failures()

    def test_empty_checks(self) -> None:
        results = FailFastStrategy().validate([], Person)
        assert len(results) == 0
        assert results.target_class is Person

    def test_mode(self) -> None:
        assert FailFastStrategy().mode is ValidationMode.FAIL_FAST


class TestCollectAll:
    def test_runs_every_check_in_order(self) -> None:
        rec = Recorder()
        checks = [rec.check("a", False), rec.check("b", True), rec.check("c", False)]
        results = CollectAllStrategy().validate(checks, Person)
        assert rec.ran == ["a", "b", "c"]
        assert [r.field_name for r in results] == ["a", "c"]

    def test_max_failures_caps_evaluation(self) -> None:
        rec = Recorder()
        checks = [rec.check("a", False), rec.check("b", False), rec.check("c", False)]
        results = CollectAllStrategy(max_failures=2).validate(checks, Person)
        assert rec.ran == ["a", "b"]
        assert len(results) == 2

    def test_max_failures_must_be_positive(self) -> None:
        with pytest.raises(InvalidArgumentError):
            CollectAllStrategy(max_failures=0)

    def test_fresh_collection_per_run(self) -> None:
        strategy = CollectAllStrategy()
        check = Recorder().check("a", False)
        first = strategy.validate([check], Person)
        second = strategy.validate([check], Person)
        assert first is not second
        assert len(first) == len(second) == 1


class TestNullArguments:
    @pytest.mark.parametrize("strategy", [FailFastStrategy(), CollectAllStrategy()])
    def test_null_checks(self, strategy) -> None:
        with pytest.raises(ArgumentNullError, match="Validations to validate Object by must not be null"):
            strategy.validate(None, Person)

    @pytest.mark.parametrize("strategy", [FailFastStrategy(), CollectAllStrategy()])
    def test_null_class(self, strategy) -> None:
        with pytest.raises(ArgumentNullError, match="The class of the Object to validate must not be null"):
            strategy.validate([], None)


class TestCreateStrategy:
    def test_by_enum(self) -> None:
        assert isinstance(create_strategy(ValidationMode.FAIL_FAST), FailFastStrategy)
        assert isinstance(create_strategy(ValidationMode.COLLECT_ALL), CollectAllStrategy)

    def test_by_value(self) -> None:
        assert isinstance(create_strategy("fail_fast"), FailFastStrategy)

    def test_passes_max_failures(self) -> None:
        strategy = create_strategy(ValidationMode.COLLECT_ALL, max_failures=3)
        assert strategy.max_failures == 3

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError):
            create_strategy("sometimes")
