"""Tests for the Extractor against a fake engine."""

from typing import Any

import pytest

from extractor import Accepted, Rejected, ValidationEngine, make_extractor
from extractor.core.models import FlattenedIssues, ValidationOutcome


class Rejection(Exception):
    """Raised by the fake engine's throwing entry point."""


class EvenEngine(ValidationEngine):
    """Accepts even integers and records every call."""

    name = "even"

    def __init__(self) -> None:
        self.calls: list[str] = []

    def try_validate(self, schema: Any, value: Any) -> ValidationOutcome:
        self.calls.append("try_validate")
        if isinstance(value, int) and value % 2 == 0:
            return Accepted(output=value * schema)
        return Rejected(issues=[("value", f"{value!r} is not even")])

    def validate_or_throw(self, schema: Any, value: Any) -> Any:
        self.calls.append("validate_or_throw")
        outcome = self.try_validate(schema, value)
        if isinstance(outcome, Rejected):
            raise Rejection(outcome.issues)
        return outcome.output

    def flatten(self, schema: Any, issues: list[Any]) -> FlattenedIssues:
        self.calls.append("flatten")
        flattened: FlattenedIssues = {}
        for path, message in issues:
            flattened.setdefault(path, []).append(message)
        return flattened


class TestFakeEngine:
    """Test adapter behavior independent of pydantic."""

    @pytest.fixture
    def engine(self) -> EvenEngine:
        return EvenEngine()

    def test_prepare_defaults_to_identity(self, engine: EvenEngine) -> None:
        """Schema should reach the engine unchanged."""
        assert make_extractor(10, engine).from_(4).output == 40

    def test_success_skips_flatten(self, engine: EvenEngine) -> None:
        make_extractor(1, engine).from_(2)

        assert engine.calls == ["try_validate"]

    def test_failure_flattens_once(self, engine: EvenEngine) -> None:
        result = make_extractor(1, engine).from_(3)

        assert result.issues == {"value": ["3 is not even"]}
        assert engine.calls == ["try_validate", "flatten"]

    def test_safe_returns_engine_outcome(self, engine: EvenEngine) -> None:
        outcome = make_extractor(1, engine).safe(3)

        assert outcome == Rejected(issues=[("value", "3 is not even")])

    def test_parse_uses_throwing_entry_point(self, engine: EvenEngine) -> None:
        """parse should not flatten or call back."""
        with pytest.raises(Rejection):
            make_extractor(1, engine).parse(3)

        assert "flatten" not in engine.calls
        assert engine.calls[0] == "validate_or_throw"

    def test_callback_error_propagates_from_from(self, engine: EvenEngine) -> None:
        """A raising callback should abort the call."""
        seen: list[FlattenedIssues] = []

        def callback(issues: FlattenedIssues) -> None:
            seen.append(issues)
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            make_extractor(1, engine).from_(3, callback)

        assert seen == [{"value": ["3 is not even"]}]

    def test_callback_error_propagates_from_safe(self, engine: EvenEngine) -> None:
        def callback(issues: FlattenedIssues) -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            make_extractor(1, engine).safe(5, callback)

    def test_engine_property(self, engine: EvenEngine) -> None:
        assert make_extractor(1, engine).engine is engine


class FalsyEngine(EvenEngine):
    """Engine that is falsy, like an empty container."""

    def __len__(self) -> int:
        return 0


class TestEngineSelection:
    def test_falsy_engine_is_kept(self) -> None:
        """A supplied engine should be used even if it is falsy."""
        engine = FalsyEngine()

        extractor = make_extractor(1, engine)

        assert extractor.engine is engine
        assert extractor.from_(2).output == 2
