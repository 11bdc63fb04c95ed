"""
Extractor - Bind a schema to safe, hookable validation calls.

Three ways to validate the same input:
1. from_ - normalized ExtractResult with flattened issues
2. safe - the engine's own outcome, untouched
3. parse - output or the engine's exception

from_ and safe never raise for rejected input. Both fire the optional
on_validation_error callback once, with flattened issues, before
returning. The callback is not guarded: if it raises, the call aborts.
"""

import logging
from typing import Any

from extractor.config import get_settings
from extractor.core.models import (
    ExtractResult,
    FlattenedIssues,
    OnValidationError,
    ValidationOutcome,
)
from extractor.engines import PydanticEngine, ValidationEngine

logger = logging.getLogger(__name__)


class Extractor:
    """Schema-bound validator. Holds no per-call state."""

    def __init__(self, schema: Any, engine: ValidationEngine | None = None):
        self._engine = engine if engine is not None else PydanticEngine()
        self._schema = self._engine.prepare(schema)
        self._log_level = logging.WARNING if get_settings().log_rejections else logging.DEBUG

    @property
    def engine(self) -> ValidationEngine:
        return self._engine

    def from_(
        self,
        value: Any,
        on_validation_error: OnValidationError | None = None,
    ) -> ExtractResult:
        """
        Validate and return a normalized result.

        Args:
            value: Input to validate
            on_validation_error: Called once with flattened issues on rejection

        Returns:
            ExtractResult with output on success, issues on failure
        """
        outcome, issues = self._run(value, on_validation_error)
        if issues is None:
            return ExtractResult.ok(outcome.output)
        return ExtractResult.fail(issues)

    def safe(
        self,
        value: Any,
        on_validation_error: OnValidationError | None = None,
    ) -> ValidationOutcome:
        """Validate and return the engine's outcome unchanged."""
        outcome, _ = self._run(value, on_validation_error)
        return outcome

    def parse(self, value: Any) -> Any:
        """Validate and return output; the engine's error propagates."""
        return self._engine.validate_or_throw(self._schema, value)

    def _run(
        self,
        value: Any,
        on_validation_error: OnValidationError | None,
    ) -> tuple[ValidationOutcome, FlattenedIssues | None]:
        """Validate, then flatten and notify if rejected."""
        outcome = self._engine.try_validate(self._schema, value)
        if outcome.success:
            return outcome, None

        issues = self._engine.flatten(self._schema, outcome.issues)
        self._log_rejection(issues)

        if on_validation_error is not None:
            on_validation_error(issues)

        return outcome, issues

    def _log_rejection(self, issues: FlattenedIssues) -> None:
        logger.log(
            self._log_level,
            f"Validation rejected by {self._engine.name} engine: fields={list(issues)}",
        )


def make_extractor(schema: Any, engine: ValidationEngine | None = None) -> Extractor:
    """
    Create an Extractor for a schema.

    Args:
        schema: Anything the engine accepts (for pydantic, any validatable type)
        engine: Validation backend (defaults to PydanticEngine)

    Returns:
        Extractor exposing from_, safe and parse
    """
    return Extractor(schema, engine)
