"""Base validation engine interface."""

from abc import ABC, abstractmethod
from typing import Any

from extractor.core.models import FlattenedIssues, ValidationOutcome


class ValidationEngine(ABC):
    """
    Capabilities the extractor needs from a validation library.

    Implementations must keep try_validate free of exceptions for
    rejected input; only validate_or_throw raises on rejection.
    """

    name: str = "base"

    def prepare(self, schema: Any) -> Any:
        """Compile a schema once so each call can reuse it."""
        return schema

    @abstractmethod
    def try_validate(self, schema: Any, value: Any) -> ValidationOutcome:
        """Validate and return Accepted or Rejected."""
        ...

    @abstractmethod
    def validate_or_throw(self, schema: Any, value: Any) -> Any:
        """Validate and return output, raising the engine's error on rejection."""
        ...

    @abstractmethod
    def flatten(self, schema: Any, issues: list[Any]) -> FlattenedIssues:
        """Convert raw issues from a prepared schema to a field path mapping."""
        ...
