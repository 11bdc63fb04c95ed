"""Schema extractor - Safe, hookable validation on top of pydantic."""

from extractor.core.extractor import Extractor, make_extractor
from extractor.core.models import (
    Accepted,
    ExtractResult,
    FlattenedIssues,
    OnValidationError,
    Rejected,
    ValidationOutcome,
)
from extractor.engines import PydanticEngine, ValidationEngine

__all__ = [
    "Accepted",
    "ExtractResult",
    "Extractor",
    "FlattenedIssues",
    "OnValidationError",
    "PydanticEngine",
    "Rejected",
    "ValidationEngine",
    "ValidationOutcome",
    "make_extractor",
]
