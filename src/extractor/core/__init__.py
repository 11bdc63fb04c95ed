"""Extractor core - Result contracts and issue flattening."""

from extractor.core.models import (
    Accepted,
    ExtractResult,
    FlattenedIssues,
    OnValidationError,
    Rejected,
    ValidationOutcome,
)

__all__ = [
    "Accepted",
    "ExtractResult",
    "FlattenedIssues",
    "OnValidationError",
    "Rejected",
    "ValidationOutcome",
]
