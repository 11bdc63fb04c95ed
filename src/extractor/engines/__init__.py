"""Validation engines - Backends the extractor delegates to."""

from extractor.engines.base import ValidationEngine
from extractor.engines.pydantic_engine import PydanticEngine

__all__ = ["ValidationEngine", "PydanticEngine"]
