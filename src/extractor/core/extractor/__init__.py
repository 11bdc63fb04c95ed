"""Extractor - Schema-bound validation with normalized results."""

from extractor.core.extractor.extractor import Extractor, make_extractor

__all__ = ["Extractor", "make_extractor"]
