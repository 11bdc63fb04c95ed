"""Flattener - Engine issues to field path mapping."""

from extractor.core.flattener.flattener import flatten_issues, issue_path

__all__ = ["flatten_issues", "issue_path"]
