"""
Issue flattener - Collapse engine issues into a field path mapping.

Raw issues carry a location tuple and a message:

    {"loc": ("tags", 0), "msg": "Input should be a valid string", ...}

Flattening groups messages by the joined location:

    {"tags.0": ["Input should be a valid string"]}

Issues with an empty location describe the input as a whole and are
grouped under the root key.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from extractor.config import get_settings
from extractor.core.models import FlattenedIssues


def issue_path(loc: Iterable[Any], separator: str) -> str:
    """Join location parts into a dotted field path."""
    return separator.join(str(part) for part in loc)


def flatten_issues(
    issues: Iterable[Mapping[str, Any]],
    separator: str | None = None,
    root_key: str | None = None,
) -> FlattenedIssues:
    """
    Group issue messages by field path.

    Args:
        issues: Raw issues, each with "loc" and "msg"
        separator: Joins location parts (default from settings)
        root_key: Key for location-less issues (default from settings)

    Returns:
        Mapping of field path to messages, ordered by first appearance
    """
    settings = get_settings()
    if separator is None:
        separator = settings.path_separator
    if root_key is None:
        root_key = settings.root_issue_key

    flattened: FlattenedIssues = {}
    for issue in issues:
        path = issue_path(issue.get("loc", ()), separator) or root_key
        flattened.setdefault(path, []).append(str(issue["msg"]))
    return flattened
