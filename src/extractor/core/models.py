"""Result shapes shared by the extractor and validation engines.

Two result families live here:
- ValidationOutcome - what an engine returns (Accepted | Rejected)
- ExtractResult - the normalized shape handed back by Extractor.from_
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal

# field path -> messages, in the order the engine reported them
FlattenedIssues = dict[str, list[str]]

OnValidationError = Callable[[FlattenedIssues], None]


# =============================================================================
# Engine outcomes
# =============================================================================


@dataclass(frozen=True)
class Accepted:
    """Input passed validation."""

    output: Any
    success: Literal[True] = True


@dataclass(frozen=True)
class Rejected:
    """Input failed validation."""

    issues: list[Any]
    error: Exception | None = field(default=None, compare=False)
    success: Literal[False] = False


ValidationOutcome = Accepted | Rejected


# =============================================================================
# Extract result
# =============================================================================


@dataclass(frozen=True)
class ExtractResult:
    """
    Normalized result of Extractor.from_.

    Exactly one of output/issues is populated:
    - success=True: output set, issues None
    - success=False: output None, issues set
    """

    success: bool
    output: Any = None
    issues: FlattenedIssues | None = None

    def __post_init__(self) -> None:
        if self.success and self.issues is not None:
            raise ValueError("successful result cannot carry issues")
        if not self.success:
            if self.issues is None:
                raise ValueError("failed result must carry issues")
            if self.output is not None:
                raise ValueError("failed result cannot carry output")

    @classmethod
    def ok(cls, output: Any) -> "ExtractResult":
        return cls(success=True, output=output)

    @classmethod
    def fail(cls, issues: FlattenedIssues) -> "ExtractResult":
        return cls(success=False, issues=issues)
