"""Outcome models for a triage pass."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class MergeOutcome(Enum):
    """What happened to a single PR."""
    ALREADY_MERGED = "already_merged"
    NOT_MERGEABLE = "not_mergeable"
    DECLINED = "declined"         # Operator answered "no"
    MERGED = "merged"             # Approved and merged


@dataclass
class MergeResult:
    """Result of running the merge workflow on one PR."""
    pr_number: Optional[int]
    outcome: MergeOutcome
    comment: Optional[str] = None


@dataclass
class TriageSummary:
    """Outcome counts for a completed pass."""
    found: int = 0
    matching: int = 0
    results: List[MergeResult] = field(default_factory=list)

    def record(self, result: MergeResult) -> None:
        self.results.append(result)

    def count(self, outcome: MergeOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    def summary(self) -> str:
        """Human readable one-line summary."""
        return (
            f"Found {self.found} PR-s, processed {len(self.results)} of {self.matching} matching: "
            f"{self.count(MergeOutcome.MERGED)} merged, "
            f"{self.count(MergeOutcome.ALREADY_MERGED)} already merged, "
            f"{self.count(MergeOutcome.NOT_MERGEABLE)} not mergeable, "
            f"{self.count(MergeOutcome.DECLINED)} declined"
        )
