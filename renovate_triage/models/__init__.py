"""Data models for Renovate triage."""

from .pull_request import (
    TriState,
    PullRequestReference,
    RepositoryCoordinate,
    PullRequestDetail,
    DependencyUpdate,
)
from .result import MergeOutcome, MergeResult, TriageSummary

__all__ = [
    "TriState",
    "PullRequestReference",
    "RepositoryCoordinate",
    "PullRequestDetail",
    "DependencyUpdate",
    "MergeOutcome",
    "MergeResult",
    "TriageSummary",
]
