"""Data models for Renovate pull requests."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class TriState(Enum):
    """Three-valued flag reported by GitHub (merged, mergeable)."""
    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"   # GitHub has not computed the value (yet)

    @classmethod
    def from_optional(cls, value: Optional[bool]) -> "TriState":
        if value is None:
            return cls.UNKNOWN
        return cls.TRUE if value else cls.FALSE


@dataclass(frozen=True)
class PullRequestReference:
    """Search hit pointing at a PR - only what the search API returns."""
    number: Optional[int]
    title: Optional[str]
    repository_url: Optional[str]


@dataclass(frozen=True)
class RepositoryCoordinate:
    """Organization and repository name pair."""
    organization: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.organization}/{self.name}"


@dataclass(frozen=True)
class PullRequestDetail:
    """Full PR state, fetched fresh right before acting on it."""
    number: Optional[int]
    title: Optional[str]
    merged: TriState
    mergeable: TriState
    head_sha: Optional[str]

    @classmethod
    def from_github(cls, pr: Any) -> "PullRequestDetail":
        """
        Build a detail record from a PyGithub PullRequest.

        Args:
            pr: github.PullRequest.PullRequest (or anything shaped like it)

        Returns:
            PullRequestDetail snapshot
        """
        head = getattr(pr, "head", None)
        return cls(
            number=pr.number,
            title=pr.title,
            merged=TriState.from_optional(pr.merged),
            mergeable=TriState.from_optional(pr.mergeable),
            head_sha=getattr(head, "sha", None),
        )


@dataclass(frozen=True)
class DependencyUpdate:
    """Dependency name and target version parsed from a Renovate PR title."""
    name: str
    version: str

    def describe(self) -> str:
        return f"{self.name} to {self.version}"
