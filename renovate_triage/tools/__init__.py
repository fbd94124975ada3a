"""Tools for Renovate triage."""

from .console import Console
from .github_tool import GitHubSession, PullRequestClient

__all__ = [
    "Console",
    "GitHubSession",
    "PullRequestClient",
]
