"""Configuration for Renovate triage."""

import os
from dataclasses import dataclass
from typing import Optional, Union

from .exceptions import TriageError


RENOVATE_APP = "app/renovate"
APPROVE_EVENT = "APPROVE"
MERGE_METHOD = "rebase"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 5.0  # Seconds to wait for search and PR fetch


@dataclass(frozen=True)
class DirectToken:
    """Token passed on the command line."""
    value: str

    def resolve(self) -> str:
        return self.value


@dataclass(frozen=True)
class EnvironmentToken:
    """Token read from a named environment variable."""
    variable: str

    def resolve(self) -> str:
        token = os.environ.get(self.variable)
        if not token:
            raise TriageError(f"Environment variable {self.variable} does not hold a GitHub token")
        return token


CredentialSource = Union[DirectToken, EnvironmentToken]


@dataclass(frozen=True)
class FilterPolicy:
    """Dependency filter, optionally approving every match without asking."""
    dependency: str
    auto_approve: bool = False


@dataclass
class TriageConfig:
    """Configuration for a triage run."""

    # GitHub settings
    credentials: CredentialSource
    organization: str
    user: str                       # Reviewer whose queue we work through
    author: str = RENOVATE_APP
    api_url: str = DEFAULT_API_URL
    request_timeout: float = DEFAULT_TIMEOUT

    # Selection and approval
    filter_policy: Optional[FilterPolicy] = None
    default_comment: Optional[str] = None

    debug: bool = False

    @property
    def dependency(self) -> Optional[str]:
        return self.filter_policy.dependency if self.filter_policy else None

    @property
    def auto_approve(self) -> bool:
        """Confirmation is implicit only when a dependency filter carries the flag."""
        return self.filter_policy is not None and self.filter_policy.auto_approve

    @property
    def has_default_comment(self) -> bool:
        return bool(self.default_comment and self.default_comment.strip())

    def search_query(self) -> str:
        """GitHub search query for open Renovate PRs awaiting the user's review."""
        return (
            f"org:{self.organization} author:{self.author} "
            f"is:open is:pr review-requested:{self.user}"
        )
