"""Find and select Renovate PRs awaiting review."""

from typing import List, Optional

from ..config import TriageConfig
from ..models import PullRequestReference
from ..tools import GitHubSession
from ..utils import get_logger


def find_renovate_prs(session: GitHubSession, config: TriageConfig) -> List[PullRequestReference]:
    """
    Search for open Renovate PRs that request the user's review.

    Args:
        session: Open GitHub session
        config: Triage configuration

    Returns:
        PR references in search order

    Raises:
        TriageError: If the search gives no result within the timeout
    """
    logger = get_logger()

    prs = session.search_pull_requests(config.search_query(), timeout=config.request_timeout)
    logger.info(f"Found {len(prs)} renovate PR-s for user {config.user}")
    return prs


def filter_by_dependency(
    prs: List[PullRequestReference],
    dependency: Optional[str]
) -> List[PullRequestReference]:
    """
    Keep PRs whose title contains the dependency (case-sensitive).

    Without a dependency the list is returned unchanged. Order is kept.
    """
    if dependency is None:
        return prs

    matching = [pr for pr in prs if pr.title is not None and dependency in pr.title]
    get_logger().info(f"Found {len(matching)} renovate PR-s for dependency {dependency}")
    return matching


def sort_by_title(prs: List[PullRequestReference]) -> List[PullRequestReference]:
    """Stable lexicographic sort on title; untitled PRs go first."""
    return sorted(prs, key=lambda pr: (pr.title is not None, pr.title or ""))
