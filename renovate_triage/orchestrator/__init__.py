"""Renovate PR triage.

This module provides:
- RenovateOrchestrator: Runs a pass over the review queue
- MergeWorkflow: Approve-and-merge decisions for one PR
- PullRequestResolver: Maps search hits to repository PR clients
- parse_title: Dependency name and version from a Renovate title
"""

from .orchestrator import RenovateOrchestrator
from .merge import MergeWorkflow
from .query import find_renovate_prs, filter_by_dependency, sort_by_title
from .resolver import PullRequestResolver, parse_repository_url
from .title import parse_title, describe_title

__all__ = [
    "RenovateOrchestrator",
    "MergeWorkflow",
    "find_renovate_prs",
    "filter_by_dependency",
    "sort_by_title",
    "PullRequestResolver",
    "parse_repository_url",
    "parse_title",
    "describe_title",
]
