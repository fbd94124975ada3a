"""Triage pass over Renovate PRs awaiting review."""

from typing import Optional

from ..config import TriageConfig
from ..models import TriageSummary
from ..tools import Console, GitHubSession
from ..utils import get_logger
from .merge import MergeWorkflow
from .query import filter_by_dependency, find_renovate_prs, sort_by_title
from .resolver import PullRequestResolver


class RenovateOrchestrator:
    """
    Runs one synchronous pass over the user's Renovate review queue.

    Search -> dependency filter -> sort by title -> for each PR:
    fetch detail -> merge workflow. Any TriageError aborts the pass.
    """

    def __init__(
        self,
        session: GitHubSession,
        config: TriageConfig,
        console: Optional[Console] = None
    ):
        """
        Initialize Renovate orchestrator.

        Args:
            session: Open GitHub session
            config: Triage configuration
            console: Interactive prompts (defaults to the terminal)
        """
        self.session = session
        self.config = config
        self.logger = get_logger()

        self.resolver = PullRequestResolver(session, timeout=config.request_timeout)
        default_comment = config.default_comment if config.has_default_comment else None
        self.workflow = MergeWorkflow(console or Console(), default_comment=default_comment)

    def run(self) -> TriageSummary:
        """
        Process every selected PR in title order.

        Returns:
            TriageSummary of the completed pass
        """
        found = find_renovate_prs(self.session, self.config)
        matching = sort_by_title(filter_by_dependency(found, self.config.dependency))

        summary = TriageSummary(found=len(found), matching=len(matching))

        for reference in matching:
            client, detail = self.resolver.resolve(reference)
            result = self.workflow.process(detail, client, confirmed=self.config.auto_approve)
            summary.record(result)

        self.logger.info(summary.summary())
        return summary
