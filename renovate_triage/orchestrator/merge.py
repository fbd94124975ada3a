"""Approve-and-merge workflow for a single Renovate PR."""

from typing import Optional

from ..config import APPROVE_EVENT, MERGE_METHOD
from ..exceptions import TriageError
from ..models import MergeOutcome, MergeResult, PullRequestDetail, TriState
from ..tools import Console, PullRequestClient
from ..utils import get_logger
from .title import describe_title


class MergeWorkflow:
    """
    Decides what to do with a fetched PR and carries it out.

    Steps, each able to stop processing of the PR:
    1. Skip if already merged (unknown counts as merged)
    2. Skip if not mergeable (unknown counts as not mergeable)
    3. Confirm with the operator unless auto-approved
    4. Resolve the approval comment
    5. Approve, then rebase-merge pinned to the fetched head SHA
    """

    def __init__(self, console: Console, default_comment: Optional[str] = None):
        """
        Initialize merge workflow.

        Args:
            console: Interactive prompts
            default_comment: Comment offered for every approval
        """
        self.console = console
        self.default_comment = default_comment
        self.logger = get_logger()

    def process(
        self,
        pr: PullRequestDetail,
        client: PullRequestClient,
        confirmed: bool = False
    ) -> MergeResult:
        """
        Run the workflow on one PR.

        Args:
            pr: PR detail fetched for this iteration
            client: Client for the PR's repository
            confirmed: Skip the confirmation prompt

        Returns:
            MergeResult describing what happened

        Raises:
            TriageError: On malformed PR data or when input ends
        """
        description = describe_title(pr.title)

        if pr.merged != TriState.FALSE:
            self.logger.info(f"PR {description} is already merged")
            return MergeResult(pr_number=pr.number, outcome=MergeOutcome.ALREADY_MERGED)

        if pr.mergeable != TriState.TRUE:
            self.logger.info(f"PR {description} cannot be merged")
            return MergeResult(pr_number=pr.number, outcome=MergeOutcome.NOT_MERGEABLE)

        if not (confirmed or self._confirm(description)):
            self.logger.info(f"Skipping PR {description}")
            return MergeResult(pr_number=pr.number, outcome=MergeOutcome.DECLINED)

        comment = self.resolve_comment()

        if pr.number is None:
            raise TriageError(f"PR {description} has no number")
        if not pr.head_sha:
            raise TriageError(f"PR {description} has no head commit SHA")

        self.logger.info(f"Approving PR {description} with comment {comment}")
        client.create_review(pr.number, body=comment, event=APPROVE_EVENT)

        self.logger.info(f"Merging PR {description} via re-base")
        client.merge(pr.number, sha=pr.head_sha, merge_method=MERGE_METHOD)

        return MergeResult(pr_number=pr.number, outcome=MergeOutcome.MERGED, comment=comment)

    def _confirm(self, description: str) -> bool:
        answer = self.console.confirm(f"Approve and merge PR {description}?")
        if answer is None:
            raise TriageError("Can not get confirmation from stdin")
        return answer

    def resolve_comment(self) -> str:
        """
        Ask for the approval comment, offering the default when there is one.

        Raises:
            TriageError: If input ends before a comment is given
        """
        if self.default_comment is None or not self.default_comment.strip():
            comment = self.console.prompt("Enter comment to approve the PR with")
        else:
            comment = self.console.prompt(
                f"Press enter to approve the PR with the default comment '{self.default_comment}' "
                "or enter a different comment to approve PR with",
                default=self.default_comment,
                show_default=False,
            )

        if comment is None:
            raise TriageError("Can not get comment from stdin")
        return comment
