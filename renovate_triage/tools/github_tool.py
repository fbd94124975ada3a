"""GitHub API wrapper for Renovate PR triage."""

from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import Any, Callable, Dict, List, Optional

from github import Auth, Github
from github.PullRequest import PullRequest as GHPullRequest
from github.Repository import Repository as GHRepository

from ..config import APPROVE_EVENT, DEFAULT_API_URL, DEFAULT_TIMEOUT, MERGE_METHOD
from ..exceptions import TriageError
from ..models import PullRequestDetail, PullRequestReference, RepositoryCoordinate
from ..utils import get_logger


class GitHubSession:
    """
    Owns the GitHub client and the dispatcher its calls run on.

    Remote calls are submitted to a single worker thread and joined with
    an explicit wait, so a hung request cannot stall the run past the
    configured bound. Use as a context manager; the HTTP session and the
    worker are released exactly once on every exit path.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[Github] = None,
    ):
        """
        Initialize GitHub session.

        Args:
            token: GitHub token (ignored when client is given)
            api_url: REST API base URL
            timeout: HTTP timeout for each request
            client: Pre-built PyGithub client
        """
        if client is None:
            if not token:
                raise ValueError("GitHub token required")
            client = Github(auth=Auth.Token(token), base_url=api_url, timeout=timeout)

        self.gh = client
        self.logger = get_logger()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="github")
        self._closed = False

    def __enter__(self) -> "GitHubSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Stop the dispatcher and drop pooled connections."""
        if self._closed:
            return
        self._closed = True
        self.logger.debug("Closing GitHub session")
        try:
            self._executor.shutdown(wait=False, cancel_futures=True)
        finally:
            self.gh.close()

    def call(
        self,
        description: str,
        fn: Callable[..., Any],
        *args: Any,
        timeout: Optional[float] = None,
        **kwargs: Any
    ) -> Any:
        """
        Run a blocking GitHub call on the dispatcher and wait for it.

        Args:
            description: What the call does, for error messages
            fn: Callable to run
            timeout: Seconds to wait, None waits until the call finishes

        Returns:
            Whatever fn returns

        Raises:
            TriageError: If the session is closed or the wait times out
        """
        if self._closed:
            raise TriageError(f"Cannot {description}: GitHub session is closed")

        future = self._executor.submit(fn, *args, **kwargs)
        try:
            return future.result(timeout=timeout)
        except FutureTimeout:
            future.cancel()
            raise TriageError(f"Timed out after {timeout}s trying to {description}")

    def search_pull_requests(self, query: str, timeout: Optional[float] = None) -> List[PullRequestReference]:
        """
        Search issues and pull requests.

        Args:
            query: GitHub search query
            timeout: Seconds to wait for the whole result set

        Returns:
            List of PR references (possibly empty)
        """
        self.logger.debug(f"Searching: {query}")

        def fetch() -> Optional[List[PullRequestReference]]:
            hits = self.gh.search_issues(query)
            if hits is None:
                return None
            # Iterating the paginated list is what hits the network
            return [_to_reference(hit) for hit in hits]

        items = self.call(f"search PR-s ({query})", fetch, timeout=timeout)
        if items is None:
            raise TriageError(f"Search returned no result for query: {query}")
        return items

    def pull_request_client(self, coordinate: RepositoryCoordinate) -> "PullRequestClient":
        """Client scoped to one repository's pull requests."""
        repo = self.gh.get_repo(coordinate.full_name, lazy=True)
        return PullRequestClient(self, repo, coordinate)


class PullRequestClient:
    """Pull request operations for a single repository."""

    def __init__(self, session: GitHubSession, repo: GHRepository, coordinate: RepositoryCoordinate):
        self.session = session
        self.repo = repo
        self.coordinate = coordinate
        self._pulls: Dict[int, GHPullRequest] = {}

    def get(self, number: int, timeout: Optional[float] = None) -> PullRequestDetail:
        """
        Fetch a pull request.

        Args:
            number: PR number
            timeout: Seconds to wait

        Returns:
            Fresh PullRequestDetail

        Raises:
            TriageError: If GitHub returns nothing
        """
        pr = self.session.call(
            f"fetch PR #{number} in {self.coordinate.full_name}",
            self.repo.get_pull,
            number,
            timeout=timeout,
        )
        if pr is None:
            raise TriageError(f"Could not get PR #{number} in {self.coordinate.full_name}")
        self._pulls[number] = pr
        return PullRequestDetail.from_github(pr)

    def create_review(self, number: int, body: str, event: str = APPROVE_EVENT) -> None:
        """Submit a review and wait for GitHub to acknowledge it."""
        pr = self._pull(number)
        self.session.call(
            f"review PR #{number} in {self.coordinate.full_name}",
            pr.create_review,
            body=body,
            event=event,
        )

    def merge(self, number: int, sha: str, merge_method: str = MERGE_METHOD) -> None:
        """
        Merge a pull request.

        GitHub rejects the merge if the head is no longer at sha.
        """
        pr = self._pull(number)
        status = self.session.call(
            f"merge PR #{number} in {self.coordinate.full_name}",
            pr.merge,
            merge_method=merge_method,
            sha=sha,
        )
        if status is not None and not status.merged:
            raise TriageError(
                f"GitHub did not merge PR #{number} in {self.coordinate.full_name}: {status.message}"
            )

    def _pull(self, number: int) -> GHPullRequest:
        if number not in self._pulls:
            self._pulls[number] = self.session.call(
                f"fetch PR #{number} in {self.coordinate.full_name}",
                self.repo.get_pull,
                number,
            )
        return self._pulls[number]


def _to_reference(hit: Any) -> PullRequestReference:
    """
    Map a github.Issue.IssueSearchResult to a reference.

    Only attributes present in the search payload are read; anything else
    would make PyGithub fetch each issue.
    """
    return PullRequestReference(
        number=hit.number,
        title=hit.title,
        repository_url=hit.repository_url,
    )
