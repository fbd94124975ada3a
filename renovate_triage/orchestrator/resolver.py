"""Resolve search hits to repository-scoped PR clients."""

from typing import Optional, Tuple
from urllib.parse import urlparse

from ..exceptions import TriageError
from ..models import PullRequestDetail, PullRequestReference, RepositoryCoordinate
from ..tools import GitHubSession, PullRequestClient


REPOS_MARKER = "/repos/"


def parse_repository_url(url: Optional[str]) -> RepositoryCoordinate:
    """
    Derive (organization, name) from a REST repository URL.

    "https://api.github.com/repos/acme/widgets" -> acme/widgets

    Raises:
        TriageError: If the URL is missing or not exactly two segments after /repos/
    """
    if not url:
        raise TriageError("Could not get repository full name: repository URL is missing")

    path = urlparse(url).path
    if REPOS_MARKER not in path:
        raise TriageError(f"Could not get repository full name from {url}")

    segments = path.split(REPOS_MARKER, 1)[1].split("/")
    if len(segments) != 2 or not all(segments):
        raise TriageError(f"Could not get repository full name from {url}")

    organization, name = segments
    return RepositoryCoordinate(organization=organization, name=name)


class PullRequestResolver:
    """Turns a search hit into a PR client plus freshly fetched detail."""

    def __init__(self, session: GitHubSession, timeout: Optional[float] = None):
        self.session = session
        self.timeout = timeout

    def client_for(self, reference: PullRequestReference) -> PullRequestClient:
        coordinate = parse_repository_url(reference.repository_url)
        return self.session.pull_request_client(coordinate)

    def resolve(self, reference: PullRequestReference) -> Tuple[PullRequestClient, PullRequestDetail]:
        """
        Fetch the full PR behind a search hit.

        Args:
            reference: Search hit

        Returns:
            Tuple of (client scoped to the PR's repository, PR detail)

        Raises:
            TriageError: If the hit has no number or repository, or the fetch fails
        """
        if reference.number is None:
            raise TriageError(f"Search hit has no PR number: {reference.title!r}")

        client = self.client_for(reference)
        detail = client.get(reference.number, timeout=self.timeout)
        return client, detail
