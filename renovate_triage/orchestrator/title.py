"""Parse Renovate PR titles for display."""

from typing import Optional

from ..exceptions import TriageError
from ..models import DependencyUpdate


TITLE_PREFIX = "Update dependency "
VERSION_SEPARATOR = " to "


def parse_title(title: Optional[str]) -> DependencyUpdate:
    """
    Extract dependency name and target version from a Renovate title.

    "Update dependency npm:left-pad to 1.3.0" -> ("left-pad", "1.3.0").
    The ecosystem/group prefix before the last ":" is dropped.

    Args:
        title: PR title

    Returns:
        DependencyUpdate

    Raises:
        TriageError: If the title is missing or has no version part
    """
    if title is None:
        raise TriageError("PR has no title")

    parts = title.split(VERSION_SEPARATOR)
    if len(parts) < 2:
        raise TriageError(f"Missing version in PR title: {title!r}")

    head = parts[0]
    if TITLE_PREFIX in head:
        head = head.split(TITLE_PREFIX, 1)[1]
    name = head.rsplit(":", 1)[-1]

    return DependencyUpdate(name=name, version=parts[1])


def describe_title(title: Optional[str]) -> str:
    """Short "<name> to <version>" description used in messages."""
    return parse_title(title).describe()
