"""Filtering logic for repository references and issue labels."""

import logging
from typing import Any, Iterable, Optional
from urllib.parse import urlparse

from .config import GITHUB_HOST
from .types import RepoRef

logger = logging.getLogger(__name__)


def parse_repo_url(url: str, host: str = GITHUB_HOST) -> Optional[RepoRef]:
    """Parse a repository URL into a RepoRef.

    Returns None when the host is not ``host`` or the path does not split
    into exactly two non-empty segments (owner and repository name).
    """
    parsed = urlparse(url.strip())
    if parsed.hostname != host:
        logger.debug("Skipping %s: host is not %s", url, host)
        return None

    parts = [segment for segment in parsed.path.split("/") if segment]
    if len(parts) != 2:
        logger.debug("Skipping %s: expected owner/repo path, got %r", url, parsed.path)
        return None

    owner, name = parts
    return RepoRef(owner=owner, name=name)


def unique_sorted(items: Iterable[str]) -> list[str]:
    """Collapse duplicates and sort lexicographically."""
    return sorted(set(items))


def first_matching_label(issue: dict[str, Any], labels: Iterable[str]) -> Optional[str]:
    """Return the first label of ``issue`` whose name is in ``labels``.

    Labels are scanned in the order the API returns them.
    """
    wanted = set(labels)
    for label in issue.get("labels") or []:
        # Issue payloads may carry labels as bare strings.
        name = label.get("name") if isinstance(label, dict) else label
        if name in wanted:
            return name
    return None


def reaction_total(issue: dict[str, Any]) -> int:
    reactions = issue.get("reactions") or {}
    return int(reactions.get("total_count") or 0)
