from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from rich.console import Console

from .config import DEFAULT_LABELS, DEFAULT_REPOSITORIES, PER_PAGE
from .filters import first_matching_label, parse_repo_url, reaction_total, unique_sorted
from .github_api import GitHubClient
from .types import IssueSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanConfig:
    repositories: tuple[str, ...] = DEFAULT_REPOSITORIES
    labels: tuple[str, ...] = DEFAULT_LABELS
    per_page: int = PER_PAGE


@dataclass
class ScanStats:
    repositories_scanned: int = 0
    issues_seen: int = 0
    issues_matched: int = 0
    skipped_repositories: list[str] = field(default_factory=list)


class IssueScanner:
    def __init__(
        self,
        client: GitHubClient,
        config: ScanConfig,
        console: Console | None = None,
    ) -> None:
        self.client = client
        self.config = config
        self.console = console or Console()
        self.stats = ScanStats()

    def scan(self) -> Iterator[IssueSummary]:
        """Yield a summary for every issue carrying a label of interest.

        Repositories are visited in sorted URL order, issues in the order the
        API returns them. Errors from the client abort the scan.
        """
        for repo_url in unique_sorted(self.config.repositories):
            ref = parse_repo_url(repo_url)
            if ref is None:
                self.stats.skipped_repositories.append(repo_url)
                continue

            self.stats.repositories_scanned += 1
            logger.info("Scanning issues in %s", ref.full_name)
            for issue in self.client.iter_repo_issues(
                ref.owner, ref.name, per_page=self.config.per_page
            ):
                self.stats.issues_seen += 1
                label = first_matching_label(issue, self.config.labels)
                if label is None:
                    continue

                summary = IssueSummary(
                    total_count=reaction_total(issue),
                    url=issue["html_url"],
                    title=issue["title"],
                    label=label,
                )
                self.stats.issues_matched += 1
                # Progress line so a long run can be seen to be alive.
                self.console.print(summary.url, markup=False, highlight=False, soft_wrap=True)
                yield summary

    def collect(self) -> list[IssueSummary]:
        summaries = list(self.scan())
        logger.info(
            "Matched %d of %d issues across %d repositories (%d skipped)",
            self.stats.issues_matched,
            self.stats.issues_seen,
            self.stats.repositories_scanned,
            len(self.stats.skipped_repositories),
        )
        return summaries
