"""GitHub API client with throttling hooks and pagination support."""

import os
import time
import logging
from typing import Any, Callable, Iterator, Optional

import requests
from rich.console import Console

from .config import (
    API_BASE_URL,
    API_VERSION,
    DEFAULT_RETRY_AFTER_S,
    PER_PAGE,
    REQUEST_TIMEOUT_S,
    USER_AGENT,
)
from .throttling import ThrottlePolicy

logger = logging.getLogger(__name__)

SECONDARY_LIMIT_MARKERS = ("secondary rate limit", "abuse")


class GitHubAPIError(Exception):
    pass


class RateLimitExceeded(GitHubAPIError):
    pass


class AbuseLimitExceeded(GitHubAPIError):
    pass


class GitHubClient:
    """Handles all communication with the GitHub REST API."""

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        base_url: str = API_BASE_URL,
        per_page: int = PER_PAGE,
        policy: Optional[ThrottlePolicy] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        console: Optional[Console] = None,
    ):
        self.token = token or os.environ.get("GITHUB_TOKEN")
        self.base_url = base_url.rstrip("/")
        self.per_page = per_page
        self.policy = policy or ThrottlePolicy()
        self._sleep = sleep
        self.console = console or Console()
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": USER_AGENT,
        })
        if self.token:
            self.session.headers["Authorization"] = f"token {self.token}"
        else:
            logger.warning("No GitHub token found. Requests are unauthenticated and heavily rate limited.")

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _is_abuse_limit(response: requests.Response) -> bool:
        if response.status_code not in (403, 429):
            return False
        body = response.text.lower()
        return any(marker in body for marker in SECONDARY_LIMIT_MARKERS)

    @staticmethod
    def _is_rate_limit(response: requests.Response) -> bool:
        if response.status_code == 429:
            return True
        return response.status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0"

    @staticmethod
    def _retry_after(response: requests.Response) -> int:
        retry_after = response.headers.get("Retry-After")
        if retry_after is not None and retry_after.isdigit():
            return int(retry_after)
        reset = response.headers.get("X-RateLimit-Reset")
        if reset is not None and reset.isdigit():
            return max(0, int(reset) - int(time.time()))
        return DEFAULT_RETRY_AFTER_S

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        if url.startswith("/"):
            url = f"{self.base_url}{url}"
        rate_limited = 0
        abuse_limited = 0

        while True:
            try:
                response = self.session.request(method, url, timeout=REQUEST_TIMEOUT_S, **kwargs)
            except requests.exceptions.RequestException as e:
                raise GitHubAPIError(f"Request to {url} failed: {e}") from e

            if self._is_abuse_limit(response):
                abuse_limited += 1
                wait = self._retry_after(response)
                if not self.policy.on_abuse_limit(wait, abuse_limited):
                    raise AbuseLimitExceeded(f"GitHub abuse limit triggered for {url}")
                self._sleep(wait)
                continue

            if self._is_rate_limit(response):
                rate_limited += 1
                wait = self._retry_after(response)
                if not self.policy.on_rate_limit(wait, rate_limited):
                    raise RateLimitExceeded(f"GitHub API rate limit exceeded for {url}")
                self.console.print(
                    f"Rate limited on {url}, retry {rate_limited} in {wait} seconds",
                    markup=False,
                    highlight=False,
                    soft_wrap=True,
                )
                self._sleep(wait)
                continue

            if response.status_code >= 400:
                raise GitHubAPIError(
                    f"GitHub API error {response.status_code}: {response.text[:500]}"
                )
            return response

    def iter_paginated(self, endpoint: str, params: Optional[dict] = None) -> Iterator[Any]:
        """Yield items from every page of a list endpoint.

        Pages are fetched one at a time, following the ``Link: rel="next"``
        header until the last page.
        """
        params = dict(params or {})
        params.setdefault("per_page", self.per_page)
        url: Optional[str] = endpoint

        while url:
            response = self._request("GET", url, params=params)
            items = response.json()
            if not isinstance(items, list):
                raise GitHubAPIError(
                    f"Expected list for paginated endpoint {endpoint}, got {type(items).__name__}"
                )
            yield from items
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            params = None

    def iter_repo_issues(
        self, owner: str, repo: str, per_page: Optional[int] = None
    ) -> Iterator[dict]:
        params = {"per_page": per_page} if per_page else None
        return self.iter_paginated(f"/repos/{owner}/{repo}/issues", params=params)

    def iter_issue_reactions(self, owner: str, repo: str, issue_number: int) -> Iterator[dict]:
        return self.iter_paginated(f"/repos/{owner}/{repo}/issues/{issue_number}/reactions")
