"""Retry policy for GitHub rate-limit and abuse-limit responses."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import MAX_RATE_LIMIT_RETRIES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThrottlePolicy:
    """Decides whether a throttled request is retried.

    ``retry_count`` is 1 for the first time a request is throttled, 2 for
    the second and so on.
    """

    max_retries: int = MAX_RATE_LIMIT_RETRIES

    def on_rate_limit(self, retry_after: float, retry_count: int) -> bool:
        if retry_count <= self.max_retries:
            logger.warning(
                "Rate limiting triggered, retrying after %d seconds!", retry_after
            )
            return True
        logger.error("Rate limiting triggered, not retrying again!")
        return False

    def on_abuse_limit(self, retry_after: float, retry_count: int) -> bool:
        logger.error("Abuse limit triggered, not retrying!")
        return False
