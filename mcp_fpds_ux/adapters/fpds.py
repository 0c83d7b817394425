"""
FPDS Adapter

Implements FeedFetcher port using httpx.
"""
import logging
from typing import Optional

import httpx

from ..core.errors import TransportTimeout, UpstreamHttpError
from ..core.ports import FeedFetcher

logger = logging.getLogger(__name__)


class HttpxFeedFetcher(FeedFetcher):
    """Feed fetcher over a shared httpx client (single attempt, no retries)"""

    def __init__(self, client: Optional[httpx.Client] = None):
        self.client = client or httpx.Client(follow_redirects=True)

    def fetch(self, url: str, headers: dict[str, str], timeout: float) -> str:
        try:
            response = self.client.get(url, headers=headers, timeout=timeout)
        except httpx.TimeoutException as e:
            logger.warning(f"FPDS request timed out after {timeout}s: {e}")
            raise TransportTimeout(timeout) from e

        if not response.is_success:
            raise UpstreamHttpError(response.status_code, response.text)

        return response.text

    def close(self) -> None:
        self.client.close()
