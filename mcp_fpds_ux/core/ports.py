"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod


class FeedFetcher(ABC):
    """Port for fetching raw feed documents over HTTP"""

    @abstractmethod
    def fetch(self, url: str, headers: dict[str, str], timeout: float) -> str:
        """
        GET the url and return the response body as text.

        Raises TransportTimeout when the timeout elapses and
        UpstreamHttpError for non-2xx responses.
        """
        pass

    def close(self) -> None:
        """Release any held connections"""
        pass
