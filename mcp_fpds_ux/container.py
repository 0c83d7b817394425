"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from typing import Optional

from .adapters import HttpxFeedFetcher
from .config import Settings
from .core import FeedFetcher, QueryBuilder, RecordAssembler, SearchContractsService


class Container:
    """Dependency injection container for the application"""

    def __init__(self, settings: Optional[Settings] = None, fetcher: Optional[FeedFetcher] = None):
        self.settings = settings or Settings.from_env()

        # Adapters (infrastructure)
        self.fetcher = fetcher or HttpxFeedFetcher()

        # Core components
        self.query_builder = QueryBuilder(default_window_days=self.settings.default_window_days)
        self.assembler = RecordAssembler()

        # Services (use cases)
        self.search_contracts = SearchContractsService(
            fetcher=self.fetcher,
            query_builder=self.query_builder,
            assembler=self.assembler,
            feed_url=self.settings.feed_url,
            user_agent=self.settings.user_agent,
            timeout=self.settings.timeout
        )

    def close(self) -> None:
        self.fetcher.close()
