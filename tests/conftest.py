"""
Shared fixtures for the test suite.
"""
from datetime import date

import pytest

from feeds import ARMY_ENTRY, FakeFetcher, make_feed


@pytest.fixture
def army_feed() -> str:
    return make_feed(ARMY_ENTRY)


@pytest.fixture
def fake_fetcher():
    """Factory: fake_fetcher(body=..., error=...)"""
    def _make(body: str = "", error: Exception | None = None) -> FakeFetcher:
        return FakeFetcher(body=body, error=error)
    return _make


@pytest.fixture
def fixed_today():
    return lambda: date(2025, 10, 19)
