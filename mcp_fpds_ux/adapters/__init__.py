"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- fpds.py: httpx-based FPDS feed fetcher
- mcp/: MCP tool schemas and handlers
"""
from .fpds import HttpxFeedFetcher

__all__ = [
    "HttpxFeedFetcher",
]
