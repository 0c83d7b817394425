"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- errors.py: Domain errors raised by adapters
- ports.py: Port interfaces (abstractions for external dependencies)
- query.py: FPDS query construction
- extraction.py: First-match field extraction from feed fragments
- assembler.py: Feed entries to contract records
- services.py: Application services (use cases)
"""
from .domain import FilterParameters, ContractRecord, ResponseEnvelope
from .errors import FeedError, TransportTimeout, UpstreamHttpError, UpstreamMalformedResponse
from .ports import FeedFetcher
from .query import QueryBuilder, build_feed_url
from .extraction import FieldExtractor, extract_text, extract_attribute
from .assembler import RecordAssembler, FieldAlias, FIELD_ALIASES
from .services import SearchContractsService

__all__ = [
    # Domain models
    "FilterParameters",
    "ContractRecord",
    "ResponseEnvelope",
    # Errors
    "FeedError",
    "TransportTimeout",
    "UpstreamHttpError",
    "UpstreamMalformedResponse",
    # Ports
    "FeedFetcher",
    # Feed logic
    "QueryBuilder",
    "build_feed_url",
    "FieldExtractor",
    "extract_text",
    "extract_attribute",
    "RecordAssembler",
    "FieldAlias",
    "FIELD_ALIASES",
    # Services
    "SearchContractsService",
]
