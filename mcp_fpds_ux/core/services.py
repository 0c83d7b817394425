"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import logging
import re
from typing import Any, Mapping, Optional, Union

from .assembler import RecordAssembler
from .domain import FilterParameters, ResponseEnvelope
from .errors import TransportTimeout, UpstreamHttpError, UpstreamMalformedResponse
from .ports import FeedFetcher
from .query import DEFAULT_FEED_URL, QueryBuilder, build_feed_url

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0"
FEED_ACCEPT = "application/atom+xml, application/xml, text/xml"

# Characters of upstream error bodies echoed back to clients
DETAILS_LIMIT = 200

_FEED_MARKER = re.compile(r"<(?:[\w.-]+:)?(?:feed|entry)[\s>]", re.IGNORECASE)


class SearchContractsService:
    """Use case: Search FPDS for contract awards matching filters"""

    def __init__(
        self,
        fetcher: FeedFetcher,
        query_builder: Optional[QueryBuilder] = None,
        assembler: Optional[RecordAssembler] = None,
        feed_url: str = DEFAULT_FEED_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 15.0
    ):
        self.fetcher = fetcher
        self.query_builder = query_builder or QueryBuilder()
        self.assembler = assembler or RecordAssembler()
        self.feed_url = feed_url
        self.user_agent = user_agent
        self.timeout = timeout

    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": FEED_ACCEPT,
        }

    def execute(
        self,
        filters: Union[FilterParameters, Mapping[str, Any], None] = None
    ) -> ResponseEnvelope:
        """
        Build the query, fetch one feed page and extract contract records.

        Never raises: every failure is reported in the envelope with
        success=False.
        """
        if not isinstance(filters, FilterParameters):
            filters = FilterParameters.from_mapping(filters)

        query = None
        try:
            query = self.query_builder.build(filters)
            url = build_feed_url(query, self.feed_url)
            logger.info(f"Querying FPDS with: {url}")

            body = self.fetcher.fetch(url, self.headers(), self.timeout)
            logger.info(f"FPDS response received, length: {len(body)}")

            if not _FEED_MARKER.search(body):
                raise UpstreamMalformedResponse(body)

            records = self.assembler.parse_feed(body)
            logger.info(
                f"Parsed {len(records)} contracts out of "
                f"{self.assembler.count_entries(body)} entries"
            )
            return ResponseEnvelope.ok(records, query)

        except TransportTimeout as e:
            logger.error(f"FPDS timeout: {e}")
            return ResponseEnvelope.failure(str(e), query=query, type=type(e).__name__)

        except UpstreamHttpError as e:
            logger.error(f"FPDS error status: {e.status}")
            logger.error(f"FPDS error body: {e.body[:500]}")
            return ResponseEnvelope.failure(
                str(e),
                query=query,
                details=e.body[:DETAILS_LIMIT]
            )

        except UpstreamMalformedResponse as e:
            logger.error(f"FPDS malformed response: {e.body[:500]}")
            return ResponseEnvelope.failure(
                str(e),
                query=query,
                details=e.body[:DETAILS_LIMIT],
                type=type(e).__name__
            )

        except Exception as e:
            logger.exception("FPDS search failed")
            return ResponseEnvelope.failure(str(e), query=query, type=type(e).__name__)
