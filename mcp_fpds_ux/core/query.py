"""
Query Builder - FPDS ezSearch query construction

Turns FilterParameters into a single query string in the feed's
field-query syntax, e.g.

    PRINCIPAL_NAICS_CODE:"541511" LAST_MOD_DATE:[2024/10/19,2025/10/19]
"""
import logging
import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Optional
from urllib.parse import quote

from .domain import FilterParameters

logger = logging.getLogger(__name__)

DEFAULT_FEED_URL = "https://www.fpds.gov/ezsearch/FEEDS/ATOM"
FEED_NAME = "PUBLIC"

# Match-all sentinel understood by ezSearch, also the open end of a range
WILDCARD = "*"

NAICS_FIELD = "PRINCIPAL_NAICS_CODE"
AGENCY_FIELD = "CONTRACTING_AGENCY_ID"
SET_ASIDE_FIELD = "TYPE_OF_SET_ASIDE"
AMOUNT_FIELD = "OBLIGATED_AMOUNT"
# Last modified date returns more results than signed date
DATE_FIELD = "LAST_MOD_DATE"

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_QUERY_DATE = re.compile(r"^(\d{4})/(\d{2})/(\d{2})$")


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def normalize_date(value: str) -> str:
    """YYYY-MM-DD -> YYYY/MM/DD. Anything else is returned unchanged."""
    match = _ISO_DATE.match(value.strip())
    if not match:
        return value
    year, month, day = match.groups()
    return f"{year}/{month}/{day}"


def format_query_date(value: date) -> str:
    return value.strftime("%Y/%m/%d")


def parse_query_date(value: str) -> date:
    """Parse a YYYY/MM/DD query date back into a date"""
    match = _QUERY_DATE.match(value.strip())
    if not match:
        raise ValueError(f"Not a query date: {value!r}")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def _as_date(value: str) -> Optional[date]:
    try:
        return parse_query_date(normalize_date(value))
    except ValueError:
        return None


def amount_bound(value: str) -> Optional[str]:
    """
    Dollar bound for the amount range, or None if value is not a number.

    Thousands separators are accepted; whole numbers lose their decimals
    ("100000.0" -> "100000", "1,500" -> "1500").
    """
    try:
        number = float(value.replace(",", "").strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return str(int(number))
    return str(number)


def _quoted(value: str) -> str:
    # Embedded quotes would terminate the clause early
    return '"' + value.replace('"', "") + '"'


class QueryBuilder:
    """Builds FPDS search queries from filters"""

    def __init__(
        self,
        default_window_days: int = 365,
        today: Optional[Callable[[], date]] = None
    ):
        self.default_window_days = default_window_days
        self.today = today or _utc_today

    def build(self, filters: FilterParameters) -> str:
        clauses = []

        if filters.naics:
            clauses.append(f"{NAICS_FIELD}:{_quoted(filters.naics)}")

        if filters.agency:
            clauses.append(f"{AGENCY_FIELD}:{_quoted(filters.agency)}")

        if filters.set_aside:
            clauses.append(f"{SET_ASIDE_FIELD}:{_quoted(filters.set_aside)}")

        amount_range = self._amount_range(filters)
        if amount_range:
            low, high = amount_range
            clauses.append(f"{AMOUNT_FIELD}:[{low},{high}]")

        date_range = self._date_range(filters)
        if date_range:
            start, end = date_range
            clauses.append(f"{DATE_FIELD}:[{start},{end}]")

        if not clauses:
            return WILDCARD

        return " ".join(clauses)

    def _amount_range(self, filters: FilterParameters) -> Optional[tuple[str, str]]:
        """Resolve the amount range bounds, dropping bounds that are not numbers"""
        bounds = []
        for name in ("min_value", "max_value"):
            raw = getattr(filters, name)
            bound = amount_bound(raw) if raw else None
            if raw and bound is None:
                logger.warning(f"Ignoring non-numeric {name}: {raw!r}")
            bounds.append(bound)

        low, high = bounds
        if low is None and high is None:
            return None
        return low if low is not None else "0", high if high is not None else WILDCARD

    def _date_range(self, filters: FilterParameters) -> Optional[tuple[str, str]]:
        """Resolve the date range clause bounds, defaulting to a recency window"""
        today = self.today()
        window = timedelta(days=max(self.default_window_days, 0))

        if filters.start_date and filters.end_date:
            return normalize_date(filters.start_date), normalize_date(filters.end_date)

        if filters.start_date:
            # A start after today would invert the range, leave the end open
            start = _as_date(filters.start_date)
            end = WILDCARD if start is not None and start > today else format_query_date(today)
            return normalize_date(filters.start_date), end

        if filters.end_date:
            # The window counts back from the given end, not from today
            end = _as_date(filters.end_date)
            if end is None or self.default_window_days <= 0:
                return WILDCARD, normalize_date(filters.end_date)
            return format_query_date(end - window), normalize_date(filters.end_date)

        if self.default_window_days > 0:
            return format_query_date(today - window), format_query_date(today)

        return None


def build_feed_url(query: str, base_url: str = DEFAULT_FEED_URL) -> str:
    """Full feed URL for a query: base + feed name + URL-encoded query"""
    return f"{base_url}?FEEDNAME={FEED_NAME}&q={quote(query, safe='')}"
