"""Cached access to the Halton Bus delay feed.

The parsed feed document is cached for the TTL window; delay records are
re-derived from the cached document on every call. Errors propagate to the
caller and never disturb the cached document.
"""

import asyncio
import logging
import re
import time
import xml.etree.ElementTree as ET
from collections.abc import Callable
from datetime import datetime
from email.utils import parsedate_to_datetime

from halton_bus.data.cache import CacheCell
from halton_bus.data.config import BusConfig, get_bus_config
from halton_bus.data.feed_client import FeedClient
from halton_bus.exceptions import FormatError
from halton_bus.models.delays import DelayRecord

logger = logging.getLogger(__name__)

# RFC 822, e.g. "Tue, 14 Jan 2025 07:05:12 EST"
LAST_BUILD_DATE_FORMAT = "EEE, dd MMM yyyy HH:mm:ss zzz"
_LAST_BUILD_DATE_RE = re.compile(
    r"(Mon|Tue|Wed|Thu|Fri|Sat|Sun), \d{2} [A-Z][a-z]{2} \d{4} \d{2}:\d{2}:\d{2} ([A-Z]{1,5}|[+-]\d{4})"
)


def parse_last_build_date(value: str) -> datetime:
    """Parse a feed lastBuildDate value.

    Raises:
        FormatError: If the value does not match LAST_BUILD_DATE_FORMAT.
    """
    message = f"lastBuildDate {value!r} does not match {LAST_BUILD_DATE_FORMAT!r}"
    value = value.strip()
    if not _LAST_BUILD_DATE_RE.fullmatch(value):
        raise FormatError(message)
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError) as e:
        raise FormatError(message) from e
    # unknown zone names parse as naive datetimes
    if parsed.tzinfo is None:
        raise FormatError(f"{message}: unknown time zone")
    return parsed


class DelayFeedAccessor:
    """Delay feed cached in a single CacheCell."""

    def __init__(
        self,
        config: BusConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._config = config or get_bus_config()
        self._clock = clock
        self._cell: CacheCell[ET.Element] | None = None
        self._lock = asyncio.Lock()

    @property
    def cached_document(self) -> ET.Element | None:
        """Root of the cached feed document, or None if nothing is cached."""
        return self._cell.value if self._cell else None

    async def fetch_raw(self) -> ET.Element:
        """Fetch and parse the feed without reading or writing the cache."""
        async with FeedClient(self._config) as client:
            return await client.fetch_feed()

    async def latest(self, invalidate: bool = False) -> tuple[DelayRecord, ...]:
        """Get every reported delay, refreshing the feed at most once per TTL.

        Args:
            invalidate: If True, replace the cached feed even if it is fresh.

        Returns:
            Delay records in document order.

        Raises:
            TransportError: If the feed cannot be retrieved.
            ParseError: If the feed is not well-formed XML.
        """
        # Serialize check-and-refresh so concurrent callers share one fetch
        async with self._lock:
            if self._cell is not None:
                self._cell.invalidated = invalidate

            if self._cell is None or self._cell.is_expired():
                document = await self.fetch_raw()
                self._cell = CacheCell(
                    document, ttl=self._config.cache_ttl_seconds, clock=self._clock
                )
                logger.debug("Refreshed delay feed cache")
            else:
                logger.debug(f"Using cached delay feed ({self._cell.age:.0f}s old)")

            document = self._cell.value

        return tuple(
            DelayRecord.from_entry_text("\n".join(item.itertext()))
            for item in document.iter("item")
        )

    def report_last_updated(self) -> datetime | None:
        """Get when the cached feed was last rebuilt upstream.

        Never fetches. Call latest() first to populate the cache.

        Returns:
            The feed's lastBuildDate, or None if nothing has been cached.

        Raises:
            FormatError: If the cached feed has no lastBuildDate or it is malformed.
        """
        document = self.cached_document
        if document is None:
            return None

        element = document.find(".//lastBuildDate")
        if element is None or not element.text:
            raise FormatError("Cached delay feed has no lastBuildDate")
        return parse_last_build_date(element.text)
