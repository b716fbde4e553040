"""Cached access to the Halton Bus general notice page.

The notice text is cached for the TTL window. The first successful fetch also
records the list of school names from the page's school filter dropdown; that
list is kept for the accessor's lifetime and never refreshed.
"""

import asyncio
import logging
import time
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from halton_bus.data.cache import CacheCell
from halton_bus.data.config import BusConfig, get_bus_config
from halton_bus.data.status_client import StatusClient
from halton_bus.exceptions import ParseError

logger = logging.getLogger(__name__)


def _find_element(page: BeautifulSoup, element_id: str) -> Tag:
    element = page.find(id=element_id)
    if not isinstance(element, Tag):
        raise ParseError(f"Status page has no element with id {element_id!r}")
    return element


def extract_school_names(page: BeautifulSoup, element_id: str, sentinel: str) -> tuple[str, ...]:
    """Read school names from the filter dropdown, dropping the "all" option."""
    dropdown = _find_element(page, element_id)
    names = (child.get_text(strip=True) for child in dropdown.find_all(True, recursive=False))
    return tuple(name for name in names if name != sentinel)


def extract_notice(page: BeautifulSoup, element_id: str) -> str:
    """Get the inner markup of the general notice element."""
    return _find_element(page, element_id).decode_contents()


class StatusAccessor:
    """General notice cached in a single CacheCell, plus the school list."""

    def __init__(
        self,
        config: BusConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._config = config or get_bus_config()
        self._clock = clock
        self._cell: CacheCell[str] | None = None
        self._school_names: tuple[str, ...] | None = None
        self._lock = asyncio.Lock()

    @property
    def school_names(self) -> tuple[str, ...] | None:
        """Schools served, or None until the status page has been fetched once."""
        return self._school_names

    async def current_status(self, invalidate: bool = False) -> str:
        """Get the current general transportation notice.

        Args:
            invalidate: If True, refetch the page even if the cached notice is fresh.

        Returns:
            The notice as an HTML fragment.

        Raises:
            TransportError: If the status page cannot be retrieved.
            ParseError: If an expected element is missing from the page.
        """
        async with self._lock:
            if self._cell is not None:
                self._cell.invalidated = invalidate

            if self._cell is None or self._cell.is_expired():
                async with StatusClient(self._config) as client:
                    page = await client.fetch_status_page()

                # Extract everything before storing anything
                school_names = None
                if self._cell is None:
                    school_names = extract_school_names(
                        page,
                        self._config.school_list_element_id,
                        self._config.school_list_sentinel,
                    )
                notice = extract_notice(page, self._config.notice_element_id)

                if school_names is not None:
                    self._school_names = school_names
                    logger.debug(f"Loaded {len(school_names)} school names")
                self._cell = CacheCell(notice, ttl=self._config.cache_ttl_seconds, clock=self._clock)
                logger.debug("Refreshed general notice cache")

            return self._cell.value
