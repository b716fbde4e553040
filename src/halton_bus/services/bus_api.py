"""Process-wide entry point to the Halton Bus delay feed and status page.

BusAPI is an explicit context object; construct one and pass it around, or use
get_bus_api() for the single process-wide instance.
"""

import time
import xml.etree.ElementTree as ET
from collections.abc import Callable
from datetime import datetime
from functools import lru_cache

from halton_bus.data.config import BusConfig, get_bus_config
from halton_bus.models.delays import DelayRecord
from halton_bus.services.delay_service import DelayFeedAccessor
from halton_bus.services.status_service import StatusAccessor


class BusAPI:
    """Owns the delay feed cache, the status cache and the school list."""

    def __init__(
        self,
        config: BusConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        config = config or get_bus_config()
        self.delays = DelayFeedAccessor(config, clock=clock)
        self.status = StatusAccessor(config, clock=clock)

    @property
    def school_names(self) -> tuple[str, ...] | None:
        return self.status.school_names

    async def latest(self, invalidate: bool = False) -> tuple[DelayRecord, ...]:
        return await self.delays.latest(invalidate=invalidate)

    async def fetch_raw(self) -> ET.Element:
        return await self.delays.fetch_raw()

    def report_last_updated(self) -> datetime | None:
        return self.delays.report_last_updated()

    async def current_status(self, invalidate: bool = False) -> str:
        return await self.status.current_status(invalidate=invalidate)


@lru_cache
def get_bus_api() -> BusAPI:
    """Get the process-wide BusAPI (created on first call)."""
    return BusAPI()


def reset_bus_api() -> None:
    """Drop the process-wide BusAPI and config. Useful for testing."""
    get_bus_api.cache_clear()
    # hasattr check handles case where function is mocked in tests
    if hasattr(get_bus_config, "cache_clear"):
        get_bus_config.cache_clear()
