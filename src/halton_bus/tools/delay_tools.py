import logging

from halton_bus.app import mcp
from halton_bus.exceptions import BusAPIError
from halton_bus.models.responses import DelayResult, GetBusDelaysResponse
from halton_bus.services.bus_api import get_bus_api

logger = logging.getLogger(__name__)


@mcp.tool()
async def get_bus_delays(refresh: bool = False) -> GetBusDelaysResponse:
    """Get the currently reported Halton school bus delays.

    Results are cached for about 4 minutes. When api_available is False the
    delay feed could not be retrieved or parsed.

    Args:
        refresh: If True, ignore the cache and fetch the feed again.

    Returns:
        GetBusDelaysResponse with one entry per reported delay.
    """
    api = get_bus_api()
    try:
        records = await api.latest(invalidate=refresh)
    except BusAPIError as e:
        logger.warning(f"Failed to get bus delays: {e}")
        return GetBusDelaysResponse(delays=[], count=0, api_available=False)

    try:
        last_updated = api.report_last_updated()
    except BusAPIError as e:
        logger.warning(f"Feed has no usable lastBuildDate: {e}")
        last_updated = None

    delays = [DelayResult(summary=record.summary, text=record.text) for record in records]
    return GetBusDelaysResponse(
        delays=delays,
        count=len(delays),
        last_updated=last_updated.isoformat() if last_updated else None,
        api_available=True,
    )
