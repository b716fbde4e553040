import logging

from halton_bus.app import mcp
from halton_bus.exceptions import BusAPIError
from halton_bus.models.responses import GetSchoolNamesResponse, GetTransportationStatusResponse
from halton_bus.services.bus_api import get_bus_api

logger = logging.getLogger(__name__)


@mcp.tool()
async def get_transportation_status(refresh: bool = False) -> GetTransportationStatusResponse:
    """Get the general transportation notice for HDSB and HCDSB.

    The notice announces major delays and cancellations (e.g. weather
    cancellations) and is returned as an HTML fragment.

    Args:
        refresh: If True, ignore the cache and fetch the page again.

    Returns:
        GetTransportationStatusResponse with the current notice.
    """
    try:
        notice = await get_bus_api().current_status(invalidate=refresh)
    except BusAPIError as e:
        logger.warning(f"Failed to get transportation status: {e}")
        return GetTransportationStatusResponse(api_available=False)

    return GetTransportationStatusResponse(notice=notice, api_available=True)


@mcp.tool()
async def get_school_names(query: str | None = None) -> GetSchoolNamesResponse:
    """List schools served by Halton student transportation.

    Args:
        query: Optional case-insensitive substring to filter school names
               (e.g. "oakville").

    Returns:
        GetSchoolNamesResponse with matching school names.
    """
    api = get_bus_api()
    if api.school_names is None:
        # The list is read from the status page on its first fetch
        try:
            await api.current_status()
        except BusAPIError as e:
            logger.warning(f"Failed to load school names: {e}")
            return GetSchoolNamesResponse(schools=[], count=0, total_count=0, api_available=False)

    all_schools = list(api.school_names or ())
    schools = all_schools
    if query:
        needle = query.casefold()
        schools = [name for name in all_schools if needle in name.casefold()]

    return GetSchoolNamesResponse(
        schools=schools,
        count=len(schools),
        total_count=len(all_schools),
        api_available=True,
    )
