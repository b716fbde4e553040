"""Tests for the BusAPI context and the process-wide instance."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from halton_bus.data.config import BusConfig
from halton_bus.services.bus_api import BusAPI, get_bus_api, reset_bus_api

FEED = (
    b"\xef\xbb\xbf<?xml version=\"1.0\"?><rss><channel>"
    b"<lastBuildDate>Tue, 14 Jan 2025 07:05:12 EST</lastBuildDate>"
    b"<item><title>Route 9</title></item></channel></rss>"
)
PAGE = (
    '<html><body><select id="ctl00_CPHPageBody_operatorSchoolFilter_schoolList">'
    "<option>--All--</option><option>Oakville PS</option></select>"
    '<span id="ctl00_CPHPageBody_GeneralNoticesMsg">Normal</span></body></html>'
)


@pytest.fixture(autouse=True)
def reset_service():
    """Reset the process-wide instance before and after each test."""
    reset_bus_api()
    yield
    reset_bus_api()


def _route(url: str) -> MagicMock:
    response = MagicMock()
    response.content = FEED
    response.text = PAGE
    return response


def test_get_bus_api_is_singleton():
    assert get_bus_api() is get_bus_api()


def test_reset_bus_api_creates_new_instance():
    first = get_bus_api()
    reset_bus_api()

    assert get_bus_api() is not first


@pytest.mark.asyncio
async def test_bus_api_delegates_to_accessors(clock):
    api = BusAPI(BusConfig(), clock=clock)

    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client.get = AsyncMock(side_effect=_route)
        mock_client_class.return_value = mock_client

        assert api.report_last_updated() is None
        assert api.school_names is None

        records = await api.latest()
        status = await api.current_status()
        raw = await api.fetch_raw()

    assert [r.summary for r in records] == ["Route 9"]
    assert status == "Normal"
    assert api.school_names == ("Oakville PS",)
    assert api.report_last_updated().year == 2025
    assert raw.tag == "rss"


def test_separate_instances_do_not_share_state(clock):
    first = BusAPI(BusConfig(), clock=clock)
    second = BusAPI(BusConfig(), clock=clock)

    assert first.delays is not second.delays
    assert first.status is not second.status
