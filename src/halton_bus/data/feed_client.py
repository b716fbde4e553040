import xml.etree.ElementTree as ET

import httpx

from halton_bus.data.config import BusConfig
from halton_bus.exceptions import ParseError, TransportError


def parse_feed(body: bytes, preamble_length: int) -> ET.Element:
    """Parse a raw feed body into its root element.

    The upstream feed starts with a few bytes that are not valid XML, so a
    fixed-length preamble is skipped before parsing.

    Args:
        body: Raw response body.
        preamble_length: Number of leading bytes to skip.

    Returns:
        Root element of the feed document.

    Raises:
        ParseError: If the remainder is not well-formed XML.
    """
    try:
        return ET.fromstring(body[preamble_length:])
    except ET.ParseError as e:
        raise ParseError(f"Malformed delay feed: {e}") from e


class FeedClient:
    """Async HTTP client for fetching the delay RSS feed.

    Usage:
        async with FeedClient(config) as client:
            document = await client.fetch_feed()
    """

    def __init__(self, config: BusConfig):
        """Initialize the client.

        Args:
            config: Configuration with the feed URL and HTTP timeout.
        """
        self._config = config
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "FeedClient":
        """Enter async context - create HTTP client."""
        self._client = httpx.AsyncClient(timeout=self._config.http_timeout_seconds)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_feed(self) -> ET.Element:
        """Fetch and parse the delay feed.

        Returns:
            Root element of the feed document.

        Raises:
            RuntimeError: If client not initialized.
            TransportError: If the HTTP request fails.
            ParseError: If the feed is not well-formed XML.
        """
        if not self._client:
            raise RuntimeError("Client not initialized - use 'async with'")

        url = self._config.feed_url
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to fetch delay feed: {e}", url=url) from e

        return parse_feed(response.content, self._config.feed_preamble_length)
