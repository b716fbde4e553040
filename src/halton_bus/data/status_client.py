import httpx
from bs4 import BeautifulSoup

from halton_bus.data.config import BusConfig
from halton_bus.exceptions import TransportError


class StatusClient:
    """Async HTTP client for fetching the general notice page.

    Usage:
        async with StatusClient(config) as client:
            page = await client.fetch_status_page()
    """

    def __init__(self, config: BusConfig):
        """Initialize the client.

        Args:
            config: Configuration with the status page URL and HTTP timeout.
        """
        self._config = config
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "StatusClient":
        """Enter async context - create HTTP client."""
        self._client = httpx.AsyncClient(timeout=self._config.http_timeout_seconds)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_status_page(self) -> BeautifulSoup:
        """Fetch and parse the status page.

        Returns:
            Parsed HTML document.

        Raises:
            RuntimeError: If client not initialized.
            TransportError: If the HTTP request fails.
        """
        if not self._client:
            raise RuntimeError("Client not initialized - use 'async with'")

        url = self._config.status_url
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to fetch status page: {e}", url=url) from e

        # html.parser is lenient, so malformed markup surfaces later as missing elements
        return BeautifulSoup(response.text, "html.parser")
