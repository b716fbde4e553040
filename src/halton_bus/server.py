import argparse
import logging
from datetime import UTC, datetime

from halton_bus.app import mcp
from halton_bus.models.responses import HealthResponse

# Register tools on the shared app
from halton_bus.tools import delay_tools, status_tools  # noqa: F401


@mcp.tool()
def health() -> HealthResponse:
    """Check if the Halton Bus MCP server is running and healthy.

    Returns the server status, version, and current timestamp.
    """
    from halton_bus import __version__

    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.now(UTC).isoformat(),
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="halton-bus-mcp",
        description="Halton Bus MCP Server",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    main()
