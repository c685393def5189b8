"""Entry point for the har-profiler MCP server.

Run with: uv run python -m har_profiler
Or via fastmcp: uv run fastmcp run har_profiler.server:mcp

HTTP transport for remote access:
    uv run python -m har_profiler --http --port 9000
"""

from __future__ import annotations

import argparse

from har_profiler.config import get_log_level
from har_profiler.utils.logging import setup_logging


def main() -> None:
    """Run the MCP server."""
    parser = argparse.ArgumentParser(description="har-profiler MCP server")
    parser.add_argument(
        "--http",
        action="store_true",
        help="Use HTTP transport instead of stdio (for remote access)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host to bind HTTP server (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=9000,
        help="Port for HTTP transport (default: 9000)",
    )
    args = parser.parse_args()

    setup_logging(level=get_log_level())

    from har_profiler.server import mcp

    if args.http:
        mcp.run(transport="http", host=args.host, port=args.port)
    else:
        mcp.run()


if __name__ == "__main__":
    main()
