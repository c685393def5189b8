"""MCP tools for building API graphs from HAR captures.

These tools expose the build service to AI agents. They only marshal
arguments and results; all graph logic lives in har_profiler.service.
"""

import logging
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from fastmcp import FastMCP

from har_profiler.decorators import handle_parse_error
from har_profiler.models import BuildOptions, CaptureInput, UrlErrorPolicy
from har_profiler.report import format_graph_report
from har_profiler.service import build_api_graph, build_api_graph_batch

logger = logging.getLogger(__name__)


def _resolve_options(url_error_policy: str | None) -> BuildOptions | None:
    """Turn a tool argument into BuildOptions.

    Returns None when no policy was given so the environment default applies.

    Raises:
        ValueError: If the policy name is unknown
    """
    if url_error_policy is None:
        return None
    return BuildOptions(url_error_policy=UrlErrorPolicy(url_error_policy.strip().lower()))


def register_graph_tools(mcp: "FastMCP") -> None:
    """Register graph building MCP tools with the server.

    Args:
        mcp: FastMCP server instance to register tools with
    """

    @mcp.tool()
    @handle_parse_error
    async def har_build_graph(
        content: Annotated[str, "HAR JSON document"],
        is_sequence: Annotated[bool, "Whether the entries form one ordered user session"] = False,
        url_error_policy: Annotated[str | None, "Malformed URL handling: strict or skip"] = None,
    ) -> str:
        """Build the API graph of a single HAR capture.

        Returns the graph as JSON with segments, edges, operations and
        (for sequential captures) transitions.
        """
        try:
            options = _resolve_options(url_error_policy)
        except ValueError:
            return f"Error: Unknown url_error_policy: {url_error_policy}. Use strict or skip."
        return build_api_graph(content, is_sequence=is_sequence, options=options).to_json()

    @mcp.tool()
    @handle_parse_error
    async def har_build_graph_batch(
        captures: Annotated[list[CaptureInput], "Captures to merge, each with content and is_sequence"],
        url_error_policy: Annotated[str | None, "Malformed URL handling: strict or skip"] = None,
    ) -> str:
        """Build and merge the API graphs of several HAR captures.

        Fails as a whole if any capture cannot be parsed.
        """
        try:
            options = _resolve_options(url_error_policy)
        except ValueError:
            return f"Error: Unknown url_error_policy: {url_error_policy}. Use strict or skip."
        logger.info("Building batch graph from %d captures", len(captures))
        return build_api_graph_batch(captures, options=options).to_json()

    @mcp.tool()
    @handle_parse_error
    async def har_analyze(
        content: Annotated[str, "HAR JSON document"],
        is_sequence: Annotated[bool, "Whether the entries form one ordered user session"] = False,
        url_error_policy: Annotated[str | None, "Malformed URL handling: strict or skip"] = None,
    ) -> str:
        """Summarize the API surface exercised by a HAR capture.

        Lists operations with observed status codes and transitions.
        """
        try:
            options = _resolve_options(url_error_policy)
        except ValueError:
            return f"Error: Unknown url_error_policy: {url_error_policy}. Use strict or skip."
        return format_graph_report(build_api_graph(content, is_sequence=is_sequence, options=options))
