"""FastMCP server for HAR capture profiling.

Provides MCP tools that turn recorded HTTP traffic into API graphs.
"""

from __future__ import annotations

from fastmcp import FastMCP

from har_profiler.mcp_tools import register_graph_tools

# Create MCP server instance
mcp = FastMCP("har-profiler")

register_graph_tools(mcp)
