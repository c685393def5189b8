"""Build entry points for single captures and batches.

This is the boundary exposed to adapters (MCP tools, CLI). Each call is
self-contained: it allocates its own registries and returns a fresh graph.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from har_profiler.config import get_build_options
from har_profiler.graph.builder import parse_har_to_graph
from har_profiler.graph.merge import merge_graphs
from har_profiler.models import APIGraph, BuildOptions, CaptureInput, ParseError

logger = logging.getLogger(__name__)


def build_api_graph(
    content: str,
    is_sequence: bool = False,
    options: BuildOptions | None = None,
) -> APIGraph:
    """Build the API graph of one capture.

    Args:
        content: Raw HAR JSON text
        is_sequence: Whether the capture is one ordered user session
        options: Build options; resolved from the environment when None

    Returns:
        APIGraph for the capture

    Raises:
        ParseError: If the document or one of its URLs cannot be parsed
    """
    return parse_har_to_graph(content, is_sequence=is_sequence, options=options or get_build_options())


def build_api_graph_batch(
    captures: Sequence[CaptureInput],
    options: BuildOptions | None = None,
) -> APIGraph:
    """Build each capture independently and merge the results.

    A failure on any capture aborts the whole batch.

    Args:
        captures: Captures to build, in merge order
        options: Build options; resolved from the environment when None

    Returns:
        Merged APIGraph

    Raises:
        ParseError: If any capture fails; details include ``capture_index``
    """
    resolved = options or get_build_options()

    graphs: list[APIGraph] = []
    for index, capture in enumerate(captures):
        try:
            graphs.append(parse_har_to_graph(capture.content, is_sequence=capture.is_sequence, options=resolved))
        except ParseError as e:
            raise ParseError(
                code=e.code,
                message=f"capture {index}: {e.message}",
                details={**e.details, "capture_index": index},
            ) from e

    merged = merge_graphs(graphs)
    logger.info(
        "Merged %d captures: %d segments, %d edges, %d operations, %d transitions",
        len(graphs),
        len(merged.segments),
        len(merged.edges),
        len(merged.operations),
        len(merged.transitions),
    )
    return merged
