"""Per-capture graph construction.

Walks the ordered entries of one HAR capture and builds its API graph:
path segments, edges between consecutive segments, operations keyed by
method and endpoint pattern, and, for sequential captures, transitions
between consecutively invoked operations.
"""

from __future__ import annotations

import logging

from har_profiler.capture import extract_path_segments, parse_har
from har_profiler.graph.classifier import PARAM_MARKER, classify_segment, normalize_path
from har_profiler.graph.identity import IdentityRegistry
from har_profiler.models import (
    APIGraph,
    BuildOptions,
    HarDocument,
    ParseError,
    UrlErrorPolicy,
    operation_id,
)

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Builds the graph of a single capture.

    A builder owns its registry and is used for exactly one capture. Feed
    entries in capture order with :meth:`add_entry`, then call :meth:`build`.

    Attributes:
        is_sequence: Whether consecutive entries produce transitions
        options: Build options
    """

    def __init__(self, is_sequence: bool = False, options: BuildOptions | None = None) -> None:
        """Initialize the builder.

        Args:
            is_sequence: Whether the capture is one ordered user session
            options: Build options (defaults to strict URL handling)
        """
        self.is_sequence = is_sequence
        self.options = options or BuildOptions()
        self._registry = IdentityRegistry()
        self._prev_op_id: str | None = None
        self._entry_count = 0

    def add_entry(self, method: str, raw_url: str, status: int) -> str | None:
        """Add one request/response pair to the graph.

        Args:
            method: HTTP method
            raw_url: Absolute request URL
            status: Response status code

        Returns:
            Operation identity the entry resolved to, or None if the entry was
            skipped (root path, or malformed URL under the skip policy)

        Raises:
            ParseError: If the URL is malformed and the policy is strict
        """
        index = self._entry_count
        self._entry_count += 1

        try:
            tokens = extract_path_segments(raw_url)
        except ParseError as e:
            if self.options.url_error_policy is UrlErrorPolicy.STRICT:
                e.details.setdefault("entry_index", index)
                raise
            logger.warning("Skipping entry %d with malformed URL %s: %s", index, raw_url, e.message)
            return None

        if not tokens:
            logger.debug("Skipping entry %d with empty path: %s", index, raw_url)
            return None

        prefix: list[str] = []
        seg_ids: list[str] = []
        for token in tokens:
            kind = classify_segment(token)
            seg_id = self._registry.resolve_segment(prefix, token, kind)
            if seg_ids:
                self._registry.add_edge(seg_ids[-1], seg_id)
            seg_ids.append(seg_id)
            prefix.append(PARAM_MARKER if kind.is_param else token)

        method = method.upper()
        op_id = operation_id(method, normalize_path(tokens))
        self._registry.add_operation(op_id, method, seg_ids[-1], [status])

        if self.is_sequence:
            if self._prev_op_id is not None:
                self._registry.add_transition(self._prev_op_id, op_id)
            self._prev_op_id = op_id

        return op_id

    def build(self) -> APIGraph:
        """Materialize the graph for all entries added so far."""
        graph = self._registry.to_graph()
        logger.debug(
            "Built graph from %d entries: %d segments, %d edges, %d operations, %d transitions",
            self._entry_count,
            len(graph.segments),
            len(graph.edges),
            len(graph.operations),
            len(graph.transitions),
        )
        return graph


def build_graph(
    document: HarDocument,
    is_sequence: bool = False,
    options: BuildOptions | None = None,
) -> APIGraph:
    """Build the API graph of a parsed capture.

    Args:
        document: Parsed HAR document
        is_sequence: Whether the capture is one ordered user session
        options: Build options

    Returns:
        APIGraph for the capture

    Raises:
        ParseError: If a request URL is malformed and the policy is strict
    """
    builder = GraphBuilder(is_sequence=is_sequence, options=options)
    for entry in document.entries:
        builder.add_entry(entry.request.method, entry.request.url, entry.response.status)
    return builder.build()


def parse_har_to_graph(
    content: str,
    is_sequence: bool = False,
    options: BuildOptions | None = None,
) -> APIGraph:
    """Parse a HAR JSON document and build its API graph.

    Args:
        content: Raw HAR JSON text
        is_sequence: Whether the capture is one ordered user session
        options: Build options

    Returns:
        APIGraph for the capture

    Raises:
        ParseError: If the document or one of its URLs cannot be parsed
    """
    return build_graph(parse_har(content), is_sequence=is_sequence, options=options)
