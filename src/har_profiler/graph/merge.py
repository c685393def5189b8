"""Multi-capture graph merging."""

from __future__ import annotations

from collections.abc import Iterable

from har_profiler.graph.identity import IdentityRegistry
from har_profiler.models import APIGraph


def merge_graphs(graphs: Iterable[APIGraph]) -> APIGraph:
    """Merge per-capture graphs into one.

    Each collection is the deduplicated union of the inputs, in first-seen
    order across the graphs in the order supplied. The first segment seen for
    an identity is kept as representative. Operations sharing an identity
    have their status codes unioned.

    Args:
        graphs: Graphs to merge

    Returns:
        New merged graph (an empty graph if no graphs were given)
    """
    registry = IdentityRegistry()
    for graph in graphs:
        for segment in graph.segments:
            registry.add_segment(segment)
        for edge in graph.edges:
            registry.add_edge(edge.from_id, edge.to_id)
        for operation in graph.operations:
            registry.add_operation(
                operation.id,
                operation.method,
                operation.path_segment_id,
                operation.status_codes,
            )
        for transition in graph.transitions:
            registry.add_transition(transition.from_id, transition.to_id)
    return registry.to_graph()
