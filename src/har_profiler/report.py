"""Plain-text summary of an API graph."""

from __future__ import annotations

from har_profiler.models import APIGraph


def format_graph_report(graph: APIGraph) -> str:
    """Format a human-readable report of a graph.

    Operations are listed with their endpoint pattern and observed status
    codes, followed by transitions when present.

    Args:
        graph: Graph to describe

    Returns:
        Report text
    """
    param_count = sum(1 for segment in graph.segments if segment.is_param)
    lines = [
        "API Graph Summary",
        f"  Segments: {len(graph.segments)} ({param_count} parameterized)",
        f"  Edges: {len(graph.edges)}",
        f"  Operations: {len(graph.operations)}",
        f"  Transitions: {len(graph.transitions)}",
    ]

    if graph.operations:
        lines.append("")
        lines.append("Operations:")
        for operation in graph.operations:
            endpoint = operation.id.split("::", 2)[-1]
            codes = ", ".join(str(code) for code in operation.status_codes)
            lines.append(f"  {operation.method} /{endpoint} [{codes}]")

    if graph.transitions:
        lines.append("")
        lines.append("Transitions:")
        for transition in graph.transitions:
            lines.append(f"  {transition.from_id} -> {transition.to_id}")

    return "\n".join(lines)
