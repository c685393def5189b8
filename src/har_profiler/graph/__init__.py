"""API graph construction from HTTP captures.

Provides segment classification, per-capture graph building and
multi-capture merging.
"""

from har_profiler.graph.builder import GraphBuilder, build_graph, parse_har_to_graph
from har_profiler.graph.classifier import (
    SegmentKind,
    classify_segment,
    guess_param_type,
    is_integer,
    is_parameter,
    is_uuid,
    normalize_path,
)
from har_profiler.graph.identity import IdentityRegistry
from har_profiler.graph.merge import merge_graphs

__all__ = [
    "GraphBuilder",
    "IdentityRegistry",
    "SegmentKind",
    "build_graph",
    "classify_segment",
    "guess_param_type",
    "is_integer",
    "is_parameter",
    "is_uuid",
    "merge_graphs",
    "normalize_path",
    "parse_har_to_graph",
]
