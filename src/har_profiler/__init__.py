"""har-profiler: API graphs from recorded HTTP traffic.

Turns HAR captures into a graph of the API surface they exercise:
path segments, operations with observed status codes, and transitions
between operations in sequential sessions.
"""

from har_profiler.models import (
    APIGraph,
    BuildOptions,
    CaptureInput,
    Edge,
    ErrorCode,
    Operation,
    Parameter,
    ParameterType,
    ParseError,
    PathSegment,
    StaticSegment,
    Transition,
    UrlErrorPolicy,
)
from har_profiler.service import build_api_graph, build_api_graph_batch

__all__ = [
    "APIGraph",
    "BuildOptions",
    "CaptureInput",
    "Edge",
    "ErrorCode",
    "Operation",
    "Parameter",
    "ParameterType",
    "ParseError",
    "PathSegment",
    "StaticSegment",
    "Transition",
    "UrlErrorPolicy",
    "build_api_graph",
    "build_api_graph_batch",
]
