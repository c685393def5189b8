"""Stable identities and the per-call identity registry.

Segment identities are derived from content and structural position only:
the classification, the normalized prefix (earlier parameters replaced by
``{param}``), and the parameter type. The same logical node therefore gets
the same identity in every capture, which is what makes merging by identity
correct.

A registry is scoped to a single build or merge call and deduplicates every
collection of the graph while keeping first-seen order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from har_profiler.graph.classifier import SegmentKind, param_placeholder
from har_profiler.models import (
    APIGraph,
    Edge,
    Operation,
    Parameter,
    ParameterType,
    PathSegment,
    StaticSegment,
    Transition,
)


def static_segment_id(prefix: Sequence[str], name: str) -> str:
    """Identity of a static segment.

    Example:
        >>> static_segment_id(["api", "v1"], "users")
        'static:/api/v1/users'
    """
    return "static:/" + "/".join([*prefix, name])


def param_segment_id(prefix: Sequence[str], param_type: ParameterType) -> str:
    """Identity of a parameter segment.

    Example:
        >>> param_segment_id(["api", "v1", "users"], ParameterType.INTEGER)
        'param:/api/v1/users/{integer}'
    """
    return "param:/" + "/".join([*prefix, f"{{{param_type.value}}}"])


def segment_id(prefix: Sequence[str], token: str, kind: SegmentKind) -> str:
    """Identity of a classified token at the position given by ``prefix``.

    ``prefix`` holds earlier tokens with parameters replaced by ``{param}``,
    so a literal ``{param}`` token and a parameter at the same position lead
    to the same identities for the segments after them.
    """
    if kind.is_param:
        return param_segment_id(prefix, kind.param_type or ParameterType.UNSPECIFIED)
    return static_segment_id(prefix, token)


@dataclass
class _OperationRecord:
    method: str
    path_segment_id: str
    status_codes: set[int] = field(default_factory=set)


class IdentityRegistry:
    """Insert-or-ignore registry for the four graph collections.

    Segments, edges and transitions keep the first instance seen for an
    identity. Operations keep the first method and terminal segment and union
    their status codes.
    """

    def __init__(self) -> None:
        self._segments: dict[str, PathSegment] = {}
        self._edges: dict[tuple[str, str], Edge] = {}
        self._operations: dict[str, _OperationRecord] = {}
        self._transitions: dict[tuple[str, str], Transition] = {}

    def resolve_segment(self, prefix: Sequence[str], token: str, kind: SegmentKind) -> str:
        """Return the identity for a token, creating its node on first sight.

        Args:
            prefix: Normalized tokens preceding this one
            token: Raw path token
            kind: Classification of the token

        Returns:
            Segment identity
        """
        seg_id = segment_id(prefix, token, kind)
        if seg_id in self._segments:
            return seg_id

        if kind.is_param:
            param_type = kind.param_type or ParameterType.UNSPECIFIED
            segment = PathSegment(
                param=Parameter(
                    id=seg_id,
                    name=param_placeholder(param_type),
                    type=param_type,
                    example=token,
                )
            )
        else:
            segment = PathSegment(static=StaticSegment(id=seg_id, name=token))
        self._segments[seg_id] = segment
        return seg_id

    def add_segment(self, segment: PathSegment) -> bool:
        """Add an existing segment; returns False if its identity is known."""
        if segment.id in self._segments:
            return False
        self._segments[segment.id] = segment
        return True

    def add_edge(self, from_id: str, to_id: str) -> bool:
        """Add the edge ``from_id -> to_id``; returns False if already present."""
        key = (from_id, to_id)
        if key in self._edges:
            return False
        self._edges[key] = Edge(from_id=from_id, to_id=to_id)
        return True

    def add_operation(
        self,
        op_id: str,
        method: str,
        path_segment_id: str,
        status_codes: Iterable[int],
    ) -> None:
        """Record observations for an operation.

        The first call for an identity fixes the method and terminal segment.
        Every call adds its status codes to the operation's set.
        """
        record = self._operations.get(op_id)
        if record is None:
            record = _OperationRecord(method=method, path_segment_id=path_segment_id)
            self._operations[op_id] = record
        record.status_codes.update(status_codes)

    def add_transition(self, from_id: str, to_id: str) -> bool:
        """Add the transition ``from_id -> to_id``; returns False if already present."""
        key = (from_id, to_id)
        if key in self._transitions:
            return False
        self._transitions[key] = Transition(from_id=from_id, to_id=to_id)
        return True

    def to_graph(self) -> APIGraph:
        """Materialize an immutable graph.

        Status codes are emitted in ascending order.
        """
        operations = [
            Operation(
                id=op_id,
                method=record.method,
                path_segment_id=record.path_segment_id,
                status_codes=sorted(record.status_codes),
            )
            for op_id, record in self._operations.items()
        ]
        return APIGraph(
            segments=list(self._segments.values()),
            edges=list(self._edges.values()),
            operations=operations,
            transitions=list(self._transitions.values()),
        )
