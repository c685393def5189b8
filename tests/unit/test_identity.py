"""Unit tests for segment identities and the identity registry."""

from __future__ import annotations

from har_profiler.graph.classifier import STATIC, classify_segment
from har_profiler.graph.identity import IdentityRegistry, param_segment_id, segment_id, static_segment_id
from har_profiler.models import ParameterType


class TestSegmentIds:
    """Tests for identity derivation."""

    def test_static_id(self) -> None:
        """Test static identity includes the prefix chain."""
        assert static_segment_id(["api", "v1"], "users") == "static:/api/v1/users"

    def test_root_static_id(self) -> None:
        """Test static identity without prefix."""
        assert static_segment_id([], "cart") == "static:/cart"

    def test_param_id_includes_type(self) -> None:
        """Test parameter identity includes the inferred type."""
        assert param_segment_id(["users"], ParameterType.UUID) == "param:/users/{uuid}"
        assert param_segment_id(["users"], ParameterType.INTEGER) == "param:/users/{integer}"

    def test_param_id_ignores_value(self) -> None:
        """Test that different values of the same type share an identity."""
        assert segment_id(["users"], "1", classify_segment("1")) == segment_id(["users"], "99", classify_segment("99"))

    def test_static_and_param_never_collide(self) -> None:
        """Test that variants are kept apart by their prefix."""
        assert segment_id([], "{integer}", STATIC) != param_segment_id([], ParameterType.INTEGER)


class TestIdentityRegistry:
    """Tests for IdentityRegistry."""

    def test_resolve_creates_once(self) -> None:
        """Test that a node is created at most once per identity."""
        registry = IdentityRegistry()

        first = registry.resolve_segment(["users"], "1", classify_segment("1"))
        second = registry.resolve_segment(["users"], "2", classify_segment("2"))

        graph = registry.to_graph()
        assert first == second
        assert len(graph.segments) == 1
        assert graph.segments[0].param is not None
        assert graph.segments[0].param.example == "1"

    def test_add_edge_reports_duplicates(self) -> None:
        """Test insert-or-ignore for edges."""
        registry = IdentityRegistry()

        assert registry.add_edge("a", "b") is True
        assert registry.add_edge("a", "b") is False
        assert registry.add_edge("b", "a") is True
        assert len(registry.to_graph().edges) == 2

    def test_add_transition_reports_duplicates(self) -> None:
        """Test insert-or-ignore for transitions, self-transitions included."""
        registry = IdentityRegistry()

        assert registry.add_transition("op1", "op1") is True
        assert registry.add_transition("op1", "op1") is False

    def test_operation_status_set(self) -> None:
        """Test that status codes are a set materialized in ascending order."""
        registry = IdentityRegistry()
        registry.add_operation("op", "GET", "seg", [500])
        registry.add_operation("op", "GET", "other", [200, 500])

        (operation,) = registry.to_graph().operations
        assert operation.status_codes == [200, 500]
        assert operation.path_segment_id == "seg"

    def test_registries_are_independent(self) -> None:
        """Test that no state is shared between registry instances."""
        first = IdentityRegistry()
        first.add_edge("a", "b")

        assert IdentityRegistry().to_graph().edges == []
