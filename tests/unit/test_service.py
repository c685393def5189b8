"""Unit tests for the build service entry points."""

from __future__ import annotations

import pytest

from har_profiler.models import BuildOptions, CaptureInput, ErrorCode, ParseError, UrlErrorPolicy
from har_profiler.service import build_api_graph, build_api_graph_batch
from tests.conftest import create_har

BROKEN_URL_HAR = create_har(
    ("GET", "http://example.com/ok", 200),
    ("GET", "http://example.com/bad/%g1", 200),
)


class TestBuildApiGraph:
    """Tests for build_api_graph."""

    def test_builds_graph(self, users_har: str) -> None:
        """Test a single-capture build."""
        graph = build_api_graph(users_har)

        assert len(graph.segments) == 4
        assert graph.operations[0].status_codes == [200]

    def test_malformed_json_fails(self) -> None:
        """Test that malformed capture JSON raises ParseError and returns nothing."""
        with pytest.raises(ParseError) as exc_info:
            build_api_graph("not json at all")

        assert exc_info.value.code == ErrorCode.INVALID_CAPTURE

    def test_missing_entries_is_empty_graph(self) -> None:
        """Test that a document without log.entries builds an empty graph."""
        graph = build_api_graph('{"log": {"version": "1.2"}}')

        assert graph.segments == []
        assert graph.operations == []

    def test_policy_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the URL error policy is read from the environment by default."""
        monkeypatch.setenv("HAR_PROFILER_URL_ERROR_POLICY", "skip")

        graph = build_api_graph(BROKEN_URL_HAR)

        assert [op.id for op in graph.operations] == ["op::get::ok"]

    def test_explicit_options_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that explicit options win over the environment."""
        monkeypatch.setenv("HAR_PROFILER_URL_ERROR_POLICY", "skip")

        with pytest.raises(ParseError):
            build_api_graph(BROKEN_URL_HAR, options=BuildOptions(url_error_policy=UrlErrorPolicy.STRICT))


class TestBuildApiGraphBatch:
    """Tests for build_api_graph_batch."""

    def test_merges_captures(self) -> None:
        """Test that two captures on /users/{id} merge into one parameter node."""
        graph = build_api_graph_batch(
            [
                CaptureInput(content=create_har(("GET", "http://example.com/users/1", 200))),
                CaptureInput(content=create_har(("GET", "http://example.com/users/2", 500))),
            ]
        )

        assert len([s for s in graph.segments if s.param]) == 1
        assert len(graph.operations) == 1
        assert graph.operations[0].status_codes == [200, 500]
        edge_pairs = [(e.from_id, e.to_id) for e in graph.edges]
        assert len(edge_pairs) == len(set(edge_pairs))

    def test_sequence_flag_per_capture(self, cart_session_har: str) -> None:
        """Test that only sequential captures contribute transitions."""
        graph = build_api_graph_batch(
            [
                CaptureInput(content=cart_session_har, is_sequence=False),
                CaptureInput(
                    content=create_har(
                        ("GET", "http://example.com/home", 200),
                        ("GET", "http://example.com/cart", 200),
                    ),
                    is_sequence=True,
                ),
            ]
        )

        assert [(t.from_id, t.to_id) for t in graph.transitions] == [("op::get::home", "op::get::cart")]

    def test_failure_aborts_batch(self, users_har: str) -> None:
        """Test that one bad capture fails the whole batch with its index."""
        with pytest.raises(ParseError) as exc_info:
            build_api_graph_batch(
                [
                    CaptureInput(content=users_har),
                    CaptureInput(content="{broken"),
                ]
            )

        error = exc_info.value
        assert error.code == ErrorCode.INVALID_CAPTURE
        assert error.details["capture_index"] == 1
        assert error.message.startswith("capture 1: ")
        assert isinstance(error.__cause__, ParseError)

    def test_url_failure_in_batch(self, users_har: str) -> None:
        """Test that a malformed URL in any capture aborts the batch under strict policy."""
        with pytest.raises(ParseError) as exc_info:
            build_api_graph_batch([CaptureInput(content=BROKEN_URL_HAR), CaptureInput(content=users_har)])

        assert exc_info.value.code == ErrorCode.INVALID_URL
        assert exc_info.value.details["capture_index"] == 0
        assert exc_info.value.details["entry_index"] == 1

    def test_empty_batch(self) -> None:
        """Test that an empty batch yields an empty graph."""
        graph = build_api_graph_batch([])

        assert graph.segments == []
        assert graph.transitions == []
