"""Tests for debug mode and result diagnostics."""

import importlib

import pytest

from graphtrace.diagnostics import (
    assert_complete_node_maps,
    assert_valid_result,
    debug_context,
    is_debug_enabled,
    is_forest,
    set_debug_enabled,
)
from graphtrace.graphs import GraphSnapshot, MSTEdge, bfs, kruskal_mst


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        assert not is_debug_enabled()

        set_debug_enabled(True)
        with debug_context(False):
            assert not is_debug_enabled()

        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_restores_on_error() -> None:
    """Test that the previous state is restored when the block raises."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        with pytest.raises(RuntimeError):
            with debug_context(True):
                raise RuntimeError("fail")
        assert not is_debug_enabled()
    finally:
        set_debug_enabled(original)


@pytest.mark.parametrize(
    "value,expected",
    [("1", True), ("on", True), ("TRUE", True), (" yes ", True), ("0", False), ("", False)],
)
def test_debug_env_var(monkeypatch, value, expected) -> None:
    """Test that GRAPHTRACE_DEBUG seeds the initial state."""
    import graphtrace.diagnostics.debug_mode as debug_mode

    monkeypatch.setenv("GRAPHTRACE_DEBUG", value)
    try:
        reloaded = importlib.reload(debug_mode)
        assert reloaded.is_debug_enabled() is expected
    finally:
        monkeypatch.delenv("GRAPHTRACE_DEBUG")
        importlib.reload(debug_mode)


def test_debug_env_var_validates_runs(monkeypatch) -> None:
    """Test that GRAPHTRACE_DEBUG makes run() reject an inconsistent result."""
    import graphtrace.diagnostics.debug_mode as debug_mode
    import graphtrace.engine as engine

    def incomplete(snapshot, source):
        result = bfs(snapshot, source)
        del result.distance[source]
        return result

    monkeypatch.setitem(engine._HANDLERS, engine.Algorithm.BFS, incomplete)
    monkeypatch.setenv(debug_mode.DEBUG_ENV_VAR, "1")
    try:
        importlib.reload(debug_mode)
        result = engine.run("bfs", [1, 2], [{"source": 1, "target": 2}], source_id=1)
        assert result.error is engine.ErrorKind.INTERNAL_ERROR
    finally:
        monkeypatch.delenv(debug_mode.DEBUG_ENV_VAR)
        importlib.reload(debug_mode)


class TestResultChecks:
    """Tests for result invariant checks."""

    def setup_method(self):
        self.snap = GraphSnapshot.from_editor(
            [1, 2, 3], [{"source": 1, "target": 2}, {"source": 2, "target": 3}]
        )

    def test_valid_results_pass(self):
        assert_valid_result(bfs(self.snap, 1), self.snap)
        assert_valid_result(kruskal_mst(self.snap), self.snap)

    def test_incomplete_map_rejected(self):
        result = bfs(self.snap, 1)
        del result.distance[2]
        with pytest.raises(ValueError, match="distance"):
            assert_complete_node_maps(result, self.snap.node_ids())

    def test_mst_weight_mismatch_rejected(self):
        result = kruskal_mst(self.snap)
        result.total_weight += 1
        with pytest.raises(ValueError, match="total weight"):
            assert_valid_result(result, self.snap)

    def test_mst_too_many_edges_rejected(self):
        result = kruskal_mst(self.snap)
        result.edges.append(MSTEdge(1, 3, 1))
        with pytest.raises(ValueError):
            assert_valid_result(result, self.snap)

    def test_is_forest(self):
        assert is_forest([(1, 2), (2, 3)], [1, 2, 3])
        assert not is_forest([(1, 2), (2, 3), (3, 1)], [1, 2, 3])
        assert not is_forest([(1, 9)], [1, 2])
