"""Tests for graph utility functions and trace recording."""

import logging
import math

from graphtrace.graphs import HighlightEdge, Trace, node_index_map, reconstruct_path, tree_edges
from graphtrace.graphs.utils import format_distance, format_id_list, format_path


class TestNodeIndexMap:
    """Tests for node_index_map function."""

    def test_node_index_map_first_seen_order(self):
        """Test that indices follow first-seen order."""
        node_to_idx, idx_to_node = node_index_map([7, 3, 5])

        assert node_to_idx == {7: 0, 3: 1, 5: 2}
        assert idx_to_node == [7, 3, 5]

    def test_node_index_map_duplicates(self):
        """Test that duplicates are handled."""
        node_to_idx, idx_to_node = node_index_map([1, 2, 1, 3])

        assert len(node_to_idx) == 3
        assert idx_to_node == [1, 2, 3]


class TestReconstructPath:
    """Tests for reconstruct_path function."""

    def test_reconstruct_path_simple(self):
        """Test path reconstruction on a chain."""
        parent = {1: None, 2: 1, 3: 2}
        assert reconstruct_path(parent, 1, 3) == [1, 2, 3]

    def test_reconstruct_path_source(self):
        """Test that the source's path is itself."""
        assert reconstruct_path({1: None}, 1, 1) == [1]

    def test_reconstruct_path_unreachable(self):
        """Test that nodes outside the source's tree have no path."""
        parent = {1: None, 2: 1, 3: None}
        assert reconstruct_path(parent, 1, 3) is None

    def test_reconstruct_path_missing_target(self):
        """Test that unknown targets have no path."""
        assert reconstruct_path({1: None}, 1, 9) is None

    def test_reconstruct_path_cycle(self):
        """Test that a cyclic parent map yields None."""
        parent = {1: 2, 2: 1}
        assert reconstruct_path(parent, 1, 2) is None


class TestTreeEdges:
    """Tests for tree_edges function."""

    def test_tree_edges(self):
        """Test that tree edges follow parent map order."""
        parent = {1: None, 2: 1, 3: 1, 4: None}
        assert tree_edges(parent) == [HighlightEdge(1, 2), HighlightEdge(1, 3)]


class TestFormatting:
    """Tests for trace formatting helpers."""

    def test_format_distance(self):
        assert format_distance(3) == "3"
        assert format_distance(math.inf) == "∞"

    def test_format_path(self):
        assert format_path([1, 2, 3]) == "1 → 2 → 3"

    def test_format_id_list(self):
        assert format_id_list([]) == "[]"
        assert format_id_list([4, 5]) == "[4, 5]"


class TestTrace:
    """Tests for the Trace recorder."""

    def test_indentation_and_sections(self):
        """Test depth indentation, blocks and banners."""
        trace = Trace()
        trace.step("start")
        trace.step("child", depth=2)
        trace.section("Done")

        assert trace.text == "start\n    child\n\n--- Done ---"
        assert trace.lines == ["start", "    child", "", "--- Done ---"]
        assert len(trace) == 4
        assert str(trace) == trace.text

    def test_recorded_lines_are_single_lines(self):
        """Test that block separators are recorded as their own empty line."""
        trace = Trace()
        trace.step("Starting")
        trace.block("Visiting node 1")
        trace.section("Done")

        assert trace.lines == ["Starting", "", "Visiting node 1", "", "--- Done ---"]
        assert all("\n" not in line for line in trace.lines)

    def test_separator_not_logged(self, caplog):
        """Test that each block logs one record with no embedded newline."""
        logger = logging.getLogger("graphtrace_test_trace_block")
        logger.setLevel(logging.DEBUG)
        trace = Trace(logger)

        with caplog.at_level(logging.DEBUG, logger="graphtrace_test_trace_block"):
            trace.step("Starting")
            trace.section("Done")

        assert caplog.messages == ["Starting", "--- Done ---"]

    def test_lines_are_mirrored_to_logger(self, caplog):
        """Test that each line is logged at DEBUG level."""
        logger = logging.getLogger("graphtrace_test_trace")
        logger.setLevel(logging.DEBUG)
        trace = Trace(logger)

        with caplog.at_level(logging.DEBUG, logger="graphtrace_test_trace"):
            trace.step("hello", depth=1)

        assert "  hello" in caplog.messages
