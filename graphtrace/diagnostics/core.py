"""Structural checks for algorithm results."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, Union

from ..graphs.core import GraphSnapshot
from ..graphs.results import MSTResult, ShortestPathResult, TraversalResult
from ..graphs.structures import UnionFind
from ..graphs.utils import node_index_map

AlgorithmResult = Union[TraversalResult, ShortestPathResult, MSTResult]

_NODE_MAP_FIELDS = ("parent", "distance", "paths", "discovery", "finish")


def assert_complete_node_maps(result: AlgorithmResult, node_ids: Iterable[int]) -> None:
    """
    Assert that every per-node map of a result is keyed by exactly the
    snapshot's node ids.

    Parameters
    ----------
    result:
        Traversal or shortest-path result. MST results carry no per-node
        maps and pass trivially.
    node_ids:
        Node ids present at call time.

    Raises
    ------
    ValueError
        If a map is missing a node or holds an unknown one.
    """
    expected = set(node_ids)
    for name in _NODE_MAP_FIELDS:
        mapping = getattr(result, name, None)
        if mapping is None:
            continue
        keys = set(mapping)
        if keys != expected:
            missing = sorted(expected - keys)
            extra = sorted(keys - expected)
            raise ValueError(
                f"{result.algorithm} result map '{name}' does not cover the graph. "
                f"Missing: {missing}, unexpected: {extra}"
            )


def is_forest(edges: Sequence[Tuple[int, int]], node_ids: Sequence[int]) -> bool:
    """
    Check whether a set of undirected edges is acyclic over the given nodes.

    Returns
    -------
    bool
        True if no edge closes a cycle and all endpoints are known nodes.
    """
    node_to_index, _ = node_index_map(node_ids)
    uf = UnionFind(len(node_to_index))
    for u, v in edges:
        if u not in node_to_index or v not in node_to_index:
            return False
        if not uf.union(node_to_index[u], node_to_index[v]):
            return False
    return True


def assert_valid_result(result: AlgorithmResult, snapshot: GraphSnapshot) -> None:
    """
    Assert the structural invariants of an algorithm result.

    Parameters
    ----------
    result:
        Result returned by one of the algorithms.
    snapshot:
        Snapshot the algorithm ran on.

    Raises
    ------
    ValueError
        If per-node maps are incomplete, highlighted edges do not form a
        forest, or MST bookkeeping is inconsistent.
    """
    node_ids = snapshot.node_ids()
    assert_complete_node_maps(result, node_ids)

    highlighted: List[Tuple[int, int]] = [(e.source, e.target) for e in result.highlight_edges]
    if not is_forest(highlighted, node_ids):
        raise ValueError(f"{result.algorithm} highlighted edges contain a cycle")

    if isinstance(result, MSTResult):
        if len(result.edges) > result.expected_edge_count:
            raise ValueError(
                f"{result.algorithm} selected {len(result.edges)} edges for "
                f"{result.node_count} nodes"
            )
        weight = sum(edge.weight for edge in result.edges)
        if weight != result.total_weight:
            raise ValueError(
                f"{result.algorithm} total weight {result.total_weight} does not match "
                f"the selected edges ({weight})"
            )
        if result.spanning == (result.warning is not None):
            raise ValueError(f"{result.algorithm} disconnected warning is inconsistent")
    elif result.source not in node_ids:
        raise ValueError(f"{result.algorithm} source {result.source} not in graph")
