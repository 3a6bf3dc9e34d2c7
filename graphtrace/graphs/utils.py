"""
Utility functions for graph algorithms.

Provides helpers for node indexing, path reconstruction, highlight-edge
extraction and trace formatting.
"""

import math
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from .results import HighlightEdge


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create mapping from nodes to indices 0..n-1 in first-seen order.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map([3, 1, 2])
        >>> node_to_idx
        {3: 0, 1: 1, 2: 2}
        >>> idx_to_node
        [3, 1, 2]
    """
    node_to_index: Dict[Hashable, int] = {}
    index_to_node: List[Hashable] = []
    for node in nodes:
        if node not in node_to_index:
            node_to_index[node] = len(index_to_node)
            index_to_node.append(node)
    return node_to_index, index_to_node


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], source: Hashable, target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct path from source to target using parent map.

    The parent map should come from a shortest-path algorithm (BFS,
    Dijkstra) where parent[node] is the previous node on the shortest path,
    or None if node is unreachable or is the source.

    Args:
        parent: Dictionary mapping node -> parent node (or None).
        source: Node the search started from.
        target: Target node to reconstruct path to.

    Returns:
        List of nodes from source to target (inclusive), or None if target
        is not connected to source through the parent map.

    Example:
        >>> parent = {1: None, 2: 1, 3: 2, 4: None}
        >>> reconstruct_path(parent, 1, 3)
        [1, 2, 3]
        >>> reconstruct_path(parent, 1, 4) is None
        True
    """
    if target not in parent:
        return None

    path = []
    current: Optional[Hashable] = target
    visited = set()
    while current is not None:
        if current in visited:
            # Cycle in the parent map
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path if path[0] == source else None


def tree_edges(parent: Dict[int, Optional[int]]) -> List[HighlightEdge]:
    """
    Return (parent, child) edges of a parent map in map order.

    Nodes whose parent is None (the root and unreached nodes) contribute
    nothing.
    """
    return [
        HighlightEdge(source=p, target=node) for node, p in parent.items() if p is not None
    ]


def format_distance(value: float) -> str:
    """Format a distance for traces, rendering infinity as ``∞``."""
    if math.isinf(value):
        return "∞"
    return str(value)


def format_path(path: Iterable[Hashable]) -> str:
    return " → ".join(str(node) for node in path)


def format_id_list(ids: Iterable[Hashable]) -> str:
    return "[" + ", ".join(str(node) for node in ids) + "]"
