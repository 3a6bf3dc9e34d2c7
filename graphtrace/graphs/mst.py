"""
Minimum spanning tree algorithms: Prim and Kruskal.

Kruskal uses the union-find structure for cycle detection. Prim uses the
lazy-deletion priority queue. On a disconnected graph both finish with
fewer than V-1 edges and attach a warning instead of failing.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties) and 23.2 (Kruskal, Prim).
"""

import math
from typing import Dict, List, Optional

from ..logging import get_logger
from .core import GraphSnapshot, build_adjacency_list
from .results import HighlightEdge, MSTEdge, MSTResult
from .structures import PriorityQueue, UnionFind
from .trace import Trace
from .utils import node_index_map

logger = get_logger(__name__)


def _summarize(trace: Trace, mst_edges: List[MSTEdge], total_weight: int) -> None:
    trace.section("Minimum Spanning Tree Complete")
    trace.step(f"Total edges in MST: {len(mst_edges)}")
    trace.step(f"Total weight: {total_weight}")


def _list_edges(trace: Trace, mst_edges: List[MSTEdge]) -> None:
    trace.block("MST Edges:")
    for edge in mst_edges:
        trace.step(f"{edge.source} ↔ {edge.target} (weight: {edge.weight})", depth=1)


def _highlight(mst_edges: List[MSTEdge]) -> List[HighlightEdge]:
    return [HighlightEdge(edge.source, edge.target) for edge in mst_edges]


def prim_mst(snapshot: GraphSnapshot, start: int) -> MSTResult:
    """
    Prim's algorithm for minimum spanning tree.

    Keeps a key per node (cheapest known edge into the tree) and grows the
    tree from ``start`` by repeatedly extracting the minimum-key node.

    Args:
        snapshot: Undirected weighted graph.
        start: Starting node id.

    Returns:
        MSTResult whose edges are (parent, node, weight) in the order nodes
        joined the tree. If some nodes cannot be reached from ``start`` the
        tree is partial and ``warning`` is set.

    Raises:
        ValueError: If start is not in the graph.

    Complexity: O(E log V) using binary heap.

    Example:
        >>> snap = GraphSnapshot.from_editor(
        ...     [1, 2, 3],
        ...     [{"source": 1, "target": 2, "weight": 1}, {"source": 2, "target": 3, "weight": 2}],
        ... )
        >>> prim_mst(snap, 1).total_weight
        3
    """
    if not snapshot.has_node(start):
        raise ValueError(f"Start node {start} not in graph")

    adj = build_adjacency_list(snapshot)
    trace = Trace(logger)

    key: Dict[int, float] = {node: math.inf for node in adj}
    parent: Dict[int, Optional[int]] = {node: None for node in adj}
    in_mst: set = set()
    mst_edges: List[MSTEdge] = []
    total_weight = 0

    key[start] = 0
    pq = PriorityQueue()
    pq.push(start, 0)

    trace.step(f"Starting Prim's algorithm from node {start}")
    trace.step("Building Minimum Spanning Tree...")

    while not pq.is_empty():
        u = pq.pop()

        if u in in_mst:
            continue
        in_mst.add(u)

        if parent[u] is not None:
            weight = int(key[u])
            mst_edges.append(MSTEdge(parent[u], u, weight))
            total_weight += weight
            trace.step(f"Added edge: {parent[u]} → {u} (weight: {weight})")

        for v, weight in adj[u]:
            if v not in in_mst and weight < key[v]:
                key[v] = weight
                parent[v] = u
                pq.push(v, weight)
                trace.step(f"Key of node {v} lowered to {weight} (via node {u})", depth=1)

    _summarize(trace, mst_edges, total_weight)

    warning = None
    node_count = len(snapshot)
    if len(in_mst) < node_count:
        warning = (
            f"Graph is disconnected. MST includes {len(in_mst)} of {node_count} nodes "
            f"({len(mst_edges)} edges, expected {node_count - 1})."
        )
        trace.block(f"Warning: {warning}")
        logger.info(warning)

    _list_edges(trace, mst_edges)

    return MSTResult(
        algorithm="prim",
        edges=mst_edges,
        total_weight=total_weight,
        node_count=node_count,
        trace=trace.text,
        highlight_edges=_highlight(mst_edges),
        warning=warning,
        source=start,
    )


def kruskal_mst(snapshot: GraphSnapshot) -> MSTResult:
    """
    Kruskal's algorithm for minimum spanning tree.

    Edges are considered by ascending weight; equal weights keep the order
    the editor supplied them in. An edge is accepted when its endpoints lie
    in different union-find sets and rejected otherwise, since it would
    close a cycle. Stops as soon as V-1 edges are selected.

    Args:
        snapshot: Undirected weighted graph. No start node is needed.

    Returns:
        MSTResult whose edges are in acceptance order. For a disconnected
        graph the edges form a spanning forest and ``warning`` is set.

    Complexity: O(E log E) = O(E log V) for sorting and union-find operations.

    Example:
        >>> snap = GraphSnapshot.from_editor(
        ...     [1, 2, 3],
        ...     [{"source": 1, "target": 2, "weight": 5},
        ...      {"source": 1, "target": 3, "weight": 3},
        ...      {"source": 2, "target": 3, "weight": 2}],
        ... )
        >>> kruskal_mst(snap).edge_tuples()
        [(2, 3, 2), (1, 3, 3)]
    """
    trace = Trace(logger)
    node_to_index, _ = node_index_map(snapshot.node_ids())
    node_count = len(snapshot)
    target_edges = max(node_count - 1, 0)

    # sorted() is stable, so equal weights keep edge insertion order
    edges = sorted(snapshot.edges, key=lambda e: e.weight)

    trace.step("Starting Kruskal's algorithm")
    trace.step(f"Total edges: {len(edges)}")
    trace.step("Sorted edges by weight:")
    for edge in edges:
        trace.step(f"{edge.source} ↔ {edge.target} (weight: {edge.weight})", depth=1)

    uf = UnionFind(node_count)
    mst_edges: List[MSTEdge] = []
    total_weight = 0

    trace.block("Building MST by adding edges...")

    for edge in edges:
        if len(mst_edges) == target_edges:
            break

        if uf.union(node_to_index[edge.source], node_to_index[edge.target]):
            mst_edges.append(MSTEdge(edge.source, edge.target, edge.weight))
            total_weight += edge.weight
            trace.step(f"✓ Added edge: {edge.source} ↔ {edge.target} (weight: {edge.weight})")
            if len(mst_edges) == target_edges:
                trace.block(f"MST complete ({target_edges} edges for {node_count} nodes)")
        else:
            trace.step(f"✗ Skipped edge: {edge.source} ↔ {edge.target} (would create cycle)")

    _summarize(trace, mst_edges, total_weight)

    warning = None
    if len(mst_edges) < target_edges:
        warning = (
            f"Graph is disconnected. MST has {len(mst_edges)} edges (expected {target_edges})."
        )
        trace.block(f"Warning: {warning}")
        logger.info(warning)

    _list_edges(trace, mst_edges)

    return MSTResult(
        algorithm="kruskal",
        edges=mst_edges,
        total_weight=total_weight,
        node_count=node_count,
        trace=trace.text,
        highlight_edges=_highlight(mst_edges),
        warning=warning,
    )
