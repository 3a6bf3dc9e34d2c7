"""
Shortest path algorithm: Dijkstra.

Weights are positive integers (enforced when the snapshot is built), so the
label-setting invariant holds: once a node is popped and finalized its
distance never changes.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from typing import Dict, Optional

from ..logging import get_logger
from .core import GraphSnapshot, build_adjacency_list
from .results import UNREACHABLE, ShortestPathResult
from .structures import PriorityQueue
from .trace import Trace
from .utils import format_distance, format_path, reconstruct_path, tree_edges

logger = get_logger(__name__)


def dijkstra(snapshot: GraphSnapshot, source: int) -> ShortestPathResult:
    """
    Dijkstra's algorithm for single-source shortest paths.

    The priority queue has no decrease-key: an improved node is pushed
    again and stale entries are skipped when popped, by checking the
    finalized set.

    Args:
        snapshot: Graph with positive edge weights.
        source: Source node id.

    Returns:
        ShortestPathResult with ``distance`` (inf if unreachable),
        ``parent`` (predecessor or None) and ``paths``.

    Raises:
        ValueError: If source is not in the graph.

    Complexity: O(E log V) using binary heap priority queue.

    Example:
        >>> snap = GraphSnapshot.from_editor(
        ...     [1, 2, 3],
        ...     [{"source": 1, "target": 2, "weight": 1}, {"source": 2, "target": 3, "weight": 2}],
        ... )
        >>> dijkstra(snap, 1).distance
        {1: 0, 2: 1, 3: 3}
    """
    if not snapshot.has_node(source):
        raise ValueError(f"Source node {source} not in graph")

    adj = build_adjacency_list(snapshot)
    trace = Trace(logger)

    dist: Dict[int, float] = {node: UNREACHABLE for node in adj}
    parent: Dict[int, Optional[int]] = {node: None for node in adj}
    dist[source] = 0

    pq = PriorityQueue()
    pq.push(source, 0)
    finalized: set = set()

    trace.step(f"Starting Dijkstra's algorithm from node {source}")
    initial = ", ".join(f"{node}: {format_distance(d)}" for node, d in dist.items())
    trace.step(f"Initial distances: {{{initial}}}")

    while not pq.is_empty():
        u = pq.pop()

        if u in finalized:
            continue
        finalized.add(u)

        trace.block(f"Visiting node {u} (distance: {dist[u]})")

        for v, weight in adj[u]:
            if v in finalized:
                continue

            new_dist = dist[u] + weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                pq.push(v, new_dist)
                trace.step(f"Updated distance to node {v}: {new_dist} (via node {u})", depth=1)

    paths = {node: reconstruct_path(parent, source, node) for node in adj}

    trace.section("Final Shortest Paths")
    for node in adj:
        if node == source:
            trace.step(f"Node {node}: 0 (source)")
        elif paths[node] is None:
            trace.step(f"Node {node}: unreachable")
        else:
            trace.step(f"Node {node}: {dist[node]} [Path: {format_path(paths[node])}]")

    return ShortestPathResult(
        algorithm="dijkstra",
        source=source,
        distance=dist,
        parent=parent,
        paths=paths,
        trace=trace.text,
        highlight_edges=tree_edges(parent),
    )
