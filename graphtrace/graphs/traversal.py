"""
Graph traversal algorithms: BFS and DFS.

Neighbors are visited in adjacency-list order, i.e. the order in which the
editor supplied the edges. DFS runs on an explicit stack so deep graphs do
not hit the interpreter's recursion limit; discovery and finish times are
the same as those of the textbook recursive formulation.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Dict, Iterator, List, Optional, Tuple

from ..logging import get_logger
from .core import GraphSnapshot, build_adjacency_list
from .results import UNREACHABLE, TraversalResult
from .trace import Trace
from .utils import format_id_list, format_path, reconstruct_path, tree_edges

logger = get_logger(__name__)


def _require_source(snapshot: GraphSnapshot, source: int) -> None:
    if not snapshot.has_node(source):
        raise ValueError(f"Source node {source} not in graph")


def bfs(snapshot: GraphSnapshot, source: int) -> TraversalResult:
    """
    Breadth-first search from a source node.

    Records hop distances and BFS-tree parents for every node. A node is
    marked visited when it is enqueued, so it is never enqueued twice.

    Args:
        snapshot: Graph to traverse.
        source: Source node id.

    Returns:
        TraversalResult with ``visited`` in dequeue order, ``distance``
        (inf for unreachable nodes), ``parent`` and ``paths``.

    Raises:
        ValueError: If source is not in the graph.

    Complexity: O(V + E).

    Example:
        >>> snap = GraphSnapshot.from_editor([1, 2, 3], [{"source": 1, "target": 2}])
        >>> result = bfs(snap, 1)
        >>> result.visited
        [1, 2]
        >>> result.distance[3]
        inf
    """
    _require_source(snapshot, source)
    adj = build_adjacency_list(snapshot)
    trace = Trace(logger)

    distance: Dict[int, float] = {node: UNREACHABLE for node in adj}
    parent: Dict[int, Optional[int]] = {node: None for node in adj}
    order: List[int] = []

    distance[source] = 0
    discovered = {source}
    queue = deque([source])

    trace.step(f"Starting BFS from node {source}")
    trace.step(f"Queue: [{source}]")

    while queue:
        u = queue.popleft()
        order.append(u)
        trace.block(f"Visiting node {u} (distance: {distance[u]})")
        trace.step(f"Neighbors: {format_id_list(v for v, _ in adj[u])}", depth=1)

        for v, _ in adj[u]:
            if v not in discovered:
                discovered.add(v)
                distance[v] = distance[u] + 1
                parent[v] = u
                queue.append(v)
                trace.step(f"Added node {v} to queue (distance: {distance[v]})", depth=1)

    paths = {node: reconstruct_path(parent, source, node) for node in adj}

    trace.section("BFS Traversal Complete")
    trace.step(f"Visited {len(order)} nodes")
    trace.block("Distances from source:")
    for node in adj:
        if paths[node] is None:
            trace.step(f"Node {node}: unreachable")
        else:
            trace.step(f"Node {node}: {distance[node]} hops [Path: {format_path(paths[node])}]")

    return TraversalResult(
        algorithm="bfs",
        source=source,
        visited=order,
        parent=parent,
        trace=trace.text,
        highlight_edges=tree_edges(parent),
        distance=distance,
        paths=paths,
    )


def dfs(snapshot: GraphSnapshot, source: int) -> TraversalResult:
    """
    Depth-first search from a source node with discovery/finish times.

    A single clock ticks once when a node is discovered and once when it
    finishes. Edges to already-visited nodes are logged as back edges and
    not followed. The trace is indented by recursion depth.

    Args:
        snapshot: Graph to traverse.
        source: Source node id.

    Returns:
        TraversalResult with ``visited`` in discovery order, ``parent``,
        ``discovery`` and ``finish`` (None for unreachable nodes).

    Raises:
        ValueError: If source is not in the graph.

    Complexity: O(V + E).

    Example:
        >>> snap = GraphSnapshot.from_editor([1, 2], [{"source": 1, "target": 2}])
        >>> result = dfs(snap, 1)
        >>> result.discovery, result.finish
        ({1: 1, 2: 2}, {1: 4, 2: 3})
    """
    _require_source(snapshot, source)
    adj = build_adjacency_list(snapshot)
    trace = Trace(logger)

    parent: Dict[int, Optional[int]] = {node: None for node in adj}
    discovery: Dict[int, Optional[int]] = {node: None for node in adj}
    finish: Dict[int, Optional[int]] = {node: None for node in adj}
    order: List[int] = []
    visited: set = set()
    time = 0

    trace.step(f"Starting DFS from node {source}")

    def discover(u: int, depth: int) -> None:
        nonlocal time
        visited.add(u)
        order.append(u)
        time += 1
        discovery[u] = time
        trace.step(f"Discovered node {u} at time {time}", depth=depth)

    # Each frame is (node, iterator over its remaining neighbors)
    discover(source, 0)
    stack: List[Tuple[int, Iterator[Tuple[int, int]]]] = [(source, iter(adj[source]))]

    while stack:
        u, neighbors = stack[-1]
        depth = len(stack) - 1

        for v, _ in neighbors:
            if v not in visited:
                parent[v] = u
                trace.step(f"Exploring edge {u} → {v}", depth=depth + 1)
                discover(v, depth + 1)
                stack.append((v, iter(adj[v])))
                break
            trace.step(f"Node {v} already visited (back edge)", depth=depth + 1)
        else:
            stack.pop()
            time += 1
            finish[u] = time
            trace.step(f"Finished node {u} at time {time}", depth=depth)

    unreachable = [node for node in adj if node not in visited]
    if unreachable:
        trace.block(f"Unreachable nodes: {format_id_list(unreachable)}")

    trace.section("DFS Traversal Complete")
    trace.step(f"Visited {len(order)} nodes")
    trace.block("Discovery/Finish times:")
    for node in adj:
        if node in visited:
            trace.step(
                f"Node {node}: discovered at {discovery[node]}, finished at {finish[node]}"
            )

    return TraversalResult(
        algorithm="dfs",
        source=source,
        visited=order,
        parent=parent,
        trace=trace.text,
        highlight_edges=tree_edges(parent),
        discovery=discovery,
        finish=finish,
    )
