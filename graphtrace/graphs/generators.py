"""
Random graph snapshots for tests, benchmarks and demos.

Graphs are Erdős–Rényi style: each unordered node pair becomes an edge
with a fixed probability and a uniform integer weight. Generation is fully
determined by the numpy Generator passed in.
"""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

import numpy as np

from .core import Edge, GraphSnapshot, Node


def random_snapshot(
    n_nodes: int,
    edge_probability: float = 0.3,
    max_weight: int = 10,
    rng: Optional[np.random.Generator] = None,
    connected: bool = False,
) -> GraphSnapshot:
    """
    Generate a random undirected weighted snapshot with node ids 1..n.

    Parameters
    ----------
    n_nodes:
        Number of nodes (may be 0).
    edge_probability:
        Probability that a given node pair is joined, in [0, 1].
    max_weight:
        Weights are drawn uniformly from 1..max_weight.
    rng:
        numpy Generator; a fresh unseeded one is used if None.
    connected:
        If True, a random spanning path is laid down first so every node
        is reachable from every other.

    Returns
    -------
    GraphSnapshot
        Snapshot with at most one edge per node pair and no self-loops.

    Raises
    ------
    ValueError
        If n_nodes is negative, edge_probability is outside [0, 1] or
        max_weight is below 1.
    """
    if n_nodes < 0:
        raise ValueError(f"n_nodes must be non-negative, got {n_nodes}")
    if not 0.0 <= edge_probability <= 1.0:
        raise ValueError(f"edge_probability must be in [0, 1], got {edge_probability}")
    if max_weight < 1:
        raise ValueError(f"max_weight must be at least 1, got {max_weight}")

    if rng is None:
        rng = np.random.default_rng()

    ids = list(range(1, n_nodes + 1))
    edges: List[Edge] = []
    seen: Set[Tuple[int, int]] = set()

    def add(u: int, v: int) -> None:
        pair = (min(u, v), max(u, v))
        if pair in seen:
            return
        seen.add(pair)
        edges.append(Edge(u, v, int(rng.integers(1, max_weight + 1))))

    if connected and n_nodes > 1:
        order = rng.permutation(ids)
        for u, v in zip(order[:-1], order[1:]):
            add(int(u), int(v))

    if n_nodes > 1:
        coins = rng.random((n_nodes, n_nodes))
        for i in range(n_nodes):
            for j in range(i + 1, n_nodes):
                if coins[i, j] < edge_probability:
                    add(ids[i], ids[j])

    return GraphSnapshot(tuple(Node(i) for i in ids), tuple(edges))
