"""
Graph algorithms package for graphtrace.

This package provides the classical algorithms run over the editor's graph:
- Snapshot and adjacency structures (GraphSnapshot, Node, Edge)
- Union-find and priority queue
- Traversal algorithms (BFS, DFS)
- Shortest paths (Dijkstra)
- Minimum spanning trees (Prim, Kruskal)

Every algorithm returns a result carrying a step-by-step trace and the
edges to highlight. Neighbor order follows edge insertion order.
"""

from .core import Edge, GraphSnapshot, Node, build_adjacency_list
from .generators import random_snapshot
from .mst import kruskal_mst, prim_mst
from .results import (
    UNREACHABLE,
    HighlightEdge,
    MSTEdge,
    MSTResult,
    ShortestPathResult,
    TraversalResult,
)
from .shortest import dijkstra
from .structures import PriorityQueue, UnionFind
from .trace import Trace
from .traversal import bfs, dfs
from .utils import node_index_map, reconstruct_path, tree_edges

__all__ = [
    "Node",
    "Edge",
    "GraphSnapshot",
    "build_adjacency_list",
    "UnionFind",
    "PriorityQueue",
    "Trace",
    "bfs",
    "dfs",
    "dijkstra",
    "prim_mst",
    "kruskal_mst",
    "random_snapshot",
    "UNREACHABLE",
    "HighlightEdge",
    "MSTEdge",
    "TraversalResult",
    "ShortestPathResult",
    "MSTResult",
    "node_index_map",
    "reconstruct_path",
    "tree_edges",
]

# Example usage:
# from graphtrace.graphs import GraphSnapshot, dijkstra
#
# snap = GraphSnapshot.from_editor(
#     [1, 2, 3],
#     [{"source": 1, "target": 2, "weight": 5}, {"source": 2, "target": 3, "weight": 1}],
# )
# result = dijkstra(snap, 1)
# result.paths[3]  # [1, 2, 3]
