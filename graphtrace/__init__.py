"""graphtrace - classical graph algorithms with step-by-step traces for an interactive graph editor."""

__version__ = "0.1.0"

from .diagnostics import (
    assert_complete_node_maps,
    assert_valid_result,
    debug_context,
    is_debug_enabled,
    is_forest,
    set_debug_enabled,
)
from .engine import (
    Algorithm,
    ErrorKind,
    RunResult,
    run,
)
from .graphs import (
    UNREACHABLE,
    Edge,
    GraphSnapshot,
    HighlightEdge,
    MSTEdge,
    MSTResult,
    Node,
    PriorityQueue,
    ShortestPathResult,
    Trace,
    TraversalResult,
    UnionFind,
    bfs,
    build_adjacency_list,
    dfs,
    dijkstra,
    kruskal_mst,
    node_index_map,
    prim_mst,
    random_snapshot,
    reconstruct_path,
    tree_edges,
)
from .logging import configure_logging, enable_trace_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Engine
    "run",
    "Algorithm",
    "ErrorKind",
    "RunResult",
    # Graph structures
    "Node",
    "Edge",
    "GraphSnapshot",
    "build_adjacency_list",
    "UnionFind",
    "PriorityQueue",
    "Trace",
    # Algorithms
    "bfs",
    "dfs",
    "dijkstra",
    "prim_mst",
    "kruskal_mst",
    "random_snapshot",
    # Results
    "UNREACHABLE",
    "HighlightEdge",
    "MSTEdge",
    "TraversalResult",
    "ShortestPathResult",
    "MSTResult",
    "node_index_map",
    "reconstruct_path",
    "tree_edges",
    # Diagnostics
    "assert_complete_node_maps",
    "assert_valid_result",
    "is_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "enable_trace_logging",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
