"""
Algorithm dispatcher: the single entry point used by the graph editor.

``run`` takes the editor's current nodes and links, validates the request,
runs the selected algorithm on an immutable snapshot and returns a tagged
RunResult. Failures are reported, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Union

from .diagnostics import assert_valid_result, is_debug_enabled
from .graphs.core import GraphSnapshot
from .graphs.mst import kruskal_mst, prim_mst
from .graphs.results import MSTResult, ShortestPathResult, TraversalResult
from .graphs.shortest import dijkstra
from .graphs.traversal import bfs, dfs
from .logging import get_logger

logger = get_logger(__name__)

AlgorithmResult = Union[TraversalResult, ShortestPathResult, MSTResult]

EMPTY_GRAPH_MESSAGE = "Graph is empty. Please add some nodes first."
UNKNOWN_ALGORITHM_MESSAGE = "Unknown algorithm selected."


class Algorithm(str, Enum):
    """Algorithms the engine can run."""

    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"
    PRIM = "prim"
    KRUSKAL = "kruskal"

    @property
    def requires_source(self) -> bool:
        return self is not Algorithm.KRUSKAL

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, name: Union[str, "Algorithm"]) -> Optional["Algorithm"]:
        """Return the member named ``name`` (case-insensitive), or None."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


_DISPLAY_NAMES = {
    Algorithm.BFS: "BFS",
    Algorithm.DFS: "DFS",
    Algorithm.DIJKSTRA: "Dijkstra's algorithm",
    Algorithm.PRIM: "Prim's algorithm",
    Algorithm.KRUSKAL: "Kruskal's algorithm",
}


class ErrorKind(Enum):
    """Reason a run was rejected."""

    EMPTY_GRAPH = "empty_graph"
    MISSING_SOURCE = "missing_source"
    UNKNOWN_ALGORITHM = "unknown_algorithm"
    INVALID_GRAPH = "invalid_graph"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class RunResult:
    """
    Tagged outcome of ``run``.

    Attributes:
        success: True when the algorithm ran to completion.
        data: Algorithm result on success, else None.
        message: Human-readable failure message, else None.
        error: Failure category, else None.
    """

    success: bool
    data: Optional[AlgorithmResult] = None
    message: Optional[str] = None
    error: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, data: AlgorithmResult) -> "RunResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "RunResult":
        return cls(success=False, message=message, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Return the editor-facing ``{"success", "data" | "message"}`` form."""
        if self.success:
            return {"success": True, "data": self.data.to_dict()}
        return {"success": False, "message": self.message, "error": self.error.value}


Handler = Callable[[GraphSnapshot, Optional[int]], AlgorithmResult]

_HANDLERS: Dict[Algorithm, Handler] = {
    Algorithm.BFS: bfs,
    Algorithm.DFS: dfs,
    Algorithm.DIJKSTRA: dijkstra,
    Algorithm.PRIM: prim_mst,
    Algorithm.KRUSKAL: lambda snapshot, _source: kruskal_mst(snapshot),
}


def handler_for(algorithm: Algorithm) -> Handler:
    return _HANDLERS[algorithm]


def run(
    algorithm: Union[str, Algorithm],
    nodes: Iterable[Any],
    edges: Iterable[Any],
    source_id: Optional[int] = None,
) -> RunResult:
    """
    Run a graph algorithm on the editor's current graph.

    Args:
        algorithm: Algorithm member or name ("bfs", "dfs", "dijkstra",
            "prim", "kruskal").
        nodes: Editor nodes (ids, ``{"id": ...}`` mappings or objects with
            ``id``).
        edges: Editor links with ``source``, ``target`` and optional
            ``weight``.
        source_id: Selected source node. Required by every algorithm except
            Kruskal; 0 is a valid id. Must be an integer id of the graph;
            ``True`` or ``1.0`` is not node 1.

    Returns:
        RunResult. On failure ``error`` is one of EMPTY_GRAPH,
        MISSING_SOURCE, UNKNOWN_ALGORITHM, INVALID_GRAPH or INTERNAL_ERROR.

    Example:
        >>> result = run("kruskal", [1, 2], [{"source": 1, "target": 2, "weight": 3}])
        >>> result.success, result.data.total_weight
        (True, 3)
    """
    try:
        nodes = list(nodes)
        edges = list(edges)
    except TypeError as exc:
        logger.warning("Rejected %r: %s", algorithm, exc)
        return RunResult.fail(ErrorKind.INVALID_GRAPH, f"Invalid graph: {exc}")

    if not nodes:
        logger.warning("Rejected %r: graph is empty", algorithm)
        return RunResult.fail(ErrorKind.EMPTY_GRAPH, EMPTY_GRAPH_MESSAGE)

    selected = Algorithm.parse(algorithm)
    if selected is None:
        logger.warning("Rejected unknown algorithm %r", algorithm)
        return RunResult.fail(ErrorKind.UNKNOWN_ALGORITHM, UNKNOWN_ALGORITHM_MESSAGE)

    try:
        snapshot = GraphSnapshot.from_editor(nodes, edges)
    except (TypeError, ValueError) as exc:
        logger.warning("Rejected %s: %s", selected.value, exc)
        return RunResult.fail(ErrorKind.INVALID_GRAPH, f"Invalid graph: {exc}")

    if selected.requires_source and (source_id is None or not snapshot.has_node(source_id)):
        logger.warning("Rejected %s: source %r is not a node", selected.value, source_id)
        return RunResult.fail(
            ErrorKind.MISSING_SOURCE,
            f"Please select a source node for {selected.display_name}.",
        )

    logger.info(
        "Running %s on %d nodes, %d edges (source=%r)",
        selected.value,
        len(snapshot.nodes),
        len(snapshot.edges),
        source_id,
    )

    try:
        result = handler_for(selected)(snapshot, source_id)
        if is_debug_enabled():
            assert_valid_result(result, snapshot)
    except Exception as exc:
        logger.exception("%s failed", selected.value)
        return RunResult.fail(ErrorKind.INTERNAL_ERROR, f"Error running algorithm: {exc}")

    return RunResult.ok(result)
