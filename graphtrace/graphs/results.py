"""
Result containers returned by the graph algorithms.

Every result carries the multi-line ``trace`` and the ``highlight_edges``
the editor emphasizes on the drawing surface. Per-node maps hold an entry
for every node of the snapshot, reached or not.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

UNREACHABLE = math.inf


@dataclass(frozen=True)
class HighlightEdge:
    """Edge to emphasize on the drawing surface."""

    source: int
    target: int

    def to_dict(self) -> Dict[str, int]:
        return {"source": self.source, "target": self.target}


@dataclass(frozen=True)
class MSTEdge:
    """Edge selected into a minimum spanning tree."""

    source: int
    target: int
    weight: int

    def to_dict(self) -> Dict[str, int]:
        return {"source": self.source, "target": self.target, "weight": self.weight}


def _finite_or_none(value: float) -> Optional[float]:
    return None if math.isinf(value) else value


def _keyed(mapping: Optional[Dict[int, Any]]) -> Optional[Dict[str, Any]]:
    if mapping is None:
        return None
    return {str(k): v for k, v in mapping.items()}


@dataclass
class TraversalResult:
    """
    Result of BFS or DFS.

    Attributes:
        algorithm: "bfs" or "dfs".
        source: Start node id.
        visited: Reached node ids in visitation order.
        parent: node -> traversal-tree parent (None for source/unreached).
        trace: Multi-line description of every step.
        highlight_edges: Traversal-tree edges.
        distance: BFS hop counts (inf for unreached); None for DFS.
        paths: BFS hop-shortest paths (None for unreached); None for DFS.
        discovery: DFS discovery times (None for unreached); None for BFS.
        finish: DFS finish times (None for unreached); None for BFS.
    """

    algorithm: str
    source: int
    visited: List[int]
    parent: Dict[int, Optional[int]]
    trace: str
    highlight_edges: List[HighlightEdge] = field(default_factory=list)
    distance: Optional[Dict[int, float]] = None
    paths: Optional[Dict[int, Optional[List[int]]]] = None
    discovery: Optional[Dict[int, Optional[int]]] = None
    finish: Optional[Dict[int, Optional[int]]] = None

    @property
    def unreachable(self) -> List[int]:
        """Node ids not reached from the source, in snapshot order."""
        reached = set(self.visited)
        return [node for node in self.parent if node not in reached]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "algorithm": self.algorithm,
            "source": self.source,
            "visited": list(self.visited),
            "parent": _keyed(self.parent),
            "unreachable": self.unreachable,
            "trace": self.trace,
            "highlightEdges": [edge.to_dict() for edge in self.highlight_edges],
        }
        if self.distance is not None:
            data["distance"] = _keyed({k: _finite_or_none(v) for k, v in self.distance.items()})
        if self.paths is not None:
            data["paths"] = _keyed(self.paths)
        if self.discovery is not None:
            data["discoveryTime"] = _keyed(self.discovery)
        if self.finish is not None:
            data["finishTime"] = _keyed(self.finish)
        return data


@dataclass
class ShortestPathResult:
    """
    Result of Dijkstra's algorithm.

    Attributes:
        algorithm: "dijkstra".
        source: Source node id.
        distance: node -> shortest distance (inf when unreachable).
        parent: node -> predecessor on the shortest path (None for source/unreached).
        paths: node -> path from source (None when unreachable).
        trace: Multi-line description of every step.
        highlight_edges: Shortest-path-tree edges.
    """

    algorithm: str
    source: int
    distance: Dict[int, float]
    parent: Dict[int, Optional[int]]
    paths: Dict[int, Optional[List[int]]]
    trace: str
    highlight_edges: List[HighlightEdge] = field(default_factory=list)

    @property
    def unreachable(self) -> List[int]:
        return [node for node, d in self.distance.items() if math.isinf(d)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "source": self.source,
            "distance": _keyed({k: _finite_or_none(v) for k, v in self.distance.items()}),
            "parent": _keyed(self.parent),
            "paths": _keyed(self.paths),
            "unreachable": self.unreachable,
            "trace": self.trace,
            "highlightEdges": [edge.to_dict() for edge in self.highlight_edges],
        }


@dataclass
class MSTResult:
    """
    Result of Prim's or Kruskal's algorithm.

    A disconnected graph is not an error: the result holds the partial tree
    (Prim) or spanning forest (Kruskal), ``spanning`` is False and
    ``warning`` explains the shortfall.

    Attributes:
        algorithm: "prim" or "kruskal".
        edges: Selected edges in selection order.
        total_weight: Sum of selected edge weights.
        node_count: Number of nodes in the snapshot.
        trace: Multi-line description of every step.
        highlight_edges: Selected edges.
        warning: Disconnected-graph warning, None when spanning.
        source: Start node for Prim, None for Kruskal.
    """

    algorithm: str
    edges: List[MSTEdge]
    total_weight: int
    node_count: int
    trace: str
    highlight_edges: List[HighlightEdge] = field(default_factory=list)
    warning: Optional[str] = None
    source: Optional[int] = None

    @property
    def expected_edge_count(self) -> int:
        return max(self.node_count - 1, 0)

    @property
    def spanning(self) -> bool:
        return len(self.edges) == self.expected_edge_count

    @property
    def component_count(self) -> int:
        """Number of trees in the selected forest, isolated nodes included."""
        return self.node_count - len(self.edges)

    def edge_tuples(self) -> List[Tuple[int, int, int]]:
        return [(e.source, e.target, e.weight) for e in self.edges]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "source": self.source,
            "mstEdges": [edge.to_dict() for edge in self.edges],
            "totalWeight": self.total_weight,
            "spanning": self.spanning,
            "warning": self.warning,
            "trace": self.trace,
            "highlightEdges": [edge.to_dict() for edge in self.highlight_edges],
        }
