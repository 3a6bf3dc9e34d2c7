"""
Core graph data structures.

Provides the immutable GraphSnapshot handed to every algorithm, the Node and
Edge records it is made of, and the adjacency-list builder. Edges are
undirected and weighted with positive integers. Neighbor order follows the
order in which edges were supplied, so traversal results are deterministic
for a given snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

DEFAULT_WEIGHT = 1

AdjacencyList = Dict[int, List[Tuple[int, int]]]


@dataclass(frozen=True)
class Node:
    """A graph vertex identified by an integer id."""

    id: int


@dataclass(frozen=True)
class Edge:
    """
    Undirected weighted edge between two node ids.

    Attributes:
        source: First endpoint, as supplied by the editor.
        target: Second endpoint.
        weight: Positive integer weight (default 1).
    """

    source: int
    target: int
    weight: int = DEFAULT_WEIGHT

    def endpoints(self) -> Tuple[int, int]:
        """Return the endpoints as a (source, target) tuple."""
        return self.source, self.target

    def to_dict(self) -> Dict[str, int]:
        return {"source": self.source, "target": self.target, "weight": self.weight}


def _field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def _resolve_id(value: Any) -> Any:
    """Return the node id referenced by value (a bare id or a node-like value)."""
    if isinstance(value, Integral) and not isinstance(value, bool):
        return int(value)
    node_id = _field(value, "id")
    if node_id is None:
        raise ValueError(f"Cannot resolve a node id from {value!r}")
    return _resolve_id(node_id)


def _validate_weight(weight: Any, source: int, target: int) -> int:
    if weight is None:
        return DEFAULT_WEIGHT
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise ValueError(
            f"Edge ({source}, {target}) has non-integer weight {weight!r}"
        )
    if weight < 1:
        raise ValueError(
            f"Edge weights must be positive. Found weight {weight} on edge ({source}, {target})"
        )
    return int(weight)


@dataclass(frozen=True)
class GraphSnapshot:
    """
    Read-only view of the editor's graph for a single algorithm call.

    The snapshot owns copies of the node and edge records; the caller's
    collections are neither mutated nor referenced after construction.

    Attributes:
        nodes: Nodes in the order the editor supplied them.
        edges: Edges in the order the editor supplied them.

    Complexity:
        - from_editor: O(V + E)
        - has_node: O(V)
    """

    nodes: Tuple[Node, ...] = ()
    edges: Tuple[Edge, ...] = ()

    @classmethod
    def from_editor(cls, nodes: Iterable[Any], links: Iterable[Any] = ()) -> "GraphSnapshot":
        """
        Build a validated snapshot from editor-shaped collections.

        Nodes may be bare integer ids, mappings with an ``"id"`` key, or
        objects with an ``id`` attribute. Links may be mappings or objects
        with ``source``, ``target`` and an optional ``weight``; endpoints may
        be ids or node-like values.

        Args:
            nodes: Node collection.
            links: Edge collection.

        Returns:
            GraphSnapshot holding copies of the supplied data.

        Raises:
            ValueError: If a node id is duplicated, an edge references an
                unknown node, or an edge weight is not a positive integer.
        """
        node_list: List[Node] = []
        seen: set = set()
        for raw in nodes:
            node_id = _resolve_id(raw)
            if node_id in seen:
                raise ValueError(f"Duplicate node id {node_id}")
            seen.add(node_id)
            node_list.append(Node(node_id))

        edge_list: List[Edge] = []
        for raw in links:
            source = _resolve_id(_field(raw, "source"))
            target = _resolve_id(_field(raw, "target"))
            for endpoint in (source, target):
                if endpoint not in seen:
                    raise ValueError(
                        f"Edge ({source}, {target}) references unknown node {endpoint}"
                    )
            weight = _validate_weight(_field(raw, "weight"), source, target)
            edge_list.append(Edge(source, target, weight))

        return cls(tuple(node_list), tuple(edge_list))

    def node_ids(self) -> List[int]:
        """Return node ids in snapshot order."""
        return [node.id for node in self.nodes]

    def has_node(self, node_id: Optional[int]) -> bool:
        """Return True if ``node_id`` is an integer id present in the snapshot.

        Bools and floats never match, even when they compare equal to an id.
        """
        if isinstance(node_id, bool) or not isinstance(node_id, Integral):
            return False
        return any(node.id == node_id for node in self.nodes)

    def is_empty(self) -> bool:
        return not self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def to_dict(self) -> Dict[str, List[Dict[str, int]]]:
        """Return the snapshot in the editor's ``{"nodes", "links"}`` shape."""
        return {
            "nodes": [{"id": node.id} for node in self.nodes],
            "links": [edge.to_dict() for edge in self.edges],
        }


def build_adjacency_list(snapshot: GraphSnapshot) -> AdjacencyList:
    """
    Build a symmetric adjacency list from a snapshot.

    Every node gets an entry, isolated nodes included. Each undirected edge
    contributes (neighbor, weight) to both endpoints, in edge order.

    Args:
        snapshot: Graph snapshot.

    Returns:
        Dictionary mapping node id -> list of (neighbor id, weight) tuples.

    Complexity: O(V + E).

    Example:
        >>> snap = GraphSnapshot.from_editor([1, 2, 3], [{"source": 1, "target": 2, "weight": 4}])
        >>> build_adjacency_list(snap)
        {1: [(2, 4)], 2: [(1, 4)], 3: []}
    """
    adj: AdjacencyList = {node.id: [] for node in snapshot.nodes}
    for edge in snapshot.edges:
        adj[edge.source].append((edge.target, edge.weight))
        adj[edge.target].append((edge.source, edge.weight))
    return adj
