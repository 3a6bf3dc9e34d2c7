"""
Example: Running every algorithm on an editor-shaped graph

This example builds the node and link collections the way the graph editor
hands them over, runs each algorithm through the dispatcher and prints the
step trace and highlighted edges. It finishes with a random connected graph
to show that Prim and Kruskal agree on the tree weight.
"""

import numpy as np

from graphtrace import random_snapshot, run


def editor_graph():
    """A small weighted graph with one isolated node."""
    nodes = [{"id": i} for i in range(1, 7)]
    links = [
        {"source": 1, "target": 2, "weight": 7},
        {"source": 1, "target": 3, "weight": 9},
        {"source": 1, "target": 6, "weight": 14},
        {"source": 2, "target": 3, "weight": 10},
        {"source": 3, "target": 6, "weight": 2},
        {"source": 2, "target": 4, "weight": 15},
        {"source": 3, "target": 4, "weight": 11},
    ]
    return nodes, links


def example_all_algorithms():
    """Example: Run every algorithm from node 1."""
    nodes, links = editor_graph()

    for name in ("bfs", "dfs", "dijkstra", "prim", "kruskal"):
        print("=" * 60)
        print(f"Algorithm: {name}")
        print("=" * 60)

        result = run(name, nodes, links, source_id=1)
        if not result.success:
            print(f"Failed: {result.message}")
            continue

        print(result.data.trace)
        edges = ", ".join(f"{e.source}-{e.target}" for e in result.data.highlight_edges)
        print(f"\nHighlighted edges: {edges}")
        print()


def example_reported_errors():
    """Example: Requests the dispatcher rejects."""
    nodes, links = editor_graph()

    print("=" * 60)
    print("Reported errors")
    print("=" * 60)
    for name, args in [
        ("bfs", ([], [], 1)),
        ("dijkstra", (nodes, links, None)),
        ("astar", (nodes, links, 1)),
    ]:
        result = run(name, *args)
        print(f"{name}: [{result.error.value}] {result.message}")
    print()


def example_random_graph():
    """Example: Prim and Kruskal on a random connected graph."""
    snap = random_snapshot(20, edge_probability=0.2, max_weight=50, rng=np.random.default_rng(7), connected=True)
    data = snap.to_dict()

    prim = run("prim", data["nodes"], data["links"], source_id=1).data
    kruskal = run("kruskal", data["nodes"], data["links"]).data

    print("=" * 60)
    print("Random connected graph (20 nodes)")
    print("=" * 60)
    print(f"Edges: {len(snap.edges)}")
    print(f"Prim MST weight: {prim.total_weight}")
    print(f"Kruskal MST weight: {kruskal.total_weight}")


if __name__ == "__main__":
    example_all_algorithms()
    example_reported_errors()
    example_random_graph()
