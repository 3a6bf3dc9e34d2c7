"""Invariant checks over random graphs."""

import math

import pytest

from graphtrace.diagnostics import assert_valid_result, is_forest
from graphtrace.graphs import (
    bfs,
    build_adjacency_list,
    dfs,
    dijkstra,
    kruskal_mst,
    prim_mst,
    random_snapshot,
)

SIZES = [1, 2, 5, 12, 25]


@pytest.mark.parametrize("n", SIZES)
@pytest.mark.parametrize("p", [0.1, 0.4])
def test_every_map_covers_every_node(rng, n, p):
    """Test that per-node maps are complete, reached or not."""
    snap = random_snapshot(n, edge_probability=p, rng=rng)
    source = snap.node_ids()[0]

    for result in (bfs(snap, source), dfs(snap, source), dijkstra(snap, source)):
        assert_valid_result(result, snap)
    for result in (prim_mst(snap, source), kruskal_mst(snap)):
        assert_valid_result(result, snap)


@pytest.mark.parametrize("n", SIZES)
def test_bfs_distances_are_hop_counts(rng, n):
    """Test that each reached node is one hop past its BFS parent and no
    neighbor offers a shortcut."""
    snap = random_snapshot(n, edge_probability=0.3, rng=rng)
    adj = build_adjacency_list(snap)
    result = bfs(snap, 1)

    for node in result.visited:
        if node == 1:
            continue
        neighbor_dists = [result.distance[v] for v, _ in adj[node]]
        assert result.distance[node] == 1 + min(neighbor_dists)
        assert result.distance[node] == result.distance[result.parent[node]] + 1


@pytest.mark.parametrize("n", SIZES)
def test_dijkstra_relaxation_fixpoint(rng, n):
    """Test dist[v] <= dist[u] + w on every edge with a reached endpoint."""
    snap = random_snapshot(n, edge_probability=0.35, max_weight=20, rng=rng)
    dist = dijkstra(snap, 1).distance

    for edge in snap.edges:
        u, v, w = edge.source, edge.target, edge.weight
        assert dist[v] <= dist[u] + w
        assert dist[u] <= dist[v] + w


@pytest.mark.parametrize("n", SIZES)
def test_dijkstra_matches_bfs_on_unit_weights(rng, n):
    """Test that unit weights make Dijkstra distances equal hop counts."""
    snap = random_snapshot(n, edge_probability=0.3, max_weight=1, rng=rng)

    assert dijkstra(snap, 1).distance == bfs(snap, 1).distance


@pytest.mark.parametrize("n", SIZES)
def test_prim_and_kruskal_agree_on_connected_graphs(rng, n):
    """Test equal MST weight for both algorithms on connected graphs."""
    snap = random_snapshot(n, edge_probability=0.3, max_weight=9, rng=rng, connected=True)

    prim = prim_mst(snap, 1)
    kruskal = kruskal_mst(snap)

    assert prim.spanning and kruskal.spanning
    assert prim.total_weight == kruskal.total_weight
    assert is_forest([(e.source, e.target) for e in prim.edges], snap.node_ids())
    assert is_forest([(e.source, e.target) for e in kruskal.edges], snap.node_ids())


@pytest.mark.parametrize("n", SIZES)
def test_reachability_agrees(rng, n):
    """Test that BFS, DFS, Dijkstra and Prim reach the same node set."""
    snap = random_snapshot(n, edge_probability=0.15, rng=rng)

    reached = set(bfs(snap, 1).visited)
    assert set(dfs(snap, 1).visited) == reached
    assert {v for v, d in dijkstra(snap, 1).distance.items() if not math.isinf(d)} == reached
    assert len(prim_mst(snap, 1).edges) == len(reached) - 1


def test_runs_are_idempotent(rng):
    """Test that repeated runs on one snapshot give identical results."""
    snap = random_snapshot(15, edge_probability=0.3, rng=rng)

    for algorithm in (bfs, dfs, dijkstra, prim_mst):
        assert algorithm(snap, 1) == algorithm(snap, 1)
    assert kruskal_mst(snap) == kruskal_mst(snap)
