"""Benchmark the dispatcher on random graphs."""

import time
from typing import Dict

import numpy as np

from graphtrace import Algorithm, random_snapshot, run


def benchmark_algorithm(
    algorithm: Algorithm,
    n_nodes: int,
    edge_probability: float = 0.05,
    n_runs: int = 5,
    seed: int = 0,
) -> Dict[str, float]:
    """Benchmark one algorithm end to end, snapshot building included.

    Args:
        algorithm: Algorithm to run.
        n_nodes: Number of nodes.
        edge_probability: Probability of each node pair being joined.
        n_runs: Number of timed runs.
        seed: Seed for the random graph.

    Returns:
        Dictionary with timing results.
    """
    snap = random_snapshot(
        n_nodes,
        edge_probability=edge_probability,
        max_weight=999,
        rng=np.random.default_rng(seed),
        connected=True,
    )
    data = snap.to_dict()

    # Warmup
    run(algorithm, data["nodes"], data["links"], source_id=1)

    start = time.perf_counter()
    for _ in range(n_runs):
        result = run(algorithm, data["nodes"], data["links"], source_id=1)
    end = time.perf_counter()

    assert result.success, result.message
    total_time = end - start

    return {
        "n_nodes": n_nodes,
        "n_edges": len(snap.edges),
        "total_time_sec": total_time,
        "time_per_run_sec": total_time / n_runs,
    }


if __name__ == "__main__":
    print("Benchmarking graph algorithms...")

    for algorithm in Algorithm:
        results = benchmark_algorithm(algorithm, n_nodes=1000)
        print(f"{algorithm.value} ({results['n_nodes']} nodes, {results['n_edges']} edges):")
        print(f"  Time per run: {results['time_per_run_sec'] * 1e3:.2f} ms")
