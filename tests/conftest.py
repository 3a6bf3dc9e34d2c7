"""Pytest configuration and shared fixtures for graphtrace tests.

This module provides:
- A deterministic numpy RNG fixture for random graph generation
- Small editor-shaped graphs used across test modules
"""

import os

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def triangle():
    """Nodes and links of the weighted triangle 1-2 (5), 1-3 (3), 2-3 (2)."""
    nodes = [{"id": 1}, {"id": 2}, {"id": 3}]
    links = [
        {"source": 1, "target": 2, "weight": 5},
        {"source": 1, "target": 3, "weight": 3},
        {"source": 2, "target": 3, "weight": 2},
    ]
    return nodes, links


@pytest.fixture
def split_graph():
    """Nodes and links of two components {1, 2} and {3}."""
    nodes = [{"id": 1}, {"id": 2}, {"id": 3}]
    links = [{"source": 1, "target": 2, "weight": 1}]
    return nodes, links
