"""Pytest configuration and shared fixtures for algokit tests.

This module provides:
- A deterministic numpy RNG for generating sort inputs
- The six-vertex undirected example graph used across graph tests
"""

import os

import numpy as np
import pytest

from algokit.graphs import Edge, UndirectedAdjacencyList, Vertex


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This keeps random inputs reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def six_vertices():
    """Vertices 1..6 keyed by id."""
    return {i: Vertex(i) for i in range(1, 7)}


@pytest.fixture
def six_edges(six_vertices):
    """The eight unit-weight edges of the connected six-vertex example."""
    v = six_vertices
    pairs = [(1, 2), (1, 3), (2, 3), (2, 4), (2, 5), (3, 5), (4, 6), (5, 6)]
    return [Edge.undirected(v[a], v[b]) for a, b in pairs]


@pytest.fixture
def six_vertex_graph(six_edges):
    """Undirected adjacency list built from six_edges in order."""
    return UndirectedAdjacencyList(six_edges)
