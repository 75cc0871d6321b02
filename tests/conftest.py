"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from pathviz.data import get_sample_graph
from pathviz.graph import Edge, Graph, Node


def build_graph(positions: dict[str, tuple[float, float]], edges: list[tuple[str, str, float]]) -> Graph:
    """Graph from {id: (x, y)} and [(from, to, weight)]; labels equal ids."""
    return Graph(
        [Node(node_id, node_id, x, y) for node_id, (x, y) in positions.items()],
        [Edge(a, b, w) for a, b, w in edges],
    )


@pytest.fixture
def graph_factory():
    """Factory fixture wrapping build_graph."""
    return build_graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def simple_graph() -> Graph:
    """Four-node sample: A-B:4, A-C:2, B-D:5, C-D:3, B-C:1."""
    return get_sample_graph("simple")


@pytest.fixture
def cities_graph() -> Graph:
    return get_sample_graph("cities")


@pytest.fixture
def complex_graph() -> Graph:
    return get_sample_graph("complex")


@pytest.fixture
def disconnected_graph() -> Graph:
    """Two components (A-B-C and D-E) plus isolated node F."""
    return build_graph(
        {"A": (0, 0), "B": (10, 0), "C": (20, 0), "D": (0, 50), "E": (10, 50), "F": (90, 90)},
        [("A", "B", 1), ("B", "C", 2), ("D", "E", 3)],
    )


@pytest.fixture
def admissible_graph() -> Graph:
    """
    Every weight >= the straight-line length of its edge, so the
    euclidean heuristic never overestimates.

    Shortest S->T is S-A-T (11); S-B-T costs 12.
    """
    return build_graph(
        {"S": (0, 0), "A": (3, 4), "B": (6, 0), "C": (3, -4), "T": (9, 4)},
        [
            ("S", "A", 5),
            ("S", "B", 7),
            ("S", "C", 5),
            ("C", "B", 5),
            ("A", "T", 6),
            ("B", "T", 5),
            ("A", "B", 5),
        ],
    )


@pytest.fixture
def loopy_graph() -> Graph:
    """Self-loops on A and B, and two parallel A-B edges (2 declared first, then 1)."""
    return build_graph(
        {"A": (0, 0), "B": (1, 0), "C": (2, 0)},
        [("A", "A", 1), ("A", "B", 2), ("A", "B", 1), ("B", "B", 0), ("B", "C", 3)],
    )
