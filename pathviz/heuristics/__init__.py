"""
Heuristics module.

Provides distance estimates for guiding informed search:
- euclidean_distance: Straight-line distance between two nodes
- straight_line_heuristic: h(n) toward a fixed target node
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from pathviz.graph.model import Graph, Node


def euclidean_distance(a: Node, b: Node) -> float:
    """Straight-line distance between two node positions."""
    return float(np.linalg.norm(a.position - b.position))


def straight_line_heuristic(graph: Graph, target_id: str) -> Callable[[str], float]:
    """
    Build h(n) = euclidean distance from n to target.

    Only admissible when every edge weight is at least the straight-line
    length of that edge. Ids missing from the graph score 0.

    Raises:
        UnknownNodeError: If target_id is not in the graph
    """
    target = graph.require_node(target_id)

    def h(node_id: str) -> float:
        node = graph.get_node(node_id)
        if node is None:
            return 0.0
        return euclidean_distance(node, target)

    return h


__all__ = ["euclidean_distance", "straight_line_heuristic"]
