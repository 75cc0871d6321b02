"""
A* search guided by straight-line distance to the end node.
"""

from __future__ import annotations

from pathviz.algorithms.dijkstra import DijkstraSearch, PriorityFn
from pathviz.config import ASTAR_HEURISTIC_WEIGHT
from pathviz.graph.model import Graph
from pathviz.heuristics import straight_line_heuristic


class AStarSearch(DijkstraSearch):
    """
    Dijkstra's control flow with priority f(n) = g(n) + weight * h(n).

    h(n) is the Euclidean distance between node positions. The result is
    optimal only when h never overestimates the remaining cost, i.e. when
    edge weights are at least the straight-line length of each edge. That
    is the caller's responsibility and is not checked.
    """

    def __init__(self, heuristic_weight: float = ASTAR_HEURISTIC_WEIGHT) -> None:
        """
        Initialize A* search.

        Args:
            heuristic_weight: Multiplier on h(n); 1.0 is plain A*
        """
        if heuristic_weight < 0:
            raise ValueError(f"heuristic_weight must be >= 0, got {heuristic_weight}")
        self._heuristic_weight = heuristic_weight

    @property
    def name(self) -> str:
        return "astar"

    @property
    def display_name(self) -> str:
        return "A* Search"

    @property
    def description(self) -> str:
        return "Uses heuristics for faster pathfinding. Great for spatial graphs."

    @property
    def heuristic_weight(self) -> float:
        return self._heuristic_weight

    def _priority_fn(self, graph: Graph, end_id: str) -> PriorityFn:
        h = straight_line_heuristic(graph, end_id)
        weight = self._heuristic_weight
        return lambda node_id, g: g + weight * h(node_id)
