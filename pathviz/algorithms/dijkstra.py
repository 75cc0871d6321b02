"""
Dijkstra's algorithm with lazy deletion.

Shorter tentative distances are pushed as new queue entries instead of
decreasing the key of an existing one. Stale entries are skipped when
extracted because their node is already finalized.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from pathviz.algorithms.base import PathResult, SearchAlgorithm, reconstruct_path
from pathviz.graph.model import Graph
from pathviz.graph.priority_queue import PriorityQueue

# (node_id, g_score) -> queue priority
PriorityFn = Callable[[str, float], float]


class DijkstraSearch(SearchAlgorithm):
    """
    Uniform-cost search over non-negative weights.

    Each node is finalized (and appended to visited_order) the first time
    it is extracted; the search stops as soon as the end node is
    finalized. Equal priorities are extracted in insertion order.
    """

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def display_name(self) -> str:
        return "Dijkstra's Algorithm"

    @property
    def description(self) -> str:
        return "Finds shortest path using weighted edges. Optimal for positive weights."

    @property
    def weighted(self) -> bool:
        return True

    def _priority_fn(self, graph: Graph, end_id: str) -> PriorityFn:
        """Queue priority for a node given its tentative distance."""
        return lambda node_id, g: g

    def _search(self, graph: Graph, start_id: str, end_id: str) -> PathResult:
        priority = self._priority_fn(graph, end_id)

        g_score: dict[str, float] = {node_id: math.inf for node_id in graph.node_ids}
        g_score[start_id] = 0.0
        previous: dict[str, str | None] = {start_id: None}
        finalized: set[str] = set()
        visited_order: list[str] = []

        queue: PriorityQueue[str] = PriorityQueue()
        queue.insert(start_id, priority(start_id, 0.0))

        while queue:
            current = queue.extract_min()

            # Stale duplicate of an already-finalized node
            if current in finalized:
                continue
            finalized.add(current)
            visited_order.append(current)

            if current == end_id:
                break

            for neighbor, edge in graph.neighbors(current):
                if neighbor in finalized:
                    continue
                tentative = g_score[current] + edge.weight
                if tentative < g_score[neighbor]:
                    g_score[neighbor] = tentative
                    previous[neighbor] = current
                    queue.insert(neighbor, priority(neighbor, tentative))

        path = reconstruct_path(previous, start_id, end_id)
        if not path or math.isinf(g_score[end_id]):
            return PathResult.not_found(visited_order, algorithm=self.name)

        return PathResult(
            path=path,
            distance=g_score[end_id],
            visited_order=visited_order,
            algorithm=self.name,
        )
