"""
Breadth-first search: fewest edges, ignoring weights.
"""

from __future__ import annotations

from collections import deque

from pathviz.algorithms.base import PathResult, SearchAlgorithm, reconstruct_path
from pathviz.graph.model import Graph


class BreadthFirstSearch(SearchAlgorithm):
    """
    FIFO frontier expanded in edge-declaration order.

    Nodes are marked visited (and recorded in visited_order) when they are
    enqueued, so each node enters the queue at most once. The search stops
    when the end node is dequeued. The reported distance is the weight of
    the path found, which is minimal in edge count but not necessarily in
    total weight.
    """

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def display_name(self) -> str:
        return "Breadth First Search"

    @property
    def description(self) -> str:
        return "Explores level by level. Finds shortest path in unweighted graphs."

    def _search(self, graph: Graph, start_id: str, end_id: str) -> PathResult:
        queue = deque([start_id])
        visited = {start_id}
        visited_order = [start_id]
        previous: dict[str, str | None] = {start_id: None}
        # Accumulated weight from start along the discovery chain
        cost: dict[str, float] = {start_id: 0.0}

        while queue:
            current = queue.popleft()

            if current == end_id:
                break

            for neighbor, edge in graph.neighbors(current):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                visited_order.append(neighbor)
                previous[neighbor] = current
                cost[neighbor] = cost[current] + edge.weight
                queue.append(neighbor)

        path = reconstruct_path(previous, start_id, end_id)
        if not path:
            return PathResult.not_found(visited_order, algorithm=self.name)

        return PathResult(
            path=path,
            distance=cost[end_id],
            visited_order=visited_order,
            algorithm=self.name,
        )
