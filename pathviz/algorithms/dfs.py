"""
Depth-first search: finds a path, not the shortest one.
"""

from __future__ import annotations

from pathviz.algorithms.base import PathResult, SearchAlgorithm, reconstruct_path
from pathviz.graph.model import Graph


class DepthFirstSearch(SearchAlgorithm):
    """
    LIFO frontier.

    A node gets its predecessor when it is first discovered (pushed), and
    is never pushed again once it has one, even if a later expansion
    reaches it first. The visited check and the visited_order entry happen
    at pop time. The distance is the weight of whichever path DFS found.
    """

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def display_name(self) -> str:
        return "Depth First Search"

    @property
    def description(self) -> str:
        return "Explores depth-first. Useful for maze solving and connectivity."

    def _search(self, graph: Graph, start_id: str, end_id: str) -> PathResult:
        stack = [start_id]
        visited: set[str] = set()
        visited_order: list[str] = []
        previous: dict[str, str | None] = {start_id: None}
        cost: dict[str, float] = {start_id: 0.0}

        while stack:
            current = stack.pop()

            if current in visited:
                continue
            visited.add(current)
            visited_order.append(current)

            if current == end_id:
                break

            for neighbor, edge in graph.neighbors(current):
                # First discovery wins; later discoveries don't re-parent
                if neighbor in visited or neighbor in previous:
                    continue
                previous[neighbor] = current
                cost[neighbor] = cost[current] + edge.weight
                stack.append(neighbor)

        path = reconstruct_path(previous, start_id, end_id)
        if not path:
            return PathResult.not_found(visited_order, algorithm=self.name)

        return PathResult(
            path=path,
            distance=cost[end_id],
            visited_order=visited_order,
            algorithm=self.name,
        )
