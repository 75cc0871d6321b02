"""
Algorithms module.

Provides the four search strategies and the dispatcher that selects one:
- DijkstraSearch: Weighted shortest path (default)
- AStarSearch: Heuristic-guided weighted shortest path
- BreadthFirstSearch: Fewest edges
- DepthFirstSearch: Any path, depth first
"""

from __future__ import annotations

import logging

from pathviz.algorithms.astar import AStarSearch
from pathviz.algorithms.base import PathResult, SearchAlgorithm, reconstruct_path
from pathviz.algorithms.bfs import BreadthFirstSearch
from pathviz.algorithms.dfs import DepthFirstSearch
from pathviz.algorithms.dijkstra import DijkstraSearch
from pathviz.config import DEFAULT_ALGORITHM
from pathviz.graph.model import Graph

logger = logging.getLogger(__name__)

__all__ = [
    "PathResult",
    "SearchAlgorithm",
    "reconstruct_path",
    "DijkstraSearch",
    "AStarSearch",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "ALGORITHMS",
    "ALGORITHM_NAMES",
    "available_algorithms",
    "get_algorithm",
    "run_algorithm",
]

ALGORITHMS: dict[str, type[SearchAlgorithm]] = {
    "dijkstra": DijkstraSearch,
    "astar": AStarSearch,
    "bfs": BreadthFirstSearch,
    "dfs": DepthFirstSearch,
}

ALGORITHM_NAMES = {
    "dijkstra": "Dijkstra's Algorithm",
    "astar": "A* Search",
    "bfs": "Breadth First Search",
    "dfs": "Depth First Search",
}


def available_algorithms() -> list[str]:
    """Selectors accepted by get_algorithm, in display order."""
    return list(ALGORITHMS)


def get_algorithm(name: object) -> SearchAlgorithm:
    """
    Get a search algorithm by selector.

    Args:
        name: Algorithm selector (dijkstra, astar, bfs, dfs). Non-string
            values are treated as unrecognized.

    Returns:
        Instantiated algorithm. Unrecognized selectors fall back to
        Dijkstra rather than raising.
    """
    key = name.strip().lower() if isinstance(name, str) else ""
    if key not in ALGORITHMS:
        logger.warning(f"Unknown algorithm '{name}', falling back to '{DEFAULT_ALGORITHM}'")
        key = DEFAULT_ALGORITHM
    return ALGORITHMS[key]()


def run_algorithm(
    name: object,
    graph: Graph,
    start_id: str,
    end_id: str,
    strict: bool = False,
) -> PathResult:
    """
    Dispatch a search to the selected algorithm.

    Args:
        name: Algorithm selector (unknown values use Dijkstra)
        graph: Graph to search
        start_id: Start node id
        end_id: End node id
        strict: Raise UnknownNodeError for ids missing from the graph
            instead of returning an empty result

    Returns:
        PathResult from the selected algorithm
    """
    if strict:
        graph.require_node(start_id)
        graph.require_node(end_id)
    return get_algorithm(name).search(graph, start_id, end_id)
