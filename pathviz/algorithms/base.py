"""
Search algorithm base class and the PathResult record.

All algorithms implement _search() and inherit the shared input checks
and path reconstruction from SearchAlgorithm.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field

from pathviz.config import NO_PATH_DISTANCE
from pathviz.graph.model import Graph

logger = logging.getLogger(__name__)


@dataclass
class PathResult:
    """
    Outcome of one search invocation.

    Attributes:
        path: Node ids from start to end (empty if no path)
        distance: Total weight of path, or NO_PATH_DISTANCE if empty
        visited_order: Node ids in the order the search visited them
        algorithm: Selector of the algorithm that produced this result
    """

    path: list[str]
    distance: float
    visited_order: list[str] = field(default_factory=list)
    algorithm: str = ""

    @classmethod
    def not_found(cls, visited_order: list[str] | None = None, algorithm: str = "") -> PathResult:
        """Result for an unreachable (or unknown) end node."""
        return cls(
            path=[],
            distance=NO_PATH_DISTANCE,
            visited_order=list(visited_order or []),
            algorithm=algorithm,
        )

    @property
    def found(self) -> bool:
        """Whether a path was found."""
        return bool(self.path)

    @property
    def edge_count(self) -> int:
        """Number of edges along the path (0 when not found)."""
        return max(len(self.path) - 1, 0)

    def to_dict(self) -> dict:
        """JSON-friendly form."""
        return {
            "algorithm": self.algorithm,
            "path": list(self.path),
            "distance": self.distance,
            "visitedOrder": list(self.visited_order),
            "found": self.found,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PathResult:
        """Inverse of to_dict()."""
        return cls(
            path=list(data.get("path", [])),
            distance=float(data.get("distance", NO_PATH_DISTANCE)),
            visited_order=list(data.get("visitedOrder", [])),
            algorithm=data.get("algorithm", ""),
        )


def reconstruct_path(previous: Mapping[str, str | None], start_id: str, end_id: str) -> list[str]:
    """
    Walk the predecessor map backward from end to start.

    Returns an empty list when end was never reached, or when the chain
    does not lead back to start (a partially built predecessor chain).
    """
    if end_id not in previous:
        return []

    path = [end_id]
    current = previous[end_id]
    while current is not None:
        path.append(current)
        current = previous.get(current)
    path.reverse()

    return path if path[0] == start_id else []


class SearchAlgorithm(ABC):
    """
    Abstract base class for graph search algorithms.

    Subclasses implement _search(); search() wraps it with the handling of
    unknown node ids and debug logging. Instances hold configuration only,
    so one instance can serve any number of searches.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Selector for the algorithm (e.g., 'dijkstra', 'bfs')."""
        ...

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable algorithm name."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line description of the search strategy."""
        ...

    @property
    def weighted(self) -> bool:
        """Whether the algorithm minimizes total weight (vs. just finding a path)."""
        return False

    def search(self, graph: Graph, start_id: str, end_id: str) -> PathResult:
        """
        Search for a path from start_id to end_id.

        Args:
            graph: Graph to search (never mutated)
            start_id: Id of the start node
            end_id: Id of the end node

        Returns:
            PathResult. An unknown start or end id yields an empty path
            with NO_PATH_DISTANCE and an empty visited order.
        """
        for role, node_id in (("Start", start_id), ("End", end_id)):
            if not graph.has_node(node_id):
                logger.warning(f"{self.display_name}: {role} node '{node_id}' not in graph")
                return PathResult.not_found(algorithm=self.name)

        logger.debug(f"{self.display_name}: searching '{start_id}' -> '{end_id}'")
        result = self._search(graph, start_id, end_id)

        if result.found:
            logger.debug(
                f"{self.display_name}: path {' -> '.join(result.path)} "
                f"(distance {result.distance}, visited {len(result.visited_order)})"
            )
        else:
            logger.debug(
                f"{self.display_name}: no path after visiting {len(result.visited_order)} nodes"
            )
        return result

    @abstractmethod
    def _search(self, graph: Graph, start_id: str, end_id: str) -> PathResult:
        """Run the search; both ids are guaranteed to be in the graph."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
