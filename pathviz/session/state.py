"""
Visualizer session state: which graph is shown, which nodes are
selected, which algorithm will run, and the last path found.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pathviz.algorithms import ALGORITHM_NAMES, PathResult, get_algorithm, run_algorithm
from pathviz.config import DEFAULT_ALGORITHM, DEFAULT_SAMPLE_GRAPH, DISTANCE_DECIMALS
from pathviz.data.samples import get_sample_graph
from pathviz.graph.model import Graph

logger = logging.getLogger(__name__)


class SelectionIncompleteError(ValueError):
    """Raised when a search is requested before start and end are both chosen."""


def format_distance(distance: float) -> str:
    """Distance with DISTANCE_DECIMALS places (e.g. '5.00')."""
    return f"{distance:.{DISTANCE_DECIMALS}f}"


def describe_result(result: PathResult) -> str:
    """One-line summary of a search outcome for status displays."""
    if not result.found:
        return "No path found between selected nodes"
    name = ALGORITHM_NAMES.get(result.algorithm, result.algorithm)
    return f"Path found using {name}! Distance: {format_distance(result.distance)}"


@dataclass
class VisualizerSession:
    """
    Mutable state of one visualizer user.

    Attributes:
        graph_name: Name of the loaded sample graph
        algorithm: Selected algorithm selector
        start: Selected start node id (None until chosen)
        end: Selected end node id (None until chosen)
        result: Last successful search result (None if none or cleared)
        graph: The graph being shown (defaults to the named sample)
    """

    graph_name: str = DEFAULT_SAMPLE_GRAPH
    algorithm: str = DEFAULT_ALGORITHM
    start: str | None = None
    end: str | None = None
    result: PathResult | None = None
    graph: Graph | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.graph is None:
            self.graph = get_sample_graph(self.graph_name)

    @property
    def ready(self) -> bool:
        """Whether both start and end are selected."""
        return self.start is not None and self.end is not None

    # =========================================================================
    # Selection
    # =========================================================================

    def handle_node_click(self, node_id: str) -> str:
        """
        Apply a click on a node to the start/end selection.

        The first click sets start; a click on another node sets end.
        Clicking the current start or end again clears it.

        Returns:
            Status message describing the change ("" if nothing changed)

        Raises:
            UnknownNodeError: If node_id is not in the graph
        """
        label = self.graph.require_node(node_id).label

        if self.start is None:
            self.start = node_id
            message = f"Start node set to {label}"
        elif self.end is None and node_id != self.start:
            self.end = node_id
            message = f"End node set to {label}"
        elif node_id == self.start:
            self.start = None
            message = "Start node cleared"
        elif node_id == self.end:
            self.end = None
            message = "End node cleared"
        else:
            message = ""

        if message:
            logger.info(message)
        return message

    def handle_canvas_click(self, x: float, y: float) -> str | None:
        """
        Translate a canvas click to a node and apply it.

        Returns:
            The clicked node id, or None if the click missed every node
        """
        node = self.graph.node_at(x, y)
        if node is None:
            return None
        self.handle_node_click(node.id)
        return node.id

    # =========================================================================
    # Controls
    # =========================================================================

    def set_algorithm(self, name: str) -> str:
        """Select an algorithm; unknown names resolve to the default."""
        self.algorithm = get_algorithm(name).name
        return self.algorithm

    def reset(self) -> None:
        """Clear the selection and the last result."""
        self.start = None
        self.end = None
        self.result = None

    def load_sample(self, name: str) -> None:
        """
        Switch to a built-in sample graph and reset the selection.

        Raises:
            ValueError: If the sample name is unknown
        """
        self.graph = get_sample_graph(name)
        self.graph_name = name
        self.reset()
        logger.info(f"Loaded sample graph '{name}'")

    def run(self) -> PathResult:
        """
        Run the selected algorithm between start and end.

        The result is kept on the session only when a path was found.

        Raises:
            SelectionIncompleteError: If start or end is not selected
        """
        if not self.ready:
            raise SelectionIncompleteError("Please select both start and end nodes")

        result = run_algorithm(self.algorithm, self.graph, self.start, self.end)
        self.result = result if result.found else None
        logger.info(describe_result(result))
        return result

    # =========================================================================
    # Persistence
    # =========================================================================

    def to_dict(self) -> dict:
        """Plain-data form for cookie sessions (the graph is stored by name)."""
        return {
            "graph_name": self.graph_name,
            "algorithm": self.algorithm,
            "start": self.start,
            "end": self.end,
            "result": self.result.to_dict() if self.result else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> VisualizerSession:
        """Inverse of to_dict(); missing keys take their defaults."""
        result = data.get("result")
        return cls(
            graph_name=data.get("graph_name", DEFAULT_SAMPLE_GRAPH),
            algorithm=data.get("algorithm", DEFAULT_ALGORITHM),
            start=data.get("start"),
            end=data.get("end"),
            result=PathResult.from_dict(result) if result else None,
        )
