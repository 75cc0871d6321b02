"""
Immutable graph model shared by every search algorithm.

Nodes carry a 2D position (used by the A* heuristic and by canvas
hit-testing). Edges are undirected: an edge is traversable from either
endpoint. Graphs are validated once at construction and never mutated
afterwards, so a single instance can be searched concurrently.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from pathviz.config import NODE_HIT_RADIUS

logger = logging.getLogger(__name__)


class GraphIntegrityError(ValueError):
    """Raised when a graph is structurally invalid (dangling edge, duplicate id, bad weight)."""


class UnknownNodeError(KeyError):
    """Raised when a node id is not present in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Node '{self.node_id}' not in graph"


def _is_finite_number(value: object) -> bool:
    """True for a finite real number; strings, None and NaN/inf are not."""
    return isinstance(value, numbers.Real) and math.isfinite(value)


@dataclass(frozen=True)
class Node:
    """
    A graph vertex.

    Attributes:
        id: Unique key within the graph
        label: Human-readable name shown by the visualizer
        x: Horizontal canvas position
        y: Vertical canvas position
    """

    id: str
    label: str
    x: float
    y: float

    @property
    def position(self) -> np.ndarray:
        """Position as a float vector [x, y]."""
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Edge:
    """
    An undirected weighted edge.

    `from_id` and `to_id` keep the declared orientation for display and
    serialization, but searches traverse the edge both ways.
    """

    from_id: str
    to_id: str
    weight: float

    def other(self, node_id: str) -> str:
        """Return the endpoint opposite to node_id."""
        return self.to_id if self.from_id == node_id else self.from_id

    def joins(self, a: str, b: str) -> bool:
        """Whether this edge connects a and b (either orientation)."""
        return (self.from_id == a and self.to_id == b) or (
            self.from_id == b and self.to_id == a
        )


class Graph:
    """
    Read-only weighted, undirected graph.

    Attributes:
        nodes: Nodes in declaration order
        edges: Edges in declaration order

    Raises:
        GraphIntegrityError: On duplicate node ids, edges referencing a
            missing node, negative, non-finite or non-numeric weights, or
            non-finite or non-numeric coordinates.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge] = ()) -> None:
        self._nodes: tuple[Node, ...] = tuple(nodes)
        self._edges: tuple[Edge, ...] = tuple(edges)

        self._by_id: dict[str, Node] = {}
        for node in self._nodes:
            if node.id in self._by_id:
                raise GraphIntegrityError(f"Duplicate node id '{node.id}'")
            if not (_is_finite_number(node.x) and _is_finite_number(node.y)):
                raise GraphIntegrityError(
                    f"Node '{node.id}' has an invalid position ({node.x!r}, {node.y!r})"
                )
            self._by_id[node.id] = node

        # Incident edges per node, preserving edge declaration order
        self._incident: dict[str, list[Edge]] = {node.id: [] for node in self._nodes}
        for edge in self._edges:
            for endpoint in (edge.from_id, edge.to_id):
                if endpoint not in self._by_id:
                    raise GraphIntegrityError(
                        f"Edge {edge.from_id}-{edge.to_id} references unknown node '{endpoint}'"
                    )
            if not _is_finite_number(edge.weight) or edge.weight < 0:
                raise GraphIntegrityError(
                    f"Edge {edge.from_id}-{edge.to_id} has invalid weight {edge.weight!r} "
                    "(weights must be finite and >= 0)"
                )
            self._incident[edge.from_id].append(edge)
            if edge.to_id != edge.from_id:
                self._incident[edge.to_id].append(edge)

        self._positions = np.array(
            [[node.x, node.y] for node in self._nodes], dtype=np.float64
        ).reshape(-1, 2)

        logger.debug(f"Built graph with {len(self._nodes)} nodes, {len(self._edges)} edges")

    # =========================================================================
    # Core Accessors
    # =========================================================================

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def node_ids(self) -> list[str]:
        return [node.id for node in self._nodes]

    @property
    def positions(self) -> np.ndarray:
        """(n, 2) array of node positions in declaration order (read-only copy)."""
        return self._positions.copy()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._by_id

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._nodes == other._nodes and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((self._nodes, self._edges))

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"

    def has_node(self, node_id: str) -> bool:
        """Check if node id exists in the graph."""
        return node_id in self._by_id

    def get_node(self, node_id: str) -> Node | None:
        """Get node by id, or None if not found."""
        return self._by_id.get(node_id)

    def require_node(self, node_id: str) -> Node:
        """Get node by id, raising UnknownNodeError if it is missing."""
        node = self._by_id.get(node_id)
        if node is None:
            raise UnknownNodeError(node_id)
        return node

    def label_of(self, node_id: str) -> str:
        """Display label for a node id (falls back to the id itself)."""
        node = self._by_id.get(node_id)
        return node.label if node else node_id

    # =========================================================================
    # Adjacency
    # =========================================================================

    def incident_edges(self, node_id: str) -> list[Edge]:
        """All edges touching node_id, in declaration order."""
        return list(self._incident.get(node_id, ()))

    def neighbors(self, node_id: str) -> list[tuple[str, Edge]]:
        """
        Neighbors of node_id as (neighbor_id, edge) pairs.

        Order follows edge declaration order. A self-loop yields the node
        itself; duplicate edges yield the same neighbor more than once.
        """
        return [(edge.other(node_id), edge) for edge in self._incident.get(node_id, ())]

    def edge_between(self, a: str, b: str) -> Edge | None:
        """First declared edge joining a and b in either orientation."""
        for edge in self._incident.get(a, ()):
            if edge.joins(a, b):
                return edge
        return None

    def path_cost(self, path: list[str]) -> float | None:
        """
        Total weight along a node path.

        Returns None if two consecutive nodes are not joined by an edge.
        """
        total = 0.0
        for a, b in zip(path, path[1:]):
            edge = self.edge_between(a, b)
            if edge is None:
                return None
            total += edge.weight
        return total

    # =========================================================================
    # Spatial Queries
    # =========================================================================

    def node_at(self, x: float, y: float, radius: float = NODE_HIT_RADIUS) -> Node | None:
        """
        Node whose center lies within radius of (x, y).

        When several nodes qualify, the first in declaration order wins.
        """
        if not self._nodes:
            return None
        distances = np.linalg.norm(self._positions - np.array([x, y]), axis=1)
        hits = np.flatnonzero(distances <= radius)
        if hits.size == 0:
            return None
        return self._nodes[int(hits[0])]

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict:
        """Plain-data form: {"nodes": [...], "edges": [{"from", "to", "weight"}]}."""
        return {
            "nodes": [
                {"id": n.id, "label": n.label, "x": n.x, "y": n.y} for n in self._nodes
            ],
            "edges": [
                {"from": e.from_id, "to": e.to_id, "weight": e.weight} for e in self._edges
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Graph:
        """
        Build a graph from its plain-data form.

        Node labels default to the id. Raises GraphIntegrityError when a
        required field is missing or has the wrong type.
        """
        try:
            nodes = [
                Node(
                    id=str(raw["id"]),
                    label=str(raw.get("label", raw["id"])),
                    x=float(raw["x"]),
                    y=float(raw["y"]),
                )
                for raw in data["nodes"]
            ]
            edges = [
                Edge(
                    from_id=str(raw["from"]),
                    to_id=str(raw["to"]),
                    weight=float(raw["weight"]),
                )
                for raw in data.get("edges", [])
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise GraphIntegrityError(f"Malformed graph data: {e!r}") from e
        return cls(nodes, edges)
