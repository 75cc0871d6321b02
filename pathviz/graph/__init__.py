"""
Graph module.

Provides the shared data structures for pathfinding:
- Node, Edge, Graph: Immutable undirected weighted graph
- PriorityQueue: Min-heap with FIFO tie-breaking
- GraphIntegrityError, UnknownNodeError: Validation errors
"""

from pathviz.graph.model import Edge, Graph, GraphIntegrityError, Node, UnknownNodeError
from pathviz.graph.priority_queue import PriorityQueue

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphIntegrityError",
    "UnknownNodeError",
    "PriorityQueue",
]
