"""
Data module.

Provides graph instances for searching:
- Built-in sample graphs (cities, simple, complex)
- Graph files in JSON or msgpack format

Usage:
    from pathviz.data import get_sample_graph, load_graph

    graph = get_sample_graph("cities")
    graph = load_graph("data/my_graph.json")
"""

from pathviz.data.loader import GraphFileError, load_graph, save_graph
from pathviz.data.samples import SAMPLE_GRAPHS, get_sample_graph, list_sample_graphs

__all__ = [
    "SAMPLE_GRAPHS",
    "get_sample_graph",
    "list_sample_graphs",
    "GraphFileError",
    "load_graph",
    "save_graph",
]
