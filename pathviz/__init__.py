"""
Path Finder Visualizer.

A small graph-search engine with four algorithms (Dijkstra, A*, BFS, DFS)
over weighted, undirected sample graphs, plus the session logic and
presentation surfaces used to visualize each search.
"""

__version__ = "0.1.0"
