"""
Web UI module.

Provides the browser interface for the Path Finder Visualizer:
- flask_app: Graph view, node selection, run/reset, JSON API
- components.charts: Plotly figure of a graph and a search result
"""
