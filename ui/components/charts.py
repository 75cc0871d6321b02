"""
Plotly figure for drawing a graph and a search result.
"""

from __future__ import annotations

import plotly.graph_objects as go

from pathviz.algorithms import PathResult
from pathviz.graph.model import Graph

# Node fill colors by role
COLOR_IDLE = "#34495e"
COLOR_VISITED = "#8e44ad"
COLOR_PATH = "#4ecdc4"
COLOR_START = "#2ecc71"
COLOR_END = "#e74c3c"

COLOR_EDGE = "#bdc3c7"
COLOR_PATH_EDGE = "#f1c40f"


def node_role(node_id: str, result: PathResult | None, start: str | None, end: str | None) -> str:
    """Role used for coloring: start, end, path, visited or idle."""
    if node_id == start:
        return "start"
    if node_id == end:
        return "end"
    if result is not None:
        if node_id in result.path:
            return "path"
        if node_id in result.visited_order:
            return "visited"
    return "idle"


ROLE_COLORS = {
    "start": COLOR_START,
    "end": COLOR_END,
    "path": COLOR_PATH,
    "visited": COLOR_VISITED,
    "idle": COLOR_IDLE,
}


def _path_pairs(result: PathResult | None) -> set[frozenset[str]]:
    """Unordered node pairs of consecutive path steps."""
    if result is None or not result.found:
        return set()
    return {frozenset(pair) for pair in zip(result.path, result.path[1:])}


def create_graph_figure(
    graph: Graph,
    result: PathResult | None = None,
    start: str | None = None,
    end: str | None = None,
    height: int = 480,
) -> go.Figure:
    """
    Draw nodes, weighted edges and (optionally) a search result.

    Edges on the result path are highlighted; nodes are colored by their
    role (start, end, on path, visited, idle). The y axis is reversed so
    canvas coordinates display the same way as in the browser.
    """
    on_path = _path_pairs(result)
    fig = go.Figure()

    # One trace per edge keeps hover text and highlight color per edge
    label_x, label_y, label_text = [], [], []
    for edge in graph.edges:
        a = graph.get_node(edge.from_id)
        b = graph.get_node(edge.to_id)
        highlighted = frozenset((edge.from_id, edge.to_id)) in on_path
        fig.add_trace(go.Scatter(
            x=[a.x, b.x],
            y=[a.y, b.y],
            mode="lines",
            line=dict(
                color=COLOR_PATH_EDGE if highlighted else COLOR_EDGE,
                width=5 if highlighted else 2,
            ),
            hoverinfo="skip",
            showlegend=False,
        ))
        label_x.append((a.x + b.x) / 2)
        label_y.append((a.y + b.y) / 2)
        label_text.append(f"{edge.weight:g}")

    fig.add_trace(go.Scatter(
        x=label_x,
        y=label_y,
        mode="text",
        text=label_text,
        textfont=dict(size=12, color="#7f8c8d"),
        hoverinfo="skip",
        showlegend=False,
    ))

    roles = [node_role(node.id, result, start, end) for node in graph.nodes]
    positions = graph.positions
    fig.add_trace(go.Scatter(
        x=positions[:, 0],
        y=positions[:, 1],
        mode="markers+text",
        marker=dict(size=36, color=[ROLE_COLORS[r] for r in roles], line=dict(width=2, color="white")),
        text=[node.label for node in graph.nodes],
        textposition="top center",
        customdata=[node.id for node in graph.nodes],
        hovertemplate="<b>%{text}</b> (%{customdata})<br>x=%{x}, y=%{y}<extra></extra>",
        showlegend=False,
    ))

    fig.update_layout(
        height=height,
        margin=dict(t=20, b=20, l=20, r=20),
        plot_bgcolor="white",
        clickmode="event",
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False, autorange="reversed", scaleanchor="x")
    return fig
