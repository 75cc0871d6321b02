"""
Graph file loading and saving.

Supported formats, chosen by file extension:
- .json: {"nodes": [...], "edges": [...]} as produced by Graph.to_dict()
- .msgpack: the same structure, msgpack-encoded (compact, for larger graphs)

Usage:
    from pathviz.data import load_graph, save_graph

    graph = load_graph("data/campus.json")
    save_graph(graph, "data/campus.msgpack")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import msgpack

from pathviz.config import DATA_DIR
from pathviz.graph.model import Graph, GraphIntegrityError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".json", ".msgpack")


class GraphFileError(ValueError):
    """Raised when a graph file cannot be read or has the wrong shape."""


def _resolve(path: str | Path) -> Path:
    """Relative paths that don't exist locally are looked up under DATA_DIR."""
    path = Path(path)
    if not path.is_absolute() and not path.exists() and (DATA_DIR / path).exists():
        return DATA_DIR / path
    return path


def load_graph(path: str | Path) -> Graph:
    """
    Load and validate a graph from a .json or .msgpack file.

    Raises:
        FileNotFoundError: If the file does not exist
        GraphFileError: On an unsupported extension or malformed content
    """
    path = _resolve(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise GraphFileError(
            f"Unsupported graph file '{path.name}'. Expected one of: {', '.join(SUPPORTED_EXTENSIONS)}"
        )

    logger.info(f"Loading graph from {path}...")
    try:
        if suffix == ".json":
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            with open(path, "rb") as f:
                data = msgpack.load(f, raw=False)
    except (ValueError, msgpack.UnpackException) as e:
        raise GraphFileError(f"Could not decode {path.name}: {e}") from e

    if not isinstance(data, dict) or "nodes" not in data:
        raise GraphFileError(f"{path.name} does not contain a 'nodes' list")

    try:
        graph = Graph.from_dict(data)
    except GraphIntegrityError as e:
        raise GraphFileError(f"{path.name}: {e}") from e

    logger.info(f"Loaded {len(graph.nodes)} nodes, {len(graph.edges)} edges")
    return graph


def save_graph(graph: Graph, path: str | Path) -> Path:
    """
    Write a graph to a .json or .msgpack file.

    Returns:
        The path written to
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise GraphFileError(
            f"Unsupported graph file '{path.name}'. Expected one of: {', '.join(SUPPORTED_EXTENSIONS)}"
        )

    path.parent.mkdir(parents=True, exist_ok=True)
    data = graph.to_dict()
    if suffix == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    else:
        with open(path, "wb") as f:
            msgpack.dump(data, f)

    logger.info(f"Saved graph ({len(graph.nodes)} nodes) to {path}")
    return path
