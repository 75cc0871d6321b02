"""
Session module.

Provides the visualizer's interaction state:
- VisualizerSession: Node selection, algorithm choice, run/reset
- SelectionIncompleteError: Run requested without start and end
- describe_result, format_distance: Status text helpers
"""

from pathviz.session.state import (
    SelectionIncompleteError,
    VisualizerSession,
    describe_result,
    format_distance,
)

__all__ = [
    "VisualizerSession",
    "SelectionIncompleteError",
    "describe_result",
    "format_distance",
]
