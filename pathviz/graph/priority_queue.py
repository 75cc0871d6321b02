"""
Min-priority queue used by the cost-driven searches (Dijkstra, A*).

Backed by heapq. Equal priorities come out in insertion order (FIFO),
enforced by a monotonically increasing sequence number stored with each
entry. Re-inserting an element that is already queued adds a second
entry rather than updating the first; callers skip stale entries with
their own finalized set instead of needing decrease-key.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Binary-heap min-priority queue with FIFO tie-breaking."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    def insert(self, element: T, priority: float) -> None:
        """Add element with the given priority (duplicates allowed)."""
        heapq.heappush(self._heap, (priority, next(self._counter), element))

    push = insert

    def extract_min(self) -> T | None:
        """Remove and return the lowest-priority element, or None if empty."""
        if not self._heap:
            return None
        _, _, element = heapq.heappop(self._heap)
        return element

    def peek(self) -> T | None:
        """Return the lowest-priority element without removing it."""
        return self._heap[0][2] if self._heap else None

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)})"
