"""Min-priority queue with priority updates, built on heapq.

heapq has no decrease-key, so a changed priority pushes a fresh entry
and marks the old one as removed; stale entries are discarded lazily when
they reach the top of the heap. Equal priorities are served in insertion
order.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Dict, Generic, Hashable, List, TypeVar

T = TypeVar("T", bound=Hashable)

_REMOVED = object()


class UpdatablePriorityQueue(Generic[T]):
    def __init__(self) -> None:
        self._heap: List[List[Any]] = []
        self._entries: Dict[T, List[Any]] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def add(self, item: T, priority: float) -> None:
        """Insert ``item``; raises ValueError if it is already queued."""
        if item in self._entries:
            raise ValueError(f"{item!r} is already in the queue")
        entry = [priority, next(self._counter), item]
        self._entries[item] = entry
        heapq.heappush(self._heap, entry)

    def change_priority(self, item: T, priority: float) -> None:
        """Give a queued ``item`` a new priority; KeyError if absent."""
        old = self._entries.pop(item)
        old[-1] = _REMOVED
        self.add(item, priority)

    def _discard_removed(self) -> None:
        while self._heap and self._heap[0][-1] is _REMOVED:
            heapq.heappop(self._heap)

    def peek(self) -> T:
        """Return the minimum-priority item without removing it."""
        self._discard_removed()
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0][-1]

    def pop(self) -> T:
        """Remove and return the minimum-priority item."""
        self._discard_removed()
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        _, _, item = heapq.heappop(self._heap)
        del self._entries[item]
        return item
