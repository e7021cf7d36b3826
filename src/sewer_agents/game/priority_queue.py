"""Min-priority queue with priority updates, built on ``heapq`` with lazy deletion."""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)

_REMOVED = object()


class MinPQueue(Generic[T]):
    """Priority queue of distinct items; lowest priority comes out first.

    Items with equal priority come out in insertion order. ``add`` rejects items
    already present, use ``change_priority`` for those.
    """

    def __init__(self) -> None:
        self._heap: list[list] = []
        self._entries: dict[T, list] = {}
        self._counter = itertools.count()
        self._uid = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def is_empty(self) -> bool:
        return not self._entries

    def add(self, item: T, priority: float) -> None:
        if item in self._entries:
            raise ValueError(f"{item!r} is already in the queue")
        self._push(item, priority, next(self._counter))

    def change_priority(self, item: T, priority: float) -> None:
        entry = self._entries.pop(item)  # KeyError if absent
        seq = entry[1]
        entry[-1] = _REMOVED
        self._push(item, priority, seq)

    def priority(self, item: T) -> float:
        return self._entries[item][0]

    def peek(self) -> T:
        self._discard_removed()
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0][-1]

    def extract_min(self) -> T:
        self._discard_removed()
        if not self._heap:
            raise IndexError("extract_min from an empty priority queue")
        *_, item = heapq.heappop(self._heap)
        del self._entries[item]
        return item

    def _push(self, item: T, priority: float, seq: int) -> None:
        # seq keeps insertion order among equal priorities; uid keeps stale copies apart
        entry = [priority, seq, next(self._uid), item]
        self._entries[item] = entry
        heapq.heappush(self._heap, entry)

    def _discard_removed(self) -> None:
        while self._heap and self._heap[0][-1] is _REMOVED:
            heapq.heappop(self._heap)
