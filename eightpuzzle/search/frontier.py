from __future__ import annotations
from typing import List, Set, Tuple
import heapq
import itertools

from eightpuzzle.search.state import State, Tiles

TIE_BREAKS = ("h", "g", "fifo", "lifo")


class Frontier:
    """Min-heap of States keyed on f = g + h.

    Equal f is resolved by `tie_break`, then by insertion order:
      h    -> lower h first (closer to goal)
      g    -> higher g first (deeper)
      fifo -> earlier push first
      lifo -> later push first
    Duplicate arrangements may sit in the heap together; stale copies are
    filtered by the caller after popping.
    """

    def __init__(self, tie_break: str = "h"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}; choose from {TIE_BREAKS}")
        self.tie_break = tie_break
        self._heap: List[Tuple[Tuple[int, int, int], State]] = []
        self._counter = itertools.count()

    def _key(self, s: State) -> Tuple[int, int, int]:
        f = s.g + s.h
        ctr = next(self._counter)
        if self.tie_break == "h":    return (f, s.h, ctr)
        if self.tie_break == "g":    return (f, -s.g, ctr)
        if self.tie_break == "fifo": return (f, 0, ctr)
        return (f, 0, -ctr)

    def push(self, s: State) -> None:
        heapq.heappush(self._heap, (self._key(s), s))

    def pop_min(self) -> State:
        if not self._heap:
            raise IndexError("pop from empty frontier")
        return heapq.heappop(self._heap)[1]

    def is_empty(self) -> bool:
        return not self._heap

    def clear(self) -> None:
        self._heap.clear()
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)


class SeenSet:
    """Arrangements already expanded during the current solve."""

    def __init__(self):
        self._seen: Set[Tiles] = set()

    def contains(self, tiles: Tiles) -> bool:
        return tiles in self._seen

    def insert(self, tiles: Tiles) -> None:
        self._seen.add(tiles)

    def clear(self) -> None:
        self._seen.clear()

    def __contains__(self, tiles) -> bool:
        return tiles in self._seen

    def __len__(self) -> int:
        return len(self._seen)
