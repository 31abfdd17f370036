from __future__ import annotations
from typing import Dict, Tuple

from eightpuzzle.domains.puzzle8 import GOAL

State = Tuple[int, ...]


def manhattan_distance(a: int, b: int) -> int:
    """Grid distance between linear indices a and b on the 3x3 board."""
    return abs(a // 3 - b // 3) + abs(a % 3 - b % 3)


class Manhattan:
    """Sum of Manhattan distances to goal positions (blank ignored).

    The goal is fixed at construction, so an instance is a pure function of
    the arrangement. A slide moves one tile by one cell, so `h` changes by
    exactly 1 between neighbours (consistent, hence admissible).
    """
    __slots__ = ("goal", "_goal_idx")

    def __init__(self, goal: State = GOAL):
        self.goal: State = tuple(goal)
        self._goal_idx: Dict[int, int] = {t: i for i, t in enumerate(self.goal)}

    def __call__(self, s: State) -> int:
        dist = 0
        for idx, tile in enumerate(s):
            if tile == 0:
                continue
            dist += manhattan_distance(idx, self._goal_idx[tile])
        return dist

    def __repr__(self) -> str:
        return f"Manhattan(goal={self.goal!r})"


_default = Manhattan(GOAL)

def manhattan(s: State) -> int:
    return _default(s)
