from __future__ import annotations
from typing import Iterable, List, Tuple
import random
import numbers

State = Tuple[int, ...]  # 9-length tuple, 0 is blank
GOAL: State = (2,3,4,1,8,5,7,6,0)

# Precomputed neighbors (blank moves) on 3x3 grid
_NEI = {
    0: (1, 3),
    1: (0, 2, 4),
    2: (1, 5),
    3: (0, 4, 6),
    4: (1, 3, 5, 7),
    5: (2, 4, 8),
    6: (3, 7),
    7: (4, 6, 8),
    8: (5, 7),
}


class InvalidArrangementError(ValueError):
    """Raised when a tile arrangement is not a permutation of 0..8."""


def validate(tiles: Iterable[int]) -> State:
    """Return `tiles` as a State tuple, or raise InvalidArrangementError."""
    try:
        s = tuple(tiles)
    except TypeError as e:
        raise InvalidArrangementError(f"arrangement is not iterable: {tiles!r}") from e
    if len(s) != 9:
        raise InvalidArrangementError(f"expected 9 tiles, got {len(s)}: {s!r}")
    for t in s:
        if isinstance(t, bool) or not isinstance(t, numbers.Integral):
            raise InvalidArrangementError(f"tile {t!r} is not an integer")
    if 0 not in s:
        raise InvalidArrangementError(f"no blank (0) in {s!r}")
    if sorted(s) != list(range(9)):
        raise InvalidArrangementError(f"tiles must be a permutation of 0..8, got {s!r}")
    return tuple(int(t) for t in s)


def neighbors(s: State) -> List[Tuple[State, int]]:
    """Return list of (next_state, cost) pairs with unit cost."""
    i = s.index(0)
    out: List[Tuple[State, int]] = []
    for j in _NEI[i]:
        lst = list(s)
        lst[i], lst[j] = lst[j], lst[i]
        out.append((tuple(lst), 1))
    return out


def _inversions(s: State) -> int:
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def is_solvable(s: State, goal: State = GOAL) -> bool:
    """On a 3-wide board a slide never changes inversion parity, so `s`
    reaches `goal` iff both have the same parity."""
    return (_inversions(s) % 2) == (_inversions(goal) % 2)


def scramble(depth: int, seed: int, goal: State = GOAL) -> State:
    """Scramble `goal` by performing 'depth' random legal blank moves (no immediate backtracks)."""
    rng = random.Random(seed)
    s = goal
    last_blank = None
    for _ in range(depth):
        z = s.index(0)
        cand = list(_NEI[z])
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        j = rng.choice(cand)
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        last_blank = z
        s = tuple(lst)
    return s


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping the permutation parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1 :], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def rows(s: State) -> List[State]:
    return [s[3*r:3*r+3] for r in range(3)]
