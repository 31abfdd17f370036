from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from eightpuzzle.domains.puzzle8 import validate

Tiles = Tuple[int, ...]


@dataclass(frozen=True)
class State:
    """One arrangement plus its A* bookkeeping.

    Frozen; equality and hashing look at `tiles` only. The parent chain is
    shared between descendants and never mutated.

    Move names give the direction the *tile* slides into the blank:
    `move_south` pulls the tile above the blank down, `move_east` pulls the
    tile on the blank's left to the right, and so on.
    """
    tiles: Tiles
    blank: int = field(compare=False)
    g: int = field(compare=False)
    h: int = field(compare=False)
    parent: Optional["State"] = field(compare=False, repr=False)
    hfun: Callable[[Tiles], int] = field(compare=False, repr=False)

    @classmethod
    def initial(cls, tiles: Iterable[int], hfun: Callable[[Tiles], int]) -> "State":
        s = validate(tiles)
        blank = s.index(0)
        return cls(s, blank, 0, hfun(s), None, hfun)

    @classmethod
    def successor(cls, parent: "State", swap: int) -> "State":
        lst = list(parent.tiles)
        lst[parent.blank] = lst[swap]
        lst[swap] = 0
        s = tuple(lst)
        return cls(s, swap, parent.g + 1, parent.hfun(s), parent, parent.hfun)

    def priority(self) -> int:
        return self.g + self.h

    # ---------- Moves ----------
    def move_south(self) -> Optional["State"]:
        return State.successor(self, self.blank - 3) if self.blank > 2 else None

    def move_north(self) -> Optional["State"]:
        return State.successor(self, self.blank + 3) if self.blank < 6 else None

    def move_east(self) -> Optional["State"]:
        return State.successor(self, self.blank - 1) if self.blank % 3 > 0 else None

    def move_west(self) -> Optional["State"]:
        return State.successor(self, self.blank + 1) if self.blank % 3 < 2 else None

    def successors(self) -> List["State"]:
        """Existing successors in South, North, West, East order."""
        out = []
        for nxt in (self.move_south(), self.move_north(), self.move_west(), self.move_east()):
            if nxt is not None:
                out.append(nxt)
        return out

    def is_goal(self, goal: Tiles) -> bool:
        return self.tiles == goal

    def path(self) -> List[Tiles]:
        """Arrangements from the root of the chain to this state, oldest first."""
        out: List[Tiles] = []
        node: Optional[State] = self
        while node is not None:
            out.append(node.tiles)
            node = node.parent
        out.reverse()
        return out
