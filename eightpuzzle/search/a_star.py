from __future__ import annotations
from typing import Iterable, List, Optional, Tuple
from time import perf_counter

from eightpuzzle.domains.puzzle8 import GOAL, validate
from eightpuzzle.heuristics.manhattan import Manhattan
from eightpuzzle.search.frontier import Frontier, SeenSet
from eightpuzzle.search.state import State, Tiles

INITIALIZED = "initialized"
RUNNING = "running"
SOLVED = "solved"
EXHAUSTED = "exhausted"


class AStarSolver:
    """Best-first search on f = g + h over 8-puzzle arrangements.

    One solve at a time per instance. `status` moves
    initialized -> running -> solved | exhausted.
    """

    def __init__(self, goal: Iterable[int] = GOAL, tie_break: str = "h"):
        self.goal: Tiles = validate(goal)
        self.hfun = Manhattan(self.goal)
        self.frontier = Frontier(tie_break)
        self.seen = SeenSet()
        self.status = INITIALIZED
        self.solution: Optional[State] = None
        # (tiles, priority) of every expanded state, when record_trace is on
        self.trace: List[Tuple[Tiles, int]] = []

    def solve(self, initial: Iterable[int], return_path: bool = True,
              record_trace: bool = False) -> dict:
        """Run A* from `initial` to completion and return instrumentation.

        Raises InvalidArrangementError before any search if `initial` is
        not a permutation of 0..8.
        """
        start = State.initial(initial, self.hfun)
        t0 = perf_counter()

        self.frontier.clear()
        self.seen.clear()
        self.trace = []
        self.solution = None
        self.frontier.push(start)
        self.status = RUNNING

        expanded = 0
        generated = 0
        duplicates = 0
        stale = 0
        peak_open = 1
        peak_closed = 0

        while not self.frontier.is_empty():
            peak_open = max(peak_open, len(self.frontier))
            node = self.frontier.pop_min()

            if node.is_goal(self.goal):
                self.status = SOLVED
                self.solution = node
                return self._result(node.path() if return_path else None, node.g,
                                    expanded, generated, duplicates, stale,
                                    peak_open, peak_closed, perf_counter() - t0, "ok")

            # stale copy pushed before this arrangement was expanded
            if self.seen.contains(node.tiles):
                stale += 1
                continue

            self.seen.insert(node.tiles)
            expanded += 1
            peak_closed = max(peak_closed, len(self.seen))
            if record_trace:
                self.trace.append((node.tiles, node.priority()))

            for child in node.successors():
                generated += 1
                if self.seen.contains(child.tiles):
                    duplicates += 1
                    continue
                self.frontier.push(child)

        self.status = EXHAUSTED
        return self._result(None, None, expanded, generated, duplicates, stale,
                            peak_open, peak_closed, perf_counter() - t0, "exhausted")

    def _result(self, path, g, expanded, generated, duplicates, stale,
                peak_open, peak_closed, elapsed, termination) -> dict:
        return {
            "path": path,
            "g": g,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "stale": stale,
            "peak_open": peak_open,
            "peak_closed": peak_closed,
            "time": elapsed,
            "algorithm": "A*",
            "tie_break": self.frontier.tie_break,
            "termination": termination,
        }


def a_star(
    start: Iterable[int],
    goal: Iterable[int] = GOAL,
    tie_break: str = "h",
    return_path: bool = True,
):
    """Convenience wrapper: solve once with a fresh AStarSolver."""
    return AStarSolver(goal, tie_break=tie_break).solve(start, return_path=return_path)
