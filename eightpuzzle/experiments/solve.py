#!/usr/bin/env python3
"""Solve one arrangement and print the chain of states, start to goal."""
import argparse
from typing import List, Optional

from eightpuzzle.domains.puzzle8 import GOAL, InvalidArrangementError, rows, validate
from eightpuzzle.search.a_star import AStarSolver
from eightpuzzle.search.state import State

DEFAULT_START = (2, 8, 3, 1, 6, 4, 7, 0, 5)

def format_state(s: State) -> str:
    lines = [f"p = {s.priority()} = g+h = {s.g}+{s.h}"]
    for row in rows(s.tiles):
        lines.append(" ".join(str(t) for t in row))
    return "\n".join(lines)

def chain(s: State) -> List[State]:
    out = []
    node: Optional[State] = s
    while node is not None:
        out.append(node); node = node.parent
    out.reverse()
    return out

def format_solution(s: State) -> str:
    return "\n\n".join(format_state(x) for x in chain(s))

def main(argv=None):
    ap = argparse.ArgumentParser(description="Solve a single 8-puzzle with A* (Manhattan).")
    ap.add_argument("--tiles", type=int, nargs=9, default=list(DEFAULT_START),
                    help="Start arrangement, row-major, 0 = blank")
    ap.add_argument("--goal", type=int, nargs=9, default=list(GOAL))
    ap.add_argument("--tie_break", choices=["h","g","fifo","lifo"], default="h")
    ap.add_argument("--stats", action="store_true", help="Also print search counters")
    args = ap.parse_args(argv)

    try:
        start = validate(args.tiles)
        solver = AStarSolver(args.goal, tie_break=args.tie_break)
    except InvalidArrangementError as e:
        ap.error(str(e))

    res = solver.solve(start)
    if res["termination"] != "ok":
        print("No solution reachable from", start)
    else:
        print(format_solution(solver.solution))
        print(f"\nSolved in {res['g']} moves")
    if args.stats:
        print(f"expanded={res['expanded']} generated={res['generated']} "
              f"duplicates={res['duplicates']} stale={res['stale']} "
              f"peak_open={res['peak_open']} time={res['time']:.4f}s")
    return res

if __name__ == "__main__":
    main()
