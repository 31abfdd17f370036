from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from eightpuzzle.domains.puzzle8 import (
    GOAL,
    is_solvable,
    make_unsolvable_variant,
    scramble,
)
from eightpuzzle.search.a_star import AStarSolver

State = Tuple[int, ...]

HEADER = [
    "algorithm","heuristic","depth","seed",
    "expanded","generated","duplicates","stale","g","time_sec",
    "peak_open","peak_closed","tie_break","termination","solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: State

def generate(depths: List[int], per_depth: int, goal: State = GOAL, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = scramble(d, seed, goal)
            attempts += 1
            if is_solvable(s, goal):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def row_for(res: dict, inst: Instance, solvable_flag: int) -> list:
    return [
        res.get("algorithm",""), "manhattan", inst.depth, inst.seed,
        res.get("expanded",""), res.get("generated",""), res.get("duplicates",""), res.get("stale",""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time',0.0):.6f}",
        res.get("peak_open",""), res.get("peak_closed",""),
        res.get("tie_break",""), res.get("termination","ok"), solvable_flag,
    ]

def run(insts: List[Instance], out: Path, tie_break: str = "h",
        include_unsolvable: bool = False, goal: State = GOAL) -> int:
    """Solve every instance and write one CSV row per run. Returns rows written."""
    solver = AStarSolver(goal, tie_break=tie_break)
    out.parent.mkdir(parents=True, exist_ok=True)
    n = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            r = solver.solve(inst.state, return_path=False)
            w.writerow(row_for(r, inst, 1)); n += 1
            # Unsolvable variants exhaust all 181440 states of their parity class.
            if include_unsolvable:
                u = make_unsolvable_variant(inst.state)
                r = solver.solve(u, return_path=False)
                w.writerow(row_for(r, inst, 0)); n += 1
    return n

def main(argv=None):
    ap = argparse.ArgumentParser(description="A* 8-puzzle experiment runner")
    ap.add_argument("--depths", type=int, nargs="+", default=[6,10,14,18,22,26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--tie_break", choices=["h","g","fifo","lifo"], default="h")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    insts = generate(args.depths, args.per_depth, start_seed=args.seed)
    n = run(insts, args.out, tie_break=args.tie_break, include_unsolvable=args.include_unsolvable)
    print(f"Wrote {args.out} ({len(insts)} instances, {n} rows)")

if __name__ == "__main__":
    main()
