#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Tuple

import numpy as np
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.domains.puzzle8 import GOAL, InvalidArrangementError, scramble, validate
from eightpuzzle.search.a_star import AStarSolver

State = Tuple[int, ...]

def draw_board(state: State, out_path: Path, title: str = ""):
    board = np.array(state).reshape(3, 3)
    fig, ax = plt.subplots(figsize=(3,3))
    ax.imshow((board == 0).astype(float), cmap="Greys", vmin=0, vmax=1)
    ax.set_xticks([]); ax.set_yticks([])
    for r in range(3):
        for c in range(3):
            if board[r, c]:
                ax.text(c, r, str(board[r, c]), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)

def save_frames(path: List[State], outdir: Path) -> List[Path]:
    out = []
    for i, s in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(s, p, title=f"move {i}")
        out.append(p)
    return out

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--tiles", type=int, nargs=9, default=None, help="Start arrangement (else scrambled)")
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="report/figs/example_path")
    args = p.parse_args(argv)

    try:
        start = validate(args.tiles) if args.tiles else scramble(args.depth, args.seed)
    except InvalidArrangementError as e:
        p.error(str(e))

    res = AStarSolver(GOAL).solve(start)
    if not res.get("path"):
        print("No path (frontier exhausted).")
        return []

    frames = save_frames(res["path"], Path(args.outdir))
    print(f"Saved {len(frames)} frames to {args.outdir}")
    return frames

if __name__ == "__main__":
    main()
