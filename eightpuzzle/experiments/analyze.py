#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import pandas as pd
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ("expanded", "generated", "time_sec", "g")

def load(paths):
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    # Normalize schema
    if "algorithm" not in df.columns and "algo" in df.columns:
        df = df.rename(columns={"algo":"algorithm"})
    if "time_sec" not in df.columns and "time" in df.columns:
        df = df.rename(columns={"time":"time_sec"})
    if "solvable" not in df.columns:
        df["solvable"] = 1
    if "termination" not in df.columns:
        df["termination"] = "ok"
    df["termination"] = df["termination"].fillna("ok")

    for c in ("depth","seed","expanded","generated","duplicates","stale","g","time_sec","solvable"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df.dropna(subset=["depth"])

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """mean/median/min/max/std of each metric per (solvable, depth)."""
    cols = [m for m in METRICS if m in df.columns]
    out = df.groupby(["solvable","depth"])[cols].agg(["mean","median","min","max","std"])
    return out.fillna(0.0)

def plot_by_depth(df: pd.DataFrame, outdir: Path, metric: str):
    sub = df[(df["solvable"] == 1) & (df["termination"] == "ok")]
    if sub.empty:
        return None
    g = sub.groupby("depth")[metric].agg(["mean","std"]).fillna(0.0)
    fig, ax = plt.subplots(figsize=(6,4))
    ax.errorbar(g.index, g["mean"], yerr=g["std"], marker="o", capsize=3)
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"A* {metric} vs scramble depth (mean ± std)")
    ax.grid(True)
    outdir.mkdir(parents=True, exist_ok=True)
    p = outdir / f"astar_{metric}.png"
    fig.savefig(p, dpi=200, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {p}")
    return p

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs.")
    ap.add_argument("csv", nargs="+", help="CSV files produced by the runner")
    ap.add_argument("--save", default=None, help="Directory to save plots (no plots if omitted)")
    args = ap.parse_args(argv)

    df = load(args.csv)
    if df.empty:
        print("No rows to analyze. Are your CSVs empty?")
        return None

    stats = summarize(df)
    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(stats)

    exhausted = df[df["termination"] == "exhausted"]
    if not exhausted.empty:
        print(f"\n{len(exhausted)} run(s) exhausted the frontier "
              f"(mean expanded={exhausted['expanded'].mean():.0f})")

    if args.save:
        for metric in ("expanded","generated","time_sec"):
            plot_by_depth(df, Path(args.save), metric)
    return stats

if __name__ == "__main__":
    main()
