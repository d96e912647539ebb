from __future__ import annotations

import argparse
import random
from pathlib import Path
from statistics import mean
from typing import List, Optional

import matplotlib.pyplot as plt

from bfsgrid.asciimap import random_walls
from bfsgrid.grid import create_grid
from bfsgrid.planning import search


def run_batch(height: int, width: int, wall_prob: float, grids: int, seed_offset: int = 0) -> dict:
    """Search corner to corner on `grids` random boards and aggregate the outcomes."""
    if grids <= 0:
        raise ValueError(f"grids must be positive, got {grids}")
    start, end = (0, 0), (height - 1, width - 1)
    found = 0
    visited: List[int] = []
    path_lens: List[int] = []

    for i in range(grids):
        grid = create_grid(height, width)
        random_walls(grid, wall_prob, random.Random(seed_offset + i), keep=(start, end))
        result = search(grid, start, end)
        visited.append(len(result.visited_order))
        if result.end_reached:
            found += 1
            path_lens.append(len(result.path))

    return {
        "wall_prob": wall_prob,
        "reach_rate": found / grids,
        "avg_visited": mean(visited),
        "avg_path": mean(path_lens) if path_lens else 0.0,
    }


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Reachability of random walled grids vs wall density.")
    ap.add_argument("--grids", type=int, default=200, help="boards per wall probability")
    ap.add_argument("--height", type=int, default=12)
    ap.add_argument("--width", type=int, default=20)
    ap.add_argument("--wall-probs", type=str, default="0,0.1,0.2,0.3,0.4,0.5")
    ap.add_argument("--seed-offset", type=int, default=0)
    ap.add_argument("--out-plot", type=str, default="results/reachability.png")
    args = ap.parse_args(argv)
    if args.grids <= 0:
        ap.error("--grids must be positive")

    probs = [float(x.strip()) for x in args.wall_probs.split(",") if x.strip()]

    rows = []
    for p in probs:
        print(f"wall_prob={p:.2f} ({args.grids} grids)...", end=" ", flush=True)
        rows.append(run_batch(args.height, args.width, p, args.grids, seed_offset=args.seed_offset))
        print("done")

    print("wall_prob | reach% | avg_visited | avg_path")
    for r in rows:
        print(f"{r['wall_prob']:9.2f} | {r['reach_rate']*100:6.1f} | {r['avg_visited']:11.1f} | {r['avg_path']:8.1f}")

    out_plot = Path(args.out_plot)
    out_plot.parent.mkdir(parents=True, exist_ok=True)

    fig, (ax_rate, ax_size) = plt.subplots(1, 2, figsize=(10, 4))
    ax_rate.plot([r["wall_prob"] for r in rows], [r["reach_rate"] for r in rows], marker="o")
    ax_rate.set_title("End reachable vs wall density")
    ax_rate.set_xlabel("wall probability")
    ax_rate.set_ylabel("reach rate")
    ax_size.plot([r["wall_prob"] for r in rows], [r["avg_visited"] for r in rows], marker="o", label="visited")
    ax_size.plot([r["wall_prob"] for r in rows], [r["avg_path"] for r in rows], marker="s", label="path")
    ax_size.set_title(f"Cells per search ({args.height}x{args.width})")
    ax_size.set_xlabel("wall probability")
    ax_size.legend()
    fig.tight_layout()
    fig.savefig(out_plot)
    plt.close(fig)

    print(f"Saved plot: {out_plot}")


if __name__ == "__main__":
    main()
