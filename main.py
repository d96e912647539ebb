from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

from bfsgrid import asciimap
from bfsgrid.grid import Grid, GridError, Position, create_grid
from bfsgrid.planning import search


def parse_position(text: str) -> Position:
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected row,col but got {text!r}")
    return (row, col)


def check_markers(grid: Grid, start: Position, end: Position) -> None:
    """Start and end must be distinct open cells before the search runs."""
    if start == end:
        raise GridError(f"start and end are the same cell {start}")
    for name, pos in (("start", start), ("end", end)):
        if grid[pos].is_wall:
            raise GridError(f"{name} {pos} is a wall")


def run(args: argparse.Namespace) -> int:
    if args.map:
        grid, start, end = asciimap.parse(Path(args.map).read_text(encoding="utf-8"))
    else:
        grid = create_grid(args.height, args.width)
        start, end = None, None
    start = args.start or start or (0, 0)
    end = args.end or end or (grid.height - 1, grid.width - 1)

    if not args.map and args.wall_prob > 0:
        asciimap.random_walls(grid, args.wall_prob, random.Random(args.seed), keep=(start, end))
    check_markers(grid, start, end)

    result = search(grid, start, end)
    if not args.quiet:
        print(asciimap.render(grid, start, end))
        print()
        print(asciimap.render(grid, start, end, result))
        print()

    summary = result.summary()
    print(f"start={start} end={end} visited={summary['visited']}")
    if not result.end_reached:
        print("End is unreachable")
        return 1
    print(f"path length={summary['path_len']}: " + " -> ".join(f"{c.row},{c.col}" for c in result.path))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Breadth-first shortest path on a walled grid.")
    parser.add_argument("--map", type=str, default=None, help="text map of '#', '.', 'S', 'E'")
    parser.add_argument("--height", type=int, default=12)
    parser.add_argument("--width", type=int, default=20)
    parser.add_argument("--wall-prob", type=float, default=0.0, help="random wall density when no map is given")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--start", type=parse_position, default=None, help="row,col")
    parser.add_argument("--end", type=parse_position, default=None, help="row,col")
    parser.add_argument("--quiet", action="store_true", help="skip the board drawings")
    args = parser.parse_args(argv)

    try:
        return run(args)
    except (GridError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
