from __future__ import annotations

import random
from typing import Iterable, List, Optional, Set, Tuple

from .grid import Grid, GridError, Position, create_grid
from .planning import SearchResult

WALL = "#"
START = "S"
END = "E"
PATH = "*"
VISITED = "o"
EMPTY = "."

# rendered overlays read back as empty floor
_FLOOR = {EMPTY, PATH, VISITED}


class MapFormatError(GridError):
    pass


def render(
    grid: Grid,
    start: Optional[Position] = None,
    end: Optional[Position] = None,
    result: Optional[SearchResult] = None,
) -> str:
    visited: Set[Position] = set()
    path: Set[Position] = set()
    if result is not None:
        visited = {cell.pos for cell in result.visited_order}
        path = {cell.pos for cell in result.path}

    lines: List[str] = []
    for r in range(grid.height):
        row: List[str] = []
        for c in range(grid.width):
            pos = (r, c)
            ch = EMPTY
            if pos in visited:
                ch = VISITED
            if pos in path:
                ch = PATH
            if grid[pos].is_wall:
                ch = WALL
            if pos == start:
                ch = START
            elif pos == end:
                ch = END
            row.append(ch)
        lines.append(" ".join(row))
    return "\n".join(lines)


def parse(text: str) -> Tuple[Grid, Optional[Position], Optional[Position]]:
    """Build a grid from rows of '#', '.', 'S' and 'E'. Whitespace inside a row is ignored."""
    rows = [[ch for ch in line if not ch.isspace()] for line in text.splitlines()]
    rows = [row for row in rows if row]
    if not rows:
        raise MapFormatError("map is empty")

    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise MapFormatError(f"row {i} has {len(row)} cells, expected {width}")

    grid = create_grid(len(rows), width)
    start: Optional[Position] = None
    end: Optional[Position] = None
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == WALL:
                grid[(r, c)].is_wall = True
            elif ch == START:
                if start is not None:
                    raise MapFormatError(f"second start marker at {(r, c)}")
                start = (r, c)
            elif ch == END:
                if end is not None:
                    raise MapFormatError(f"second end marker at {(r, c)}")
                end = (r, c)
            elif ch not in _FLOOR:
                raise MapFormatError(f"unknown map character {ch!r} at {(r, c)}")
    return grid, start, end


def random_walls(grid: Grid, wall_prob: float, rng: random.Random, keep: Iterable[Position] = ()) -> Grid:
    """Independently wall each cell with probability wall_prob, skipping the coordinates in keep."""
    if not 0.0 <= wall_prob <= 1.0:
        raise GridError(f"wall probability must be within [0, 1], got {wall_prob}")
    protected = set(keep)
    for cell in grid.cells():
        if cell.pos in protected:
            cell.is_wall = False
            continue
        cell.is_wall = rng.random() < wall_prob
    return grid
