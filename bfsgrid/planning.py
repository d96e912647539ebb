from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, replace
from typing import Deque, Dict, List, Optional, Set, Union

from .grid import Cell, Grid, Position, as_position


@dataclass
class SearchResult:
    """Outcome of one BFS run.

    visited_order lists cells in the order they were dequeued. parents maps a
    discovered coordinate to the coordinate it was reached from (None for the
    start). Cells are snapshots, so later wall edits do not leak into a result.
    """

    start: Position
    end: Position
    visited_order: List[Cell] = field(default_factory=list)
    end_reached: bool = False
    parents: Dict[Position, Optional[Position]] = field(default_factory=dict)
    discovered: Dict[Position, Cell] = field(default_factory=dict, repr=False)

    def visited(self, where: Union[Cell, Position]) -> bool:
        """True if the cell was marked visited (discovered) during the run."""
        pos = where.pos if isinstance(where, Cell) else tuple(where)
        return pos in self.parents

    def previous(self, where: Union[Cell, Position]) -> Optional[Cell]:
        pos = where.pos if isinstance(where, Cell) else tuple(where)
        prev = self.parents.get(pos)
        return self.discovered[prev] if prev is not None else None

    @property
    def path(self) -> List[Cell]:
        if not self.end_reached:
            return []
        return reconstruct_path(self.visited_order[-1], self)

    def summary(self) -> dict:
        return {
            "visited": len(self.visited_order),
            "path_len": len(self.path),
            "status": "found" if self.end_reached else "not_found",
        }


def search(grid: Grid, start, end) -> SearchResult:
    """
    Breadth-first search from start, stopping when end is dequeued.
    Cells are marked visited when enqueued, so each one is linked at most once
    and the parent map is a tree rooted at start.
    """
    start_pos = as_position(grid, start)
    end_pos = as_position(grid, end)
    result = SearchResult(start=start_pos, end=end_pos)

    first = replace(grid.cell(*start_pos))
    queue: Deque[Cell] = deque([first])
    seen: Set[Position] = {start_pos}
    result.parents[start_pos] = None
    result.discovered[start_pos] = first

    while queue:
        current = queue.popleft()
        result.visited_order.append(current)

        if current.pos == end_pos:
            result.end_reached = True
            return result

        for neighbor in grid.neighbors(current):
            if neighbor.pos in seen or neighbor.is_wall:
                continue
            seen.add(neighbor.pos)
            snapshot = replace(neighbor)
            result.parents[neighbor.pos] = current.pos
            result.discovered[neighbor.pos] = snapshot
            queue.append(snapshot)

    return result  # frontier exhausted, end unreachable


def reconstruct_path(end_cell: Cell, result: SearchResult) -> List[Cell]:
    """Follow back-links from end_cell to the start, returned start-first, walls dropped."""
    if end_cell.pos not in result.parents:
        raise ValueError(f"{end_cell.pos} was never reached by this search")

    path: List[Cell] = []
    cur: Optional[Cell] = result.discovered[end_cell.pos]
    while cur is not None:
        path.append(cur)
        cur = result.previous(cur)
    path.reverse()
    return [cell for cell in path if not cell.is_wall]


def shortest_path(grid: Grid, start, end) -> Optional[List[Position]]:
    """Coordinates of the shortest start-to-end path, or None if no path exists."""
    result = search(grid, start, end)
    if not result.end_reached:
        return None
    return [cell.pos for cell in result.path]
