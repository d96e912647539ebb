from __future__ import annotations

from enum import Enum
from typing import Optional

from .grid import Grid, GridError, OutOfBounds, Position, create_grid, toggle_wall
from .planning import SearchResult, search


class EditOutcome(Enum):
    START_SET = "start_set"
    END_SET = "end_set"
    WALL_ADDED = "wall_added"
    WALL_REMOVED = "wall_removed"
    REJECTED = "rejected"


class EditSession:
    """Grid plus start/end markers, edited the way a user clicks on a board.

    The first click places the start, the second the end, every later click
    toggles a wall. Walls can never land on the start or end cell.
    """

    def __init__(self, height: int, width: int) -> None:
        self.height = height
        self.width = width
        self.grid: Grid = create_grid(height, width)
        self.start: Optional[Position] = None
        self.end: Optional[Position] = None
        self.locked = False

    @property
    def ready(self) -> bool:
        return self.start is not None and self.end is not None

    def reset(self) -> None:
        self.grid = create_grid(self.height, self.width)
        self.start = None
        self.end = None
        self.locked = False

    def click(self, row: int, col: int) -> EditOutcome:
        if not self.grid.in_bounds(row, col):
            raise OutOfBounds(f"({row}, {col}) is outside a {self.height}x{self.width} grid")
        if self.locked:
            return EditOutcome.REJECTED
        pos = (row, col)
        if self.start is None:
            if self.grid.cell(row, col).is_wall:
                return EditOutcome.REJECTED
            self.start = pos
            return EditOutcome.START_SET
        if self.end is None:
            if pos == self.start or self.grid.cell(row, col).is_wall:
                return EditOutcome.REJECTED
            self.end = pos
            return EditOutcome.END_SET
        return self._toggle(pos)

    def drag(self, row: int, col: int) -> EditOutcome:
        """Paint walls while the mouse is held; only once both markers are down."""
        if not self.grid.in_bounds(row, col):
            raise OutOfBounds(f"({row}, {col}) is outside a {self.height}x{self.width} grid")
        if self.locked or not self.ready:
            return EditOutcome.REJECTED
        return self._toggle((row, col))

    def _toggle(self, pos: Position) -> EditOutcome:
        if pos == self.start or pos == self.end:
            return EditOutcome.REJECTED
        toggle_wall(self.grid, *pos)
        return EditOutcome.WALL_ADDED if self.grid[pos].is_wall else EditOutcome.WALL_REMOVED

    def solve(self) -> SearchResult:
        if not self.ready:
            raise GridError("place both a start and an end cell before solving")
        return search(self.grid, self.start, self.end)
