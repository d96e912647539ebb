from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

Position = Tuple[int, int]  # (row, col)

# (+1,0), (-1,0), (0,+1), (0,-1). Order decides BFS tie-breaking.
DIRECTIONS: Tuple[Position, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class GridError(ValueError):
    """Base class for invalid grid input."""


class InvalidDimension(GridError):
    pass


class OutOfBounds(GridError, IndexError):
    pass


@dataclass
class Cell:
    row: int
    col: int
    is_wall: bool = False

    @property
    def pos(self) -> Position:
        return (self.row, self.col)


class Grid:
    """Fixed-size rectangle of cells. Walls may change, the shape may not."""

    def __init__(self, height: int, width: int) -> None:
        for name, value in (("height", height), ("width", width)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimension(f"{name} must be a positive integer, got {value!r}")
        self._height = height
        self._width = width
        self._cells: List[List[Cell]] = []
        self.reset()

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def shape(self) -> Position:
        return (self._height, self._width)

    def reset(self) -> None:
        """Restore every cell to its initial state."""
        self._cells = [
            [Cell(row=r, col=c) for c in range(self._width)]
            for r in range(self._height)
        ]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise OutOfBounds(f"({row}, {col}) is outside a {self._height}x{self._width} grid")
        return self._cells[row][col]

    def __getitem__(self, pos: Position) -> Cell:
        return self.cell(*pos)

    def neighbors(self, cell: Cell) -> List[Cell]:
        out: List[Cell] = []
        for dr, dc in DIRECTIONS:
            r, c = cell.row + dr, cell.col + dc
            if self.in_bounds(r, c):
                out.append(self._cells[r][c])
        return out

    def cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def walls(self) -> List[Position]:
        return [cell.pos for cell in self.cells() if cell.is_wall]

    def __repr__(self) -> str:
        return f"Grid(height={self._height}, width={self._width}, walls={len(self.walls())})"


def create_grid(height: int, width: int) -> Grid:
    return Grid(height, width)


def toggle_wall(grid: Grid, row: int, col: int) -> Grid:
    """Flip the wall flag at (row, col). Start/end protection is the caller's job."""
    cell = grid.cell(row, col)
    cell.is_wall = not cell.is_wall
    return grid


def as_position(grid: Grid, where: Union[Cell, Position]) -> Position:
    """Accept a Cell or a (row, col) pair and check it against the grid."""
    if isinstance(where, Cell):
        pos = where.pos
    else:
        row, col = where
        pos = (row, col)
    if not grid.in_bounds(*pos):
        raise OutOfBounds(f"{pos} is outside a {grid.height}x{grid.width} grid")
    return pos
