"""Board model: 81 cells addressed by (row, col), plus the box coordinate mapping.

Cells carry their position (fixed at creation), a value (0 = empty), a list of
marks (candidate digits, no repeats) and presentation flags that can be reset
without touching the rest of the cell.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterator

from types_sudoku import Coord, Grid

from .errors import RangeViolation
from .log import get_logger

logger = get_logger(__name__)

SIZE = 9
BOX = 3
DIGITS = tuple(range(1, 10))


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def box(row: int, col: int) -> Coord:
    """Top-left (row, col) of the 3x3 box holding (row, col)."""
    return (row // BOX) * BOX, (col // BOX) * BOX


def which_box(r: int, c: int) -> int:
    """1-based box number, row-major."""
    return BOX * (r // BOX) + (c // BOX) + 1


def add_once(seq: list[int], n: int) -> list[int]:
    """Append n to seq unless it is already there."""
    if n not in seq:
        seq.append(n)
    return seq


@dataclass
class Annotations:
    invalid: bool = False
    active: bool = False
    selected: bool = False
    candidate: bool = False
    solved: bool = False
    blink: bool = False

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, False)


@dataclass
class Cell:
    row: int
    col: int
    value: int = 0
    marks: list[int] = field(default_factory=list)
    annotations: Annotations = field(default_factory=Annotations)

    @property
    def empty(self) -> bool:
        return self.value == 0

    @property
    def coord(self) -> Coord:
        return self.row, self.col

    def __str__(self) -> str:
        return f"[{self.row}{self.col}]"


class Board:
    """A fixed 9x9 grid of Cells; board[row, col] returns the Cell."""

    def __init__(self):
        self._cells = [[Cell(row=r, col=c) for c in range(SIZE)] for r in range(SIZE)]

    @classmethod
    def from_grid(cls, grid: Grid) -> "Board":
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise ValueError("grid must be 9x9")
        b = cls()
        for r in range(SIZE):
            for c in range(SIZE):
                b._cells[r][c].value = int(grid[r][c])
        return b

    def to_grid(self) -> Grid:
        return [[cell.value for cell in row] for row in self._cells]

    def __getitem__(self, rc: Coord) -> Cell:
        r, c = rc
        if not in_bounds(r, c):
            raise RangeViolation(r, c)
        return self._cells[r][c]

    def __iter__(self) -> Iterator[Cell]:
        return self.cells()

    def __repr__(self) -> str:
        rows = "".join(str(v) for row in self.to_grid() for v in row)
        return f"Board({rows})"

    def cells(self) -> Iterator[Cell]:
        """All cells, row-major."""
        for row in self._cells:
            yield from row

    def row_cells(self, r: int) -> list[Cell]:
        return [self[r, c] for c in range(SIZE)]

    def col_cells(self, c: int) -> list[Cell]:
        return [self[r, c] for r in range(SIZE)]

    def box_cells(self, r: int, c: int) -> list[Cell]:
        """Cells of the box holding (r, c), row-major from its top-left corner."""
        if not in_bounds(r, c):
            raise RangeViolation(r, c)
        r0, c0 = box(r, c)
        return [self[r0 + i, c0 + j] for i in range(BOX) for j in range(BOX)]

    def set_value(self, r: int, c: int, v: int) -> None:
        if not 0 <= v <= 9:
            logger.error("refusing %d for [%d%d]", v, r, c)
            raise RangeViolation(r, c, v)
        self[r, c].value = v
        logger.debug("[%d%d] set to %d", r, c, v)

    def add_mark(self, r: int, c: int, n: int) -> None:
        add_once(self[r, c].marks, n)

    def clear(self) -> None:
        """Reset presentation flags on every cell; value, position and marks remain."""
        for cell in self.cells():
            cell.annotations.reset()

    # cross-hatching helpers
    def select_row(self, r: int) -> None:
        for cell in self.row_cells(r):
            cell.annotations.selected = True

    def select_column(self, c: int) -> None:
        for cell in self.col_cells(c):
            cell.annotations.selected = True

    def select_box(self, r: int, c: int) -> None:
        for cell in self.box_cells(r, c):
            cell.annotations.selected = True

    def select_cells(self, r: int, c: int) -> None:
        self.select_row(r)
        self.select_column(c)
        self.select_box(r, c)
