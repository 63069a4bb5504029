"""Constraint checks and candidate digits: the read-only side of the core.

check_row / check_col / check_box scan one unit for a digit and report the first
hit as an Occurrence, or NOT_FOUND. find_used / find_free split 1..9 into digits
already taken around an empty cell and digits still legal there.
"""

# solver_core.py
# Board is never mutated here except by compute_marks, which only touches marks.

from __future__ import annotations

from dataclasses import dataclass

from .board import BOX, DIGITS, SIZE, Board, Cell, add_once, box, in_bounds
from .errors import RangeViolation
from .log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Occurrence:
    """Digit found at (row, col) while scanning `unit` ('row', 'col' or 'box')."""

    unit: str
    digit: int
    row: int
    col: int
    found = True

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"number {self.digit} found in cell [{self.row}{self.col}]"


class NotFound:
    found = False

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

CheckResult = Occurrence | NotFound


def check_row(board: Board, num: int, row: int) -> CheckResult:
    for col in range(SIZE):
        if board[row, col].value == num:
            return Occurrence("row", num, row, col)
    return NOT_FOUND


def check_col(board: Board, num: int, col: int) -> CheckResult:
    for row in range(SIZE):
        if board[row, col].value == num:
            return Occurrence("col", num, row, col)
    return NOT_FOUND


def check_box(board: Board, num: int, row: int, col: int) -> CheckResult:
    srow, scol = box(row, col)
    for r in range(srow, srow + BOX):
        for c in range(scol, scol + BOX):
            if board[r, c].value == num:
                return Occurrence("box", num, r, c)
    return NOT_FOUND


def check_num(board: Board, num: int, row: int, col: int) -> CheckResult:
    """Row, then column, then box; the first unit holding `num` wins."""
    found = check_row(board, num, row)
    if found:
        return found
    found = check_col(board, num, col)
    if found:
        return found
    return check_box(board, num, row, col)


def find_used(board: Board, cell: Cell) -> list[int]:
    """Digits already placed in the row, column and box of an empty cell.

    Order is row first, then column, then box, each digit kept at its first
    appearance. A filled cell has no used digits.
    """
    if not in_bounds(cell.row, cell.col):
        logger.error("not a valid cell: [%d%d]", cell.row, cell.col)
        raise RangeViolation(cell.row, cell.col)
    used: list[int] = []
    if board[cell.row, cell.col].value > 0:
        return used

    for c in board.row_cells(cell.row):
        if c.value > 0:
            add_once(used, c.value)
    for c in board.col_cells(cell.col):
        if c.value > 0:
            add_once(used, c.value)
    for c in board.box_cells(cell.row, cell.col):
        if c.value > 0:
            add_once(used, c.value)
    return used


def find_free(used: list[int]) -> list[int]:
    """Digits 1..9 missing from `used`, ascending."""
    taken = set(used)
    return [d for d in DIGITS if d not in taken]


def candidates(board: Board, cell: Cell) -> list[int]:
    """find_free(find_used(...)) for a cell; empty for a filled cell."""
    if board[cell.row, cell.col].value > 0:
        return []
    return find_free(find_used(board, cell))


def compute_marks(board: Board) -> Board:
    """Record as marks every digit that check_num accepts, for each empty cell."""
    for cell in board.cells():
        if cell.value > 0:
            continue
        for n in DIGITS:
            if not check_num(board, n, cell.row, cell.col):
                board.add_mark(cell.row, cell.col, n)
        logger.debug("marks for %s: %s", cell, cell.marks)
    return board
