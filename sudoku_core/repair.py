"""Mark-driven placement and the swap repair used when a cell runs out of marks."""

from __future__ import annotations

from .board import SIZE, Board, Cell
from .log import get_logger
from .solver_core import check_num

logger = get_logger(__name__)

# check_marks result meaning "no usable mark"
NO_MARK = 0


def check_marks(board: Board, c: Cell) -> int:
    """Pick a digit from the cell's marks, or NO_MARK.

    A single mark is returned as is, without re-checking it. With several marks
    the first one check_num still accepts wins.
    """
    logger.debug("check marks for %s%s", c, c.marks)
    if not c.marks:
        logger.debug("no marks available for %s", c)
        return NO_MARK
    if len(c.marks) == 1:
        return c.marks[0]
    for mark in c.marks:
        check = check_num(board, mark, c.row, c.col)
        if check:
            logger.debug("mark %d not fit for %s: %s", mark, c, check)
        else:
            return mark

    logger.debug("marks exhausted for %s", c)
    return NO_MARK


def swap(board: Board, c1: Cell, c2: Cell) -> None:
    v1 = board[c1.row, c1.col].value
    v2 = board[c2.row, c2.col].value
    logger.debug("swap %s with %s", c1, c2)
    board.set_value(c1.row, c1.col, v2)
    board.set_value(c2.row, c2.col, v1)


def find_conflict(board: Board, c: Cell, digit: int | None = None) -> Cell | None:
    """First other cell in c's row, then column, holding `digit` (default: c's value).

    Boxes are not searched: swapping inside a box cannot fix a box duplicate.
    """
    n = board[c.row, c.col].value if digit is None else digit
    if n == 0:
        return None
    for col in range(SIZE):
        if col != c.col and board[c.row, col].value == n:
            return board[c.row, col]
    for row in range(SIZE):
        if row != c.row and board[row, c.col].value == n:
            return board[row, c.col]
    return None


def set_all(board: Board) -> bool:
    """Place a mark in every empty cell, row-major.

    On the first cell without a usable mark, swap it with whatever blocks its
    first mark in the row or column and report False.
    """
    for cell in board.cells():
        if cell.value > 0:
            continue
        mark = check_marks(board, cell)
        if mark == NO_MARK:
            blocker = find_conflict(board, cell, cell.marks[0]) if cell.marks else None
            if blocker is not None:
                swap(board, cell, blocker)
            return False
        board.set_value(cell.row, cell.col, mark)
    return True
