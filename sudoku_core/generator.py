"""Seeding and box filling.

gen_box writes a shuffled 1..9 into one box; gen3boxes does it for the three
boxes on the main diagonal, which share no row, column or box with each other.
fill_box completes an empty box against the rest of the board with a bounded
retry: attempt t picks the t-th free digit (capped at the last one) per cell.
"""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

from .board import BOX, DIGITS, Board, Cell, box
from .config import DEFAULT_CONFIG, SolverConfig
from .log import get_logger
from .solver_core import find_free, find_used

logger = get_logger(__name__)

DIAGONAL = ((0, 0), (3, 3), (6, 6))


def shuffle(ints: list[int], rng: random.Random | None = None) -> list[int]:
    """Shuffle in place and return the list. Default rng is seeded from the clock."""
    rng = rng or random.Random()
    rng.shuffle(ints)
    return ints


def gen_box(board: Board, c: Cell, rng: random.Random | None = None) -> list[int]:
    """Fill the box whose top-left corner is `c` with a random permutation of 1..9."""
    ints = shuffle(list(DIGITS), rng)
    cells = board.box_cells(c.row, c.col)
    for cell, n in zip(cells, ints):
        board.set_value(cell.row, cell.col, n)
    return ints


def gen3boxes(board: Board, rng: random.Random | None = None) -> Board:
    for r, c in DIAGONAL:
        gen_box(board, Cell(row=r, col=c), rng)
    return board


class FillStatus(str, enum.Enum):
    FILLED = "filled"
    OCCUPIED = "occupied"  # box already held a value
    EXHAUSTED = "exhausted"  # first cell ran out of alternatives
    GAVE_UP = "gave_up"  # try counter passed max_tries


@dataclass
class FillResult:
    status: FillStatus
    tries: int
    sequence: list[int] = field(default_factory=list)

    @property
    def filled(self) -> bool:
        return self.status is FillStatus.FILLED


def _reset_box(board: Board, r0: int, c0: int) -> None:
    for cell in board.box_cells(r0, c0):
        cell.value = 0


def _attempt(board: Board, r0: int, c0: int, t: int, seq: list[int]) -> FillStatus | None:
    """One row-major pass over the box.

    Returns None when some cell had no free digit (the caller retries),
    otherwise FILLED or EXHAUSTED.
    """
    for i in range(r0, r0 + BOX):
        for j in range(c0, c0 + BOX):
            cell = board[i, j]
            free = find_free(find_used(board, cell))
            logger.debug("free numbers for [%d%d]: %s", i, j, free)
            if not free:
                logger.debug("re-start; seq: %s, try #%d", seq, t + 1)
                return None

            k = len(free) - 1
            if t > k and (i, j) == (r0, c0):
                logger.debug("no more tries for [%d%d]", i, j)
                board.set_value(i, j, free[0])
                seq.append(free[0])
                return FillStatus.EXHAUSTED

            n = free[min(t, k)]
            board.set_value(i, j, n)
            seq.append(n)
    return FillStatus.FILLED


def fill_box(board: Board, c: Cell, config: SolverConfig | None = None) -> FillResult:
    """Try to complete the empty box starting at `c` consistently with the board.

    Each failed attempt clears the box and retries with the next try counter.
    Stops with EXHAUSTED when the first cell has no alternative left, or
    GAVE_UP once the counter passes config.max_tries; in both cases the box is
    left as the last attempt wrote it.
    """
    config = config or DEFAULT_CONFIG
    r0, c0 = box(c.row, c.col)

    taken = [cell for cell in board.box_cells(c.row, c.col) if cell.value != 0]
    if taken:
        logger.warning("%s has number: %d", taken[0], taken[0].value)
        return FillResult(FillStatus.OCCUPIED, 0)

    t = 0
    seq: list[int] = []
    while t <= config.max_tries:
        if t > 0:
            seq = []
            _reset_box(board, r0, c0)
        status = _attempt(board, r0, c0, t, seq)
        if status is not None:
            logger.debug("seq: %s, try #%d", seq, t)
            if status is FillStatus.EXHAUSTED:
                logger.warning("box at [%d%d] exhausted after %d tries", r0, c0, t)
            return FillResult(status, t, seq)
        t += 1

    logger.warning("cannot fill box at [%d%d]; quitting after %d tries", r0, c0, t)
    return FillResult(FillStatus.GAVE_UP, t, seq)
