"""Group cells by digit and bucket a puzzle by its number of empty cells."""

from __future__ import annotations

from .board import DIGITS, Board, Cell
from .config import DEFAULT_CONFIG, SolverConfig
from .errors import RangeViolation
from .log import get_logger

logger = get_logger(__name__)

ValuesMap = dict[int, list[Cell]]


def map_values(board: Board) -> ValuesMap:
    """Map each digit 0..9 to the cells holding it, row-major. 0 lists the empty cells.

    Raises RangeViolation on the first cell whose value is outside 0..9.
    The map is a snapshot; any later board change makes it stale.
    """
    vmap: ValuesMap = {n: [] for n in range(10)}
    for cell in board.cells():
        if not 0 <= cell.value <= 9:
            logger.error("invalid number %d in cell %d%d", cell.value, cell.row, cell.col)
            raise RangeViolation(cell.row, cell.col, cell.value)
        vmap[cell.value].append(cell)
    return vmap


def difficulty(vmap: ValuesMap, config: SolverConfig | None = None) -> str:
    config = config or DEFAULT_CONFIG
    empty = len(vmap.get(0, []))
    if empty < config.easy_below:
        return "easy"
    if empty > config.hard_above:
        return "hard"
    return str(empty)


def format_values_map(vmap: ValuesMap) -> list[str]:
    lines = []
    for n in DIGITS:
        where = " ".join(str(c) for c in vmap.get(n, []))
        lines.append(f"number {n} found in: {where}".rstrip())
    return lines
