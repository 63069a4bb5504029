# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Coord = tuple[int, int]
"""(row, col), both 0-based."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., '[04]') to a list of candidate digits (1..9)."""


class Issue(TypedDict, total=False):
    """A single problem reported by the sanity check."""

    type: str  # 'duplicate'
    unit: str  # 'r1'..'r9', 'c1'..'c9', 'b1'..'b9'
    digits: list[int]  # the digits seen more than once in the unit
    cells: list[str]  # offending cells, '[rc]' format


class FillReport(TypedDict, total=False):
    """Tool-facing summary of a box fill attempt."""

    status: str  # 'filled', 'occupied', 'exhausted', 'gave_up'
    tries: int  # retry counter when the filler stopped
    sequence: list[int]  # digits placed during the last attempt
    grid: list[list[int]]
