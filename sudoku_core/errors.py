"""Error types raised by the Sudoku core."""

from __future__ import annotations


class SudokuError(Exception):
    """Base class for every error raised by this package."""


class RangeViolation(SudokuError, ValueError):
    """A cell value or coordinate falls outside its valid domain."""

    def __init__(self, row: int, col: int, value: int | None = None):
        self.row = row
        self.col = col
        self.value = value
        if value is None:
            msg = f"not a valid cell: [{row}{col}]"
        else:
            msg = f"invalid number {value} in cell {row}{col}"
        super().__init__(msg)


class ConfigError(SudokuError, ValueError):
    pass


class PersistenceError(SudokuError):
    """The board document could not be turned into a Board."""
