"""Tool-friendly interface over the core: plain grids and dicts in, JSON-ready dicts out. Used by the API and the demo CLI."""

# sudoku_tools.py
from __future__ import annotations

import random
from typing import Dict, List, Optional

from types_sudoku import Candidates, FillReport, Grid, Issue

from .board import BOX, SIZE, Board, Cell
from .classifier import difficulty, map_values
from .config import SolverConfig
from .generator import fill_box, gen3boxes
from .solver_core import check_num, find_free, find_used


def _duplicates_in_unit(vals: List[int]) -> set:
    seen = set(); dups = set()
    for v in vals:
        if v == 0: continue
        if v in seen: dups.add(v)
        seen.add(v)
    return dups


def sanity_check(board: Board) -> Dict:
    """Report digits repeated in any row, column or box. Empty cells are ignored."""
    issues: List[Issue] = []
    units = []
    for r in range(SIZE):
        units.append((f"r{r+1}", board.row_cells(r)))
    for c in range(SIZE):
        units.append((f"c{c+1}", board.col_cells(c)))
    for b in range(SIZE):
        units.append((f"b{b+1}", board.box_cells(BOX * (b // BOX), BOX * (b % BOX))))
    for name, cells in units:
        dups = _duplicates_in_unit([c.value for c in cells])
        if dups:
            bad = [str(c) for c in cells if c.value in dups]
            issues.append({"type": "duplicate", "unit": name, "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Grid) -> Dict:
    """Free digits for each empty cell. Returns a dict like {'candidates': {'[01]': [2, 4], ...}}."""
    board = Board.from_grid(current)
    cands: Candidates = {}
    for cell in board.cells():
        if cell.value == 0:
            cands[str(cell)] = find_free(find_used(board, cell))
    return {"candidates": cands}


def check_num_tool(current: Grid, digit: int, row: int, col: int) -> Dict:
    found = check_num(Board.from_grid(current), digit, row, col)
    if not found:
        return {"found": False}
    return {"found": True, "unit": found.unit, "row": found.row, "col": found.col, "message": str(found)}


def classify_tool(current: Grid, config: Optional[SolverConfig] = None) -> Dict:
    vmap = map_values(Board.from_grid(current))
    return {
        "difficulty": difficulty(vmap, config),
        "empty": len(vmap[0]),
        "counts": {str(n): len(vmap[n]) for n in range(1, 10)},
    }


def new_puzzle(seed: Optional[int] = None) -> Board:
    """Board with the three diagonal boxes seeded."""
    rng = random.Random(seed) if seed is not None else None
    return gen3boxes(Board(), rng)


def fill_box_tool(board: Board, row: int, col: int, config: Optional[SolverConfig] = None) -> FillReport:
    res = fill_box(board, Cell(row=row, col=col), config)
    return {
        "status": res.status.value,
        "tries": res.tries,
        "sequence": res.sequence,
        "grid": board.to_grid(),
    }
