"""JSON load/save for boards.

The document is 9 rows of 9 objects; only "Number" matters, positions come
from document order. Values are stored as-is: range checks belong to map_values.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError, field_validator

from .board import SIZE, Board
from .errors import PersistenceError
from .log import get_logger

logger = get_logger(__name__)


class CellDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    value: int = Field(alias="Number")


class BoardDocument(RootModel[List[List[CellDocument]]]):
    @field_validator("root")
    @classmethod
    def _nine_by_nine(cls, rows):
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise ValueError("board document must be 9 rows of 9 cells")
        return rows

    @classmethod
    def from_board(cls, board: Board) -> "BoardDocument":
        rows = [[CellDocument(Number=c.value) for c in board.row_cells(r)] for r in range(SIZE)]
        return cls(rows)

    def to_board(self) -> Board:
        b = Board()
        for r, row in enumerate(self.root):
            for c, doc in enumerate(row):
                b[r, c].value = doc.value
        return b


def loads(text: str | bytes) -> Board:
    try:
        return BoardDocument.model_validate_json(text).to_board()
    except ValidationError as e:
        raise PersistenceError(f"malformed board document: {e}") from e


def dumps(board: Board) -> str:
    data = BoardDocument.from_board(board).model_dump(by_alias=True)
    return json.dumps(data, indent="\t")


def load(path: str | Path) -> Board:
    """Read a board document. OSError from the filesystem propagates unchanged."""
    path = Path(path)
    b = loads(path.read_bytes())
    logger.debug("loaded board from %s", path)
    return b


def save(board: Board, path: str | Path) -> Path:
    """Clear presentation flags, then write the board document (mode 0600)."""
    board.clear()
    path = Path(path)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(dumps(board))
    logger.debug("saved board to %s", path)
    return path
