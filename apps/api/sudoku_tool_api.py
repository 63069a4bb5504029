# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from typing import Annotated, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import AfterValidator, BaseModel, Field

from sudoku_core.board import Board
from sudoku_core.config import DEFAULT_CONFIG, SolverConfig
from sudoku_core.errors import RangeViolation
from sudoku_core.sudoku_tools import (
    check_num_tool,
    classify_tool,
    compute_candidates_tool,
    fill_box_tool,
    new_puzzle,
    sanity_check,
)


@dataclass
class Game:
    board: Board
    lock: threading.Lock = field(default_factory=threading.Lock)


class GameStore:
    """In-memory games. Every access to a game's board holds that game's lock."""

    def __init__(self):
        self._games: Dict[str, Game] = {}
        self._lock = threading.Lock()

    def create(self, board: Board) -> str:
        gid = uuid.uuid4().hex
        with self._lock:
            self._games[gid] = Game(board)
        return gid

    def get(self, gid: str) -> Game:
        with self._lock:
            game = self._games.get(gid)
        if game is None:
            raise HTTPException(status_code=404, detail=f"no game {gid}")
        return game


def _nine_by_nine(grid: List[List[int]]) -> List[List[int]]:
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("grid must be 9x9")
    return grid


GridField = Annotated[List[List[int]], AfterValidator(_nine_by_nine)]


class GridModel(BaseModel):
    grid: GridField


class NewGameRequest(BaseModel):
    seed: Optional[int] = None


class CheckNumRequest(BaseModel):
    grid: GridField
    digit: int = Field(ge=1, le=9)
    row: int
    col: int


class SetValueRequest(BaseModel):
    row: int
    col: int
    value: int


class FillBoxRequest(BaseModel):
    row: int
    col: int


def create_app(config: SolverConfig = DEFAULT_CONFIG) -> FastAPI:
    app = FastAPI(title="Sudoku Engine Tool API")
    store = GameStore()
    app.state.store = store

    @app.exception_handler(RangeViolation)
    async def _range(request: Request, exc: RangeViolation):
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "row": exc.row, "col": exc.col, "value": exc.value},
        )

    @app.post("/games")
    def api_new_game(req: NewGameRequest):
        board = new_puzzle(req.seed)
        gid = store.create(board)
        return {"id": gid, "grid": board.to_grid()}

    @app.get("/games/{gid}")
    def api_get_game(gid: str):
        game = store.get(gid)
        with game.lock:
            return {"id": gid, "grid": game.board.to_grid()}

    @app.put("/games/{gid}/cells")
    def api_set_value(gid: str, req: SetValueRequest):
        game = store.get(gid)
        with game.lock:
            game.board.set_value(req.row, req.col, req.value)
            return {"id": gid, "grid": game.board.to_grid()}

    @app.post("/games/{gid}/fill_box")
    def api_fill_box(gid: str, req: FillBoxRequest):
        game = store.get(gid)
        with game.lock:
            return fill_box_tool(game.board, req.row, req.col, config)

    @app.post("/check_num")
    def api_check_num(req: CheckNumRequest):
        return check_num_tool(req.grid, req.digit, req.row, req.col)

    @app.post("/candidates")
    def api_cands(payload: GridModel):
        return compute_candidates_tool(payload.grid)

    @app.post("/classify")
    def api_classify(payload: GridModel):
        return classify_tool(payload.grid, config)

    @app.post("/sanity_check")
    def api_sanity(payload: GridModel):
        return sanity_check(Board.from_grid(payload.grid))

    return app


app = create_app()
