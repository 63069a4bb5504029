import json
import stat

import pytest

from sudoku_core import persistence
from sudoku_core.board import Board
from sudoku_core.errors import PersistenceError

from conftest import PUZZLE


def test_load_puzzle(puzzle):
    assert puzzle.to_grid() == PUZZLE
    assert puzzle[4, 8].coord == (4, 8)


def test_save_and_reload_keeps_mutation(puzzle, tmp_path):
    puzzle[0, 0].value = 15
    state = persistence.save(puzzle, tmp_path / "state.json")
    again = persistence.load(state)
    assert again[0, 0].value == 15
    assert again.to_grid()[1:] == PUZZLE[1:]


def test_save_clears_annotations(puzzle, tmp_path):
    puzzle.select_cells(2, 2)
    puzzle[0, 0].annotations.invalid = True
    path = persistence.save(puzzle, tmp_path / "state.json")
    assert not any(c.annotations.selected or c.annotations.invalid for c in puzzle.cells())
    doc = json.loads(path.read_text(encoding="utf-8"))
    assert doc[0][0] == {"Number": 5}
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_dumps_uses_tabs():
    text = persistence.dumps(Board())
    assert text.startswith("[\n\t[")


def test_unknown_fields_ignored():
    rows = [[{"Number": 0, "color": "31m"} for _ in range(9)] for _ in range(9)]
    rows[2][3]["Number"] = 4
    b = persistence.loads(json.dumps(rows))
    assert b[2, 3].value == 4


@pytest.mark.parametrize(
    "doc",
    [
        [[{"Number": 0}] * 9] * 8,
        [[{"Number": 0}] * 8] * 9,
        [[{"value": 1}] * 9] * 9,  # field named by its Python attribute, not "Number"
        {"Number": 1},
    ],
)
def test_malformed_document(doc):
    with pytest.raises(PersistenceError):
        persistence.loads(json.dumps(doc))


def test_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        persistence.load(tmp_path / "nope.json")


def test_save_creates_private_file(tmp_path, monkeypatch):
    modes = []
    real_open = persistence.os.open

    def spy(path, flags, mode=0o777):
        modes.append(mode)
        return real_open(path, flags, mode)

    monkeypatch.setattr(persistence.os, "open", spy)
    path = persistence.save(Board(), tmp_path / "state.json")
    assert modes == [0o600]
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_save_overwrites_existing_state(puzzle, tmp_path):
    path = tmp_path / "state.json"
    path.write_text("x" * 5000, encoding="utf-8")
    persistence.save(puzzle, path)
    assert persistence.load(path).to_grid() == PUZZLE
