import argparse
import json

from apps.cli.demo_cli import main, parse_coord
from sudoku_core import persistence


def make_args(**kw):
    base = dict(mode="new", config=None, puzzle=None, state=None, seed=None, fill=[], debug=False)
    base.update(kw)
    return argparse.Namespace(**base)


def test_parse_coord():
    assert parse_coord("3,6") == (3, 6)


def test_new_classifies_puzzle(puzzle_path, capsys):
    payload = main(make_args(puzzle=str(puzzle_path)))
    assert payload["difficulty"] == "hard"
    assert payload["empty"] == 50
    assert payload["sanity"]["ok"]
    assert payload["counts"]["1"] == 4
    assert sum(payload["counts"].values()) == 81 - 50
    printed = json.loads(capsys.readouterr().out)
    assert printed["grid"] == payload["grid"]


def test_generate_then_resume(tmp_path):
    state = tmp_path / "state.json"
    payload = main(make_args(mode="generate", seed=11, state=str(state), fill=[(0, 3)]))
    assert state.exists()
    assert payload["fills"][0]["box"] == [0, 3]
    assert payload["fills"][0]["status"] in ("filled", "exhausted")
    assert persistence.load(state).to_grid() == payload["grid"]

    resumed = main(make_args(mode="resume", state=str(state)))
    assert resumed["grid"] == payload["grid"]
