"""Non-interactive entry point: load or generate a board, classify it and print a JSON payload."""

# demo_cli.py
# - new:      load the puzzle file
# - resume:   load the saved state file
# - generate: seed the diagonal boxes, optionally try filling more boxes, save state
#
# Usage:
#   python -m apps.cli.demo_cli --mode generate --seed 123 --fill 0,3 3,0
#   python -m apps.cli.demo_cli --mode new --puzzle puzzle.json

import argparse
import json

from sudoku_core import persistence
from sudoku_core.classifier import difficulty, format_values_map, map_values
from sudoku_core.config import load_config
from sudoku_core.log import get_logger, setup_logging
from sudoku_core.sudoku_tools import fill_box_tool, new_puzzle, sanity_check

logger = get_logger("sudoku_core.cli")


def parse_coord(text):
    r, c = (int(x) for x in text.split(","))
    return r, c


def build_board(args, cfg):
    fills = []
    if args.mode == "new":
        board = persistence.load(cfg.puzzle_file)
    elif args.mode == "resume":
        board = persistence.load(cfg.state_file)
    else:
        board = new_puzzle(args.seed)
        for r, c in args.fill:
            report = fill_box_tool(board, r, c, cfg)
            logger.info("fill box [%d%d]: %s after %d tries", r, c, report["status"], report["tries"])
            fills.append({"box": [r, c], "status": report["status"], "tries": report["tries"]})
        persistence.save(board, cfg.state_file)
    return board, fills


def main(args):
    cfg = load_config(
        args.config,
        puzzle_file=args.puzzle,
        state_file=args.state,
        debug=True if args.debug else None,
    )
    setup_logging(cfg.debug)
    board, fills = build_board(args, cfg)
    vmap = map_values(board)
    payload = {
        "mode": args.mode,
        "grid": board.to_grid(),
        "difficulty": difficulty(vmap, cfg),
        "empty": len(vmap[0]),
        "counts": {str(n): len(vmap[n]) for n in range(1, 10)},
        "values": format_values_map(vmap),
        "sanity": sanity_check(board),
    }
    if fills:
        payload["fills"] = fills
    print(json.dumps(payload, indent=2))
    return payload


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--mode", type=str, default="new", choices=["new", "resume", "generate"])
    ap.add_argument("--config", type=str, default=None, help="YAML file with SolverConfig fields")
    ap.add_argument("--puzzle", type=str, default=None)
    ap.add_argument("--state", type=str, default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--fill", type=parse_coord, nargs="*", default=[], help="boxes to fill after seeding, as row,col")
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args()
    main(args)
