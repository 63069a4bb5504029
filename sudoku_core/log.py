"""Logger helpers. Modules call get_logger(__name__); only entry points call setup_logging."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach one stream handler to the package root logger (idempotent)."""
    global _handler
    root = logging.getLogger("sudoku_core")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    return root
