from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigError


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


@dataclass
class SolverConfig:
    # difficulty buckets by empty-cell count
    easy_below: int = 25
    hard_above: int = 30
    # box filler stops once the try counter exceeds this
    max_tries: int = 10
    puzzle_file: str = "puzzle.json"
    state_file: str = "state.json"
    debug: bool = False


DEFAULT_CONFIG = SolverConfig()


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must hold a mapping")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def load_config(path: str | Path | None = None, **overrides) -> SolverConfig:
    """Build a SolverConfig from an optional YAML file plus keyword overrides."""
    cfg: Dict[str, Any] = dict(load_yaml(path)) if path else {}
    merge_overrides(cfg, **overrides)

    known = {f.name: f for f in fields(SolverConfig)}
    unknown = sorted(set(cfg) - set(known))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

    out = SolverConfig(**cfg)
    if out.max_tries < 0:
        raise ConfigError("max_tries must be >= 0")
    if out.easy_below > out.hard_above + 1:
        raise ConfigError("easy_below must not exceed hard_above + 1")
    return out
