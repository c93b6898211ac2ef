from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_FILE = "graph.txt"
DEFAULT_ALGORITHM = "dijkstra"
DEFAULT_CONFIG_FILE = "pathfinder.yaml"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "PATHFINDER_LOG_LEVEL"

DEFAULT_HEURISTIC = "none"
HEURISTICS = ("none", "euclidean")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

KNOWN_KEYS = {"graph_file", "algorithm", "log_level", "plot", "positions", "heuristic"}


@dataclass(frozen=True)
class Settings:
    graph_file: Path = Path(DEFAULT_GRAPH_FILE)
    algorithm: str = DEFAULT_ALGORITHM
    log_level: str = DEFAULT_LOG_LEVEL
    plot: Path | None = None
    positions: Dict[str, Tuple[float, float]] = field(default_factory=dict)
    heuristic: str = DEFAULT_HEURISTIC


def load_config(path: Path) -> Dict:
    try:
        with path.open("r", encoding="utf-8") as handle:
            config = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise ValueError(f"{path}: not valid YAML ({exc})") from exc
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"{path}: expected a mapping at the top level.")
    return config


def _parse_positions(raw: object) -> Dict[str, Tuple[float, float]]:
    if not raw:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("'positions' must map node names to [x, y] pairs.")
    positions: Dict[str, Tuple[float, float]] = {}
    for node, coords in raw.items():
        if not isinstance(coords, (list, tuple)) or len(coords) != 2:
            raise ValueError(f"Position of node {node!r} must be an [x, y] pair.")
        if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in coords):
            raise ValueError(f"Position of node {node!r} must hold two numbers, got {coords!r}.")
        x, y = coords
        positions[str(node)] = (float(x), float(y))
    return positions


def _expect_str(name: str, value: object) -> str:
    if not isinstance(value, (str, Path)):
        raise ValueError(f"'{name}' must be a string, got {value!r}.")
    return str(value)


def resolve_settings(args: argparse.Namespace, config: Dict) -> Settings:
    """Merge settings with precedence command line > config file > defaults.

    Coordinates under ``positions`` only lay out the plot unless
    ``heuristic: euclidean`` is set; in that case they also guide A* and
    their straight-line distances must never exceed the real path cost.
    """
    for key in sorted(set(config) - KNOWN_KEYS):
        logger.warning("Ignoring unknown configuration key %r", key)

    def pick(name: str, default):
        value = getattr(args, name, None)
        if value is not None:
            return value
        return config.get(name, default)

    plot = pick("plot", None)
    log_level = _expect_str(
        "log_level", pick("log_level", os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))
    ).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level {log_level!r}; choose one of: {', '.join(LOG_LEVELS)}."
        )

    heuristic = _expect_str("heuristic", config.get("heuristic", DEFAULT_HEURISTIC)).lower()
    if heuristic not in HEURISTICS:
        raise ValueError(
            f"Unknown heuristic {heuristic!r}; choose one of: {', '.join(HEURISTICS)}."
        )
    positions = _parse_positions(config.get("positions"))
    if heuristic == "euclidean" and not positions:
        raise ValueError("'heuristic: euclidean' needs node coordinates under 'positions'.")

    return Settings(
        graph_file=Path(_expect_str("graph_file", pick("graph_file", DEFAULT_GRAPH_FILE))),
        algorithm=_expect_str("algorithm", pick("algorithm", DEFAULT_ALGORITHM)),
        log_level=log_level,
        plot=Path(_expect_str("plot", plot)) if plot is not None else None,
        positions=positions,
        heuristic=heuristic,
    )
