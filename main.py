from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Sequence

from config import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_GRAPH_FILE,
    LOG_LEVELS,
    Settings,
    load_config,
    resolve_settings,
)
from edge_list import load_graph
from errors import (
    InternalInconsistency,
    NodeNotFound,
    ParseError,
    PathfindingError,
    Unreachable,
)
from reconstruction import PathResult, summarise_distances
from search import ALGORITHMS, euclidean_heuristic, get_algorithm, shortest_path

logger = logging.getLogger("pathfinder")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def format_result(result: PathResult) -> List[str]:
    path = " -> ".join(str(node) for node in result.nodes)
    return [f"Path: {path}", f"Distance: {result.distance}"]


def print_result(result: PathResult) -> None:
    for line in format_result(result):
        print(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathfinder",
        description="Find the minimum-cost path between two nodes of a weighted edge list.",
    )
    parser.add_argument("--start", required=True, help="Node to start the search from.")
    parser.add_argument("--end", required=True, help="Destination node.")
    parser.add_argument(
        "--graph-file",
        dest="graph_file",
        help=f"Edge-list file ('-' reads standard input). Default: {DEFAULT_GRAPH_FILE}.",
    )
    parser.add_argument(
        "--algo",
        dest="algorithm",
        help=f"Search algorithm: {', '.join(sorted(ALGORITHMS))}. Default: dijkstra.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=f"YAML settings file. Default: {DEFAULT_CONFIG_FILE} if present.",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        help="Optional path to save a PNG of the graph with the path highlighted.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (or set PATHFINDER_LOG_LEVEL).",
    )
    return parser


def read_settings(args: argparse.Namespace) -> Settings:
    config_path = args.config
    if config_path is None and Path(DEFAULT_CONFIG_FILE).is_file():
        config_path = Path(DEFAULT_CONFIG_FILE)

    config: Dict = {}
    if config_path is not None:
        config = load_config(config_path)
    return resolve_settings(args, config)


def run(settings: Settings, start: str, end: str) -> PathResult:
    get_algorithm(settings.algorithm)
    graph = load_graph(settings.graph_file)

    heuristic = None
    if settings.heuristic == "euclidean":
        heuristic = euclidean_heuristic(settings.positions)

    result = shortest_path(graph, start, end, heuristic=heuristic, algorithm=settings.algorithm)

    if settings.plot is not None:
        from visualize import draw_path_figure

        draw_path_figure(graph, result, settings.plot, positions=settings.positions)
        logger.info("Plot stored at: %s", settings.plot)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = read_settings(args)
    except (OSError, ValueError) as exc:
        configure_logging("WARNING")
        logger.error("Invalid configuration: %s", exc)
        return 1
    configure_logging(settings.log_level)

    try:
        result = run(settings, args.start, args.end)
    except ParseError as exc:
        logger.error("Could not read edge list %s: %s", settings.graph_file, exc)
        return 1
    except NodeNotFound as exc:
        logger.error("%s", exc)
        return 1
    except Unreachable as exc:
        logger.error("%s", exc)
        logger.debug("Reached from %s: %s", exc.source, summarise_distances(exc.distances))
        return 1
    except InternalInconsistency as exc:
        logger.critical("Internal error while rebuilding the path: %s", exc)
        return 1
    except PathfindingError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("Could not open %s: %s", settings.graph_file, exc)
        return 1
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
