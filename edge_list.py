"""Edge-list text format.

One edge per line::

    A-B:7      undirected edge of weight 7
    A->B:2.5   directed edge from A to B

Node names may not contain ``-``, ``>``, ``:`` or whitespace. Blank lines
are skipped; anything else that does not match is a ParseError.
"""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import Iterable, List

from errors import ParseError
from graph import Edge, Graph, Weight

logger = logging.getLogger(__name__)

STDIN_PATH = "-"

_LINE_PATTERN = re.compile(
    r"""
    ^\s*
    (?P<origin>[^\s:>-]+)
    \s*(?P<separator>->|-)\s*
    (?P<target>[^\s:>-]+)
    \s*:\s*
    (?P<weight>\d+(?:\.\d+)?|\.\d+)
    \s*$
    """,
    re.VERBOSE,
)


def _parse_weight(literal: str) -> Weight:
    if "." in literal:
        return float(literal)
    return int(literal)


def parse_line(line: str, line_number: int) -> Edge:
    match = _LINE_PATTERN.match(line)
    if match is None:
        raise ParseError(
            line_number,
            line.rstrip("\r\n"),
            "expected 'A-B:7' (undirected) or 'A->B:7' (directed)",
        )
    return Edge(
        origin=match["origin"],
        target=match["target"],
        weight=_parse_weight(match["weight"]),
        directed=match["separator"] == "->",
    )


def parse_edge_list(lines: Iterable[str]) -> List[Edge]:
    edges: List[Edge] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        edges.append(parse_line(line, line_number))

    if not edges:
        raise ParseError(0, "", "the edge list is empty")
    return edges


def build_graph(lines: Iterable[str]) -> Graph:
    """Parse ``lines`` and build a graph that honours each edge's own directedness."""
    return Graph.from_edges(parse_edge_list(lines))


def load_graph(path: Path | str) -> Graph:
    if str(path) == STDIN_PATH:
        logger.info("Reading edge list from standard input")
        return build_graph(sys.stdin)

    path = Path(path)
    logger.info("Reading edge list from %s", path)
    with path.open("r", encoding="utf-8") as handle:
        return build_graph(handle)
