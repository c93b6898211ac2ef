"""Shortest-path search over any :class:`graph.WeightedGraph`.

Both algorithms share one relaxation loop; A* only changes the frontier key
from ``g(n)`` to ``g(n) + h(n, target)``. With the zero heuristic the two are
indistinguishable, down to the order nodes are finalized in.

Edge weights must be non-negative. Heuristics must be admissible (never
overestimate the remaining cost) for A* to return optimal paths; this is
the caller's contract and is not checked here.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional, Sequence, Set

from errors import SourceNotFound, TargetNotFound
from frontier import Frontier
from graph import Node, Weight, WeightedGraph
from reconstruction import PathResult, reconstruct_path

logger = logging.getLogger(__name__)

Heuristic = Callable[[Node, Node], Weight]


@dataclass
class SearchState:
    """Per-query bookkeeping; never shared between queries."""

    source: Node
    distances: Dict[Node, Weight] = field(default_factory=dict)
    predecessors: Dict[Node, Node] = field(default_factory=dict)
    finalized: Set[Node] = field(default_factory=set)

    @property
    def expanded(self) -> int:
        return len(self.finalized)

    def path_to(self, target: Node) -> PathResult:
        return reconstruct_path(self.distances, self.predecessors, self.source, target)


def zero_heuristic(node: Node, target: Node) -> Weight:
    return 0


def euclidean_heuristic(positions: Mapping[Node, Sequence[float]]) -> Heuristic:
    """Straight-line distance between node coordinates; 0 for nodes without one."""

    def estimate(node: Node, target: Node) -> float:
        if node not in positions or target not in positions:
            return 0.0
        return math.dist(positions[node], positions[target])

    return estimate


def table_heuristic(estimates: Mapping[Node, Weight]) -> Heuristic:
    """Precomputed remaining-cost estimates towards a single fixed target."""

    def estimate(node: Node, target: Node) -> Weight:
        return estimates.get(node, 0)

    return estimate


def _check_endpoints(graph: WeightedGraph, source: Node, target: Optional[Node]) -> None:
    if not graph.has_node(source):
        raise SourceNotFound(source)
    if target is not None and not graph.has_node(target):
        raise TargetNotFound(target)


def _search(
    graph: WeightedGraph,
    source: Node,
    target: Optional[Node],
    heuristic: Heuristic,
) -> SearchState:
    _check_endpoints(graph, source, target)

    state = SearchState(source=source)
    state.distances[source] = 0
    frontier = Frontier()
    frontier.push(source, heuristic(source, target) if target is not None else 0, 0)

    while frontier:
        node, distance = frontier.pop()
        if node in state.finalized or distance > state.distances[node]:
            continue

        state.finalized.add(node)
        if node == target:
            break

        for neighbor, weight in graph.neighbors(node):
            candidate = distance + weight
            if neighbor not in state.distances or candidate < state.distances[neighbor]:
                state.distances[neighbor] = candidate
                state.predecessors[neighbor] = node
                # Only an inconsistent A* heuristic can improve a finalized node.
                state.finalized.discard(neighbor)
                priority = candidate
                if target is not None:
                    priority += heuristic(neighbor, target)
                frontier.push(neighbor, priority, candidate)

    logger.debug(
        "Search from %s to %s finalized %d of %d reached nodes",
        source,
        target,
        state.expanded,
        len(state.distances),
    )
    return state


def dijkstra(graph: WeightedGraph, source: Node, target: Optional[Node] = None) -> SearchState:
    """Run Dijkstra from ``source``.

    Without a target every node reachable from the source is finalized;
    with one the search stops as soon as the target is finalized.
    """
    return _search(graph, source, target, zero_heuristic)


def a_star(
    graph: WeightedGraph,
    source: Node,
    target: Node,
    heuristic: Optional[Heuristic] = None,
) -> SearchState:
    if heuristic is None:
        heuristic = zero_heuristic
    return _search(graph, source, target, heuristic)


def _dijkstra_query(
    graph: WeightedGraph, source: Node, target: Node, heuristic: Optional[Heuristic] = None
) -> SearchState:
    """Registry adapter: Dijkstra is A* with a zero heuristic, so any heuristic is ignored."""
    return dijkstra(graph, source, target)


ALGORITHMS: Dict[str, Callable[..., SearchState]] = {
    "dijkstra": _dijkstra_query,
    "astar": a_star,
}


def get_algorithm(name: str) -> Callable[..., SearchState]:
    key = name.strip().lower().replace("*", "star").replace("-", "").replace("_", "")
    try:
        return ALGORITHMS[key]
    except KeyError:
        valid = ", ".join(sorted(ALGORITHMS))
        raise ValueError(f"Unknown algorithm {name!r}; choose one of: {valid}.") from None


def shortest_path(
    graph: WeightedGraph,
    source: Node,
    target: Node,
    heuristic: Optional[Heuristic] = None,
    algorithm: Optional[str] = None,
) -> PathResult:
    """Recover both length and explicit path between source and target.

    Raises SourceNotFound/TargetNotFound for unknown identifiers and
    Unreachable when no path exists.
    """
    if algorithm is None:
        algorithm = "astar" if heuristic is not None else "dijkstra"
    search = get_algorithm(algorithm)

    logger.debug("Querying %s -> %s with %s", source, target, algorithm)
    state = search(graph, source, target, heuristic)
    return state.path_to(target)
