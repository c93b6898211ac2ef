from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from errors import InternalInconsistency, Unreachable
from graph import Node, Weight


@dataclass(frozen=True)
class PathResult:
    nodes: Tuple[Node, ...]
    distance: Weight

    @property
    def source(self) -> Node:
        return self.nodes[0]

    @property
    def target(self) -> Node:
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        return len(self.nodes) - 1


def reconstruct_path(
    distances: Mapping[Node, Weight],
    predecessors: Mapping[Node, Node],
    source: Node,
    target: Node,
    limit: int | None = None,
) -> PathResult:
    """Walk predecessor links back from ``target`` and return the source-to-target path.

    The walk visits at most ``limit`` nodes (by default the number of reached
    nodes, which no valid chain can exceed). A chain that loops, breaks off
    before the source, or runs past the limit raises InternalInconsistency.
    """
    if target not in distances:
        raise Unreachable(source, target, dict(distances))

    if limit is None:
        limit = len(distances)

    path: List[Node] = [target]
    seen = {target}
    while path[-1] != source:
        if len(path) >= limit:
            raise InternalInconsistency(
                f"Predecessor chain from {target} exceeds {limit} nodes without reaching {source}."
            )
        current = path[-1]
        if current not in predecessors:
            raise InternalInconsistency(
                f"Node {current} has a distance but no predecessor on the way to {source}."
            )
        previous = predecessors[current]
        if previous in seen:
            raise InternalInconsistency(f"Predecessor chain loops back to {previous}.")
        seen.add(previous)
        path.append(previous)
    path.reverse()
    return PathResult(tuple(path), distances[target])


def path_edges(nodes: Tuple[Node, ...]) -> List[Tuple[Node, Node]]:
    return list(zip(nodes[:-1], nodes[1:]))


def summarise_distances(distances: Dict[Node, Weight]) -> str:
    parts = [f"{node}: {distance}" for node, distance in distances.items()]
    return ", ".join(parts)
