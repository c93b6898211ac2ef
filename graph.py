from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Real
from typing import Dict, Hashable, Iterable, Iterator, List, Sequence, Tuple, Union

from errors import InvalidWeight

logger = logging.getLogger(__name__)

Node = Hashable
Weight = Union[int, float]
EdgeRecord = Union["Edge", Tuple[Node, Node, Weight]]


class WeightedGraph(ABC):
    """Capability contract the search engine relies on.

    Implementations may store their arcs however they like (adjacency lists,
    matrices, or generate them on demand); the engine only ever asks for the
    members below and never mutates the graph.
    """

    @abstractmethod
    def neighbors(self, node: Node) -> Iterator[Tuple[Node, Weight]]:
        """Return a fresh iterator over ``(neighbor, weight)`` arcs leaving ``node``."""
        raise NotImplementedError

    @property
    @abstractmethod
    def is_directed(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def has_node(self, node: Node) -> bool:
        raise NotImplementedError

    @abstractmethod
    def node_count(self) -> int:
        raise NotImplementedError

    def __contains__(self, node: object) -> bool:
        return self.has_node(node)

    def __len__(self) -> int:
        return self.node_count()


def validate_weight(weight: object) -> Weight:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeight(weight)
    if math.isnan(weight) or math.isinf(weight) or weight < 0:
        raise InvalidWeight(weight)
    return weight


@dataclass(frozen=True)
class Edge:
    origin: Node
    target: Node
    weight: Weight
    directed: bool = False

    def __str__(self) -> str:
        separator = "->" if self.directed else "-"
        return f"{self.origin}{separator}{self.target}:{self.weight}"


class Graph(WeightedGraph):
    """In-memory weighted graph backed by adjacency lists.

    ``directed`` is the default for edges added without an explicit flag;
    every edge keeps its own directedness, so one graph may mix both kinds.
    Parallel edges are stored side by side and never merged.
    """

    def __init__(self, edges: Iterable[EdgeRecord] = (), directed: bool = False) -> None:
        self.directed = directed
        self._adjacency: Dict[Node, List[Tuple[Node, Weight]]] = {}
        self._edges: List[Edge] = []
        self._has_directed_edges = False

        for record in edges:
            if isinstance(record, Edge):
                self.add_edge(record.origin, record.target, record.weight, record.directed)
            else:
                origin, target, weight = record
                self.add_edge(origin, target, weight)

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeRecord], directed: bool = False) -> "Graph":
        graph = cls(edges, directed=directed)
        logger.info(
            "Built graph with %d nodes and %d edges", graph.node_count(), graph.edge_count()
        )
        return graph

    def add_node(self, node: Node) -> None:
        self._adjacency.setdefault(node, [])

    def add_edge(
        self,
        origin: Node,
        target: Node,
        weight: Weight,
        directed: bool | None = None,
    ) -> Edge:
        weight = validate_weight(weight)
        if directed is None:
            directed = self.directed

        edge = Edge(origin, target, weight, directed)
        self.add_node(origin)
        self.add_node(target)
        self._adjacency[origin].append((target, weight))
        if directed:
            self._has_directed_edges = True
        else:
            self._adjacency[target].append((origin, weight))
        self._edges.append(edge)
        return edge

    def neighbors(self, node: Node) -> Iterator[Tuple[Node, Weight]]:
        return iter(tuple(self._adjacency.get(node, ())))

    @property
    def is_directed(self) -> bool:
        return self.directed or self._has_directed_edges

    def has_node(self, node: Node) -> bool:
        try:
            return node in self._adjacency
        except TypeError:
            return False

    def node_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._adjacency)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def edge_weights(self, origin: Node, target: Node) -> List[Weight]:
        """Weights of every arc from ``origin`` to ``target``, parallel arcs included."""
        return [weight for neighbor, weight in self._adjacency.get(origin, ()) if neighbor == target]

    def has_edge(self, origin: Node, target: Node) -> bool:
        return bool(self.edge_weights(origin, target))

    def path_cost(self, path: Sequence[Node]) -> Weight:
        """Return the total cost of walking along the given node sequence."""
        if len(path) < 2:
            return 0

        total_cost: Weight = 0
        for u, v in zip(path[:-1], path[1:]):
            weights = self.edge_weights(u, v)
            if not weights:
                raise ValueError(f"Edge {u}-{v} not present in graph.")
            total_cost += min(weights)
        return total_cost

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.node_count()}, "
            f"edges={self.edge_count()}, directed={self.is_directed})"
        )
