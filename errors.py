from __future__ import annotations

from typing import Dict, Hashable


class PathfindingError(Exception):
    """Base class for every error raised while building or querying a graph."""


class InvalidWeight(PathfindingError, ValueError):
    def __init__(self, weight: object) -> None:
        super().__init__(
            f"Edge weight {weight!r} is invalid; weights must be finite numbers >= 0."
        )
        self.weight = weight


class ParseError(PathfindingError, ValueError):
    def __init__(self, line_number: int, content: str, reason: str | None = None) -> None:
        message = f"Line {line_number}: cannot parse {content!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.line_number = line_number
        self.content = content


class NodeNotFound(PathfindingError, LookupError):
    role = "Node"

    def __init__(self, node: Hashable) -> None:
        super().__init__(f"{self.role} node {node!r} is not in the graph.")
        self.node = node


class SourceNotFound(NodeNotFound):
    role = "Source"


class TargetNotFound(NodeNotFound):
    role = "Target"


class Unreachable(PathfindingError):
    """No path exists; an expected outcome of a query, not a failure."""

    def __init__(
        self,
        source: Hashable,
        target: Hashable,
        distances: Dict[Hashable, float] | None = None,
    ) -> None:
        super().__init__(f"No path between {source} and {target}.")
        self.source = source
        self.target = target
        self.distances = dict(distances or {})


class InternalInconsistency(PathfindingError, RuntimeError):
    """The predecessor chain is malformed; indicates a bug in the search engine."""
