from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Iterator, List, Tuple

from graph import Node, Weight


class Frontier:
    """Min-priority queue of open nodes.

    Nodes may be pushed again whenever a better distance is found; the old
    entries stay in the heap and the caller discards them when they surface
    (lazy deletion instead of decrease-key). Equal priorities pop in the
    order they were pushed.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Weight, int, Node, Weight]] = []
        self._sequence: Iterator[int] = count()

    def push(self, node: Node, priority: Weight, distance: Weight | None = None) -> None:
        if distance is None:
            distance = priority
        heappush(self._heap, (priority, next(self._sequence), node, distance))

    def pop(self) -> Tuple[Node, Weight]:
        """Remove the entry with the smallest priority and return ``(node, distance)``."""
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        _, _, node, distance = heappop(self._heap)
        return node, distance

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
