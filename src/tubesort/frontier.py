"""Open-set bookkeeping for the best-first search."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .state import Arrangement, Move


@dataclass(frozen=True, slots=True)
class SearchNode:
    """Arrangement reached by ``moves`` at path cost ``g``."""

    state: Arrangement
    moves: Tuple[Move, ...]
    g: int
    h: float

    @property
    def f(self) -> float:
        return self.g + self.h


class Frontier:
    """Min-heap of search nodes ordered by ``f``.

    Equal priorities pop in insertion order.  The sequence number also keeps
    :mod:`heapq` from ever comparing two nodes directly.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, SearchNode]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.f, next(self._counter), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[2]

    def best_f(self) -> Optional[float]:
        return self._heap[0][0] if self._heap else None

    def bound(self, ceiling: int, keep: int) -> int:
        """Keep only the ``keep`` lowest-``f`` nodes once size exceeds ``ceiling``.

        A ``ceiling`` of zero disables the bound.  Returns the number of nodes
        discarded.
        """

        if ceiling <= 0 or len(self._heap) <= ceiling:
            return 0
        dropped = len(self._heap) - keep
        self._heap = heapq.nsmallest(keep, self._heap)
        heapq.heapify(self._heap)
        return dropped


__all__ = ["Frontier", "SearchNode"]
