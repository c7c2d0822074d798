"""Best-first search over tube arrangements.

The engine runs an A*-style loop: pop the node with the lowest ``f = g + h``,
stop if it is sorted, otherwise enqueue every legal successor whose path cost
improves on the best cost recorded for its arrangement.  The frontier is
trimmed to its best ``frontier_keep`` nodes whenever it grows past
``frontier_ceiling``, so a reported exhaustion may be an artefact of the
bound; set the ceiling to zero when completeness matters more than memory.

Every solve owns its frontier and best-cost table.  Nothing is shared
between solver instances.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from .frontier import Frontier, SearchNode
from .heuristic import estimate
from .limits import SearchLimits
from .state import Arrangement, Color, Move, StateKey, is_sorted, legal_moves, pour

_LOGGER = logging.getLogger(__name__)


class SolvePhase(str, enum.Enum):
    INITIALIZED = "INITIALIZED"
    RUNNING = "RUNNING"
    SOLVED = "SOLVED"
    EXHAUSTED = "EXHAUSTED"
    LIMIT_REACHED = "LIMIT_REACHED"


class FailureReason(str, enum.Enum):
    EXHAUSTED = "EXHAUSTED"
    LIMIT_REACHED = "LIMIT_REACHED"


@dataclass(frozen=True)
class SolveResult:
    """Terminal outcome of a solve.

    ``moves`` is empty whenever ``solved`` is false; unsolved runs only report
    how many expansions were spent.
    """

    solved: bool
    iterations: int
    moves: Tuple[Move, ...] = field(default_factory=tuple)
    reason: Optional[FailureReason] = None

    def to_payload(self) -> Dict[str, Any]:
        if self.solved:
            return {
                "solved": True,
                "moves": [[move.source, move.target] for move in self.moves],
                "iterations": self.iterations,
            }
        return {
            "solved": False,
            "reason": self.reason.value if self.reason is not None else None,
            "iterations": self.iterations,
        }


class Solver:
    """Single-use solver bound to one initial arrangement."""

    def __init__(self, initial: Arrangement, limits: SearchLimits | None = None) -> None:
        self.initial = initial
        self.limits = limits or SearchLimits()
        self.phase = SolvePhase.INITIALIZED
        self._result: SolveResult | None = None

    @property
    def capacity(self) -> int:
        return self.initial.capacity

    @property
    def tube_count(self) -> int:
        return len(self.initial)

    def solve(self) -> SolveResult:
        """Run the search to a terminal phase.

        A second call returns the first result; the engine never resumes.
        """

        if self._result is not None:
            return self._result

        self.phase = SolvePhase.RUNNING
        result = _run_search(self.initial, self.limits)
        if result.solved or result.reason is None:
            self.phase = SolvePhase.SOLVED
        else:
            self.phase = SolvePhase(result.reason.value)
        self._result = result
        return result


def new_solver(
    initial: Arrangement | Iterable[Sequence[Color]],
    limits: SearchLimits | None = None,
) -> Solver:
    """Create a solver from an :class:`Arrangement` or raw bottom-to-top rows."""

    if not isinstance(initial, Arrangement):
        initial = Arrangement.from_units(initial)
    return Solver(initial, limits)


def _run_search(initial: Arrangement, limits: SearchLimits) -> SolveResult:
    """Expand nodes until a sorted arrangement pops or the search stops.

    An empty frontier takes precedence over the iteration ceiling: when the
    last permitted expansion also drains the frontier, the outcome is
    ``EXHAUSTED`` rather than ``LIMIT_REACHED``.
    """

    frontier = Frontier()
    best_cost: Dict[StateKey, int] = {initial.key(): 0}
    frontier.push(SearchNode(state=initial, moves=(), g=0, h=estimate(initial)))

    iterations = 0
    _LOGGER.debug(
        "search started: tubes=%d capacity=%d bounded=%s limits=%s",
        len(initial),
        initial.capacity,
        limits.bounded,
        limits.to_payload(),
    )

    while frontier and iterations < limits.max_iterations:
        iterations += 1
        current = frontier.pop()

        if is_sorted(current.state):
            _LOGGER.info(
                "search solved: moves=%d iterations=%d visited=%d",
                len(current.moves),
                iterations,
                len(best_cost),
            )
            return SolveResult(solved=True, iterations=iterations, moves=current.moves)

        g_next = current.g + 1
        for move in legal_moves(current.state):
            successor = pour(current.state, *move)
            key = successor.key()
            known = best_cost.get(key)
            if known is not None and known <= g_next:
                continue
            best_cost[key] = g_next
            frontier.push(
                SearchNode(
                    state=successor,
                    moves=current.moves + (move,),
                    g=g_next,
                    h=estimate(successor),
                )
            )

        if limits.bounded:
            dropped = frontier.bound(limits.frontier_ceiling, limits.frontier_keep)
            if dropped:
                _LOGGER.debug("frontier trimmed: dropped=%d kept=%d", dropped, len(frontier))

        if limits.progress_interval and iterations % limits.progress_interval == 0:
            _LOGGER.info(
                "search progress: iterations=%d frontier=%d visited=%d best_f=%s",
                iterations,
                len(frontier),
                len(best_cost),
                frontier.best_f(),
            )

    reason = FailureReason.EXHAUSTED if not frontier else FailureReason.LIMIT_REACHED
    _LOGGER.info("search stopped: reason=%s iterations=%d", reason.value, iterations)
    return SolveResult(solved=False, iterations=iterations, reason=reason)


__all__ = [
    "FailureReason",
    "SolvePhase",
    "SolveResult",
    "Solver",
    "new_solver",
]
