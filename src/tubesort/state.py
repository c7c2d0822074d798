"""Tube and arrangement model for the liquid-sort puzzle.

Tubes are immutable stacks of colour tokens listed bottom to top.  Every tube
of one puzzle shares a single capacity, taken from the first tube of the
initial layout.  Transitions never mutate their input: :func:`pour` returns a
fresh :class:`Arrangement` and leaves the parent untouched.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Iterable, NamedTuple, Optional, Sequence, Tuple

from contracts.errors import ArrangementError, IllegalMoveError

Color = Hashable
StateKey = Tuple[Tuple[Color, ...], ...]


class Move(NamedTuple):
    """A pour from ``source`` into ``target`` (tube indices)."""

    source: int
    target: int


class TopRun(NamedTuple):
    color: Optional[Color]
    count: int


_EMPTY_RUN = TopRun(None, 0)


@dataclass(frozen=True, slots=True)
class Tube:
    """Fixed-capacity stack of colour units, bottom first."""

    units: Tuple[Color, ...]
    capacity: int

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ArrangementError("tube capacity must be >= 1")
        if len(self.units) > self.capacity:
            raise ArrangementError(
                f"tube holds {len(self.units)} units but capacity is {self.capacity}"
            )

    def __len__(self) -> int:
        return len(self.units)

    @property
    def is_empty(self) -> bool:
        return not self.units

    @property
    def is_full(self) -> bool:
        return len(self.units) == self.capacity


@dataclass(frozen=True, slots=True)
class Arrangement:
    """Ordered snapshot of every tube in the puzzle."""

    tubes: Tuple[Tube, ...]

    def __post_init__(self) -> None:
        if not self.tubes:
            raise ArrangementError("an arrangement needs at least one tube")
        capacity = self.tubes[0].capacity
        for index, tube in enumerate(self.tubes):
            if tube.capacity != capacity:
                raise ArrangementError(
                    f"tube {index} has capacity {tube.capacity}, expected {capacity}"
                )

    @classmethod
    def from_units(cls, rows: Iterable[Sequence[Color]]) -> "Arrangement":
        """Build an arrangement whose capacity is the length of the first row."""

        materialised = [tuple(row) for row in rows]
        if not materialised:
            raise ArrangementError("an arrangement needs at least one tube")
        capacity = len(materialised[0])
        if capacity == 0:
            raise ArrangementError("the first tube defines the capacity and must not be empty")
        return cls(tuple(Tube(units, capacity) for units in materialised))

    @property
    def capacity(self) -> int:
        return self.tubes[0].capacity

    def __len__(self) -> int:
        return len(self.tubes)

    def key(self) -> StateKey:
        """Order-sensitive encoding; equal keys mean identical tubes in identical order."""

        return tuple(tube.units for tube in self.tubes)

    def to_units(self) -> list[list[Color]]:
        return [list(tube.units) for tube in self.tubes]


def top_run(tube: Tube) -> TopRun:
    """Return the top colour and how many consecutive units of it sit on top."""

    units = tube.units
    if not units:
        return _EMPTY_RUN
    color = units[-1]
    count = 0
    for unit in reversed(units):
        if unit != color:
            break
        count += 1
    return TopRun(color, count)


def is_homogeneous(tube: Tube) -> bool:
    units = tube.units
    return all(unit == units[0] for unit in units)


def is_tube_sorted(tube: Tube) -> bool:
    return tube.is_empty or (tube.is_full and is_homogeneous(tube))


def is_sorted(state: Arrangement) -> bool:
    """Goal predicate: each tube is empty, or full of a single colour."""

    return all(is_tube_sorted(tube) for tube in state.tubes)


def can_pour(state: Arrangement, source: int, target: int) -> bool:
    """Return ``True`` when pouring ``source`` into ``target`` is a legal move.

    Two pruning rules are folded into legality: a finished tube (full and of a
    single colour) is never poured out, and a single-colour tube is never
    poured into an empty one.
    """

    if source == target:
        return False
    from_tube = state.tubes[source]
    to_tube = state.tubes[target]
    if from_tube.is_empty or to_tube.is_full:
        return False
    uniform = is_homogeneous(from_tube)
    if uniform and from_tube.is_full:
        return False
    if to_tube.is_empty:
        return not uniform
    return from_tube.units[-1] == to_tube.units[-1]


def pour(state: Arrangement, source: int, target: int) -> Arrangement:
    """Move the top run of ``source`` onto ``target`` as far as space allows."""

    from_tube = state.tubes[source]
    to_tube = state.tubes[target]
    _, count = top_run(from_tube)
    amount = min(count, state.capacity - len(to_tube))
    if amount <= 0:
        return state

    moved = from_tube.units[len(from_tube) - amount:]
    tubes = list(state.tubes)
    tubes[source] = Tube(from_tube.units[: len(from_tube) - amount], from_tube.capacity)
    tubes[target] = Tube(to_tube.units + moved, to_tube.capacity)
    return Arrangement(tuple(tubes))


def legal_moves(state: Arrangement) -> Iterable[Move]:
    """Yield every legal move in ``(source, target)`` row-major order."""

    count = len(state.tubes)
    for source in range(count):
        for target in range(count):
            if can_pour(state, source, target):
                yield Move(source, target)


def apply_moves(state: Arrangement, moves: Iterable[Sequence[int]]) -> Arrangement:
    """Replay ``moves`` from ``state``; raises :class:`IllegalMoveError` on the first bad move."""

    current = state
    size = len(state.tubes)
    for index, move in enumerate(moves):
        if len(move) != 2:
            raise IllegalMoveError(index, move, "a move is a (source, target) pair")
        source, target = int(move[0]), int(move[1])
        if not (0 <= source < size and 0 <= target < size):
            raise IllegalMoveError(index, move, f"tube index outside 0..{size - 1}")
        if not can_pour(current, source, target):
            raise IllegalMoveError(index, move, "pour is not allowed in this arrangement")
        current = pour(current, source, target)
    return current


def color_counts(state: Arrangement) -> Counter:
    """Multiset of colours across all tubes; pours never change it."""

    counts: Counter = Counter()
    for tube in state.tubes:
        counts.update(tube.units)
    return counts


__all__ = [
    "Arrangement",
    "Color",
    "Move",
    "StateKey",
    "TopRun",
    "Tube",
    "apply_moves",
    "can_pour",
    "color_counts",
    "is_homogeneous",
    "is_sorted",
    "is_tube_sorted",
    "legal_moves",
    "pour",
    "top_run",
]
