"""Remaining-work estimate used to order the search frontier."""

from __future__ import annotations

from .state import Arrangement, Tube, is_homogeneous

TOP_OFF_WEIGHT = 0.5
TRANSITION_WEIGHT = 3
COLOR_WEIGHT = 2


def tube_penalty(tube: Tube) -> float:
    """Penalty for a single tube.

    Sorted tubes cost nothing, single-colour tubes cost half a point per free
    slot, and mixed tubes pay for every colour change and every distinct
    colour they hold.
    """

    if tube.is_empty:
        return 0.0
    if is_homogeneous(tube):
        return TOP_OFF_WEIGHT * (tube.capacity - len(tube))

    units = tube.units
    transitions = sum(1 for lower, upper in zip(units, units[1:]) if lower != upper)
    return float(TRANSITION_WEIGHT * transitions + COLOR_WEIGHT * len(set(units)))


def estimate(state: Arrangement) -> float:
    """Sum of per-tube penalties.

    The estimate can exceed the true number of remaining pours, so solutions
    found with it are not guaranteed to be the shortest.
    """

    return sum(tube_penalty(tube) for tube in state.tubes)


__all__ = ["COLOR_WEIGHT", "TOP_OFF_WEIGHT", "TRANSITION_WEIGHT", "estimate", "tube_penalty"]
