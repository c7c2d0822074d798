"""Liquid-sort puzzle solver: tube model plus best-first search."""

from __future__ import annotations

from .heuristic import estimate
from .limits import SearchLimits, resolve_limits
from .search import FailureReason, SolvePhase, SolveResult, Solver, new_solver
from .state import (
    Arrangement,
    Move,
    TopRun,
    Tube,
    apply_moves,
    can_pour,
    color_counts,
    is_homogeneous,
    is_sorted,
    legal_moves,
    pour,
    top_run,
)

__all__ = [
    "Arrangement",
    "FailureReason",
    "Move",
    "SearchLimits",
    "SolvePhase",
    "SolveResult",
    "Solver",
    "TopRun",
    "Tube",
    "apply_moves",
    "can_pour",
    "color_counts",
    "estimate",
    "is_homogeneous",
    "is_sorted",
    "legal_moves",
    "new_solver",
    "pour",
    "resolve_limits",
    "top_run",
]
