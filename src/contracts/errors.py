"""Shared error types for the tube-sort solver."""

from __future__ import annotations


from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class ValidationIssue:
    """Single finding produced by a schema check."""

    path: str
    msg: str


class TubesortError(Exception):
    """Base class for every error raised by the solver packages."""


class ArrangementError(TubesortError, ValueError):
    """Raised when an arrangement cannot be built from the supplied tubes."""


class IllegalMoveError(TubesortError, ValueError):
    """Raised when a replayed move is not legal for the current arrangement."""

    def __init__(self, index: int, move: Sequence[int], reason: str) -> None:
        super().__init__(f"move #{index} {tuple(move)!r} is illegal: {reason}")
        self.index = index
        self.move = tuple(move)
        self.reason = reason


class SolverConfigError(TubesortError, ValueError):
    """Raised when search limits are inconsistent."""


class PayloadValidationError(TubesortError, ValueError):
    """Raised when a puzzle payload does not satisfy its JSON Schema."""

    def __init__(self, artifact_type: str, issues: List[ValidationIssue]) -> None:
        summary = "; ".join(f"{issue.path}: {issue.msg}" for issue in issues[:3])
        super().__init__(f"{artifact_type} payload is invalid: {summary}")
        self.artifact_type = artifact_type
        self.issues = issues


__all__ = [
    "ArrangementError",
    "IllegalMoveError",
    "PayloadValidationError",
    "SolverConfigError",
    "TubesortError",
    "ValidationIssue",
]
