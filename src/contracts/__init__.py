"""Payload contracts, canonical encoding and error types for the tube-sort solver."""

from __future__ import annotations

from .errors import (
    ArrangementError,
    IllegalMoveError,
    PayloadValidationError,
    SolverConfigError,
    TubesortError,
    ValidationIssue,
)
from .jsoncanon import jcs_dump, jcs_sha256
from .loader import load_schema, validate_payload

__all__ = [
    "ArrangementError",
    "IllegalMoveError",
    "PayloadValidationError",
    "SolverConfigError",
    "TubesortError",
    "ValidationIssue",
    "jcs_dump",
    "jcs_sha256",
    "load_schema",
    "validate_payload",
]
