"""Port facades between puzzle payloads and the solver engine."""

from __future__ import annotations

from .solver_port import load_arrangement, replay_payload, solve_payload

__all__ = [
    "load_arrangement",
    "replay_payload",
    "solve_payload",
]
