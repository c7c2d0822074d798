"""Facade that turns a puzzle payload into a solve verdict."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Sequence

from contracts.jsoncanon import jcs_sha256
from contracts.loader import validate_payload
from tubesort.limits import SearchLimits, resolve_limits
from tubesort.search import new_solver
from tubesort.state import Arrangement, apply_moves, is_sorted

from . import solve_log
from ._utils import build_env

_LOGGER = logging.getLogger(__name__)

SOLVE_EVENT = "solve.completed"


def load_arrangement(payload: Mapping[str, Any]) -> Arrangement:
    """Validate ``payload`` against the Arrangement schema and build it."""

    validate_payload(payload, "Arrangement")
    return Arrangement.from_units(payload["tubes"])


def solve_payload(
    payload: Mapping[str, Any],
    *,
    profile: str = "dev",
    env: Mapping[str, str] | None = None,
    limits: SearchLimits | None = None,
    log_events: bool = False,
) -> Dict[str, Any]:
    """Solve the arrangement described by ``payload``.

    ``limits`` bypasses configuration resolution entirely; otherwise limits
    come from ``config.toml`` and the environment (see
    :func:`tubesort.limits.resolve_limits`).
    """

    arrangement = load_arrangement(payload)
    resolved = limits or resolve_limits(profile, build_env(env))
    digest = jcs_sha256(arrangement.to_units())

    started = time.perf_counter()
    solver = new_solver(arrangement, resolved)
    result = solver.solve()
    elapsed_ms = int((time.perf_counter() - started) * 1000)

    verdict: Dict[str, Any] = {
        "digest": digest,
        "limits": resolved.to_payload(),
        "time_ms": elapsed_ms,
        **result.to_payload(),
    }
    _LOGGER.debug("solve verdict for %s: %s", digest, result.to_payload())

    if log_events:
        solve_log.append_event(
            {
                "event": SOLVE_EVENT,
                "digest": digest,
                "profile": profile,
                "tubes": solver.tube_count,
                "capacity": solver.capacity,
                "outcome": "SOLVED" if result.solved else verdict["reason"],
                "iterations": result.iterations,
                "moves": len(result.moves),
                "time_ms": elapsed_ms,
                "limits": verdict["limits"],
            }
        )
    return verdict


def replay_payload(payload: Mapping[str, Any], moves: Sequence[Sequence[int]]) -> Dict[str, Any]:
    """Apply ``moves`` to the payload arrangement and describe the outcome."""

    validate_payload(
        [list(move) if isinstance(move, (list, tuple)) else move for move in moves],
        "MoveList",
    )
    arrangement = load_arrangement(payload)
    final = apply_moves(arrangement, moves)
    return {
        "tubes": final.to_units(),
        "sorted": is_sorted(final),
        "moves": len(moves),
    }


__all__ = ["SOLVE_EVENT", "load_arrangement", "replay_payload", "solve_payload"]
