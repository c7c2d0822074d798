"""Aggregation helpers for solve journals."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List, Mapping

from contracts.jsoncanon import jcs_dump
from ports.solve_log import iter_events
from ports.solver_port import SOLVE_EVENT

__all__ = ["aggregate"]


def _mean(values: List[int]) -> float:
    return round(sum(values) / len(values), 3) if values else 0.0


def aggregate(base_dir: str | Path, *, top: int = 5) -> Mapping[str, object]:
    """Summarise the ``solve.completed`` events journaled under ``base_dir``."""

    outcomes: Counter = Counter()
    iterations: List[int] = []
    solved_moves: List[int] = []
    effort: Dict[str, int] = {}
    samples = 0
    for event in iter_events(base_dir):
        if event.get("event") != SOLVE_EVENT:
            continue
        samples += 1
        outcomes[str(event.get("outcome", "UNKNOWN"))] += 1
        spent = int(event.get("iterations", 0))  # type: ignore[arg-type]
        iterations.append(spent)
        if event.get("outcome") == "SOLVED":
            solved_moves.append(int(event.get("moves", 0)))  # type: ignore[arg-type]
        digest = str(event.get("digest", "unknown"))
        effort[digest] = max(effort.get(digest, 0), spent)

    costliest = sorted(effort.items(), key=lambda item: (-item[1], item[0]))[:top]
    summary = {
        "total_events": samples,
        "outcomes": dict(outcomes),
        "mean_iterations": _mean(iterations),
        "mean_solution_moves": _mean(solved_moves),
        "costliest": [[digest, spent] for digest, spent in costliest],
    }
    # Canonicalise summary for deterministic snapshots
    summary["canonical"] = jcs_dump(summary).decode("utf-8")
    return summary
