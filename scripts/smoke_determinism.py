#!/usr/bin/env python3
"""Smoke-test that repeated solves of one puzzle give identical verdicts."""

from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ports.solver_port import replay_payload, solve_payload

_SAMPLES = ROOT / "samples"
_COMPARED = ("digest", "solved", "moves", "iterations", "reason")


def _check(path: Path) -> bool:
    payload = json.loads(path.read_text("utf-8"))
    first = solve_payload(payload)
    second = solve_payload(payload)

    for key in _COMPARED:
        if first.get(key) != second.get(key):
            print(f"{path.name}: determinism failed for {key}: {first.get(key)} vs {second.get(key)}")
            return False

    if first["solved"]:
        outcome = replay_payload(payload, first["moves"])
        if not outcome["sorted"]:
            print(f"{path.name}: reported solution does not sort the tubes")
            return False
    print(f"{path.name}: ok ({'solved' if first['solved'] else first['reason']}, {first['iterations']} iterations)")
    return True


def main() -> int:
    results = [_check(path) for path in sorted(_SAMPLES.glob("*.json"))]
    if not all(results):
        return 1
    print("Determinism smoke-test passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
