#!/usr/bin/env python3
"""Validate contract fixtures and sample puzzles offline."""

from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from contracts.errors import ArrangementError
from contracts.loader import collect_issues
from tubesort.state import Arrangement


def _load_json(path: Path) -> dict:
    return json.loads(path.read_text("utf-8"))


def _guess_type(path: Path) -> str:
    prefix = path.stem.split("-", 1)[0].lower()
    return "MoveList" if prefix == "moves" else "Arrangement"


def _problems(path: Path) -> list[str]:
    payload = _load_json(path)
    artifact_type = _guess_type(path)
    problems = [f"{issue.path}: {issue.msg}" for issue in collect_issues(payload, artifact_type)]
    if not problems and artifact_type == "Arrangement":
        try:
            Arrangement.from_units(payload["tubes"])
        except ArrangementError as exc:
            problems.append(str(exc))
    return problems


def main() -> int:
    fixtures_root = ROOT / "PuzzleContracts" / "fixtures"
    valid_paths = sorted((fixtures_root / "valid").glob("*.json"))
    valid_paths += sorted((ROOT / "samples").glob("*.json"))
    invalid_paths = sorted((fixtures_root / "invalid").glob("*.json"))
    failures: list[str] = []

    for path in valid_paths:
        problems = _problems(path)
        if problems:
            failures.append(f"valid fixture failed: {path.name}: {'; '.join(problems)}")

    for path in invalid_paths:
        problems = _problems(path)
        if not problems:
            failures.append(f"invalid fixture unexpectedly passed: {path.name}")
        else:
            print(f"{path.name}: {'; '.join(problems)}")

    if failures:
        for line in failures:
            print(line)
        return 1

    print("All contract fixtures and samples are valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
