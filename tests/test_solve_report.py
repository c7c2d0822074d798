"""Smoke tests for solve journal aggregation."""

from __future__ import annotations

import json
from pathlib import Path

from ports import solve_log
from tools.reports.solve_report import aggregate


def _write(path: Path, events: list[dict]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(json.dumps(event) for event in events) + "\n", encoding="utf-8")
    return path


def test_aggregate_counts(tmp_path: Path):
    _write(
        tmp_path / "20240101" / "solve_00.jsonl",
        [
            {"event": "solve.completed", "outcome": "SOLVED", "iterations": 4, "moves": 3, "digest": "d1"},
            {"event": "solve.completed", "outcome": "SOLVED", "iterations": 10, "moves": 5, "digest": "d2"},
            {"event": "something.else", "outcome": "SOLVED", "iterations": 1},
        ],
    )
    _write(
        tmp_path / "20240102" / "solve_00.jsonl",
        [{"event": "solve.completed", "outcome": "LIMIT_REACHED", "iterations": 100, "moves": 0, "digest": "d3"}],
    )

    summary = aggregate(tmp_path, top=2)
    assert summary["total_events"] == 3
    assert summary["outcomes"] == {"SOLVED": 2, "LIMIT_REACHED": 1}
    assert summary["mean_iterations"] == 38.0
    assert summary["mean_solution_moves"] == 4.0
    assert summary["costliest"] == [["d3", 100], ["d2", 10]]
    assert json.loads(summary["canonical"])["total_events"] == 3


def test_aggregate_reads_journal_written_by_solve_log(tmp_path: Path):
    solve_log.configure(tmp_path, max_bytes=10)
    solve_log.append_event({"event": "solve.completed", "outcome": "EXHAUSTED", "iterations": 2, "digest": "d1"})
    solve_log.append_event({"event": "solve.completed", "outcome": "SOLVED", "iterations": 4, "moves": 3, "digest": "d1"})

    summary = aggregate(tmp_path)
    assert summary["total_events"] == 2
    assert summary["outcomes"] == {"EXHAUSTED": 1, "SOLVED": 1}
    assert summary["costliest"] == [["d1", 4]]


def test_aggregate_empty(tmp_path: Path):
    _write(tmp_path / "empty.jsonl", [])
    summary = aggregate(tmp_path)
    assert summary["total_events"] == 0
    assert summary["mean_iterations"] == 0.0
