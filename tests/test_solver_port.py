from __future__ import annotations

import pytest

from contracts.errors import ArrangementError, IllegalMoveError, PayloadValidationError
from ports import solve_log
from ports.solver_port import SOLVE_EVENT, replay_payload, solve_payload
from tubesort.limits import SearchLimits

_TWO_COLOURS = {"tubes": [["A", "B"], ["B", "A"], []]}


@pytest.fixture(autouse=True)
def configure_log(tmp_path):
    solve_log.configure(tmp_path)
    return tmp_path


def test_solve_payload_returns_moves_and_digest() -> None:
    verdict = solve_payload(_TWO_COLOURS, profile="test")

    assert verdict["solved"] is True
    assert verdict["moves"] == [[0, 2], [1, 0], [1, 2]]
    assert verdict["digest"].startswith("sha256-")
    assert verdict["limits"]["progress_interval"] == 0
    assert "reason" not in verdict


def test_env_overrides_reach_the_solver() -> None:
    verdict = solve_payload(
        {"tubes": [["A", "B", "C"], ["B", "C", "A"], ["C", "A", "B"], [], []]},
        env={"CLI_TUBESORT_MAX_ITERATIONS": "1"},
    )
    assert verdict["solved"] is False
    assert verdict["reason"] == "LIMIT_REACHED"
    assert verdict["iterations"] == 1
    assert "moves" not in verdict


def test_explicit_limits_skip_resolution() -> None:
    verdict = solve_payload(
        _TWO_COLOURS,
        env={"CLI_TUBESORT_MAX_ITERATIONS": "1"},
        limits=SearchLimits(max_iterations=50),
    )
    assert verdict["solved"] is True
    assert verdict["limits"]["max_iterations"] == 50


def test_event_is_logged_when_requested(configure_log) -> None:
    solve_payload(_TWO_COLOURS, log_events=True)
    events = list(solve_log.iter_events(configure_log))
    assert len(events) == 1
    event = events[0]
    assert event["event"] == SOLVE_EVENT
    assert event["outcome"] == "SOLVED"
    assert event["moves"] == 3
    assert event["tubes"] == 3
    assert event["capacity"] == 2


def test_no_event_by_default(configure_log) -> None:
    solve_payload(_TWO_COLOURS)
    assert list(solve_log.iter_events(configure_log)) == []


def test_schema_violation_is_reported() -> None:
    with pytest.raises(PayloadValidationError):
        solve_payload({"tubes": "AB"})


def test_over_capacity_tube_fails_fast() -> None:
    with pytest.raises(ArrangementError):
        solve_payload({"tubes": [["A"], ["A", "A"]]})


def test_replay_payload_applies_moves() -> None:
    outcome = replay_payload(_TWO_COLOURS, [[0, 2], [1, 0], [1, 2]])
    assert outcome == {"tubes": [["A", "A"], [], ["B", "B"]], "sorted": True, "moves": 3}


def test_replay_payload_rejects_illegal_moves() -> None:
    with pytest.raises(IllegalMoveError):
        replay_payload(_TWO_COLOURS, [[2, 0]])
    with pytest.raises(PayloadValidationError):
        replay_payload(_TWO_COLOURS, [[0]])
