from __future__ import annotations

import pytest

from contracts.errors import SolverConfigError
from tubesort.limits import SearchLimits, resolve_limits


def test_config_defaults() -> None:
    limits = resolve_limits()
    assert limits.max_iterations == 200_000
    assert limits.frontier_ceiling == 10_000
    assert limits.frontier_keep == 5_000
    assert limits.progress_interval == 10_000
    assert limits.bounded is True


def test_profile_block_overrides_table() -> None:
    assert resolve_limits("test").progress_interval == 0
    assert resolve_limits("TEST").progress_interval == 0


def test_environment_overrides_toml() -> None:
    limits = resolve_limits(env={"TUBESORT_MAX_ITERATIONS": "500", "TUBESORT_FRONTIER_KEEP": "200"})
    assert limits.max_iterations == 500
    assert limits.frontier_keep == 200


def test_cli_overrides_environment() -> None:
    env = {
        "TUBESORT_MAX_ITERATIONS": "500",
        "CLI_TUBESORT_MAX_ITERATIONS": "42",
    }
    assert resolve_limits(env=env).max_iterations == 42


def test_lower_ceiling_halves_inherited_keep() -> None:
    limits = resolve_limits(env={"TUBESORT_FRONTIER_CEILING": "1000"})
    assert limits.frontier_ceiling == 1000
    assert limits.frontier_keep == 500


def test_zero_ceiling_disables_bound() -> None:
    limits = resolve_limits(env={"CLI_TUBESORT_FRONTIER_CEILING": "0"})
    assert limits.bounded is False
    assert limits.frontier_keep == 5_000


def test_unparseable_values_keep_lower_layer() -> None:
    env = {"TUBESORT_MAX_ITERATIONS": "lots", "CLI_TUBESORT_FRONTIER_KEEP": ""}
    limits = resolve_limits(env=env)
    assert limits.max_iterations == 200_000
    assert limits.frontier_keep == 5_000


def test_explicit_keep_above_ceiling_is_rejected() -> None:
    with pytest.raises(SolverConfigError):
        resolve_limits(env={"TUBESORT_FRONTIER_CEILING": "100", "TUBESORT_FRONTIER_KEEP": "200"})


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_iterations": 0},
        {"frontier_ceiling": -1},
        {"frontier_keep": 0},
        {"frontier_ceiling": 10, "frontier_keep": 11},
        {"progress_interval": -5},
    ],
)
def test_invalid_limits_fail_fast(kwargs) -> None:
    with pytest.raises(SolverConfigError):
        SearchLimits(**kwargs)


def test_payload_lists_every_limit() -> None:
    assert SearchLimits().to_payload() == {
        "max_iterations": 200_000,
        "frontier_ceiling": 10_000,
        "frontier_keep": 5_000,
        "progress_interval": 10_000,
    }
