"""Search limits and their precedence resolution.

Values are layered lowest to highest: built-in defaults, the ``[solver]``
table of ``config.toml`` (plus its ``by_profile`` block), ``TUBESORT_*``
environment variables and finally ``CLI_TUBESORT_*`` keys injected by the
command line.  Values that cannot be parsed leave the lower layer in place.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from contracts.errors import SolverConfigError
from project_config import get_config

DEFAULT_MAX_ITERATIONS = 200_000
DEFAULT_FRONTIER_CEILING = 10_000
DEFAULT_FRONTIER_KEEP = DEFAULT_FRONTIER_CEILING // 2
DEFAULT_PROGRESS_INTERVAL = 10_000

_FIELDS = ("max_iterations", "frontier_ceiling", "frontier_keep", "progress_interval")


@dataclass(frozen=True)
class SearchLimits:
    """Resource limits for one solve.

    ``frontier_ceiling`` of zero turns the frontier bound off, trading memory
    for completeness.  ``progress_interval`` of zero silences progress logs.
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    frontier_ceiling: int = DEFAULT_FRONTIER_CEILING
    frontier_keep: int = DEFAULT_FRONTIER_KEEP
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise SolverConfigError("max_iterations must be >= 1")
        if self.frontier_ceiling < 0:
            raise SolverConfigError("frontier_ceiling must be >= 0")
        if self.frontier_keep < 1:
            raise SolverConfigError("frontier_keep must be >= 1")
        if self.frontier_ceiling and self.frontier_keep > self.frontier_ceiling:
            raise SolverConfigError(
                f"frontier_keep ({self.frontier_keep}) must not exceed "
                f"frontier_ceiling ({self.frontier_ceiling})"
            )
        if self.progress_interval < 0:
            raise SolverConfigError("progress_interval must be >= 0")

    @property
    def bounded(self) -> bool:
        return self.frontier_ceiling > 0

    def to_payload(self) -> Dict[str, int]:
        return {name: int(getattr(self, name)) for name in _FIELDS}


def _parse_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip():
            return int(value.strip().replace("_", ""))
    except (TypeError, ValueError):
        return None
    return None


def _config_overrides(profile: str) -> Dict[str, Any]:
    config = get_config()
    block = config.get("solver", {})
    payload: Dict[str, Any] = {}
    if not isinstance(block, dict):
        return payload
    for key, value in block.items():
        if key == "by_profile":
            continue
        payload[key] = value
    by_profile = block.get("by_profile")
    if isinstance(by_profile, dict):
        profile_block = by_profile.get(profile.lower())
        if isinstance(profile_block, dict):
            payload.update(profile_block)
    return payload


def _env_overrides(env: Mapping[str, str], prefix: str) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for name in _FIELDS:
        key = f"{prefix}{name.upper()}"
        if key in env:
            payload[name] = env[key]
    return payload


def _apply_overrides(
    values: Dict[str, int],
    overrides: Mapping[str, Any],
    applied: set[str],
) -> Dict[str, int]:
    merged = dict(values)
    for name in _FIELDS:
        if name not in overrides:
            continue
        parsed = _parse_int(overrides[name])
        if parsed is not None:
            merged[name] = parsed
            applied.add(name)
    return merged


def resolve_limits(
    profile: str = "dev",
    env: Mapping[str, str] | None = None,
    *,
    base: SearchLimits | None = None,
) -> SearchLimits:
    """Combine every configuration layer into validated :class:`SearchLimits`.

    When only the ceiling is overridden and it drops below the inherited
    ``frontier_keep``, the keep size follows it at half the ceiling.
    """

    defaults = base or SearchLimits()
    values = {name: getattr(defaults, name) for name in _FIELDS}
    env_map = env or {}
    applied: set[str] = set()

    values = _apply_overrides(values, _config_overrides(profile), applied)
    values = _apply_overrides(values, _env_overrides(env_map, "TUBESORT_"), applied)
    values = _apply_overrides(values, _env_overrides(env_map, "CLI_TUBESORT_"), applied)

    ceiling = values["frontier_ceiling"]
    if "frontier_keep" not in applied and 0 < ceiling < values["frontier_keep"]:
        values["frontier_keep"] = max(1, ceiling // 2)

    return replace(defaults, **values)


__all__ = [
    "DEFAULT_FRONTIER_CEILING",
    "DEFAULT_FRONTIER_KEEP",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_PROGRESS_INTERVAL",
    "SearchLimits",
    "resolve_limits",
]
