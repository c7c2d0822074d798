"""Utility helpers for port facades."""

from __future__ import annotations

import os
from typing import Dict, Mapping

_PREFIXES = ("TUBESORT_", "CLI_TUBESORT_")


def build_env(overrides: Mapping[str, str] | None = None) -> Dict[str, str]:
    """Collect solver-related variables from the process, then apply ``overrides``.

    Only ``TUBESORT_*`` and ``CLI_TUBESORT_*`` keys are kept; keys are
    upper-cased so lookups are case-insensitive.
    """

    env: Dict[str, str] = {
        key.upper(): str(value)
        for key, value in os.environ.items()
        if key.upper().startswith(_PREFIXES)
    }
    if overrides:
        env.update(
            {
                str(key).upper(): str(value)
                for key, value in overrides.items()
                if str(key).upper().startswith(_PREFIXES)
            }
        )
    return env


__all__ = ["build_env"]
