from __future__ import annotations

import os
from typing import Any

from .models.match import MatchConfig

ENV_PREFIX = "SKIRMISH_"
ENV_FIELDS = ("turns", "seed", "player0", "player1", "log_level")


def env_defaults() -> dict[str, Any]:
    out: dict[str, Any] = {}
    for name in ENV_FIELDS:
        value = os.getenv(ENV_PREFIX + name.upper())
        if value:
            out[name] = value
    return out


def load_config(**overrides: Any) -> MatchConfig:
    """Environment settings, then non-None overrides, validated by MatchConfig."""
    data = env_defaults()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return MatchConfig.model_validate(data)
