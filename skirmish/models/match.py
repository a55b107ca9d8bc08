from __future__ import annotations

import shlex
import sys

from pydantic import BaseModel, Field, field_validator

from ..players import check_player_spec
from .enums import DEFAULT_TURNS

DEFAULT_PLAYER = f"cmd:{shlex.quote(sys.executable)} -m skirmish.players.move_forward"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class MatchConfig(BaseModel):
    turns: int = Field(default=DEFAULT_TURNS, ge=0)
    seed: int | None = None
    player0: str = DEFAULT_PLAYER
    player1: str = DEFAULT_PLAYER
    log_level: str = "INFO"

    @field_validator("player0", "player1")
    @classmethod
    def _known_player(cls, v: str) -> str:
        return check_player_spec(v)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}, expected one of {list(LOG_LEVELS)}")
        return level


class MatchResult(BaseModel):
    turns_played: int
    alive: dict[int, int]  # owner -> alive unit count
    hp: dict[int, int]  # owner -> summed hp of alive units
