from __future__ import annotations

from typing import TYPE_CHECKING

from ...events import MatchAborted, MatchFinished, MatchStarted, TurnResolved, event_bus

if TYPE_CHECKING:
    from ...models.api import Engagement


def log_start(turns: int, units: dict[int, int]) -> None:
    event_bus.emit(MatchStarted(turns=turns, units=units))


def log_turn(
    turn: int, moves: int, engagements: list[Engagement], alive: dict[int, int]
) -> None:
    event_bus.emit(
        TurnResolved(turn=turn, moves=moves, engagements=engagements, alive=alive)
    )


def log_finish(turns_played: int, alive: dict[int, int]) -> None:
    event_bus.emit(MatchFinished(turns_played=turns_played, alive=alive))


def log_error(turn: int | None, error: Exception) -> None:
    event_bus.emit(
        MatchAborted(turn=turn, error=str(error), error_type=type(error).__name__)
    )
