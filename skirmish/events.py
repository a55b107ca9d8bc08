from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Callable

    from skirmish.models.api import Engagement


@dataclass
class MatchStarted:
    turns: int
    units: dict[int, int]  # owner -> units placed


@dataclass
class TurnResolved:
    turn: int
    moves: int
    engagements: list[Engagement] = field(default_factory=list)
    alive: dict[int, int] = field(default_factory=dict)


@dataclass
class MatchFinished:
    turns_played: int
    alive: dict[int, int]


@dataclass
class MatchAborted:
    turn: int | None
    error: str
    error_type: str


T = TypeVar("T")


class EventBus:
    def __init__(self) -> None:
        self._subs: dict[type[Any], list[object]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.setdefault(event_type, [])
        lst.append(cast("object", handler))

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.get(event_type, [])
        if handler in lst:
            lst.remove(handler)

    def emit(self, event: Any) -> None:
        et = type(event)
        for h in self._subs.get(et, []):
            # Let exceptions propagate; callers decide how to handle them
            cast("Callable[[Any], None]", h)(event)


# Global bus instance
event_bus = EventBus()
