from __future__ import annotations

import logging

from .events import MatchAborted, MatchFinished, MatchStarted, TurnResolved, event_bus

logger = logging.getLogger("skirmish.match")

_registered = False


def _on_start(ev: MatchStarted) -> None:
    logger.info(
        "match started: %d turns, units %s",
        ev.turns,
        " vs ".join(str(ev.units.get(o, 0)) for o in (0, 1)),
    )


def _on_turn(ev: TurnResolved) -> None:
    dealt = sum(sum(e.damage.values()) for e in ev.engagements)
    logger.debug(
        "turn %d: %d moves, %d engagements, %d damage, alive %d vs %d",
        ev.turn,
        ev.moves,
        len(ev.engagements),
        dealt,
        ev.alive.get(0, 0),
        ev.alive.get(1, 0),
    )


def _on_finish(ev: MatchFinished) -> None:
    logger.info(
        "match finished after %d turns: alive %d vs %d",
        ev.turns_played,
        ev.alive.get(0, 0),
        ev.alive.get(1, 0),
    )


def _on_abort(ev: MatchAborted) -> None:
    where = f"turn {ev.turn}" if ev.turn is not None else "setup"
    logger.error("match aborted during %s: %s: %s", where, ev.error_type, ev.error)


def register_listeners() -> None:
    global _registered
    if _registered:
        return
    event_bus.subscribe(MatchStarted, _on_start)
    event_bus.subscribe(TurnResolved, _on_turn)
    event_bus.subscribe(MatchFinished, _on_finish)
    event_bus.subscribe(MatchAborted, _on_abort)
    _registered = True
