# Shared fixtures: event capture on the global bus and a few ready-made boards.

from __future__ import annotations

import logging
from typing import Any, Iterator

import pytest

from skirmish.events import MatchAborted, MatchFinished, MatchStarted, TurnResolved, event_bus
from tests.utils.data import assassin, board_with, knight

logger = logging.getLogger(__name__)


@pytest.fixture()
def events() -> Iterator[list[Any]]:
    """Every match event emitted while the test runs, in order."""
    seen: list[Any] = []
    types = (MatchStarted, TurnResolved, MatchFinished, MatchAborted)
    for t in types:
        event_bus.subscribe(t, seen.append)
    try:
        yield seen
    finally:
        for t in types:
            event_bus.unsubscribe(t, seen.append)
        logger.debug("[tests] captured %d events", len(seen))


@pytest.fixture()
def duel_board():
    """Knight (owner 0) at (3,3) facing an Assassin (owner 1) at (3,4)."""
    return board_with(knight(0, 0, 3, 3), assassin(1, 1, 3, 4))
