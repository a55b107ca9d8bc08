from __future__ import annotations

import logging
import random
import sys
from typing import TYPE_CHECKING, TextIO

from ..models.enums import DEFAULT_TURNS, OWNERS
from ..models.match import MatchResult
from ..players import build_player
from .board import Board
from .errors import MatchError
from .logging.logger import log_error, log_finish, log_start, log_turn

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..models.api import MoveInstruction
    from ..models.match import MatchConfig
    from ..players.base import DecisionProcess

logger = logging.getLogger(__name__)


def mirror_instructions(instructions: Sequence[MoveInstruction]) -> list[MoveInstruction]:
    return [ins.mirrored() for ins in instructions]


class Match:
    """Drives two decision processes against one Board for a fixed number of turns.

    Strictly sequential: owner 0 thinks, then owner 1, then all moves are
    applied, then combat resolves. The match never ends early; any
    MatchError aborts it and propagates to the caller.
    """

    def __init__(
        self,
        players: Sequence[DecisionProcess],
        *,
        turns: int = DEFAULT_TURNS,
        board: Board | None = None,
        out: TextIO | None = None,
    ):
        if len(players) != len(OWNERS):
            raise ValueError(f"expected {len(OWNERS)} players, got {len(players)}")
        self.players = list(players)
        self.turns = turns
        self.board = board or Board()
        self.out = out
        self.turn: int | None = None

    def _dump(self) -> None:
        if self.out is not None:
            self.board.dump(self.out)

    def setup(self) -> None:
        arrangements = [p.build_initial_arrangement() for p in self.players]
        placed = {
            owner: len(self.board.place_arrangement(owner, arr))
            for owner, arr in zip(OWNERS, arrangements)
        }
        log_start(self.turns, placed)
        self._dump()

    def collect_instructions(self) -> list[MoveInstruction]:
        out: list[MoveInstruction] = []
        for owner, player in zip(OWNERS, self.players):
            snap = self.board.biased_snapshot(owner)
            got = player.think(snap.self_units, snap.enemy_units)
            if owner == 1:
                got = mirror_instructions(got)
            out.extend(got)
        return out

    def play_turn(self, turn: int) -> None:
        self.turn = turn
        instructions = self.collect_instructions()
        moved = self.board.apply_moves(instructions)
        engagements = self.board.resolve_combat()
        log_turn(turn, moved, engagements, self.board.alive_counts())
        if self.out is not None:
            self.out.write(f"{turn}===\n")
        self._dump()

    def run(self) -> MatchResult:
        try:
            self.setup()
            for turn in range(self.turns):
                self.play_turn(turn)
        except MatchError as e:
            log_error(self.turn, e)
            raise
        alive = self.board.alive_counts()
        log_finish(self.turns, alive)
        roster = self.board.roster.by_alive()
        return MatchResult(
            turns_played=self.turns,
            alive=alive,
            hp={o: sum(u.hp for u in roster.by_owner(o)) for o in OWNERS},
        )


def run_match(config: MatchConfig, out: TextIO | None = sys.stdout) -> MatchResult:
    """Build both players from ``config``, play the match, always release the players."""
    rng = random.Random(config.seed)
    players: list[DecisionProcess] = []
    try:
        for spec in (config.player0, config.player1):
            players.append(build_player(spec, random.Random(rng.getrandbits(64))))
        logger.info("%s vs %s, %d turns", players[0].name, players[1].name, config.turns)
        return Match(players, turns=config.turns, out=out).run()
    finally:
        for p in players:
            p.close()
