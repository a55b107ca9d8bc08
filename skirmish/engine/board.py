from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from ..models.api import BiasedSnapshot
from ..models.enums import other_owner
from .render import render
from .roster import Roster
from .systems import combat, movement, placement

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..models.api import Arrangement, Engagement, MoveInstruction
    from ..models.units import Unit

logger = logging.getLogger(__name__)


class Board:
    """Owns the match's unit collection; the only place units are mutated."""

    def __init__(self, units: Iterable[Unit] = ()):
        self._units: list[Unit] = list(units)

    @property
    def roster(self) -> Roster:
        return Roster(self._units)

    def place_arrangement(self, owner: int, arrangement: Arrangement) -> list[Unit]:
        created = placement.build_units(owner, arrangement, first_id=len(self._units))
        self._units.extend(created)
        logger.info("placed %d units for owner %d", len(created), owner)
        return created

    def biased_snapshot(self, owner: int) -> BiasedSnapshot:
        roster = self.roster
        return BiasedSnapshot(
            self_owner=owner,
            self_units=tuple(u.status() for u in roster.by_owner(owner).by_alive()),
            enemy_units=tuple(
                u.status() for u in roster.by_owner(other_owner(owner)).by_alive()
            ),
        )

    def apply_moves(self, instructions: Iterable[MoveInstruction]) -> int:
        return movement.apply_moves(self.roster, instructions)

    def resolve_combat(self, attackers: Iterable[Unit] | None = None) -> list[Engagement]:
        return combat.resolve(self.roster, attackers)

    def alive_counts(self) -> dict[int, int]:
        alive = self.roster.by_alive()
        return {owner: len(alive.by_owner(owner)) for owner in (0, 1)}

    def render(self) -> str:
        return render(self.roster)

    def dump(self, out: TextIO | None = None) -> None:
        (out or sys.stdout).write(self.render())
