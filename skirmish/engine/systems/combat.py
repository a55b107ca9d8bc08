from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...models.api import Engagement
from ...models.enums import TARGET_CELL_CAP, Kind, other_owner
from .geometry import ATTACK_OFFSETS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...models.units import Unit
    from ..roster import Roster

logger = logging.getLogger(__name__)

# rows: attacker kind, columns: target kind (KNIGHT, FIGHTER, ASSASSIN)
DAMAGE_TABLE: tuple[tuple[int, int, int], ...] = (
    (150, 100, 200),  # KNIGHT
    (200, 150, 100),  # FIGHTER
    (100, 200, 150),  # ASSASSIN
)


def base_damage(attacker: Kind, target: Kind) -> int:
    return DAMAGE_TABLE[attacker][target]


def collect_engagement(roster: Roster, attacker: Unit) -> Engagement | None:
    """Targets and divisor for one attacker, read from the current board.

    Every alive enemy in the attack area is a target. Each occupied cell adds
    min(TARGET_CELL_CAP, enemies on it) to k. None when nothing is in reach.
    """
    enemies = roster.by_owner(other_owner(attacker.owner)).by_alive()
    targets: list[Unit] = []
    k = 0
    for dx, dy in ATTACK_OFFSETS:
        cell = attacker.pos.offset(dx, dy)
        if not cell.is_valid():
            continue
        on_cell = enemies.by_position(cell)
        if not on_cell:
            continue
        k += min(TARGET_CELL_CAP, len(on_cell))
        targets.extend(on_cell)
    if not targets:
        return None
    return Engagement(
        attacker_id=attacker.id,
        attacker_kind=attacker.kind,
        target_ids=[t.id for t in targets],
        k=k,
        damage={t.id: base_damage(attacker.kind, t.kind) // k for t in targets},
    )


def collect_engagements(
    roster: Roster, attackers: Iterable[Unit] | None = None
) -> list[Engagement]:
    if attackers is None:
        attackers = [u for owner in (0, 1) for u in roster.by_owner(owner).by_alive()]
    out: list[Engagement] = []
    for attacker in attackers:
        if not attacker.alive:
            continue
        eng = collect_engagement(roster, attacker)
        if eng is not None:
            out.append(eng)
    return out


def apply_engagements(roster: Roster, engagements: Iterable[Engagement]) -> None:
    for eng in engagements:
        for target_id, dmg in eng.damage.items():
            roster.find_by_id(target_id).apply_damage(dmg)


def resolve(
    roster: Roster, attackers: Iterable[Unit] | None = None
) -> list[Engagement]:
    """Simultaneous combat: collect every engagement first, then apply all damage.

    ``attackers`` overrides the iteration order; the outcome does not depend on it.
    """
    engagements = collect_engagements(roster, attackers)
    apply_engagements(roster, engagements)
    logger.debug("resolved %d engagements", len(engagements))
    return engagements
