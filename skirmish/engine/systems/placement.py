from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.enums import HEIGHT, SELF_ZONE_HEIGHT, WIDTH, ZONE_CELLS, Kind
from ...models.position import Pos
from ...models.units import create_unit

if TYPE_CHECKING:
    from ...models.api import Arrangement
    from ...models.units import Unit


def zone_position(owner: int, cell: int) -> Pos:
    """Board position of arrangement cell ``cell`` for ``owner``.

    Owner 0 fills the bottom rows as written. Owner 1 fills the top rows
    rotated half a turn, so both sides write their arrangement facing the enemy.
    """
    if not 0 <= cell < ZONE_CELLS:
        raise ValueError(f"zone cell {cell} out of range")
    if owner == 0:
        return Pos.from_index((HEIGHT - SELF_ZONE_HEIGHT) * WIDTH + cell)
    return Pos.from_index(ZONE_CELLS - (cell + 1))


def build_units(owner: int, arrangement: Arrangement, first_id: int) -> list[Unit]:
    """Create the units of one arrangement; ids count up from ``first_id``."""
    out: list[Unit] = []
    for cell, counts in enumerate(arrangement.cells):
        pos = zone_position(owner, cell)
        for kind in Kind:
            for _ in range(counts[kind]):
                out.append(create_unit(kind, first_id + len(out), owner, pos))
    return out
