from __future__ import annotations

import random
from typing import TYPE_CHECKING

from ..models.api import Arrangement, MoveInstruction
from ..models.enums import ZONE_CELLS, Direction, Kind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..models.units import UnitStatus

UNITS_PER_KIND = 10


class RandomPlayer:
    """Reference strategy driven by an injected, seeded ``random.Random``."""

    name = "random"

    def __init__(self, rng: random.Random | None = None, units_per_kind: int = UNITS_PER_KIND):
        self.rng = rng or random.Random()
        self.units_per_kind = units_per_kind

    def build_initial_arrangement(self) -> Arrangement:
        cells = [[0, 0, 0] for _ in range(ZONE_CELLS)]
        for kind in Kind:
            for _ in range(self.units_per_kind):
                cells[self.rng.randrange(ZONE_CELLS)][kind] += 1
        return Arrangement(cells=[(a, b, c) for a, b, c in cells])

    def think(
        self, self_units: Sequence[UnitStatus], enemy_units: Sequence[UnitStatus]
    ) -> list[MoveInstruction]:
        out: list[MoveInstruction] = []
        for st in self_units:
            dirs = list(Direction)
            self.rng.shuffle(dirs)
            for d in dirs:
                # owner 1's answers are mirrored before they are applied
                applied = d.mirrored() if st.owner == 1 else d
                if st.pos.moved(applied).is_valid():
                    out.append(MoveInstruction(unit_id=st.id, direction=d))
                    break
        return out

    def close(self) -> None:
        pass
