from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import KIND_COUNT, ZONE_CELLS, Direction, Kind
from .units import UnitStatus

# ----- Per-turn exchange -----


class MoveInstruction(BaseModel):
    unit_id: int
    direction: Direction

    def mirrored(self) -> MoveInstruction:
        return MoveInstruction(unit_id=self.unit_id, direction=self.direction.mirrored())


class BiasedSnapshot(BaseModel):
    """Alive units split into the requesting owner's and the opponent's."""

    model_config = ConfigDict(frozen=True)

    self_owner: int
    self_units: tuple[UnitStatus, ...] = ()
    enemy_units: tuple[UnitStatus, ...] = ()


# ----- Initial arrangement -----

Cell = tuple[int, int, int]  # (knights, fighters, assassins)


class Arrangement(BaseModel):
    """Unit counts per zone cell, in the owner's own reading order (row-major)."""

    cells: list[Cell] = Field(
        default_factory=lambda: [(0, 0, 0) for _ in range(ZONE_CELLS)]
    )

    @field_validator("cells")
    @classmethod
    def _check_cells(cls, cells: list[Cell]) -> list[Cell]:
        if len(cells) != ZONE_CELLS:
            raise ValueError(f"expected {ZONE_CELLS} cells, got {len(cells)}")
        for cell in cells:
            if any(n < 0 for n in cell):
                raise ValueError(f"negative unit count in cell {cell}")
        return cells

    def count(self, kind: Kind) -> int:
        return sum(cell[kind] for cell in self.cells)

    @property
    def total(self) -> int:
        return sum(self.count(Kind(k)) for k in range(KIND_COUNT))


# ----- Combat log -----


class Engagement(BaseModel):
    """One attacker's collected targets for a turn, with its damage divisor."""

    attacker_id: int
    attacker_kind: Kind
    target_ids: list[int]
    k: int
    damage: dict[int, int] = Field(default_factory=dict)  # target id -> hp removed
