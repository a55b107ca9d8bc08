from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .enums import INITIAL_HP, Kind
from .position import Pos


class UnitStatus(BaseModel):
    """Read-only copy of a unit's state, as handed to decision processes."""

    model_config = ConfigDict(frozen=True)

    id: int
    kind: Kind
    owner: int
    hp: int
    pos: Pos

    @property
    def alive(self) -> bool:
        return self.hp > 0


class Unit(BaseModel):
    # identity, kind and owner are fixed at creation; hp and pos are mutated by the Board
    id: int = Field(frozen=True)
    kind: Kind = Field(frozen=True)
    owner: int = Field(frozen=True, ge=0, le=1)
    hp: int = INITIAL_HP
    pos: Pos

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def apply_damage(self, amount: int) -> None:
        # no floor: only hp > 0 is ever tested
        self.hp -= amount

    def move_to(self, pos: Pos) -> None:
        self.pos = pos

    def status(self) -> UnitStatus:
        return UnitStatus(
            id=self.id, kind=self.kind, owner=self.owner, hp=self.hp, pos=self.pos
        )


def create_unit(kind: Kind, id: int, owner: int, pos: Pos) -> Unit:
    return Unit(id=id, kind=kind, owner=owner, pos=pos)


def create_knight(id: int, owner: int, pos: Pos) -> Unit:
    return create_unit(Kind.KNIGHT, id, owner, pos)


def create_fighter(id: int, owner: int, pos: Pos) -> Unit:
    return create_unit(Kind.FIGHTER, id, owner, pos)


def create_assassin(id: int, owner: int, pos: Pos) -> Unit:
    return create_unit(Kind.ASSASSIN, id, owner, pos)
