from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import UnknownUnitId

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from ..models.enums import Kind
    from ..models.position import Pos
    from ..models.units import Unit


class Roster:
    """Order-preserving filtered view over a shared unit collection.

    Filters return new views holding the same Unit objects; nothing is
    copied and the source view is never changed.
    """

    __slots__ = ("_units",)

    def __init__(self, units: Iterable[Unit] = ()):
        self._units: tuple[Unit, ...] = tuple(units)

    @property
    def units(self) -> tuple[Unit, ...]:
        return self._units

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __bool__(self) -> bool:
        return bool(self._units)

    def __repr__(self) -> str:
        return f"Roster({[u.id for u in self._units]})"

    def filter(self, predicate: Callable[[Unit], bool]) -> Roster:
        return Roster(u for u in self._units if predicate(u))

    def by_kind(self, kind: Kind) -> Roster:
        return self.filter(lambda u: u.kind == kind)

    def by_owner(self, owner: int) -> Roster:
        return self.filter(lambda u: u.owner == owner)

    def by_alive(self) -> Roster:
        return self.filter(lambda u: u.alive)

    def by_position(self, pos: Pos) -> Roster:
        return self.filter(lambda u: u.pos == pos)

    def find_by_id(self, unit_id: int) -> Unit:
        # dead units resolve too
        for u in self._units:
            if u.id == unit_id:
                return u
        raise UnknownUnitId(unit_id)
