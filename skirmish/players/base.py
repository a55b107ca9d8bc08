from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..models.api import Arrangement, MoveInstruction
    from ..models.units import UnitStatus


class DecisionProcess(Protocol):
    """Strategy for one side: where to start, and how to move each turn.

    ``think`` receives alive units only, positions as they are on the board.
    Directions are read in the side's own frame: the orchestrator mirrors
    owner 1's answer before applying it.
    """

    name: str

    def build_initial_arrangement(self) -> Arrangement: ...

    def think(
        self, self_units: Sequence[UnitStatus], enemy_units: Sequence[UnitStatus]
    ) -> list[MoveInstruction]: ...

    def close(self) -> None: ...
