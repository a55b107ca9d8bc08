from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import OutOfBounds

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...models.api import MoveInstruction
    from ..roster import Roster

logger = logging.getLogger(__name__)


def apply_moves(roster: Roster, instructions: Iterable[MoveInstruction]) -> int:
    """Validate and commit moves one at a time, in the order given.

    Raises UnknownUnitId or OutOfBounds on the first bad instruction; moves
    before it stay committed. Units may share a cell, and dead units are
    moved like any other.
    """
    applied = 0
    for ins in instructions:
        unit = roster.find_by_id(ins.unit_id)
        dst = unit.pos.moved(ins.direction)
        if not dst.is_valid():
            raise OutOfBounds(ins.unit_id, ins.direction, dst)
        unit.move_to(dst)
        applied += 1
    logger.debug("applied %d moves", applied)
    return applied
