from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.enums import HEIGHT, WIDTH, Kind
from ..models.position import Pos

if TYPE_CHECKING:
    from .roster import Roster

UNIT_TABLE_HEADER = "id kind owner hp x y"


def board_lines(roster: Roster) -> list[str]:
    """Per row, one line per kind: owner-0 and owner-1 alive counts for every cell."""
    alive = roster.by_alive()
    lines: list[str] = []
    for y in range(HEIGHT):
        for kind in Kind:
            line = ""
            for x in range(WIDTH):
                here = alive.by_position(Pos(x=x, y=y)).by_kind(kind)
                line += f"{len(here.by_owner(0)):02d} {len(here.by_owner(1)):02d}  "
            lines.append(line)
        lines.append("")
    return lines


def unit_lines(roster: Roster) -> list[str]:
    lines = [UNIT_TABLE_HEADER]
    for u in roster:
        lines.append(f"{u.id} {int(u.kind)} {u.owner} {u.hp} {u.pos.x} {u.pos.y}")
    return lines


def render(roster: Roster) -> str:
    return "\n".join(board_lines(roster) + unit_lines(roster)) + "\n"
