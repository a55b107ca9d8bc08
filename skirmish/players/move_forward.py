"""Sample decision process: fixed arrangement, every unit marches forward.

Run as ``python -m skirmish.players.move_forward``; it speaks the line
protocol on stdin/stdout until stdin closes. Units stop at the far edge.
"""

from __future__ import annotations

import sys
from typing import TextIO

from ..engine.errors import StreamClosed
from ..models.api import Arrangement, MoveInstruction
from ..models.enums import HEIGHT, Direction
from . import protocol

# front row empty; back row: 3/3/3 on both flanks, 4/4/4 in the middle
ARRANGEMENT = Arrangement(
    cells=[(0, 0, 0)] * 7
    + [(3, 3, 3), (0, 0, 0), (0, 0, 0), (4, 4, 4), (0, 0, 0), (0, 0, 0), (3, 3, 3)]
)


class Marcher:
    def __init__(self) -> None:
        # board-space y step of "forward"; learned from the first request
        self.forward_dy: int | None = None

    def answer(
        self, own: list[protocol.WireStatus], enemy: list[protocol.WireStatus]
    ) -> list[MoveInstruction]:
        if self.forward_dy is None and own:
            own_y = sum(st.y for st in own) / len(own)
            enemy_y = sum(st.y for st in enemy) / len(enemy) if enemy else HEIGHT / 2
            self.forward_dy = -1 if own_y >= enemy_y else 1
        return [
            MoveInstruction(unit_id=st.id, direction=Direction.UP)
            for st in own
            if 0 <= st.y + (self.forward_dy or -1) < HEIGHT
        ]


def main(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    stdout.write(protocol.encode_arrangement(ARRANGEMENT))
    stdout.flush()
    marcher = Marcher()
    while True:
        try:
            own, enemy = protocol.decode_think_request(stdin)
        except StreamClosed:
            return 0
        stdout.write(protocol.encode_think_response(marcher.answer(own, enemy)))
        stdout.flush()


if __name__ == "__main__":
    sys.exit(main())
