"""Line protocol spoken with decision processes.

Engine -> process, every turn::

    n
    id y x hp kind      (n lines, own alive units)
    m
    id y x hp kind      (m lines, enemy alive units)

Process -> engine, once at start: SELF_ZONE_HEIGHT lines of WIDTH * 3
counts (knights fighters assassins per cell). Every turn::

    k
    id L|U|R|D          (k lines; extra tokens ignored)

Anything else is a ProtocolViolation.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel

from ..engine.errors import ProtocolViolation, StreamClosed
from ..models.api import Arrangement, MoveInstruction
from ..models.enums import KIND_COUNT, SELF_ZONE_HEIGHT, WIDTH, Direction, Kind

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ..models.units import UnitStatus

# optional minus, decimal digits only; a leading "+" is not a number
_INT = re.compile(r"-?[0-9]+")
_DELIMS = re.compile(r"[ \t]+")


class LineReader(Protocol):
    def readline(self) -> str: ...


class WireStatus(BaseModel):
    """A unit as it appears in a think request."""

    id: int
    y: int
    x: int
    hp: int
    kind: Kind


def split_tokens(line: str) -> list[str]:
    return [t for t in _DELIMS.split(line.strip()) if t]


def parse_int(token: str, what: str = "value") -> int:
    if not _INT.fullmatch(token):
        raise ProtocolViolation(f"{what} is not a number: {token!r}")
    return int(token)


def parse_count(token: str, what: str = "count") -> int:
    n = parse_int(token, what)
    if n < 0:
        raise ProtocolViolation(f"{what} is negative: {n}")
    return n


def read_line(reader: LineReader, what: str = "line") -> str:
    raw = reader.readline()
    if not raw:
        raise StreamClosed(f"stream closed while waiting for {what}")
    line = raw.rstrip("\r\n")
    if not line.strip():
        raise ProtocolViolation(f"empty {what}")
    return line


def read_count(reader: LineReader, what: str) -> int:
    tokens = split_tokens(read_line(reader, what))
    if len(tokens) != 1:
        raise ProtocolViolation(f"{what} line has {len(tokens)} tokens, expected 1")
    return parse_count(tokens[0], what)


# ----- Arrangement -----


def decode_arrangement(reader: LineReader) -> Arrangement:
    per_line = WIDTH * KIND_COUNT
    cells: list[tuple[int, int, int]] = []
    for row in range(SELF_ZONE_HEIGHT):
        tokens = split_tokens(read_line(reader, f"arrangement line {row + 1}"))
        if len(tokens) != per_line:
            raise ProtocolViolation(
                f"arrangement line {row + 1} has {len(tokens)} tokens, expected {per_line}"
            )
        counts = [parse_count(t, "unit count") for t in tokens]
        for x in range(WIDTH):
            knights, fighters, assassins = counts[x * KIND_COUNT : (x + 1) * KIND_COUNT]
            cells.append((knights, fighters, assassins))
    return Arrangement(cells=cells)


def encode_arrangement(arrangement: Arrangement) -> str:
    lines = []
    for row in range(SELF_ZONE_HEIGHT):
        cells = arrangement.cells[row * WIDTH : (row + 1) * WIDTH]
        lines.append("  ".join(" ".join(str(n) for n in cell) for cell in cells))
    return "\n".join(lines) + "\n"


# ----- Think request -----


def _status_line(st: UnitStatus) -> str:
    return f"{st.id} {st.pos.y} {st.pos.x} {st.hp} {int(st.kind)}"


def encode_think_request(
    self_units: Sequence[UnitStatus], enemy_units: Sequence[UnitStatus]
) -> str:
    lines = [str(len(self_units))]
    lines += [_status_line(st) for st in self_units]
    lines.append(str(len(enemy_units)))
    lines += [_status_line(st) for st in enemy_units]
    return "\n".join(lines) + "\n"


def _decode_status_block(reader: LineReader, side: str) -> list[WireStatus]:
    n = read_count(reader, f"{side} count")
    out: list[WireStatus] = []
    for _ in range(n):
        tokens = split_tokens(read_line(reader, f"{side} unit"))
        if len(tokens) < 5:
            raise ProtocolViolation(f"{side} unit line has {len(tokens)} tokens, expected 5")
        uid, y, x, hp, kind = (parse_int(t, "status field") for t in tokens[:5])
        if kind not in range(KIND_COUNT):
            raise ProtocolViolation(f"unknown kind {kind}")
        out.append(WireStatus(id=uid, y=y, x=x, hp=hp, kind=Kind(kind)))
    return out


def decode_think_request(reader: LineReader) -> tuple[list[WireStatus], list[WireStatus]]:
    own = _decode_status_block(reader, "self")
    enemy = _decode_status_block(reader, "enemy")
    return own, enemy


# ----- Think response -----


def encode_think_response(instructions: Iterable[MoveInstruction]) -> str:
    items = list(instructions)
    lines = [str(len(items))]
    lines += [f"{ins.unit_id} {ins.direction.value}" for ins in items]
    return "\n".join(lines) + "\n"


def decode_think_response(reader: LineReader) -> list[MoveInstruction]:
    n = read_count(reader, "instruction count")
    out: list[MoveInstruction] = []
    for i in range(n):
        tokens = split_tokens(read_line(reader, f"instruction {i + 1}"))
        if len(tokens) < 2:
            raise ProtocolViolation(
                f"instruction {i + 1} has {len(tokens)} tokens, expected unit id and direction"
            )
        uid = parse_int(tokens[0], "unit id")
        try:
            direction = Direction.parse(tokens[1])
        except ValueError:
            raise ProtocolViolation(f"unknown direction {tokens[1]!r}") from None
        out.append(MoveInstruction(unit_id=uid, direction=direction))
    return out
