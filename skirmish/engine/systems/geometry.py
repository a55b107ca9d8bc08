from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

Coord = tuple[int, int]


def diamond(center: Coord, r: int) -> Iterator[Coord]:
    cx, cy = center
    for dy in range(-r, r + 1):
        span = r - abs(dy)
        y = cy + dy
        for dx in range(-span, span + 1):
            yield (cx + dx, y)


# Attack area: every offset within Manhattan distance 2, own cell included (13 cells).
ATTACK_RADIUS = 2
ATTACK_OFFSETS: tuple[Coord, ...] = tuple(diamond((0, 0), ATTACK_RADIUS))
