from __future__ import annotations

from enum import Enum

WIDTH = 7
HEIGHT = 7
SELF_ZONE_HEIGHT = 2
ZONE_CELLS = WIDTH * SELF_ZONE_HEIGHT

INITIAL_HP = 200
DEFAULT_TURNS = 100
TARGET_CELL_CAP = 10

OWNERS = (0, 1)


def other_owner(owner: int) -> int:
    return 1 if owner == 0 else 0


class Kind(int, Enum):
    """Unit kind. The integer value is both the wire encoding and the damage-table index."""

    KNIGHT = 0
    FIGHTER = 1
    ASSASSIN = 2


KIND_COUNT = len(Kind)


class Direction(str, Enum):
    LEFT = "L"
    UP = "U"
    RIGHT = "R"
    DOWN = "D"

    def mirrored(self) -> Direction:
        return _MIRROR[self]

    @classmethod
    def parse(cls, token: str) -> Direction:
        """Read a direction from the first letter of ``token`` (case-insensitive)."""
        if not token:
            raise ValueError("empty direction token")
        return cls(token[0].upper())


_MIRROR = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

# (dx, dy) per direction
STEP: dict[Direction, tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


class PlayerState(str, Enum):
    ARRANGEMENT_PENDING = "arrangement_pending"
    READY = "ready"
