from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.enums import Direction
    from ..models.position import Pos


class MatchError(Exception):
    """Base for every error that aborts a match. None of them is recoverable."""


class ProtocolViolation(MatchError, ValueError):
    """A decision process sent something the protocol does not allow."""


class OutOfBounds(MatchError, ValueError):
    def __init__(self, unit_id: int, direction: Direction, destination: Pos):
        self.unit_id = unit_id
        self.direction = direction
        self.destination = destination
        super().__init__(
            f"unit {unit_id} moving {direction.value} would leave the board "
            f"at ({destination.x}, {destination.y})"
        )


class UnknownUnitId(MatchError, LookupError):
    def __init__(self, unit_id: int):
        self.unit_id = unit_id
        super().__init__(f"unknown unit id {unit_id}")


class StreamClosed(ProtocolViolation):
    """The other end of a protocol stream went away."""


class PlayerLaunchError(MatchError):
    """A decision process command could not be started."""

    def __init__(self, command: list[str], cause: OSError):
        self.command = command
        super().__init__(f"cannot start decision process {command}: {cause.strerror or cause}")
