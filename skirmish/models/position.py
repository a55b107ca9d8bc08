from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .enums import HEIGHT, STEP, WIDTH, Direction


class Pos(BaseModel):
    """Grid coordinate (0-based). Immutable; movement returns a new Pos."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    @classmethod
    def from_index(cls, index: int) -> Pos:
        return cls(x=index % WIDTH, y=index // WIDTH)

    @property
    def index(self) -> int:
        return self.x + self.y * WIDTH

    def is_valid(self) -> bool:
        return 0 <= self.x < WIDTH and 0 <= self.y < HEIGHT

    def moved(self, direction: Direction) -> Pos:
        # No bounds check here; callers test is_valid() on the result.
        dx, dy = STEP[direction]
        return Pos(x=self.x + dx, y=self.y + dy)

    def offset(self, dx: int, dy: int) -> Pos:
        return Pos(x=self.x + dx, y=self.y + dy)
