import pytest

from skirmish.models.enums import HEIGHT, WIDTH, Direction
from skirmish.models.position import Pos


@pytest.mark.parametrize(
    "direction,expected",
    [
        (Direction.LEFT, (2, 3)),
        (Direction.UP, (3, 2)),
        (Direction.RIGHT, (4, 3)),
        (Direction.DOWN, (3, 4)),
    ],
)
def test_move_one_cell_from_inside(direction, expected):
    p = Pos(x=3, y=3)
    moved = p.moved(direction)
    assert (moved.x, moved.y) == expected
    assert moved.is_valid()
    # original is untouched
    assert (p.x, p.y) == (3, 3)


def test_every_interior_cell_stays_valid_in_all_directions():
    for y in range(1, HEIGHT - 1):
        for x in range(1, WIDTH - 1):
            for d in Direction:
                assert Pos(x=x, y=y).moved(d).is_valid()


@pytest.mark.parametrize(
    "pos,direction",
    [
        (Pos(x=0, y=3), Direction.LEFT),
        (Pos(x=3, y=0), Direction.UP),
        (Pos(x=WIDTH - 1, y=3), Direction.RIGHT),
        (Pos(x=3, y=HEIGHT - 1), Direction.DOWN),
    ],
)
def test_boundary_move_off_grid_is_invalid(pos, direction):
    assert pos.is_valid()
    assert not pos.moved(direction).is_valid()


def test_corner_can_only_move_inwards():
    corner = Pos(x=0, y=0)
    valid = {d for d in Direction if corner.moved(d).is_valid()}
    assert valid == {Direction.RIGHT, Direction.DOWN}


def test_index_round_trip_and_layout():
    assert Pos.from_index(0) == Pos(x=0, y=0)
    assert Pos.from_index(WIDTH) == Pos(x=0, y=1)
    assert Pos.from_index(WIDTH * HEIGHT - 1) == Pos(x=WIDTH - 1, y=HEIGHT - 1)
    assert Pos(x=4, y=2).index == 4 + 2 * WIDTH


def test_pos_is_immutable():
    p = Pos(x=1, y=1)
    with pytest.raises(Exception):
        p.x = 2


def test_direction_mirror_and_parse():
    assert Direction.LEFT.mirrored() is Direction.RIGHT
    assert Direction.UP.mirrored() is Direction.DOWN
    for d in Direction:
        assert d.mirrored().mirrored() is d
    assert Direction.parse("l") is Direction.LEFT
    assert Direction.parse("Down") is Direction.DOWN
    with pytest.raises(ValueError):
        Direction.parse("x")
    with pytest.raises(ValueError):
        Direction.parse("")
