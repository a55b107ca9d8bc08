import pytest

from skirmish.engine.errors import UnknownUnitId
from skirmish.engine.roster import Roster
from skirmish.models.enums import Kind
from skirmish.models.position import Pos
from skirmish.models.units import create_assassin, create_fighter, create_knight
from tests.utils.data import assassin, fighter, knight


def _mixed() -> list:
    units = [
        knight(0, 0, 1, 1),
        fighter(1, 1, 1, 1),
        assassin(2, 0, 2, 2),
        knight(3, 1, 2, 2),
        fighter(4, 0, 1, 1),
        assassin(5, 1, 6, 6),
    ]
    units[1].hp = 0
    units[4].hp = -30
    return units


def test_factories_set_full_health():
    p = Pos(x=0, y=0)
    for make, kind in (
        (create_knight, Kind.KNIGHT),
        (create_fighter, Kind.FIGHTER),
        (create_assassin, Kind.ASSASSIN),
    ):
        u = make(7, 1, p)
        assert u.kind == kind
        assert u.hp == 200
        assert u.alive
        assert (u.id, u.owner, u.pos) == (7, 1, p)


def test_identity_fields_are_frozen():
    u = knight(0, 0, 0, 0)
    with pytest.raises(Exception):
        u.id = 5
    with pytest.raises(Exception):
        u.owner = 1


def test_damage_has_no_floor():
    u = knight(0, 0, 0, 0)
    u.apply_damage(150)
    assert u.hp == 50 and u.alive
    u.apply_damage(80)
    assert u.hp == -30 and not u.alive
    u.apply_damage(10)
    assert u.hp == -40


def test_filters_keep_insertion_order():
    r = Roster(_mixed())
    assert [u.id for u in r.by_owner(0)] == [0, 2, 4]
    assert [u.id for u in r.by_alive()] == [0, 2, 3, 5]
    assert [u.id for u in r.by_kind(Kind.KNIGHT)] == [0, 3]
    assert [u.id for u in r.by_position(Pos(x=1, y=1))] == [0, 1, 4]


def test_filter_composition_commutes():
    r = Roster(_mixed())
    a = [u.id for u in r.by_owner(0).by_alive()]
    b = [u.id for u in r.by_alive().by_owner(0)]
    assert a == b == [0, 2]
    c = [u.id for u in r.by_position(Pos(x=1, y=1)).by_kind(Kind.FIGHTER).by_alive()]
    d = [u.id for u in r.by_alive().by_kind(Kind.FIGHTER).by_position(Pos(x=1, y=1))]
    assert c == d == []


def test_filters_share_units_and_leave_source_alone():
    units = _mixed()
    r = Roster(units)
    alive = r.by_alive()
    assert len(r) == 6
    assert alive.units[0] is units[0]
    alive.units[0].apply_damage(10)
    assert units[0].hp == 190


def test_find_by_id_resolves_dead_units():
    r = Roster(_mixed())
    assert r.find_by_id(1).hp == 0
    assert r.find_by_id(5).kind == Kind.ASSASSIN


def test_find_by_id_unknown():
    r = Roster(_mixed())
    with pytest.raises(UnknownUnitId) as exc:
        r.find_by_id(99)
    assert exc.value.unit_id == 99
    # still a LookupError for generic callers
    assert isinstance(exc.value, LookupError)
