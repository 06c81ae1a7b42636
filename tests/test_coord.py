import pytest

from navalbattle.coord import Coord, Direction


def test_default_is_origin():
    assert Coord() == Coord(0, 0)


def test_add_sub_round_trip():
    a, b = Coord(3, 7), Coord(-2, 5)
    assert (a + b) - b == a
    assert (a - b) + b == a


def test_add_is_componentwise():
    a, b = Coord(3, 7), Coord(-2, 5)
    s = a + b
    assert s.x == a.x + b.x and s.y == a.y + b.y


def test_multiply_matches_repeated_addition():
    a = Coord(2, -3)
    assert a * 3 == a + a + a
    assert 3 * a == a * 3
    assert a * 0 == Coord()


def test_invalid_coordinate():
    inv = Coord.invalid()
    assert inv == Coord(-1, -1)
    assert not inv.valid()


@pytest.mark.parametrize("c", [Coord(-1, 4), Coord(4, -1)])
def test_partially_invalid(c):
    assert not c.valid()


def test_valid_coordinate():
    assert Coord(0, 0).valid()
    assert Coord(-2, 5).valid()


def test_hashable_and_equal():
    assert {Coord(1, 2): "a"}[Coord(1, 2)] == "a"
    assert len({Coord(1, 2), Coord(1, 2), Coord(2, 1)}) == 2


def test_str():
    assert str(Coord(1, 2)) == "(1,2)"


def test_direction_increments():
    assert Direction.LEFT_TO_RIGHT.increment() == Coord(1, 0)
    assert Direction.TOP_DOWN.increment() == Coord(0, 1)


@pytest.mark.parametrize("d", list(Direction))
def test_direction_inverse_steps(d):
    assert d.increment() + d.decrement() == Coord()
    assert d.increment_perpendicular() + d.decrement_perpendicular() == Coord()


@pytest.mark.parametrize("d", list(Direction))
def test_perpendicular_is_swapped_increment(d):
    inc = d.increment()
    assert d.increment_perpendicular() == Coord(inc.y, inc.x)
    assert d.increment_perpendicular() != inc