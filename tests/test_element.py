import pytest

from navalbattle.element import Element, ElementType, HitType


class FakeShip:
    def __init__(self, life):
        self.life = life

    def dec_life(self):
        self.life -= 1


def test_default_is_water():
    e = Element()
    assert e.type is ElementType.WATER
    assert e.parent is None
    assert e.water()
    assert e.free()


def test_hit_water_is_miss():
    e = Element()
    assert e.hit() is HitType.MISS
    assert e.type is ElementType.MISS
    assert not e.free()
    assert not e.water()


def test_hit_alive_damages_ship():
    ship = FakeShip(2)
    e = Element(ElementType.ALIVE, ship)
    assert e.free()
    assert not e.water()
    assert e.hit() is HitType.HIT
    assert e.type is ElementType.DEAD
    assert ship.life == 1


def test_second_hit_is_invalid():
    ship = FakeShip(3)
    e = Element(ElementType.ALIVE, ship)
    e.hit()
    assert e.hit() is HitType.INVALID
    assert ship.life == 2


@pytest.mark.parametrize(
    "kind", [ElementType.DEAD, ElementType.MISS, ElementType.BORDER]
)
def test_hit_non_free_is_invalid(kind):
    e = Element(kind)
    assert not e.free()
    assert e.hit() is HitType.INVALID
    assert e.type is kind