from __future__ import annotations

from pygame.math import Vector2
from pytest import approx

from blackhole.sim.core.food import Food, FoodTier
from blackhole.sim.core.orb import Orb


def test_orb_uses_slots_and_isolates_positions():
    a = Orb(id=0, position=Vector2(1.0, 2.0), radius=5.0)
    b = Orb(id=1, position=Vector2(1.0, 2.0), radius=5.0)

    assert not hasattr(a, "__dict__")
    assert hasattr(Orb, "__slots__")
    a.position.x = 9.0
    assert b.position.x == 1.0
    assert a.alive and a.score == 0 and not a.is_player


def test_orbs_and_food_compare_by_identity():
    a = Orb(id=0, position=Vector2(), radius=5.0)
    b = Orb(id=0, position=Vector2(), radius=5.0)
    assert a != b
    first = Food(Vector2(), 1, (0, 0, 0))
    second = Food(Vector2(), 1, (0, 0, 0))
    assert first != second
    assert [first].count(second) == 0


def test_food_display_radius_by_tier():
    common = Food(Vector2(), 1, (255, 170, 51), FoodTier.COMMON)
    rare = Food(Vector2(), 3, (255, 51, 170), FoodTier.RARE)
    assert common.display_radius == approx(4.3)
    assert rare.display_radius == approx(4.9)
