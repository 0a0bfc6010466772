import pytest

from game.bullethell.entities import Body, Bullet, Enemy
from game.bullethell.utils import Vec2


def test_constant_velocity_integration():
    b = Bullet(position=Vec2(0, 0), velocity=Vec2(10, 0), acceleration=Vec2(0, 0))
    for _ in range(3):
        b.update_kinematics(1.0)
    assert b.position == Vec2(30, 0)


def test_position_uses_velocity_before_acceleration():
    b = Body(position=Vec2(0, 0), velocity=Vec2(0, 0), acceleration=Vec2(1, 0))
    b.update_kinematics(1.0)
    assert b.position == Vec2(0, 0)
    assert b.velocity == Vec2(1, 0)
    b.update_kinematics(1.0)
    assert b.position == Vec2(1, 0)
    assert b.velocity == Vec2(2, 0)


def test_zero_dt_is_noop():
    b = Body(position=Vec2(5, 5), velocity=Vec2(3, 3), acceleration=Vec2(1, 1))
    b.update_kinematics(0.0)
    assert b.position == Vec2(5, 5)
    assert b.velocity == Vec2(3, 3)


def test_center_and_radius_from_top_left_square():
    b = Body(position=Vec2(10, 20), size=18)
    assert b.center == Vec2(19, 29)
    assert b.radius == 9


def test_enemy_health_fraction():
    e = Enemy(position=Vec2(0, 0), health=30, max_health=60)
    assert e.health_fraction == pytest.approx(0.5)
    e.health = -3
    assert e.health_fraction == 0.0
