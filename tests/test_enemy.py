import pytest

from game.bullethell.constants import ATTACK_TABLE, ENEMY_MAX_Y, ENEMY_MIN_Y
from game.bullethell.enemy import (
    attack_think,
    enter_attack,
    init_enemy,
    max_health,
    new_destination,
    update_enemy,
    update_enemy_attack,
)
from game.bullethell.utils import Vec2


def emitted(sim, attack, instance, level=1):
    sim.bullets.clear()
    sim.enemy.level = level
    enter_attack(sim, attack)
    attack_think(sim, instance)
    return list(sim.bullets.enemy_bullets)


def test_health_scales_with_level(sim):
    assert max_health(1) == 60
    assert max_health(3) == 160
    assert sim.enemy.health == sim.enemy.max_health == 60


@pytest.mark.parametrize("attack", sorted(ATTACK_TABLE))
def test_enter_attack_sets_timers_and_speed(sim, attack):
    duration, interval, speed = ATTACK_TABLE[attack]
    sim.enemy.attack_state.think_instance = 7
    sim.enemy.attack_state.think_timer = 0.3
    enter_attack(sim, attack)

    state = sim.enemy.attack_state
    assert state.attack == attack
    assert state.timer == duration
    assert state.think_interval == interval
    assert state.think_instance == 0
    assert state.think_timer == 0
    assert sim.enemy.move_state.speed == speed


def test_enter_unknown_attack_raises(sim):
    with pytest.raises(ValueError):
        enter_attack(sim, 4)


def test_walls_even_tick_sweeps_horizontally(sim):
    bullets = emitted(sim, 0, 0)
    assert len(bullets) == 24
    from_left = [b for b in bullets if b.velocity.x > 0]
    from_right = [b for b in bullets if b.velocity.x < 0]
    assert len(from_left) == len(from_right) == 12
    assert all(b.position.x == 0 for b in from_left)
    assert all(b.position.x == sim.width - 18 for b in from_right)
    assert all(b.velocity.y == 0 and b.acceleration.x == 20 for b in from_left)

    # one shared jitter per wall
    gaps = {round(b2.position.y - b1.position.y, 6) for b1, b2 in zip(from_left, from_left[1:])}
    assert gaps == {round(sim.height / 12, 6)}


def test_walls_odd_tick_sweeps_vertically(sim):
    bullets = emitted(sim, 0, 1)
    assert len(bullets) == 16
    from_top = [b for b in bullets if b.velocity.y > 0]
    from_bottom = [b for b in bullets if b.velocity.y < 0]
    assert len(from_top) == len(from_bottom) == 8
    assert all(b.position.y == sim.height - 18 for b in from_bottom)


def test_walls_grow_with_level(sim):
    assert len(emitted(sim, 0, 0, level=3)) == 2 * (10 + 6)
    assert len(emitted(sim, 0, 1, level=3)) == 2 * (7 + 3)


@pytest.mark.parametrize("level", [1, 2, 4])
def test_aimed_fan(sim, level):
    sim.player.position = Vec2(sim.enemy.position.x, sim.enemy.position.y + 300)
    bullets = emitted(sim, 1, 0, level=level)
    assert len(bullets) == 2 * (1 + level)
    for b in bullets:
        assert b.velocity.length() == pytest.approx(150)
        assert b.velocity.y > 0
        assert b.acceleration == Vec2(0, 0)
        assert b.position == sim.enemy.position
    xs = sorted(b.velocity.x for b in bullets)
    assert xs[0] < 0 < xs[-1]


def test_radial_burst_decelerates_back_inward(sim):
    bullets = emitted(sim, 2, 0)
    assert len(bullets) == 25
    for b in bullets:
        assert b.velocity.length() == pytest.approx(200)
        assert b.acceleration.length() == pytest.approx(500)
        assert b.acceleration.x == pytest.approx(-b.velocity.x * 2.5)
        assert b.acceleration.y == pytest.approx(-b.velocity.y * 2.5)


def test_chaos_aim_shares_velocity_with_random_curves(sim):
    sim.player.position = Vec2(50, 450)
    bullets = emitted(sim, 3, 0, level=2)
    assert len(bullets) == 24
    aim = sim.player.position.copy().subtract(sim.enemy.position).normalize().scale(200)
    for b in bullets:
        assert b.velocity.x == pytest.approx(aim.x)
        assert b.velocity.y == pytest.approx(aim.y)
        assert b.acceleration.length() <= 600
    assert len({(b.acceleration.x, b.acceleration.y) for b in bullets}) > 1


def test_patterns_read_positions_at_emission_time(sim):
    sim.player.position = Vec2(0, 450)
    enter_attack(sim, 1)
    sim.player.position = Vec2(380, 450)
    sim.bullets.clear()
    attack_think(sim, 0)
    assert all(b.velocity.x > 0 for b in sim.bullets.enemy_bullets)


def test_think_ticks_follow_pattern_cadence(sim):
    enter_attack(sim, 1)
    sim.bullets.clear()
    state = sim.enemy.attack_state

    update_enemy_attack(sim, 0.1)
    assert state.think_instance == 1
    assert state.think_timer == pytest.approx(0.5)
    assert len(sim.bullets.enemy_bullets) == 4

    update_enemy_attack(sim, 0.4)
    assert state.think_instance == 1

    update_enemy_attack(sim, 0.2)
    assert state.think_instance == 2
    assert len(sim.bullets.enemy_bullets) == 8


def test_expired_attack_picks_a_new_one(sim):
    state = sim.enemy.attack_state
    assert state.timer == 0
    update_enemy_attack(sim, 0.01)
    assert state.attack in ATTACK_TABLE
    assert state.timer == ATTACK_TABLE[state.attack][0]
    assert state.think_instance == 0
    # no volley on the transition frame
    assert sim.bullets.enemy_bullets == []


def test_destination_stays_in_top_band(sim):
    for _ in range(200):
        new_destination(sim)
        d = sim.enemy.move_state.destination
        assert 0 <= d.x <= sim.width - sim.enemy.size
        assert ENEMY_MIN_Y <= d.y <= ENEMY_MAX_Y
    assert sim.enemy.move_state.timer == 5


def test_enemy_steers_toward_destination(sim):
    enter_attack(sim, 2)
    sim.enemy.position = Vec2(0, 100)
    move = sim.enemy.move_state
    move.destination = Vec2(300, 100)
    move.timer = 5

    update_enemy(sim, 0.1)

    assert sim.enemy.position.x == pytest.approx(15)
    assert sim.enemy.position.y == pytest.approx(100)
    assert move.destination == Vec2(300, 100)


def test_destination_rerolled_on_arrival_and_timeout(sim):
    enter_attack(sim, 0)
    move = sim.enemy.move_state

    move.destination = sim.enemy.position.copy().add(Vec2(10, 0))
    move.timer = 5
    update_enemy(sim, 0.01)
    assert move.timer == 5

    move.destination = Vec2(sim.enemy.position.x + 300, sim.enemy.position.y)
    move.timer = 0.05
    update_enemy(sim, 0.1)
    assert move.timer == 5


def test_new_round_keeps_previous_attack_speed(sim):
    enter_attack(sim, 1)
    init_enemy(sim)
    assert sim.enemy.move_state.speed == ATTACK_TABLE[1][2]
    assert sim.enemy.attack_state.timer == 0
