"""
Enemy movement and attack state machine.

The enemy cycles through four attack patterns. An outer timer decides when a
new pattern is picked; while it runs, an inner "think" timer fires the active
pattern's emission routine at the pattern's own cadence:

    0  walls        sweeping walls from opposite edges, alternating axis
    1  aimed fan    fan of bullets around the direction to the player
    2  radial burst random directions, decelerating and falling back
    3  chaos aim    aimed at the player, each with a random acceleration
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

from .constants import (
    ATTACK_TABLE,
    BURST_ACCEL,
    BURST_SPEED,
    CHAOS_MAX_ACCEL,
    CHAOS_SPEED,
    ENEMY_DEFAULT_THINK_INTERVAL,
    ENEMY_HEALTH_BASE,
    ENEMY_HEALTH_PER_LEVEL,
    ENEMY_MAX_Y,
    ENEMY_MIN_Y,
    ENEMY_RETARGET_TIME,
    ENEMY_START,
    FAN_AIM_WEIGHT,
    FAN_SPEED,
    SCORE_PER_HIT,
    WALL_ACCEL,
    WALL_EDGE_INSET,
    WALL_JITTER,
    WALL_SPEED,
)
from .entities import EnemyAttackState, Owner
from .utils import Vec2

if TYPE_CHECKING:
    from .simulation import Simulation


def max_health(level: int) -> int:
    return ENEMY_HEALTH_BASE + ENEMY_HEALTH_PER_LEVEL * level


def init_enemy(sim: "Simulation"):
    """Reset position, health and attack timers for a new round"""
    enemy = sim.enemy
    enemy.position = Vec2(*ENEMY_START)
    enemy.max_health = max_health(enemy.level)
    enemy.health = enemy.max_health
    # timer at zero makes the first update pick an attack
    enemy.attack_state = EnemyAttackState(think_interval=ENEMY_DEFAULT_THINK_INTERVAL)
    new_destination(sim)


def new_destination(sim: "Simulation"):
    """Pick a wandering target in the band near the top of the play area"""
    move = sim.enemy.move_state
    move.destination = Vec2(
        sim.rng.random() * (sim.width - sim.enemy.size),
        ENEMY_MIN_Y + sim.rng.random() * (ENEMY_MAX_Y - ENEMY_MIN_Y),
    )
    move.timer = ENEMY_RETARGET_TIME


def update_enemy(sim: "Simulation", dt: float):
    enemy = sim.enemy
    move = enemy.move_state
    move.timer -= dt
    if (Vec2.distance(enemy.position, move.destination) <= enemy.size
            or move.timer <= 0):
        new_destination(sim)

    step = move.destination.copy().subtract(enemy.position).normalize()
    enemy.velocity = step.scale(move.speed)
    enemy.position.add(enemy.velocity.copy().scale(dt))
    update_enemy_attack(sim, dt)


def update_enemy_attack(sim: "Simulation", dt: float):
    state = sim.enemy.attack_state
    state.timer -= dt
    if state.timer <= 0:
        enter_attack(sim, sim.rng.randrange(len(ATTACK_TABLE)))
    else:
        state.think_timer -= dt
        if state.think_timer <= 0:
            state.think_timer += state.think_interval
            attack_think(sim, state.think_instance)
            state.think_instance += 1


def enter_attack(sim: "Simulation", attack: int):
    if attack not in ATTACK_TABLE:
        raise ValueError(f"Unknown attack: {attack}")

    duration, think_interval, speed = ATTACK_TABLE[attack]
    state = sim.enemy.attack_state
    state.attack = attack
    state.think_instance = 0
    state.think_timer = 0.0
    state.timer = duration
    state.think_interval = think_interval
    sim.enemy.move_state.speed = speed
    new_destination(sim)


def attack_think(sim: "Simulation", instance: int):
    """Emit one volley of the active pattern"""
    PATTERNS[sim.enemy.attack_state.attack](sim, instance)


def _aim_at_player(sim: "Simulation") -> Vec2:
    return sim.player.position.copy().subtract(sim.enemy.position).normalize()


def _random_direction(sim: "Simulation") -> Vec2:
    return Vec2(sim.rng.random() - 0.5, sim.rng.random() - 0.5).normalize()


def _jitter(sim: "Simulation") -> float:
    return sim.rng.random() * 2 * WALL_JITTER - WALL_JITTER


def pattern_walls(sim: "Simulation", instance: int):
    level = sim.enemy.level
    spawn = sim.bullets.spawn
    if instance % 2 == 0:
        count = 10 + level * 2
        offset = _jitter(sim)
        for i in range(count):
            y = i / count * sim.height + offset
            spawn(sim, Owner.ENEMY, Vec2(0, y), Vec2(WALL_SPEED, 0), Vec2(WALL_ACCEL, 0))
        offset = _jitter(sim)
        for i in range(count):
            y = i / count * sim.height + offset
            spawn(sim, Owner.ENEMY, Vec2(sim.width - WALL_EDGE_INSET, y),
                  Vec2(-WALL_SPEED, 0), Vec2(-WALL_ACCEL, 0))
    else:
        count = 7 + level
        offset = _jitter(sim)
        for i in range(count):
            x = i / count * sim.width + offset
            spawn(sim, Owner.ENEMY, Vec2(x, 0), Vec2(0, WALL_SPEED), Vec2(0, WALL_ACCEL))
        offset = _jitter(sim)
        for i in range(count):
            x = i / count * sim.width + offset
            spawn(sim, Owner.ENEMY, Vec2(x, sim.height - WALL_EDGE_INSET),
                  Vec2(0, -WALL_SPEED), Vec2(0, -WALL_ACCEL))


def pattern_aimed_fan(sim: "Simulation", instance: int):
    level = sim.enemy.level
    origin = sim.enemy.position
    aim = _aim_at_player(sim)
    for i in range(-1 - level, 1 + level):
        velocity = aim.copy().scale(FAN_AIM_WEIGHT + level).add(Vec2(i, 0))
        velocity.normalize().scale(FAN_SPEED)
        sim.bullets.spawn(sim, Owner.ENEMY, origin.copy(), velocity, Vec2(0, 0))


def pattern_radial_burst(sim: "Simulation", instance: int):
    origin = sim.enemy.position
    for _ in range(15 + sim.enemy.level * 10):
        direction = _random_direction(sim)
        sim.bullets.spawn(sim, Owner.ENEMY, origin.copy(),
                          direction.copy().scale(BURST_SPEED),
                          direction.copy().scale(-BURST_ACCEL))


def pattern_chaos_aim(sim: "Simulation", instance: int):
    origin = sim.enemy.position
    aim = _aim_at_player(sim)
    for _ in range(12 + sim.enemy.level * 6):
        accel = _random_direction(sim).scale(sim.rng.random() * CHAOS_MAX_ACCEL)
        sim.bullets.spawn(sim, Owner.ENEMY, origin.copy(), aim.copy().scale(CHAOS_SPEED), accel)


PATTERNS: Dict[int, Callable[["Simulation", int], None]] = {
    0: pattern_walls,
    1: pattern_aimed_fan,
    2: pattern_radial_burst,
    3: pattern_chaos_aim,
}


def enemy_hit(sim: "Simulation"):
    enemy = sim.enemy
    enemy.health -= 1
    sim.player.score += SCORE_PER_HIT
    sim.stats["hits"] += 1
    if enemy.health <= 0 and sim.is_playing:
        sim.handle_round_end()
