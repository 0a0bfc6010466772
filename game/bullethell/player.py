"""
Player controller: movement, firing cadence, invulnerability and lives
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .constants import (
    PLAYER_INVULN_TIME,
    PLAYER_SHOOT_COUNT,
    PLAYER_SHOOT_INTERVAL,
    PLAYER_SHOOT_SPEED,
    PLAYER_SPEED_FOCUS,
    PLAYER_SPEED_NORMAL,
    PLAYER_START,
)
from .entities import Owner
from .utils import Vec2, clamp

if TYPE_CHECKING:
    from .simulation import Simulation


class Action(str, Enum):
    MOVE_UP = "moveUp"
    MOVE_LEFT = "moveLeft"
    MOVE_DOWN = "moveDown"
    MOVE_RIGHT = "moveRight"
    FOCUS = "focus"


def init_player(sim: "Simulation"):
    """Put the player back at the start for a new round"""
    player = sim.player
    player.position = Vec2(*PLAYER_START)
    player.velocity = Vec2()
    player.invuln_timer = 0.0
    player.invulnerable = False
    player.shoot_timer = 0.0


def update_player(sim: "Simulation", dt: float):
    player = sim.player
    player_move(sim, dt)

    if player.invuln_timer > 0:
        player.invuln_timer -= dt
        if player.invuln_timer <= 0:
            player.invulnerable = False

    player.shoot_timer -= dt
    if player.shoot_timer <= 0:
        player_shoot(sim)
        player.shoot_timer += PLAYER_SHOOT_INTERVAL


def input_direction(sim: "Simulation") -> Vec2:
    """Unit direction from the held movement keys (zero when idle)"""
    keys = sim.keys
    direction = Vec2(0, 0)
    if keys[Action.MOVE_LEFT]:
        direction.x -= 1
    if keys[Action.MOVE_RIGHT]:
        direction.x += 1
    if keys[Action.MOVE_UP]:
        direction.y -= 1
    if keys[Action.MOVE_DOWN]:
        direction.y += 1
    return direction.normalize()


def player_move(sim: "Simulation", dt: float):
    player = sim.player
    speed = PLAYER_SPEED_FOCUS if sim.keys[Action.FOCUS] else PLAYER_SPEED_NORMAL
    player.velocity = input_direction(sim).scale(speed)
    player.position.add(player.velocity.copy().scale(dt))

    # keep the whole sprite inside the play area
    player.position.x = clamp(player.position.x, 0, sim.width - player.size)
    player.position.y = clamp(player.position.y, 0, sim.height - player.size)


def spread_velocity(i: float) -> Vec2:
    return Vec2(i * i * i, -10 * i * i - 1).normalize().scale(PLAYER_SHOOT_SPEED)


def player_shoot(sim: "Simulation"):
    """Fire a symmetric fan of bullets from the player's position"""
    half = (PLAYER_SHOOT_COUNT - 1) / 2
    for k in range(PLAYER_SHOOT_COUNT):
        i = k - half
        sim.bullets.spawn(sim, Owner.PLAYER, sim.player.position.copy(),
                          spread_velocity(i), Vec2(0, 0))


def player_death(sim: "Simulation"):
    """Lose a life and respawn, or end the game when none are left"""
    player = sim.player
    if player.lives >= 1:
        player.position = Vec2(*PLAYER_START)
        player.invuln_timer = PLAYER_INVULN_TIME
        player.invulnerable = True
        player.lives -= 1
        sim.stats["lives_lost"] += 1
    else:
        sim.game_over()
