"""
Simulation context and frame loop
---------------------------------
- One `Simulation` owns the player, the enemy, the bullet pool, the bonus
  catalog, the held inputs and the round state; every subsystem receives it
  explicitly.
- `step(dt)` updates player, enemy, then bullets, only while in PLAY.
- `FrameLoop` turns monotonic timestamps from an external scheduler into
  `dt` and ticks the render callback every frame.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from . import constants as C
from .bonuses import BonusCatalog, StyleBonus
from .bullets import BulletPool
from .enemy import enemy_hit, init_enemy, update_enemy
from .entities import Body, Enemy, Player
from .player import Action, init_player, player_death, update_player
from .utils import Vec2


class RoundState(Enum):
    BREAK = "break"
    PLAY = "play"
    GAME_OVER = "game_over"


class Simulation:
    """Bullet hell simulation core"""

    def __init__(
        self,
        width: float = C.PLAY_AREA_WIDTH,
        height: float = C.PLAY_AREA_HEIGHT,
        player_size: float = C.PLAYER_SIZE,
        enemy_size: float = C.ENEMY_SIZE,
        player_bullet_size: float = C.PLAYER_BULLET_SIZE,
        enemy_bullet_size: float = C.ENEMY_BULLET_SIZE,
        start_lives: int = C.PLAYER_START_LIVES,
        seed: Optional[int] = None,
    ):
        assert width > player_size and height > player_size, "Play area too small for the player."

        self.base_width = width
        self.height = height
        self.player_bullet_size = player_bullet_size
        self.enemy_bullet_size = enemy_bullet_size
        self.base_enemy_size = enemy_size
        self.start_lives = start_lives

        self.rng = random.Random(seed)
        self.bonuses = BonusCatalog()
        self.bullets = BulletPool()
        self.player = Player(position=Vec2(*C.PLAYER_START), size=player_size,
                             lives=start_lives)
        self.enemy = Enemy(position=Vec2(*C.ENEMY_START), size=enemy_size)
        self.keys: Dict[Action, bool] = {action: False for action in Action}

        self.round_state = RoundState.BREAK
        self.bonus_choices: List[StyleBonus] = []

        # Cumulative event counters, read by the RL wrapper
        self.stats: Dict[str, int] = {"hits": 0, "lives_lost": 0, "rounds_cleared": 0}

    # ----------------------------
    # Geometry
    # ----------------------------

    @property
    def width(self) -> float:
        if self.bonuses.is_active("play_area_grow"):
            return self.base_width * C.PLAY_AREA_GROW_SCALE
        return self.base_width

    def in_bounds(self, body: Body) -> bool:
        x, y = body.position
        return 0 <= x <= self.width - body.size and 0 <= y <= self.height - body.size

    def _refresh_dimensions(self):
        size = self.base_enemy_size
        if self.bonuses.is_active("enemy_grow"):
            size *= C.ENEMY_GROW_SCALE
        self.enemy.size = size

    # ----------------------------
    # Frame step
    # ----------------------------

    @property
    def is_playing(self) -> bool:
        return self.round_state is RoundState.PLAY

    @property
    def is_game_over(self) -> bool:
        return self.round_state is RoundState.GAME_OVER

    def step(self, dt: float):
        """Advance the simulation by dt seconds (no-op outside PLAY)"""
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if not self.is_playing:
            return
        update_player(self, dt)
        update_enemy(self, dt)
        self.bullets.step_all(self, dt)

    def set_input(self, action: Union[Action, str], pressed: bool):
        self.keys[Action(action)] = bool(pressed)

    # ----------------------------
    # Round lifecycle
    # ----------------------------

    def start_game(self):
        """Fresh game: full lives, level 1, no bonuses"""
        self.bonuses.reset()
        self._refresh_dimensions()
        self.player.lives = self.start_lives
        self.player.score = 0
        self.enemy.level = 1
        self.bonus_choices = []
        self.round_state = RoundState.BREAK
        self.start_round()

    def start_round(self):
        if self.is_game_over:
            raise RuntimeError("Game is over; call start_game() to play again.")
        self.bonus_choices = []
        self.bullets.clear()
        init_player(self)
        init_enemy(self)
        self.round_state = RoundState.PLAY

    def handle_round_end(self):
        """Enemy defeated: reward, level up and offer two bonuses"""
        if not self.is_playing:
            return
        self.round_state = RoundState.BREAK
        self.player.lives += 1
        self.enemy.level += 1
        self.stats["rounds_cleared"] += 1

        self.bonus_choices = self.bonuses.draw_choices(self.rng)
        if not self.bonus_choices:
            self.start_round()

    def select_bonus(self, index: int):
        """Claim one of the offered bonuses and start the next round"""
        if self.round_state is not RoundState.BREAK or not self.bonus_choices:
            raise RuntimeError("No bonus choice is pending.")
        self.apply_bonus(self.bonus_choices[index].id)
        self.start_round()

    def apply_bonus(self, bonus_id: str):
        self.bonuses.activate(bonus_id)
        self._refresh_dimensions()

    def game_over(self):
        self.round_state = RoundState.GAME_OVER

    # ----------------------------
    # Collision callbacks
    # ----------------------------

    def enemy_hit(self):
        enemy_hit(self)

    def player_death(self):
        player_death(self)

    # ----------------------------
    # Query surface
    # ----------------------------

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data view of everything a renderer needs for one frame"""
        player, enemy = self.player, self.enemy
        return {
            "round_state": self.round_state.value,
            "width": self.width,
            "height": self.height,
            "lives": player.lives,
            "score": player.score,
            "level": enemy.level,
            "enemy_health": enemy.health_fraction,
            "player": {
                "x": player.position.x, "y": player.position.y,
                "vx": player.velocity.x, "vy": player.velocity.y,
                "size": player.size, "invulnerable": player.invulnerable,
            },
            "enemy": {
                "x": enemy.position.x, "y": enemy.position.y,
                "vx": enemy.velocity.x, "vy": enemy.velocity.y,
                "size": enemy.size, "attack": enemy.attack_state.attack,
            },
            "bullets": [
                {
                    "owner": b.owner.value,
                    "x": b.position.x, "y": b.position.y,
                    "vx": b.velocity.x, "vy": b.velocity.y,
                    "size": b.size, "translucent": b.translucent,
                }
                for b in self.bullets
            ],
            "bonus_choices": [{"id": b.id, "description": b.description} for b in self.bonus_choices],
            "active_bonuses": self.bonuses.active_ids(),
        }


class FrameLoop:
    """Drives a Simulation from externally supplied monotonic timestamps"""

    def __init__(self, sim: Simulation, render: Optional[Callable[[Simulation], None]] = None):
        self.sim = sim
        self.render = render
        self.prev_timestamp: Optional[float] = None

    def tick(self, timestamp: float) -> float:
        """Step the simulation to `timestamp` (seconds); returns the dt used"""
        if self.prev_timestamp is None:
            dt = 0.0
        else:
            dt = max(0.0, timestamp - self.prev_timestamp)
        self.prev_timestamp = timestamp

        self.sim.step(dt)
        if self.render is not None:
            self.render(self.sim)
        return dt
