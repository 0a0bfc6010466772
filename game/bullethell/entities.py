"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from enum import Enum

from .utils import Vec2


class Owner(Enum):
    """Side that fired a bullet"""
    PLAYER = "player"
    ENEMY = "enemy"


@dataclass
class Body:
    """Square entity with top-left position and kinematic state"""
    position: Vec2
    velocity: Vec2 = field(default_factory=Vec2)
    acceleration: Vec2 = field(default_factory=Vec2)
    size: float = 0.0

    @property
    def center(self) -> Vec2:
        return Vec2(self.position.x + self.size / 2, self.position.y + self.size / 2)

    @property
    def radius(self) -> float:
        return self.size / 2

    def update_kinematics(self, dt: float):
        # semi-implicit Euler: position moves with the old velocity
        self.position.add(self.velocity.copy().scale(dt))
        self.velocity.add(self.acceleration.copy().scale(dt))


@dataclass
class Bullet(Body):
    """Bullet projectile entity"""
    owner: Owner = Owner.ENEMY
    translucent: bool = False  # render only
    alive: bool = True


@dataclass
class Player(Body):
    """Player avatar and its bookkeeping"""
    lives: int = 0
    score: int = 0
    invuln_timer: float = 0.0
    shoot_timer: float = 0.0
    invulnerable: bool = False  # visual flag, cleared when the timer runs out


@dataclass
class EnemyAttackState:
    attack: int = 0
    timer: float = 0.0
    think_timer: float = 0.0
    think_interval: float = 1.0
    think_instance: int = 0


@dataclass
class EnemyMoveState:
    destination: Vec2 = field(default_factory=Vec2)
    speed: float = 100.0
    timer: float = 0.0


@dataclass
class Enemy(Body):
    """Boss enemy"""
    level: int = 1
    health: int = 0
    max_health: int = 1
    attack_state: EnemyAttackState = field(default_factory=EnemyAttackState)
    move_state: EnemyMoveState = field(default_factory=EnemyMoveState)

    @property
    def health_fraction(self) -> float:
        return max(0.0, self.health / self.max_health) if self.max_health > 0 else 0.0
