"""
Bullet pool: spawning, stepping and pruning projectiles
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List

from .constants import ENEMY_BULLET_SHRINK_SCALE, PLAYER_BULLET_GROW_SCALE
from .entities import Bullet, Owner, Player
from .utils import Vec2, circles_overlap, point_in_circle

if TYPE_CHECKING:
    from .simulation import Simulation


class BulletPool:
    """Owns every live bullet, kept in one list per side"""

    def __init__(self):
        self.player_bullets: List[Bullet] = []
        self.enemy_bullets: List[Bullet] = []

    def __len__(self) -> int:
        return len(self.player_bullets) + len(self.enemy_bullets)

    def __iter__(self) -> Iterator[Bullet]:
        yield from self.player_bullets
        yield from self.enemy_bullets

    def collection(self, owner: Owner) -> List[Bullet]:
        return self.player_bullets if owner is Owner.PLAYER else self.enemy_bullets

    def spawn(self, sim: "Simulation", owner: Owner, position: Vec2,
              velocity: Vec2, acceleration: Vec2) -> Bullet:
        """Create a bullet; active size bonuses are baked in here"""
        translucent = False
        if owner is Owner.PLAYER:
            size = sim.player_bullet_size
            if sim.bonuses.is_active("player_bullet_grow"):
                size *= PLAYER_BULLET_GROW_SCALE
            translucent = sim.bonuses.is_active("player_bullet_transparent")
        else:
            size = sim.enemy_bullet_size
            if sim.bonuses.is_active("enemy_bullet_shrink"):
                size *= ENEMY_BULLET_SHRINK_SCALE

        bullet = Bullet(position=position, velocity=velocity, acceleration=acceleration,
                        size=size, owner=owner, translucent=translucent)
        self.collection(owner).append(bullet)
        return bullet

    def destroy(self, bullet: Bullet):
        bullets = self.collection(bullet.owner)
        for i, b in enumerate(bullets):
            if b is bullet:
                self._remove_at(bullets, i)
                break

    @staticmethod
    def _remove_at(bullets: List[Bullet], i: int):
        bullets[i].alive = False
        del bullets[i]

    def clear(self):
        for bullet in self:
            bullet.alive = False
        self.player_bullets.clear()
        self.enemy_bullets.clear()

    def step_all(self, sim: "Simulation", dt: float):
        """Integrate, prune out-of-bounds bullets and resolve hits"""
        self._step_side(sim, self.player_bullets, dt)
        self._step_side(sim, self.enemy_bullets, dt)

    def _step_side(self, sim: "Simulation", bullets: List[Bullet], dt: float):
        i = 0
        while i < len(bullets):
            bullet = bullets[i]
            bullet.update_kinematics(dt)

            if not sim.in_bounds(bullet):
                self._remove_at(bullets, i)
                continue

            if bullet.owner is Owner.PLAYER:
                if circles_overlap(sim.enemy.center, sim.enemy.radius,
                                   bullet.center, bullet.radius):
                    self._remove_at(bullets, i)
                    sim.enemy_hit()
                    continue
            elif player_hit(sim.player, bullet):
                self._remove_at(bullets, i)
                sim.player_death()
                continue

            i += 1


def player_hit(player: Player, bullet: Bullet) -> bool:
    """Enemy bullet center tested as a point; the radius is the bullet's own"""
    if player.invuln_timer > 0:
        return False
    return point_in_circle(bullet.center, player.center, bullet.radius)
