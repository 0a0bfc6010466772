"""
Style bonuses offered between rounds
"""

import random
from dataclasses import dataclass
from typing import Dict, List

from .utils import remove_random


@dataclass
class StyleBonus:
    id: str
    description: str
    active: bool = False


# id -> description, in offer order
BONUS_DESCRIPTIONS = {
    "enemy_bullet_shrink": ".enemy-bullet {width: 75%; height: 75%;}",
    "enemy_grow": "#enemy {width: 150%; height: 150%;}",
    "player_bullet_grow": ".player-bullet {width: 200%; height: 200%;}",
    "play_area_grow": "#play-area {width: 150%;}",
    "player_bullet_transparent": ".player-bullet {opacity: 0.5;}",
}


class BonusCatalog:
    """Fixed set of bonuses, each claimed at most once per game"""

    def __init__(self):
        self.bonuses: Dict[str, StyleBonus] = {
            bonus_id: StyleBonus(bonus_id, description)
            for bonus_id, description in BONUS_DESCRIPTIONS.items()
        }

    def reset(self):
        for bonus in self.bonuses.values():
            bonus.active = False

    def is_active(self, bonus_id: str) -> bool:
        return self.bonuses[bonus_id].active

    def activate(self, bonus_id: str):
        self.bonuses[bonus_id].active = True

    def active_ids(self) -> List[str]:
        return [b.id for b in self.bonuses.values() if b.active]

    def unselected(self) -> List[StyleBonus]:
        return [b for b in self.bonuses.values() if not b.active]

    def draw_choices(self, rng: random.Random, count: int = 2) -> List[StyleBonus]:
        """Pick `count` distinct unclaimed bonuses, or none if too few remain"""
        pool = self.unselected()
        if len(pool) < count:
            return []
        return [remove_random(pool, rng) for _ in range(count)]
