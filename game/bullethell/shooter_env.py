"""
BulletHellEnv - Gymnasium wrapper around the bullet hell simulation
--------------------------------------------------------------------
- Gymnasium API over `Simulation`, stepped with a fixed dt
- 1 RL agent that moves (with an optional focus/slow mode); firing is automatic
- A boss enemy cycling through four bullet patterns
- Vector observation: player state + enemy state + top-K nearest enemy bullets
- Discrete MultiDiscrete action space: [horizontal(3), vertical(3), focus(2)]
- Round breaks are resolved by claiming a random offered bonus

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m game.bullethell.shooter_env
"""

from __future__ import annotations

from typing import Dict, Any, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .simulation import Simulation, RoundState
from .player import Action
from .utils import clamp, seed_everything


class BulletHellEnv(gym.Env):
    """Bullet hell boss fight environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        obs_mode: str = "vector",
        width: int = 400,
        height: int = 500,
        dt: float = 1 / 30,
        max_steps: int = 3600,  # 2 min at 30 FPS
        k_bullets: int = 16,
        max_lives_obs: int = 10,
        max_level_obs: int = 10,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert obs_mode in ("vector",), "Only 'vector' is implemented in this compact version."
        self.render_mode = render_mode
        self.obs_mode = obs_mode

        # Arena
        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps

        # Observation config
        self.k_bullets = k_bullets
        self.max_lives_obs = max_lives_obs
        self.max_level_obs = max_level_obs

        self.rewards = {
            "R_HIT": 0.05,        # per bullet landed on the boss
            "R_ROUND": 5.0,       # per boss defeated
            "R_DEATH": 1.0,       # per life lost
            "R_GAME_OVER": 5.0,
            "R_TIME": 0.001,      # survival bonus per step
        }
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k.startswith("R_")})

        # Action space:
        # horizontal: 0 none, 1 left, 2 right
        # vertical: 0 none, 1 up, 2 down
        # focus: 0/1
        self.action_space = spaces.MultiDiscrete([3, 3, 2])

        # Observation space (vector)
        # Player: pos(2) lives(1) invuln(1)
        # Enemy: pos(2) health(1) level(1)
        # Each bullet: rel pos(2) vel(2)
        obs_dim = 4 + 4 + self.k_bullets * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        # Arcade rendering state
        self._window = None

        self.sim: Simulation = None  # type: ignore
        self._step_count = 0
        self._prev_stats: Dict[str, int] = {}

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        sim_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.sim = Simulation(width=self.width, height=self.height, seed=sim_seed)
        self.sim.start_game()

        self._step_count = 0
        self._prev_stats = dict(self.sim.stats)

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        horizontal, vertical, focus = int(action[0]), int(action[1]), int(action[2])
        self._apply_action(horizontal, vertical, focus)

        self.sim.step(self.dt)

        # Resolve a pending bonus choice so training never idles in a break
        if self.sim.round_state is RoundState.BREAK and self.sim.bonus_choices:
            self.sim.select_bonus(self.sim.rng.randrange(len(self.sim.bonus_choices)))

        reward = self._compute_reward()

        terminated = self.sim.is_game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def _apply_action(self, horizontal: int, vertical: int, focus: int):
        self.sim.set_input(Action.MOVE_LEFT, horizontal == 1)
        self.sim.set_input(Action.MOVE_RIGHT, horizontal == 2)
        self.sim.set_input(Action.MOVE_UP, vertical == 1)
        self.sim.set_input(Action.MOVE_DOWN, vertical == 2)
        self.sim.set_input(Action.FOCUS, focus == 1)

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        sim = self.sim
        player, enemy = sim.player, sim.enemy
        w, h = sim.width, sim.height

        obs_parts = [
            player.position.x / w * 2 - 1,
            player.position.y / h * 2 - 1,
            clamp(player.lives / self.max_lives_obs, 0, 1) * 2 - 1,
            1.0 if player.invuln_timer > 0 else -1.0,
            enemy.position.x / w * 2 - 1,
            enemy.position.y / h * 2 - 1,
            enemy.health_fraction * 2 - 1,
            clamp(enemy.level / self.max_level_obs, 0, 1) * 2 - 1,
        ]

        # Enemy bullets: top-K nearest to the player's center
        center = player.center
        bullets_sorted = sorted(
            sim.bullets.enemy_bullets,
            key=lambda b: (b.center.x - center.x) ** 2 + (b.center.y - center.y) ** 2
        )
        speed_norm = 400.0
        for i in range(self.k_bullets):
            if i < len(bullets_sorted):
                b = bullets_sorted[i]
                bc = b.center
                obs_parts += [
                    clamp((bc.x - center.x) / w, -1, 1),
                    clamp((bc.y - center.y) / h, -1, 1),
                    clamp(b.velocity.x / speed_norm, -1, 1),
                    clamp(b.velocity.y / speed_norm, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        obs = np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)
        return obs

    def _events(self) -> Dict[str, int]:
        stats = self.sim.stats
        events = {k: stats[k] - self._prev_stats.get(k, 0) for k in stats}
        self._prev_stats = dict(stats)
        return events

    def _compute_reward(self) -> float:
        r = self.rewards
        events = self._events()

        reward = 0.0
        reward += r["R_HIT"] * events["hits"]
        reward += r["R_ROUND"] * events["rounds_cleared"]
        reward -= r["R_DEATH"] * events["lives_lost"]
        reward += r["R_TIME"]

        if self.sim.is_game_over:
            reward -= r["R_GAME_OVER"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "lives": self.sim.player.lives,
            "score": self.sim.player.score,
            "level": self.sim.enemy.level,
            "enemy_health": self.sim.enemy.health_fraction,
            "num_bullets": len(self.sim.bullets),
            "hits": self.sim.stats["hits"],
            "lives_lost": self.sim.stats["lives_lost"],
            "rounds_cleared": self.sim.stats["rounds_cleared"],
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None and self.render_mode == "human":
            from .window import SimulationWindow
            self._window = SimulationWindow(self.sim)

        if self.render_mode == "human" and self._window:
            self._window.sim = self.sim
            self._window.on_draw()
            return None
        elif self.render_mode == "rgb_array":
            # TODO: offscreen rendering for rgb_array mode
            return np.zeros((int(self.sim.height), int(self.sim.width), 3), dtype=np.uint8)

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42):
    """Run a random episode for testing"""
    env = BulletHellEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... Close the window to exit early.")

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.on_draw()
            env._window.flip()
            time.sleep(env.dt)

    print(f"Random episode return: {total:.2f}  "
          f"(rounds cleared: {info['rounds_cleared']}, lives lost: {info['lives_lost']})")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
