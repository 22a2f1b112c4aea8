"""
GardenEnv - Pixel Bee Garden as a Gymnasium environment
-------------------------------------------------------
- Wraps BeeGarden with a synthetic clock advancing ``dt`` per step
- Discrete(9) action space: every {-1, 0, 1} x {-1, 0, 1} intent
- Vector observation: bee position + top-K nearest spiders + top-M nearest flowers
- Reward: +1 per flower, -5 when a spider ends the episode, small time penalty

Quick test:
    python -m game.garden.garden_env
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .garden import BeeGarden, SessionState
from .store import MemoryScoreStore
from .utils import clamp, dist2, seed_everything

# action index -> (dx, dy)
INTENTS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1)]


class GardenEnv(gym.Env):
    """Headless Pixel Bee Garden environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = 1 / 30,
        max_steps: int = 3600,  # 2 minutes at 30 FPS
        k_spiders: int = 4,
        m_flowers: int = 3,
        r_flower: float = 1.0,
        r_death: float = 5.0,
        r_time: float = 0.001,
        **garden_kwargs,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        self.render_mode = render_mode

        self.dt = dt
        self.max_steps = max_steps
        self.k_spiders = k_spiders
        self.m_flowers = m_flowers

        # Reward shaping
        self.r_flower = r_flower
        self.r_death = r_death
        self.r_time = r_time

        self._rng = random.Random()
        self.garden = BeeGarden(store=MemoryScoreStore(), rng=self._rng, **garden_kwargs)

        self.action_space = spaces.Discrete(len(INTENTS))

        # Bee: pos(2)
        # Each spider: rel pos(2) vel(2)
        # Each flower: rel pos(2)
        obs_dim = 2 + (self.k_spiders * 4) + (self.m_flowers * 2)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._clock = 0.0
        self._step_count = 0
        self._flowers_collected = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        if seed is not None:
            self._rng.seed(seed)

        self._clock = 0.0
        self._step_count = 0
        self._flowers_collected = 0
        self.garden.set_intent(0, 0)
        self.garden.reset(self._clock)

        return self._get_obs(), self._get_info()

    def step(self, action):
        dx, dy = INTENTS[int(action)]
        self.garden.set_intent(dx, dy)

        score_before = self.garden.score
        self._clock += self.dt
        self.garden.tick(self._clock)

        collected = (self.garden.score - score_before) // self.garden.flower_reward
        self._flowers_collected += collected

        terminated = self.garden.state is SessionState.ENDED
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        reward = self.r_flower * collected - self.r_time
        if terminated:
            reward -= self.r_death

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        g = self.garden
        bee = g.bee
        obs_parts = [bee.x / g.width * 2 - 1, bee.y / g.height * 2 - 1]

        spiders = sorted(g.spiders, key=lambda s: dist2(s, bee))
        for i in range(self.k_spiders):
            if i < len(spiders):
                s = spiders[i]
                obs_parts += [
                    clamp((s.x - bee.x) / g.width, -1, 1),
                    clamp((s.y - bee.y) / g.height, -1, 1),
                    clamp(s.vx / 2, -1, 1),
                    clamp(s.vy / 2, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        flowers = sorted(g.flowers, key=lambda f: dist2(f, bee))
        for i in range(self.m_flowers):
            if i < len(flowers):
                f = flowers[i]
                obs_parts += [
                    clamp((f.x - bee.x) / g.width, -1, 1),
                    clamp((f.y - bee.y) / g.height, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.garden.score,
            "best": self.garden.best,
            "flowers_collected": self._flowers_collected,
            "num_flowers": len(self.garden.flowers),
            "num_spiders": len(self.garden.spiders),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # deferred so headless use never needs a display
            from .window import GardenWindow
            self._window = GardenWindow(self.garden, drive=False)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def run_random_episode(render: bool = True, seed: Optional[int] = 42):
    """Run a random episode for testing"""
    env = GardenEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(env.dt)

    print(f"Random episode return: {total:.3f}  score: {info['score']}  steps: {info['step']}")
    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=True)
