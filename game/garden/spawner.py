"""
Countdown driven spawner for flowers and spiders
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from .config import FLOWER_COLORS
from .entities import Flower, Spider

SIDES = ("top", "bottom", "left", "right")


class Spawner:
    """Injects flowers and spiders into their pools at randomized intervals.

    Each kind has its own countdown. A countdown fires at most once per
    ``step`` no matter how large ``dt`` is, and is then redrawn from the
    kind's interval range.
    """

    def __init__(
        self,
        width: float,
        height: float,
        flower_interval: Tuple[float, float] = (1.5, 3.0),
        spider_interval: Tuple[float, float] = (3.0, 5.0),
        flower_size: float = 8.0,
        flower_margin: float = 20.0,
        spider_size: float = 12.0,
        colors: Sequence[str] = FLOWER_COLORS,
        rng: Optional[random.Random] = None,
    ):
        for name, (lo, hi) in (("flower_interval", flower_interval),
                               ("spider_interval", spider_interval)):
            if lo < 0 or hi < lo:
                raise ValueError(f"{name} must satisfy 0 <= lo <= hi, got {(lo, hi)}")
        if not colors:
            raise ValueError("colors must not be empty")

        self.width = width
        self.height = height
        self.flower_interval = flower_interval
        self.spider_interval = spider_interval
        self.flower_size = flower_size
        self.flower_margin = flower_margin
        self.spider_size = spider_size
        self.colors = tuple(colors)
        self.rng = rng if rng is not None else random.Random()

        self.flower_timer = 0.0
        self.spider_timer = 0.0

    def reset(self):
        # zero forces a spawn check on the first running frame
        self.flower_timer = 0.0
        self.spider_timer = 0.0

    def step(self, dt: float, flowers: List[Flower], spiders: List[Spider]):
        self.flower_timer -= dt
        if self.flower_timer <= 0:
            flowers.append(self.spawn_flower())
            self.flower_timer = self._draw(self.flower_interval)

        self.spider_timer -= dt
        if self.spider_timer <= 0:
            spiders.append(self.spawn_spider())
            self.spider_timer = self._draw(self.spider_interval)

    def _draw(self, interval: Tuple[float, float]) -> float:
        return self.rng.uniform(*interval)

    def spawn_flower(self) -> Flower:
        # random location not too close to edges
        m = self.flower_margin
        x = self.rng.uniform(m, self.width - m)
        y = self.rng.uniform(m, self.height - m)
        color = self.rng.choice(self.colors)
        return Flower(x=x, y=y, color=color, size=self.flower_size)

    def spawn_spider(self) -> Spider:
        # one size beyond a random edge, drifting inward with lateral jitter
        size = self.spider_size
        side = self.rng.choice(SIDES)
        jitter = self.rng.uniform(-0.75, 0.75)
        inward = self.rng.uniform(1.0, 2.0)

        if side == "top":
            x, y = self.rng.uniform(0, self.width), -size
            vx, vy = jitter, inward
        elif side == "bottom":
            x, y = self.rng.uniform(0, self.width), self.height + size
            vx, vy = jitter, -inward
        elif side == "left":
            x, y = -size, self.rng.uniform(0, self.height)
            vx, vy = inward, jitter
        else:
            x, y = self.width + size, self.rng.uniform(0, self.height)
            vx, vy = -inward, jitter

        return Spider(x=x, y=y, vx=vx, vy=vy, size=size)
