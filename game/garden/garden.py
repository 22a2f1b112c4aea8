"""
BeeGarden - the simulation core of Pixel Bee Garden
----------------------------------------------------
- Bee steered by a raw {-1, 0, 1} intent per axis
- Flowers spawn every 1.5-3s and score 10 when collected
- Spiders spawn past a random edge every 3-5s and end the session on contact
- Best score kept in a pluggable store

The host drives everything through ``tick(now)``, once per frame, with a
monotonic timestamp in seconds. Ticking is always allowed; the world only
advances while a session is running.
"""

from __future__ import annotations

import random
from copy import copy
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
from urllib.parse import urlencode

from .config import FLOWER_COLORS, SHARE_URL
from .entities import Bee, Flower, Spider
from .spawner import Spawner
from .store import MemoryScoreStore
from .utils import circle_collide


class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass(frozen=True)
class RenderSnapshot:
    """Read-only view of one frame for renderers and score displays"""
    width: float
    height: float
    state: SessionState
    score: int
    best: int
    bee: Bee
    flowers: Tuple[Flower, ...]
    spiders: Tuple[Spider, ...]


class BeeGarden:
    """Game state aggregate: one bee, two pools, a spawner and the session"""

    def __init__(
        self,
        width: float = 480,
        height: float = 480,
        bee_size: float = 14.0,
        bee_speed: float = 2.5,
        flower_size: float = 8.0,
        flower_reward: int = 10,
        flower_interval: Tuple[float, float] = (1.5, 3.0),
        flower_margin: float = 20.0,
        spider_size: float = 12.0,
        spider_interval: Tuple[float, float] = (3.0, 5.0),
        spider_margin: float = 30.0,
        max_dt: Optional[float] = None,
        store=None,
        rng: Optional[random.Random] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board must have a positive size, got {width}x{height}")
        if width < bee_size or height < bee_size:
            raise ValueError("Board is smaller than the bee")
        if width <= 2 * flower_margin or height <= 2 * flower_margin:
            raise ValueError("flower_margin leaves no room to spawn flowers")

        # Board
        self.width = width
        self.height = height

        # Rules
        self.flower_reward = flower_reward
        self.spider_margin = spider_margin
        self.max_dt = max_dt

        self.spawner = Spawner(
            width, height,
            flower_interval=flower_interval,
            spider_interval=spider_interval,
            flower_size=flower_size,
            flower_margin=flower_margin,
            spider_size=spider_size,
            colors=FLOWER_COLORS,
            rng=rng,
        )

        # World state
        self.bee = Bee(x=width / 2, y=height / 2, size=bee_size, speed=bee_speed)
        self.flowers: List[Flower] = []
        self.spiders: List[Spider] = []

        # Session state
        self.store = store if store is not None else MemoryScoreStore()
        self.state = SessionState.IDLE
        self._score = 0
        self._best = self.store.load()
        self.last_time = 0.0

    # ----------------------------
    # Read values
    # ----------------------------

    @property
    def score(self) -> int:
        return self._score

    @property
    def best(self) -> int:
        return self._best

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    # ----------------------------
    # Commands
    # ----------------------------

    def start(self, now: float) -> bool:
        """Begin a new session from IDLE or ENDED; no-op while running"""
        if self.state is SessionState.RUNNING:
            return False
        self.reset(now)
        return True

    def restart(self, now: float) -> bool:
        """Begin a new session after a game over; no-op otherwise"""
        if self.state is not SessionState.ENDED:
            return False
        self.reset(now)
        return True

    def set_intent(self, dx: int, dy: int):
        self.bee.set_intent(dx, dy)

    def share_text(self) -> str:
        return f"J'ai pollinisé {self._score} fleurs dans Pixel Bee Garden 🐝🌼 !"

    def share_url(self, page_url: Optional[str] = None) -> str:
        params = {"text": self.share_text()}
        if page_url:
            params["url"] = page_url
        query = urlencode(params)
        return f"{SHARE_URL}?{query}"

    def reset(self, now: float):
        """Unconditionally begin a new session"""
        self.state = SessionState.RUNNING
        self._score = 0
        self.flowers.clear()
        self.spiders.clear()
        self.bee.x = self.width / 2
        self.bee.y = self.height / 2
        self.spawner.reset()
        self.last_time = now

    # ----------------------------
    # Frame step
    # ----------------------------

    def tick(self, now: float) -> RenderSnapshot:
        dt = now - self.last_time
        self.last_time = now
        if self.max_dt is not None:
            dt = min(dt, self.max_dt)

        if self.state is SessionState.RUNNING:
            self.step(dt)

        return self.snapshot()

    def step(self, dt: float):
        """Advance a running session by dt seconds"""
        self.spawner.step(dt, self.flowers, self.spiders)
        self.bee.update(dt, self.width, self.height)
        self._update_spiders(dt)
        for f in self.flowers:
            f.age += dt
        self._collect_flowers()
        self._check_spiders()

    def _update_spiders(self, dt: float):
        # reverse so removal leaves unvisited spiders in place
        for i in range(len(self.spiders) - 1, -1, -1):
            s = self.spiders[i]
            s.update(dt)
            if s.out_of_bounds(self.width, self.height, self.spider_margin):
                del self.spiders[i]

    def _collect_flowers(self):
        remaining = []
        for f in self.flowers:
            if circle_collide(self.bee, f):
                self._score += self.flower_reward
            else:
                remaining.append(f)
        self.flowers[:] = remaining

    def _check_spiders(self):
        for s in self.spiders:
            if circle_collide(self.bee, s):
                self._end()
                break

    def _end(self):
        if self.state is not SessionState.RUNNING:
            return
        self.state = SessionState.ENDED
        if self._score > self._best:
            self._best = self._score
            self.store.save(self._best)

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot(
            width=self.width,
            height=self.height,
            state=self.state,
            score=self._score,
            best=self._best,
            bee=copy(self.bee),
            flowers=tuple(copy(f) for f in self.flowers),
            spiders=tuple(copy(s) for s in self.spiders),
        )
