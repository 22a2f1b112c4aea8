"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from game.garden.garden import BeeGarden  # noqa: E402
from game.garden.store import MemoryScoreStore  # noqa: E402


class CountingStore(MemoryScoreStore):
    """Memory store that remembers every save"""

    def __init__(self, raw=None):
        super().__init__(raw)
        self.saves = []

    def save(self, best):
        self.saves.append(best)
        super().save(best)


@pytest.fixture
def store():
    return CountingStore()


@pytest.fixture
def garden(store):
    """A 480x480 garden with a seeded spawner"""
    return BeeGarden(width=480, height=480, store=store, rng=random.Random(1234))


@pytest.fixture
def quiet_garden(garden):
    """A running garden whose spawner will not fire for a long while"""
    garden.start(0.0)
    garden.spawner.flower_timer = 1000.0
    garden.spawner.spider_timer = 1000.0
    return garden
