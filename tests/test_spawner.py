"""Tests for the flower/spider spawner."""

import random

import pytest

from game.garden.config import FLOWER_COLORS
from game.garden.spawner import Spawner

W, H = 480, 480


class FixedRng:
    """Deterministic stand-in: always picks ``side`` and the middle of ranges"""

    def __init__(self, side="top", frac=0.5):
        self.side = side
        self.frac = frac

    def uniform(self, a, b):
        return a + (b - a) * self.frac

    def choice(self, seq):
        return self.side if self.side in seq else seq[0]


@pytest.fixture
def spawner():
    return Spawner(W, H, rng=random.Random(7))


class TestCountdowns:

    def test_first_step_spawns_both(self, spawner):
        flowers, spiders = [], []
        spawner.step(0.0, flowers, spiders)
        assert len(flowers) == 1
        assert len(spiders) == 1
        assert 1.5 <= spawner.flower_timer < 3.0
        assert 3.0 <= spawner.spider_timer < 5.0

    def test_at_most_one_spawn_per_step(self, spawner):
        flowers, spiders = [], []
        spawner.step(100.0, flowers, spiders)
        assert len(flowers) == 1
        assert len(spiders) == 1

    def test_independent_countdowns(self, spawner):
        flowers, spiders = [], []
        spawner.flower_timer = 0.5
        spawner.spider_timer = 2.0
        spawner.step(1.0, flowers, spiders)
        assert len(flowers) == 1
        assert spiders == []
        assert spawner.spider_timer == pytest.approx(1.0)

    def test_countdown_hitting_zero_fires(self, spawner):
        flowers, spiders = [], []
        spawner.flower_timer = 1.0
        spawner.spider_timer = 10.0
        spawner.step(1.0, flowers, spiders)
        assert len(flowers) == 1

    def test_reset(self, spawner):
        spawner.flower_timer = 2.0
        spawner.spider_timer = 4.0
        spawner.reset()
        assert spawner.flower_timer == 0.0
        assert spawner.spider_timer == 0.0

    @pytest.mark.parametrize("kwargs", [
        {"flower_interval": (3.0, 1.5)},
        {"spider_interval": (-1.0, 2.0)},
        {"colors": ()},
    ])
    def test_invalid_config(self, kwargs):
        with pytest.raises(ValueError):
            Spawner(W, H, **kwargs)


class TestFlowers:

    def test_position_and_color(self, spawner):
        for _ in range(500):
            f = spawner.spawn_flower()
            assert 20 <= f.x <= W - 20
            assert 20 <= f.y <= H - 20
            assert f.color in FLOWER_COLORS
            assert f.size == 8.0
            assert f.age == 0.0

    def test_palette_is_used(self, spawner):
        colors = {spawner.spawn_flower().color for _ in range(500)}
        assert colors == set(FLOWER_COLORS)


class TestSpiders:

    @pytest.mark.parametrize("side,pos,vel", [
        ("top", (240.0, -12.0), (0.0, 1.5)),
        ("bottom", (240.0, 492.0), (0.0, -1.5)),
        ("left", (-12.0, 240.0), (1.5, 0.0)),
        ("right", (492.0, 240.0), (-1.5, 0.0)),
    ])
    def test_edges(self, side, pos, vel):
        s = Spawner(W, H, rng=FixedRng(side)).spawn_spider()
        assert (s.x, s.y) == pos
        assert (s.vx, s.vy) == vel
        assert s.size == 12.0

    def test_ranges(self, spawner):
        sides = set()
        for _ in range(1000):
            s = spawner.spawn_spider()
            if s.y == -12.0:
                sides.add("top")
                assert 0 <= s.x <= W
                assert 1.0 <= s.vy <= 2.0
                assert -0.75 <= s.vx <= 0.75
            elif s.y == H + 12.0:
                sides.add("bottom")
                assert 0 <= s.x <= W
                assert -2.0 <= s.vy <= -1.0
                assert -0.75 <= s.vx <= 0.75
            elif s.x == -12.0:
                sides.add("left")
                assert 0 <= s.y <= H
                assert 1.0 <= s.vx <= 2.0
                assert -0.75 <= s.vy <= 0.75
            else:
                assert s.x == W + 12.0
                sides.add("right")
                assert 0 <= s.y <= H
                assert -2.0 <= s.vx <= -1.0
                assert -0.75 <= s.vy <= 0.75
        assert sides == {"top", "bottom", "left", "right"}
