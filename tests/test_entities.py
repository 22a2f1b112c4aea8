"""Tests for bee movement and spider motion."""

import itertools
import math

import pytest

from game.garden.entities import Bee, Spider

W, H = 480, 480
INTENTS = list(itertools.product((-1, 0, 1), repeat=2))


class TestBee:

    @pytest.mark.parametrize("dx,dy", INTENTS)
    @pytest.mark.parametrize("dt", [0.0, 1 / 60, 0.5, 3.0, 100.0])
    def test_stays_on_board(self, dx, dy, dt):
        for start in [(7.0, 7.0), (240.0, 240.0), (473.0, 10.0), (20.0, 473.0)]:
            bee = Bee(x=start[0], y=start[1])
            bee.set_intent(dx, dy)
            for _ in range(5):
                bee.update(dt, W, H)
                assert bee.size / 2 <= bee.x <= W - bee.size / 2
                assert bee.size / 2 <= bee.y <= H - bee.size / 2

    def test_no_intent_no_motion(self):
        bee = Bee(x=240.0, y=240.0)
        bee.update(1.0, W, H)
        assert (bee.x, bee.y) == (240.0, 240.0)

    @pytest.mark.parametrize("dx,dy", [i for i in INTENTS if i != (0, 0)])
    def test_speed_is_direction_independent(self, dx, dy):
        bee = Bee(x=240.0, y=240.0)
        bee.set_intent(dx, dy)
        bee.update(1 / 60, W, H)
        moved = math.hypot(bee.x - 240.0, bee.y - 240.0)
        assert moved == pytest.approx(bee.speed)

    def test_displacement_scales_with_dt(self):
        bee = Bee(x=100.0, y=100.0, speed=2.5)
        bee.set_intent(1, 0)
        bee.update(0.5, W, H)
        assert bee.x == pytest.approx(100.0 + 2.5 * 30)
        assert bee.y == 100.0

    def test_clamps_at_edge(self):
        bee = Bee(x=10.0, y=240.0)
        bee.set_intent(-1, 0)
        bee.update(1.0, W, H)
        assert bee.x == 7.0


class TestSpider:

    def test_update(self):
        s = Spider(x=0.0, y=0.0, vx=1.0, vy=-0.5)
        s.update(0.5)
        assert (s.x, s.y) == (30.0, -15.0)

    @pytest.mark.parametrize("x,y,expected", [
        (481.0, 240.0, False),
        (510.0, 240.0, False),
        (510.5, 240.0, True),
        (-30.0, 240.0, False),
        (-30.5, 240.0, True),
        (240.0, -31.0, True),
        (240.0, 511.0, True),
    ])
    def test_out_of_bounds(self, x, y, expected):
        s = Spider(x=x, y=y, vx=0.0, vy=0.0)
        assert s.out_of_bounds(W, H, 30.0) is expected
