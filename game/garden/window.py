"""
Arcade front end for Pixel Bee Garden

Controls:
    arrows / WASD   move
    Enter / Space   play, or play again after a game over
    T               share the final score
    Esc             quit
"""

from __future__ import annotations

import argparse
import random
import time
import webbrowser
from typing import Optional, Tuple

import arcade

from .config import GARDEN_CONFIG, STORE_CONFIG
from .controls import Direction, InputState
from .garden import BeeGarden, RenderSnapshot, SessionState
from .store import BestScoreStore
from .utils import seed_everything

KEY_DIRECTIONS = {
    arcade.key.LEFT: Direction.LEFT,
    arcade.key.A: Direction.LEFT,
    arcade.key.RIGHT: Direction.RIGHT,
    arcade.key.D: Direction.RIGHT,
    arcade.key.UP: Direction.UP,
    arcade.key.W: Direction.UP,
    arcade.key.DOWN: Direction.DOWN,
    arcade.key.S: Direction.DOWN,
}

START_KEYS = (arcade.key.ENTER, arcade.key.SPACE)


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


class GardenWindow(arcade.Window):
    """Arcade window drawing a BeeGarden snapshot every frame.

    With ``drive=True`` the window owns the clock and ticks the garden from
    ``on_update``; otherwise someone else (the gym env) steps it and the
    window only draws.
    """

    def __init__(self, garden: BeeGarden, drive: bool = True, page_url: Optional[str] = None):
        super().__init__(int(garden.width), int(garden.height), "Pixel Bee Garden")
        self.garden = garden
        self.drive = drive
        self.page_url = page_url
        self.input = InputState()

        # Colors
        self.GRASS_C = (30, 68, 49)
        self.GRID_C = (23, 52, 39)
        self.SPIDER_C = (58, 42, 36)
        self.BEE_C = (249, 199, 79)
        self.STRIPE_C = (77, 40, 0)
        self.WING_C = (165, 216, 255)
        self.HUD_C = (240, 240, 240)
        self.OVERLAY_C = (0, 0, 0, 160)

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in KEY_DIRECTIONS:
            self.input.press(KEY_DIRECTIONS[symbol], symbol)
            self.garden.set_intent(*self.input.intent())
        elif symbol in START_KEYS and self.drive:
            now = time.perf_counter()
            if self.garden.state is SessionState.ENDED:
                self.garden.restart(now)
            else:
                self.garden.start(now)
        elif symbol == arcade.key.T and self.garden.state is SessionState.ENDED:
            webbrowser.open(self.garden.share_url(self.page_url))
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in KEY_DIRECTIONS:
            self.input.release(KEY_DIRECTIONS[symbol], symbol)
            self.garden.set_intent(*self.input.intent())

    def on_update(self, delta_time: float):
        # the garden derives its own dt from the timestamp
        if self.drive:
            self.garden.tick(time.perf_counter())

    # ----------------------------
    # Drawing
    # ----------------------------

    def _sy(self, y: float) -> float:
        # garden y grows downward, arcade y grows upward
        return self.garden.height - y

    def on_draw(self):
        self.clear()
        snap = self.garden.snapshot()
        self._draw_board(snap)

        for f in snap.flowers:
            color = hex_to_rgb(f.color)
            x, y = f.x, self._sy(f.y)
            arcade.draw_circle_filled(x, y, f.size / 2, color)
            # pixel petals
            arcade.draw_lrbt_rectangle_filled(x - 1, x + 1, y - 3, y + 3, color)
            arcade.draw_lrbt_rectangle_filled(x - 3, x + 3, y - 1, y + 1, color)

        for s in snap.spiders:
            x, y = s.x, self._sy(s.y)
            arcade.draw_circle_filled(x, y, s.size / 2, self.SPIDER_C)
            for i in (-1, 0, 1):
                arcade.draw_line(x - s.size / 2, y - i * 3, x - s.size, y - i * 4, self.SPIDER_C, 2)
                arcade.draw_line(x + s.size / 2, y - i * 3, x + s.size, y - i * 4, self.SPIDER_C, 2)

        self._draw_bee(snap)
        self._draw_hud(snap)

    def _draw_board(self, snap: RenderSnapshot):
        arcade.draw_lrbt_rectangle_filled(0, snap.width, 0, snap.height, self.GRASS_C)
        for x in range(0, int(snap.width), 16):
            arcade.draw_line(x, 0, x, snap.height, self.GRID_C, 1)
        for y in range(0, int(snap.height), 16):
            arcade.draw_line(0, y, snap.width, y, self.GRID_C, 1)

    def _draw_bee(self, snap: RenderSnapshot):
        b = snap.bee
        half = b.size / 2
        left = b.x - half
        top = self._sy(b.y - half)

        # body
        arcade.draw_lrbt_rectangle_filled(left, left + b.size, top - b.size * 0.6, top, self.BEE_C)
        # stripes
        for offset in (3, 8):
            arcade.draw_lrbt_rectangle_filled(
                left + 2, left + b.size - 2, top - offset - 3, top - offset, self.STRIPE_C
            )
        # wings
        for wx in (b.x - half - 3, b.x + half - 3):
            arcade.draw_lrbt_rectangle_filled(wx, wx + 6, top - 2, top + 2, self.WING_C)

    def _draw_hud(self, snap: RenderSnapshot):
        arcade.draw_text(f"Score: {snap.score}  Best: {snap.best}",
                         8, snap.height - 20, self.HUD_C, 12)

        if snap.state is SessionState.RUNNING:
            return

        arcade.draw_lrbt_rectangle_filled(0, snap.width, 0, snap.height, self.OVERLAY_C)
        cx, cy = snap.width / 2, snap.height / 2
        if snap.state is SessionState.IDLE:
            lines = ["Pixel Bee Garden",
                     "Collect flowers, avoid spiders",
                     "Press Enter to play"]
        else:
            lines = ["Game over",
                     f"Score: {snap.score}   Best: {snap.best}",
                     "Enter: play again   T: share"]
        for i, line in enumerate(lines):
            size = 20 if i == 0 else 12
            arcade.draw_text(line, cx, cy + 30 - i * 28, self.HUD_C, size,
                             anchor_x="center", anchor_y="center")


def main():
    parser = argparse.ArgumentParser(description="Play Pixel Bee Garden")
    parser.add_argument("--width", type=int, default=GARDEN_CONFIG["width"],
                        help=f"Board width (default: {GARDEN_CONFIG['width']})")
    parser.add_argument("--height", type=int, default=GARDEN_CONFIG["height"],
                        help=f"Board height (default: {GARDEN_CONFIG['height']})")
    parser.add_argument("--best-file", type=str, default=STORE_CONFIG["path"],
                        help=f"Where the best score is kept (default: {STORE_CONFIG['path']})")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--max-dt", type=float, default=GARDEN_CONFIG["max_dt"],
                        help="Clamp frame deltas to this many seconds (default: no clamp)")
    parser.add_argument("--page-url", type=str, default=None,
                        help="Link attached to shared scores")

    args = parser.parse_args()

    seed_everything(args.seed)
    config = dict(GARDEN_CONFIG, width=args.width, height=args.height, max_dt=args.max_dt)
    garden = BeeGarden(
        store=BestScoreStore(args.best_file, key=STORE_CONFIG["key"]),
        rng=random.Random(args.seed),
        **config,
    )

    window = GardenWindow(garden, page_url=args.page_url)
    window.garden.tick(time.perf_counter())
    arcade.run()


if __name__ == "__main__":
    main()
