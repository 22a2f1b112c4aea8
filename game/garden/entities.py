"""
Garden entity dataclasses
"""

from dataclasses import dataclass

from .utils import clamp, normalize


@dataclass
class Bee:
    """Player controlled bee"""
    x: float
    y: float
    size: float = 14.0
    speed: float = 2.5  # units per 1/60 s tick
    move_x: int = 0
    move_y: int = 0

    def set_intent(self, dx: int, dy: int):
        self.move_x = dx
        self.move_y = dy

    def update(self, dt: float, width: float, height: float):
        # normalize diagonal
        dx, dy = normalize(self.move_x, self.move_y)
        self.x += dx * self.speed * (dt * 60)
        self.y += dy * self.speed * (dt * 60)

        # Keep in bounds
        half = self.size / 2
        self.x = clamp(self.x, half, width - half)
        self.y = clamp(self.y, half, height - half)


@dataclass
class Flower:
    """Collectible pickup"""
    x: float
    y: float
    color: str
    size: float = 8.0
    age: float = 0.0  # seconds since spawn, never read by the simulation


@dataclass
class Spider:
    """Hazard drifting across the board"""
    x: float
    y: float
    vx: float
    vy: float
    size: float = 12.0

    def update(self, dt: float):
        self.x += self.vx * (dt * 60)
        self.y += self.vy * (dt * 60)

    def out_of_bounds(self, width: float, height: float, margin: float) -> bool:
        return (self.x < -margin or self.x > width + margin
                or self.y < -margin or self.y > height + margin)
