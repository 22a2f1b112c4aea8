"""
Keyboard intent tracking
"""

from enum import Enum
from typing import Dict, Hashable, Optional, Set, Tuple


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class InputState:
    """Currently held keys per direction, independent of any windowing library.

    Several keys may map to one direction (arrows and WASD); a direction is
    held while any of its keys is.
    """

    def __init__(self):
        self._held: Dict[Direction, Set[Hashable]] = {d: set() for d in Direction}

    def press(self, direction: Direction, key: Optional[Hashable] = None):
        self._held[direction].add(direction if key is None else key)

    def release(self, direction: Direction, key: Optional[Hashable] = None):
        self._held[direction].discard(direction if key is None else key)

    def clear(self):
        for keys in self._held.values():
            keys.clear()

    def is_held(self, direction: Direction) -> bool:
        return bool(self._held[direction])

    def intent(self) -> Tuple[int, int]:
        """Raw intent in {-1, 0, 1} per axis; opposite keys cancel. y grows down."""
        dx = 0
        dy = 0
        if self.is_held(Direction.LEFT):
            dx -= 1
        if self.is_held(Direction.RIGHT):
            dx += 1
        if self.is_held(Direction.UP):
            dy -= 1
        if self.is_held(Direction.DOWN):
            dy += 1
        return dx, dy
