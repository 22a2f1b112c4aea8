"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def normalize(x: float, y: float, eps: float = 1e-8) -> Tuple[float, float]:
    """Normalize a vector to unit length"""
    l = math.hypot(x, y)
    if l < eps:
        return 0.0, 0.0
    return x / l, y / l


def circle_collide(a, b) -> bool:
    """Check if two sized entities overlap, using half their sizes as radii.

    Touching exactly at the boundary is not a collision.
    """
    return math.hypot(a.x - b.x, a.y - b.y) < (a.size / 2 + b.size / 2)


def dist2(a, b) -> float:
    """Squared distance between two entity centres"""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
