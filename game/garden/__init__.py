"""Pixel Bee Garden - collect flowers, avoid spiders"""

from .garden import BeeGarden, RenderSnapshot, SessionState
from .garden_env import GardenEnv, run_random_episode

__all__ = ['BeeGarden', 'RenderSnapshot', 'SessionState', 'GardenEnv', 'run_random_episode']
