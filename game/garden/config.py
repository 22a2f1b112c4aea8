"""
Gameplay configuration for Pixel Bee Garden
"""

# Board and entity parameters
GARDEN_CONFIG = {
    "width": 480,
    "height": 480,
    "bee_size": 14.0,
    "bee_speed": 2.5,             # units per 1/60 s tick
    "flower_size": 8.0,
    "flower_reward": 10,
    "flower_interval": (1.5, 3.0),  # seconds, [lo, hi)
    "flower_margin": 20.0,
    "spider_size": 12.0,
    "spider_interval": (3.0, 5.0),  # seconds, [lo, hi)
    "spider_margin": 30.0,          # pruned once further than this outside
    "max_dt": None,                 # None keeps frame deltas unclamped
}

FLOWER_COLORS = ("#ff6f91", "#ffc857", "#9add7f", "#50bfa0", "#f0a6ca")

# Best score persistence
STORE_CONFIG = {
    "path": "~/.pixel_bee_garden.json",
    "key": "bee_best",
}

SHARE_URL = "https://twitter.com/intent/tweet"
