"""
Best score persistence
"""

from __future__ import annotations

import json
import os
import warnings
from typing import Optional


def parse_best(raw: Optional[str]) -> int:
    """Parse a stored best score; anything malformed counts as 0"""
    if raw is None:
        return 0
    try:
        value = int(str(raw).strip())
    except ValueError:
        warnings.warn(f"Ignoring malformed best score {raw!r}", RuntimeWarning)
        return 0
    if value < 0:
        warnings.warn(f"Ignoring negative best score {raw!r}", RuntimeWarning)
        return 0
    return value


class MemoryScoreStore:
    """Keeps the best score in memory only (tests, training)"""

    def __init__(self, raw: Optional[str] = None):
        self.raw = raw

    def load(self) -> int:
        return parse_best(self.raw)

    def save(self, best: int):
        self.raw = str(int(best))


class BestScoreStore:
    """
    Single-key JSON store: {"bee_best": "120"}.
    The value is kept as a decimal integer string.
    """

    def __init__(self, path: str, key: str = "bee_best"):
        self.path = os.path.expanduser(path)
        self.key = key

    def _read(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            warnings.warn(f"Could not read best score from {self.path}: {e}", RuntimeWarning)
            return {}
        if not isinstance(data, dict):
            warnings.warn(f"Unexpected content in {self.path}, ignoring", RuntimeWarning)
            return {}
        return data

    def load(self) -> int:
        return parse_best(self._read().get(self.key))

    def save(self, best: int):
        """Write the new best atomically; a failed write only warns."""
        data = self._read()
        data[self.key] = str(int(best))
        directory = os.path.dirname(self.path)
        tmp_path = f"{self.path}.tmp"
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except OSError as e:
            warnings.warn(f"Could not save best score to {self.path}: {e}", RuntimeWarning)
