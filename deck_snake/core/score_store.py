# deck_snake/core/score_store.py
from __future__ import annotations
import json, logging, os
from typing import Any, Dict

logger = logging.getLogger(__name__)

class JsonScoreStore:
    """Keeps the high score as one named integer inside a small JSON file."""
    def __init__(self, path: str, key: str = "highestScore"):
        self.path = path
        self.key = key

    def get(self) -> int:
        bundle = self._read()
        val = bundle.get(self.key, 0)
        if isinstance(val, bool) or not isinstance(val, int) or val < 0:
            logger.warning("ignoring bad %s=%r in %s", self.key, val, self.path)
            return 0
        return val

    def set(self, value: int) -> None:
        bundle = self._read()
        bundle[self.key] = int(value)
        parent = os.path.dirname(self.path)
        try:
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(bundle, f)
        except OSError as e:
            logger.warning("could not write %s: %s", self.path, e)

    def _read(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                bundle = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("could not read %s: %s", self.path, e)
            return {}
        return bundle if isinstance(bundle, dict) else {}


class MemoryScoreStore:
    def __init__(self, value: int = 0):
        self.value = value
        self.writes = 0

    def get(self) -> int:
        return self.value

    def set(self, value: int) -> None:
        self.value = int(value)
        self.writes += 1
