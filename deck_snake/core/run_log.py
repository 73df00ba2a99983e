# deck_snake/core/run_log.py
from __future__ import annotations
import csv, os
from typing import Any, Dict
from .interfaces import Snapshot

RUN_KEYS = ["run", "outcome", "score", "high_score", "length", "ticks"]

class RunLog:
    """Append-only CSV of finished runs, one row per terminal transition."""
    def __init__(self, path: str):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._file = open(path, "a", newline="")
        self._writer = csv.DictWriter(self._file, fieldnames=RUN_KEYS, extrasaction="ignore")
        if self._file.tell() == 0:
            self._writer.writeheader()

    def record(self, run: int, snap: Snapshot) -> Dict[str, Any]:
        row = {
            "run": run,
            "outcome": snap.outcome.value if snap.outcome else "",
            "score": snap.score,
            "high_score": snap.high_score,
            "length": len(snap.snake),
            "ticks": snap.tick_count,
        }
        self._writer.writerow(row)
        return row

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
