from __future__ import annotations
import csv, os
from typing import Dict, Any

from .interfaces import Snapshot

FIELDNAMES = ["game", "score", "best", "steps", "step_ms", "reason"]

class CSVLogger:
    """Append-only CSV log, one row per finished game."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames or FIELDNAMES
        self._file = open(path, "a", newline="")
        self._writer = csv.DictWriter(
            self._file,
            fieldnames=self._fieldnames,
            extrasaction="ignore",
        )
        if self._file.tell() == 0:
            self._writer.writeheader()

    def log(self, game: int, scalars: Dict[str, Any]) -> None:
        self._writer.writerow({"game": game, **scalars})

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

def game_scalars(snap: Snapshot) -> Dict[str, Any]:
    return {
        "score": snap.score,
        "best": snap.best,
        "steps": snap.steps,
        "step_ms": snap.step_ms,
        "reason": snap.reason or "",
    }

def format_game_line(game: int, snap: Snapshot) -> str:
    return (f"[game {game}] score={snap.score} best={snap.best} "
            f"steps={snap.steps} reason={snap.reason}")
