from __future__ import annotations
from collections import deque
from typing import Deque, Dict

class ScoreWindow:
    """Final scores of the last `window` games, plus a lifetime game count."""
    def __init__(self, window: int = 100):
        self.window = window
        self.games = 0
        self.scores: Deque[int] = deque(maxlen=window)

    def add(self, score: int) -> None:
        self.scores.append(int(score))
        self.games += 1

    def summary(self) -> Dict[str, float]:
        if not self.scores:
            return {"games": 0, "mean": 0.0, "min": 0, "max": 0}
        s = list(self.scores)
        return {"games": self.games, "mean": sum(s) / len(s), "min": min(s), "max": max(s)}
