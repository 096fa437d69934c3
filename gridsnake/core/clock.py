# gridsnake/core/clock.py
from __future__ import annotations
from typing import Callable

from .rules import GameState

class FixedTimestep:
    """Turns frame timestamps into a whole number of simulation steps.

    Elapsed time only accumulates while the game is running and unpaused, so a
    long pause does not release a burst of steps on resume.
    """
    def __init__(self, now_ms: float = 0.0):
        self.last = float(now_ms)
        self.acc = 0.0

    def reset(self, now_ms: float) -> None:
        self.last = float(now_ms)
        self.acc = 0.0

    def advance(self, now_ms: float, state: GameState, step: Callable[[], object]) -> int:
        dt = now_ms - self.last
        self.last = float(now_ms)
        if not state.running or state.paused:
            return 0
        self.acc += dt
        n = 0
        while self.acc >= state.step_ms and state.running and not state.paused:
            period = state.step_ms
            step()
            self.acc -= period
            n += 1
        return n
