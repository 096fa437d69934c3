# gridsnake/core/rules.py  (pure rules, no pygame)
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import random

from gridsnake.config import AppConfig
from .interfaces import Pos, Snapshot, KeyValueStore

LEFT, RIGHT, UP, DOWN = (-1, 0), (1, 0), (0, -1), (0, 1)
DIRS = (LEFT, RIGHT, UP, DOWN)

def is_opposite(a: Pos, b: Pos) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def format_speed(step_ms: int, base_ms: int = 140) -> str:
    return f"{base_ms / step_ms:.1f}x"

# ---------- State ----------
@dataclass
class Snake:
    cells: List[Pos]          # head at index 0
    heading: Pos
    pending: Pos              # committed on the next step
    max_cells: int

    @property
    def head(self) -> Pos:
        return self.cells[0]

@dataclass
class GameState:
    snake: Snake
    apple: Pos
    score: int = 0
    best: int = 0
    step_ms: int = 140
    running: bool = True
    paused: bool = False
    steps: int = 0
    reason: Optional[str] = None

class Rules:
    """Owns the game state and advances it one step at a time.

    Collisions are reported through ``state.running``/``state.reason``;
    nothing here raises for game outcomes.
    """

    def __init__(self, cfg: AppConfig, store: Optional[KeyValueStore] = None):
        self.cfg = cfg
        self.store = store
        self.rng = random.Random(cfg.seed)
        best = store.get(cfg.best_key) if store is not None else None
        self.state = self._new_state(best=max(0, int(best or 0)))

    def _new_state(self, best: int) -> GameState:
        cx, cy = self.cfg.tiles_x // 2, self.cfg.tiles_y // 2
        snake = Snake(cells=[(cx, cy)], heading=RIGHT, pending=RIGHT,
                      max_cells=self.cfg.start_len)
        state = GameState(snake=snake, apple=(cx, cy), best=best,
                          step_ms=self.cfg.step_ms)
        self.state = state
        self.place_apple()
        return state

    def reset(self) -> Snapshot:
        self._new_state(best=self.state.best)
        return self.snapshot()

    # ---------- apple ----------
    def _free_cells(self) -> List[Pos]:
        occ = set(self.state.snake.cells)
        return [(x, y) for y in range(self.cfg.tiles_y) for x in range(self.cfg.tiles_x)
                if (x, y) not in occ]

    def place_apple(self) -> bool:
        """Move the apple to a random free tile. Returns False if the board is full."""
        s = self.state
        occ = set(s.snake.cells)
        for _ in range(self.cfg.max_place_attempts):
            pos = (self.rng.randrange(self.cfg.tiles_x), self.rng.randrange(self.cfg.tiles_y))
            if pos not in occ:
                s.apple = pos
                return True
        free = self._free_cells()
        if not free:
            return False
        s.apple = self.rng.choice(free)
        return True

    # ---------- input ----------
    def steer(self, direction: Pos) -> bool:
        """Buffer a heading for the next step; reversals of the current heading are dropped."""
        s = self.state
        if not s.running or direction not in DIRS:
            return False
        if is_opposite(direction, s.snake.heading):
            return False
        s.snake.pending = direction
        return True

    def toggle_pause(self) -> bool:
        if self.state.running:
            self.state.paused = not self.state.paused
        return self.state.paused

    # ---------- step ----------
    def step(self) -> Snapshot:
        s = self.state
        if not s.running or s.paused:
            return self.snapshot()
        snake = s.snake

        if not is_opposite(snake.pending, snake.heading):
            snake.heading = snake.pending

        hx, hy = snake.head
        dx, dy = snake.heading
        new_head = (hx + dx, hy + dy)
        s.steps += 1

        if not (0 <= new_head[0] < self.cfg.tiles_x and 0 <= new_head[1] < self.cfg.tiles_y):
            self._game_over("wall")
            return self.snapshot()

        snake.cells.insert(0, new_head)
        if len(snake.cells) > snake.max_cells:
            snake.cells.pop()

        if new_head == s.apple:
            self._eat_apple()

        if new_head in snake.cells[1:]:
            self._game_over("self")
        return self.snapshot()

    def _eat_apple(self) -> None:
        s = self.state
        s.score += 1
        s.snake.max_cells += 1
        if s.score % self.cfg.speedup_every == 0:
            s.step_ms = max(self.cfg.min_step_ms, s.step_ms - self.cfg.step_decrement)
        self.place_apple()

    def _game_over(self, reason: str) -> None:
        s = self.state
        s.running, s.reason = False, reason
        if s.score > s.best:
            s.best = s.score
            if self.store is not None:
                self.store.set(self.cfg.best_key, s.best)

    def snapshot(self) -> Snapshot:
        s = self.state
        return Snapshot(
            snake=tuple(s.snake.cells),
            apple=s.apple,
            heading=s.snake.heading,
            pending=s.snake.pending,
            max_cells=s.snake.max_cells,
            score=s.score,
            best=s.best,
            step_ms=s.step_ms,
            steps=s.steps,
            running=s.running,
            paused=s.paused,
            reason=s.reason,
            tiles_x=self.cfg.tiles_x,
            tiles_y=self.cfg.tiles_y,
        )
