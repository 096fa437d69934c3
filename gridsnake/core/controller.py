# gridsnake/core/controller.py
from __future__ import annotations
from enum import Enum
from typing import Optional

from gridsnake.config import AppConfig
from .clock import FixedTimestep
from .input_map import InputMapper, Intent
from .interfaces import Renderer, KeyValueStore, GameLogger, Snapshot
from .rules import Rules
from .session_log import game_scalars, format_game_line

class Phase(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"

class GameController:
    """Top-level state machine: wires keys and frame ticks to Rules and the renderer.

    Owns the only GameState (through ``rules``). Renderers and loggers only ever
    see Snapshots.
    """
    def __init__(
        self,
        cfg: AppConfig,
        renderer: Optional[Renderer] = None,
        store: Optional[KeyValueStore] = None,
        logger: Optional[GameLogger] = None,
        mapper: Optional[InputMapper] = None,
        now_ms: float = 0.0,
        verbose: bool = False,
    ):
        self.cfg = cfg
        self.renderer = renderer
        self.logger = logger
        self.mapper = mapper or InputMapper()
        self.rules = Rules(cfg, store)
        self.clock = FixedTimestep(now_ms)
        self.verbose = verbose
        self.games_finished = 0

    @property
    def state(self):
        return self.rules.state

    @property
    def phase(self) -> Phase:
        if not self.state.running:
            return Phase.GAME_OVER
        return Phase.PAUSED if self.state.paused else Phase.PLAYING

    def snapshot(self) -> Snapshot:
        return self.rules.snapshot()

    # ---------- transitions ----------
    def reset(self, now_ms: Optional[float] = None) -> None:
        """Start a new game. Without a timestamp the clock restarts from its last frame."""
        self.rules.reset()
        self.clock.reset(self.clock.last if now_ms is None else now_ms)
        self._draw(overlay=False)

    def on_key(self, key: Optional[str], now_ms: Optional[float] = None) -> Optional[Intent]:
        """Apply one raw key press. Returns the command intent, if the key was one."""
        action = self.mapper.map(key)
        if action is None:
            return None
        if action is Intent.PAUSE:
            if self.state.running:
                paused = self.rules.toggle_pause()
                self._draw(overlay=paused)
            return action
        if action is Intent.RESTART:
            self.reset(now_ms)
            return action
        if action is Intent.QUIT:
            return action
        self.rules.steer(action)
        return None

    def on_frame(self, now_ms: float) -> int:
        was_running = self.state.running
        n = self.clock.advance(now_ms, self.state, self.rules.step)
        if was_running and not self.state.running:
            self._finish_game()
        elif self.phase is Phase.PLAYING:
            self._draw(overlay=False)
        return n

    # ---------- helpers ----------
    def _finish_game(self) -> None:
        self.games_finished += 1
        snap = self.snapshot()
        self._draw(overlay=True)
        if self.logger is not None:
            self.logger.log(self.games_finished, game_scalars(snap))
            self.logger.flush()
        if self.verbose:
            print(format_game_line(self.games_finished, snap))

    def _draw(self, overlay: bool) -> None:
        if self.renderer is None:
            return
        self.renderer.render(self.snapshot(), overlay=overlay)
