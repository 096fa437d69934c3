# gridsnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Dict, Any, Optional, Protocol

Pos = Tuple[int, int]

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Pos, ...]   # head first
    apple: Pos
    heading: Pos
    pending: Pos
    max_cells: int
    score: int
    best: int
    step_ms: int
    steps: int
    running: bool
    paused: bool
    reason: str | None
    tiles_x: int
    tiles_y: int

class Renderer(Protocol):
    def render(self, snap: Snapshot, overlay: bool = False) -> None: ...
    def close(self) -> None: ...

class KeyValueStore(Protocol):
    """External best-score storage; only integers are kept."""
    def get(self, key: str) -> Optional[int]: ...
    def set(self, key: str, value: int) -> None: ...

class GameLogger(Protocol):
    def log(self, game: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...
