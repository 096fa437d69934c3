# gridsnake/viz/renderer_headless.py
from __future__ import annotations
from typing import Optional
import numpy as np
from gridsnake.core.interfaces import Snapshot

EMPTY, BODY, HEAD, APPLE = 0, 1, 2, 3

def rasterize(s: Snapshot) -> np.ndarray:
    """Grid of cell codes, shape (tiles_y, tiles_x)."""
    grid = np.zeros((s.tiles_y, s.tiles_x), dtype=np.int8)
    ax, ay = s.apple
    grid[ay, ax] = APPLE
    for (x, y) in s.snake[1:]:
        grid[y, x] = BODY
    if s.snake:
        hx, hy = s.snake[0]
        grid[hy, hx] = HEAD
    return grid

def to_text(grid: np.ndarray) -> list[str]:
    glyphs = {EMPTY: ".", BODY: "o", HEAD: "H", APPLE: "F"}
    return ["".join(glyphs[int(c)] for c in row) for row in grid]

class HeadlessRenderer:
    """Keeps the latest frame in memory instead of drawing it."""
    def __init__(self):
        self.frame: Optional[np.ndarray] = None
        self.overlay = False
        self.status: Optional[str] = None
        self.frames = 0

    def render(self, snap: Snapshot, overlay: bool = False) -> None:
        self.frame = rasterize(snap)
        self.overlay = overlay or snap.paused or not snap.running
        if self.overlay:
            self.status = "Paused" if snap.running else "Game Over"
        else:
            self.status = None
        self.frames += 1

    def close(self) -> None:
        pass
