# gridsnake/config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # canvas / grid
    canvas_w: int = 400
    canvas_h: int = 400
    tile: int = 20
    seed: Optional[int] = None

    # gameplay
    start_len: int = 4
    step_ms: int = 140                  # starting speed (lower is faster)
    min_step_ms: int = 70
    step_decrement: int = 8
    speedup_every: int = 4              # apples per speed-up
    speed_base_ms: int = 140            # HUD multiplier = speed_base_ms / step_ms
    max_place_attempts: int = 1000
    fps: int = 60

    # persistence / logging
    best_key: str = "snake_best_v1"
    best_path: str = "~/.gridsnake/best.json"
    log_path: Optional[str] = None

    # render
    render_title: str = "Snake"
    render_grid_lines: bool = True
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    def __post_init__(self):
        if self.tile <= 0:
            raise ValueError(f"tile must be positive, got {self.tile}")
        if self.tiles_x < 1 or self.tiles_y < 1 or self.tiles_x * self.tiles_y < 2:
            raise ValueError(
                f"canvas {self.canvas_w}x{self.canvas_h} needs room for at least two {self.tile}px tiles")
        if self.start_len < 1:
            raise ValueError("start_len must be >= 1")
        if not 0 < self.min_step_ms <= self.step_ms:
            raise ValueError("need 0 < min_step_ms <= step_ms")
        if self.speedup_every < 1:
            raise ValueError("speedup_every must be >= 1")

    @property
    def tiles_x(self) -> int:
        return self.canvas_w // self.tile

    @property
    def tiles_y(self) -> int:
        return self.canvas_h // self.tile

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
