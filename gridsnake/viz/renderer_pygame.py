# gridsnake/viz/renderer_pygame.py
from __future__ import annotations
import os
import pygame as pg
from typing import Optional, Union
from gridsnake.config import AppConfig
from gridsnake.core.interfaces import Snapshot
from gridsnake.core.rules import format_speed
import gridsnake.viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

HINT_TEXT = "Press R to restart · P to resume"

class PygameRenderer:
    """Draws a Snapshot onto a pygame surface. Never touches game state."""

    def __init__(self):
        self.tile = 20
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._frame_idx = 0
        self._fonts: Optional[tuple] = None
        self._grid_layer: Optional[pg.Surface] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        pg.init()
        pg.display.set_caption(cfg.render_title)
        surf = pg.display.set_mode((cfg.canvas_w, cfg.canvas_h))
        self._bind(cfg, surf)
        self.clock = pg.time.Clock()
        self._auto_flip = True

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into a caller-owned surface; no window, no flips, no clock."""
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        if not pg.get_init():
            pg.init()
        self._bind(cfg, surface)
        self.clock = None
        self._auto_flip = False

    def _bind(self, cfg: AppConfig, surf: pg.Surface) -> None:
        self.cfg = cfg
        self.tile = cfg.tile
        self.surf = surf
        self._frame_idx = 0
        self._fonts = None
        self._grid_layer = None

    def render(self, s: Snapshot, overlay: bool = False) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf

        surf.fill(theme.BG)
        if self.cfg.render_grid_lines:
            surf.blit(self._grid(), (0, 0))

        self._cell(s.apple, theme.APPLE)
        for i, pos in enumerate(s.snake):
            self._cell(pos, theme.HEAD if i == 0 else theme.BODY)

        if self.cfg.render_show_hud:
            self._hud(s)

        if overlay or s.paused or not s.running:
            self._overlay("Paused" if s.running else "Game Over")

        if self._auto_flip:
            pg.display.set_caption(
                f"{self.cfg.render_title} · Score {s.score} · Best {s.best} · "
                f"{format_speed(s.step_ms, self.cfg.speed_base_ms)}")
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            if self._auto_flip:
                pg.quit()
        finally:
            self.surf = None
            self.clock = None

    # internals
    def _font(self, which: int) -> pg.font.Font:
        if self._fonts is None:
            self._fonts = (
                pg.font.SysFont(None, 36, bold=True),   # title
                pg.font.SysFont(None, 20),              # hint / hud
            )
        return self._fonts[which]

    def _grid(self) -> pg.Surface:
        if self._grid_layer is None:
            w, h = self.surf.get_size()
            t = self.tile
            layer = pg.Surface((w, h), pg.SRCALPHA)
            for x in range(t, w, t):
                pg.draw.line(layer, theme.GRID, (x, 0), (x, h))
            for y in range(t, h, t):
                pg.draw.line(layer, theme.GRID, (0, y), (w, y))
            self._grid_layer = layer
        return self._grid_layer

    def _cell(self, pos, color) -> None:
        t = self.tile
        x, y = pos
        pg.draw.rect(self.surf, color, pg.Rect(x * t, y * t, t, t), border_radius=max(1, t // 4))

    def _hud(self, s: Snapshot) -> None:
        txt = self._font(1).render(
            f"Score: {s.score}   Best: {s.best}   Speed: "
            f"{format_speed(s.step_ms, self.cfg.speed_base_ms)}",
            True, theme.TEXT)
        self.surf.blit(txt, (6, 4))

    def _overlay(self, title: str) -> None:
        surf = self.surf
        w, h = surf.get_size()
        dim = pg.Surface((w, h), pg.SRCALPHA)
        dim.fill(theme.OVERLAY)
        surf.blit(dim, (0, 0))

        head = self._font(0).render(title, True, theme.TEXT)
        hint = self._font(1).render(HINT_TEXT, True, theme.HINT)
        surf.blit(head, head.get_rect(center=(w // 2, h // 2 - 10)))
        surf.blit(hint, hint.get_rect(center=(w // 2, h // 2 + 18)))

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
