# gridsnake/runners/run_snake.py
from __future__ import annotations
import pygame as pg

from gridsnake.config import AppConfig
from gridsnake.core.controller import GameController
from gridsnake.core.input_map import Intent
from gridsnake.core.interfaces import KeyValueStore, GameLogger
from gridsnake.viz.keyboard import Keyboard
from gridsnake.viz.renderer_pygame import PygameRenderer


def main(cfg: AppConfig, store: KeyValueStore, logger: GameLogger | None = None):
    rend = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard()

    ctl = GameController(cfg, renderer=rend, store=store, logger=logger,
                         now_ms=pg.time.get_ticks(), verbose=True)
    ctl.reset(pg.time.get_ticks())
    print(f"Best so far: {ctl.state.best}")

    try:
        running = True
        while running:
            for key in kbd.poll():
                if ctl.on_key(key, now_ms=pg.time.get_ticks()) is Intent.QUIT:
                    running = False
                    break
            if not running:
                break
            ctl.on_frame(pg.time.get_ticks())
            rend.tick(cfg.fps)
    finally:
        rend.close()
        if logger is not None:
            logger.close()
    return ctl.state.best
