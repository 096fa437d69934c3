import os

import numpy as np
import pygame as pg
import pytest

from gridsnake.config import AppConfig
from gridsnake.viz.renderer_pygame import PygameRenderer
from gridsnake.viz.renderer_headless import HeadlessRenderer, rasterize, to_text, HEAD, BODY, APPLE
import gridsnake.viz.renderer_colors as theme

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

def _center(pos, tile=20):
    return (pos[0] * tile + tile // 2, pos[1] * tile + tile // 2)

@pytest.fixture
def plain_cfg(cfg):
    return cfg.with_(render_grid_lines=False, render_show_hud=False)

@pytest.fixture
def snap(rules_factory):
    r = rules_factory(apple=(2, 7))
    r.state.snake.cells = [(5, 5), (4, 5), (3, 5)]
    r.state.snake.max_cells = 3
    return r, r.snapshot()

def test_draws_apple_head_and_body(plain_cfg, screen, snap):
    _, s = snap
    ren = PygameRenderer()
    ren.attach_surface(screen, plain_cfg)
    ren.render(s)
    assert _rgb(screen.get_at(_center((5, 5)))) == theme.HEAD
    assert _rgb(screen.get_at(_center((4, 5)))) == theme.BODY
    assert _rgb(screen.get_at(_center((2, 7)))) == theme.APPLE
    assert _rgb(screen.get_at(_center((8, 8)))) == theme.BG
    assert theme.HEAD != theme.BODY

def test_overlay_dims_board(plain_cfg, screen, snap):
    _, s = snap
    ren = PygameRenderer()
    ren.attach_surface(screen, plain_cfg)
    ren.render(s, overlay=True)
    r, g, b = _rgb(screen.get_at(_center((2, 7))))
    assert (r, g, b) != theme.APPLE
    assert r < theme.APPLE[0]

def test_game_over_state_forces_overlay(plain_cfg, screen, snap):
    from dataclasses import replace
    _, s = snap
    ren = PygameRenderer()
    ren.attach_surface(screen, plain_cfg)
    ren.render(replace(s, running=False))
    assert _rgb(screen.get_at(_center((2, 7)))) != theme.APPLE

def test_render_does_not_mutate_state(cfg, screen, snap):
    rules, s = snap
    ren = PygameRenderer()
    ren.attach_surface(screen, cfg)
    ren.render(s, overlay=True)
    ren.render(s)
    assert rules.snapshot() == s

def test_grid_lines_are_faint(cfg, screen, snap):
    _, s = snap
    ren = PygameRenderer()
    ren.attach_surface(screen, cfg.with_(render_show_hud=False))
    ren.render(s)
    line = _rgb(screen.get_at((160, 190)))
    assert line != theme.BG
    assert all(abs(a - b) < 16 for a, b in zip(line, theme.BG))

def test_requires_surface(snap):
    _, s = snap
    with pytest.raises(AssertionError):
        PygameRenderer().render(s)

def test_rejects_config_class(screen):
    with pytest.raises(TypeError):
        PygameRenderer().attach_surface(screen, AppConfig)

def test_records_frames(plain_cfg, screen, snap, tmp_path):
    _, s = snap
    ren = PygameRenderer()
    ren.attach_surface(screen, plain_cfg.with_(render_record_dir=str(tmp_path)))
    ren.render(s)
    ren.render(s)
    assert sorted(os.listdir(tmp_path)) == ["frame_000000.png", "frame_000001.png"]

def test_open_window_with_dummy_driver(plain_cfg, snap):
    _, s = snap
    ren = PygameRenderer()
    ren.open(plain_cfg)
    try:
        ren.render(s)
        assert ren.surf.get_size() == (200, 200)
        assert "Score 0" in pg.display.get_caption()[0]
    finally:
        ren.close()
        pg.init()

def test_rasterize_codes(snap):
    _, s = snap
    grid = rasterize(s)
    assert grid.shape == (10, 10)
    assert grid[5, 5] == HEAD
    assert grid[5, 4] == BODY and grid[5, 3] == BODY
    assert grid[7, 2] == APPLE
    assert int(np.count_nonzero(grid)) == 4
    assert to_text(grid)[5] == "...ooH...."

def test_headless_renderer_tracks_overlay(snap):
    from dataclasses import replace
    _, s = snap
    ren = HeadlessRenderer()
    ren.render(s)
    assert ren.frames == 1 and not ren.overlay and ren.status is None
    ren.render(replace(s, paused=True))
    assert ren.overlay and ren.status == "Paused"
    ren.render(replace(s, running=False))
    assert ren.status == "Game Over"
