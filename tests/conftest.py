# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so gridsnake.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    # 10x10 tiles, single-cell snake, deterministic apples
    from gridsnake.config import AppConfig
    return AppConfig(canvas_w=200, canvas_h=200, tile=20, start_len=1, seed=0)

@pytest.fixture
def store():
    from gridsnake.core.persistence import MemoryStore
    return MemoryStore()

@pytest.fixture
def rules_factory(cfg, store):
    from gridsnake.core.rules import Rules
    def make(apple=(0, 0), **overrides):
        r = Rules(cfg.with_(**overrides) if overrides else cfg, store)
        r.state.apple = apple  # park the apple out of the way
        return r
    return make

@pytest.fixture
def controller_factory(cfg, store):
    from gridsnake.core.controller import GameController
    from gridsnake.viz.renderer_headless import HeadlessRenderer
    def make(logger=None, **overrides):
        c = GameController(cfg.with_(**overrides) if overrides else cfg,
                           renderer=HeadlessRenderer(), store=store, logger=logger)
        c.state.apple = (0, 0)
        return c
    return make

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((200, 200), pg.SRCALPHA)
