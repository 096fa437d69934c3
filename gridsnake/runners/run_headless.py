# gridsnake/runners/run_headless.py
from __future__ import annotations
import random
from typing import List, Optional

from gridsnake.config import AppConfig
from gridsnake.core.controller import GameController
from gridsnake.core.interfaces import KeyValueStore, GameLogger, Snapshot
from gridsnake.core.metrics import ScoreWindow
from gridsnake.policy.greedy import policy_greedy
from gridsnake.viz.renderer_headless import HeadlessRenderer, to_text


def main(cfg: AppConfig, store: KeyValueStore, logger: Optional[GameLogger] = None,
         games: int = 1, max_frames: int = 100_000, verbose: bool = True) -> List[Snapshot]:
    """Play `games` games with the greedy autopilot on a simulated clock."""
    rend = HeadlessRenderer()
    ctl = GameController(cfg, renderer=rend, store=store, logger=logger, verbose=verbose)
    rng = random.Random(cfg.seed)
    frame_ms = 1000.0 / cfg.fps
    results: List[Snapshot] = []
    scores = ScoreWindow(window=100)

    now = 0.0
    try:
        for _ in range(games):
            ctl.reset(now)
            frames = 0
            while ctl.state.running and frames < max_frames:
                key = policy_greedy(ctl.snapshot(), rng)
                if key is not None:
                    ctl.on_key(key, now_ms=now)
                now += frame_ms
                ctl.on_frame(now)
                frames += 1
            results.append(ctl.snapshot())
            scores.add(ctl.state.score)
    finally:
        if logger is not None:
            logger.close()

    if verbose and rend.frame is not None:
        print("\n".join(to_text(rend.frame)))
    if verbose:
        st = scores.summary()
        print(f"games={st['games']} score mean={st['mean']:.2f} min={st['min']} "
              f"max={st['max']} best={ctl.state.best}")
    return results
