# gridsnake/policy/greedy.py
from __future__ import annotations
import random
from typing import Optional

from gridsnake.core.interfaces import Snapshot
from gridsnake.core.rules import LEFT, RIGHT, UP, DOWN, is_opposite

KEY_FOR = {LEFT: "left", RIGHT: "right", UP: "up", DOWN: "down"}


def best_move_toward_apple(hx: int, hy: int, ax: int, ay: int):
    """
    Returns a preference ordering of moves that reduce Manhattan distance to the apple.
    Does NOT check collisions; caller should filter unsafe moves.
    """
    prefs = []
    if ax < hx:
        prefs.append(LEFT)
    elif ax > hx:
        prefs.append(RIGHT)
    if ay < hy:
        prefs.append(UP)
    elif ay > hy:
        prefs.append(DOWN)
    for d in (UP, DOWN, LEFT, RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs


def is_safe(s: Snapshot, d) -> bool:
    hx, hy = s.snake[0]
    nx, ny = hx + d[0], hy + d[1]
    if not (0 <= nx < s.tiles_x and 0 <= ny < s.tiles_y):
        return False
    # the tail cell frees up on this step unless the snake is still growing
    body = s.snake[:-1] if len(s.snake) >= s.max_cells else s.snake
    return (nx, ny) not in body


def policy_greedy(s: Snapshot, rng: Optional[random.Random] = None) -> Optional[str]:
    """
    Key name to press this step, or None to keep going straight.
    - prefer moves that reduce distance to the apple
    - skip reversals and moves into walls/body
    - if boxed in, pick any legal direction at random
    """
    if not s.running or not s.snake:
        return None
    hx, hy = s.snake[0]
    ax, ay = s.apple
    legal = [d for d in best_move_toward_apple(hx, hy, ax, ay) if not is_opposite(d, s.heading)]
    for d in legal:
        if is_safe(s, d):
            return None if d == s.heading else KEY_FOR[d]
    rng = rng or random
    return KEY_FOR[rng.choice(legal)]
