# gridsnake/core/input_map.py
from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .rules import LEFT, RIGHT, UP, DOWN

class Intent(Enum):
    PAUSE = "pause"
    RESTART = "restart"
    QUIT = "quit"

Action = Union[Intent, Tuple[int, int]]

DIRECTION_KEYS: Dict[str, Tuple[int, int]] = {
    # pygame key names
    "left": LEFT, "right": RIGHT, "up": UP, "down": DOWN,
    # browser-style names
    "arrowleft": LEFT, "arrowright": RIGHT, "arrowup": UP, "arrowdown": DOWN,
    # WASD
    "a": LEFT, "d": RIGHT, "w": UP, "s": DOWN,
}

COMMAND_KEYS: Dict[str, Intent] = {
    "p": Intent.PAUSE,
    "r": Intent.RESTART,
    "escape": Intent.QUIT,
    "quit": Intent.QUIT,
}

class InputMapper:
    def __init__(self, directions: Optional[Dict[str, Tuple[int, int]]] = None,
                 commands: Optional[Dict[str, Intent]] = None):
        self.directions = dict(DIRECTION_KEYS if directions is None else directions)
        self.commands = dict(COMMAND_KEYS if commands is None else commands)

    def map(self, key: Optional[str]) -> Optional[Action]:
        """Raw key name -> Intent, heading tuple, or None for unknown keys."""
        if not key:
            return None
        k = key.lower()
        if k in self.commands:
            return self.commands[k]
        return self.directions.get(k)
