import pytest

from gridsnake.core.input_map import InputMapper, Intent
from gridsnake.core.rules import LEFT, RIGHT, UP, DOWN

@pytest.mark.parametrize("key,expected", [
    ("left", LEFT), ("ArrowRight", RIGHT), ("up", UP), ("arrowdown", DOWN),
    ("a", LEFT), ("D", RIGHT), ("w", UP), ("S", DOWN),
])
def test_direction_keys(key, expected):
    assert InputMapper().map(key) == expected

@pytest.mark.parametrize("key,expected", [
    ("p", Intent.PAUSE), ("P", Intent.PAUSE),
    ("r", Intent.RESTART), ("R", Intent.RESTART),
    ("escape", Intent.QUIT), ("quit", Intent.QUIT),
])
def test_command_keys(key, expected):
    assert InputMapper().map(key) is expected

@pytest.mark.parametrize("key", ["x", "space", "", None, "left shift"])
def test_unknown_keys_are_ignored(key):
    assert InputMapper().map(key) is None

def test_custom_bindings():
    m = InputMapper(directions={"h": LEFT, "l": RIGHT}, commands={"q": Intent.QUIT})
    assert m.map("H") == LEFT
    assert m.map("q") is Intent.QUIT
    assert m.map("a") is None
