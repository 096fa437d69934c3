# gridsnake/viz/keyboard.py
import pygame as pg

class Keyboard:
    """Drains the pygame event queue into raw key names (``pg.key.name``)."""

    def poll(self):
        keys = []
        for e in pg.event.get():
            if e.type == pg.QUIT:
                keys.append("quit")
            elif e.type == pg.KEYDOWN:
                keys.append(pg.key.name(e.key).lower())
        return keys
