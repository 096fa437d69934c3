# gridsnake/viz/renderer_colors.py
BG = (11, 15, 33)
GRID = (255, 255, 255, 10)
APPLE = (255, 77, 90)
HEAD = (125, 247, 176)
BODY = (73, 209, 135)
TEXT = (233, 238, 247)
HINT = (160, 178, 255)
OVERLAY = (8, 10, 20, 140)
