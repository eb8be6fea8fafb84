# termsnake/viz/renderer_colors.py
BG = (18, 18, 28)
BORDER = (70, 74, 96)
HEAD = (144, 238, 144)
BODY = (80, 200, 120)
FOOD = (235, 64, 52)
OBSTACLE = (150, 150, 160)
TEXT = (240, 240, 240)
