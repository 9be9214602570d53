"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 30

# Layout dimensions
SCREEN_W = 900
SCREEN_H = 600
STATUS_H = 36
PANEL_RECT = (40, 40, 380, 300)
CANVAS_RECT = (480, 40, 380, 240)
LAMP_POS = (670, 300)
TEXT_POS = (40, 380)

# Scene projection (world units -> pixels)
FOCAL = 420.0
HORIZON_Y = 470
CUBE_SIZE = 0.5

# Colors
BG_COLOR = (18, 18, 26)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
OVERLAY_COLOR = (90, 90, 100)
CANVAS_BORDER = (70, 70, 95)
LAMP_COLOR = (255, 220, 120)
CUBE_COLOR = (80, 160, 230)
CUBE_HOVER = (120, 200, 255)

PANEL_COLORS: dict[str, tuple[int, int, int]] = {
    "panel_intro": (60, 90, 150),
    "panel_hall": (140, 80, 60),
    "panel_study": (70, 130, 80),
}

SLIDE_COLORS: dict[str, tuple[int, int, int]] = {
    "portrait": (170, 120, 90),
    "landscape": (90, 150, 120),
    "letter": (200, 190, 150),
}
