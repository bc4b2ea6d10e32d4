"""Layout constants and color definitions."""

# Timing
FPS = 60
ENGINE_FPS = 60

# Layout dimensions
GRID_W = 440
PANEL_W = 300
STATUS_H = 32
CONTENT_H = 640

SCREEN_W = GRID_W + PANEL_W
SCREEN_H = CONTENT_H + STATUS_H

# Week grid
GRID_COLUMNS = 52
GRID_PAD = 16
CELL_GAP = 1
MAX_CELL = 7

# Step card
CARD_W = 360
CARD_H = 180
CARD_SLIDE = 24  # px travelled while leaving or entering

# Expectancy keys
EXPECTANCY_STEP = 1

# Colors
BG_COLOR = (18, 18, 26)
PANEL_BG = (26, 26, 38)
STATUS_BG = (34, 34, 48)
BORDER = (50, 50, 70)
CARD_BG = (32, 32, 48)
TEXT_COLOR = (210, 210, 220)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
ACCENT = (240, 170, 60)
CELL_EMPTY = (44, 44, 60)
CELL_FILLED = (240, 170, 60)
BAR_BG = (44, 44, 60)
