# render/config.py
"""
Configuration constants for the rendering domain.
Includes UI dimensions, colors, font sizes, and other visual tuning values.
"""
from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]

# =============================================================================
# UI LAYOUT & DIMENSIONS
# =============================================================================
VIRTUAL_WIDTH = 1280
VIRTUAL_HEIGHT = 720

MARGIN = 12
# Board panel takes 70% of the width, side panels the rest
BOARD_PANEL_FRACTION = 0.70
# Side column split: hand list / plant info / next round
SIDE_PANEL_FRACTIONS = (0.60, 0.20, 0.20)
LOG_PANEL_HEIGHT = 110

LINE_HEIGHT = 20
FONT_SIZE = 20
TITLE_FONT_SIZE = 24
PANEL_PADDING = 10
PANEL_BORDER = 2

# Fraction of a board cell covered by its square
CELL_FILL = 0.7

# =============================================================================
# COLORS
# =============================================================================
COLOR_BG = (51, 51, 51)
COLOR_BG_PANEL = (40, 40, 44)
COLOR_ACTIVE = (40, 200, 60)          # Border of the panel owning input
COLOR_INACTIVE = (144, 238, 144)      # Other panels and idle cells
COLOR_TEXT_WHITE = (230, 230, 230)
COLOR_TEXT_GRAY = (160, 160, 160)
COLOR_TEXT_DIM = (100, 100, 100)
COLOR_TEXT_LABEL = (0, 200, 200)      # Stat names in the info panel

# Board cell text
COLOR_JUST_PLACED = (230, 220, 60)
COLOR_EXPIRING = (220, 60, 220)

# Hand list highlight
COLOR_HIGHLIGHT_BG = (144, 238, 144)
COLOR_HIGHLIGHT_TEXT = (255, 255, 255)
HIGHLIGHT_SYMBOL = ">>  "
