# config.py
"""
Centralized game configuration for Forest.

This file contains high-level, cross-cutting constants.
Rendering constants live in render/config.py (colors, UI dimensions, etc.)
"""
from __future__ import annotations

from pathlib import Path

# =============================================================================
# CORE GAME DESIGN
# =============================================================================
# Board side length used when none is given on the command line
DEFAULT_BOARD_SIZE = 6

# Starting hand: this many copies of the catalog's first species
STARTING_HAND_SIZE = 2

# =============================================================================
# PLANTS
# =============================================================================
# Plants with fewer turns left than this are highlighted as expiring
EXPIRY_WARNING_TURNS = 3

# Category letter for species records that omit one
DEFAULT_PLANT_CLASS = "s"

# Bundled species definitions (same data as the built-in catalog)
PLANTS_ASSET_PATH = Path(__file__).resolve().parent / "assets" / "plants.json"

# =============================================================================
# EVENT LOG
# =============================================================================
MESSAGE_LOG_SIZE = 100
