"""
utils.py - Common utility functions for Forest

Provides shared, stateless helper functions used across different modules.
"""
from __future__ import annotations

from typing import Tuple

Point = Tuple[int, int]


def clamp(val: int, low: int, high: int) -> int:
    """Clamp a value between low and high bounds."""
    return max(low, min(high, val))


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    """Check if (x, y) lies on a width x height board."""
    return 0 <= x < width and 0 <= y < height


def xy_idx(x: int, y: int, width: int) -> int:
    """Row-major index of (x, y) on a board of the given width."""
    return y * width + x


def clamp_to_bounds(pos: Point, width: int, height: int) -> Point:
    """Clamp position to within board bounds, each axis independently.

    Example: (7, -1) on a 6x6 board -> (5, 0)
    """
    return clamp(pos[0], 0, width - 1), clamp(pos[1], 0, height - 1)
