# cursor.py
"""
Placement cursor for Forest.

The cursor marks the board cell targeted while in Placing mode. It keeps
its position when the player switches modes, and every move is clamped
to the board on each axis (no wrapping).

Coordinates follow screen order: y = 0 is the top row, so moving up
decreases y.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from utils import clamp_to_bounds

Point = Tuple[int, int]


@dataclass
class PlacingCursor:
    """Board cell under the placement cursor."""
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def centered(cls, width: int, height: int) -> PlacingCursor:
        """Cursor starting at the middle of the board."""
        return cls(width // 2, height // 2, width, height)

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @position.setter
    def position(self, value: Point) -> None:
        self.x, self.y = clamp_to_bounds(value, self.width, self.height)

    def move(self, dx: int, dy: int) -> None:
        """Shift by (dx, dy), stopping at the board edges."""
        self.position = (self.x + dx, self.y + dy)
