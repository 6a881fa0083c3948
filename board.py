# board.py
"""
board.py - The planting grid for Forest

A fixed width x height array of cells stored row-major. Each cell is in
one of three stages:
- EMPTY: nothing planted
- JUST_PLACED: planted this round, does not age until the next tick
- GROWING: ages every tick until it matures and is cleared

Board dimensions are fixed at construction.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

from plants import PlantInstance
from utils import in_bounds, xy_idx

Point = Tuple[int, int]


class BoardError(Exception):
    """A board operation was called against its contract."""


class OutOfBounds(BoardError, IndexError):
    """Coordinates fall outside the board."""


class CellOccupied(BoardError):
    """Tried to plant on a cell that already holds a plant."""


class CellStage(Enum):
    EMPTY = auto()
    JUST_PLACED = auto()
    GROWING = auto()


@dataclass(frozen=True)
class Cell:
    """Contents of one board position. plant is None iff the cell is empty."""
    stage: CellStage = CellStage.EMPTY
    plant: Optional[PlantInstance] = None

    @property
    def is_empty(self) -> bool:
        return self.stage is CellStage.EMPTY

    @property
    def label(self) -> str:
        """Text shown on the board for this cell."""
        return " " if self.plant is None else self.plant.label


EMPTY_CELL = Cell()


class Board:
    """Fixed-size grid of cells."""

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Board needs positive dimensions, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[Cell] = [EMPTY_CELL] * (width * height)

    def in_bounds(self, x: int, y: int) -> bool:
        return in_bounds(x, y, self.width, self.height)

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBounds(f"({x}, {y}) is outside the {self.width}x{self.height} board")
        return xy_idx(x, y, self.width)

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[self._index(x, y)]

    def plant_at(self, x: int, y: int) -> Optional[PlantInstance]:
        return self.cell(x, y).plant

    def can_place(self, x: int, y: int) -> bool:
        """True iff the cell is empty."""
        return self.cell(x, y).is_empty

    def place(self, x: int, y: int, plant: PlantInstance) -> None:
        """Plant on an empty cell. The plant waits one tick before aging."""
        idx = self._index(x, y)
        if not self._cells[idx].is_empty:
            raise CellOccupied(f"Cell ({x}, {y}) already holds {self._cells[idx].plant.name}")
        self._cells[idx] = Cell(CellStage.JUST_PLACED, plant)

    def set_growing(self, x: int, y: int, plant: PlantInstance) -> None:
        """Mark a cell as holding an aging plant."""
        self._cells[self._index(x, y)] = Cell(CellStage.GROWING, plant)

    def clear(self, x: int, y: int) -> Optional[PlantInstance]:
        """Empty a cell. Returns the plant that was there, if any."""
        idx = self._index(x, y)
        previous = self._cells[idx].plant
        self._cells[idx] = EMPTY_CELL
        return previous

    def positions(self) -> Iterator[Point]:
        """All coordinates in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def occupied_count(self) -> int:
        return sum(1 for c in self._cells if not c.is_empty)

    def __iter__(self) -> Iterator[Tuple[Point, Cell]]:
        for x, y in self.positions():
            yield (x, y), self._cells[xy_idx(x, y, self.width)]
