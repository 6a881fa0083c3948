# game_state/state.py
"""Core game state data structures."""
from __future__ import annotations

import collections
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Deque, Optional, Tuple

import numpy as np

from board import Board, Cell, CellStage
from config import MESSAGE_LOG_SIZE
from cursor import PlacingCursor
from hand import Hand
from plants import PlantCatalog, PlantInstance

Point = Tuple[int, int]


class Mode(Enum):
    """What the player is currently interacting with."""
    CHOOSING = auto()      # Picking a plant from the hand
    PLACING = auto()       # Moving the cursor over the board
    NEXT_ROUND = auto()    # Confirming round advances


@dataclass
class GameState:
    """Main game state container for one session.

    Board coordinates are (x, y) with 0 <= x < width, 0 <= y < height.
    The renderer only reads from this object; all changes go through
    main.handle_command or simulation.advance_round.
    """
    board: Board
    hand: Hand
    catalog: PlantCatalog
    cursor: PlacingCursor
    mode: Mode = Mode.CHOOSING

    # Display copy of the hand entry picked in Choosing mode
    pending: Optional[PlantInstance] = None

    score: float = 0.0
    round: int = 0

    # Single entropy source for drop resolution (swap for a seeded one in tests)
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    messages: Deque[str] = field(default_factory=lambda: collections.deque(maxlen=MESSAGE_LOG_SIZE))

    # === Board convenience properties ===
    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    def cell(self, x: int, y: int) -> Cell:
        return self.board.cell(x, y)

    def cursor_cell(self) -> Cell:
        """Cell under the placement cursor."""
        return self.board.cell(self.cursor.x, self.cursor.y)

    # === Hand convenience properties ===
    @property
    def selected_index(self) -> Optional[int]:
        return self.hand.selected_index

    def selected_plant(self) -> Optional[PlantInstance]:
        return self.hand.selected()

    def info_plant(self) -> Optional[PlantInstance]:
        """Plant whose stats the info panel shows.

        In Placing mode this is the plant under the cursor, or the pending
        placement over an empty cell. Otherwise it is the highlighted hand entry.
        """
        if self.mode is Mode.PLACING:
            cell = self.cursor_cell()
            if cell.stage is not CellStage.EMPTY:
                return cell.plant
            return self.pending
        return self.selected_plant()
