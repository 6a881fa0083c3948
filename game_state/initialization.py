# game_state/initialization.py
"""Game state initialization."""
from __future__ import annotations

from typing import Optional

import numpy as np

from board import Board
from config import DEFAULT_BOARD_SIZE, STARTING_HAND_SIZE
from cursor import PlacingCursor
from game_state.state import GameState
from hand import Hand
from plants import PlantCatalog, default_catalog


def build_initial_state(
    board_size: int = DEFAULT_BOARD_SIZE,
    catalog: Optional[PlantCatalog] = None,
    seed: Optional[int] = None,
    starting_hand_size: int = STARTING_HAND_SIZE,
) -> GameState:
    """Create a new session with an empty square board.

    Args:
        board_size: Side length of the board (width and height)
        catalog: Species in play (built-in catalog if None)
        seed: Seed for the drop generator (fresh entropy if None)
        starting_hand_size: Copies of the catalog's first species in the hand

    Raises:
        ValueError: if board_size is not a positive integer
    """
    if isinstance(board_size, bool) or not isinstance(board_size, int) or board_size < 1:
        raise ValueError(f"Board size must be a positive integer, got {board_size!r}")

    if catalog is None:
        catalog = default_catalog()

    starter = catalog.first
    hand = Hand(catalog.spawn(starter.id) for _ in range(starting_hand_size))

    state = GameState(
        board=Board(board_size, board_size),
        hand=hand,
        catalog=catalog,
        cursor=PlacingCursor.centered(board_size, board_size),
        rng=np.random.default_rng(seed),
    )
    state.messages.append(f"A {board_size}x{board_size} clearing. Plant something!")
    return state
