# game_state/__init__.py
"""Game state management module."""

from game_state.state import GameState, Mode
from game_state.initialization import build_initial_state
from game_state.player_actions import (
    choose_selected,
    move_cursor,
    place_pending,
    reclaim_placed,
)

__all__ = [
    'GameState',
    'Mode',
    'build_initial_state',
    'choose_selected',
    'move_cursor',
    'place_pending',
    'reclaim_placed',
]
