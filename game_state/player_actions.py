# game_state/player_actions.py
"""Player actions for choosing, placing and reclaiming plants."""
from __future__ import annotations

from typing import TYPE_CHECKING

from board import CellStage

if TYPE_CHECKING:
    from game_state.state import GameState


def choose_selected(state: GameState) -> bool:
    """Pick the highlighted hand plant for placement. Returns True if one was picked."""
    plant = state.hand.selected()
    if plant is None:
        return False
    state.pending = plant
    return True


def move_cursor(state: GameState, dx: int, dy: int) -> None:
    """Move the placement cursor, clamped to the board."""
    state.cursor.move(dx, dy)


def place_pending(state: GameState) -> bool:
    """Plant the pending choice under the cursor.

    The planted instance is the one removed from the hand, so a plant is
    never held by both. Returns True if a plant was placed.
    """
    if state.pending is None:
        state.messages.append("Choose a plant first.")
        return False

    x, y = state.cursor.position
    if not state.board.can_place(x, y):
        state.messages.append("Cell is occupied.")
        return False

    plant = state.hand.take_selected()
    if plant is None:
        state.pending = None
        state.messages.append("No plants left in hand.")
        return False

    state.board.place(x, y, plant)
    state.pending = None
    state.messages.append(f"Planted {plant.name} at ({x}, {y}).")
    return True


def reclaim_placed(state: GameState) -> bool:
    """Return a plant placed this round to the hand.

    Only just-placed cells can be reclaimed; growing plants stay put.
    Returns True if a plant was reclaimed.
    """
    x, y = state.cursor.position
    if state.board.cell(x, y).stage is not CellStage.JUST_PLACED:
        return False

    plant = state.board.clear(x, y)
    state.hand.append([plant])
    state.messages.append(f"Dug up {plant.name} from ({x}, {y}).")
    return True
