# main.py
"""
Forest - Grid Planting Prototype
Turn-based simulation: plant from your hand, wait, harvest points and seeds.

The front end turns input events into Commands and feeds them one at a
time to handle_command(). Each command is fully applied before the next.

Modes cycle Choosing -> NextRound -> Placing -> Choosing on CYCLE_MODE.
Confirm in Choosing picks a plant and enters Placing; a successful
placement returns to Choosing.
"""
from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Dict

from game_state import (
    GameState,
    Mode,
    build_initial_state,
    choose_selected,
    move_cursor,
    place_pending,
    reclaim_placed,
)
from simulation import advance_round


class Command(Enum):
    """Abstract inputs understood by the engine."""
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    CONFIRM = auto()
    CYCLE_MODE = auto()
    DELETE = auto()
    ADVANCE_ROUND = auto()
    QUIT = auto()


MOVE_DELTAS = {
    Command.MOVE_UP: (0, -1),
    Command.MOVE_DOWN: (0, 1),
    Command.MOVE_LEFT: (-1, 0),
    Command.MOVE_RIGHT: (1, 0),
}

NEXT_MODE = {
    Mode.CHOOSING: Mode.NEXT_ROUND,
    Mode.NEXT_ROUND: Mode.PLACING,
    Mode.PLACING: Mode.CHOOSING,
}


def cycle_mode(state: GameState) -> None:
    """Switch to the next mode. Leaving Placing drops the pending choice."""
    if state.mode is Mode.PLACING:
        state.pending = None
    state.mode = NEXT_MODE[state.mode]


def _handle_choosing(state: GameState, cmd: Command) -> None:
    if cmd in (Command.MOVE_UP, Command.MOVE_LEFT):
        state.hand.select_prev()
    elif cmd in (Command.MOVE_DOWN, Command.MOVE_RIGHT):
        state.hand.select_next()
    elif cmd is Command.CONFIRM:
        if len(state.hand) == 0:
            # Nothing to plant: confirming moves the game on instead
            advance_round(state)
            state.mode = Mode.NEXT_ROUND
        elif choose_selected(state):
            state.mode = Mode.PLACING


def _handle_placing(state: GameState, cmd: Command) -> None:
    if cmd in MOVE_DELTAS:
        move_cursor(state, *MOVE_DELTAS[cmd])
    elif cmd is Command.CONFIRM:
        if place_pending(state):
            state.mode = Mode.CHOOSING
    elif cmd is Command.DELETE:
        reclaim_placed(state)


def _handle_next_round(state: GameState, cmd: Command) -> None:
    if cmd is Command.CONFIRM:
        advance_round(state)


MODE_HANDLERS: Dict[Mode, Callable[[GameState, Command], None]] = {
    Mode.CHOOSING: _handle_choosing,
    Mode.PLACING: _handle_placing,
    Mode.NEXT_ROUND: _handle_next_round,
}


def handle_command(state: GameState, cmd: Command) -> bool:
    """Process a player command. Returns True if the game should quit."""
    if cmd is Command.QUIT:
        return True
    if cmd is Command.ADVANCE_ROUND:
        advance_round(state)
    elif cmd is Command.CYCLE_MODE:
        cycle_mode(state)
    else:
        MODE_HANDLERS[state.mode](state, cmd)
    return False


__all__ = [
    "Command",
    "GameState",
    "Mode",
    "advance_round",
    "build_initial_state",
    "cycle_mode",
    "handle_command",
]
