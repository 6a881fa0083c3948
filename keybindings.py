"""
keybindings.py - Centralized key mappings for Forest (Pygame version)

Single source of truth for all keyboard controls.
"""
from __future__ import annotations

from typing import Dict, Optional

import pygame

from main import Command

# Movement: arrows or WASD. Meaning depends on mode (hand list vs board cursor)
MOVE_KEYS: Dict[int, Command] = {
    pygame.K_UP: Command.MOVE_UP,
    pygame.K_w: Command.MOVE_UP,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_s: Command.MOVE_DOWN,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_d: Command.MOVE_RIGHT,
}

# Primary action keys
CONFIRM_KEY = pygame.K_SPACE       # Pick plant / place plant / next round
CYCLE_MODE_KEY = pygame.K_TAB      # Choosing -> Next Round -> Placing
DELETE_KEYS = (pygame.K_q, pygame.K_DELETE)  # Dig up a plant placed this round
ADVANCE_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)  # Advance round from any mode

# System keys
QUIT_KEY = pygame.K_ESCAPE
HELP_KEY = pygame.K_h

# Control descriptions for help display
CONTROL_DESCRIPTIONS = [
    "Arrows/WASD: move",
    "Space: confirm",
    "Tab: switch panel",
    "Q/Del: dig up",
    "Enter: next round",
    "H: help",
    "Esc: quit",
]


def command_for_key(key: int) -> Optional[Command]:
    """Translate a pygame key code into an engine command, or None."""
    if key in MOVE_KEYS:
        return MOVE_KEYS[key]
    if key == CONFIRM_KEY:
        return Command.CONFIRM
    if key == CYCLE_MODE_KEY:
        return Command.CYCLE_MODE
    if key in DELETE_KEYS:
        return Command.DELETE
    if key in ADVANCE_KEYS:
        return Command.ADVANCE_ROUND
    if key == QUIT_KEY:
        return Command.QUIT
    return None
