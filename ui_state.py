# ui_state.py
"""
UI state management for pygame frontend.

Tracks layout regions and the help toggle.
Keeps UI state separate from game state.
"""
from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from render.config import (
    VIRTUAL_WIDTH,
    VIRTUAL_HEIGHT,
    MARGIN,
    BOARD_PANEL_FRACTION,
    SIDE_PANEL_FRACTIONS,
    LOG_PANEL_HEIGHT,
)

# Layout constants derived from render config
CONTENT_HEIGHT = VIRTUAL_HEIGHT - LOG_PANEL_HEIGHT - 3 * MARGIN
BOARD_PANEL_WIDTH = int((VIRTUAL_WIDTH - 3 * MARGIN) * BOARD_PANEL_FRACTION)
SIDE_PANEL_X = 2 * MARGIN + BOARD_PANEL_WIDTH
SIDE_PANEL_WIDTH = VIRTUAL_WIDTH - SIDE_PANEL_X - MARGIN


def _side_rect(index: int) -> pygame.Rect:
    """Rect of the index-th side panel (hand, info, next round)."""
    top = MARGIN + int(CONTENT_HEIGHT * sum(SIDE_PANEL_FRACTIONS[:index]))
    height = int(CONTENT_HEIGHT * SIDE_PANEL_FRACTIONS[index])
    return pygame.Rect(SIDE_PANEL_X, top, SIDE_PANEL_WIDTH, height)


@dataclass
class UIState:
    """
    Manages UI layout and transient state.

    Layout regions are fixed at creation time.
    """
    board_rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(MARGIN, MARGIN, BOARD_PANEL_WIDTH, CONTENT_HEIGHT))
    hand_rect: pygame.Rect = field(default_factory=lambda: _side_rect(0))
    info_rect: pygame.Rect = field(default_factory=lambda: _side_rect(1))
    next_round_rect: pygame.Rect = field(default_factory=lambda: _side_rect(2))
    log_panel_rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(
        MARGIN, VIRTUAL_HEIGHT - LOG_PANEL_HEIGHT - MARGIN, VIRTUAL_WIDTH - 2 * MARGIN, LOG_PANEL_HEIGHT))

    show_help: bool = False

    def toggle_help(self) -> None:
        self.show_help = not self.show_help
