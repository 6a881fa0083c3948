# render/overlays.py
"""Bottom strip rendering: event log and help overlay."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

import pygame

from render.primitives import draw_text
from render.config import (
    LINE_HEIGHT,
    COLOR_BG_PANEL,
    COLOR_ACTIVE,
    COLOR_TEXT_GRAY,
    COLOR_TEXT_DIM,
)

if TYPE_CHECKING:
    from game_state import GameState


def render_help_overlay(surface, font, controls: List[str], rect: pygame.Rect) -> None:
    """Lay out the control descriptions in columns over rect."""
    pygame.draw.rect(surface, COLOR_BG_PANEL, rect)
    x, y = rect.x + 8, rect.y + 6
    draw_text(surface, font, "CONTROLS", (x, y), color=COLOR_ACTIVE)
    y += LINE_HEIGHT + 4

    col_width = 170
    cols = max(1, (rect.width - 16) // col_width)
    for i, control in enumerate(controls):
        cy = y + (i // cols) * LINE_HEIGHT
        if cy + LINE_HEIGHT > rect.bottom:
            break
        draw_text(surface, font, control, (x + (i % cols) * col_width, cy), color=COLOR_TEXT_GRAY)


def render_event_log(surface, font, state: "GameState", rect: pygame.Rect) -> None:
    """Show the most recent messages that fit in rect, oldest first."""
    pygame.draw.rect(surface, COLOR_BG_PANEL, rect)
    x, y = rect.x + 8, rect.y + 6
    draw_text(surface, font, "EVENT LOG", (x, y), color=COLOR_ACTIVE)
    y += LINE_HEIGHT + 4

    visible = max(0, (rect.bottom - y) // LINE_HEIGHT)
    if visible == 0:
        return

    messages = state.messages
    start = max(0, len(messages) - visible)
    for i in range(start, len(messages)):
        draw_text(surface, font, f"- {messages[i]}", (x, y), color=(160, 200, 160))
        y += LINE_HEIGHT

    if start > 0:
        draw_text(surface, font, f"[{start} older]", (rect.right - 110, rect.y + 6), color=COLOR_TEXT_DIM)
