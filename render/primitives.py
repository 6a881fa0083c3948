# render/primitives.py
"""Basic drawing primitives shared across render modules."""
from __future__ import annotations

from typing import Dict, Tuple

import pygame

from render.config import (
    Color,
    COLOR_ACTIVE,
    COLOR_BG_PANEL,
    COLOR_INACTIVE,
    COLOR_TEXT_WHITE,
    PANEL_BORDER,
    PANEL_PADDING,
    LINE_HEIGHT,
)

# Rendered text surfaces keyed by (font id, text, color)
_TEXT_CACHE: Dict[Tuple[int, str, Color], pygame.Surface] = {}


def draw_text(surface, font, text: str, pos: Tuple[int, int], color: Color = COLOR_TEXT_WHITE) -> None:
    """Draw text at the given position, reusing previously rendered surfaces."""
    key = (id(font), text, color)
    rendered = _TEXT_CACHE.get(key)
    if rendered is None:
        rendered = font.render(text, True, color)
        _TEXT_CACHE[key] = rendered
    surface.blit(rendered, pos)


def draw_panel(surface, title_font, rect: pygame.Rect, title: str, active: bool) -> int:
    """Draw a bordered panel with a title. Returns the y where content starts.

    The border uses the active color when the panel owns the input focus.
    """
    pygame.draw.rect(surface, COLOR_BG_PANEL, rect)
    border = COLOR_ACTIVE if active else COLOR_INACTIVE
    pygame.draw.rect(surface, border, rect, PANEL_BORDER)
    if title:
        draw_text(surface, title_font, title, (rect.x + PANEL_PADDING, rect.y + 4), color=COLOR_ACTIVE)
    return rect.y + 4 + LINE_HEIGHT + 6
