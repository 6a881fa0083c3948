# render/sidebar.py
"""Side panels: hand list, plant info stat block, next round button."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

import pygame

from game_state import Mode
from render.primitives import draw_panel, draw_text
from render.config import (
    LINE_HEIGHT,
    PANEL_PADDING,
    COLOR_HIGHLIGHT_BG,
    COLOR_HIGHLIGHT_TEXT,
    COLOR_TEXT_GRAY,
    COLOR_TEXT_LABEL,
    COLOR_TEXT_WHITE,
    HIGHLIGHT_SYMBOL,
)

if TYPE_CHECKING:
    from game_state import GameState
    from plants import PlantInstance


def render_hand(surface, font, title_font, state: "GameState", rect: pygame.Rect) -> None:
    """Draw the hand list with the highlighted entry."""
    y = draw_panel(surface, title_font, rect, " Plants ", active=state.mode is Mode.CHOOSING)
    x = rect.x + PANEL_PADDING
    visible = max(0, (rect.bottom - y - PANEL_PADDING) // LINE_HEIGHT)

    # Keep the highlighted entry in view
    first = 0
    if state.selected_index is not None and state.selected_index >= visible > 0:
        first = state.selected_index - visible + 1

    for i in range(first, min(len(state.hand), first + visible)):
        name = state.hand[i].name
        if i == state.selected_index:
            pygame.draw.rect(surface, COLOR_HIGHLIGHT_BG, (x - 4, y - 2, rect.width - 2 * PANEL_PADDING + 8, LINE_HEIGHT))
            draw_text(surface, font, HIGHLIGHT_SYMBOL + name, (x, y), color=COLOR_HIGHLIGHT_TEXT)
        else:
            draw_text(surface, font, " " * len(HIGHLIGHT_SYMBOL) + name, (x, y), color=COLOR_TEXT_WHITE)
        y += LINE_HEIGHT


def plant_stat_lines(plant: Optional["PlantInstance"]) -> List[Tuple[str, str]]:
    """(label, value) rows for the info panel."""
    if plant is None:
        return [("Empty", "")]
    species = plant.species
    return [
        ("Max Age: ", str(species.max_age)),
        ("Size per Turn: ", str(species.growth_per_turn)),
        ("Points per Size: ", f"{species.points_per_size:g}"),
        ("Points: ", f"{plant.projected_points:g}"),
    ]


def render_plant_info(surface, font, title_font, state: "GameState", rect: pygame.Rect) -> None:
    """Draw the stat block of the plant in focus."""
    plant = state.info_plant()
    title = f" {plant.name} " if plant is not None else ""
    y = draw_panel(surface, title_font, rect, title, active=False)
    x = rect.x + PANEL_PADDING

    for label, value in plant_stat_lines(plant):
        if y + LINE_HEIGHT > rect.bottom:
            break
        if value:
            draw_text(surface, font, label, (x, y), color=COLOR_TEXT_LABEL)
            draw_text(surface, font, value, (x + font.size(label)[0], y), color=COLOR_TEXT_WHITE)
        else:
            draw_text(surface, font, label, (x, y), color=COLOR_TEXT_GRAY)
        y += LINE_HEIGHT


def render_next_round(surface, font, title_font, state: "GameState", rect: pygame.Rect) -> None:
    """Draw the Next Round panel, lit while in Next Round mode."""
    y = draw_panel(surface, title_font, rect, "", active=state.mode is Mode.NEXT_ROUND)
    draw_text(surface, title_font, "Next Round", (rect.x + PANEL_PADDING, rect.y + PANEL_PADDING))
    if y + LINE_HEIGHT <= rect.bottom:
        draw_text(surface, font, f"Plants on board: {state.board.occupied_count()}", (rect.x + PANEL_PADDING, y), color=COLOR_TEXT_GRAY)
