# render/board.py
"""Board panel rendering: cells, plant labels and the placement cursor."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from board import Cell, CellStage
from game_state import Mode
from render.primitives import draw_panel, draw_text
from render.config import (
    Color,
    CELL_FILL,
    COLOR_ACTIVE,
    COLOR_INACTIVE,
    COLOR_EXPIRING,
    COLOR_JUST_PLACED,
    PANEL_PADDING,
)

if TYPE_CHECKING:
    from game_state import GameState


def board_title(state: "GameState") -> str:
    """Panel title with running score and round."""
    return f" Forest // Score: {state.score:g} // Round: {state.round} "


def cell_text_color(cell: Cell) -> Color:
    """Yellow for plants placed this round, magenta for plants about to expire."""
    if cell.stage is CellStage.JUST_PLACED:
        return COLOR_JUST_PLACED
    if cell.stage is CellStage.GROWING and cell.plant.expiring_soon:
        return COLOR_EXPIRING
    return COLOR_INACTIVE


def render_board(surface, font, title_font, state: "GameState", rect: pygame.Rect) -> None:
    """Draw the board panel into rect."""
    placing = state.mode is Mode.PLACING
    top = draw_panel(surface, title_font, rect, board_title(state), active=placing)

    area = pygame.Rect(rect.x + PANEL_PADDING, top, rect.width - 2 * PANEL_PADDING, rect.bottom - top - PANEL_PADDING)
    cell_size = min(area.width // state.width, area.height // state.height)
    if cell_size <= 0:
        return
    inset = int(cell_size * (1 - CELL_FILL) / 2)
    square = cell_size - 2 * inset
    # Center the grid inside the panel
    origin_x = area.x + (area.width - cell_size * state.width) // 2
    origin_y = area.y + (area.height - cell_size * state.height) // 2

    for (x, y), cell in state.board:
        px = origin_x + x * cell_size + inset
        py = origin_y + y * cell_size + inset
        under_cursor = placing and (x, y) == state.cursor.position
        outline = COLOR_ACTIVE if under_cursor else COLOR_INACTIVE
        pygame.draw.rect(surface, outline, (px, py, square, square), 3 if under_cursor else 1)

        if not cell.is_empty:
            draw_text(surface, font, cell.label, (px + square // 4, py + square // 2 - 8), color=cell_text_color(cell))
