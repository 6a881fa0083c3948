"""
Rendering module for Forest pygame frontend.

Provides modular rendering functions for the board, side panels and overlays.
"""
from render.primitives import draw_text, draw_panel
from render.board import render_board, board_title, cell_text_color
from render.sidebar import render_hand, render_plant_info, render_next_round, plant_stat_lines
from render.overlays import render_help_overlay, render_event_log

__all__ = [
    # Primitives
    "draw_text",
    "draw_panel",
    # Board
    "render_board",
    "board_title",
    "cell_text_color",
    # Side panels
    "render_hand",
    "render_plant_info",
    "render_next_round",
    "plant_stat_lines",
    # Overlays
    "render_help_overlay",
    "render_event_log",
]
