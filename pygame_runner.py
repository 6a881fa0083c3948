# pygame_runner.py
"""
Pygame-CE frontend for the Forest prototype.

Architecture:
- Virtual screen space: fixed 1280x720 UI layout surface
- Screen space: actual window pixels (scales with resize)

The runner only translates key presses into engine Commands and draws
the game state. It never changes the state itself.

Controls:
- Arrows / W/A/S/D: move hand selection or board cursor
- Space: confirm (pick plant, place plant, next round)
- Tab: switch between Plants, Next Round and Board
- Q / Delete: dig up a plant placed this round
- Enter: advance a round from anywhere
- H: show help
- ESC: quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

try:
    import pygame
except ImportError as exc:
    raise SystemExit("pygame-ce is required. Install with: pip install pygame-ce") from exc

from config import DEFAULT_BOARD_SIZE
from main import GameState, build_initial_state, handle_command
from plants import CatalogError, PlantCatalog, default_catalog, load_catalog
from keybindings import CONTROL_DESCRIPTIONS, HELP_KEY, command_for_key
from ui_state import UIState
from render.config import (
    VIRTUAL_WIDTH,
    VIRTUAL_HEIGHT,
    FONT_SIZE,
    TITLE_FONT_SIZE,
    COLOR_BG,
)
from render import (
    render_board,
    render_hand,
    render_plant_info,
    render_next_round,
    render_event_log,
    render_help_overlay,
)

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for the board side length."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"board size must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Forest - plant, wait, harvest.")
    parser.add_argument("-d", "--dim", type=positive_int, default=DEFAULT_BOARD_SIZE,
                        help="board side length (default: %(default)s)")
    parser.add_argument("-p", "--plants", default=None,
                        help="species JSON file (default: built-in species)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for plant drops")
    return parser.parse_args(argv)


def render_to_virtual_screen(
    virtual_screen: pygame.Surface,
    font,
    title_font,
    state: GameState,
    ui_state: UIState,
) -> None:
    """Render everything to the virtual screen at fixed resolution."""
    virtual_screen.fill(COLOR_BG)

    render_board(virtual_screen, font, title_font, state, ui_state.board_rect)
    render_hand(virtual_screen, font, title_font, state, ui_state.hand_rect)
    render_plant_info(virtual_screen, font, title_font, state, ui_state.info_rect)
    render_next_round(virtual_screen, font, title_font, state, ui_state.next_round_rect)

    if ui_state.show_help:
        render_help_overlay(virtual_screen, font, CONTROL_DESCRIPTIONS, ui_state.log_panel_rect)
    else:
        render_event_log(virtual_screen, font, state, ui_state.log_panel_rect)


def blit_virtual_to_screen(virtual_screen: pygame.Surface, screen: pygame.Surface) -> None:
    """Scale and blit the virtual screen to the actual display, with letterboxing."""
    screen_w, screen_h = screen.get_size()
    scale = min(screen_w / VIRTUAL_WIDTH, screen_h / VIRTUAL_HEIGHT)
    scaled_w = int(VIRTUAL_WIDTH * scale)
    scaled_h = int(VIRTUAL_HEIGHT * scale)
    offset_x = (screen_w - scaled_w) // 2
    offset_y = (screen_h - scaled_h) // 2

    screen.fill((0, 0, 0))
    scaled = pygame.transform.smoothscale(virtual_screen, (scaled_w, scaled_h))
    screen.blit(scaled, (offset_x, offset_y))


def run(state: GameState) -> None:
    """Main game loop. Returns when the player quits."""
    pygame.init()

    virtual_screen = pygame.Surface((VIRTUAL_WIDTH, VIRTUAL_HEIGHT))
    screen = pygame.display.set_mode((VIRTUAL_WIDTH, VIRTUAL_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Forest")

    font = pygame.font.Font(None, FONT_SIZE)
    title_font = pygame.font.Font(None, TITLE_FONT_SIZE)
    clock = pygame.time.Clock()
    ui_state = UIState()

    running = True
    while running:
        # Input only; nothing advances between key presses
        clock.tick(30)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type != pygame.KEYDOWN:
                continue

            if event.key == HELP_KEY:
                ui_state.toggle_help()
                continue

            cmd = command_for_key(event.key)
            if cmd is None:
                continue
            if handle_command(state, cmd):
                running = False
                break

        render_to_virtual_screen(virtual_screen, font, title_font, state, ui_state)
        blit_virtual_to_screen(virtual_screen, screen)
        pygame.display.flip()

    pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    if not logging.getLogger().handlers:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            level=logging.INFO,
        )

    args = parse_args(argv)
    try:
        catalog: PlantCatalog = load_catalog(args.plants) if args.plants else default_catalog()
    except CatalogError as exc:
        logger.error("Invalid species definitions: %s", exc)
        return 1

    state = build_initial_state(board_size=args.dim, catalog=catalog, seed=args.seed)
    logger.info("Starting %dx%d game with %d species", state.width, state.height, len(catalog))
    run(state)
    logger.info("Final score %g after %d rounds", state.score, state.round)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
