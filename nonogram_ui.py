"""
Nonogram (Pygame)

Features:
- Menu Mode: title and PLAY button.
- Game Mode: fill / cross cells until the picture matches the row and column clues.

Controls (Game):
- Left click: toggle Filled (clicking a filled cell again clears it)
- Right click: toggle Crossed (clicking a crossed cell again clears it)
- Buttons: Reset (clear the board), Menu (back to the title screen)

Usage:
    python nonogram_ui.py [--puzzle puzzles/boat.no.txt] [--no-menu] [--log-level DEBUG]
"""

import argparse
import logging
from dataclasses import dataclass
from typing import Tuple, Optional, List

import pygame
import pygame_gui

from nonogram_model import Puzzle, CellState, InvalidSolution, new_puzzle
from nonogram_layout import GridLayout
from nonogram_drawing import Camera, draw_puzzle, pick_cell_from_mouse
from puzzle_pack import PuzzleFileError, default_solution, load_solution_file
import grid_style

logger = logging.getLogger(__name__)


# ----------------------------
# UI Constants & Enums
# ----------------------------
MODE_MENU = 0
MODE_GAME = 1

WINDOW_WIDTH = 900
WINDOW_HEIGHT = 640
SIDE_PANEL_WIDTH = 260
GRID_SIZE = 300.0
FPS = 60
CLUE_FONT_SIZE = 16
MAX_LOG_LINES = 100


# ----------------------------
# App state
# ----------------------------

@dataclass
class GameState:
    puzzle: Puzzle
    layout: GridLayout
    mode: int = MODE_MENU
    was_solved: bool = False


# ----------------------------
# Helpers
# ----------------------------

def html_escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
         .replace("<", "&lt;")
         .replace(">", "&gt;")
         .replace('"', "&quot;")
         .replace("'", "&#39;")
    )


def load_puzzle(path: Optional[str]) -> Tuple[Puzzle, str]:
    """Build the puzzle from a file, falling back to the built-in picture."""
    if path:
        try:
            return new_puzzle(load_solution_file(path)), f"Loaded puzzle: {path}"
        except (PuzzleFileError, InvalidSolution) as e:
            logger.error("Falling back to the built-in puzzle: %s", e)
            return new_puzzle(default_solution()), f"Load failed ({e}); using built-in puzzle."
    return new_puzzle(default_solution()), "Loaded built-in puzzle."


def grid_center(screen_size: Tuple[int, int]) -> Tuple[float, float]:
    sw, sh = screen_size
    return SIDE_PANEL_WIDTH + (sw - SIDE_PANEL_WIDTH) * 0.5, sh * 0.5 + 40


def handle_click(state: GameState, cell: Tuple[int, int], button: int) -> Optional[CellState]:
    """Apply a mouse button to a cell. Returns the new cell state, or None for other buttons."""
    r, c = cell
    if button == 1:
        return state.puzzle.toggle_cell(r, c, CellState.FILLED)
    if button == 3:
        return state.puzzle.toggle_cell(r, c, CellState.CROSSED)
    return None


def update_solved(state: GameState) -> Optional[str]:
    """Re-run the win check after an action. Returns a message when the solved status changes."""
    solved = state.puzzle.is_solved()
    msg = None
    if solved and not state.was_solved:
        msg = "Solved! The picture matches every clue."
    elif state.was_solved and not solved:
        msg = "Not solved anymore."
    state.was_solved = solved
    return msg


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Nonogram puzzle game.")
    parser.add_argument("--puzzle", help="Path to a solution text file (default: built-in puzzle).")
    parser.add_argument("--no-menu", action="store_true", help="Start directly in the game.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...).")
    return parser.parse_args(argv)


# ----------------------------
# Main
# ----------------------------

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    puzzle, load_msg = load_puzzle(args.puzzle)
    state = GameState(
        puzzle=puzzle,
        layout=GridLayout(GRID_SIZE, puzzle.size),
        mode=MODE_GAME if args.no_menu else MODE_MENU,
    )

    pygame.init()
    pygame.display.set_caption("Nonogram")

    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    clue_font = pygame.font.SysFont("arial", CLUE_FONT_SIZE, bold=True)
    title_font = pygame.font.SysFont("arial", 40, bold=True)

    ui_manager = pygame_gui.UIManager(screen.get_size())

    # Menu
    btn_play = pygame_gui.elements.UIButton(
        pygame.Rect(0, 0, 120, 36),
        "PLAY",
        ui_manager,
        anchors={"center": "center"}
    )

    # Game
    controls_win = pygame_gui.elements.UIWindow(
        pygame.Rect(10, 10, SIDE_PANEL_WIDTH - 20, 170),
        ui_manager,
        window_display_title="Controls",
        visible=False
    )
    controls_win.close_window_button.hide()
    log_win = pygame_gui.elements.UIWindow(
        pygame.Rect(10, 190, SIDE_PANEL_WIDTH - 20, 420),
        ui_manager,
        window_display_title="Log",
        visible=False,
        resizable=True
    )
    log_win.close_window_button.hide()

    btn_reset = pygame_gui.elements.UIButton(pygame.Rect(10, 10, 190, 36), "Reset", ui_manager, container=controls_win)
    btn_menu = pygame_gui.elements.UIButton(pygame.Rect(10, 56, 190, 36), "Menu", ui_manager, container=controls_win)

    log_box = pygame_gui.elements.UITextBox(
        html_text="",
        relative_rect=pygame.Rect(10, 10, 190, 300),
        manager=ui_manager,
        container=log_win,
        anchors={"left": "left", "right": "right", "top": "top", "bottom": "bottom"}
    )

    camera = Camera()
    camera.center_x, camera.center_y = grid_center(screen.get_size())

    log_lines: List[str] = []

    def log_append(msg: str) -> None:
        if not msg:
            return
        logger.info(msg)
        for line in msg.splitlines():
            line = line.strip()
            if line:
                log_lines.append(line)

        # Keep a reasonable history
        if len(log_lines) > MAX_LOG_LINES:
            del log_lines[0:len(log_lines) - MAX_LOG_LINES]

        html = "<br>".join(html_escape(ln) for ln in log_lines)
        log_box.set_text(html)

        # Auto-scroll to bottom
        if log_box.scroll_bar is not None:
            log_box.scroll_bar.set_scroll_from_start_percentage(1.0)

    def show_mode(mode: int) -> None:
        state.mode = mode
        if mode == MODE_MENU:
            btn_play.show()
            controls_win.hide()
            log_win.hide()
        else:
            btn_play.hide()
            controls_win.show()
            log_win.show()

    def is_over_ui(pos: Tuple[int, int]) -> bool:
        for w in (controls_win, log_win):
            if w.visible and w.get_abs_rect().collidepoint(pos):
                return True
        return False

    show_mode(state.mode)
    log_append(load_msg)
    log_append("Left click: fill. Right click: cross.")

    running = True
    while running:
        time_delta = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break

            if event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                ui_manager.set_window_resolution(event.size)
                camera.center_x, camera.center_y = grid_center(event.size)

            ui_manager.process_events(event)

            if event.type == pygame_gui.UI_BUTTON_PRESSED:
                if event.ui_element == btn_play:
                    show_mode(MODE_GAME)
                    log_append("Game started.")

                elif event.ui_element == btn_menu:
                    show_mode(MODE_MENU)

                elif event.ui_element == btn_reset:
                    state.puzzle.reset()
                    state.was_solved = False
                    log_append("Board cleared.")

            if event.type == pygame.MOUSEBUTTONDOWN and state.mode == MODE_GAME:
                if event.button in (1, 3) and not is_over_ui(event.pos):
                    cell = pick_cell_from_mouse(state.layout, camera, event.pos)
                    if cell is not None:
                        new_state = handle_click(state, cell, event.button)
                        logger.debug("Cell %s -> %s", cell, new_state)
                    msg = update_solved(state)
                    if msg:
                        log_append(msg)

        ui_manager.update(time_delta)

        screen.fill(grid_style.COLOR_BG)

        if state.mode == MODE_MENU:
            title = title_font.render("NONOGRAM", True, grid_style.COLOR_TEXT_TITLE)
            screen.blit(title, ((screen.get_width() - title.get_width()) // 2, screen.get_height() // 2 - 100))
        else:
            draw_puzzle(screen, state.puzzle, state.layout, camera, clue_font)
            if state.was_solved:
                banner = clue_font.render("SOLVED", True, grid_style.COLOR_TEXT_SOLVED)
                screen.blit(banner, (int(camera.center_x - banner.get_width() / 2), screen.get_height() - 40))

        ui_manager.draw_ui(screen)

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
