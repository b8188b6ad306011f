import pytest
import sys
import os

# Add project root to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from nonogram_model import CellState, Puzzle
from nonogram_layout import GridLayout, CLUE_SPACING
from nonogram_drawing import Camera, pick_cell_from_mouse
from nonogram_ui import (
    GRID_SIZE, MODE_GAME, SIDE_PANEL_WIDTH, WINDOW_HEIGHT, WINDOW_WIDTH,
    GameState, grid_center, handle_click, load_puzzle, parse_args, update_solved,
)


def make_state(solution) -> GameState:
    puzzle = Puzzle(solution)
    return GameState(puzzle=puzzle, layout=GridLayout(300.0, puzzle.size), mode=MODE_GAME)


def test_camera_flips_y():
    camera = Camera(center_x=400.0, center_y=300.0)
    assert camera.screen_to_local(400, 300) == (0.0, 0.0)
    assert camera.screen_to_local(410, 280) == (10.0, 20.0)
    assert camera.local_to_screen(10.0, 20.0) == (410.0, 280.0)


def test_pick_cell_from_mouse_round_trip():
    layout = GridLayout(300.0, 10)
    camera = Camera(center_x=450.0, center_y=320.0)
    for r in range(10):
        for c in range(10):
            sx, sy = camera.local_to_screen(*layout.cell_center(r, c))
            assert pick_cell_from_mouse(layout, camera, (int(sx), int(sy))) == (r, c)


def test_pick_cell_outside_grid():
    layout = GridLayout(300.0, 10)
    camera = Camera(center_x=450.0, center_y=320.0)
    assert pick_cell_from_mouse(layout, camera, (10, 10)) is None
    # top-left screen pixel of the board is row 0, col 0
    assert pick_cell_from_mouse(layout, camera, (301, 171)) == (0, 0)


def test_handle_click_buttons():
    state = make_state([[True, False], [False, True]])
    assert handle_click(state, (0, 0), 1) == CellState.FILLED
    assert handle_click(state, (0, 0), 3) == CellState.CROSSED
    assert handle_click(state, (0, 0), 3) == CellState.EMPTY
    assert handle_click(state, (1, 1), 2) is None
    assert state.puzzle.cell_state(1, 1) == CellState.EMPTY


def test_update_solved_reports_transitions():
    state = make_state([[True]])
    assert update_solved(state) is None
    handle_click(state, (0, 0), 1)
    assert "Solved" in update_solved(state)
    assert state.was_solved
    assert update_solved(state) is None
    handle_click(state, (0, 0), 1)
    assert update_solved(state) == "Not solved anymore."
    assert not state.was_solved


def test_load_puzzle_default():
    puzzle, msg = load_puzzle(None)
    assert puzzle.size == 10
    assert "built-in" in msg


def test_load_puzzle_falls_back_on_bad_file(tmp_path):
    path = tmp_path / "bad.no.txt"
    path.write_text("#.#\n...\n", encoding="utf-8")
    puzzle, msg = load_puzzle(str(path))
    assert puzzle.size == 10
    assert "Load failed" in msg


def test_load_puzzle_from_file(tmp_path):
    path = tmp_path / "ok.no.txt"
    path.write_text("##\n.#\n", encoding="utf-8")
    puzzle, msg = load_puzzle(str(path))
    assert puzzle.row_clues() == [[2], [1]]
    assert str(path) in msg


def test_parse_args():
    args = parse_args(["--puzzle", "puzzles/boat.no.txt", "--no-menu", "--log-level", "DEBUG"])
    assert args.puzzle == "puzzles/boat.no.txt"
    assert args.no_menu
    assert args.log_level == "DEBUG"
    args = parse_args([])
    assert args.puzzle is None and not args.no_menu


def test_board_and_clues_fit_beside_side_panel():
    cx, cy = grid_center((WINDOW_WIDTH, WINDOW_HEIGHT))
    # room for up to five clue numbers left of and above a 10x10 board
    clue_room = 5 * CLUE_SPACING
    assert cx - GRID_SIZE / 2 - clue_room > SIDE_PANEL_WIDTH
    assert cx + GRID_SIZE / 2 < WINDOW_WIDTH
    assert cy - GRID_SIZE / 2 - clue_room > 0
    assert cy + GRID_SIZE / 2 < WINDOW_HEIGHT
