import pygame
from dataclasses import dataclass
from typing import Tuple, Optional
from nonogram_model import Puzzle, CellState
from nonogram_layout import GridLayout, Point
import grid_style

@dataclass
class Camera:
    """Maps screen pixels (y down) to puzzle-local space (origin at grid center, y up)."""
    center_x: float = 0.0
    center_y: float = 0.0

    def screen_to_local(self, sx: float, sy: float) -> Point:
        return sx - self.center_x, self.center_y - sy

    def local_to_screen(self, lx: float, ly: float) -> Tuple[float, float]:
        return lx + self.center_x, self.center_y - ly

def cell_rect(layout: GridLayout, camera: Camera, r: int, c: int) -> pygame.Rect:
    lx, ly = layout.cell_center(r, c)
    sx, sy = camera.local_to_screen(lx, ly)
    size = layout.cell_size
    return pygame.Rect(int(round(sx - size / 2)), int(round(sy - size / 2)), int(round(size)), int(round(size)))

def _blit_centered(screen: pygame.Surface, surf: pygame.Surface, pos: Tuple[float, float]) -> None:
    x, y = pos
    screen.blit(surf, (int(x - surf.get_width() / 2), int(y - surf.get_height() / 2)))

def draw_puzzle(
    screen: pygame.Surface,
    puzzle: Puzzle,
    layout: GridLayout,
    camera: Camera,
    font: pygame.font.Font,
) -> None:
    n = puzzle.size
    half = layout.grid_size_px / 2
    left, top = camera.local_to_screen(-half, half)
    board = pygame.Rect(int(left), int(top), int(layout.grid_size_px), int(layout.grid_size_px))
    pygame.draw.rect(screen, grid_style.COLOR_BOARD, board)

    for r in range(n):
        for c in range(n):
            state = puzzle.cell_state(r, c)
            if state == CellState.EMPTY:
                continue
            rect = cell_rect(layout, camera, r, c).inflate(-2, -2)
            if state == CellState.FILLED:
                pygame.draw.rect(screen, grid_style.COLOR_FILLED, rect)
            elif state == CellState.CROSSED:
                pygame.draw.line(screen, grid_style.COLOR_CROSS, rect.topleft, rect.bottomright, 2)
                pygame.draw.line(screen, grid_style.COLOR_CROSS, rect.bottomleft, rect.topright, 2)

    # Grid lines, every 5th one thicker
    for i in range(1, n):
        offset = layout.cell_size * i
        thickness = grid_style.GRID_LINE_THICKNESS_MAJOR if i % 5 == 0 else grid_style.GRID_LINE_THICKNESS
        x = board.left + int(round(offset))
        y = board.top + int(round(offset))
        pygame.draw.line(screen, grid_style.COLOR_GRID_LINES, (x, board.top), (x, board.bottom - 1), thickness)
        pygame.draw.line(screen, grid_style.COLOR_GRID_LINES, (board.left, y), (board.right - 1, y), thickness)
    pygame.draw.rect(screen, grid_style.COLOR_GRID_LINES, board, grid_style.GRID_LINE_THICKNESS)

    for r, clue in enumerate(puzzle.row_clues()):
        for j, run in enumerate(reversed(clue)):
            surf = font.render(str(run), True, grid_style.COLOR_TEXT_CLUE)
            _blit_centered(screen, surf, camera.local_to_screen(*layout.row_clue_position(r, j)))

    for c, clue in enumerate(puzzle.column_clues()):
        for j, run in enumerate(reversed(clue)):
            surf = font.render(str(run), True, grid_style.COLOR_TEXT_CLUE)
            _blit_centered(screen, surf, camera.local_to_screen(*layout.column_clue_position(c, j)))

def pick_cell_from_mouse(layout: GridLayout, camera: Camera, mouse_pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
    mx, my = mouse_pos
    return layout.locate(camera.screen_to_local(mx, my))
