import math
from dataclasses import dataclass
from typing import Optional, Tuple

# Puzzle-local space: origin at the grid center, x to the right, y up.
Point = Tuple[float, float]

CLUE_SPACING = 15.0


@dataclass(frozen=True)
class GridLayout:
    """Square grid of cell_count x cell_count cells, side grid_size_px, centered on the origin.

    Row 0 is the top visual row and column 0 the leftmost column, the same order
    as the rows of the solution matrix.
    """

    grid_size_px: float
    cell_count: int

    @property
    def cell_size(self) -> float:
        return self.grid_size_px / self.cell_count

    @property
    def grid_offset(self) -> float:
        # Center of cell (row N-1, col 0); cells are anchored at their centers.
        return -(self.grid_size_px - self.cell_size) / 2.0

    def is_valid(self) -> bool:
        return self.cell_count > 0 and self.grid_size_px > 0

    def locate(self, point: Point) -> Optional[Tuple[int, int]]:
        """Return the (row, col) under a puzzle-local point, or None outside the grid."""
        if not self.is_valid():
            return None
        cell_size = self.cell_size
        x, y = point
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        adj_x = x - self.grid_offset + cell_size / 2.0
        adj_y = y - self.grid_offset + cell_size / 2.0
        if adj_x < 0 or adj_y < 0:
            return None

        col = int(math.floor(adj_x / cell_size))
        flipped_row = int(math.floor(adj_y / cell_size))
        if col >= self.cell_count or flipped_row >= self.cell_count:
            return None
        return self.cell_count - 1 - flipped_row, col

    def cell_center(self, row: int, col: int) -> Point:
        """Where the cell (row, col) is drawn. Inverse of locate()."""
        cell_size = self.cell_size
        x = self.grid_offset + col * cell_size
        y = self.grid_offset + (self.cell_count - 1 - row) * cell_size
        return x, y

    def row_clue_position(self, row: int, index_from_right: int) -> Point:
        _, y = self.cell_center(row, 0)
        return -self.grid_size_px / 2.0 - CLUE_SPACING * (index_from_right + 1), y

    def column_clue_position(self, col: int, index_from_bottom: int) -> Point:
        x, _ = self.cell_center(0, col)
        return x, self.grid_size_px / 2.0 + CLUE_SPACING * (index_from_bottom + 1)


def locate(point: Point, grid_size_px: float, cell_count: int) -> Optional[Tuple[int, int]]:
    return GridLayout(grid_size_px, cell_count).locate(point)
