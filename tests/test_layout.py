import math
import pytest
import sys
import os

# Add project root to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from nonogram_layout import GridLayout, locate, CLUE_SPACING


@pytest.mark.parametrize("grid_size, n", [(300.0, 10), (300.0, 7), (100.0, 1), (250.0, 3), (333.0, 15)])
def test_cell_center_round_trip(grid_size, n):
    layout = GridLayout(grid_size, n)
    for r in range(n):
        for c in range(n):
            assert layout.locate(layout.cell_center(r, c)) == (r, c)


def test_row_zero_is_top_row():
    layout = GridLayout(300.0, 10)
    # y up: the top-left corner area belongs to row 0, col 0
    assert layout.locate((-149.0, 149.0)) == (0, 0)
    assert layout.locate((149.0, 149.0)) == (0, 9)
    assert layout.locate((-149.0, -149.0)) == (9, 0)
    assert layout.locate((149.0, -149.0)) == (9, 9)


def test_cell_center_coordinates():
    layout = GridLayout(300.0, 10)
    assert layout.cell_size == 30.0
    assert layout.cell_center(0, 0) == (-135.0, 135.0)
    assert layout.cell_center(9, 9) == (135.0, -135.0)


@pytest.mark.parametrize("point", [
    (-150.5, 0.0), (150.0, 0.0), (0.0, 150.0), (0.0, -150.5),
    (-400.0, -400.0), (1000.0, 2.0), (3.0, -1000.0),
    (math.inf, 0.0), (0.0, math.inf), (-math.inf, 0.0), (0.0, -math.inf),
    (math.nan, 0.0), (0.0, math.nan),
])
def test_outside_points(point):
    assert GridLayout(300.0, 10).locate(point) is None


def test_left_and_bottom_edges_are_inside():
    layout = GridLayout(300.0, 10)
    assert layout.locate((-150.0, 0.0)) == (4, 0)
    assert layout.locate((0.0, -150.0)) == (9, 5)


def test_cell_boundaries():
    layout = GridLayout(300.0, 10)
    # x = -120 is the boundary between col 0 and col 1
    assert layout.locate((-120.001, 0.0))[1] == 0
    assert layout.locate((-120.0, 0.0))[1] == 1


def test_degenerate_layout_returns_none():
    assert GridLayout(300.0, 0).locate((0.0, 0.0)) is None
    assert GridLayout(0.0, 5).locate((0.0, 0.0)) is None


def test_module_level_locate():
    assert locate((0.0, 0.0), 300.0, 10) == (4, 5)
    assert locate((500.0, 0.0), 300.0, 10) is None


def test_clue_positions_outside_grid():
    layout = GridLayout(300.0, 10)
    x, y = layout.row_clue_position(3, 0)
    assert x == -150.0 - CLUE_SPACING
    assert y == layout.cell_center(3, 0)[1]
    x, y = layout.column_clue_position(7, 1)
    assert x == layout.cell_center(0, 7)[0]
    assert y == 150.0 + 2 * CLUE_SPACING


def test_module_level_locate_non_finite_points():
    assert locate((math.inf, 0.0), 300.0, 10) is None
    assert locate((0.0, math.nan), 300.0, 10) is None
