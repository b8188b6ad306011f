"""
Puzzle provider: the built-in picture and a loader for solution text files.

File format (one row per line, blank lines ignored):
- character grid:  ##....##.
- or tokens:       1 1 0 0 0 0 0 1 1 0
Filled: '#', 'X', 'x', '1'. Empty: '.', '-', '0'.
"""

import logging
from typing import List, Optional, Tuple

from nonogram_model import NonogramError

logger = logging.getLogger(__name__)

FILLED_CHARS = {"#", "X", "x", "1"}
EMPTY_CHARS = {".", "-", "0"}

DEFAULT_SOLUTION_TEXT = """\
##.....##.
...#.#.###
####...###
.#......##
........##
......#.##
....#.####
#####.#..#
#######...
#######...
"""


class PuzzleFileError(NonogramError):
    """Puzzle file could not be read or parsed."""


def _parse_token(tok: str) -> Optional[bool]:
    if tok in FILLED_CHARS:
        return True
    if tok in EMPTY_CHARS:
        return False
    return None


def parse_solution_text(text: str) -> Tuple[bool, str, List[List[bool]]]:
    lines = [ln.strip() for ln in text.splitlines() if ln.strip() != ""]
    if not lines:
        return False, "Empty input.", []

    grid: List[List[bool]] = []
    for ln in lines:
        # tokenized if whitespace exists, else a char grid
        toks = ln.split() if any(ch.isspace() for ch in ln) else list(ln)
        row: List[bool] = []
        for t in toks:
            v = _parse_token(t)
            if v is None:
                return False, f"Bad token: {t}", []
            row.append(v)
        grid.append(row)

    cols = len(grid[0])
    if any(len(r) != cols for r in grid):
        return False, "Ragged rows: all rows must have the same number of columns.", []
    if cols != len(grid):
        return False, f"Solution must be square, got {len(grid)}x{cols}.", []
    return True, "Loaded.", grid


def default_solution() -> List[List[bool]]:
    ok, msg, grid = parse_solution_text(DEFAULT_SOLUTION_TEXT)
    if not ok:
        raise PuzzleFileError(f"Built-in puzzle is invalid: {msg}")
    return grid


def load_solution_file(path: str) -> List[List[bool]]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            txt = f.read()
    except OSError as e:
        raise PuzzleFileError(f"Cannot read '{path}': {e}") from e

    ok, msg, grid = parse_solution_text(txt)
    if not ok:
        raise PuzzleFileError(f"Cannot parse '{path}': {msg}")
    logger.info("Loaded puzzle file %s (%dx%d)", path, len(grid), len(grid))
    return grid
