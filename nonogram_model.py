import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# ----------------------------
# Domain model
# ----------------------------


class CellState(Enum):
    EMPTY = 0
    FILLED = 1
    CROSSED = 2


Solution = Tuple[Tuple[bool, ...], ...]
Clue = List[int]


class NonogramError(Exception):
    """Base class for puzzle errors."""


class InvalidSolution(NonogramError, ValueError):
    """Solution matrix is empty or not square."""


class OutOfBounds(NonogramError, IndexError):
    """Row/col outside the grid."""


def encode_runs(line: Sequence[bool]) -> Clue:
    """Run lengths of the filled cells in one line. A line without any filled cell gives [0]."""
    runs: Clue = []
    curr_run = 0
    for cell in line:
        if cell:
            curr_run += 1
        elif curr_run > 0:
            runs.append(curr_run)
            curr_run = 0

    if curr_run > 0:
        runs.append(curr_run)

    if not runs:
        runs.append(0)
    return runs


# (current, tool) -> new state
_TOGGLE_TRANSITIONS: Dict[Tuple[CellState, CellState], CellState] = {
    (CellState.EMPTY, CellState.FILLED): CellState.FILLED,
    (CellState.EMPTY, CellState.CROSSED): CellState.CROSSED,
    (CellState.FILLED, CellState.FILLED): CellState.EMPTY,
    (CellState.FILLED, CellState.CROSSED): CellState.CROSSED,
    (CellState.CROSSED, CellState.FILLED): CellState.FILLED,
    (CellState.CROSSED, CellState.CROSSED): CellState.EMPTY,
}

TOOLS = (CellState.FILLED, CellState.CROSSED)


class CellGrid:
    """Player marks for an N x N board. Knows nothing about the solution."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Grid size must be >= 1, got {size}")
        self.size = size
        self.cells: List[List[CellState]] = [
            [CellState.EMPTY for _ in range(size)] for _ in range(size)
        ]

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def _check_bounds(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            raise OutOfBounds(f"Cell ({r},{c}) is outside a {self.size}x{self.size} grid.")

    def get(self, r: int, c: int) -> CellState:
        self._check_bounds(r, c)
        return self.cells[r][c]

    def set(self, r: int, c: int, state: Optional[CellState] = None) -> None:
        """Set cell (r,c) to state, or back to EMPTY when state is None."""
        self._check_bounds(r, c)
        self.cells[r][c] = CellState.EMPTY if state is None else state

    def toggle(self, r: int, c: int, kind: CellState) -> CellState:
        """Same tool twice clears the cell, a different tool overwrites it. Returns the new state."""
        if kind not in TOOLS:
            raise ValueError(f"Toggle tool must be FILLED or CROSSED, got {kind}")
        self._check_bounds(r, c)
        new_state = _TOGGLE_TRANSITIONS[(self.cells[r][c], kind)]
        self.cells[r][c] = new_state
        return new_state

    def filled_mask(self) -> List[List[bool]]:
        return [[state == CellState.FILLED for state in row] for row in self.cells]

    def clear(self) -> None:
        for row in self.cells:
            for c in range(self.size):
                row[c] = CellState.EMPTY


class Puzzle:
    """
    A nonogram: a fixed solution, the clues derived from it and the player's grid.

    Clues are computed once here and never recomputed; the solution is stored as
    a tuple of tuples so it cannot change under them.
    """

    def __init__(self, solution: Sequence[Sequence[bool]]) -> None:
        size = len(solution)
        if size == 0:
            raise InvalidSolution("Solution must have at least one row.")
        for r, row in enumerate(solution):
            if len(row) != size:
                raise InvalidSolution(
                    f"Solution must be square: row {r} has {len(row)} cells, expected {size}."
                )

        self.size = size
        self._solution: Solution = tuple(tuple(bool(v) for v in row) for row in solution)

        self._row_clues: List[Clue] = [encode_runs(row) for row in self._solution]
        transpose = [[self._solution[r][c] for r in range(size)] for c in range(size)]
        self._col_clues: List[Clue] = [encode_runs(col) for col in transpose]

        self.grid = CellGrid(size)
        logger.info("Puzzle created: %dx%d, %d filled cells", size, size, self.filled_count())

    @property
    def solution(self) -> Solution:
        return self._solution

    def filled_count(self) -> int:
        return sum(sum(1 for v in row if v) for row in self._solution)

    def row_clues(self) -> List[Clue]:
        return [clue[:] for clue in self._row_clues]

    def column_clues(self) -> List[Clue]:
        return [clue[:] for clue in self._col_clues]

    def cell_state(self, r: int, c: int) -> CellState:
        return self.grid.get(r, c)

    def toggle_cell(self, r: int, c: int, kind: CellState) -> CellState:
        if not self.grid.in_bounds(r, c):
            raise OutOfBounds(f"Cell ({r},{c}) is outside a {self.size}x{self.size} puzzle.")
        new_state = self.grid.toggle(r, c, kind)
        logger.debug("Toggled (%d,%d) with %s -> %s", r, c, kind.name, new_state.name)
        return new_state

    def set_cell(self, r: int, c: int, state: Optional[CellState] = None) -> None:
        if not self.grid.in_bounds(r, c):
            raise OutOfBounds(f"Cell ({r},{c}) is outside a {self.size}x{self.size} puzzle.")
        self.grid.set(r, c, state)

    def is_solved(self) -> bool:
        mask = self.grid.filled_mask()
        return all(
            list(expected) == actual for expected, actual in zip(self._solution, mask)
        )

    def reset(self) -> None:
        self.grid.clear()
        logger.debug("Puzzle grid cleared.")


def new_puzzle(solution: Sequence[Sequence[bool]]) -> Puzzle:
    return Puzzle(solution)
