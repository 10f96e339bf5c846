"""
Grid model: a square matrix of cell markers backed by a numpy array.

Cells are indexed [y, x] internally; every public helper takes (x, y)
positions, matching the rest of the game.
"""
from enum import IntEnum
from typing import List, Tuple

import numpy as np  # type: ignore

Position = Tuple[int, int]


class Cell(IntEnum):
    EMPTY = 0
    SNAKE = 1
    FOOD = 2


_GLYPHS = {Cell.EMPTY: ".", Cell.SNAKE: "#", Cell.FOOD: "*"}


class Grid:
    """N x N board of Cell markers. Mutated only by the movement engine."""

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"grid size must be positive, got {size}")
        self.cells = np.zeros((size, size), dtype=np.int8)

    @property
    def size(self) -> int:
        return self.cells.shape[0]

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.size and 0 <= y < self.size

    def mark(self, position: Position, cell: Cell) -> None:
        # No bounds check: callers validate before mutating.
        x, y = position
        self.cells[y, x] = cell

    def at(self, position: Position) -> Cell:
        x, y = position
        return Cell(int(self.cells[y, x]))

    def positions_of(self, cell: Cell) -> List[Position]:
        """All (x, y) positions holding `cell`, row by row."""
        ys, xs = np.nonzero(self.cells == cell)
        return list(zip(xs.tolist(), ys.tolist()))

    def count(self, cell: Cell) -> int:
        return int(np.count_nonzero(self.cells == cell))

    def view(self) -> np.ndarray:
        """Read-only view for renderers; writes through it raise."""
        v = self.cells.view()
        v.flags.writeable = False
        return v

    def to_text(self) -> str:
        """
        Printable board, top row first:
          . = empty
          # = snake
          * = food
        """
        return "\n".join(
            "".join(_GLYPHS[Cell(int(c))] for c in row) for row in self.cells
        )

    def __repr__(self):
        return (
            f"<Grid size={self.size}, snake={self.count(Cell.SNAKE)}, "
            f"food={self.count(Cell.FOOD)}>"
        )


def init_grid(size: int, initial_position: Position) -> Grid:
    """Fresh grid of EMPTY cells with the initial snake cell marked."""
    grid = Grid(size)
    if not grid.in_bounds(initial_position):
        raise ValueError(
            f"initial position {initial_position} is outside a {size}x{size} grid"
        )
    grid.mark(initial_position, Cell.SNAKE)
    return grid
