import random
from typing import Iterable

from .grid import Grid, Position


def place_food(grid: Grid, body: Iterable[Position], rng: random.Random) -> Position:
    """
    Pick a uniformly random cell not occupied by `body`.

    Resamples until it hits a free cell, which is quick while the board is
    sparse. A full board has no free cell; that is the caller's win
    condition, so it raises instead of spinning forever.
    """
    occupied = set(body)
    size = grid.size
    if len(occupied) >= size * size:
        raise ValueError("no free cell left for food: the body fills the grid")
    while True:
        fx = rng.randrange(size)
        fy = rng.randrange(size)
        if (fx, fy) not in occupied:
            return (fx, fy)
