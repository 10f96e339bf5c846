import random
from collections import deque

import pytest

from gridsnake.game import GameState
from gridsnake.grid import Cell, Grid


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> int:
        self.now += ms
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def make_state(size, body, food=None, seed=0):
    """Build a GameState with the grid painted to match body and food."""
    grid = Grid(size)
    for pos in body:
        grid.mark(pos, Cell.SNAKE)
    if food is not None:
        grid.mark(food, Cell.FOOD)
    return GameState(grid=grid, body=deque(body), food=food, rng=random.Random(seed))
