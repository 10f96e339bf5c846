# game.py
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Optional
import logging
import random

from .config import Config, Direction, DELTA, CFG
from .food import place_food
from .grid import Cell, Grid, Position, init_grid

logger = logging.getLogger(__name__)


class Outcome(Enum):
    WALL = "wall"
    SELF = "self"
    FULL = "full"   # body covers the whole board: nothing left to eat


# ---------- State ----------
@dataclass
class GameState:
    grid: Grid
    body: Deque[Position]          # head at index 0
    food: Optional[Position]
    rng: random.Random = field(default_factory=random.Random, repr=False)
    outcome: Optional[Outcome] = None

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)


def new_game_state(config: Config = CFG, rng: Optional[random.Random] = None) -> GameState:
    if rng is None:
        rng = random.Random(config.seed)
    grid = init_grid(config.grid_size, config.initial_position)
    body = deque([config.initial_position])
    if len(body) >= grid.size * grid.size:
        # A 1x1 board is full from the start: already won.
        return GameState(grid=grid, body=body, food=None, rng=rng, outcome=Outcome.FULL)
    food = place_food(grid, body, rng)
    grid.mark(food, Cell.FOOD)
    return GameState(grid=grid, body=body, food=food, rng=rng)


# ---------- Update ----------
def advance(state: GameState, direction: Direction) -> bool:
    """
    Advance the snake one cell in `direction`.
    Mutates `state` in place. Returns True to keep playing, False when the
    game is over; `state.outcome` then says why.
    """
    if state.outcome is not None:
        return False

    grid = state.grid
    hx, hy = state.head
    dx, dy = DELTA[direction]
    new_head = (hx + dx, hy + dy)

    # Wall collision (before any grid read)
    if not grid.in_bounds(new_head):
        state.outcome = Outcome.WALL
        return False

    # Self collision, against the grid as it was before this tick
    target = grid.at(new_head)
    if target is Cell.SNAKE:
        state.outcome = Outcome.SELF
        return False

    # Move / grow
    growing = target is Cell.FOOD
    if not growing:
        tail = state.body.pop()
        grid.mark(tail, Cell.EMPTY)

    grid.mark(new_head, Cell.SNAKE)
    state.body.appendleft(new_head)

    if growing:
        if state.length >= grid.size * grid.size:
            state.food = None
            state.outcome = Outcome.FULL
            return False
        state.food = place_food(grid, state.body, state.rng)
        grid.mark(state.food, Cell.FOOD)
        logger.debug("Ate food at %s, length %d, next food at %s",
                     new_head, state.length, state.food)

    return True
