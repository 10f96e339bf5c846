"""Grid-based snake game engine."""

from .config import Config, Direction, GameStatus, DELTA, OPPOSITE
from .grid import Cell, Grid, init_grid
from .food import place_food
from .direction import set_direction, is_opposite
from .game import GameState, Outcome, advance, new_game_state
from .ticker import Ticker
from .session import GameSession

__all__ = [
    "Config", "Direction", "GameStatus", "DELTA", "OPPOSITE",
    "Cell", "Grid", "init_grid",
    "place_food",
    "set_direction", "is_opposite",
    "GameState", "Outcome", "advance", "new_game_state",
    "Ticker",
    "GameSession",
]
