from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Tuple

# ----- Rendering -----
CELL_SIZE = 16
HUD_HEIGHT = 32

# ----- Colors -----
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)


# ----- Directions -----
class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"


DELTA = MappingProxyType({
    Direction.UP:    (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.LEFT:  (-1, 0),
    Direction.DOWN:  (0, 1),
})

OPPOSITE = MappingProxyType({
    Direction.UP:    Direction.DOWN,
    Direction.DOWN:  Direction.UP,
    Direction.LEFT:  Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
})


# ----- Session lifecycle -----
class GameStatus(Enum):
    INIT = "init"
    PLAYING = "playing"
    SUSPENDED = "suspended"
    GAMEOVER = "gameover"


# ----- Defaults (slowest -> fastest) -----
GRID_SIZE = 35
INITIAL_POSITION = (17, 17)
DIFFICULTY_INTERVALS_MS = (1000, 500, 100, 50, 10)
DEFAULT_DIFFICULTY = 3
DEFAULT_INTERVAL_MS = 100


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    grid_size: int = GRID_SIZE
    initial_position: Tuple[int, int] = INITIAL_POSITION
    intervals_ms: Tuple[int, ...] = DIFFICULTY_INTERVALS_MS
    default_difficulty: int = DEFAULT_DIFFICULTY
    default_interval_ms: int = DEFAULT_INTERVAL_MS
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        x, y = self.initial_position
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ValueError(
                f"initial_position {self.initial_position} is outside a "
                f"{self.grid_size}x{self.grid_size} grid"
            )
        if not self.intervals_ms:
            raise ValueError("intervals_ms must not be empty")
        if any(ms <= 0 for ms in self.intervals_ms):
            raise ValueError(f"intervals_ms must be positive, got {self.intervals_ms}")
        if not self.is_valid_difficulty(self.default_difficulty):
            raise ValueError(
                f"default_difficulty must be in 1..{len(self.intervals_ms)}, "
                f"got {self.default_difficulty}"
            )
        if self.default_interval_ms <= 0:
            raise ValueError(
                f"default_interval_ms must be positive, got {self.default_interval_ms}"
            )

    def is_valid_difficulty(self, level: int) -> bool:
        if isinstance(level, bool) or not isinstance(level, int):
            return False
        return 1 <= level <= len(self.intervals_ms)

    def interval_for(self, level: int) -> int:
        """Tick interval in ms for a 1-based difficulty level."""
        return self.intervals_ms[level - 1]


CFG = Config()
