"""
Game session controller.

Owns the lifecycle status, the difficulty, the heading and the single tick
source, and drives the movement engine once per tick:

    INIT -> PLAYING -> (SUSPENDED <-> PLAYING) -> GAMEOVER
    any status -> INIT via restart()
"""
import logging
import random
import time
from typing import Callable, Optional, Sequence

import numpy as np  # type: ignore

from .config import CFG, Config, Direction, GameStatus
from .direction import set_direction
from .game import GameState, Outcome, advance, new_game_state
from .grid import Grid, Position
from .ticker import Ticker

logger = logging.getLogger(__name__)


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class GameSession:
    def __init__(
        self,
        config: Config = CFG,
        clock: Optional[Callable[[], int]] = None,
        on_change: Optional[Callable[[np.ndarray], None]] = None,
    ):
        self.config = config
        self.clock = clock or _monotonic_ms
        self.on_change = on_change
        self.rng = random.Random(config.seed)
        self.ticker = Ticker()

        self._status = GameStatus.INIT
        self._difficulty = config.default_difficulty
        self._direction = Direction.UP
        self._pending = Direction.UP
        self._state: GameState = new_game_state(config, self.rng)
        # Interval in force; start() resumes at it, restart() resets it.
        self._interval_ms = config.interval_for(self._difficulty)
        self.ticker.arm(self._interval_ms, self.clock())

    # ---------- Read-only views ----------
    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def direction(self) -> Direction:
        """Heading the next tick will use."""
        return self._pending

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @property
    def interval_ms(self) -> Optional[int]:
        return self.ticker.interval_ms

    @property
    def grid(self) -> Grid:
        return self._state.grid

    @property
    def body(self) -> Sequence[Position]:
        return tuple(self._state.body)

    @property
    def food(self) -> Optional[Position]:
        return self._state.food

    @property
    def length(self) -> int:
        return self._state.length

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._state.outcome

    @property
    def won(self) -> bool:
        return self._state.outcome is Outcome.FULL

    # ---------- Transitions ----------
    def _set_status(self, status: GameStatus) -> None:
        logger.info("Status %s -> %s", self._status.value, status.value)
        self._status = status

    def start(self) -> bool:
        if self._status not in (GameStatus.INIT, GameStatus.SUSPENDED):
            logger.debug("start() ignored while %s", self._status.value)
            return False
        self.ticker.arm(self._interval_ms, self.clock())
        self._set_status(GameStatus.PLAYING)
        return True

    def stop(self) -> bool:
        if self._status is not GameStatus.PLAYING:
            logger.debug("stop() ignored while %s", self._status.value)
            return False
        self.ticker.cancel()
        self._set_status(GameStatus.SUSPENDED)
        return True

    def restart(self) -> None:
        # Build the replacement first so state and ticker swap together.
        state = new_game_state(self.config, self.rng)
        self._interval_ms = self.config.default_interval_ms
        self.ticker.arm(self._interval_ms, self.clock())
        self._state = state
        self._direction = Direction.UP
        self._pending = Direction.UP
        self._set_status(GameStatus.INIT)
        self._notify()

    def set_difficulty(self, level: int) -> bool:
        if self._status is not GameStatus.INIT:
            logger.debug("Difficulty change ignored while %s", self._status.value)
            return False
        if not self.config.is_valid_difficulty(level):
            logger.debug("Difficulty %r out of range 1..%d",
                         level, len(self.config.intervals_ms))
            return False
        if level == self._difficulty:
            return False
        self._difficulty = level
        self._interval_ms = self.config.interval_for(level)
        self.ticker.arm(self._interval_ms, self.clock())
        logger.info("Difficulty set to %d (%d ms)", level, self._interval_ms)
        return True

    def change_direction(self, requested: Direction) -> Direction:
        # Checked against the committed heading so two turns within one
        # tick can never add up to a reversal.
        accepted = set_direction(self._direction, requested, self._status)
        if accepted is requested and self._status is GameStatus.PLAYING:
            self._pending = accepted
        return self._pending

    # ---------- Ticks ----------
    def tick(self) -> bool:
        """Run one movement step. Returns True if the snake moved."""
        if self._status is not GameStatus.PLAYING:
            return False
        self._direction = self._pending
        if not advance(self._state, self._direction):
            self.ticker.cancel()
            self._set_status(GameStatus.GAMEOVER)
            logger.info("Game over (%s), length %d",
                        self._state.outcome.value, self._state.length)
            logger.debug("Final board:\n%s", self._state.grid.to_text())
            return False
        self._notify()
        return True

    def update(self, now_ms: Optional[int] = None) -> int:
        """Run every tick that came due since the last update."""
        if now_ms is None:
            now_ms = self.clock()
        ran = 0
        for _ in range(self.ticker.poll(now_ms)):
            if self._status is not GameStatus.PLAYING:
                break
            self.tick()
            ran += 1
        return ran

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self._state.grid.view())
