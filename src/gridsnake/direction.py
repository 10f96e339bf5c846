import logging

from .config import Direction, GameStatus, OPPOSITE

logger = logging.getLogger(__name__)


def is_opposite(a: Direction, b: Direction) -> bool:
    return OPPOSITE[a] is b


def set_direction(current: Direction, requested: Direction, status: GameStatus) -> Direction:
    """Return the heading after a change request; illegal requests keep `current`."""
    if status is not GameStatus.PLAYING:
        logger.debug("Ignoring direction %s while %s", requested.value, status.value)
        return current
    if is_opposite(current, requested):
        logger.debug("Ignoring reversal %s -> %s", current.value, requested.value)
        return current
    return requested
