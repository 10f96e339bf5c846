# main.py
import argparse
import logging
from typing import Optional

import pygame # type: ignore

from .config import (
    CELL_SIZE, GRID_SIZE, DIFFICULTY_INTERVALS_MS, DEFAULT_DIFFICULTY,
    Config, Direction, GameStatus,
)
from .render import window_size, draw_grid, draw_hud, draw_overlay
from .session import GameSession

logger = logging.getLogger(__name__)

# Input collaborator: raw keys -> logical directions. No legality checks
# here; the session rejects reversals itself.
KEY_DIRECTIONS = {
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w:     Direction.UP,
    pygame.K_s:     Direction.DOWN,
    pygame.K_a:     Direction.LEFT,
    pygame.K_d:     Direction.RIGHT,
}

# Difficulty collaborator: number keys select a 1-based level.
KEY_DIFFICULTY = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
}


def direction_for_key(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)


def handle_event(session: GameSession, event) -> bool:
    """Route one pygame event to the session. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type != pygame.KEYDOWN:
        return True

    if event.key == pygame.K_ESCAPE:
        return False
    direction = direction_for_key(event.key)
    if direction is not None:
        session.change_direction(direction)
    elif event.key in KEY_DIFFICULTY:
        session.set_difficulty(KEY_DIFFICULTY[event.key])
    elif event.key == pygame.K_SPACE:
        if session.status is GameStatus.PLAYING:
            session.stop()
        else:
            session.start()
    elif event.key == pygame.K_r:
        session.restart()
    return True


def draw(screen, font, session: GameSession, cell_size: int) -> None:
    draw_grid(screen, session.grid.view(), cell_size)
    draw_hud(screen, font, session)
    if session.status is GameStatus.INIT:
        draw_overlay(screen, font, "SNAKE", "Space to start, 1-5 for difficulty")
    elif session.status is GameStatus.SUSPENDED:
        draw_overlay(screen, font, "PAUSED", "Space to resume, R to restart")
    elif session.status is GameStatus.GAMEOVER:
        title = "YOU WIN" if session.won else "GAME OVER"
        draw_overlay(screen, font, title, f"Length: {session.length}  -  R to restart")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--size", type=int, default=GRID_SIZE,
                        help="cells per side of the square grid")
    parser.add_argument(
        "--difficulty",
        type=int,
        default=DEFAULT_DIFFICULTY,
        choices=range(1, len(DIFFICULTY_INTERVALS_MS) + 1),
        help="1 (slowest) .. %d (fastest)" % len(DIFFICULTY_INTERVALS_MS),
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE,
                        help="pixels per grid cell")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    center = args.size // 2
    config = Config(
        grid_size=args.size,
        initial_position=(center, center),
        default_difficulty=args.difficulty,
        seed=args.seed,
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(config.grid_size, args.cell_size))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    session = GameSession(config, clock=pygame.time.get_ticks)
    logger.info("Grid %dx%d, difficulty %d", config.grid_size, config.grid_size,
                session.difficulty)
    running = True

    while running:
        # 1) input
        for event in pygame.event.get():
            if not handle_event(session, event):
                running = False
                break
        if not running:
            break

        # 2) update (ticks are gated by the session's ticker)
        session.update(pygame.time.get_ticks())

        # 3) render
        draw(screen, font, session, args.cell_size)
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
