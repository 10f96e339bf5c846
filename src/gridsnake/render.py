# render.py
from typing import Tuple
import pygame # type: ignore
import numpy as np # type: ignore

from .config import CELL_SIZE, HUD_HEIGHT, BG, GREEN, RED, TEXT
from .grid import Cell

_COLORS = {Cell.SNAKE: GREEN, Cell.FOOD: RED}


def window_size(grid_size: int, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    side = grid_size * cell_size
    return side, side + HUD_HEIGHT


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int],
              cell_size: int = CELL_SIZE) -> None:
    rect = pygame.Rect(gx * cell_size, HUD_HEIGHT + gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)


def draw_grid(screen: pygame.Surface, cells: np.ndarray, cell_size: int = CELL_SIZE) -> None:
    """Paint every non-empty cell of a grid view. Never writes to `cells`."""
    screen.fill(BG)
    ys, xs = np.nonzero(cells)
    for x, y in zip(xs.tolist(), ys.tolist()):
        draw_cell(screen, x, y, _COLORS[Cell(int(cells[y, x]))], cell_size)


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, session) -> None:
    txt = font.render(
        f"Length: {session.length}   Difficulty: {session.difficulty}   "
        f"[{session.status.value}]",
        True, TEXT,
    )
    screen.blit(txt, (8, 8))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, title: str, subtitle: str) -> None:
    width, height = screen.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    head = font.render(title, True, (240, 240, 250))
    sub  = font.render(subtitle, True, TEXT)

    screen.blit(head, head.get_rect(center=(width // 2, height // 2 - 16)))
    screen.blit(sub, sub.get_rect(center=(width // 2, height // 2 + 16)))
