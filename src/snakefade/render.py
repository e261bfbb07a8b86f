from __future__ import annotations

import pygame

from . import config
from .game import State

FOOD_BASE = (0.67, 0.48, 0.34)


def food_color(life: float) -> tuple[int, int, int]:
    """Fade a food from orange towards dark as its life runs out."""
    life = max(life, 1e-6)
    r, g, b = FOOD_BASE
    channels = (r / life, g * life, b * life)
    return tuple(int(round(min(max(c, 0.0), 1.0) * 255)) for c in channels)


def draw_block(screen: pygame.Surface, color, x: int, y: int, block: int) -> None:
    pygame.draw.rect(screen, color, pygame.Rect(x * block, y * block, block, block))


def draw_rect(screen: pygame.Surface, color, x: int, y: int, w: int, h: int, block: int) -> None:
    pygame.draw.rect(screen, color, pygame.Rect(x * block, y * block, w * block, h * block))


def draw_state(screen: pygame.Surface, state: State, block: int = config.BLOCK) -> None:
    screen.fill(config.BACKGROUND)

    for x, y in state.snake:
        draw_block(screen, config.SNAKE_COLOR, x, y, block)

    for x, y, life in state.foods:
        draw_block(screen, food_color(life), x, y, block)

    w, h = state.width, state.height
    draw_rect(screen, config.BORDER_COLOR, 0, 0, w, 1, block)
    draw_rect(screen, config.BORDER_COLOR, 0, h - 1, w, 1, block)
    draw_rect(screen, config.BORDER_COLOR, 0, 0, 1, h, block)
    draw_rect(screen, config.BORDER_COLOR, w - 1, 0, 1, h, block)

    if state.game_over:
        overlay = pygame.Surface((w * block, h * block), pygame.SRCALPHA)
        overlay.fill(config.GAME_OVER_COLOR)
        screen.blit(overlay, (0, 0))

    pygame.display.flip()
