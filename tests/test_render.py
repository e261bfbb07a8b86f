"""Tests for the pygame drawing adapter, run against SDL's dummy video driver."""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from snakefade import config  # noqa: E402
from snakefade.game import Food, Game  # noqa: E402
from snakefade.render import draw_state, food_color  # noqa: E402

BLOCK = 10


@pytest.fixture
def screen():
    pygame.display.init()
    surface = pygame.display.set_mode((20 * BLOCK, 20 * BLOCK))
    yield surface
    pygame.display.quit()


def pixel(surface, x, y):
    """RGB at the centre of grid cell (x, y)."""
    return tuple(surface.get_at((x * BLOCK + BLOCK // 2, y * BLOCK + BLOCK // 2)))[:3]


class TestFoodColor:
    def test_fresh_food(self):
        assert food_color(1.0) == (171, 122, 87)

    def test_fades_with_life(self):
        fresh, old = food_color(1.0), food_color(0.3)
        assert old[1] < fresh[1]
        assert old[2] < fresh[2]
        assert old[0] == 255

    def test_zero_life_is_clamped(self):
        r, g, b = food_color(0.0)
        assert (r, g, b) == (255, 0, 0)


class TestDrawState:
    def test_draws_snake_food_and_walls(self, screen):
        game = Game(20, 20, config.Settings(food_count=0))
        game.foods.append(Food(10, 10))
        draw_state(screen, game.snapshot(), BLOCK)

        assert pixel(screen, 0, 0) == config.BORDER_COLOR
        assert pixel(screen, 19, 19) == config.BORDER_COLOR
        assert pixel(screen, 4, 2) == config.SNAKE_COLOR
        assert pixel(screen, 10, 10) == food_color(1.0)
        assert pixel(screen, 12, 12) == config.BACKGROUND

    def test_game_over_overlay_tints_board(self, screen):
        game = Game(20, 20, config.Settings(food_count=0))
        game.is_game_over = True
        draw_state(screen, game.snapshot(), BLOCK)
        assert pixel(screen, 12, 12) != config.BACKGROUND

    def test_does_not_mutate_game(self, screen):
        game = Game(20, 20, config.Settings(food_count=0))
        before = game.snapshot()
        draw_state(screen, game.snapshot(), BLOCK)
        assert game.snapshot() == before
