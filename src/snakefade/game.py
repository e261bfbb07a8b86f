from __future__ import annotations

import logging
import random
from collections import namedtuple

from . import config
from .snake import Cell, Direction, Snake

logger = logging.getLogger(__name__)

State = namedtuple("State", ["snake", "foods", "width", "height", "game_over", "score"])
# snake: list[(x, y)], head is first element.
# foods: list[(x, y, life)]
# width, height: board size in cells, walls included
# game_over: bool
# score: foods eaten since the last restart

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1


class Food:
    def __init__(self, x: int, y: int, life: float = config.INIT_FOOD_LIFE):
        self.x, self.y = x, y
        self.life = life

    def position(self) -> Cell:
        return (self.x, self.y)

    def __repr__(self):
        return f"Food(x={self.x}, y={self.y}, life={self.life:.3f})"


class Game:
    """Snake game state machine driven by `update` and `key_pressed`.

    Two states: playing and game over. A fatal move flips `is_game_over`;
    after `settings.restart_delay` seconds the snake is replaced and play
    resumes. Foods keep decaying and expiring while the game is over.
    """

    def __init__(
        self,
        width: int,
        height: int,
        settings: config.Settings | None = None,
        rng: random.Random | None = None,
    ):
        self.settings = settings if settings is not None else config.Settings()
        _check_settings(self.settings, width, height)

        self.width, self.height = width, height
        self.rng = rng if rng is not None else random.Random()

        self.snake = Snake(*self.settings.spawn)
        self.foods: list[Food] = []
        self.is_game_over = False
        self.waiting_time = 0.0
        self.score = 0

    def restart(self) -> None:
        logger.info("restarting (score was %d)", self.score)
        self.snake = Snake(*self.settings.spawn)
        self.waiting_time = 0.0
        self.is_game_over = False
        self.score = 0

    def key_pressed(self, key) -> None:
        if self.is_game_over or not isinstance(key, Direction):
            return
        if key == self.snake.head_direction().opposite():
            return
        self.update_snake(key)

    def update(self, delta_time: float) -> None:
        if delta_time < 0:
            raise ValueError(f"delta_time must be >= 0, got {delta_time}")
        self.waiting_time += delta_time

        self.update_food_expired()
        self.update_food_life()

        if self.is_game_over:
            if self.waiting_time >= self.settings.restart_delay:
                self.restart()
            return

        self.update_food()

        if self.waiting_time > self.settings.move_interval:
            self.update_snake()

    def update_snake(self, direction: Direction | None = None) -> None:
        if direction is not None:
            self.snake.moving_direction = direction

        if self.check_snake_alive():
            tail = self.snake.move_forward(direction)
            self.check_eating(tail)
        else:
            self.is_game_over = True
            logger.info("game over at %s heading %s", self.snake.head_position(), self.snake.head_direction().name)
        self.waiting_time = 0.0

    def check_snake_alive(self) -> bool:
        x, y = nxt = self.snake.next_head()
        # The outermost ring of cells is wall.
        if x <= 0 or x >= self.width - 1 or y <= 0 or y >= self.height - 1:
            return False
        # Checked against the pre-move body, so the tail about to move away still counts.
        return nxt not in self.snake

    def check_eating(self, tail: Cell | None = None) -> bool:
        """Eat the first food under the head, growing by `tail` (the cell the last move dropped)."""
        pos = self.snake.head_position()
        for i, food in enumerate(self.foods):
            if food.position() == pos:
                del self.foods[i]
                self.snake.increase_length(tail)
                self.score += 1
                return True
        return False

    def update_food(self) -> None:
        missing = self.settings.food_count - len(self.foods)
        for _ in range(missing):
            x, y = self.random_cell()
            food = Food(x, y, self.settings.food_life)
            logger.debug("new food: %r", food)
            self.foods.append(food)

    def random_cell(self) -> Cell:
        if self.settings.clamp_food:
            return (
                self.rng.randint(1, self.width - 2),
                self.rng.randint(1, self.height - 2),
            )
        return (
            self.rng.randint(INT32_MIN, INT32_MAX),
            self.rng.randint(INT32_MIN, INT32_MAX),
        )

    def update_food_life(self) -> None:
        for food in self.foods:
            food.life -= self.settings.food_decay

    def update_food_expired(self) -> None:
        self.foods[:] = [f for f in self.foods if f.life >= self.settings.food_expiry]

    def snapshot(self) -> State:
        return State(
            snake=self.snake.get_body(),
            foods=[(f.x, f.y, f.life) for f in self.foods],
            width=self.width,
            height=self.height,
            game_over=self.is_game_over,
            score=self.score,
        )


def _check_settings(settings: config.Settings, width: int, height: int) -> None:
    if settings.move_interval <= 0:
        raise ValueError(f"move_interval must be > 0, got {settings.move_interval}")
    if settings.food_count < 0:
        raise ValueError(f"food_count must be >= 0, got {settings.food_count}")
    if settings.food_decay < 0:
        raise ValueError(f"food_decay must be >= 0, got {settings.food_decay}")
    if settings.restart_delay < 0:
        raise ValueError(f"restart_delay must be >= 0, got {settings.restart_delay}")

    sx, sy = settings.spawn
    # Spawned snake spans sx..sx+2 on row sy and must sit inside the walls.
    if sx < 1 or sy < 1 or sx + 2 > width - 2 or sy > height - 2:
        raise ValueError(f"board {width}x{height} cannot hold a snake spawned at {settings.spawn}")
