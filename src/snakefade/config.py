from __future__ import annotations

from collections import namedtuple

# Window / grid
BLOCK = 20
GRID_WIDTH, GRID_HEIGHT = 20, 20
WIDTH, HEIGHT = GRID_WIDTH * BLOCK, GRID_HEIGHT * BLOCK
FPS = 60

# Colours (0..255)
BACKGROUND = (204, 204, 204)
SNAKE_COLOR = (255, 209, 0)
BORDER_COLOR = (0, 0, 0)
GAME_OVER_COLOR = (232, 77, 61, 128)

# Gameplay
MOVE_INTERVAL = 0.1
NUM_FOODS = 3
FOOD_DECAY_SPEED = 0.002
INIT_FOOD_LIFE = 1.0
FOOD_EXPIRY = 0.1
RESTART_DELAY = 1.0
SPAWN = (2, 2)

Settings = namedtuple(
    "Settings",
    [
        "move_interval",
        "food_count",
        "food_decay",
        "food_life",
        "food_expiry",
        "restart_delay",
        "spawn",
        "clamp_food",
    ],
    defaults=[
        MOVE_INTERVAL,
        NUM_FOODS,
        FOOD_DECAY_SPEED,
        INIT_FOOD_LIFE,
        FOOD_EXPIRY,
        RESTART_DELAY,
        SPAWN,
        True,
    ],
)
# move_interval: seconds between unforced move ticks
# food_count: target number of live foods
# food_decay: life lost by every food each tick
# food_life: life of a freshly spawned food
# food_expiry: foods below this life are removed
# restart_delay: seconds spent in game over before restarting
# spawn: (x, y) of the snake's tail cell at (re)start
# clamp_food: draw food positions inside the walls instead of the full int range
