from __future__ import annotations

import argparse
import logging
import random

import pygame

from . import config
from .game import Game
from .render import draw_state
from .snake import Direction

KEY_MAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snakefade", description="Snake with decaying food.")
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH, help="Board width in cells, walls included.")
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT, help="Board height in cells, walls included.")
    parser.add_argument("--block", type=int, default=config.BLOCK, help="Pixel size of one cell.")
    parser.add_argument("--fps", type=int, default=config.FPS)
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--move-interval",
        type=float,
        default=config.MOVE_INTERVAL,
        help="Seconds between snake steps.",
    )
    parser.add_argument(
        "--no-clamp-food",
        action="store_true",
        help="Draw food positions from the whole int range (most food lands off the board).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log food spawns and state changes.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    settings = config.Settings(move_interval=args.move_interval, clamp_food=not args.no_clamp_food)
    game = Game(args.width, args.height, settings, rng=random.Random(args.seed))

    pygame.init()
    pygame.display.set_caption("snakefade")
    screen = pygame.display.set_mode((args.width * args.block, args.height * args.block))
    clock = pygame.time.Clock()

    best = 0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.key in KEY_MAP:
                    game.key_pressed(KEY_MAP[event.key])

        dt = clock.tick(args.fps) / 1000.0
        game.update(dt)
        best = max(best, game.score)
        draw_state(screen, game.snapshot(), args.block)

    pygame.quit()
    print("Game Over! Best score:", best)


if __name__ == "__main__":
    main()
