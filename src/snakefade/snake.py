from __future__ import annotations

from collections import deque
from enum import Enum

Cell = tuple[int, int]


def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])


class Direction(Enum):
    # (dx, dy) with the origin in the top-left corner, y growing downwards.
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def step(self, cell: Cell) -> Cell:
        return add_vectors(cell, self.value)


class Snake:
    """Ordered body of cells, head first, plus the current heading.

    The snake never validates its own moves; the game checks walls and
    self-collision before calling `move_forward`.
    """

    def __init__(self, origin_x: int, origin_y: int):
        self.body: deque[Cell] = deque(
            [
                (origin_x + 2, origin_y),
                (origin_x + 1, origin_y),
                (origin_x, origin_y),
            ]
        )
        self.moving_direction = Direction.RIGHT
        self.last_removed: Cell | None = None

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, cell) -> bool:
        return cell in self.body

    def __repr__(self) -> str:
        return f"Snake(head={self.head_position()}, len={len(self.body)}, dir={self.moving_direction.name})"

    def move_forward(self, direction: Direction | None = None) -> Cell:
        """Advance one cell and return the tail cell that was dropped."""
        if direction is not None:
            self.moving_direction = direction

        self.body.appendleft(self.next_head())
        removed = self.body.pop()
        self.last_removed = removed
        return removed

    def next_head(self) -> Cell:
        return self.moving_direction.step(self.body[0])

    def head_position(self) -> Cell:
        return self.body[0]

    def head_direction(self) -> Direction:
        return self.moving_direction

    def increase_length(self, tail: Cell | None = None) -> bool:
        """Grow by re-attaching `tail` (default: the last dropped cell).

        Returns False without touching the body if there is nothing to
        re-attach, i.e. before the first move or twice after one move.
        """
        if tail is None:
            tail = self.last_removed
        if tail is None:
            return False
        self.body.append(tail)
        self.last_removed = None
        return True

    def get_body(self) -> list[Cell]:
        return list(self.body)
