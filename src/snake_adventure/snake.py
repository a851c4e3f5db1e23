# snake.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .config import SCORE_PER_APPLE
from .grid import Cell, Direction, in_bounds, step

Snake = Tuple[Cell, ...]   # head at index 0


# ---------- Step outcomes ----------
@dataclass(frozen=True)
class WallCollision:
    fatal = True


@dataclass(frozen=True)
class SelfCollision:
    fatal = True


@dataclass(frozen=True)
class AppleEaten:
    snake: Snake
    score_delta: int = SCORE_PER_APPLE
    fatal = False


@dataclass(frozen=True)
class Moved:
    snake: Snake
    fatal = False


AdvanceResult = Union[WallCollision, SelfCollision, AppleEaten, Moved]


def advance(snake: Snake, direction: Direction, apple: Cell) -> AdvanceResult:
    """
    Move the snake one cell in 'direction'.

    Order of checks:
      1. walls (an out-of-bounds head cannot also hit the body)
      2. body, tested against the whole current snake. The tail cell still
         counts as occupied even though it would be vacated this step.
      3. apple -> grow, otherwise drop the tail

    Reversal is not validated here; callers filter it out before the tick.
    """
    new_head = step(snake[0], direction)

    if not in_bounds(new_head):
        return WallCollision()

    if new_head in snake:
        return SelfCollision()

    if new_head == apple:
        return AppleEaten((new_head,) + tuple(snake))

    return Moved((new_head,) + tuple(snake[:-1]))
