# apples.py
from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from .config import GRID_W, GRID_H
from .grid import Cell

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10_000


class GridFullError(RuntimeError):
    """No free cell could be found for an apple.

    Never a normal game outcome: with a 20x20 grid and a quota of 10 apples
    the snake cannot come close to filling the board, so hitting this means
    the rules or constants are misconfigured.
    """


def place_apple(
    snake: Iterable[Cell],
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
    width: int = GRID_W,
    height: int = GRID_H,
) -> Cell:
    """
    Rejection-sample a uniformly random free cell.

    'rng' is any object with randrange() (random.Random in practice); pass a
    seeded one to get reproducible placements.
    """
    rng = rng or random
    occupied = set(snake)
    if len(occupied) >= width * height:
        raise GridFullError(f"snake covers all {width * height} cells")

    for _ in range(max_attempts):
        cell = (rng.randrange(width), rng.randrange(height))
        if cell not in occupied:
            logger.debug("apple placed at %s", cell)
            return cell

    raise GridFullError(
        f"no free cell after {max_attempts} attempts ({len(occupied)} occupied)"
    )
