# session.py
"""Game session: lifecycle and bookkeeping on top of snake.advance()."""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import random
from typing import Optional

import numpy as np  # type: ignore

from .apples import place_apple
from .controls import request_direction
from .config import (
    GRID_W, GRID_H,
    MAX_APPLES,
    INITIAL_SNAKE, INITIAL_DIRECTION, INITIAL_APPLE,
)
from .grid import Cell, Direction
from .snake import AdvanceResult, AppleEaten, Moved, Snake, advance

logger = logging.getLogger(__name__)

# Board codes used by SessionSnapshot.board(); render.draw_game paints from them
EMPTY_CELL, BODY_CELL, APPLE_CELL, HEAD_CELL = 0, 1, 2, 7


@dataclass(frozen=True)
class GameStats:
    score: int = 0
    apples_eaten: int = 0
    game_over: bool = False
    is_paused: bool = False

    @property
    def won(self) -> bool:
        return self.apples_eaten >= MAX_APPLES


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view handed to renderers once per frame."""
    snake: Snake
    direction: Direction
    apple: Cell
    stats: GameStats
    started: bool

    @property
    def apple_visible(self) -> bool:
        return self.started and self.stats.apples_eaten < MAX_APPLES

    def board(self) -> np.ndarray:
        """
        Occupancy matrix indexed [y, x]:
          0 = empty, 1 = body, 2 = apple, 7 = head
        """
        grid = np.zeros((GRID_H, GRID_W), dtype=np.int8)
        if self.apple_visible:
            grid[self.apple[1], self.apple[0]] = APPLE_CELL
        for x, y in self.snake[1:]:
            grid[y, x] = BODY_CELL
        hx, hy = self.snake[0]
        grid[hy, hx] = HEAD_CELL
        return grid


class Session:
    """
    Owns snake, direction, apple and stats.

    State changes only through start(), tick(), toggle_pause() and
    request_direction(); everything else is read through snapshot().
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.snake: Snake = INITIAL_SNAKE
        self.heading: Direction = INITIAL_DIRECTION   # direction of the last tick
        self.direction: Direction = INITIAL_DIRECTION # pending, applied next tick
        self.apple: Cell = INITIAL_APPLE
        self.stats = GameStats()
        self.started = False

    # ---------- Lifecycle ----------
    def start(self) -> None:
        self.snake = INITIAL_SNAKE
        self.heading = INITIAL_DIRECTION
        self.direction = INITIAL_DIRECTION
        self.apple = INITIAL_APPLE
        self.stats = GameStats()
        self.started = True
        logger.info("session started")

    @property
    def running(self) -> bool:
        return self.started and not self.stats.game_over and not self.stats.is_paused

    @property
    def won(self) -> bool:
        return self.stats.won

    def toggle_pause(self) -> None:
        if not self.started or self.stats.game_over:
            return
        self.stats = replace(self.stats, is_paused=not self.stats.is_paused)
        logger.info("session %s", "paused" if self.stats.is_paused else "resumed")

    def request_direction(self, direction: Direction) -> bool:
        return request_direction(self, direction)

    # ---------- Simulation ----------
    def tick(self) -> Optional[AdvanceResult]:
        """
        Advance one step. Returns the advance() outcome, or None when the
        session is not running (not started, over, or paused).
        """
        if not self.running:
            return None

        # Commit direction once per tick
        self.heading = self.direction
        result = advance(self.snake, self.heading, self.apple)

        if result.fatal:
            # The fatal head position is never committed; the last valid
            # snake stays on screen.
            self.stats = replace(self.stats, game_over=True)
            logger.info(
                "game over: %s at length %d, score %d",
                type(result).__name__, len(self.snake), self.stats.score,
            )
        elif isinstance(result, AppleEaten):
            self.snake = result.snake
            eaten = self.stats.apples_eaten + 1
            self.stats = replace(
                self.stats,
                apples_eaten=eaten,
                score=self.stats.score + result.score_delta,
                game_over=eaten >= MAX_APPLES,
            )
            logger.debug("apple %d/%d eaten at %s", eaten, MAX_APPLES, self.snake[0])
            if self.stats.game_over:
                logger.info("all %d apples collected, score %d", MAX_APPLES, self.stats.score)
            else:
                self.apple = place_apple(self.snake, self.rng)
        elif isinstance(result, Moved):
            self.snake = result.snake

        return result

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            snake=self.snake,
            direction=self.heading,
            apple=self.apple,
            stats=self.stats,
            started=self.started,
        )
