# clock.py
from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from .config import CFG


class TickClock:
    """
    Fixed-interval tick source driven by the caller's clock (ms).

    The render loop polls due(now_ms) once per frame and runs that many
    simulation steps. A stopped clock reports nothing until start() is
    called again, so pausing or tearing down is immediate.
    """

    def __init__(self, interval_ms: int = CFG.tick_ms, max_catch_up: int = 1) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.max_catch_up = max(1, max_catch_up)
        self._last: Optional[int] = None   # ms timestamp of last tick

    @property
    def running(self) -> bool:
        return self._last is not None

    def start(self, now_ms: int) -> None:
        self._last = now_ms

    def stop(self) -> None:
        self._last = None

    def due(self, now_ms: int) -> int:
        """Number of ticks that fire at 'now_ms' (0 when stopped)."""
        if self._last is None:
            return 0

        elapsed = now_ms - self._last
        if elapsed < self.interval_ms:
            return 0  # not time to move yet

        n = elapsed // self.interval_ms
        if n > self.max_catch_up:
            # Long stall (window drag, debugger): drop the backlog.
            self._last = now_ms
            return self.max_catch_up
        self._last += n * self.interval_ms
        return n


class FpsMeter:
    """Frames per second over a short rolling window of frame timestamps."""

    def __init__(self, window: int = 30) -> None:
        self._stamps: Deque[int] = deque(maxlen=max(2, window))

    def frame(self, now_ms: int) -> None:
        self._stamps.append(now_ms)

    @property
    def fps(self) -> int:
        if len(self._stamps) < 2:
            return 0
        span = self._stamps[-1] - self._stamps[0]
        if span <= 0:
            return 0
        return round(1000 * (len(self._stamps) - 1) / span)
