# controls.py
"""
Turns player intents into session changes.

Direction requests are validated against the heading committed at the
last tick, not against the pending direction. Any number of requests may
arrive between two ticks; the last accepted one is what the next tick
uses, and it can never be a reversal of the current motion.
"""
from __future__ import annotations

from enum import Enum
import logging
from typing import TYPE_CHECKING

from .config import UP, DOWN, LEFT, RIGHT
from .grid import Direction

if TYPE_CHECKING:
    from .session import Session

logger = logging.getLogger(__name__)


class Intent(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    START = "start"
    QUIT = "quit"


INTENT_DIRECTIONS = {
    Intent.UP: UP,
    Intent.DOWN: DOWN,
    Intent.LEFT: LEFT,
    Intent.RIGHT: RIGHT,
}


def changes_axis(current: Direction, requested: Direction) -> bool:
    """True if 'requested' turns from horizontal to vertical motion or back."""
    if requested not in INTENT_DIRECTIONS.values():
        return False
    return (requested[0] != 0 and current[0] == 0) or (requested[1] != 0 and current[1] == 0)


def request_direction(session: Session, direction: Direction) -> bool:
    """Queue a turn for the next tick. Invalid requests are dropped silently."""
    if not session.running:
        return False
    if not changes_axis(session.heading, direction):
        return False
    session.direction = direction
    return True


def apply_intent(session: Session, intent: Intent) -> bool:
    """
    Apply one intent to 'session'. Returns True if it changed anything.
    QUIT belongs to the application loop and is ignored here.
    """
    if intent in INTENT_DIRECTIONS:
        return request_direction(session, INTENT_DIRECTIONS[intent])

    if intent is Intent.PAUSE:
        was_paused = session.stats.is_paused
        session.toggle_pause()
        return session.stats.is_paused != was_paused

    if intent is Intent.START:
        if session.started and not session.stats.game_over:
            return False
        session.start()
        return True

    logger.debug("intent %s not handled by session", intent)
    return False
