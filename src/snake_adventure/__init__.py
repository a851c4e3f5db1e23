# src/snake_adventure/__init__.py
"""Grid snake game: pure simulation core plus a pygame front end."""

from .apples import GridFullError, place_apple
from .controls import Intent, apply_intent
from .session import GameStats, Session, SessionSnapshot
from .snake import AppleEaten, Moved, SelfCollision, WallCollision, advance

__all__ = [
    "GridFullError", "place_apple",
    "Intent", "apply_intent",
    "GameStats", "Session", "SessionSnapshot",
    "AppleEaten", "Moved", "SelfCollision", "WallCollision", "advance",
]
