# input.py
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, HUD_HEIGHT, CELL_SIZE
from .controls import Intent

if TYPE_CHECKING:
    from .session import Session

KEY_INTENTS = {
    pygame.K_w: Intent.UP,
    pygame.K_UP: Intent.UP,
    pygame.K_s: Intent.DOWN,
    pygame.K_DOWN: Intent.DOWN,
    pygame.K_a: Intent.LEFT,
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_d: Intent.RIGHT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_SPACE: Intent.PAUSE,
    pygame.K_p: Intent.PAUSE,
    pygame.K_RETURN: Intent.START,
    pygame.K_KP_ENTER: Intent.START,
    pygame.K_r: Intent.START,
    pygame.K_ESCAPE: Intent.QUIT,
}

# Presses this close to the board centre are ambiguous and dropped
DEAD_ZONE = 2 * CELL_SIZE


def pointer_intent(pos: Tuple[float, float], playing: bool = True) -> Optional[Intent]:
    """
    Map a press on the window to an Intent.

    Outside a game (start screen, game-over overlay) any press starts one.
    During a game the HUD strip under the board is the pause button, and a
    press on the board works like an on-screen joystick centred on the
    board: the dominant axis of the offset wins.
    """
    px, py = pos
    if not (0 <= px < WIDTH and 0 <= py < HEIGHT + HUD_HEIGHT):
        return None
    if not playing:
        return Intent.START
    if py >= HEIGHT:
        return Intent.PAUSE
    dx = px - WIDTH / 2
    dy = py - HEIGHT / 2
    if max(abs(dx), abs(dy)) < DEAD_ZONE:
        return None
    if abs(dx) >= abs(dy):
        return Intent.RIGHT if dx > 0 else Intent.LEFT
    return Intent.DOWN if dy > 0 else Intent.UP


def intent_for_event(event: pygame.event.Event, playing: bool = True) -> Optional[Intent]:
    """
    Translate one pygame event into an Intent (None if irrelevant).
    'playing' is True while a game is on screen, paused or not.
    """
    if event.type == pygame.QUIT:
        return Intent.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_INTENTS.get(event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if getattr(event, "touch", False):
            return None  # SDL mirrors every finger press as a click; FINGERDOWN handles it
        return pointer_intent(event.pos, playing)
    if event.type == pygame.FINGERDOWN:
        # finger coordinates are normalized to the window
        return pointer_intent((event.x * WIDTH, event.y * (HEIGHT + HUD_HEIGHT)), playing)
    return None


def poll_intents(session: "Session") -> Iterator[Intent]:
    """Drain the pygame event queue, yielding recognised intents in order."""
    for event in pygame.event.get():
        playing = session.started and not session.stats.game_over
        intent = intent_for_event(event, playing)
        if intent is not None:
            yield intent
