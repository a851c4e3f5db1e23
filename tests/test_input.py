import pygame

from snake_adventure.config import WIDTH, HEIGHT, HUD_HEIGHT
from snake_adventure.controls import Intent, apply_intent
from snake_adventure.input import intent_for_event, pointer_intent
from snake_adventure.session import Session


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_wasd_and_arrows():
    assert intent_for_event(key(pygame.K_w)) is Intent.UP
    assert intent_for_event(key(pygame.K_UP)) is Intent.UP
    assert intent_for_event(key(pygame.K_a)) is Intent.LEFT
    assert intent_for_event(key(pygame.K_s)) is Intent.DOWN
    assert intent_for_event(key(pygame.K_RIGHT)) is Intent.RIGHT


def test_control_keys():
    assert intent_for_event(key(pygame.K_SPACE)) is Intent.PAUSE
    assert intent_for_event(key(pygame.K_RETURN)) is Intent.START
    assert intent_for_event(key(pygame.K_ESCAPE)) is Intent.QUIT
    assert intent_for_event(pygame.event.Event(pygame.QUIT)) is Intent.QUIT


def test_unmapped_events_are_ignored():
    assert intent_for_event(key(pygame.K_z)) is None
    assert intent_for_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_w)) is None


def test_pointer_dominant_axis():
    cx, cy = WIDTH / 2, HEIGHT / 2
    assert pointer_intent((cx + 120, cy + 10)) is Intent.RIGHT
    assert pointer_intent((cx - 120, cy - 30)) is Intent.LEFT
    assert pointer_intent((cx + 10, cy - 150)) is Intent.UP
    assert pointer_intent((cx, cy + 150)) is Intent.DOWN


def test_pointer_dead_zone_and_outside_window():
    assert pointer_intent((WIDTH / 2 + 5, HEIGHT / 2 - 5)) is None
    assert pointer_intent((10, HEIGHT + HUD_HEIGHT + 5)) is None
    assert pointer_intent((-1, 10), playing=False) is None


def test_mouse_click_event():
    ev = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(WIDTH - 5, HEIGHT / 2))
    assert intent_for_event(ev) is Intent.RIGHT
    right_click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(WIDTH - 5, HEIGHT / 2))
    assert intent_for_event(right_click) is None


def finger(x, y):
    return pygame.event.Event(pygame.FINGERDOWN, x=x, y=y, dx=0.0, dy=0.0, finger_id=0, touch_id=0)


def test_press_starts_game_outside_play():
    """Start screen and game-over overlay: any press means (re)start."""
    for pos in [(WIDTH / 2, HEIGHT / 2), (5, 5), (WIDTH - 1, HEIGHT + HUD_HEIGHT - 1)]:
        assert pointer_intent(pos, playing=False) is Intent.START
    assert intent_for_event(finger(0.2, 0.3), playing=False) is Intent.START
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(50, 50))
    assert intent_for_event(click, playing=False) is Intent.START


def test_hud_strip_is_pause_button():
    assert pointer_intent((WIDTH / 2, HEIGHT + 5)) is Intent.PAUSE
    assert pointer_intent((WIDTH - 10, HEIGHT + HUD_HEIGHT - 1)) is Intent.PAUSE
    assert intent_for_event(finger(0.9, 0.99)) is Intent.PAUSE


def test_finger_steers_on_board():
    assert intent_for_event(finger(0.95, 0.4)) is Intent.RIGHT
    assert intent_for_event(finger(0.5, 0.05)) is Intent.UP


def test_emulated_click_from_touch_is_skipped():
    """SDL repeats a finger press as a click; only the finger event counts."""
    ev = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(WIDTH / 2, HEIGHT + 5), touch=True)
    assert intent_for_event(ev) is None


def test_touch_only_game_lifecycle():
    s = Session()
    tap_board = finger(0.5, 0.5)
    tap_bar = finger(0.5, 0.99)

    def tap(ev):
        intent = intent_for_event(ev, s.started and not s.stats.game_over)
        assert intent is not None
        return apply_intent(s, intent)

    assert tap(tap_board)
    assert s.running
    assert tap(tap_bar)
    assert s.stats.is_paused
    assert tap(tap_bar)
    assert s.running

    s.snake = ((19, 10),)
    s.tick()
    assert s.stats.game_over
    assert tap(tap_board)
    assert s.running
    assert s.snake == ((10, 10),)
