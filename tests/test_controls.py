from snake_adventure.config import UP, DOWN, LEFT, RIGHT
from snake_adventure.controls import Intent, apply_intent, changes_axis
from snake_adventure.session import Session


def test_changes_axis():
    assert changes_axis(RIGHT, UP)
    assert changes_axis(RIGHT, DOWN)
    assert changes_axis(UP, LEFT)
    assert not changes_axis(RIGHT, LEFT)
    assert not changes_axis(RIGHT, RIGHT)
    assert not changes_axis(UP, DOWN)


def test_diagonal_and_zero_requests_are_dropped():
    assert not changes_axis(RIGHT, (1, 1))
    assert not changes_axis(RIGHT, (0, 0))
    assert not changes_axis(UP, (-1, 2))


def test_direction_intents_need_a_running_session():
    s = Session()
    assert not apply_intent(s, Intent.UP)
    s.start()
    s.toggle_pause()
    assert not apply_intent(s, Intent.UP)
    assert s.direction == RIGHT
    s.toggle_pause()
    assert apply_intent(s, Intent.UP)
    assert s.direction == UP


def test_pause_intent_toggles(session):
    assert apply_intent(session, Intent.PAUSE)
    assert session.stats.is_paused
    assert apply_intent(session, Intent.PAUSE)
    assert not session.stats.is_paused


def test_pause_ignored_before_start_and_after_game_over():
    s = Session()
    assert not apply_intent(s, Intent.PAUSE)
    s.start()
    s.snake = ((19, 0),)
    s.tick()
    assert s.stats.game_over
    assert not apply_intent(s, Intent.PAUSE)
    assert not s.stats.is_paused


def test_start_intent_only_when_not_running(session):
    session.tick()
    assert not apply_intent(session, Intent.START)
    assert session.snake == ((11, 10),)

    session.snake = ((19, 10),)
    session.tick()
    assert apply_intent(session, Intent.START)
    assert session.snake == ((10, 10),)
    assert not session.stats.game_over


def test_quit_is_left_to_the_caller(session):
    assert not apply_intent(session, Intent.QUIT)
    assert session.running
