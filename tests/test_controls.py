import pytest

from graze_catcher.controls import PointerInput


class FakeKey(str):
    """Stand-in for blessed's Keystroke."""

    def __new__(cls, text='', name=None):
        key = super().__new__(cls, text)
        key.name = name
        key.is_sequence = name is not None
        return key


@pytest.fixture
def pointer():
    p = PointerInput(hold_duration=3, cursor_speed=10.0)
    p.center(800, 600)
    return p


def test_held_key_moves_target_until_hold_expires(pointer):
    pointer.process_key(FakeKey('d'))
    for _ in range(5):
        pointer.update(800, 600)
    assert pointer.target == (430.0, 300.0)


def test_arrow_keys_and_diagonals(pointer):
    pointer.process_key(FakeKey('\x1b[A', name='KEY_UP'))
    pointer.process_key(FakeKey('\x1b[D', name='KEY_LEFT'))
    assert pointer.get_movement_vector() == pytest.approx((-0.7071, -0.7071), abs=1e-4)


def test_target_is_clamped_to_viewport(pointer):
    for _ in range(100):
        pointer.process_key(FakeKey('a'))
        pointer.update(800, 600)
    assert pointer.target_x == 0.0


def test_triggers_are_consumed_once(pointer):
    pointer.process_key(FakeKey(' '))
    pointer.process_key(FakeKey('R'))
    pointer.process_key(FakeKey('\x1b', name='KEY_ESCAPE'))

    assert pointer.consume_start() is True
    assert pointer.consume_start() is False
    assert pointer.consume_restart() is True
    assert pointer.consume_restart() is False
    assert pointer.consume_quit() is True
    assert pointer.consume_quit() is False


def test_empty_key_is_ignored(pointer):
    pointer.process_key(FakeKey(''))
    pointer.process_key(None)
    assert pointer.keys_held == {}
    assert pointer.consume_toggle_fps() is False
