import pytest

from graze_catcher.beat import BeatClock
from graze_catcher.config import GameConfig


def make_clock(**overrides):
    return BeatClock.from_config(GameConfig(**overrides))


def test_frames_per_beat_from_bpm():
    assert GameConfig(bpm=130).frames_per_beat == pytest.approx(27.6923, rel=1e-4)
    assert GameConfig(bpm=120, frame_rate=60).frames_per_beat == pytest.approx(30.0)


def test_first_beat_lands_when_timer_passes_frames_per_beat():
    clock = make_clock()
    beats = [clock.tick() for _ in range(28)]
    assert beats[:27] == [False] * 27
    assert beats[27] is True
    assert clock.timer == 0
    assert clock.is_graze_active()


def test_graze_window_length():
    clock = make_clock()
    active = [clock.tick() or clock.is_graze_active() for _ in range(100)]
    # Beats at ticks 28, 56 and 84, each open for 14 ticks
    assert sum(active) == 42
    assert active[27:41] == [True] * 14
    assert active[41] is False


def test_graze_never_reopens_without_a_full_beat():
    clock = make_clock()
    last_beat = None
    for tick in range(2000):
        was_active = clock.is_graze_active()
        on_beat = clock.tick()
        assert isinstance(clock.graze_remaining, int)
        assert clock.graze_remaining >= 0
        if clock.is_graze_active() and not was_active:
            assert on_beat
        if on_beat:
            if last_beat is not None:
                assert tick - last_beat >= int(clock.frames_per_beat)
            last_beat = tick


def test_beat_progress_stays_below_one():
    clock = make_clock(bpm=97)
    for _ in range(500):
        clock.tick()
        assert 0.0 <= clock.beat_progress() < 1.0


def test_force_graze_and_reset():
    clock = make_clock()
    for _ in range(10):
        clock.tick()
    clock.force_graze()
    assert clock.is_graze_active()
    assert clock.graze_remaining == clock.graze_duration

    clock.reset()
    assert clock.timer == 0
    assert not clock.is_graze_active()
    assert clock.graze_remaining == 0
    assert clock.beats == 0
