import pytest

from flagtower.engine.timer import TimerController, TimerPhase
from flagtower.levels import LevelDefinition, TimerMode
from flagtower.timing import ManualClock

def blitz(seconds=180, start=1000.0):
    clock = ManualClock(start)
    t = TimerController(TimerMode.BLITZ, seconds, clock=clock)
    t.start()
    return t, clock

def test_none_mode_never_leaves_stopped():
    clock = ManualClock()
    t = TimerController(TimerMode.NONE, clock=clock)
    assert t.start() is TimerPhase.STOPPED
    clock.advance(10_000)
    assert t.poll() is TimerPhase.STOPPED
    t.apply_penalty(50)
    assert t.poll() is TimerPhase.STOPPED

def test_count_up_reports_elapsed_and_stops():
    clock = ManualClock(5.0)
    t = TimerController(TimerMode.COUNT_UP, clock=clock)
    assert t.start() is TimerPhase.RUNNING_COUNT_UP
    clock.advance(75.5)
    assert t.poll() is TimerPhase.RUNNING_COUNT_UP
    assert t.elapsed() == pytest.approx(75.5)
    t.stop()
    clock.advance(100)
    assert t.phase is TimerPhase.STOPPED
    assert t.elapsed() == pytest.approx(75.5)

def test_scenario_b_blitz_expires_after_181_seconds():
    t, clock = blitz(180)
    clock.advance(179)
    assert t.poll() is TimerPhase.RUNNING_BLITZ
    clock.advance(2)
    assert t.poll() is TimerPhase.EXPIRED
    assert t.expired
    # terminal until restarted
    assert t.poll() is TimerPhase.EXPIRED

def test_expires_exactly_at_deadline():
    t, clock = blitz(60)
    clock.advance(60)
    assert t.poll() is TimerPhase.EXPIRED

def test_penalty_arithmetic():
    t, clock = blitz(180)
    clock.advance(40)
    r = t.remaining()
    t.apply_penalty(12)
    assert t.remaining() == pytest.approx(r - 12)
    assert t.poll() is TimerPhase.RUNNING_BLITZ

def test_penalty_past_zero_expires_on_next_poll():
    t, clock = blitz(30)
    clock.advance(25)
    t.apply_penalty(10)
    assert t.phase is TimerPhase.RUNNING_BLITZ
    assert t.poll() is TimerPhase.EXPIRED

def test_remaining_is_derived_not_accumulated():
    t, clock = blitz(100)
    # one big jump (suspended tab) equals many small frames
    clock.advance(70)
    big = t.remaining()
    t2, clock2 = blitz(100)
    for _ in range(7000):
        clock2.advance(0.01)
        t2.poll()
    assert big == pytest.approx(t2.remaining(), abs=1e-6)

def test_stop_freezes_blitz_and_ignores_penalties():
    t, clock = blitz(100)
    clock.advance(10)
    t.stop()
    clock.advance(500)
    assert t.poll() is TimerPhase.STOPPED
    assert t.remaining() == pytest.approx(90)
    t.apply_penalty(50)
    assert t.remaining() == pytest.approx(90)

def test_reading_threshold():
    clock = ManualClock(0)
    t = TimerController(TimerMode.BLITZ, 60, clock=clock, warn_seconds=30)
    t.start()
    assert t.reading().over_threshold is False
    clock.advance(30)
    r = t.reading()
    assert r.over_threshold is True and r.seconds == pytest.approx(30)
    clock.advance(100)
    assert t.reading().seconds == 0.0

def test_blitz_level_requires_duration():
    with pytest.raises(ValueError):
        LevelDefinition(99, "Broken", "no clock", ("fr",), timer=TimerMode.BLITZ)

def test_blitz_timer_without_duration_expires_immediately():
    clock = ManualClock(5.0)
    t = TimerController(TimerMode.BLITZ, None, clock=clock)
    t.start()
    assert t.poll() is TimerPhase.EXPIRED
