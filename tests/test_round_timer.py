import pytest

from arena_app.core.scheduling import ManualScheduler
from arena_app.core.services.round_timer import RoundTimer, TimerState


def _timer(scheduler, limit=3):
    expired = []
    ticks = []
    timer = RoundTimer(
        scheduler, limit, on_expired=lambda: expired.append(True), on_tick=ticks.append
    )
    return timer, expired, ticks


def test_counts_down_once_per_second_and_expires_once(scheduler):
    timer, expired, ticks = _timer(scheduler)
    assert timer.state is TimerState.PAUSED

    timer.start()
    scheduler.advance(1000)
    assert timer.time_left == 2

    scheduler.advance(5000)
    assert ticks == [2, 1, 0]
    assert timer.state is TimerState.EXPIRED
    assert expired == [True]
    assert scheduler.pending_count() == 0


def test_pause_suspends_the_clock(scheduler):
    timer, expired, _ = _timer(scheduler)
    timer.start()
    scheduler.advance(1000)
    timer.pause()
    scheduler.advance(10_000)
    assert timer.time_left == 2
    assert not expired

    timer.resume()
    scheduler.advance(2000)
    assert expired == [True]


def test_reset_refills_and_waits_for_start(scheduler):
    timer, _, _ = _timer(scheduler)
    timer.start()
    scheduler.advance(2000)
    timer.reset()
    assert timer.time_left == 3
    assert timer.state is TimerState.PAUSED
    scheduler.advance(5000)
    assert timer.time_left == 3


def test_cancelled_timer_never_fires(scheduler):
    timer, expired, ticks = _timer(scheduler)
    timer.start()
    timer.cancel()
    scheduler.advance(10_000)
    assert ticks == []
    assert not expired
    timer.start()
    timer.reset()
    assert timer.state is TimerState.CANCELLED


def test_rejects_non_positive_limits():
    with pytest.raises(ValueError):
        RoundTimer(ManualScheduler(), 0, on_expired=lambda: None)


def test_manual_scheduler_fires_in_due_order():
    scheduler = ManualScheduler()
    fired = []
    scheduler.call_later(300, lambda: fired.append("late"))
    scheduler.call_later(100, lambda: fired.append("early"))
    cancelled = scheduler.call_later(200, lambda: fired.append("cancelled"))
    cancelled.cancel()

    assert scheduler.advance(500) == 2
    assert fired == ["early", "late"]
    assert scheduler.now_ms == 500
