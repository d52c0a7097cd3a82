"""Countdown clock for a single timed question or bonus round."""

from __future__ import annotations

from enum import Enum, auto
import logging
from typing import Callable

from arena_app.constants.game_constants import TICK_INTERVAL_MS
from arena_app.core.scheduling import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class TimerState(Enum):
    PAUSED = auto()
    RUNNING = auto()
    EXPIRED = auto()
    CANCELLED = auto()


class RoundTimer:
    """Decrements ``time_left`` once per tick while running.

    The timer starts paused. Reaching zero moves it to ``EXPIRED`` and calls
    ``on_expired`` once. After ``cancel()`` nothing it scheduled can fire.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        limit_seconds: int,
        on_expired: Callable[[], None],
        on_tick: Callable[[int], None] | None = None,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        if limit_seconds <= 0:
            raise ValueError("Time limit must be a positive integer.")
        self._scheduler = scheduler
        self._limit_seconds = limit_seconds
        self._on_expired = on_expired
        self._on_tick = on_tick
        self._tick_interval_ms = tick_interval_ms
        self._time_left = limit_seconds
        self._state = TimerState.PAUSED
        self._handle: TimerHandle | None = None

    @property
    def time_left(self) -> int:
        return self._time_left

    @property
    def limit_seconds(self) -> int:
        return self._limit_seconds

    @property
    def state(self) -> TimerState:
        return self._state

    def is_running(self) -> bool:
        return self._state is TimerState.RUNNING

    def start(self) -> None:
        if self._state is not TimerState.PAUSED:
            return
        self._state = TimerState.RUNNING
        self._schedule_tick()

    def resume(self) -> None:
        self.start()

    def pause(self) -> None:
        if self._state is not TimerState.RUNNING:
            return
        self._cancel_handle()
        self._state = TimerState.PAUSED

    def reset(self, limit_seconds: int | None = None) -> None:
        """Stop the clock and refill it. A cancelled timer stays cancelled."""
        if self._state is TimerState.CANCELLED:
            return
        if limit_seconds is not None:
            if limit_seconds <= 0:
                raise ValueError("Time limit must be a positive integer.")
            self._limit_seconds = limit_seconds
        self._cancel_handle()
        self._time_left = self._limit_seconds
        self._state = TimerState.PAUSED

    def cancel(self) -> None:
        self._cancel_handle()
        self._state = TimerState.CANCELLED

    def _schedule_tick(self) -> None:
        self._handle = self._scheduler.call_later(self._tick_interval_ms, self._tick)

    def _cancel_handle(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _tick(self) -> None:
        self._handle = None
        if self._state is not TimerState.RUNNING:
            logger.debug("Ignoring tick for timer in state %s", self._state.name)
            return
        self._time_left = max(0, self._time_left - 1)
        if self._on_tick is not None:
            self._on_tick(self._time_left)
        if self._state is not TimerState.RUNNING:
            return
        if self._time_left == 0:
            self._state = TimerState.EXPIRED
            self._on_expired()
            return
        self._schedule_tick()
