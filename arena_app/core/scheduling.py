"""Cancellable delayed-callback scheduling used by timers and delayed reveals.

The core never sleeps or owns a thread. Everything time-based goes through a
``Scheduler`` so the Qt event loop can drive it in the application.

``ManualScheduler`` is a test double: a virtual clock for driving sessions
and timers deterministically in tests. The application never uses it; it
runs on ``arena_app.ui.qt_scheduler.QtScheduler``.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        ...


class ManualTimerHandle:
    """Handle returned by ``ManualScheduler``."""

    __slots__ = ("due_ms", "callback", "cancelled", "fired")

    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class ManualScheduler:
    """Test double: a virtual clock that fires callbacks only when ``advance`` is called."""

    def __init__(self) -> None:
        self._now_ms: int = 0
        self._queue: list[tuple[int, int, ManualTimerHandle]] = []
        self._sequence = itertools.count()

    @property
    def now_ms(self) -> int:
        return self._now_ms

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualTimerHandle:
        if delay_ms < 0:
            raise ValueError("Delay must not be negative.")
        handle = ManualTimerHandle(self._now_ms + delay_ms, callback)
        heapq.heappush(self._queue, (handle.due_ms, next(self._sequence), handle))
        return handle

    def advance(self, delay_ms: int) -> int:
        """Move the clock forward, firing due callbacks in order. Returns the number fired."""
        if delay_ms < 0:
            raise ValueError("Cannot move the clock backwards.")
        target = self._now_ms + delay_ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due_ms, _, handle = heapq.heappop(self._queue)
            if not handle.active:
                continue
            self._now_ms = due_ms
            handle.fired = True
            handle.callback()
            fired += 1
        self._now_ms = target
        return fired

    def pending_count(self) -> int:
        return sum(1 for _, _, handle in self._queue if handle.active)
