"""Shared lifecycle for one play-through of a game screen."""

from __future__ import annotations

import logging
import random
from typing import Callable
from uuid import uuid4

from arena_app.core.models import FinalResult
from arena_app.core.scheduling import Scheduler, TimerHandle
from arena_app.core.services.round_timer import RoundTimer

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]
FinishListener = Callable[[FinalResult], None]


class EmptyResultError(Exception):
    """Raised when a question set is missing or has no entries."""


class GameSession:
    """Base class owning the timers, listeners and finalization of a session.

    A session finalizes at most once. ``close()`` tears it down: pending
    timers are cancelled and any late callback or user action is ignored.
    """

    def __init__(
        self,
        game_name: str,
        scheduler: Scheduler,
        *,
        student_id: int | str | None = None,
        module_id: int | str | None = None,
        rng: random.Random | None = None,
        on_change: ChangeListener | None = None,
        on_finished: FinishListener | None = None,
    ) -> None:
        self.session_id: str = uuid4().hex
        self.game_name = game_name
        self.student_id = student_id
        self.module_id = module_id
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self._on_change = on_change
        self._on_finished = on_finished
        self._timer: RoundTimer | None = None
        self._pending: list[TimerHandle] = []
        self._result: FinalResult | None = None
        self._closed: bool = False
        self._prompt_open: bool = True

    # --- Lifecycle ---

    @property
    def is_finished(self) -> bool:
        return self._result is not None

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def result(self) -> FinalResult | None:
        return self._result

    @property
    def show_instructions(self) -> bool:
        return self._prompt_open

    @property
    def is_live(self) -> bool:
        return not (self._closed or self._result is not None)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._timer is not None:
            self._timer.cancel()
        for handle in self._pending:
            handle.cancel()
        self._pending.clear()
        logger.debug("Session %s (%s) closed", self.session_id, self.game_name)

    # --- Prompts (instructions / hint modals) ---

    def open_prompt(self) -> None:
        if not self.is_live:
            return
        self._prompt_open = True
        if self._timer is not None:
            self._timer.pause()
        self._notify()

    def close_prompt(self) -> None:
        if not self.is_live:
            return
        self._prompt_open = False
        self._on_prompt_closed()
        self._notify()

    def dismiss_instructions(self) -> None:
        self.close_prompt()

    def _on_prompt_closed(self) -> None:
        """Hook for subclasses to resume their clock."""

    # --- Helpers for subclasses ---

    @property
    def time_left(self) -> int | None:
        return self._timer.time_left if self._timer is not None else None

    def _make_timer(self, limit_seconds: int, on_expired: Callable[[], None]) -> RoundTimer:
        return RoundTimer(
            self._scheduler,
            limit_seconds,
            on_expired=self._guard(on_expired),
            on_tick=lambda _remaining: self._notify(),
        )

    def _call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        handle = self._scheduler.call_later(delay_ms, self._guard(callback))
        self._pending.append(handle)

    def _guard(self, callback: Callable[[], None]) -> Callable[[], None]:
        def guarded() -> None:
            if self._closed:
                logger.debug("Dropping callback for closed session %s", self.session_id)
                return
            callback()

        return guarded

    def _notify(self) -> None:
        if self._on_change is not None and not self._closed:
            self._on_change()

    def _finalize(self, correct: int, total: int) -> FinalResult | None:
        if self._result is not None or self._closed:
            return None
        if self._timer is not None:
            self._timer.cancel()
        self._result = FinalResult(
            session_id=self.session_id,
            student_id=self.student_id,
            module_id=self.module_id,
            game_name=self.game_name,
            correct=correct,
            total=total,
        )
        logger.info(
            "Session %s finished: %s %d/%d",
            self.session_id,
            self.game_name,
            self._result.correct,
            self._result.total,
        )
        self._notify()
        if self._on_finished is not None:
            self._on_finished(self._result)
        return self._result
