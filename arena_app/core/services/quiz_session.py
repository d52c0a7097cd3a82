"""Timed multiple-choice quiz with one elimination hint per question."""

from __future__ import annotations

from enum import Enum, auto
import logging
import random
from typing import Sequence

from arena_app.constants.game_constants import (
    CHOICE_KEYS,
    GAME_NAME_QUIZ,
    HINT_ELIMINATION_COUNT,
    QUIZ_TIME_LIMIT_SECONDS,
)
from arena_app.core.models import Question
from arena_app.core.scheduling import Scheduler
from arena_app.core.services.game_session import (
    ChangeListener,
    EmptyResultError,
    FinishListener,
    GameSession,
)

logger = logging.getLogger(__name__)


class QuizPhase(Enum):
    AWAITING_ANSWER = auto()
    ANSWER_REVEALED = auto()
    FINISHED = auto()


class QuizSession(GameSession):
    """Walks through the question list one timed question at a time."""

    def __init__(
        self,
        questions: Sequence[Question],
        scheduler: Scheduler,
        *,
        time_limit_seconds: int = QUIZ_TIME_LIMIT_SECONDS,
        student_id: int | str | None = None,
        module_id: int | str | None = None,
        rng: random.Random | None = None,
        on_change: ChangeListener | None = None,
        on_finished: FinishListener | None = None,
    ) -> None:
        if not questions:
            raise EmptyResultError("Quiz needs at least one question.")
        super().__init__(
            GAME_NAME_QUIZ,
            scheduler,
            student_id=student_id,
            module_id=module_id,
            rng=rng,
            on_change=on_change,
            on_finished=on_finished,
        )
        self._questions: list[Question] = list(questions)
        self._index: int = 0
        self._correct_count: int = 0
        self._selected: str | None = None
        self._answered_correctly: bool = False
        self._phase = QuizPhase.AWAITING_ANSWER
        self._hint_used: bool = False
        self._eliminated: list[str] = []
        self._timer = self._make_timer(time_limit_seconds, self._handle_timeout)

    # --- Read-only state ---

    @property
    def index(self) -> int:
        return self._index

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def current_question(self) -> Question:
        return self._questions[self._index]

    @property
    def correct_count(self) -> int:
        return self._correct_count

    @property
    def selected(self) -> str | None:
        return self._selected

    @property
    def answered_correctly(self) -> bool:
        return self._answered_correctly

    @property
    def phase(self) -> QuizPhase:
        return self._phase

    @property
    def hint_used(self) -> bool:
        return self._hint_used

    @property
    def eliminated_options(self) -> tuple[str, ...]:
        return tuple(self._eliminated)

    @property
    def is_last_question(self) -> bool:
        return self._index >= len(self._questions) - 1

    @property
    def progress(self) -> float:
        return (self._index + 1) / len(self._questions)

    def available_choices(self) -> dict[str, str]:
        """Choices that can still be picked, in display order."""
        return {
            key: value
            for key, value in self.current_question.choices().items()
            if key not in self._eliminated
        }

    # --- Actions ---

    def select_answer(self, answer: str | None) -> bool | None:
        """Lock in an answer. Returns correctness, or None if the call was ignored."""
        if not self.is_live or self._prompt_open or self._phase is not QuizPhase.AWAITING_ANSWER:
            return None
        if self._is_eliminated_value(answer):
            logger.debug("Ignoring eliminated choice %r", answer)
            return None
        return self._reveal(answer)

    def select_choice(self, key: str) -> bool | None:
        """Answer by choice key. An unknown key is revealed as a wrong answer."""
        if key in self._eliminated:
            return None
        if key not in CHOICE_KEYS:
            logger.debug("Unknown choice key %r counts as wrong", key)
            return self.select_answer(None)
        return self.select_answer(self.current_question.choice(key))

    def use_hint(self) -> tuple[str, ...]:
        """Eliminate up to two wrong choices. Returns the keys eliminated by this call."""
        if (
            not self.is_live
            or self._hint_used
            or self._phase is not QuizPhase.AWAITING_ANSWER
        ):
            return ()
        question = self.current_question
        wrong_keys = [
            key for key, value in question.choices().items() if value != question.correct_answer
        ]
        if len(wrong_keys) > HINT_ELIMINATION_COUNT:
            wrong_keys = self._rng.sample(wrong_keys, HINT_ELIMINATION_COUNT)
        self._eliminated = [key for key in CHOICE_KEYS if key in wrong_keys]
        self._hint_used = True
        # The hint prompt closes once the hint is spent.
        self.close_prompt()
        return tuple(self._eliminated)

    def advance(self) -> bool:
        """Move past a revealed answer. Returns True if the session is still running."""
        if not self.is_live or self._phase is not QuizPhase.ANSWER_REVEALED:
            return False
        if self.is_last_question:
            self._phase = QuizPhase.FINISHED
            self._finalize(self._correct_count, len(self._questions))
            return False
        self._index += 1
        self._selected = None
        self._answered_correctly = False
        self._hint_used = False
        self._eliminated = []
        self._phase = QuizPhase.AWAITING_ANSWER
        self._timer.reset()
        if not self._prompt_open:
            self._timer.start()
        self._notify()
        return True

    # --- Internals ---

    def _on_prompt_closed(self) -> None:
        if self._phase is QuizPhase.AWAITING_ANSWER:
            self._timer.resume()

    def _reveal(self, answer: str | None) -> bool:
        self._timer.pause()
        self._selected = answer
        self._answered_correctly = self.current_question.is_correct(answer)
        if self._answered_correctly:
            self._correct_count = min(self._correct_count + 1, len(self._questions))
        self._phase = QuizPhase.ANSWER_REVEALED
        self._notify()
        return self._answered_correctly

    def _handle_timeout(self) -> None:
        if self._phase is not QuizPhase.AWAITING_ANSWER:
            return
        logger.debug("Question %d timed out", self._index + 1)
        self._reveal(None)
        self.advance()

    def _is_eliminated_value(self, answer: str | None) -> bool:
        if answer is None or not self._eliminated:
            return False
        choices = self.current_question.choices()
        eliminated_values = {choices[key] for key in self._eliminated}
        remaining_values = {value for key, value in choices.items() if key not in self._eliminated}
        return answer in eliminated_values and answer not in remaining_values
