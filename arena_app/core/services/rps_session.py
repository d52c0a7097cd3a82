"""Rock-paper-scissors rounds with optional timed bonus questions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging
import random
from typing import Sequence

from arena_app.constants.game_constants import (
    BONUS_QUESTION_DELAY_MS,
    BONUS_QUESTION_TIME_SECONDS,
    GAME_NAME_RPS_CHALLENGE,
    GAME_NAME_RPS_CLASSIC,
    RPS_CHOICES,
    TOTAL_ROUNDS,
)
from arena_app.core.models import Question
from arena_app.core.scheduling import Scheduler
from arena_app.core.services.game_session import ChangeListener, FinishListener, GameSession

logger = logging.getLogger(__name__)

_BEATS = {"rock": "scissors", "scissors": "paper", "paper": "rock"}


class RpsMode(Enum):
    MENU = auto()
    CLASSIC = auto()
    CHALLENGE = auto()


class RpsPhase(Enum):
    AWAITING_CHOICE = auto()
    BONUS_PENDING = auto()
    BONUS_QUESTION = auto()
    FINISHED = auto()


class Outcome(Enum):
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


@dataclass(frozen=True, slots=True)
class RoundResult:
    round: int
    player: str
    cpu: str
    outcome: Outcome


def resolve(player: str, cpu: str) -> Outcome:
    """Cyclic dominance: rock > scissors > paper > rock."""
    if player not in _BEATS or cpu not in _BEATS:
        raise ValueError(f"Unknown hand: {player!r} vs {cpu!r}")
    if player == cpu:
        return Outcome.TIE
    return Outcome.WIN if _BEATS[player] == cpu else Outcome.LOSE


class RpsSession(GameSession):
    """Starts in the mode menu; play begins once a mode is selected."""

    def __init__(
        self,
        questions: Sequence[Question],
        scheduler: Scheduler,
        *,
        total_rounds: int = TOTAL_ROUNDS,
        bonus_time_seconds: int = BONUS_QUESTION_TIME_SECONDS,
        bonus_delay_ms: int = BONUS_QUESTION_DELAY_MS,
        student_id: int | str | None = None,
        module_id: int | str | None = None,
        rng: random.Random | None = None,
        on_change: ChangeListener | None = None,
        on_finished: FinishListener | None = None,
    ) -> None:
        super().__init__(
            GAME_NAME_RPS_CLASSIC,
            scheduler,
            student_id=student_id,
            module_id=module_id,
            rng=rng,
            on_change=on_change,
            on_finished=on_finished,
        )
        if total_rounds <= 0:
            raise ValueError("An RPS session needs at least one round.")
        self._questions: list[Question] = list(questions or [])
        self._total_rounds = total_rounds
        self._bonus_delay_ms = bonus_delay_ms
        self._mode = RpsMode.MENU
        self._phase = RpsPhase.AWAITING_CHOICE
        self._round: int = 1
        self._score: int = 0
        self._question_cursor: int = 0
        self._last_round: RoundResult | None = None
        self._last_bonus_correct: bool | None = None
        self._timer = self._make_timer(bonus_time_seconds, self._handle_bonus_timeout)

    # --- Read-only state ---

    @property
    def mode(self) -> RpsMode:
        return self._mode

    @property
    def phase(self) -> RpsPhase:
        return self._phase

    @property
    def round(self) -> int:
        return self._round

    @property
    def total_rounds(self) -> int:
        return self._total_rounds

    @property
    def score(self) -> int:
        return self._score

    @property
    def last_round(self) -> RoundResult | None:
        return self._last_round

    @property
    def last_bonus_correct(self) -> bool | None:
        return self._last_bonus_correct

    @property
    def bonus_question_count(self) -> int:
        """Bonus questions counted toward the maximum score in challenge mode.

        At most one is asked per round, so a module with more questions than
        rounds leaves the tail unasked.
        """
        if self._mode is not RpsMode.CHALLENGE:
            return 0
        return len(self._questions)

    @property
    def max_score(self) -> int:
        return self._total_rounds + self.bonus_question_count

    @property
    def current_bonus_question(self) -> Question | None:
        if self._phase is not RpsPhase.BONUS_QUESTION:
            return None
        return self._questions[self._question_cursor]

    # --- Actions ---

    def select_mode(self, mode: RpsMode) -> bool:
        if not self.is_live or self._mode is not RpsMode.MENU or mode is RpsMode.MENU:
            return False
        self._mode = mode
        self.game_name = GAME_NAME_RPS_CHALLENGE if mode is RpsMode.CHALLENGE else GAME_NAME_RPS_CLASSIC
        self._prompt_open = True
        self._notify()
        return True

    def play_round(self, choice: str) -> RoundResult | None:
        if choice not in RPS_CHOICES:
            raise ValueError(f"Unknown hand: {choice!r}")
        if (
            not self.is_live
            or self._mode is RpsMode.MENU
            or self._phase is not RpsPhase.AWAITING_CHOICE
        ):
            return None
        cpu = self._rng.choice(RPS_CHOICES)
        outcome = resolve(choice, cpu)
        if outcome is Outcome.WIN:
            self._add_point()
        self._last_round = RoundResult(self._round, choice, cpu, outcome)
        self._last_bonus_correct = None
        logger.debug("Round %d: %s vs %s -> %s", self._round, choice, cpu, outcome.value)

        if self._has_bonus_question():
            self._phase = RpsPhase.BONUS_PENDING
            self._notify()
            self._call_later(self._bonus_delay_ms, self._show_bonus_question)
        else:
            self._next_round()
        return self._last_round

    def answer_bonus(self, answer: str) -> bool | None:
        if not self.is_live or self._phase is not RpsPhase.BONUS_QUESTION or self._prompt_open:
            return None
        question = self._questions[self._question_cursor]
        correct = question.is_correct(answer)
        if correct:
            self._add_point()
        self._finish_bonus(correct)
        return correct

    # --- Internals ---

    def _has_bonus_question(self) -> bool:
        return self._mode is RpsMode.CHALLENGE and self._question_cursor < len(self._questions)

    def _show_bonus_question(self) -> None:
        if self._phase is not RpsPhase.BONUS_PENDING:
            return
        self._phase = RpsPhase.BONUS_QUESTION
        self._timer.reset()
        if not self._prompt_open:
            self._timer.start()
        self._notify()

    def _handle_bonus_timeout(self) -> None:
        if self._phase is not RpsPhase.BONUS_QUESTION:
            return
        logger.debug("Bonus question %d timed out", self._question_cursor + 1)
        self._finish_bonus(False)

    def _finish_bonus(self, correct: bool) -> None:
        self._timer.pause()
        self._last_bonus_correct = correct
        self._question_cursor += 1
        self._next_round()

    def _next_round(self) -> None:
        if self._round < self._total_rounds:
            self._round += 1
            self._phase = RpsPhase.AWAITING_CHOICE
            self._notify()
            return
        self._phase = RpsPhase.FINISHED
        self._finalize(self._score, self.max_score)

    def _add_point(self) -> None:
        self._score = min(self._score + 1, self.max_score)

    def _on_prompt_closed(self) -> None:
        if self._phase is RpsPhase.BONUS_QUESTION:
            self._timer.resume()
