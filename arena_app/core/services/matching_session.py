"""Memory-style matching of question cards with their answer cards."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from arena_app.constants.game_constants import (
    GAME_NAME_MATCHING,
    MAX_PAIRS,
    MISMATCH_HIDE_DELAY_MS,
)
from arena_app.core.models import Card, CardSide, Question
from arena_app.core.scheduling import Scheduler
from arena_app.core.services.game_session import (
    ChangeListener,
    EmptyResultError,
    FinishListener,
    GameSession,
)

logger = logging.getLogger(__name__)


def build_deck(
    questions: Sequence[Question],
    rng: random.Random,
    max_pairs: int = MAX_PAIRS,
) -> list[Card]:
    """Split the first ``max_pairs`` questions into question/answer cards and shuffle them once."""
    cards: list[Card] = []
    for pair, question in enumerate(questions[:max_pairs]):
        cards.append(Card(id=f"Q{pair}", side=CardSide.QUESTION, pair=pair, text=question.question))
        cards.append(
            Card(id=f"A{pair}", side=CardSide.ANSWER, pair=pair, text=question.correct_answer)
        )
    rng.shuffle(cards)
    return cards


def is_match(first: Card, second: Card) -> bool:
    return first.pair == second.pair and first.side is not second.side


class MatchingSession(GameSession):
    """Tracks face-up cards, matched pairs and completion."""

    def __init__(
        self,
        questions: Sequence[Question],
        scheduler: Scheduler,
        *,
        max_pairs: int = MAX_PAIRS,
        hide_delay_ms: int = MISMATCH_HIDE_DELAY_MS,
        student_id: int | str | None = None,
        module_id: int | str | None = None,
        rng: random.Random | None = None,
        on_change: ChangeListener | None = None,
        on_finished: FinishListener | None = None,
    ) -> None:
        if not questions:
            raise EmptyResultError("Matching needs at least one question.")
        super().__init__(
            GAME_NAME_MATCHING,
            scheduler,
            student_id=student_id,
            module_id=module_id,
            rng=rng,
            on_change=on_change,
            on_finished=on_finished,
        )
        self._hide_delay_ms = hide_delay_ms
        self._cards: list[Card] = build_deck(questions, self._rng, max_pairs)
        self._cards_by_id: dict[str, Card] = {card.id: card for card in self._cards}
        self._pair_count: int = len(self._cards) // 2
        self._selected: list[Card] = []
        self._matched: set[str] = set()
        self._score: int = 0

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def pair_count(self) -> int:
        return self._pair_count

    @property
    def score(self) -> int:
        return self._score

    @property
    def matched(self) -> frozenset[str]:
        return frozenset(self._matched)

    @property
    def selected(self) -> tuple[str, ...]:
        return tuple(card.id for card in self._selected)

    @property
    def awaiting_evaluation(self) -> bool:
        return len(self._selected) == 2

    def is_face_up(self, card_id: str) -> bool:
        return card_id in self._matched or any(card.id == card_id for card in self._selected)

    def tap_card(self, card_id: str) -> bool | None:
        """Flip a card. Returns the match verdict on a second flip, otherwise None."""
        if not self.is_live or len(self._selected) == 2:
            return None
        card = self._cards_by_id.get(card_id)
        if card is None or card.id in self._matched or card in self._selected:
            return None

        self._selected.append(card)
        if len(self._selected) < 2:
            self._notify()
            return None

        first, second = self._selected
        if is_match(first, second):
            self._matched.update((first.id, second.id))
            self._score = min(self._score + 1, self._pair_count)
            self._selected = []
            self._notify()
            if len(self._matched) == len(self._cards):
                self._finalize(self._score, self._pair_count)
            return True

        self._notify()
        self._call_later(self._hide_delay_ms, self._hide_selection)
        return False

    def _hide_selection(self) -> None:
        self._selected = []
        self._notify()
