"""Fetches the ordered question set of a module."""

from __future__ import annotations

import logging

from arena_app.core.api_client import ArenaApiClient
from arena_app.core.models import Question
from arena_app.core.services.game_session import EmptyResultError

logger = logging.getLogger(__name__)


class QuestionLoader:
    """Loads a module's questions in server order."""

    def __init__(self, api_client: ArenaApiClient) -> None:
        self._api_client = api_client

    def load(self, module_id: int | str) -> list[Question]:
        """Return the question list unchanged.

        Raises:
            EmptyResultError: the list is absent or has no entries.
            NetworkError: the request failed.
        """
        questions = self._api_client.fetch_questions(module_id)
        if not questions:
            logger.info("Module %s has no questions", module_id)
            raise EmptyResultError(f"No questions returned for module {module_id}.")
        logger.info("Loaded %d questions for module %s", len(questions), module_id)
        return questions
