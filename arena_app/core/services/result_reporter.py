"""Submits finished sessions to the scoring API and merges the granted XP."""

from __future__ import annotations

import logging
from threading import Lock

from arena_app.core.api_client import ArenaApiClient, NetworkError
from arena_app.core.models import FinalResult, ReportOutcome
from arena_app.core.services.profile_store import ProfileStore

logger = logging.getLogger(__name__)


class DuplicateSubmissionError(Exception):
    """Raised when a session's result has already been submitted."""


class ResultReporter:
    """Sends each session's result at most once.

    A session id is consumed before the request goes out, so a failed
    submission is never resent; replaying the game produces a new session.
    """

    def __init__(self, api_client: ArenaApiClient, profile_store: ProfileStore) -> None:
        self._api_client = api_client
        self._profile_store = profile_store
        self._submitted: set[str] = set()
        self._lock = Lock()

    def has_submitted(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._submitted

    def report(self, result: FinalResult) -> ReportOutcome:
        with self._lock:
            if result.session_id in self._submitted:
                logger.warning("Result for session %s already submitted", result.session_id)
                raise DuplicateSubmissionError(result.session_id)
            self._submitted.add(result.session_id)

        try:
            xp_earned = self._api_client.save_score(result)
        except NetworkError as exc:
            logger.warning("Saving score for session %s failed: %s", result.session_id, exc)
            raise

        logger.info(
            "Saved %s score %d/%d, earned %d XP",
            result.game_name,
            result.correct,
            result.total,
            xp_earned,
        )
        profile = self._profile_store.add_xp(xp_earned)
        return ReportOutcome(result=result, xp_earned=xp_earned, profile=profile)
