"""HTTP client for the games endpoints of the learning platform API."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator
import requests

from arena_app.constants.network_constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    QUESTIONS_PATH_TEMPLATE,
    SAVE_SCORE_PATH,
)
from arena_app.core.models import FinalResult, Question

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """Raised when a request fails, returns a non-2xx status, or a malformed body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# --- Wire models ---


class QuestionPayload(BaseModel):
    model_config = {"extra": "ignore"}

    id: int | str | None = None
    question: str = ""
    choice_a: str = ""
    choice_b: str = ""
    choice_c: str = ""
    choice_d: str = ""
    correct_answer: str = ""

    @field_validator(
        "question", "choice_a", "choice_b", "choice_c", "choice_d", "correct_answer", mode="before"
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    def to_question(self) -> Question:
        return Question(
            id=self.id,
            question=self.question,
            choice_a=self.choice_a,
            choice_b=self.choice_b,
            choice_c=self.choice_c,
            choice_d=self.choice_d,
            correct_answer=self.correct_answer,
        )


class QuestionListResponse(BaseModel):
    model_config = {"extra": "ignore"}

    questions: list[QuestionPayload] | None = None


class SaveScoreRequest(BaseModel):
    student_id: int | str | None
    module_id: int | str | None
    game_name: str
    correct: int
    total: int


class SaveScoreResponse(BaseModel):
    model_config = {"extra": "ignore"}

    xp_earned: int = 0

    @field_validator("xp_earned", mode="before")
    @classmethod
    def _default_missing(cls, value: Any) -> Any:
        return 0 if value is None else value


# --- Client ---


class ArenaApiClient:
    """Thin wrapper over ``requests`` for the two calls the games make."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch_questions(self, module_id: int | str) -> list[Question]:
        """GET the module's question set. An absent list comes back empty."""
        url = self._url(QUESTIONS_PATH_TEMPLATE.format(module_id=module_id))
        body = self._request("get", url)
        try:
            payload = QuestionListResponse.model_validate(body)
        except ValidationError as exc:
            raise NetworkError(f"Malformed question list from {url}: {exc}") from exc
        return [item.to_question() for item in payload.questions or []]

    def save_score(self, result: FinalResult) -> int:
        """POST a finished session's score. Returns the XP the server granted."""
        url = self._url(SAVE_SCORE_PATH)
        request_body = SaveScoreRequest(**result.to_payload())
        body = self._request("post", url, json=request_body.model_dump())
        try:
            return SaveScoreResponse.model_validate(body).xp_earned
        except ValidationError as exc:
            raise NetworkError(f"Malformed save-score response from {url}: {exc}") from exc

    def close(self) -> None:
        self._session.close()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = getattr(self._session, method)(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise NetworkError(f"{method.upper()} {url} failed: {exc}") from exc

        if not response.ok:
            raise NetworkError(
                f"{method.upper()} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise NetworkError(f"{method.upper()} {url} returned invalid JSON") from exc
