"""Business logic shared between the game screens and background requests."""

from __future__ import annotations

from enum import Enum, auto
import logging
import random
from threading import Lock

from arena_app.core.api_client import ArenaApiClient, NetworkError
from arena_app.core.models import FinalResult, Question, ReportOutcome, UserProfile
from arena_app.core.scheduling import Scheduler
from arena_app.core.services.game_session import (
    ChangeListener,
    EmptyResultError,
    FinishListener,
    GameSession,
)
from arena_app.core.services.matching_session import MatchingSession
from arena_app.core.services.profile_store import ProfileStore
from arena_app.core.services.question_loader import QuestionLoader
from arena_app.core.services.quiz_session import QuizSession
from arena_app.core.services.result_reporter import ResultReporter
from arena_app.core.services.rps_session import RpsMode, RpsSession

logger = logging.getLogger(__name__)


class LoadState(Enum):
    IDLE = auto()
    LOADING = auto()
    EMPTY = auto()
    READY = auto()


class GameKind(Enum):
    QUIZ = auto()
    MATCHING = auto()
    RPS = auto()


class GameManager:
    """Facade for the loader, reporter, profile store and the one active session.

    Every load or game start bumps a generation counter. Work finishing on a
    background thread hands its generation back; if it no longer matches,
    the result belongs to a torn-down screen and is dropped.
    """

    def __init__(
        self,
        api_client: ArenaApiClient,
        profile_store: ProfileStore,
        scheduler: Scheduler,
        rng: random.Random | None = None,
    ) -> None:
        self._lock = Lock()
        self._loader = QuestionLoader(api_client)
        self._reporter = ResultReporter(api_client, profile_store)
        self._profile_store = profile_store
        self._scheduler = scheduler
        self._rng = rng or random.Random()

        self._generation: int = 0
        self._load_state = LoadState.IDLE
        self._module_id: int | str | None = None
        self._questions: list[Question] = []
        self._session: GameSession | None = None
        self._last_kind: GameKind | None = None
        self._last_rps_mode: RpsMode | None = None

    # --- Generations ---

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def get_generation(self) -> int:
        with self._lock:
            return self._generation

    # --- Question loading ---

    def begin_loading(self, module_id: int | str) -> int:
        with self._lock:
            self._teardown_locked()
            self._generation += 1
            self._module_id = module_id
            self._questions = []
            self._load_state = LoadState.LOADING
            return self._generation

    def fetch_questions(self, module_id: int | str) -> list[Question]:
        """Blocking fetch; failures become an empty list. Safe off the UI thread."""
        try:
            return self._loader.load(module_id)
        except EmptyResultError:
            return []
        except NetworkError as exc:
            logger.warning("Question fetch for module %s failed: %s", module_id, exc)
            return []

    def finish_loading(self, generation: int, questions: list[Question]) -> bool:
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping stale question load (generation %d)", generation)
                return False
            self._questions = list(questions)
            self._load_state = LoadState.READY if self._questions else LoadState.EMPTY
            return True

    def get_load_state(self) -> LoadState:
        with self._lock:
            return self._load_state

    def get_module_id(self) -> int | str | None:
        with self._lock:
            return self._module_id

    def get_questions(self) -> list[Question]:
        with self._lock:
            return list(self._questions)

    # --- Sessions ---

    def start_game(
        self,
        kind: GameKind,
        *,
        rps_mode: RpsMode | None = None,
        on_change: ChangeListener | None = None,
        on_finished: FinishListener | None = None,
    ) -> GameSession:
        with self._lock:
            if self._load_state is not LoadState.READY:
                raise EmptyResultError("No questions loaded for this module.")
            self._teardown_locked()
            self._generation += 1
            profile = self._profile_store.load()
            options = dict(
                student_id=profile.id if profile else None,
                module_id=self._module_id,
                rng=self._rng,
                on_change=on_change,
                on_finished=on_finished,
            )
            if kind is GameKind.QUIZ:
                session: GameSession = QuizSession(self._questions, self._scheduler, **options)
            elif kind is GameKind.MATCHING:
                session = MatchingSession(self._questions, self._scheduler, **options)
            else:
                session = RpsSession(self._questions, self._scheduler, **options)
            self._session = session
            self._last_kind = kind
            self._last_rps_mode = rps_mode
            module_id = self._module_id
        # select_mode notifies listeners; it must run without holding the lock.
        if isinstance(session, RpsSession) and rps_mode is not None:
            session.select_mode(rps_mode)
        logger.info("Started %s for module %s", session.game_name, module_id)
        return session

    def retry_game(
        self,
        *,
        on_change: ChangeListener | None = None,
        on_finished: FinishListener | None = None,
    ) -> GameSession:
        """Start a fresh session of the last game with the same questions."""
        with self._lock:
            kind = self._last_kind
            rps_mode = self._last_rps_mode
        if kind is None:
            raise RuntimeError("No game has been played yet.")
        return self.start_game(kind, rps_mode=rps_mode, on_change=on_change, on_finished=on_finished)

    def get_active_session(self) -> GameSession | None:
        with self._lock:
            return self._session

    def end_session(self) -> None:
        with self._lock:
            self._teardown_locked()
            self._generation += 1

    def _teardown_locked(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    # --- Results & profile ---

    def submit_result(self, result: FinalResult) -> ReportOutcome:
        """Blocking submission; raises NetworkError or DuplicateSubmissionError."""
        return self._reporter.report(result)

    def has_submitted(self, session_id: str) -> bool:
        return self._reporter.has_submitted(session_id)

    def get_profile(self) -> UserProfile | None:
        return self._profile_store.load()
