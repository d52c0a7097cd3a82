import random

import pytest

from arena_app.core.api_client import ArenaApiClient
from arena_app.core.game_manager import GameKind, GameManager, LoadState
from arena_app.core.models import UserProfile
from arena_app.core.services.game_session import EmptyResultError
from arena_app.core.services.matching_session import MatchingSession
from arena_app.core.services.profile_store import ProfileStore
from arena_app.core.services.quiz_session import QuizSession
from arena_app.core.services.rps_session import RpsMode, RpsSession

from conftest import FakeResponse, make_question


@pytest.fixture
def store(tmp_path):
    store = ProfileStore(tmp_path / "user.json")
    store.save(UserProfile(id=42, fullname="Ana", xp=0))
    return store


@pytest.fixture
def manager(http_session, store, scheduler):
    client = ArenaApiClient("http://arena.test", session=http_session)
    return GameManager(client, store, scheduler, rng=random.Random(5))


def _ready(manager, module_id=3, count=3):
    generation = manager.begin_loading(module_id)
    manager.finish_loading(generation, [make_question(idx) for idx in range(1, count + 1)])


def test_load_states(manager):
    assert manager.get_load_state() is LoadState.IDLE
    generation = manager.begin_loading(3)
    assert manager.get_load_state() is LoadState.LOADING

    assert manager.finish_loading(generation, [])
    assert manager.get_load_state() is LoadState.EMPTY

    _ready(manager)
    assert manager.get_load_state() is LoadState.READY
    assert manager.get_module_id() == 3
    assert len(manager.get_questions()) == 3


def test_stale_load_is_dropped(manager):
    stale = manager.begin_loading(1)
    current = manager.begin_loading(2)

    assert manager.finish_loading(stale, [make_question(1)]) is False
    assert manager.get_load_state() is LoadState.LOADING
    assert manager.finish_loading(current, [make_question(2)]) is True
    assert manager.get_questions()[0].id == 2


def test_fetch_failures_become_an_empty_list(manager, http_session):
    http_session.queue("get", FakeResponse(status_code=500))
    http_session.queue("get", FakeResponse(payload={"questions": []}))

    assert manager.fetch_questions(1) == []
    assert manager.fetch_questions(1) == []


def test_games_need_loaded_questions(manager):
    with pytest.raises(EmptyResultError):
        manager.start_game(GameKind.QUIZ)

    generation = manager.begin_loading(3)
    manager.finish_loading(generation, [])
    with pytest.raises(EmptyResultError):
        manager.start_game(GameKind.MATCHING)


def test_start_game_builds_the_requested_session(manager):
    _ready(manager)

    quiz = manager.start_game(GameKind.QUIZ)
    assert isinstance(quiz, QuizSession)
    assert quiz.student_id == 42
    assert quiz.module_id == 3

    matching = manager.start_game(GameKind.MATCHING)
    assert isinstance(matching, MatchingSession)

    rps = manager.start_game(GameKind.RPS, rps_mode=RpsMode.CHALLENGE)
    assert isinstance(rps, RpsSession)
    assert rps.mode is RpsMode.CHALLENGE
    assert manager.get_active_session() is rps


def test_starting_a_game_tears_down_the_previous_one(manager, scheduler):
    _ready(manager)
    results = []
    quiz = manager.start_game(GameKind.QUIZ, on_finished=results.append)
    quiz.dismiss_instructions()
    generation = manager.get_generation()

    manager.start_game(GameKind.MATCHING)

    assert quiz.is_closed
    assert not manager.is_current(generation)
    scheduler.advance(60_000)
    assert results == []


def test_end_session_closes_and_invalidates(manager):
    _ready(manager)
    session = manager.start_game(GameKind.QUIZ)
    generation = manager.get_generation()

    manager.end_session()

    assert session.is_closed
    assert manager.get_active_session() is None
    assert not manager.is_current(generation)


def test_retry_starts_a_fresh_session_of_the_same_game(manager):
    with pytest.raises(RuntimeError):
        manager.retry_game()

    _ready(manager)
    first = manager.start_game(GameKind.RPS, rps_mode=RpsMode.CLASSIC)
    second = manager.retry_game()

    assert isinstance(second, RpsSession)
    assert second.mode is RpsMode.CLASSIC
    assert second.session_id != first.session_id
    assert first.is_closed


def test_submit_result_merges_xp(manager, http_session, scheduler):
    _ready(manager, count=1)
    results = []
    quiz = manager.start_game(GameKind.QUIZ, on_finished=results.append)
    quiz.dismiss_instructions()
    quiz.select_answer("Answer B1")
    quiz.advance()
    http_session.queue("post", FakeResponse(payload={"xp_earned": 10}))

    outcome = manager.submit_result(results[0])

    assert outcome.xp_earned == 10
    assert manager.has_submitted(results[0].session_id)
    assert manager.get_profile().xp == 10
    assert http_session.calls[-1][2]["json"]["student_id"] == 42
