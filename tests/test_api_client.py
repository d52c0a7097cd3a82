import pytest
import requests

from arena_app.core.api_client import ArenaApiClient, NetworkError
from arena_app.core.models import FinalResult

from conftest import FakeResponse


def _client(http_session):
    return ArenaApiClient("http://arena.test/", timeout=3.0, session=http_session)


def test_fetch_questions_keeps_server_order(http_session):
    http_session.queue(
        "get",
        FakeResponse(
            payload={
                "questions": [
                    {"id": 9, "question": "Second?", "choice_a": "x", "correct_answer": "x"},
                    {"id": 2, "question": "First?", "choice_b": 4, "correct_answer": None},
                ]
            }
        ),
    )

    questions = _client(http_session).fetch_questions(12)

    assert [question.id for question in questions] == [9, 2]
    assert questions[1].choice_b == "4"
    assert questions[1].correct_answer == ""
    method, url, kwargs = http_session.calls[0]
    assert (method, url) == ("get", "http://arena.test/api/games/questions/12")
    assert kwargs["timeout"] == 3.0


@pytest.mark.parametrize("payload", [{}, {"questions": None}, {"questions": []}])
def test_missing_question_list_is_empty(http_session, payload):
    http_session.queue("get", FakeResponse(payload=payload))
    assert _client(http_session).fetch_questions(1) == []


def test_unknown_fields_are_ignored(http_session):
    http_session.queue(
        "get",
        FakeResponse(payload={"questions": [{"id": 1, "question": "Q", "difficulty": "hard"}]}),
    )
    assert _client(http_session).fetch_questions(1)[0].question == "Q"


def test_http_error_carries_status(http_session):
    http_session.queue("get", FakeResponse(status_code=404))
    with pytest.raises(NetworkError) as excinfo:
        _client(http_session).fetch_questions(1)
    assert excinfo.value.status_code == 404


def test_transport_failure_becomes_network_error(http_session):
    http_session.queue("get", requests.ConnectionError("refused"))
    with pytest.raises(NetworkError) as excinfo:
        _client(http_session).fetch_questions(1)
    assert excinfo.value.status_code is None


def test_invalid_json_becomes_network_error(http_session):
    http_session.queue("get", FakeResponse(invalid_json=True))
    with pytest.raises(NetworkError):
        _client(http_session).fetch_questions(1)


def test_malformed_question_list_becomes_network_error(http_session):
    http_session.queue("get", FakeResponse(payload={"questions": "nope"}))
    with pytest.raises(NetworkError):
        _client(http_session).fetch_questions(1)


def test_save_score_posts_the_result(http_session):
    http_session.queue("post", FakeResponse(payload={"xp_earned": 30, "message": "ok"}))
    result = FinalResult("s1", 5, 12, "Quiz Game", correct=3, total=4)

    assert _client(http_session).save_score(result) == 30

    method, url, kwargs = http_session.calls[0]
    assert (method, url) == ("post", "http://arena.test/api/games/save-score")
    assert kwargs["json"] == {
        "student_id": 5,
        "module_id": 12,
        "game_name": "Quiz Game",
        "correct": 3,
        "total": 4,
    }


@pytest.mark.parametrize("payload", [{}, {"xp_earned": None}])
def test_missing_xp_counts_as_zero(http_session, payload):
    http_session.queue("post", FakeResponse(payload=payload))
    result = FinalResult("s1", 5, 12, "Quiz Game", correct=0, total=4)
    assert _client(http_session).save_score(result) == 0


def test_save_score_failure_raises(http_session):
    http_session.queue("post", FakeResponse(status_code=500))
    result = FinalResult("s1", 5, 12, "Quiz Game", correct=1, total=4)
    with pytest.raises(NetworkError):
        _client(http_session).save_score(result)


def test_close_releases_the_session(http_session):
    _client(http_session).close()
    assert http_session.closed
