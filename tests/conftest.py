import random

import pytest

from arena_app.core.models import Question
from arena_app.core.scheduling import ManualScheduler


def make_question(idx: int, correct: str = "B") -> Question:
    choices = {letter: f"Answer {letter}{idx}" for letter in "ABCD"}
    return Question(
        id=idx,
        question=f"Question {idx}?",
        choice_a=choices["A"],
        choice_b=choices["B"],
        choice_c=choices["C"],
        choice_d=choices["D"],
        correct_answer=choices[correct],
    )


class ScriptedRandom(random.Random):
    """Random whose ``choice`` replays a fixed sequence."""

    def __init__(self, picks):
        super().__init__(0)
        self._picks = list(picks)

    def choice(self, seq):
        pick = self._picks.pop(0)
        assert pick in seq
        return pick


class FakeResponse:
    def __init__(self, status_code=200, payload=None, invalid_json=False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._invalid_json:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeHttpSession:
    """Stands in for requests.Session; replies are queued per method."""

    def __init__(self):
        self.replies = {"get": [], "post": []}
        self.calls = []
        self.closed = False

    def queue(self, method, reply):
        self.replies[method].append(reply)

    def _reply(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        reply = self.replies[method].pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def get(self, url, **kwargs):
        return self._reply("get", url, **kwargs)

    def post(self, url, **kwargs):
        return self._reply("post", url, **kwargs)

    def close(self):
        self.closed = True


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def questions():
    return [make_question(idx) for idx in range(1, 5)]


@pytest.fixture
def http_session():
    return FakeHttpSession()
