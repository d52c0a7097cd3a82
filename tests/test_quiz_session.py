import random

import pytest

from arena_app.core.models import Question
from arena_app.core.services.game_session import EmptyResultError
from arena_app.core.services.quiz_session import QuizPhase, QuizSession

from conftest import make_question


def _session(questions, scheduler, **kwargs):
    results = []
    session = QuizSession(questions, scheduler, on_finished=results.append, **kwargs)
    return session, results


def test_correct_answer_then_timeout_finalizes_one_of_two(scheduler):
    session, results = _session([make_question(1), make_question(2)], scheduler)
    session.dismiss_instructions()

    assert session.select_answer("Answer B1") is True
    assert session.advance() is True
    assert session.index == 1
    assert session.time_left == 10

    scheduler.advance(10_000)

    assert len(results) == 1
    assert (results[0].correct, results[0].total) == (1, 2)
    assert results[0].game_name == "Quiz Game"
    assert session.phase is QuizPhase.FINISHED


def test_clock_waits_for_instructions(scheduler):
    session, _ = _session([make_question(1)], scheduler)
    scheduler.advance(5000)
    assert session.time_left == 10
    assert session.select_answer("Answer B1") is None

    session.dismiss_instructions()
    scheduler.advance(3000)
    assert session.time_left == 7


def test_answer_is_locked_after_first_selection(scheduler):
    session, _ = _session([make_question(1), make_question(2)], scheduler)
    session.dismiss_instructions()

    assert session.select_answer("Answer A1") is False
    assert session.select_answer("Answer B1") is None
    assert session.correct_count == 0
    assert session.selected == "Answer A1"
    assert session.phase is QuizPhase.ANSWER_REVEALED


def test_revealed_answer_stops_the_clock(scheduler):
    session, results = _session([make_question(1)], scheduler)
    session.dismiss_instructions()
    session.select_answer("Answer C1")
    scheduler.advance(30_000)
    assert results == []
    assert session.advance() is False
    assert (results[0].correct, results[0].total) == (0, 1)


def test_unknown_answer_counts_as_wrong(scheduler):
    session, _ = _session([make_question(1)], scheduler)
    session.dismiss_instructions()
    assert session.select_answer("not a choice") is False
    assert session.correct_count == 0


def test_timeout_scores_like_a_wrong_answer(scheduler):
    timed_out, timed_out_results = _session([make_question(1), make_question(2)], scheduler)
    timed_out.dismiss_instructions()
    scheduler.advance(10_000)
    assert timed_out.index == 1
    assert timed_out.correct_count == 0
    assert timed_out.phase is QuizPhase.AWAITING_ANSWER

    wrong, _ = _session([make_question(1), make_question(2)], scheduler)
    wrong.dismiss_instructions()
    wrong.select_answer("Answer D1")
    wrong.advance()
    assert wrong.correct_count == timed_out.correct_count
    assert timed_out_results == []


@pytest.mark.parametrize("seed", range(25))
def test_hint_never_eliminates_the_correct_answer(scheduler, seed):
    session, _ = _session([make_question(1, correct="C")], scheduler, rng=random.Random(seed))
    session.dismiss_instructions()

    eliminated = session.use_hint()

    assert len(eliminated) == 2
    assert "choice_c" not in eliminated
    assert "choice_c" in session.available_choices()


def test_hint_is_spent_once_per_question(scheduler):
    session, _ = _session([make_question(1), make_question(2)], scheduler, rng=random.Random(3))
    session.dismiss_instructions()
    first = session.use_hint()
    assert session.use_hint() == ()
    assert session.eliminated_options == first

    session.select_answer("Answer B1")
    session.advance()
    assert session.hint_used is False
    assert session.eliminated_options == ()
    assert len(session.use_hint()) == 2


def test_hint_with_exactly_two_wrong_choices_removes_both(scheduler):
    question = Question(
        id=7,
        question="2 + 2?",
        choice_a="4",
        choice_b="3",
        choice_c="5",
        choice_d="4",
        correct_answer="4",
    )
    session, _ = _session([question], scheduler)
    session.dismiss_instructions()
    assert session.use_hint() == ("choice_b", "choice_c")


def test_eliminated_choice_cannot_be_selected(scheduler):
    session, _ = _session([make_question(1)], scheduler, rng=random.Random(1))
    session.dismiss_instructions()
    eliminated = session.use_hint()
    assert session.select_choice(eliminated[0]) is None
    assert session.select_answer(session.current_question.choice(eliminated[1])) is None
    assert session.phase is QuizPhase.AWAITING_ANSWER


def test_hint_prompt_suspends_the_clock(scheduler):
    session, _ = _session([make_question(1)], scheduler)
    session.dismiss_instructions()
    scheduler.advance(2000)
    session.open_prompt()
    scheduler.advance(5000)
    assert session.time_left == 8

    session.use_hint()
    scheduler.advance(1000)
    assert session.time_left == 7


def test_no_hint_after_answering(scheduler):
    session, _ = _session([make_question(1)], scheduler)
    session.dismiss_instructions()
    session.select_answer("Answer B1")
    assert session.use_hint() == ()


def test_finalizes_once_even_with_repeated_triggers(scheduler):
    session, results = _session([make_question(1)], scheduler)
    session.dismiss_instructions()
    session.select_answer("Answer B1")
    session.advance()
    session.advance()
    scheduler.advance(20_000)
    assert len(results) == 1
    assert results[0].correct <= results[0].total


def test_closed_session_ignores_everything(scheduler):
    session, results = _session([make_question(1)], scheduler)
    session.dismiss_instructions()
    session.close()

    scheduler.advance(20_000)
    assert session.select_answer("Answer B1") is None
    assert session.advance() is False
    assert results == []
    assert scheduler.pending_count() == 0


def test_empty_question_list_never_starts():
    with pytest.raises(EmptyResultError):
        QuizSession([], scheduler=None)


def test_progress_tracks_position(scheduler, questions):
    session, _ = _session(questions, scheduler)
    session.dismiss_instructions()
    assert session.progress == pytest.approx(0.25)
    session.select_answer("x")
    session.advance()
    assert session.progress == pytest.approx(0.5)


def test_unknown_choice_key_is_revealed_as_wrong(scheduler):
    session, _ = _session([make_question(1)], scheduler)
    session.dismiss_instructions()

    assert session.select_choice("choice_z") is False
    assert session.phase is QuizPhase.ANSWER_REVEALED
    assert session.selected is None
    assert session.correct_count == 0
