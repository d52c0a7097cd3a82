import random

import pytest

from arena_app.core.models import CardSide
from arena_app.core.services.game_session import EmptyResultError
from arena_app.core.services.matching_session import MatchingSession, build_deck, is_match

from conftest import make_question


def _session(questions, scheduler, **kwargs):
    results = []
    session = MatchingSession(
        questions, scheduler, rng=random.Random(7), on_finished=results.append, **kwargs
    )
    return session, results


def test_deck_holds_a_question_and_answer_card_per_pair():
    questions = [make_question(idx) for idx in range(1, 6)]
    deck = build_deck(questions, random.Random(1), max_pairs=3)

    assert len(deck) == 6
    assert {card.id for card in deck} == {"Q0", "A0", "Q1", "A1", "Q2", "A2"}
    by_id = {card.id: card for card in deck}
    assert by_id["Q1"].text == "Question 2?"
    assert by_id["A1"].text == "Answer B2"
    assert by_id["A1"].side is CardSide.ANSWER


def test_seeded_shuffle_is_reproducible():
    questions = [make_question(idx) for idx in range(1, 4)]
    first = [card.id for card in build_deck(questions, random.Random(42))]
    second = [card.id for card in build_deck(questions, random.Random(42))]
    assert first == second


def test_match_requires_same_pair_on_opposite_sides():
    deck = {card.id: card for card in build_deck([make_question(1), make_question(2)], random.Random(0))}
    assert is_match(deck["Q0"], deck["A0"])
    assert is_match(deck["A1"], deck["Q1"])
    assert not is_match(deck["Q0"], deck["A1"])


def test_matching_every_pair_finalizes_full_score(scheduler):
    session, results = _session([make_question(idx) for idx in range(1, 4)], scheduler)

    for pair in range(3):
        assert session.tap_card(f"Q{pair}") is None
        assert session.tap_card(f"A{pair}") is True

    assert len(results) == 1
    assert (results[0].correct, results[0].total) == (3, 3)
    assert results[0].game_name == "Matching Game"
    assert session.is_finished


def test_mismatch_hides_after_delay(scheduler):
    session, _ = _session([make_question(idx) for idx in range(1, 4)], scheduler)

    session.tap_card("Q0")
    assert session.tap_card("A1") is False
    assert session.awaiting_evaluation
    assert session.is_face_up("Q0")

    scheduler.advance(699)
    assert session.selected == ("Q0", "A1")

    scheduler.advance(1)
    assert session.selected == ()
    assert not session.is_face_up("Q0")
    assert session.score == 0


def test_third_tap_is_ignored_while_pair_is_pending(scheduler):
    session, _ = _session([make_question(idx) for idx in range(1, 4)], scheduler)
    session.tap_card("Q0")
    session.tap_card("A1")

    assert session.tap_card("Q2") is None
    assert session.selected == ("Q0", "A1")


def test_matched_and_repeated_taps_are_ignored(scheduler):
    session, _ = _session([make_question(idx) for idx in range(1, 4)], scheduler)
    session.tap_card("Q0")
    assert session.tap_card("Q0") is None
    assert session.selected == ("Q0",)

    session.tap_card("A0")
    assert session.tap_card("A0") is None
    assert session.tap_card("missing") is None
    assert session.matched == frozenset({"Q0", "A0"})
    assert session.score == 1


def test_total_is_the_number_of_pairs_dealt(scheduler):
    session, results = _session([make_question(1), make_question(2)], scheduler)
    assert session.pair_count == 2
    for pair in range(2):
        session.tap_card(f"Q{pair}")
        session.tap_card(f"A{pair}")
    assert (results[0].correct, results[0].total) == (2, 2)


def test_only_the_first_pairs_are_dealt(scheduler, questions):
    session, _ = _session(questions, scheduler, max_pairs=3)
    assert len(session.cards) == 6
    assert session.pair_count == 3


def test_close_cancels_pending_hide(scheduler):
    changes = []
    session, _ = _session(
        [make_question(1), make_question(2)], scheduler, on_change=lambda: changes.append(True)
    )
    session.tap_card("Q0")
    session.tap_card("A1")
    session.close()

    scheduler.advance(1000)
    assert changes == [True, True]
    assert session.tap_card("Q1") is None


def test_empty_deck_never_starts(scheduler):
    with pytest.raises(EmptyResultError):
        MatchingSession([], scheduler)
