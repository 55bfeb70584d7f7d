import random

import pytest

from guess_the_flag.catalog import COUNTRIES
from guess_the_flag.config import AppConfig
from guess_the_flag.models import Phase, Round
from guess_the_flag.session import QuizSession


def wrong_index(quiz):
    return (quiz.correct_index + 1) % len(quiz.countries)


def play_round(quiz, correct):
    quiz.select_answer(quiz.correct_index if correct else wrong_index(quiz))
    quiz.advance()


def test_new_session_state(session):
    assert session.score == 0
    assert session.rounds_completed == 0
    assert session.phase is Phase.PLAYING
    assert len(session.countries) == 3
    assert len(session.history) == 0


def test_rounds_are_distinct_and_from_catalog(session):
    for _ in range(200):
        session.draw_round()
        assert len(set(session.countries)) == 3
        assert set(session.countries) <= set(COUNTRIES)
        assert 0 <= session.correct_index < 3
        assert session.prompt_country == session.countries[session.correct_index]


def test_correct_answer_adds_one(session):
    assert session.select_answer(session.correct_index) is True
    assert session.score == 1
    assert session.score_title == 'Correct'
    assert session.phase is Phase.SHOWING_ROUND_RESULT
    assert session.showing_round_result
    assert session.round_result_message == 'Your score is 1.'


@pytest.mark.parametrize('offset', [1, 2])
def test_wrong_answer_subtracts_one(session, offset):
    index = (session.correct_index + offset) % 3
    tapped = session.countries[index]

    assert session.select_answer(index) is False
    assert session.score == -1
    assert session.score_title == 'Wrong'
    assert session.selected_country == tapped
    assert session.round_result_message == (
        f"Wrong! That's the flag of {tapped}.\nYour score is -1."
    )


def test_score_can_go_negative(session):
    for _ in range(3):
        play_round(session, correct=False)
    assert session.score == -3


def test_select_does_not_count_round(session):
    session.select_answer(session.correct_index)
    assert session.rounds_completed == 0
    session.advance()
    assert session.rounds_completed == 1
    assert session.phase is Phase.PLAYING


def test_select_records_history(session):
    prompt = session.prompt_country
    session.select_answer(session.correct_index)
    record = session.history.records[0]
    assert record.round_number == 1
    assert record.prompt_country == prompt
    assert record.selected_country == prompt
    assert record.correct is True
    assert record.score_after == 1


def test_game_over_after_eight_rounds(session):
    for i in range(7):
        play_round(session, correct=i % 2 == 0)
        assert session.phase is Phase.PLAYING

    session.select_answer(session.correct_index)
    last_round = session.current_round
    session.advance()

    assert session.rounds_completed == 8
    assert session.phase is Phase.GAME_OVER
    assert session.showing_game_over
    # no new round is drawn after the last one
    assert session.current_round is last_round
    assert len(session.history) == 8


def test_restart_from_game_over(session):
    for _ in range(8):
        play_round(session, correct=True)
    assert session.phase is Phase.GAME_OVER

    session.restart()
    assert session.score == 0
    assert session.rounds_completed == 0
    assert session.phase is Phase.PLAYING
    assert session.score_title == ''
    assert len(session.history) == 0
    assert len(set(session.countries)) == 3


def test_scenario_one_correct_then_seven_wrong(session):
    assert (session.score, session.rounds_completed, session.phase) == (0, 0, Phase.PLAYING)

    session.select_answer(session.correct_index)
    assert session.score == 1
    assert session.phase is Phase.SHOWING_ROUND_RESULT
    assert session.score_title == 'Correct'

    session.advance()
    assert session.rounds_completed == 1
    assert session.phase is Phase.PLAYING

    for _ in range(7):
        play_round(session, correct=False)

    assert session.score == -6
    assert session.rounds_completed == 8
    assert session.phase is Phase.GAME_OVER
    assert session.game_over_title == 'Game Over'
    assert session.game_over_message == 'You only did -6 points. Bummer 😭'


def test_game_over_message_nice_job(session):
    for _ in range(8):
        play_round(session, correct=True)
    assert session.game_over_message == 'You did 8 points! Nice job 😎'


def test_game_over_threshold_is_inclusive(session):
    # 6 correct, 2 wrong -> 4 points
    for i in range(8):
        play_round(session, correct=i < 6)
    assert session.score == 4
    assert session.game_over_message.startswith('You did 4 points!')


def test_select_outside_playing_rejected(session):
    session.select_answer(0)
    with pytest.raises(RuntimeError):
        session.select_answer(0)


def test_select_index_out_of_range(session):
    with pytest.raises(ValueError):
        session.select_answer(3)
    with pytest.raises(ValueError):
        session.select_answer(-1)
    assert session.phase is Phase.PLAYING


def test_advance_outside_result_rejected(session):
    with pytest.raises(RuntimeError):
        session.advance()


def test_restart_outside_game_over_rejected(session):
    with pytest.raises(RuntimeError):
        session.restart()


def test_draw_round_uses_injected_rng():
    a = QuizSession(rng=random.Random(7))
    b = QuizSession(rng=random.Random(7))
    assert a.current_round == b.current_round


def test_configured_round_count():
    quiz = QuizSession(config=AppConfig(rounds_per_session=2), rng=random.Random(0))
    play_round(quiz, correct=True)
    assert quiz.phase is Phase.PLAYING
    play_round(quiz, correct=True)
    assert quiz.phase is Phase.GAME_OVER


def test_catalog_too_small():
    with pytest.raises(ValueError):
        QuizSession(countries=['France', 'Italy'])


def test_round_validates_invariants():
    with pytest.raises(ValueError):
        Round(countries=('France', 'Italy', 'Spain'), correct_index=3)
    with pytest.raises(ValueError):
        Round(countries=('France', 'France', 'Spain'), correct_index=0)
