import pytest

from wordlebot import SolverSession, SessionState, score, Feedback, LetterStatus
from wordlebot.errors import (
    SessionClosed, InvalidFeedbackLength, EmptyCandidateSet, InvalidWord,
    )
from wordlebot.session import count_tries

from conftest import SMALL

C = LetterStatus.CORRECT


def test_initial_state(small_selector):
    session = SolverSession(small_selector)
    assert session.state == SessionState.ACTIVE
    assert session.history == []
    assert sorted(session.candidates) == sorted(SMALL)


def test_zills_needs_eight(ills_selector):
    session = SolverSession(ills_selector, max_tries=6)
    assert session.play('zills') == SessionState.FAILED
    assert len(session.history) == 6
    assert [w for w, _ in session.history] == ['dills', 'fills', 'gills', 'hills', 'kills', 'mills']
    assert session.candidates == ['pills', 'zills']

    session = SolverSession(ills_selector, max_tries=8)
    assert session.play('zills') == SessionState.SOLVED
    assert len(session.history) == 8
    assert session.candidates == ['zills']


@pytest.mark.parametrize("secret", SMALL)
def test_play_properties(small_selector, secret):
    session = SolverSession(small_selector, max_tries=6)
    sizes = [len(session.cand_idx)]
    while session.is_active:
        guess = session.next_guess()
        session.apply_turn(guess, score(guess, secret))
        sizes.append(len(session.cand_idx))
        assert secret in session.candidates
    assert sizes == sorted(sizes, reverse=True)
    assert len(session.history) <= 6
    assert session.state == SessionState.SOLVED
    assert session.history[-1][0] == secret


def test_first_word(small_selector):
    session = SolverSession(small_selector, first_word='Sheep')
    assert session.next_guess() == 'sheep'
    state, ntries = count_tries(small_selector, 'water', first_word='sheep')
    assert state == SessionState.SOLVED
    assert ntries >= 2


def test_solved_early_with_known_word(small_selector):
    session = SolverSession(small_selector, first_word='water')
    assert session.play('water') == SessionState.SOLVED
    assert len(session.history) == 1


def test_closed(small_selector):
    session = SolverSession(small_selector)
    session.apply_turn('water', Feedback([C] * 5))
    assert session.state == SessionState.SOLVED
    with pytest.raises(SessionClosed):
        session.next_guess()
    with pytest.raises(SessionClosed):
        session.apply_turn('water', Feedback([C] * 5))


def test_bad_feedback_changes_nothing(small_selector):
    session = SolverSession(small_selector)
    with pytest.raises(InvalidFeedbackLength):
        session.apply_turn('water', (2, 2, 2))
    assert session.is_active
    assert session.history == []
    assert len(session.candidates) == len(SMALL)
    with pytest.raises(InvalidWord):
        session.apply_turn('wat', (2, 2, 2, 2, 2))


def test_inconsistent_feedback(small_selector):
    session = SolverSession(small_selector)
    # no word in the list has a z
    with pytest.raises(EmptyCandidateSet):
        session.apply_turn('zzzzz', (1, 0, 0, 0, 0))
    assert session.state == SessionState.FAILED
    assert len(session.candidates) == len(SMALL)
    with pytest.raises(SessionClosed):
        session.next_guess()


def test_budget_one(small_selector):
    session = SolverSession(small_selector, max_tries=1, first_word='sheep')
    assert session.play('water') == SessionState.FAILED
    assert len(session.history) == 1
    with pytest.raises(ValueError):
        SolverSession(small_selector, max_tries=0)


def test_summary(ills_selector):
    session = SolverSession(ills_selector, max_tries=2)
    session.play('zills')
    text = session.summary('zills')
    assert text.startswith('zills: ')
    assert 'Not found' in text
    assert '(7/7)' in text
