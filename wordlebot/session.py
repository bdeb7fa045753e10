#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Solver session: one puzzle, turn by turn.

A session does not wait for input. The caller asks next_guess(), obtains
feedback (from a secret word or from a human) and passes it to apply_turn().
"""
from enum import Enum

from .errors import EmptyCandidateSet, SessionClosed
from .feedback import score, color_str
from .words import Feedback, check_word

MAX_TRIES = 6


class SessionState(Enum):
    ACTIVE = 'active'
    SOLVED = 'solved'
    FAILED = 'failed'


class SolverSession:
    """State of one puzzle.

    Attributes:

    - selector: GuessSelector (shared, read-only apart from its cache).
    - max_tries: attempt budget.
    - first_word: optional fixed opening word.
    - state: SessionState.
    - history: list of (word, Feedback) tuples.
    - cand_idx: int array, indices of remaining answer words.
    - stats: list of (n_before, n_expected, n_after) per turn, for display.
    """

    def __init__(self, selector, max_tries=MAX_TRIES, first_word=None):
        if max_tries < 1:
            raise ValueError(f'max_tries={max_tries}')
        self.selector = selector
        self.max_tries = int(max_tries)
        self.first_word = None if first_word is None else check_word(first_word)
        self.state = SessionState.ACTIVE
        self.history = []
        self.stats = []
        self.cand_idx = selector.dictionary.all_candidates()
        self._expected = None

    def __repr__(self):
        cn = self.__class__.__name__
        return (f'<{cn}: {self.state.value}, tries={len(self.history)}/{self.max_tries},'
                f' candidates={len(self.cand_idx)}>')

    @property
    def candidates(self):
        """Remaining answer words (list of str)."""
        answers = self.selector.dictionary.answers
        return [answers[i] for i in self.cand_idx]

    @property
    def is_active(self):
        return self.state == SessionState.ACTIVE

    def _check_active(self):
        if not self.is_active:
            raise SessionClosed(f'Session is {self.state.value}; no more turns.')

    def next_guess(self):
        """Return the word to try next (str)."""
        self._check_active()
        if not self.history and self.first_word is not None:
            self._expected = None
            return self.first_word
        gs = self.selector.select(self.cand_idx)
        self._expected = gs.worst
        return gs.word

    def apply_turn(self, guess, feedback):
        """Record feedback for guess and update candidates.

        Parameters:

        - guess: str, the word that was tried.
        - feedback: Feedback or sequence of statuses.

        Return new SessionState.

        Raise SessionClosed if not active, InvalidFeedbackLength or
        InvalidFeedbackValue for bad feedback (nothing changes), and
        EmptyCandidateSet if no answer matches (the session then fails).
        """
        self._check_active()
        guess = check_word(guess)
        feedback = Feedback(feedback)

        n_before = len(self.cand_idx)
        new_idx = self.selector.filter(self.cand_idx, guess, feedback.code)
        self.history.append((guess, feedback))
        self.stats.append((n_before, self._expected, len(new_idx)))
        self._expected = None

        if feedback.is_solved:
            if len(new_idx) > 0:
                self.cand_idx = new_idx
            self.state = SessionState.SOLVED
        elif len(new_idx) == 0:
            self.state = SessionState.FAILED
            raise EmptyCandidateSet(
                f'No word matches {feedback.pattern(guess)!r} for {guess!r}'
                )
        else:
            self.cand_idx = new_idx
            if len(self.history) >= self.max_tries:
                self.state = SessionState.FAILED
        return self.state

    def play(self, secret, verbose=False):
        """Run turns with feedback against secret word until solved or failed.

        Return final SessionState.
        """
        secret = check_word(secret)
        while self.is_active:
            guess = self.next_guess()
            self.apply_turn(guess, score(guess, secret))
        if verbose:
            print(self.summary(secret))
        return self.state

    def summary(self, secret=None):
        """Return one-line string of the tries, color-coded.

        Each try shows (n_expected/n_after): the number of remaining words
        expected in the worst case and the actual number.
        """
        parts = []
        for (tword, fb), (_, n_expected, n_after) in zip(self.history, self.stats):
            n_expected = '?' if n_expected is None else n_expected
            parts.append(f'{color_str(tword, fb)} ({n_expected}/{n_after})')
        msg = ''
        if self.state == SessionState.FAILED:
            msg = '\033[31;1m  (Not found)\033[0m'
        head = '' if secret is None else f'{secret}: '
        return f'{head}{" → ".join(parts)}{msg}'


def count_tries(selector, secret, first_word=None, max_tries=MAX_TRIES, verbose=False):
    """Return (state, number of tries) for solving secret."""
    session = SolverSession(selector, max_tries=max_tries, first_word=first_word)
    state = session.play(secret, verbose=verbose)
    return state, len(session.history)
