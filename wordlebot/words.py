#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Words and feedback values.

Words are plain lowercase str for the public interface. For vectorized work
they are numpy int16 arrays (unicode code points); value -1 means
'undefined/consumed'.

Feedback is a tuple of LetterStatus, one per letter, with a compact ternary
code: sum(status[i] * 3**i), so 3**WLEN distinct values.
"""
from enum import IntEnum
import operator
import re
import numpy as np

from .errors import InvalidWord, InvalidFeedbackLength, InvalidFeedbackValue

WLEN = 5
NCODES = 3**WLEN
POWERS = 3**np.arange(WLEN, dtype=np.int16)

_WORD_EXP = re.compile(f'[a-z]{{{WLEN}}}$')


class LetterStatus(IntEnum):
    ABSENT = 0
    MISPLACED = 1
    CORRECT = 2


ALL_CORRECT = int(LetterStatus.CORRECT * POWERS.sum())


def check_word(word):
    """Return word as lowercase str; raise InvalidWord if not WLEN letters."""
    if not isinstance(word, str):
        raise InvalidWord(f'Not a word: {word!r}')
    w = word.strip().lower()
    if not _WORD_EXP.match(w):
        raise InvalidWord(f'{word!r} is not a {WLEN}-letter word')
    return w


def str2iarr(words):
    """Convert word (str) list to int16 array. '.' becomes -1.
    Single str becomes 1D array.
    """
    if isinstance(words, str):
        return_1d = True
        words = np.array([words])
    else:
        return_1d = False
        words = np.array(list(words), dtype=f'<U{WLEN}')

    if len(words) == 0:
        return np.zeros((0, WLEN), dtype=np.int16)

    # all words as (nw, WLEN) array of int16
    wsize = len(words[0])
    a = words.astype(f'<U{wsize}').view(np.uint32).astype(np.int16)
    a = a.reshape(-1, wsize)
    a[a == ord('.')] = -1
    if return_1d:
        a = a[0, :]

    return a


class Feedback(tuple):
    """Per-letter result of comparing a guess to the secret.

    Construct from a sequence of LetterStatus (or 0/1/2). Use from_code()
    for the ternary code and parse() for human input.
    """

    def __new__(cls, statuses):
        statuses = tuple(statuses)
        if len(statuses) != WLEN:
            raise InvalidFeedbackLength(
                f'Feedback needs {WLEN} values, got {len(statuses)}'
                )
        if any(isinstance(s, bool) for s in statuses):
            raise InvalidFeedbackValue(f'Bad feedback {statuses!r}: bool values')
        try:
            statuses = tuple(LetterStatus(operator.index(s)) for s in statuses)
        except (TypeError, ValueError) as e:
            raise InvalidFeedbackValue(f'Bad feedback {statuses!r}: {e}') from e
        return super().__new__(cls, statuses)

    @classmethod
    def from_code(cls, code):
        code = int(code)
        if not 0 <= code < NCODES:
            raise InvalidFeedbackValue(f'Feedback code {code} out of range')
        return cls((code // 3**i) % 3 for i in range(WLEN))

    @classmethod
    def parse(cls, guess, response):
        """Parse human response for guess.

        Accepted formats:

        - '.a.T.': '.' absent, lowercase letter of the guess misplaced,
          uppercase letter correct.
        - '01202': digits 0 (absent), 1 (misplaced), 2 (correct).
        """
        response = response.strip()
        if len(response) != WLEN:
            raise InvalidFeedbackLength(
                f'Wrong length {len(response)}, expected {WLEN}.'
                )
        if all(c in '012' for c in response):
            return cls(int(c) for c in response)
        statuses = []
        for twl, rl in zip(guess, response):
            if rl == '.':
                statuses.append(LetterStatus.ABSENT)
            elif rl == twl.upper():
                statuses.append(LetterStatus.CORRECT)
            elif rl == twl:
                statuses.append(LetterStatus.MISPLACED)
            else:
                raise InvalidFeedbackValue(
                    f"This response doesn't match {guess!r}: {response!r}"
                    )
        return cls(statuses)

    @property
    def code(self):
        return sum(int(s) * 3**i for i, s in enumerate(self))

    @property
    def is_solved(self):
        return self.code == ALL_CORRECT

    def pattern(self, guess):
        """Return the '.a.T.' notation for guess."""
        out = []
        for let, s in zip(guess, self):
            if s == LetterStatus.CORRECT:
                out.append(let.upper())
            elif s == LetterStatus.MISPLACED:
                out.append(let)
            else:
                out.append('.')
        return ''.join(out)

    def __repr__(self):
        return f'Feedback({"".join(str(int(s)) for s in self)})'
