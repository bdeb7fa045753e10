#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Word lists: answers (possible secrets) and allowed guesses.

A Dictionary is built once and never modified; sessions and benchmark
workers share it read-only.
"""
import re
from pathlib import Path
import numpy as np

from .errors import EmptyDictionary
from .words import WLEN, check_word, str2iarr

DATA_DIR = Path(__file__).resolve().parent / 'data'

# Dataset name -> (answers file, allowed guesses file or None)
DATASETS = {
    'en': ('wordle-en-a.txt', None),
    }

# Dataset name -> words in its files that the game does not accept.
BLACKLISTS = {
    'en': set(),
    }


def _load_wlist(fname, wlen=WLEN, maxnum=99999, blacklist_key=None):
    """Load word list (sorted list of str) from file.

    Lines that are not wlen letters are skipped, as are the words in
    BLACKLISTS[blacklist_key].
    """
    blacklist = BLACKLISTS.get(blacklist_key, set())
    exp = re.compile(f'[a-zA-Z]{{{wlen}}}$')
    with open(fname) as f:
        wlist = [
            w.strip().lower()
            for w in f
            if exp.match(w.strip())
            ]
    wlist = [w for w in wlist if w not in blacklist]
    wlist = wlist[:maxnum]
    return sorted(set(wlist))


class Dictionary:
    """Immutable pair of word lists.

    Attributes:

    - answers: tuple of str, sorted.
    - allowed_guesses: tuple of str, sorted.
    - guess_pool: sorted union of both; every word that may be scored
      as a guess.
    - warr_a: answers as int16 array (n, WLEN).
    - warr_pool: guess_pool as int16 array (m, WLEN).
    - name: dataset name or file name, for display.
    """

    def __init__(self, answers, allowed_guesses=None, name='custom'):
        answers = sorted(set(check_word(w) for w in answers))
        if allowed_guesses is None:
            allowed = list(answers)
        else:
            allowed = sorted(set(check_word(w) for w in allowed_guesses))
        if not answers:
            raise EmptyDictionary(f'{name}: no answer words')
        if not allowed:
            raise EmptyDictionary(f'{name}: no allowed guesses')

        self.name = str(name)
        self.answers = tuple(answers)
        self.allowed_guesses = tuple(allowed)
        self.guess_pool = tuple(sorted(set(answers).union(allowed)))
        self.warr_a = str2iarr(self.answers)
        self.warr_pool = str2iarr(self.guess_pool)
        self.warr_a.flags.writeable = False
        self.warr_pool.flags.writeable = False
        self._answer_index = {w: i for i, w in enumerate(self.answers)}
        self._pool_index = {w: i for i, w in enumerate(self.guess_pool)}

    @classmethod
    def get_datasets(cls):
        """Return list of supported dataset names."""
        return list(DATASETS)

    @classmethod
    def from_dataset(cls, dataset='en'):
        if dataset not in DATASETS:
            raise ValueError(f'dataset={dataset!r} / try get_datasets().')
        fa, fb = DATASETS[dataset]
        answers = _load_wlist(DATA_DIR / fa, blacklist_key=dataset)
        allowed = None if fb is None else _load_wlist(DATA_DIR / fb, blacklist_key=dataset)
        return cls(answers, allowed, name=dataset)

    @classmethod
    def from_files(cls, answers_fname, guesses_fname=None):
        """Load from word files (one word per line).

        Raise OSError if a file cannot be read, EmptyDictionary if it has
        no usable words.
        """
        answers = _load_wlist(answers_fname)
        allowed = None if guesses_fname is None else _load_wlist(guesses_fname)
        return cls(answers, allowed, name=Path(answers_fname).name)

    def __repr__(self):
        cn = self.__class__.__name__
        na, nb = len(self.answers), len(self.allowed_guesses)
        return f'<{cn}: {self.name!r}, num_a={na}, num_b={nb}>'

    def __len__(self):
        return len(self.answers)

    def answer_index(self, word):
        """Return index in answers, or None."""
        return self._answer_index.get(word)

    def pool_index(self, word):
        """Return index in guess_pool, or None."""
        return self._pool_index.get(word)

    def all_candidates(self):
        """Return index array of all answers."""
        return np.arange(len(self.answers))
