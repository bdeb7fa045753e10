#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Guess selection - partition and minimize.

For every try word in the pool, the candidates are partitioned by the
feedback they would give. A try word is scored by, in order:

1. size of its largest partition (minimax);
2. whether it is a candidate itself (a candidate could win right away);
3. expected size of the remaining partition, sum(b**2)/n;
4. alphabetical order.

Feedback codes of all pool words against all answer words are computed once
(PatternTable) and shared; scoring a turn is then one np.bincount per chunk
of try words.
"""
from collections import namedtuple, OrderedDict
from time import time
import sys
from multiprocessing import Pool
from threadpoolctl import threadpool_limits
import numpy as np

from .candidates import filter_indices
from .dictionary import Dictionary
from .errors import EmptyCandidateSet
from .feedback import score_all
from .words import NCODES, check_word, str2iarr

# Below this number of candidates, only candidates are tried as guesses.
RESTRICT_BELOW = 3

# Max number of candidate sets remembered by GuessSelector.select().
CACHE_SIZE = 10000

# Max elements in the (try words, candidates) code block per bincount.
_CHUNK_ELEMS = 1 << 22

GuessScore = namedtuple('GuessScore', ['word', 'worst', 'is_candidate', 'expected'])

# Data for workers is stored here.
_WORKER_PERSISTENT = {}


def _init_table_worker(warr):
    _WORKER_PERSISTENT['warr'] = warr


def _codes_1word(tword):
    """Return feedback codes of tword against _WORKER_PERSISTENT['warr']."""
    return score_all(tword, _WORKER_PERSISTENT['warr'])


class PatternTable:
    """Feedback codes for every (pool word, answer word) pair.

    Attributes:

    - codes: uint8 array (n_pool, n_answers), read-only.
    - answer_rows: int array (n_answers,), pool row of each answer word.
    """

    def __init__(self, dictionary, processes=None, pri_time=2):
        """Build table; parallel over try words if processes != 1 and on linux."""
        warr_a, twarr = dictionary.warr_a, dictionary.warr_pool
        ntw = len(twarr)
        tm_start = tm_prev = tm = time()
        rows = []
        if processes != 1 and sys.platform == 'linux' and ntw * len(warr_a) >= 1_000_000:
            with threadpool_limits(limits=1), Pool(
                    processes, initializer=_init_table_worker, initargs=(warr_a,)
                    ) as pool:
                for i, codes in enumerate(pool.imap(_codes_1word, twarr, chunksize=64)):
                    rows.append(codes)
                    tm = time()
                    if tm - tm_start > pri_time and (tm - tm_prev > 1 or i == ntw-1):
                        print(f'\rpattern table {i+1}/{ntw}...', end='')
                        tm_prev = tm
        else:
            for i, tw in enumerate(twarr):
                rows.append(score_all(tw, warr_a))
                tm = time()
                if tm - tm_prev > 1 and tm - tm_start > pri_time:
                    print(f'\rpattern table {i+1}/{ntw}...', end='')
                    tm_prev = tm
        if tm - tm_start > pri_time:
            print(f' done ({tm - tm_start:.0f} s).')

        self.codes = np.array(rows, dtype=np.uint8).reshape(ntw, len(warr_a))
        self.codes.flags.writeable = False
        self.answer_rows = np.array(
            [dictionary.pool_index(w) for w in dictionary.answers], dtype=np.int64
            )


class GuessSelector:
    """Suggest try words for candidate sets of one Dictionary.

    Candidate sets are handled as sorted int arrays of indices into
    dictionary.answers.

    Attributes:

    - dictionary: the Dictionary.
    - table: PatternTable.
    - restrict_below: candidate count below which only candidates are tried.
    - cache: OrderedDict, candidate set bytes -> best GuessScore; least
      recently used entries are dropped beyond cache_size.
    """

    def __init__(self, dictionary, restrict_below=RESTRICT_BELOW, table=None,
                 processes=None, cache_size=CACHE_SIZE):
        self.dictionary = dictionary
        self.restrict_below = int(restrict_below)
        if table is None:
            table = PatternTable(dictionary, processes=processes)
        self.table = table
        self.cache_size = int(cache_size)
        self.cache = OrderedDict()

    def __repr__(self):
        cn = self.__class__.__name__
        return f'<{cn}: {self.dictionary!r}, restrict_below={self.restrict_below}>'

    def codes_for(self, guess):
        """Return feedback codes (n_answers,) of guess (str) against all answers."""
        i = self.dictionary.pool_index(guess)
        if i is not None:
            return self.table.codes[i]
        return score_all(str2iarr(check_word(guess)), self.dictionary.warr_a)

    def partition(self, guess, cand_idx):
        """Return bucket sizes (NCODES,) of candidates for try word guess."""
        codes = self.codes_for(guess)[cand_idx]
        return np.bincount(codes, minlength=NCODES)

    def filter(self, cand_idx, guess, code):
        """Return candidate indices consistent with feedback code on guess."""
        return filter_indices(self.codes_for(guess), cand_idx, code)

    def _score_rows(self, rows, cand_idx):
        """Return (worst, sumsq) arrays for pool rows against candidates."""
        n = len(cand_idx)
        chunk = max(1, _CHUNK_ELEMS // n)
        worst = np.empty(len(rows), dtype=np.int64)
        sumsq = np.empty(len(rows), dtype=np.int64)
        for i0 in range(0, len(rows), chunk):
            r = rows[i0:i0+chunk]
            codes = self.table.codes[np.ix_(r, cand_idx)].astype(np.int64)
            codes += NCODES * np.arange(len(r)).reshape(-1, 1)
            counts = np.bincount(codes.ravel(), minlength=len(r)*NCODES)
            counts = counts.reshape(len(r), NCODES)
            worst[i0:i0+chunk] = counts.max(axis=1)
            sumsq[i0:i0+chunk] = (counts**2).sum(axis=1)
        return worst, sumsq

    def rank(self, cand_idx, num=1):
        """Return list of the num best GuessScore for candidates, best first.

        Raise EmptyCandidateSet if there are no candidates.
        """
        cand_idx = np.asarray(cand_idx, dtype=np.int64)
        n = len(cand_idx)
        if n == 0:
            raise EmptyCandidateSet('No candidates to select a guess for.')
        words = self.dictionary.answers
        if n == 1:
            return [GuessScore(words[cand_idx[0]], 1, True, 1.0)]

        cand_rows = self.table.answer_rows[cand_idx]
        if n < self.restrict_below:
            rows = np.sort(cand_rows)
        else:
            rows = np.arange(len(self.dictionary.guess_pool))
        worst, sumsq = self._score_rows(rows, cand_idx)
        member = np.isin(rows, cand_rows)
        ii = np.lexsort((rows, sumsq, ~member, worst))[:num]
        pool = self.dictionary.guess_pool
        return [
            GuessScore(pool[rows[i]], int(worst[i]), bool(member[i]), float(sumsq[i] / n))
            for i in ii
            ]

    def select(self, cand_idx):
        """Return best GuessScore for candidates (memoized)."""
        cand_idx = np.asarray(cand_idx, dtype=np.int64)
        key = cand_idx.tobytes()
        gs = self.cache.get(key)
        if gs is not None:
            self.cache.move_to_end(key)
            return gs
        gs = self.rank(cand_idx, num=1)[0]
        self.cache[key] = gs
        if len(self.cache) > self.cache_size:
            self.cache.popitem(last=False)
        return gs

    def first_guess(self):
        """Return best opening word for the full answer list."""
        return self.select(self.dictionary.all_candidates()).word


def select_guess(candidates, guess_pool=None, restrict_below=RESTRICT_BELOW):
    """Return best try word (str) for candidate words.

    Parameters:

    - candidates: iterable of str, words still possible.
    - guess_pool: iterable of str; default: candidates.
    - restrict_below: see GuessSelector.
    """
    candidates = list(candidates)
    if not candidates:
        raise EmptyCandidateSet('No candidates to select a guess for.')
    if guess_pool is not None:
        guess_pool = list(guess_pool) or None
    dictionary = Dictionary(candidates, guess_pool)
    selector = GuessSelector(dictionary, restrict_below=restrict_below, processes=1)
    return selector.select(dictionary.all_candidates()).word
