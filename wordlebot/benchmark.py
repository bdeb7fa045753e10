#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Benchmark: solve every answer word, collect statistics.

Sessions are independent; they share only the selector (dictionary and
pattern table). On linux, they run in a multiprocessing Pool; results come
back unordered and are merged into a histogram.
"""
from collections import Counter
from dataclasses import dataclass, field
from time import time
import sys
from multiprocessing import Pool
from threadpoolctl import threadpool_limits
import matplotlib.pyplot as plt
import numpy as np

from .errors import InvalidWord
from .session import SessionState, MAX_TRIES, count_tries
from .words import check_word

# Data for workers is stored here.
_WORKER_PERSISTENT = {}


def _init_worker(selector, max_tries, first_word):
    _WORKER_PERSISTENT['selector'] = selector
    _WORKER_PERSISTENT['max_tries'] = max_tries
    _WORKER_PERSISTENT['first_word'] = first_word


def _solve_1word(secret):
    """Return (secret, SessionState, number of tries). For Pool workers."""
    result = count_tries(
        _WORKER_PERSISTENT['selector'], secret,
        first_word=_WORKER_PERSISTENT['first_word'],
        max_tries=_WORKER_PERSISTENT['max_tries'],
        )
    return (secret, *result)


@dataclass
class BenchmarkReport:
    """Aggregated benchmark result.

    - histogram: Counter, number of tries -> number of solved words.
    - failed: sorted list of words that were not solved.
    """
    max_tries: int
    first_word: str = None
    histogram: Counter = field(default_factory=Counter)
    failed: list = field(default_factory=list)

    def add(self, secret, state, ntries):
        if state == SessionState.SOLVED:
            self.histogram[ntries] += 1
        else:
            self.failed.append(secret)

    @property
    def num_solved(self):
        return sum(self.histogram.values())

    @property
    def num_words(self):
        return self.num_solved + len(self.failed)

    @property
    def mean(self):
        """Mean number of tries over solved words (nan if none)."""
        n = self.num_solved
        if n == 0:
            return float('nan')
        return sum(k*v for k, v in self.histogram.items()) / n

    def format(self):
        """Return multi-line report text."""
        lines = [
            f'{len(self.failed)} words could not be solved in {self.max_tries}'
            f' guesses: {", ".join(self.failed)}',
            f'The others have been solved in an average of {self.mean:.2f} steps',
            'Here are the numbers for how many wordles have been solved in n steps.',
            ]
        for k in sorted(self.histogram):
            lines.append(f'Steps {k}: Count {self.histogram[k]}')
        return '\n'.join(lines)

    def plot(self, fname=None):
        """Plot histogram; save to fname if specified, else show."""
        steps = np.arange(1, self.max_tries+1)
        counts = [self.histogram.get(k, 0) for k in steps]
        fig, ax = plt.subplots()
        ax.bar(steps, counts, color='tab:green', label='solved')
        if self.failed:
            ax.bar([self.max_tries+1], [len(self.failed)], color='tab:red', label='failed')
        ax.set_xticks(np.arange(1, self.max_tries+2))
        ax.set_xticklabels([str(k) for k in steps] + ['X'])
        ax.set_xlabel('Number of tries')
        ax.set_ylabel('Number of words')
        first = '' if self.first_word is None else f', first word {self.first_word}'
        ax.set_title(f'{self.num_words} words, mean {self.mean:.3f}{first}')
        ax.legend()
        if fname is None:
            fig.show()
        else:
            fig.savefig(fname)
            plt.close(fig)
        return fig


class BenchmarkRunner:
    """Run one SolverSession per secret word.

    Parameters:

    - selector: GuessSelector.
    - max_tries: attempt budget per session.
    - first_word: fixed opening word; default: selector.first_guess().
    - processes: number of worker processes; 1 for serial operation.
    """

    def __init__(self, selector, max_tries=MAX_TRIES, first_word=None, processes=None):
        self.selector = selector
        self.max_tries = int(max_tries)
        self.first_word = None if first_word is None else check_word(first_word)
        self.processes = processes

    def run(self, secrets=None, pri_time=2, verbose=True):
        """Solve secrets (default: all answers); return BenchmarkReport.

        Ctrl-C stops the pool; results in flight are discarded and
        KeyboardInterrupt propagates.
        """
        if secrets is None:
            secrets = self.selector.dictionary.answers
        secrets = [check_word(w) for w in secrets]
        missing = [w for w in secrets if self.selector.dictionary.answer_index(w) is None]
        if missing:
            raise InvalidWord(f'Not in the answer list: {", ".join(missing)}')
        first_word = self.first_word
        if first_word is None:
            first_word = self.selector.first_guess()
        if verbose:
            print(f'Starting benchmark: {len(secrets)} words, first word {first_word!r}.')

        report = BenchmarkReport(self.max_tries, first_word)
        nw = len(secrets)
        tm_start = tm_prev = tm = time()
        initargs = (self.selector, self.max_tries, first_word)
        if self.processes != 1 and sys.platform == 'linux' and nw >= 3:
            # Parallellized
            with threadpool_limits(limits=1), Pool(
                    self.processes, initializer=_init_worker, initargs=initargs
                    ) as pool:
                results = pool.imap_unordered(_solve_1word, secrets, chunksize=16)
                for i, res in enumerate(results):
                    report.add(*res)
                    tm = time()
                    if verbose and tm - tm_start > pri_time and (tm - tm_prev > 1 or i == nw-1):
                        print(f'\rbenchmark {i+1}/{nw}...', end='')
                        tm_prev = tm
        else:
            # non-parallel operation
            _init_worker(*initargs)
            try:
                for i, secret in enumerate(secrets):
                    report.add(*_solve_1word(secret))
                    tm = time()
                    if verbose and tm - tm_prev > 1 and tm - tm_start > pri_time:
                        print(f'\rbenchmark {i+1}/{nw}...', end='')
                        tm_prev = tm
            finally:
                _WORKER_PERSISTENT.clear()

        if verbose and tm - tm_start > pri_time:
            print(f' done ({tm - tm_start:.0f} s).')
        report.failed.sort()
        return report
