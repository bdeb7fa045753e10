#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Wordle solver: minimax guess selection and benchmark.

Functions with string interface:

- score(): feedback for a guess against a secret.
- filter_candidates(): words consistent with feedback.
- select_guess(): best next guess for a set of candidates.

Classes:

- Dictionary: answer words and allowed guesses.
- GuessSelector: guess selection on a Dictionary (precomputed patterns).
- SolverSession: one puzzle, turn by turn.
- BenchmarkRunner: solve all answer words, aggregate statistics.
"""
from .words import WLEN, LetterStatus, Feedback
from .errors import (
    WordleError, InvalidWord, InvalidFeedbackLength, InvalidFeedbackValue,
    EmptyCandidateSet, SessionClosed, EmptyDictionary,
    )
from .feedback import score, score_all
from .candidates import filter_candidates
from .dictionary import Dictionary
from .selector import GuessSelector, PatternTable, select_guess
from .session import SolverSession, SessionState, MAX_TRIES
from .benchmark import BenchmarkRunner, BenchmarkReport

__version__ = '0.1.0'
