#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Exceptions raised by the solver engine."""


class WordleError(ValueError):
    """Base class for all wordlebot errors."""


class InvalidWord(WordleError):
    """Word is not made of exactly WLEN letters a-z."""


class InvalidFeedbackLength(WordleError):
    """Feedback does not have one status per letter."""


class InvalidFeedbackValue(WordleError):
    """Feedback contains something other than absent/misplaced/correct."""


class EmptyCandidateSet(WordleError):
    """No dictionary word is consistent with the observed feedback."""


class SessionClosed(WordleError, RuntimeError):
    """Turn requested on a session that is already solved or failed."""


class EmptyDictionary(WordleError):
    """Dictionary without answers or without allowed guesses."""
