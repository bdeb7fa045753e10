#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Reduce candidate words to those consistent with feedback."""
import numpy as np

from .feedback import score
from .words import Feedback


def filter_candidates(candidates, guess, observed):
    """Return new set of words w from candidates with score(guess, w) == observed.

    The input is not modified.
    """
    observed = Feedback(observed)
    return {w for w in candidates if score(guess, w) == observed}


def filter_indices(codes, cand_idx, code):
    """Index version of filter_candidates().

    Parameters:

    - codes: uint8 array (n_answers,), feedback codes of the try word
      against every answer word.
    - cand_idx: int array, indices of the current candidates.
    - code: observed feedback code.

    Return new index array (sorted if cand_idx is sorted).
    """
    return cand_idx[codes[cand_idx] == np.uint8(code)]
