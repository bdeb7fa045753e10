#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Feedback for a try word against a secret word.

Recurring letters are the tricky part. Correct positions are scored first and
consume their letter; remaining occurrences are handed out left to right::

    tword  secret  result
    speed  abide   ..e.d   (second e absent: only one e in the secret)
    speed  crepe   .pEe.
"""
from collections import Counter
import numpy as np

from .words import WLEN, POWERS, LetterStatus, Feedback, str2iarr


def score(guess, secret):
    """Return Feedback for guess (str) against secret (str)."""
    result = [LetterStatus.ABSENT] * WLEN
    remaining = Counter()
    for i, (gl, sl) in enumerate(zip(guess, secret)):
        if gl == sl:
            result[i] = LetterStatus.CORRECT
        else:
            remaining[sl] += 1

    for i, gl in enumerate(guess):
        if result[i] == LetterStatus.CORRECT:
            continue
        if remaining[gl] > 0:
            result[i] = LetterStatus.MISPLACED
            remaining[gl] -= 1

    return Feedback(result)


def score_all(iword, warr):
    """Score one try word against many secret words.

    Parameters:

    - iword: int array (WLEN,) or str, the try word.
    - warr: secret words array (n, WLEN) int16.

    Return:

    - codes: uint8 array (n,) with ternary feedback codes.
    """
    if isinstance(iword, str):
        iword = str2iarr(iword)
    warr = warr.copy()  # we're going to replace matched letters by -1
    nw, wsize = warr.shape
    status = np.zeros((nw, wsize), dtype=np.int16)

    correct = warr == iword
    status[correct] = LetterStatus.CORRECT
    warr[correct] = -1  # this is to prevent double counting

    irange = np.arange(nw)
    for i, let in enumerate(iword):
        hit = (warr == let) & ~correct[:, [i]]
        found = np.any(hit, axis=1)
        ii = irange[found]
        jj = np.argmax(hit[found], axis=1)
        status[ii, i] = LetterStatus.MISPLACED
        warr[ii, jj] = -1

    return (status @ POWERS).astype(np.uint8)


def color_str(guess, feedback):
    """Return string with ANSI escape sequences for feedback on guess."""
    esc = lambda c, x: f'\033[{c}m{x}'
    colors = {
        LetterStatus.CORRECT: '48;2;40;200;40',  # green
        LetterStatus.MISPLACED: '48;2;200;150;40',  # orange
        LetterStatus.ABSENT: '48;2;180;180;180',  # grey
        }
    out = [esc('38;2;0;0;0', '')]  # black foreground
    for let, s in zip(guess, feedback):
        out.append(esc(colors[s], let))
    out.append(esc('0', ''))  # reset
    return ''.join(out)
