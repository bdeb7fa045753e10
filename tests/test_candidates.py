import numpy as np

from wordlebot import score, filter_candidates
from wordlebot.candidates import filter_indices

from conftest import SMALL


def test_filter_candidates_basic():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    cand = filter_candidates(words, "raise", score("raise", "crane"))
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_candidates_pure_and_idempotent():
    words = set(SMALL)
    fb = score("slate", "plate")
    once = filter_candidates(words, "slate", fb)
    twice = filter_candidates(once, "slate", fb)
    assert once == twice
    assert words == set(SMALL)
    assert once <= words


def test_filter_candidates_sound():
    for secret in SMALL:
        for guess in SMALL:
            assert secret in filter_candidates(SMALL, guess, score(guess, secret))


def test_filter_candidates_accepts_codes():
    fb = score("raise", "crane")
    assert filter_candidates(SMALL, "raise", tuple(int(s) for s in fb)) == \
        filter_candidates(SMALL, "raise", fb)


def test_filter_indices():
    codes = np.array([score("crane", w).code for w in SMALL], dtype=np.uint8)
    cand_idx = np.arange(len(SMALL))
    code = score("crane", "trace").code
    ii = filter_indices(codes, cand_idx, code)
    expected = filter_candidates(SMALL, "crane", score("crane", "trace"))
    assert {SMALL[i] for i in ii} == expected
