import os

os.environ.setdefault('MPLBACKEND', 'Agg')

import pytest

from wordlebot import Dictionary, GuessSelector

# Words that only differ in the first letter: each guess rules out one word.
ILLS = ['dills', 'fills', 'gills', 'hills', 'kills', 'mills', 'pills', 'zills']

SMALL = [
    'crane', 'raise', 'stare', 'trace', 'cared', 'racer', 'scoop', 'water',
    'abide', 'erase', 'steal', 'crepe', 'plate', 'slate', 'eater', 'sheep',
    ]


@pytest.fixture
def ills_selector():
    return GuessSelector(Dictionary(ILLS, name='ills'), processes=1)


@pytest.fixture
def small_selector():
    return GuessSelector(Dictionary(SMALL, name='small'), processes=1)
