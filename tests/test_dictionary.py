import pytest

from wordlebot import Dictionary
from wordlebot.errors import EmptyDictionary, InvalidWord


def test_bundled_dataset():
    d = Dictionary.from_dataset('en')
    assert len(d.answers) == 2309
    assert d.answers == d.allowed_guesses == d.guess_pool
    assert d.answer_index('crane') is not None
    assert d.warr_a.shape == (2309, 5)
    with pytest.raises(ValueError):
        Dictionary.from_dataset('xx')


def test_from_files(tmp_path):
    fa = tmp_path / 'answers.txt'
    fa.write_text('Crane\nslate\nbad\ntoolong\nslate\n\n')
    fb = tmp_path / 'guesses.txt'
    fb.write_text('roate\nsoare\n')
    d = Dictionary.from_files(fa, fb)
    assert d.answers == ('crane', 'slate')
    assert d.allowed_guesses == ('roate', 'soare')
    assert d.guess_pool == ('crane', 'roate', 'slate', 'soare')
    assert d.answer_index('roate') is None
    assert d.pool_index('roate') == 1
    assert 'answers.txt' in repr(d)


def test_empty(tmp_path):
    fa = tmp_path / 'empty.txt'
    fa.write_text('no\nword\nhere!\n')
    with pytest.raises(EmptyDictionary):
        Dictionary.from_files(fa)
    with pytest.raises(EmptyDictionary):
        Dictionary(['water'], [])
    with pytest.raises(FileNotFoundError):
        Dictionary.from_files(tmp_path / 'missing.txt')


def test_invalid_word():
    with pytest.raises(InvalidWord):
        Dictionary(['water', 'w4ter'])


def test_readonly():
    d = Dictionary(['water', 'slate'])
    with pytest.raises(ValueError):
        d.warr_a[0, 0] = 0


def test_blacklist(tmp_path, monkeypatch):
    from wordlebot import dictionary
    fa = tmp_path / 'answers.txt'
    fa.write_text('crane\nalton\nslate\n')
    monkeypatch.setitem(dictionary.BLACKLISTS, 'xx', {'alton'})
    assert dictionary._load_wlist(fa) == ['alton', 'crane', 'slate']
    assert dictionary._load_wlist(fa, blacklist_key='xx') == ['crane', 'slate']
    assert dictionary._load_wlist(fa, blacklist_key='nope') == ['alton', 'crane', 'slate']


def test_blacklist_dataset(monkeypatch):
    from wordlebot import dictionary
    monkeypatch.setitem(dictionary.BLACKLISTS, 'en', {'crane'})
    d = Dictionary.from_dataset('en')
    assert len(d) == 2308
    assert d.answer_index('crane') is None
    assert d.pool_index('crane') is None
