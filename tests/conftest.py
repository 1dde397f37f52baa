import pytest

from wordsieve.engine import WordStore


@pytest.fixture
def small_words():
    return ["crane", "raise", "stare", "trace", "cared", "crate", "speed", "venom", "melon", "ember"]


@pytest.fixture
def store(small_words):
    return WordStore(small_words)
