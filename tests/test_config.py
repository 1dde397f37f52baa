from pathlib import Path

import pytest

from wordsieve.config import Settings
from wordsieve.errors import ConfigError

ENV_VARS = [
    "WORDSIEVE_WORDLIST",
    "WORDSIEVE_LOG_LEVEL",
    "WORDSIEVE_TOP_WORDS",
    "WORDSIEVE_TOP_LETTERS",
    "WORDSIEVE_DUPLICATES",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = Settings.load()
    assert s.wordlist == Path("data/dictionary.txt")
    assert s.log_level == "INFO"
    assert (s.top_words, s.top_letters) == (10, 10)
    assert s.duplicates == "caller"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WORDSIEVE_WORDLIST", "/tmp/words.txt")
    monkeypatch.setenv("WORDSIEVE_TOP_WORDS", "25")
    monkeypatch.setenv("WORDSIEVE_DUPLICATES", "Tally")
    s = Settings.load()
    assert s.wordlist == Path("/tmp/words.txt")
    assert s.top_words == 25
    assert s.duplicates == "tally"


@pytest.mark.parametrize("name,value", [
    ("WORDSIEVE_TOP_WORDS", "many"),
    ("WORDSIEVE_TOP_LETTERS", "0"),
    ("WORDSIEVE_DUPLICATES", "ignore"),
])
def test_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        Settings.load()
