from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .engine.session import DUPLICATE_POLICIES
from .errors import ConfigError

DEFAULT_WORDLIST = "data/dictionary.txt"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """
    Solver settings loaded from environment variables.

    CLI flags take precedence; these only provide defaults.
    """

    wordlist: Path
    log_level: str
    top_words: int
    top_letters: int
    duplicates: str

    @classmethod
    def load(cls) -> "Settings":
        """
        Load settings from environment variables (and a local .env, if any).
        """
        load_dotenv()

        wordlist = Path(os.getenv("WORDSIEVE_WORDLIST", DEFAULT_WORDLIST))
        log_level = os.getenv("WORDSIEVE_LOG_LEVEL", "INFO")
        top_words = _int_env("WORDSIEVE_TOP_WORDS", 10)
        top_letters = _int_env("WORDSIEVE_TOP_LETTERS", 10)

        duplicates = os.getenv("WORDSIEVE_DUPLICATES", "caller").strip().lower()
        if duplicates not in DUPLICATE_POLICIES:
            raise ConfigError(
                f"WORDSIEVE_DUPLICATES must be one of {DUPLICATE_POLICIES}, got {duplicates!r}"
            )

        return cls(
            wordlist=wordlist,
            log_level=log_level,
            top_words=top_words,
            top_letters=top_letters,
            duplicates=duplicates,
        )
