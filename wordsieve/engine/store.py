"""
WordStore: the full word list and the shrinking candidate list.

The full list is loaded once and never changes; it answers "is this a real
word?". The candidate list starts as a copy of it and only ever loses words,
through `apply_feedback` / `cap_letter`. Callers get read accessors only.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from ..datasets.io import read_lines
from ..errors import LoadError
from .feedback import filter_words

logger = logging.getLogger(__name__)


def load_words(source: Path | str) -> List[str]:
    """
    Read one word per line, verbatim (no length, charset or case checks).

    Raises:
      LoadError: missing/unreadable file or undecodable text.
    """
    try:
        return read_lines(source)
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Failed to load dictionary {source}: {e}") from e


class WordStore:
    def __init__(self, words: Iterable[str]):
        self._full: Tuple[str, ...] = tuple(words)
        self._lookup = frozenset(self._full)
        self._candidates: List[str] = list(self._full)

    @classmethod
    def load(cls, source: Path | str) -> "WordStore":
        words = load_words(source)
        logger.info("Loaded %d words from %s", len(words), source)
        return cls(words)

    # ---- full list ----

    def contains(self, word: str) -> bool:
        """Exact membership in the FULL list, not the candidates."""
        return word in self._lookup

    def full_count(self) -> int:
        return len(self._full)

    # ---- candidates (read-only views) ----

    def candidate_count(self) -> int:
        return len(self._candidates)

    def candidate_at(self, index: int) -> str:
        return self._candidates[index]

    def candidates(self) -> Tuple[str, ...]:
        return tuple(self._candidates)

    # ---- mutation ----

    def apply_feedback(self, letter: str, status, position: int) -> int:
        """
        Apply one feedback triple to the candidates and return the new count.
        On error the candidate list is left as it was.
        """
        self._candidates = filter_words(self._candidates, letter, status, position)
        return len(self._candidates)

    def cap_letter(self, letter: str, max_copies: int, position: int | None = None) -> int:
        """
        Drop candidates holding more than `max_copies` copies of `letter`,
        and, when `position` is given, candidates with `letter` at `position`.
        """
        logger.debug("Eliminating all words with more than %d %s", max_copies, letter)
        self._candidates = [
            w for w in self._candidates
            if w.count(letter) <= max_copies
            and not (position is not None and position < len(w) and w[position] == letter)
        ]
        return len(self._candidates)

    def reset(self) -> int:
        """Start over with the full list."""
        self._candidates = list(self._full)
        return len(self._candidates)
