"""
One solving session: a WordStore plus the frequency table for its candidates.

Each round is validated in full before any filtering, then applied as up to
five single-slot feedback calls in position order. The frequency table is
rebuilt once per round from the new candidate list.

Duplicate-letter policies (a guess with one copy of a letter BLACK and another
YELLOW/GREEN):
  - "caller"     : apply feedback verbatim; the caller must already have
                   turned those BLACKs into YELLOWs.
  - "reclassify" : do that reclassification here.
  - "tally"      : a BLACK letter with k claimed GREEN/YELLOW copies removes
                   candidates with that letter at the BLACK slot and
                   candidates holding more than k copies.
"""

from __future__ import annotations

import logging
from typing import List

from ..errors import ConfigError
from .feedback import Status, claimed_copies, reclassify_duplicates
from .frequency import FrequencySnapshot, LetterFrequency, recompute, top_letters
from .scoring import ScoredWord, rank_candidates, score_word, top_words
from .store import WordStore
from .validation import validate_round

logger = logging.getLogger(__name__)

DUPLICATE_POLICIES = ("caller", "reclassify", "tally")


class Session:
    def __init__(self, store: WordStore, duplicates: str = "caller"):
        if duplicates not in DUPLICATE_POLICIES:
            raise ConfigError(
                f"Unknown duplicate policy {duplicates!r}. Available: {list(DUPLICATE_POLICIES)}"
            )
        self.store = store
        self.duplicates = duplicates
        self.snapshot: FrequencySnapshot = recompute(store.candidates())

    def apply_round(self, guess: str, feedback: str) -> int:
        """
        Apply one guess and its 5-character feedback. Returns the new
        candidate count. A round that fails validation changes nothing.
        """
        triples = validate_round(self.store, guess, feedback)
        before = self.store.candidate_count()

        if self.duplicates == "reclassify":
            triples = reclassify_duplicates(triples)

        claimed = claimed_copies(triples) if self.duplicates == "tally" else {}
        for letter, status, pos in triples:
            if status is Status.BLACK and claimed.get(letter, 0) > 0:
                self.store.cap_letter(letter, claimed[letter], pos)
            else:
                self.store.apply_feedback(letter, status, pos)

        self.snapshot = recompute(self.store.candidates())
        after = self.store.candidate_count()
        logger.info("Round %s %s: %d -> %d candidates", guess, feedback, before, after)
        return after

    def suggestions(self, n: int = 10) -> List[ScoredWord]:
        ranked = rank_candidates(self.store.candidates(), self.snapshot)
        return [ScoredWord(w, score_word(w, self.snapshot)) for w in top_words(ranked, n)]

    def top_letters(self, n: int = 10) -> List[LetterFrequency]:
        return top_letters(self.snapshot, n)

    def reset(self) -> int:
        count = self.store.reset()
        self.snapshot = recompute(self.store.candidates())
        return count
