"""
Letter frequency over a word set.

Every letter occurrence in every position counts (a doubled letter counts
twice), divided by the total number of occurrences. The table is always
rebuilt from scratch for the current candidate set.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List


@dataclass(frozen=True)
class LetterFrequency:
    """A letter and its share of all letter occurrences, 0.0 to 1.0."""
    letter: str
    frequency: float


# letter -> LetterFrequency, for the current candidate set
FrequencySnapshot = Dict[str, LetterFrequency]


def recompute(words: Iterable[str]) -> FrequencySnapshot:
    """
    Build a fresh frequency table for `words`. Empty input gives an empty table.
    """
    counts: Counter = Counter()
    for w in words:
        counts.update(w)

    total = sum(counts.values())
    if total == 0:
        return {}
    return {ch: LetterFrequency(ch, c / total) for ch, c in counts.items()}


def top_letters(snapshot: FrequencySnapshot, n: int) -> List[LetterFrequency]:
    """Most frequent letters first; ties by letter ascending."""
    entries = sorted(snapshot.values(), key=lambda e: (-e.frequency, e.letter))
    return entries[:max(n, 0)]
