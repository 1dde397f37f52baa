"""
Candidate scoring (distinct-letter coverage).

A word's score is the sum of the current frequencies of its DISTINCT letters,
so 'speed' is scored on {s, p, e, d} with 'e' counted once. Higher scores
favor words that knock out more of the remaining list.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Sequence, TypeVar

from .frequency import FrequencySnapshot

# Below this many ranked words, show them all regardless of the limit.
REVEAL_ALL_BELOW = 50

T = TypeVar("T")


class ScoredWord(NamedTuple):
    word: str
    score: float


def score_word(word: str, snapshot: FrequencySnapshot) -> float:
    """
    Sum letter frequencies, counting each letter at most once per word.
    Letters missing from the snapshot contribute 0.
    """
    seen = set()
    s = 0.0
    for ch in word:
        if ch in seen:
            continue
        seen.add(ch)
        entry = snapshot.get(ch)
        if entry is not None:
            s += entry.frequency
    return s


def rank_candidates(words: Iterable[str], snapshot: FrequencySnapshot) -> List[str]:
    """
    Order words by score, highest first. Ties keep their input order
    (sorted() is stable, including with reverse=True).
    """
    return sorted(words, key=lambda w: score_word(w, snapshot), reverse=True)


def top_words(ranked: Sequence[T], n: int) -> List[T]:
    """
    First `n` entries of `ranked`, or all of them when fewer than
    REVEAL_ALL_BELOW remain.
    """
    if len(ranked) < REVEAL_ALL_BELOW:
        return list(ranked)
    return list(ranked[:max(n, 0)])
