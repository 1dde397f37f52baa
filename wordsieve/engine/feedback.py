"""
Feedback interpretation: one (letter, status, position) triple at a time.

Status codes:
  - 'b' : BLACK  = letter not present
  - 'y' : YELLOW = letter present, wrong position
  - 'g' : GREEN  = letter present, correct position

Each status is an independent removal predicate over the CURRENT candidate
list. A round is five such calls applied in position order, each working on
the output of the previous one.

Known limitation:
  There is no cross-slot bookkeeping. If a guess repeats a letter and one copy
  comes back BLACK while another is YELLOW/GREEN, the BLACK pass removes every
  word containing that letter, including the answer. `reclassify_duplicates`
  (mark those BLACKs as YELLOW) and `claimed_copies` (tally-based capping) are
  the two ways callers deal with it; see engine.session.
"""

from __future__ import annotations

import logging
from collections import Counter
from enum import Enum
from typing import Dict, Iterable, List, Tuple

from ..errors import FeedbackPositionError, InvalidFeedbackError, MalformedInputError

logger = logging.getLogger(__name__)

WORD_LENGTH = 5


class Status(Enum):
    """Per-letter feedback status, valued by its one-character code."""
    BLACK = "b"
    YELLOW = "y"
    GREEN = "g"

    @classmethod
    def parse(cls, tag) -> "Status":
        """Accept a Status or its code ('b', 'y', 'g')."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            raise InvalidFeedbackError(f"Invalid letter status {tag!r}") from None


# (letter, status, position) for one slot of a round
Triple = Tuple[str, Status, int]


def _check_position(position: int) -> None:
    if not 0 <= position < WORD_LENGTH:
        raise FeedbackPositionError(
            f"position must be in [0, {WORD_LENGTH}), got {position}"
        )


def _has_at(word: str, letter: str, position: int) -> bool:
    # Malformed (short) entries are kept verbatim by the loader.
    return position < len(word) and word[position] == letter


def filter_words(words: Iterable[str], letter: str, status, position: int) -> List[str]:
    """
    Return the words that survive one feedback triple (order preserved).

    Raises:
      InvalidFeedbackError : unknown status tag
      FeedbackPositionError: position outside [0, 5)
    """
    status = Status.parse(status)
    _check_position(position)

    if status is Status.BLACK:
        logger.debug("Eliminating all words with %s", letter)
        return [w for w in words if letter not in w]

    if status is Status.YELLOW:
        logger.debug("Eliminating all words without %s", letter)
        kept = [w for w in words if letter in w]
        logger.debug("Eliminating all words with %s at index %d", letter, position)
        return [w for w in kept if not _has_at(w, letter, position)]

    # GREEN
    logger.debug("Eliminating all words without %s at index %d", letter, position)
    return [w for w in words if _has_at(w, letter, position)]


def parse_feedback(guess: str, feedback: str) -> List[Triple]:
    """
    Split a guess and its feedback string into per-position triples.

    Example:
      parse_feedback("crane", "bygbb")
        -> [("c", BLACK, 0), ("r", YELLOW, 1), ("a", GREEN, 2), ...]
    """
    if len(guess) != WORD_LENGTH:
        raise MalformedInputError(f"Guess needs to be {WORD_LENGTH} letters, got {guess!r}")
    if len(feedback) != WORD_LENGTH:
        raise MalformedInputError(f"Result needs to be {WORD_LENGTH} letters, got {feedback!r}")
    return [(letter, Status.parse(code), i) for i, (letter, code) in enumerate(zip(guess, feedback))]


def claimed_copies(triples: Iterable[Triple]) -> Dict[str, int]:
    """Count GREEN + YELLOW occurrences per letter within one round."""
    claimed: Counter = Counter()
    for letter, status, _ in triples:
        if status is not Status.BLACK:
            claimed[letter] += 1
    return dict(claimed)


def reclassify_duplicates(triples: Iterable[Triple]) -> List[Triple]:
    """
    Mark a BLACK copy of a letter as YELLOW when another copy of the same
    letter is YELLOW or GREEN in the same round.
    """
    triples = list(triples)
    claimed = claimed_copies(triples)
    out: List[Triple] = []
    for letter, status, pos in triples:
        if status is Status.BLACK and claimed.get(letter, 0) > 0:
            status = Status.YELLOW
        out.append((letter, status, pos))
    return out
