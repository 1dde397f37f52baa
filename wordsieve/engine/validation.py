"""
Round validation.

Answers the question: "Can this guess/feedback pair be applied right now?"
A round is accepted iff:
  - the guess and the feedback are both exactly 5 characters
  - every feedback code is one of b / y / g
  - the guess exists in the FULL word list (not just the current candidates)

Nothing here touches the candidate list, so a rejected round leaves it as is.
"""

from __future__ import annotations

from typing import List

from ..errors import UnknownWordError
from .feedback import Triple, parse_feedback
from .store import WordStore


def validate_round(store: WordStore, guess: str, feedback: str) -> List[Triple]:
    """
    Check a round and return its (letter, status, position) triples.

    Raises:
      MalformedInputError : wrong guess/feedback length
      InvalidFeedbackError: unknown feedback code
      UnknownWordError    : guess not in the word list
    """
    triples = parse_feedback(guess, feedback)
    if not store.contains(guess):
        raise UnknownWordError(f"Guess needs to be a valid word: {guess!r}")
    return triples
