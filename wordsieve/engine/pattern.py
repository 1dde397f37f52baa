"""
Game feedback for a single (guess, answer) pair, in b / y / g codes.

Conventions:
  - 'g' : green  = correct letter in the correct position
  - 'y' : yellow = correct letter in the wrong position
  - 'b' : black  = letter not present (or present fewer times than guessed)

Two-pass algorithm:
  1) Mark all greens and count the answer letters left unmatched.
  2) Mark yellows only while the letter still has an unmatched copy.

Used by the simulation harness to play games against a known answer.
"""

from __future__ import annotations

from collections import Counter


def feedback_pattern(guess: str, answer: str) -> str:
    """
    Compute the feedback string for `guess` against `answer`.

    Examples:
      feedback_pattern("belle", "level") -> "bgyyy"
      feedback_pattern("lemon", "level") -> "ggbbb"
    """
    if len(guess) != len(answer):
        raise ValueError("Guess and answer must be the same length")

    pattern = ["b"] * len(guess)

    # Pass 1: greens, and leftover answer letters for pass 2
    remaining: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "g"
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the answer's multiplicity
    for i, g in enumerate(guess):
        if pattern[i] == "g":
            continue
        if remaining[g] > 0:
            pattern[i] = "y"
            remaining[g] -= 1

    return "".join(pattern)
