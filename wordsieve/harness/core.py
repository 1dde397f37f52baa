"""
Simulation harness.

- run_case:  play one game against a known answer, always guessing the
             top-ranked candidate and feeding back the true pattern.
- run_batch: play many games in sequence (optionally a sample prefix),
             with an optional tqdm progress bar.
- summarize: numpy statistics over a batch.

Enforces the 6-turn limit at the harness layer. The harness is a well-behaved
caller: under the "caller" duplicate policy it reclassifies duplicate-letter
BLACKs itself before submitting a round.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from wordsieve.engine import Session, WordStore, feedback_pattern
from wordsieve.engine.feedback import WORD_LENGTH, parse_feedback, reclassify_duplicates

# Single source of truth for the turn budget.
MAX_TURNS = 6


def _assert_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a different turn budget."""
    if max_turns != MAX_TURNS:
        raise ValueError(f"max_turns must be {MAX_TURNS}; got {max_turns}")


def _caller_feedback(guess: str, pattern: str) -> str:
    """Mark a BLACK copy of a letter YELLOW when another copy is YELLOW/GREEN."""
    triples = reclassify_duplicates(parse_feedback(guess, pattern))
    return "".join(status.value for _, status, _ in triples)


def run_case(
        words: Sequence[str],
        answer: str,
        *,
        duplicates: str = "caller",
        max_turns: int = MAX_TURNS,
) -> Dict:
    """
    Execute one game until the answer is guessed or the turn budget runs out.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), candidates_left (int)
    """
    _assert_turns(max_turns)

    if len(answer) != WORD_LENGTH:
        raise ValueError(f"answer must be {WORD_LENGTH} letters; got {answer!r}")

    # Malformed list entries are loaded verbatim; only real words are played
    playable = [w for w in words if len(w) == WORD_LENGTH]
    session = Session(WordStore(playable), duplicates=duplicates)
    history: List[Tuple[str, str]] = []
    success = False

    t0 = time.perf_counter()
    for _ in range(max_turns):
        top = session.suggestions(1)
        if not top:
            break  # answer was never in the list

        guess = top[0].word
        patt = feedback_pattern(guess, answer)
        history.append((guess, patt))

        if guess == answer:
            success = True
            break

        submitted = _caller_feedback(guess, patt) if duplicates == "caller" else patt
        session.apply_round(guess, submitted)

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
        "candidates_left": session.store.candidate_count(),
    }


def run_batch(
        words: Sequence[str],
        answers: Iterable[str],
        *,
        duplicates: str = "caller",
        max_turns: int = MAX_TURNS,
        sample: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back. Answers that are not 5 letters are skipped;
    if `sample` is provided, only the first K remaining answers are played.
    """
    _assert_turns(max_turns)

    # Pre-filter answer pool to playable words
    pool = [w for w in answers if len(w) == WORD_LENGTH]
    if sample is not None:
        pool = pool[:sample]

    iterator = tqdm(pool, ncols=80, desc="Running", unit="game") if progress else pool
    return [
        run_case(words, ans, duplicates=duplicates, max_turns=max_turns)
        for ans in iterator
    ]


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: win rate and guess-count statistics over wins.
    The histogram counts wins per guess number (1..6) plus failures.
    """
    if not results:
        return {"games": 0, "wins": 0, "win_rate": 0.0, "mean_guesses": None,
                "median_guesses": None, "p90_guesses": None, "histogram": {}}

    wins = np.array([r["guesses"] for r in results if r["success"]], dtype=float)
    hist = {str(k): int(np.sum(wins == k)) for k in range(1, MAX_TURNS + 1)}
    hist["fail"] = len(results) - len(wins)

    return {
        "games": len(results),
        "wins": int(len(wins)),
        "win_rate": float(len(wins) / len(results)),
        "mean_guesses": float(np.mean(wins)) if len(wins) else None,
        "median_guesses": float(np.median(wins)) if len(wins) else None,
        "p90_guesses": float(np.percentile(wins, 90)) if len(wins) else None,
        "histogram": hist,
    }
