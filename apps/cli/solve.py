# apps/cli/solve.py
"""
Interactive solver.

Commands (one per line):
  guess   then a line "<word> <feedback>", feedback = 5 codes from b / y / g
  new     start over with the full word list
  exit    quit

After every accepted round it prints the remaining count, the top words with
scores and the top letters by frequency. Rejected rounds are reported and
leave the candidates untouched.

Usage:
    python -m apps.cli.solve --wordlist data/dictionary.txt --duplicates tally
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from wordsieve.config import Settings
from wordsieve.engine import Session, WordStore
from wordsieve.engine.session import DUPLICATE_POLICIES
from wordsieve.errors import ConfigError, LoadError, WordSieveError
from wordsieve.log import setup_logging

logger = logging.getLogger(__name__)


def print_status(session: Session, *, top_words: int, top_letters: int,
                 write: Callable[[str], None] = print) -> None:
    write(f"Dictionary size: {session.store.candidate_count()}")
    write("Top words: ")
    for i, (word, score) in enumerate(session.suggestions(top_words), 1):
        write(f"{i}. {word}: {score:.4f}")
    write("Top letters by frequency: ")
    for entry in session.top_letters(top_letters):
        write(f"{entry.letter}: {entry.frequency:.4f}")


def repl(session: Session, *, top_words: int, top_letters: int,
         read: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> None:
    """
    Read commands until 'exit' or end of input.
    """
    print_status(session, top_words=top_words, top_letters=top_letters, write=write)

    while True:
        try:
            command = read("Command: guess, new, exit\n").strip()
        except EOFError:
            break

        if command == "exit":
            break
        if command == "new":
            session.reset()
            print_status(session, top_words=top_words, top_letters=top_letters, write=write)
            continue
        if command != "guess":
            continue

        try:
            line = read("Enter guess and results as [b]lack, [y]ellow or [g]reen per letter, "
                        "e.g. 'crane bbygb'\n")
        except EOFError:
            break

        parts = line.split()
        if len(parts) != 2:
            write("MUST PROVIDE GUESS AND RESULTS, e.g. 'crane bbygb'")
            continue

        guess, result = parts
        try:
            session.apply_round(guess, result)
        except WordSieveError as e:
            write(f"Rejected: {e}")
            continue

        print_status(session, top_words=top_words, top_letters=top_letters, write=write)

    write("Thanks for playing!")


def main(argv=None) -> int:
    try:
        settings = Settings.load()
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 1

    ap = argparse.ArgumentParser(description="wordsieve: interactive 5-letter word solver")
    ap.add_argument("--wordlist", default=str(settings.wordlist),
                    help="path to the word list (one word per line)")
    ap.add_argument("--top-words", type=int, default=settings.top_words,
                    help="how many ranked words to show (all are shown below 50)")
    ap.add_argument("--top-letters", type=int, default=settings.top_letters,
                    help="how many letters to show")
    ap.add_argument("--duplicates", choices=DUPLICATE_POLICIES, default=settings.duplicates,
                    help="how to treat a letter that is both black and yellow/green in one guess")
    ap.add_argument("--log-level", default=settings.log_level)
    args = ap.parse_args(argv)

    setup_logging(args.log_level)

    try:
        store = WordStore.load(args.wordlist)
    except LoadError as e:
        logger.error("%s", e)
        return 1

    if args.duplicates == "caller":
        print("Note: if a repeated letter is both [b] and [y/g], then mark [b] instances as [y].")

    session = Session(store, duplicates=args.duplicates)
    repl(session, top_words=args.top_words, top_letters=args.top_letters)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
