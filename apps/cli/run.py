# apps/cli/run.py
"""
CLI entry point for batch simulations.

This script:
  1) Validates the word list (prints counts + SHA, flags malformed lines).
  2) Loads the list and plays one game per answer, always guessing the
     top-ranked candidate, with a live progress indicator.
  3) Writes:
       - CSV:  per-game results, rounds as "<guess> <feedback>" pairs
       - JSON: config, word-list report and summary statistics
"""

from __future__ import annotations

import argparse
import datetime as dt
import json
import random
import sys
from pathlib import Path

from wordsieve.config import Settings
from wordsieve.datasets import validate_wordlist, pretty_summary
from wordsieve.engine import load_words
from wordsieve.engine.session import DUPLICATE_POLICIES
from wordsieve.errors import ConfigError, LoadError
from wordsieve.harness import run_batch, summarize, write_results
from wordsieve.log import setup_logging


def main(argv=None) -> int:
    """
    Parse CLI args, validate the word list, run the batch and write outputs.
    """
    try:
        settings = Settings.load()
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 1

    ap = argparse.ArgumentParser(description="wordsieve: simulate games with the frequency heuristic")
    ap.add_argument("--wordlist", default=str(settings.wordlist),
                    help="path to the word list (guesses and candidates)")
    ap.add_argument("--answers",
                    help="optional path to the answers to play (default: the word list itself)")
    ap.add_argument("--duplicates", choices=DUPLICATE_POLICIES, default=settings.duplicates)
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show a progress bar (auto = only on a terminal)."
    )
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)

    # 1) Validate and print a one-liner summary
    rep = validate_wordlist(args.wordlist)
    print(pretty_summary(rep))

    # 2) Load lists into memory
    try:
        words = load_words(args.wordlist)
        answers = load_words(args.answers) if args.answers else list(words)
    except LoadError as e:
        print(e, file=sys.stderr)
        return 1

    # 3) Choose cases (deterministic sample by seed)
    cases = list(answers)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())

    # 4) Run
    results = run_batch(words, cases, duplicates=args.duplicates, progress=show_bar)
    summary = summarize(results)

    # 5) Write outputs (per-game CSV + run summary JSON)
    run_id = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    summary_path = outdir / f"run_{run_id}_summary.json"

    write_results(results, csv_path)
    run_report = {
        "run_id": run_id,
        "config": vars(args),
        "wordlist": rep,
        "summary": summary,
    }
    summary_path.write_text(json.dumps(run_report, indent=2, default=str), encoding="utf-8")

    print(f"Games: {summary['games']} | wins: {summary['wins']} "
          f"| mean guesses: {summary['mean_guesses']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {summary_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
