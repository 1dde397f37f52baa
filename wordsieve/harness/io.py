"""
Per-game results as CSV, one row per game.

Each game's rounds go into a single `rounds` column in the same
"<guess> <feedback>" shape the interactive solver reads, joined by " | ",
e.g. "raise yybbg | crane ggggg". A round can be pasted straight back
into apps/cli/solve.py.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

FIELDS = ["answer", "success", "guesses", "candidates_left", "time_ms", "rounds"]
ROUND_SEP = " | "


def format_rounds(history: Iterable[Tuple[str, str]]) -> str:
    return ROUND_SEP.join(f"{guess} {patt}" for guess, patt in history)


def parse_rounds(text: str) -> List[Tuple[str, str]]:
    """Inverse of format_rounds; an empty string means no rounds."""
    if not text:
        return []
    out = []
    for chunk in text.split(ROUND_SEP):
        guess, patt = chunk.split()
        out.append((guess, patt))
    return out


def write_results(results: List[Dict], path: Path | str) -> str:
    """Write one CSV row per game. Returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "candidates_left": r["candidates_left"],
                "time_ms": round(float(r["time_ms"]), 3),
                "rounds": format_rounds(r["history"]),
            })

    return str(p)
