"""
Word-list diagnostics.

What this module does:
- Inspect a dictionary file (one word per line) for a fixed word length N.
- Count entries that don't fit the shape (wrong length, non-alphabetic, blank).
- Detect duplicates and compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

This is a report only. WordStore.load still accepts every line verbatim.

Typical use:
    from wordsieve.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word-list file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of lines that fit the shape
    unique_count: int    # distinct well-shaped words
    invalid_lines: int   # lines that don't fit the shape
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Split lines into well-shaped words and a count of the rest.

    Well-shaped: exact length N, alphabetic, no surrounding whitespace.
    Case is not checked; the engine treats case as significant.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.rstrip("\r\n")
            if len(w) == N and w.isalpha():
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def validate_wordlist(path: str | Path, N: int = 5) -> Dict:
    """
    Inspect the word list at `path` for words of length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport) with counts,
        SHA-256, `issues` (list of strings) and `passed` (non-empty, no
        invalid lines, no duplicates).
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordListReport(N, str(path), False, 0, 0, 0, "", False, issues))

    try:
        words, invalid = _scan(p, N)
    except UnicodeDecodeError as e:
        issues.append(f"word list is not valid UTF-8: {e}")
        return asdict(WordListReport(N, str(p), True, 0, 0, 0, _sha256_file(p), False, issues))

    unique = len(set(words))

    if not words:
        issues.append(f"word list contains 0 valid {N}-letter words")
    if invalid:
        issues.append(f"word list has {invalid} line(s) that are not {N} letters")
    if unique != len(words):
        issues.append("word list contains duplicate lines")

    rep = WordListReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | words=10000 (uniq=10000, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
