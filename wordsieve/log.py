from __future__ import annotations

import logging
import sys


def setup_logging(level: str | None = "INFO") -> None:
    """
    Configure process-wide logging.

    - Writes to stdout
    - Avoids duplicate handlers (tests, repeated CLI entry)
    """
    level_name = (level or "INFO").upper()
    resolved = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()

    # If handlers already exist, only adjust the level
    if root.handlers:
        root.setLevel(resolved)
        return

    root.setLevel(resolved)

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
