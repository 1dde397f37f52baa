from __future__ import annotations


class WordSieveError(Exception):
    """Base class for all wordsieve errors."""


# -------------------------
# Fatal
# -------------------------

class LoadError(WordSieveError):
    """Word-list source could not be read or decoded."""


class ConfigError(WordSieveError):
    """A configuration value is missing or has an unsupported value."""


# -------------------------
# Recoverable (round is rejected, candidates untouched)
# -------------------------

class InvalidFeedbackError(WordSieveError):
    """Status tag is not one of b / y / g."""


class FeedbackPositionError(WordSieveError, IndexError):
    """Letter position falls outside the word."""


class UnknownWordError(WordSieveError):
    """Guess is not in the full word list."""


class MalformedInputError(WordSieveError):
    """Guess or feedback string has the wrong shape."""
