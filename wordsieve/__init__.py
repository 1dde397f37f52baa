from .engine import (
    WordStore,
    Session,
    Status,
    LetterFrequency,
    ScoredWord,
)
from .errors import (
    WordSieveError,
    LoadError,
    InvalidFeedbackError,
    FeedbackPositionError,
    UnknownWordError,
    MalformedInputError,
    ConfigError,
)

__version__ = "0.1.0"

__all__ = [
    "WordStore",
    "Session",
    "Status",
    "LetterFrequency",
    "ScoredWord",
    "WordSieveError",
    "LoadError",
    "InvalidFeedbackError",
    "FeedbackPositionError",
    "UnknownWordError",
    "MalformedInputError",
    "ConfigError",
]
