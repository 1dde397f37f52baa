from .feedback import Status, WORD_LENGTH, filter_words, parse_feedback, reclassify_duplicates
from .frequency import LetterFrequency, recompute, top_letters
from .pattern import feedback_pattern
from .scoring import ScoredWord, score_word, rank_candidates, top_words
from .session import Session
from .store import WordStore, load_words
from .validation import validate_round

__all__ = [
    "Status", "WORD_LENGTH", "filter_words", "parse_feedback", "reclassify_duplicates",
    "LetterFrequency", "recompute", "top_letters",
    "feedback_pattern",
    "ScoredWord", "score_word", "rank_candidates", "top_words",
    "Session",
    "WordStore", "load_words",
    "validate_round",
]
