import pytest

from wordsieve.engine.frequency import LetterFrequency, recompute
from wordsieve.engine.scoring import REVEAL_ALL_BELOW, rank_candidates, score_word, top_words


def _snap(**freqs):
    return {k: LetterFrequency(k, v) for k, v in freqs.items()}


def test_repeated_letters_count_once():
    snap = recompute(["speed"])
    # s=.2, p=.2, e=.4, d=.2 -> e is counted once
    assert score_word("speed", snap) == pytest.approx(1.0)


def test_score_ignores_letter_order():
    snap = recompute(["crane", "stare", "plumb"])
    assert score_word("stare", snap) == pytest.approx(score_word("tears", snap))


def test_missing_letters_score_zero():
    assert score_word("zzzzz", _snap(a=0.5, b=0.5)) == 0.0


def test_rank_is_descending_and_stable():
    snap = _snap(a=0.5, b=0.25, c=0.125)
    words = ["bca", "xyz", "abc", "aaa", "ccc"]
    assert rank_candidates(words, snap) == ["bca", "abc", "aaa", "ccc", "xyz"]


def test_rank_empty_set_is_a_no_op():
    assert rank_candidates([], {}) == []
    assert rank_candidates([], _snap(a=1.0)) == []


def test_top_words_small_set_reveals_everything():
    ranked = [f"w{i:04d}" for i in range(12)]
    assert top_words(ranked, 5) == ranked


def test_top_words_truncates_large_sets():
    ranked = [f"w{i:04d}" for i in range(60)]
    assert top_words(ranked, 5) == ranked[:5]


def test_top_words_threshold_is_exclusive():
    ranked = [f"w{i:04d}" for i in range(REVEAL_ALL_BELOW)]
    assert len(top_words(ranked, 5)) == 5
    assert len(top_words(ranked[:-1], 5)) == REVEAL_ALL_BELOW - 1


def test_long_entries_score_every_letter():
    # recompute counts every character, so scoring reads the whole entry too
    snap = recompute(["abcdefg"])
    assert score_word("abcdefg", snap) == pytest.approx(1.0)
    assert score_word("abcdefg", snap) > score_word("abcde", snap)
