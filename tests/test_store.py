from pathlib import Path

import pytest

from wordsieve.engine import Status, WordStore, load_words
from wordsieve.errors import FeedbackPositionError, InvalidFeedbackError, LoadError


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_keeps_lines_verbatim(tmp_path: Path):
    src = tmp_path / "dictionary.txt"
    _write(src, ["crane", "CRATE", "ab", "toolong"])

    store = WordStore.load(src)
    assert store.full_count() == 4
    assert store.candidates() == ("crane", "CRATE", "ab", "toolong")
    assert store.contains("CRATE") and not store.contains("crate")


def test_load_missing_file_raises(tmp_path: Path):
    with pytest.raises(LoadError):
        WordStore.load(tmp_path / "nope.txt")


def test_load_undecodable_file_raises(tmp_path: Path):
    src = tmp_path / "bad.txt"
    src.write_bytes(b"crane\n\xff\xfe\xfd\n")
    with pytest.raises(LoadError):
        load_words(src)


def test_read_accessors(store):
    assert store.candidate_count() == 10
    assert store.candidate_at(0) == "crane"
    assert store.candidate_at(9) == "ember"


def test_contains_uses_full_list_not_candidates(store):
    store.apply_feedback("c", Status.BLACK, 0)
    assert "crane" not in store.candidates()
    assert store.contains("crane")


def test_apply_feedback_returns_new_count(store):
    n = store.apply_feedback("e", "g", 4)
    assert n == store.candidate_count()
    assert all(w[4] == "e" for w in store.candidates())


@pytest.mark.parametrize("status", ["x", "B", "", None, 3])
def test_invalid_status_leaves_candidates_unchanged(store, status):
    before = store.candidates()
    with pytest.raises(InvalidFeedbackError):
        store.apply_feedback("a", status, 0)
    assert store.candidates() == before


@pytest.mark.parametrize("position", [-1, 5, 17])
def test_out_of_range_position_raises_index_error(store, position):
    before = store.candidates()
    with pytest.raises(IndexError):
        store.apply_feedback("a", Status.GREEN, position)
    with pytest.raises(FeedbackPositionError):
        store.apply_feedback("a", Status.YELLOW, position)
    assert store.candidates() == before


def test_candidates_stay_subset_in_original_order(small_words, store):
    for letter, status, pos in [("s", "b", 0), ("r", "y", 0), ("e", "g", 4)]:
        store.apply_feedback(letter, status, pos)
        cands = list(store.candidates())
        assert all(w in small_words for w in cands)
        assert cands == [w for w in small_words if w in cands]


def test_cap_letter(store):
    store.cap_letter("e", 1)
    assert "speed" not in store.candidates()
    assert "ember" not in store.candidates()
    assert "venom" in store.candidates()


def test_reset_restores_full_list(small_words, store):
    store.apply_feedback("a", "b", 0)
    assert store.candidate_count() < len(small_words)
    assert store.reset() == len(small_words)
    assert list(store.candidates()) == small_words


def test_candidates_view_is_a_copy(store):
    view = store.candidates()
    assert isinstance(view, tuple)
    store.apply_feedback("a", "b", 0)
    assert len(view) == 10


def test_cap_letter_with_position():
    store = WordStore(["venom", "vower", "ember", "plumb"])
    store.cap_letter("e", 1, 3)
    assert store.candidates() == ("venom", "plumb")
