import pytest

from wordsieve.engine import feedback_pattern


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "bgyyy"),
    ("level", "level", "ggggg"),
    ("lemon", "level", "ggbbb"),
    ("cools", "scoop", "yygby"),
    ("crane", "crane", "ggggg"),
    ("raise", "crane", "yybbg"),
    ("stare", "crane", "bbgyg"),
    ("speed", "venom", "bbybb"),
])
def test_feedback_pattern_golden(guess, answer, expected):
    assert feedback_pattern(guess, answer) == expected


def test_feedback_pattern_length_mismatch():
    with pytest.raises(ValueError):
        feedback_pattern("crane", "cranes")
