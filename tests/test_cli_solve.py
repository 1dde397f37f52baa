from pathlib import Path

from apps.cli.solve import main, repl
from wordsieve.engine import Session, WordStore


def _reader(lines):
    pending = list(lines)

    def read(prompt=""):
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read


def _play(lines, words=("crane", "crate", "stare", "speed")):
    out = []
    session = Session(WordStore(words))
    repl(session, top_words=10, top_letters=5, read=_reader(lines), write=out.append)
    return session, out


def test_guess_round_updates_candidates():
    session, out = _play(["guess", "crane ggggg", "exit"])
    assert session.store.candidates() == ("crane",)
    assert "Dictionary size: 1" in out
    assert out[-1] == "Thanks for playing!"


def test_rejected_rounds_are_reported():
    session, out = _play(["guess", "zzzzz bbbbb", "guess", "crane bbxbb", "guess", "crane", "exit"])
    assert session.store.candidate_count() == 4
    assert sum(line.startswith("Rejected") for line in out) == 2
    assert any("MUST PROVIDE GUESS AND RESULTS" in line for line in out)


def test_new_restores_and_eof_exits():
    session, out = _play(["guess", "crane ggggg", "new"])
    assert session.store.candidate_count() == 4
    assert out[-1] == "Thanks for playing!"


def test_main_fails_on_missing_wordlist(tmp_path: Path):
    assert main(["--wordlist", str(tmp_path / "missing.txt")]) == 1


def test_main_fails_on_bad_config(monkeypatch):
    monkeypatch.setenv("WORDSIEVE_TOP_WORDS", "lots")
    assert main([]) == 1
