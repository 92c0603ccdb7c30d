# tests/conftest.py - shared fixtures
import pytest


class FixedDraws:
    """Random source stub that replays hand-picked draws, cycling when exhausted."""

    def __init__(self, *draws):
        self.draws = list(draws)
        self.calls = 0

    def random(self):
        r = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return r


@pytest.fixture
def draws():
    return FixedDraws


@pytest.fixture
def corpus_file(tmp_path):
    p = tmp_path / "corpus.txt"
    p.write_text("abcabcabc", encoding="utf-8")
    return p
