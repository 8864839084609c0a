import pytest

from spell import SpellCorrector

SAMPLE_CORPUS = """
The quick brown fox jumps over the lazy dog. The dog sleeps;
the fox runs -- spelling, spelling and more spelling! Spell it again.
Correct words are known words: the, a, an, and, of, to, in.
"""


@pytest.fixture
def corrector() -> SpellCorrector:
    return SpellCorrector.from_text(SAMPLE_CORPUS)


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "big.txt"
    path.write_text(SAMPLE_CORPUS, encoding="utf-8")
    return path
