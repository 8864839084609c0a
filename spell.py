# spell.py
from __future__ import annotations
from typing import Iterable, List, Tuple
import logging
import re

import Levenshtein

from lm import CorpusSource, UnigramLanguageModel

logger = logging.getLogger(__name__)

# Peter Norvig style edit distance candidate generation
LETTERS = 'abcdefghijklmnopqrstuvwxyz'

# whole letter runs, accented letters included, so words are never split
_TOKEN_RE = re.compile(r"[^\W\d_]+")
_ASCII_WORD_RE = re.compile(r"[a-z]+")


def edits1(word: str, letters: str = LETTERS) -> set:
    """All strings one atomic edit away from `word`."""
    splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
    deletes    = [L + R[1:] for L, R in splits if R]
    transposes = [L + R[1] + R[0] + R[2:] for L, R in splits if len(R) > 1]
    replaces   = [L + c + R[1:] for L, R in splits if R for c in letters]
    inserts    = [L + c + R     for L, R in splits for c in letters]
    return set(deletes + transposes + replaces + inserts)


def edits2(word: str, letters: str = LETTERS) -> set:
    """edits1 applied to every member of edits1(word), unfiltered."""
    return {e2 for e1 in edits1(word, letters) for e2 in edits1(e1, letters)}


class SpellCorrector:
    def __init__(self, lm: UnigramLanguageModel, letters: str = LETTERS) -> None:
        """
        lm      : a built unigram model (see lm.UnigramLanguageModel.build)
        letters : alphabet used for replacements and insertions
        """
        if not letters:
            raise ValueError("letters must not be empty")
        self.lm = lm
        self.letters = letters

    @classmethod
    def from_corpus(
        cls,
        source: CorpusSource,
        letters: str = LETTERS,
        encoding: str = "utf-8"
    ) -> SpellCorrector:
        """Read and count a corpus file or stream. Raises lm.CorpusError."""
        return cls(UnigramLanguageModel.from_corpus(source, encoding=encoding), letters)

    @classmethod
    def from_text(cls, text: str, letters: str = LETTERS) -> SpellCorrector:
        return cls(UnigramLanguageModel.build(text), letters)

    def known(self, words: Iterable[str]) -> set:
        """The subset of `words` that appear in the model."""
        return {w for w in words if w in self.lm}

    def _tiered_candidates(self, word: str) -> Tuple[int, set]:
        # stop at the first tier holding a known word; -1 means nothing found
        if word in self.lm:
            return 0, {word}
        c1 = self.known(edits1(word, self.letters))
        if c1:
            return 1, c1
        c2 = self.known(edits2(word, self.letters))
        if c2:
            return 2, c2
        return -1, {word}

    def _rank_key(self, word: str):
        def key(cand: str):
            return (-self.lm.count(cand), Levenshtein.distance(word, cand), cand)
        return key

    def candidates(self, word: str) -> set:
        """Possible corrections for `word`, from the nearest non-empty tier."""
        word = word.lower()
        if not word:
            return {word}
        return self._tiered_candidates(word)[1]

    def suggestions(self, word: str, n: int = 5) -> List[str]:
        """Best `n` candidates, most probable first."""
        if n < 0:
            raise ValueError("n must not be negative")
        word = word.lower()
        if not word:
            return [word]
        _, cands = self._tiered_candidates(word)
        return sorted(cands, key=self._rank_key(word))[:n]

    def correction(self, word: str) -> str:
        """
        Most probable spelling correction for `word`.

        Ties on frequency go to the candidate closer to `word` by Levenshtein
        distance, then to the alphabetically first one. A word with no known
        candidate within two edits comes back lowercased but otherwise intact.
        """
        word = word.lower()
        if not word:
            return word
        tier, cands = self._tiered_candidates(word)
        best = min(cands, key=self._rank_key(word))
        if best != word:
            logger.debug("corrected %r -> %r (edit tier %d)", word, best, tier)
        return best

    def correct(self, text: str) -> str:
        """
        Correct every alphabetic word of `text` independently.
        Separators are kept as they are; Capitalized and UPPER words keep
        their shape. Words with letters outside a-z are left untouched.
        """
        def fix(m: re.Match) -> str:
            tok = m.group(0)
            if not _ASCII_WORD_RE.fullmatch(tok.lower()):
                return tok
            best = self.correction(tok)
            if tok.isupper() and len(tok) > 1:
                return best.upper()
            if tok[0].isupper():
                return best.capitalize()
            return best

        return _TOKEN_RE.sub(fix, text)
