# lm.py
from __future__ import annotations
from collections import Counter
from types import MappingProxyType
from typing import IO, Mapping, Union
import logging
import os
import re

logger = logging.getLogger(__name__)

CorpusSource = Union[str, "os.PathLike[str]", IO]

_WORD_RE = re.compile(r"[a-z]+")


class CorpusError(Exception):
    """The corpus source could not be read or decoded as text."""


def tokenize(text: str) -> list[str]:
    """Lowercased maximal runs of a-z; everything else separates words."""
    return _WORD_RE.findall(text.lower())


def read_corpus(source: CorpusSource, encoding: str = "utf-8") -> str:
    """
    Read the whole corpus into memory.

    source   : a filesystem path, or an open text/binary stream
    encoding : used to decode files and binary streams
    """
    if not isinstance(source, (str, os.PathLike)) and not hasattr(source, "read"):
        raise CorpusError(f"not a path or readable stream: {source!r}")
    try:
        if isinstance(source, (str, os.PathLike)):
            with open(source, "r", encoding=encoding) as fh:
                text = fh.read()
        else:
            text = source.read()
            if isinstance(text, bytes):
                text = text.decode(encoding)
    # ValueError covers decode failures and reads from a closed stream
    except (OSError, ValueError) as exc:
        raise CorpusError(f"cannot read corpus {source!r}: {exc}") from exc
    if not isinstance(text, str):
        raise CorpusError(f"corpus {source!r} did not yield text")
    logger.info("read corpus %r (%d characters)", source, len(text))
    return text


class UnigramLanguageModel:
    def __init__(self, counts: Mapping[str, int]) -> None:
        """
        counts : word -> occurrence count, keys must be lowercase a-z runs

        Use build() or from_corpus() rather than calling this directly.
        """
        bad = [w for w in counts if not isinstance(w, str) or not _WORD_RE.fullmatch(w)]
        if bad:
            raise ValueError(f"words must be non-empty lowercase a-z, got {bad[:5]!r}")
        self._counts: Counter[str] = Counter({w: c for w, c in counts.items() if c > 0})
        # read-only view, safe to share between threads
        self.counts: Mapping[str, int] = MappingProxyType(self._counts)
        self.total = sum(self._counts.values())

    @classmethod
    def build(cls, corpus_text: Union[str, bytes]) -> UnigramLanguageModel:
        """Count every token of corpus_text. An empty corpus gives an empty model."""
        if isinstance(corpus_text, bytes):
            try:
                corpus_text = corpus_text.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise CorpusError(f"corpus is not valid UTF-8: {exc}") from exc
        if not isinstance(corpus_text, str):
            raise CorpusError(f"corpus must be text, got {type(corpus_text).__name__}")

        tokens = tokenize(corpus_text)
        model = cls(Counter(tokens))
        logger.info("built model: %d tokens, %d distinct words", model.total, len(model))
        return model

    @classmethod
    def from_corpus(cls, source: CorpusSource, encoding: str = "utf-8") -> UnigramLanguageModel:
        return cls.build(read_corpus(source, encoding=encoding))

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def count(self, word: str) -> int:
        return self._counts.get(word, 0)

    def get_probability(self, word: str) -> float:
        """
        P(word) = count(word) / total.
        The word is looked up as given (no lowercasing); unknown words and
        an empty model both give 0.0.
        """
        if self.total == 0:
            return 0.0
        return self._counts.get(word, 0) / self.total

    def most_common(self, n: int | None = None) -> list[tuple[str, int]]:
        return self._counts.most_common(n)
