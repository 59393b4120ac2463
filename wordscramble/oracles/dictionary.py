"""
Dictionary oracles: "is this a real word in language X?"

The validator only sees a `word -> bool` function; `bind` produces one from
any object with an `is_real(word, language)` method. Two backends ship:

  - WordListDictionary : an in-memory set loaded from a one-word-per-line
                         file (static, offline, exact)
  - WordfreqDictionary : the `wordfreq` corpus; a word counts as real when
                         its Zipf frequency reaches `min_zipf`

Anything else (a spell-checker binding, a remote service) can be plugged in
by implementing the same protocol.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Protocol

from wordfreq import zipf_frequency

from wordscramble.datasets.io import read_lines
from wordscramble.engine.normalize import normalize

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

# Zipf 1.0 ~ once per 100M words; low enough for real-but-rare words like
# "lisle", high enough to drop most typos that leak into web text.
DEFAULT_MIN_ZIPF = 1.0


class Dictionary(Protocol):
    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        ...


class WordListDictionary:
    """Exact membership against a fixed list of words in one language."""

    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        self.language = language
        self.words = frozenset(w for w in (normalize(x) for x in words) if w)

    @classmethod
    def from_path(cls, path: Path | str, language: str = DEFAULT_LANGUAGE) -> "WordListDictionary":
        """
        Load a newline-separated word list. Blank lines are skipped and every
        entry is normalized the same way submissions are.
        Raises FileNotFoundError if the path doesn't exist.
        """
        d = cls(read_lines(path), language=language)
        logger.info("Loaded %s dictionary words from %s", len(d.words), path)
        return d

    def __len__(self) -> int:
        return len(self.words)

    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language:
            return False
        return word in self.words


class WordfreqDictionary:
    """
    Frequency-based membership via `wordfreq.zipf_frequency`.

    wordfreq raises for languages it has no data for; that propagates to the
    validator, which counts it as "not a real word".
    """

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.min_zipf = float(min_zipf)

    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        return zipf_frequency(word, language) >= self.min_zipf


def bind(dictionary: Dictionary, language: str = DEFAULT_LANGUAGE) -> Callable[[str], bool]:
    """Fix the language and return the one-argument oracle the validator wants."""
    def lookup(word: str) -> bool:
        return dictionary.is_real(word, language)
    return lookup
