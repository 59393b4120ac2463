"""
Word sources: where a session's root word comes from.

A word source is any zero-argument callable returning a word, or None when
it has nothing to offer. The session turns None into its fallback root.

WordListSource reads a plain-text list (one word per line) once, on first
use, and then hands out pseudo-random lines. A list that can't be read is
logged and behaves like an empty one; the only hard failure is the bundled
start list itself going missing from the installed package.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Callable, List, Optional

from wordscramble.datasets.io import read_lines

logger = logging.getLogger(__name__)

WordSource = Callable[[], Optional[str]]

_BUNDLED_START_WORDS = Path(__file__).resolve().parent.parent / "datasets" / "data" / "start.txt"


def bundled_start_words() -> Path:
    """
    Path of the start-word list shipped inside the package.
    Raises FileNotFoundError if the resource is missing (a packaging error).
    """
    if not _BUNDLED_START_WORDS.exists():
        raise FileNotFoundError(f"Could not load start.txt from package: {_BUNDLED_START_WORDS}")
    return _BUNDLED_START_WORDS


class WordListSource:
    def __init__(self, path: Path | str, *, seed: int | None = None):
        self.path = Path(path)
        self.rng = random.Random(seed)
        self._words: List[str] | None = None

    @property
    def words(self) -> List[str]:
        # Loaded lazily, exactly once.
        if self._words is None:
            try:
                lines = read_lines(self.path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("could not read word list %s: %s", self.path, e)
                lines = []
            self._words = [ln.strip() for ln in lines if ln.strip()]
            logger.debug("word source %s: %s words", self.path, len(self._words))
        return self._words

    def __call__(self) -> Optional[str]:
        if not self.words:
            return None
        return self.rng.choice(self.words)


def fixed_source(word: Optional[str]) -> WordSource:
    """A source that always yields `word` (handy for tests and replays)."""
    return lambda: word
