"""
Game session: one root word and the words found from it so far.

- new_game: draw a root word from a word source and clear the found words.
- submit:   normalize raw input, validate it, and record it on acceptance.

The session is the only place state changes. Rendering is left to the caller,
which reads `snapshot()` (or the properties) and the Decision each submit
returns.

State machine:
    IDLE --new_game--> IN_SESSION --new_game--> IN_SESSION (fresh state)
There is no way back to IDLE; new_game is both the initializer and the reset.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from wordscramble.engine import Decision, normalize, validate
from wordscramble.oracles.dictionary import DEFAULT_LANGUAGE, Dictionary, bind
from wordscramble.oracles.wordsource import WordSource

logger = logging.getLogger(__name__)

# Used whenever the word source comes up empty, so a game can always start.
DEFAULT_ROOT_WORD = "pineapple"


class SessionState(Enum):
    IDLE = "idle"
    IN_SESSION = "in_session"


class SessionNotStartedError(RuntimeError):
    """submit() was called before the first new_game()."""


@dataclass(frozen=True)
class SessionSnapshot:
    root_word: str
    used_words: Tuple[str, ...]   # most recent first


class GameSession:
    def __init__(self, dictionary: Dictionary, *, word_source: Optional[WordSource] = None,
                 language: str = DEFAULT_LANGUAGE):
        self.dictionary = dictionary
        self.word_source = word_source
        self.language = language
        self._lookup = bind(dictionary, language)
        self._root: Optional[str] = None
        self._used: List[str] = []

    @property
    def state(self) -> SessionState:
        return SessionState.IDLE if self._root is None else SessionState.IN_SESSION

    @property
    def root_word(self) -> Optional[str]:
        return self._root

    @property
    def used_words(self) -> Tuple[str, ...]:
        return tuple(self._used)

    def snapshot(self) -> SessionSnapshot:
        if self._root is None:
            raise SessionNotStartedError("no game in progress; call new_game() first")
        return SessionSnapshot(root_word=self._root, used_words=tuple(self._used))

    def new_game(self, word_source: Optional[WordSource] = None) -> str:
        """
        Start over with a fresh root word.

        The root comes from `word_source`, else the source given at
        construction. If there is no source, it yields nothing usable, or it
        fails to load, the root falls back to DEFAULT_ROOT_WORD.

        Returns the new root word.
        """
        source = word_source or self.word_source
        root = self._draw(source)
        self._root = root
        self._used = []
        logger.info("new game: root word %r", root)
        return root

    def _draw(self, source: Optional[WordSource]) -> str:
        if source is None:
            logger.warning("no word source configured; using %r", DEFAULT_ROOT_WORD)
            return DEFAULT_ROOT_WORD
        try:
            word = source()
        except (LookupError, OSError) as e:
            logger.warning("word source failed (%s); using %r", e, DEFAULT_ROOT_WORD)
            return DEFAULT_ROOT_WORD
        root = normalize(word) if word else ""
        if not root:
            logger.warning("word source yielded nothing; using %r", DEFAULT_ROOT_WORD)
            return DEFAULT_ROOT_WORD
        return root

    def submit(self, raw: str) -> Optional[Decision]:
        """
        Try to add a word to the session.

        Returns:
          - None if the input is empty after normalization (ignored, no alert)
          - Accepted(word): the word is now first in `used_words`
          - Rejected(reason, root): nothing changed; show reason title/message
        """
        if self._root is None:
            raise SessionNotStartedError("no game in progress; call new_game() first")

        word = normalize(raw)
        if not word:
            return None

        decision = validate(self._root, self._used, word, self._lookup)
        if decision.accepted:
            self._used.insert(0, decision.word)
        return decision
