from .dictionary import (
    DEFAULT_LANGUAGE,
    DEFAULT_MIN_ZIPF,
    Dictionary,
    WordfreqDictionary,
    WordListDictionary,
    bind,
)
from .wordsource import WordListSource, WordSource, bundled_start_words, fixed_source

__all__ = [
    "DEFAULT_LANGUAGE", "DEFAULT_MIN_ZIPF", "Dictionary", "WordfreqDictionary",
    "WordListDictionary", "bind",
    "WordListSource", "WordSource", "bundled_start_words", "fixed_source",
]
