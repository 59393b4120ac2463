from .validator import validate_start_words, pretty_summary, MIN_START_WORD_LENGTH
from .io import read_lines, write_lines, unique_preserve_order

__all__ = ["validate_start_words", "pretty_summary", "MIN_START_WORD_LENGTH",
           "read_lines", "write_lines", "unique_preserve_order"]
