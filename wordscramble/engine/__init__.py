from .normalize import normalize, graphemes
from .decisions import Accepted, Decision, Reason, Rejected
from .validation import validate, MIN_WORD_LENGTH, RULES

__all__ = [
    "normalize", "graphemes",
    "Accepted", "Decision", "Reason", "Rejected",
    "validate", "MIN_WORD_LENGTH", "RULES",
]
