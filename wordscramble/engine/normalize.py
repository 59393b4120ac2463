"""
Input normalization for submitted words.

Conventions:
  - lowercase everything (Unicode-aware, via str.lower)
  - drop EVERY whitespace character, not only the leading/trailing ones,
    so "  Sil ent\n" and "silent" are the same word
  - leave every other character alone (punctuation, digits, accents)
  - compose to NFC, so "\u00e9" and "e\u0301" are stored as the same word

Letters are compared as graphemes: one base character plus any combining
marks that follow it. `graphemes` composes to NFC first so that "é" typed
as one code point and "e" + U+0301 count as the same single letter.
"""

import unicodedata
from typing import List


def normalize(raw: str) -> str:
    """
    Return the canonical form of a raw submission.

    Idempotent: normalize(normalize(x)) == normalize(x).

    Examples:
      normalize("  Listen ")  -> "listen"
      normalize("s i\tlent")  -> "silent"
      normalize("ÉCLAIR")     -> "éclair"
    """
    word = "".join(ch for ch in raw.lower() if not ch.isspace())
    return unicodedata.normalize("NFC", word)


def graphemes(word: str) -> List[str]:
    """
    Split `word` into user-perceived letters.

    A combining mark is glued to the letter before it; a leading combining
    mark (nothing to attach to) stands on its own.
    """
    out: List[str] = []
    for ch in unicodedata.normalize("NFC", word):
        if out and unicodedata.combining(ch):
            out[-1] += ch
        else:
            out.append(ch)
    return out
