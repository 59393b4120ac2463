"""
Plain-text word-list I/O (UTF-8, one word per line).

Shared by every list the game reads or writes: start.txt, dictionary word
lists and replay transcripts.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Optional


def read_lines(p: Path | str) -> List[str]:
    """
    Read a word list into raw lines (CR/LF stripped, nothing else touched).
    A leading BOM, common in lists saved by Windows editors, is dropped.
    Blank lines are kept; transcripts use them as block separators.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8-sig").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write words one per line in the format read_lines and WordListSource
    expect (UTF-8, trailing newline). Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def unique_preserve_order(words: Iterable[str], key: Optional[Callable[[str], str]] = None) -> List[str]:
    """Drop repeats, keeping the first occurrence and the original order."""
    seen, out = set(), []
    for w in words:
        k = key(w) if key else w
        if k not in seen:
            seen.add(k)
            out.append(w)
    return out
