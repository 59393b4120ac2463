"""
Start-word list validator.

What this module does:
- Check a start-word list (the pool root words are drawn from).
- Enforce formatting rules: one word per line, already normalized (lowercase,
  no whitespace), letters only.
- Flag words too short to leave room for sub-words, duplicates, and (when a
  dictionary is given) words the dictionary doesn't know.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("wordscramble/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from wordscramble.engine.normalize import graphemes, normalize

# Roots shorter than this leave almost nothing to spell.
MIN_START_WORD_LENGTH = 4

# How many offending words to quote in an issue line.
_EXAMPLES = 5


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # lines that aren't a clean normalized word


@dataclass
class StartWordsReport:
    """Validation result for one start-word list."""
    min_length: int
    file: FileReport
    short_words: List[str] = field(default_factory=list)
    unknown_words: List[str] = field(default_factory=list)
    dictionary_checked: bool = False
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words and count the lines that break formatting rules.

    Rules:
      - one token per line
      - the token must already be normalized (normalize(w) == w)
      - letters only (Unicode letters and their combining marks)
      - blank lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8-sig") as f:
        for raw in f:
            w = raw.rstrip("\r\n")
            if w and normalize(w) == w and all(g[0].isalpha() for g in graphemes(w)):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_start_words(path: str, *, min_length: int = MIN_START_WORD_LENGTH,
                         dictionary=None, language: str = "en") -> Dict:
    """
    Validate a start-word list.

    Parameters
    ----------
    path : str
        Path to the list (one word per line).
    min_length : int
        Shortest acceptable root, in letters.
    dictionary : optional
        Anything with `is_real(word, language)`; when given, every start word
        must be known to it.
    language : str
        Language passed to the dictionary.

    Returns
    -------
    Dict
        JSON-serializable StartWordsReport. `passed` is strict: non-empty,
        no invalid lines, no duplicates, no short words, no unknown words.
    """
    p = Path(path)
    if not p.exists():
        rep = StartWordsReport(
            min_length=min_length,
            file=FileReport(path, False, 0, "", 0, 0),
            issues=[f"start words file not found: {path}"],
        )
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = set(words)

    file_report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
    )

    issues: List[str] = []
    short = [w for w in words if len(graphemes(w)) < min_length]
    unknown: List[str] = []
    if dictionary is not None:
        unknown = [w for w in words if not dictionary.is_real(w, language)]

    if file_report.count == 0:
        issues.append("start words file contains 0 valid words")
    if invalid:
        issues.append(f"start words has {invalid} invalid line(s)")
    if file_report.count != file_report.unique_count:
        issues.append("start words contains duplicate lines")
    if short:
        issues.append(f"{len(short)} word(s) shorter than {min_length} letters (e.g., {short[:_EXAMPLES]})")
    if unknown:
        issues.append(f"{len(unknown)} word(s) not in dictionary (e.g., {unknown[:_EXAMPLES]})")

    rep = StartWordsReport(
        min_length=min_length,
        file=file_report,
        short_words=short,
        unknown_words=unknown,
        dictionary_checked=dictionary is not None,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        start=52 (uniq=52, sha=abc123def456) | min_len=4 short=0 | dict=yes unknown=0 | OK
    """
    f = report["file"]
    sha = (f.get("sha256") or "")[:12]
    status = "OK" if report["passed"] else "FAIL"
    checked = "yes" if report["dictionary_checked"] else "no"
    return (
        f"start={f['count']} (uniq={f['unique_count']}, sha={sha}) "
        f"| min_len={report['min_length']} short={len(report['short_words'])} "
        f"| dict={checked} unknown={len(report['unknown_words'])} | {status}"
    )
