"""
Word validation: "may this word be added to the session right now?"

A normalized candidate is accepted iff, in this order:
  1) it has not been accepted already this session      (ALREADY_USED)
  2) it can be spelled from the root's letters          (NOT_POSSIBLE)
  3) the dictionary oracle recognizes it                (NOT_A_REAL_WORD)
  4) it has at least MIN_WORD_LENGTH letters            (TOO_SHORT)
  5) it is not the root word itself                     (SAME_AS_ROOT)

The order is part of the contract: when a word breaks several rules, the
first failing rule decides which message the player sees.

`validate` is pure. It reads `used` but never appends to it; the session
owns that step.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Collection, List, Tuple, Union

from .decisions import Accepted, Decision, Reason, Rejected
from .normalize import graphemes, normalize

logger = logging.getLogger(__name__)

# Shortest word the game accepts (counted in letters, not code points).
MIN_WORD_LENGTH = 3

# Either a lookup function, or an answer the caller already computed
# (e.g. when the dictionary lives behind I/O that must stay out of here).
Lookup = Union[Callable[[str], bool], bool]


@dataclass(frozen=True)
class Context:
    """Everything a rule may look at for one candidate."""
    root: str
    used: Collection[str]
    lookup: Lookup


def is_original(word: str, ctx: Context) -> bool:
    return word not in ctx.used


def is_possible(word: str, ctx: Context) -> bool:
    """
    True if every letter of `word` can be taken from the root, each root
    letter used at most as many times as it appears there.

    Example: "bb" is NOT possible from "cab" (only one 'b' to spend).
    """
    # The root's letters as a bag; each candidate letter consumes one.
    bag = Counter(graphemes(ctx.root))
    for letter in graphemes(word):
        if bag[letter] <= 0:
            return False
        bag[letter] -= 1
    return True


def is_real(word: str, ctx: Context) -> bool:
    """
    Ask the dictionary oracle. Any failure to get an answer counts as
    "not a real word" so unverifiable words are never accepted.
    """
    if isinstance(ctx.lookup, bool):
        return ctx.lookup
    try:
        return bool(ctx.lookup(word))
    except Exception:
        logger.warning("dictionary lookup failed for %r; treating as not real", word,
                       exc_info=True)
        return False


def is_long_enough(word: str, ctx: Context) -> bool:
    return len(graphemes(word)) >= MIN_WORD_LENGTH


def is_not_root(word: str, ctx: Context) -> bool:
    return word != ctx.root


# Ordered rule table: (name, predicate, reason reported when it fails).
Rule = Tuple[str, Callable[[str, Context], bool], Reason]
RULES: List[Rule] = [
    ("original", is_original, Reason.ALREADY_USED),
    ("possible", is_possible, Reason.NOT_POSSIBLE),
    ("real", is_real, Reason.NOT_A_REAL_WORD),
    ("length", is_long_enough, Reason.TOO_SHORT),
    ("not_root", is_not_root, Reason.SAME_AS_ROOT),
]


def validate(root: str, used: Collection[str], candidate: str, lookup: Lookup) -> Decision:
    """
    Run every rule against `candidate`, stopping at the first failure.

    Args:
      root      : the session's root word
      used      : words accepted so far this session (normalized)
      candidate : the submission, ALREADY normalized and non-empty
      lookup    : dictionary oracle `word -> bool`, or a precomputed bool

    Returns:
      Accepted(candidate) or Rejected(reason, root).

    Raises:
      ValueError if `candidate` is empty. Empty input is a no-op for the
      player, so callers filter it out before getting here.
    """
    if not candidate:
        raise ValueError("candidate must be a non-empty normalized word")

    # Every rule sees the root in the same canonical form as the candidate.
    ctx = Context(root=normalize(root), used=used, lookup=lookup)
    for name, check, reason in RULES:
        if not check(candidate, ctx):
            logger.debug("rejected %r against %r: rule %s failed", candidate, root, name)
            return Rejected(reason=reason, root=root)

    return Accepted(word=candidate)
