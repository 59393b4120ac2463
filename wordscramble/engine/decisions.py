"""
Outcome types returned by the validator.

A submission ends in exactly one of:
  - Accepted(word)           : every rule passed; `word` is normalized
  - Rejected(reason, root)   : the FIRST rule that failed, plus the root the
                               word was checked against (needed for messages)

`Reason` carries the user-facing title/message pair for each rule, so the
UI only has to print what it is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Reason(Enum):
    ALREADY_USED = ("Word used already", "Be more original")
    NOT_POSSIBLE = ("Word not possible", "You can't spell that word from {root}!")
    NOT_A_REAL_WORD = ("Word not recognized", "You can't just make them up, you know!")
    TOO_SHORT = ("Word is too short", "Add some more letters")
    SAME_AS_ROOT = ("Start word repeated", "You can't use the word we started with!")

    def __init__(self, title: str, template: str):
        self.title = title
        self.template = template

    @property
    def code(self) -> str:
        """Stable lowercase identifier, e.g. 'already_used' (used in CSV output)."""
        return self.name.lower()

    def message(self, root: str) -> str:
        return self.template.format(root=root)


@dataclass(frozen=True)
class Accepted:
    word: str

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    reason: Reason
    root: str

    @property
    def accepted(self) -> bool:
        return False

    @property
    def title(self) -> str:
        return self.reason.title

    @property
    def message(self) -> str:
        return self.reason.message(self.root)


Decision = Union[Accepted, Rejected]
