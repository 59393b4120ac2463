# apps/cli/play.py
"""
Interactive terminal game.

Shows the root word, reads one word per line, and prints either the updated
word list (most recent first, each with its letter count) or the reason the
word was refused.

Commands:
  :new   start a new game with a fresh root word
  :quit  leave (Ctrl-D works too)

Usage:
  python -m apps.cli.play
  python -m apps.cli.play --dictionary words.txt --seed 7
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable, Iterable

from wordscramble.engine import graphemes
from wordscramble.game import GameSession
from wordscramble.oracles import (
    DEFAULT_LANGUAGE,
    DEFAULT_MIN_ZIPF,
    WordfreqDictionary,
    WordListDictionary,
    WordListSource,
    bundled_start_words,
)

NEW_GAME = ":new"
QUIT = ":quit"


def render(session: GameSession) -> str:
    """Title line plus the found words, newest first, e.g. '  6  silent'."""
    snap = session.snapshot()
    lines = [f"== {snap.root_word} =="]
    for w in snap.used_words:
        lines.append(f"  {len(graphemes(w))}  {w}")
    return "\n".join(lines)


def repl(session: GameSession, lines: Iterable[str], out: Callable[[str], None] = print) -> int:
    """
    Drive a session from an iterable of input lines.
    Returns the number of words accepted over all games.
    """
    accepted = 0
    session.new_game()
    out(render(session))

    for line in lines:
        cmd = line.strip()
        if cmd == QUIT:
            break
        if cmd == NEW_GAME:
            session.new_game()
            out(render(session))
            continue

        decision = session.submit(line)
        if decision is None:
            continue  # nothing typed
        if decision.accepted:
            accepted += 1
            out(render(session))
        else:
            out(f"{decision.title}: {decision.message}")

    return accepted


def _stdin_lines(prompt: str = "> ") -> Iterable[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main():
    ap = argparse.ArgumentParser(description="wordscramble — find words hidden in a root word")
    ap.add_argument("--start-words", default=os.environ.get("WORDSCRAMBLE_START_WORDS"),
                    help="start-word list, one per line (default: bundled start.txt)")
    ap.add_argument("--dictionary", default=os.environ.get("WORDSCRAMBLE_DICTIONARY"),
                    help="word list used as the dictionary (default: wordfreq)")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language code")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="wordfreq threshold for a word to count as real")
    ap.add_argument("--seed", type=int, help="RNG seed for picking root words")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    try:
        start_words = args.start_words or bundled_start_words()
    except FileNotFoundError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if args.dictionary:
        dictionary = WordListDictionary.from_path(args.dictionary, language=args.language)
    else:
        dictionary = WordfreqDictionary(min_zipf=args.min_zipf)

    session = GameSession(dictionary, word_source=WordListSource(start_words, seed=args.seed),
                          language=args.language)
    print(f"Type words made from the letters of the root. {NEW_GAME} = new game, {QUIT} = quit.")
    found = repl(session, _stdin_lines())
    print(f"\nFound {found} word(s). Bye!")


if __name__ == "__main__":
    main()
