"""
Transcript replay harness.

- run_case:  play one game from a fixed (or drawn) root, submitting a list of
             raw inputs in order, and record what happened to each.
- run_batch: replay many transcripts back-to-back on the same session.
- read_transcripts: parse the transcript file format.

Transcript file format (UTF-8):
    listen          <- first line of a block: the root word
    silent          <- every following line: one raw submission
    tin
                    <- blank line ends the block
    cab
    bb

These functions are UI-agnostic; the CLI, tests and notebooks share them.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from wordscramble.datasets.io import read_lines
from wordscramble.game import GameSession
from wordscramble.oracles.wordsource import fixed_source

Transcript = Tuple[str, List[str]]  # (root, submissions)


def run_case(session: GameSession, submissions: Sequence[str], *, root: Optional[str] = None) -> Dict:
    """
    Start a new game and submit every entry of `submissions`.

    Args:
        session:     the session to play on (its state is reset)
        submissions: raw strings, exactly as a player would type them
        root:        fixed root word; if None the session's own source is used

    Returns:
        dict with keys:
            root (str), accepted/rejected/ignored (int), time_ms (float),
            history (list of per-submission dicts), used_words (list, most recent first)
    """
    session.new_game(fixed_source(root) if root is not None else None)

    history: List[Dict] = []
    counts = {"accepted": 0, "rejected": 0, "ignored": 0}

    t0 = time.perf_counter_ns()
    for raw in submissions:
        s0 = time.perf_counter_ns()
        decision = session.submit(raw)
        step_ms = (time.perf_counter_ns() - s0) / 1_000_000.0

        if decision is None:
            outcome, word, reason = "ignored", "", ""
        elif decision.accepted:
            outcome, word, reason = "accepted", decision.word, ""
        else:
            outcome, word, reason = "rejected", "", decision.reason.code
        counts[outcome] += 1
        history.append({"raw": raw, "word": word, "outcome": outcome,
                        "reason": reason, "time_ms": step_ms})

    total_ms = (time.perf_counter_ns() - t0) / 1_000_000.0
    return {
        "root": session.root_word,
        **counts,
        "time_ms": total_ms,
        "history": history,
        "used_words": list(session.used_words),
    }


def run_batch(session: GameSession, transcripts: Sequence[Transcript], *,
              sample: int | None = None) -> List[Dict]:
    """
    Replay each (root, submissions) transcript in turn. If `sample` is given,
    only the first K transcripts run.
    """
    pool = list(transcripts)
    if sample is not None:
        pool = pool[:sample]
    return [run_case(session, subs, root=root) for root, subs in pool]


def read_transcripts(path: Path | str) -> List[Transcript]:
    """
    Parse a transcript file into (root, submissions) pairs.
    Blocks with only a root line are kept (a game with no moves).
    Raises FileNotFoundError if the path doesn't exist.
    """
    out: List[Transcript] = []
    block: List[str] = []
    for ln in read_lines(path) + [""]:
        if ln.strip():
            block.append(ln)
            continue
        if block:
            out.append((block[0].strip(), block[1:]))
            block = []
    return out
