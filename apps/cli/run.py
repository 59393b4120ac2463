# apps/cli/run.py
"""
CLI entry point for replaying wordscramble transcripts.

This script:
  1) Optionally validates the start-word list (counts, SHA, short/unknown words).
  2) Loads the dictionary and the transcripts file.
  3) Replays every game with a live progress indicator and writes:
       - CSV:  one row per submission (outcome + rejection reason)
       - JSON: manifest with config, totals, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordscramble.datasets import validate_start_words, pretty_summary
from wordscramble.game import GameSession
from wordscramble.harness import read_transcripts, run_case
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.oracles import (
    DEFAULT_LANGUAGE,
    DEFAULT_MIN_ZIPF,
    WordfreqDictionary,
    WordListDictionary,
)


def main():
    """
    Parse CLI args, load oracles and transcripts, replay with progress, write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble — replay game transcripts")
    ap.add_argument("transcripts", help="transcript file (blocks: root line, then submissions)")
    ap.add_argument("--dictionary", default=os.environ.get("WORDSCRAMBLE_DICTIONARY"),
                    help="word list used as the dictionary (default: wordfreq)")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language code")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="wordfreq threshold for a word to count as real")
    ap.add_argument("--check-start-words", default=None,
                    help="also validate this start-word list and record it in the manifest")
    ap.add_argument("--sample", type=int, help="replay only the first K games")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # 1) Dictionary oracle
    if args.dictionary:
        dictionary = WordListDictionary.from_path(args.dictionary, language=args.language)
    else:
        dictionary = WordfreqDictionary(min_zipf=args.min_zipf)

    # 2) Optional start-word check (printed, and stored in the manifest)
    start_rep = None
    if args.check_start_words:
        start_rep = validate_start_words(args.check_start_words, dictionary=dictionary,
                                         language=args.language)
        print(pretty_summary(start_rep))

    # 3) Transcripts
    try:
        games = read_transcripts(args.transcripts)
    except FileNotFoundError as e:
        print(f"fatal: transcript file not found: {e}", file=sys.stderr)
        sys.exit(1)
    if args.sample is not None:
        games = games[: args.sample]
    total = len(games)

    session = GameSession(dictionary, language=args.language)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(games, ncols=80, desc="Replaying", unit="game") if mode == "bar" else games

    # 5) Replay
    for idx, (root, submissions) in enumerate(iterator, 1):
        results.append(run_case(session, submissions, root=root))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 6) Outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    totals = {k: sum(r[k] for r in results) for k in ("accepted", "rejected", "ignored")}
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "start_words": start_rep,
        "num_games": len(results),
        "totals": totals,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Games: {len(results)} | accepted={totals['accepted']} "
          f"rejected={totals['rejected']} ignored={totals['ignored']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
