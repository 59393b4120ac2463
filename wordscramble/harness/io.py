"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:      flatten replay results into a tidy CSV (one row per submission).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

CSV_FIELDS = ["root", "index", "raw", "word", "outcome", "reason", "time_ms"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize replay results to CSV.

    Schema (columns):
      root, index, raw, word, outcome, reason, time_ms
    `index` is 1-based within its game; `reason` is empty unless rejected.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in results:
            for i, step in enumerate(r.get("history", []), start=1):
                w.writerow({
                    "root": r["root"],
                    "index": i,
                    "raw": step["raw"],
                    "word": step["word"],
                    "outcome": step["outcome"],
                    "reason": step["reason"],
                    "time_ms": round(float(step["time_ms"]), 3),
                })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write the JSON manifest that sits next to a replay CSV.

    Roots and words are written as-is (no ASCII escaping), so accented
    transcripts stay readable. Typical keys:
      - run_id, git_commit
      - config: CLI args
      - start_words: output of datasets.validate_start_words(...), if checked
      - num_games, totals
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
    return str(p)


def timestamp_id() -> str:
    """UTC run id used in replay file names, e.g. replay_20250820T024121Z.csv."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Short git hash recorded in each replay manifest, so a CSV can be traced
    back to the rules that produced it. 'unknown' outside a git checkout.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
