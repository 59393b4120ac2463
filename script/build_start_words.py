"""
Build a start-word list from the wordfreq corpus.

What it does:
- Takes the N most frequent words of a language (wordfreq.top_n_list).
- Keeps letters-only words whose length falls in [--min-len, --max-len].
- Normalizes, de-duplicates while preserving frequency order, and writes
  one word per line.

Usage:
    python -m script.build_start_words --out wordscramble/datasets/data/start.txt
    python -m script.build_start_words --min-len 8 --max-len 8 --limit 200 --sort
"""

import argparse

from wordfreq import top_n_list

from wordscramble.datasets import unique_preserve_order, write_lines
from wordscramble.engine import graphemes, normalize


def candidate_words(language: str, top_n: int, min_len: int, max_len: int) -> list[str]:
    words = [normalize(w) for w in top_n_list(language, top_n)]
    words = [w for w in words if w.isalpha() and min_len <= len(graphemes(w)) <= max_len]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Build a start-word list from wordfreq")
    ap.add_argument("--language", default="en")
    ap.add_argument("--top-n", type=int, default=50000, help="how many frequent words to scan")
    ap.add_argument("--min-len", type=int, default=8)
    ap.add_argument("--max-len", type=int, default=8)
    ap.add_argument("--limit", type=int, help="keep only the first K words (most frequent)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of by frequency")
    ap.add_argument("--out", default="wordscramble/datasets/data/start.txt")
    args = ap.parse_args()

    words = candidate_words(args.language, args.top_n, args.min_len, args.max_len)
    if args.limit:
        words = words[: args.limit]
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} start words -> {args.out}")


if __name__ == "__main__":
    main()
