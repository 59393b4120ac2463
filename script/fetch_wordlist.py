"""
Download a plain-text word list to use as a static dictionary.

What it does:
- Fetches a newline-separated word list over HTTP.
- Normalizes every entry (lowercase, no whitespace), drops blanks and
  anything that isn't letters only.
- De-duplicates while preserving order (optionally sorts) and writes the file.

Usage:
    python -m script.fetch_wordlist --out data/words_en.txt
    python -m script.fetch_wordlist --url https://example.org/words.txt --sort --out words.txt
"""

import argparse

import requests

from wordscramble.datasets import unique_preserve_order, write_lines
from wordscramble.engine import normalize

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    r.encoding = r.encoding or "utf-8"
    words = [normalize(ln) for ln in r.text.splitlines()]
    return unique_preserve_order(w for w in words if w and w.isalpha())


def main():
    ap = argparse.ArgumentParser(description="Download and clean a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/words_en.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
