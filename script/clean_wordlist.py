"""
Clean a start-word (or dictionary) file in place.

Features:
- Lowercases and strips every line, drops blank lines.
- Drops words shorter than --min-length or containing non a–z characters.
- Removes duplicates, preserving original order.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.clean_wordlist --in packages/datasets/data/start.txt --min-length 6
"""

import argparse
from pathlib import Path

from packages.datasets import clean_words, read_lines, write_words


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def clean(lines: list[str], min_length: int = 1, sort: bool = False) -> list[str]:
    words = [w for w in clean_words(lines) if w.isalpha() and len(w) >= min_length]
    out = unique_preserve_order(words)
    return sorted(out) if sort else out


def main():
    ap = argparse.ArgumentParser(description="Normalize and dedupe a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--min-length", type=int, default=1, help="drop words shorter than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean(lines, min_length=args.min_length, sort=args.sort)

    write_words(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
