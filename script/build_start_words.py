"""
Build a start-word list from wordfreq's most frequent words.

What it does:
- Pulls the top-N words for a language from wordfreq.
- Keeps lowercase alphabetic words of exactly --length letters.
- De-duplicates while preserving frequency order, optionally caps the count.
- Writes one word per line.

Usage:
    python -m script.build_start_words --out packages/datasets/data/start.txt
    # seven-letter roots, 300 of them, alphabetical:
    python -m script.build_start_words --length 7 --limit 300 --sort
"""

import argparse

from wordfreq import top_n_list

from packages.datasets import write_words

SCAN_TOP = 100_000  # how many wordfreq entries to inspect


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def candidate_roots(language: str, length: int, scan: int = SCAN_TOP) -> list[str]:
    words = top_n_list(language, scan)
    kept = [w for w in words if len(w) == length and w.isalpha() and w.islower()]
    return unique_preserve_order(kept)


def main():
    ap = argparse.ArgumentParser(description="Build a root-word list from wordfreq")
    ap.add_argument("--language", default="en")
    ap.add_argument("--length", type=int, default=8, help="letters per root word")
    ap.add_argument("--limit", type=int, help="keep only the N most frequent roots")
    ap.add_argument("--scan", type=int, default=SCAN_TOP, help="wordfreq entries to inspect")
    ap.add_argument("--out", default="packages/datasets/data/start.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "frequency order")
    args = ap.parse_args()

    roots = candidate_roots(args.language, args.length, args.scan)
    if args.limit:
        roots = roots[: args.limit]
    if args.sort:
        roots = sorted(roots)

    write_words(roots, args.out)
    print(f"Wrote {len(roots)} root words -> {args.out}")


if __name__ == "__main__":
    main()
