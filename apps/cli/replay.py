# apps/cli/replay.py
"""
Replay a scripted list of submissions against one root word.

This script:
  1) Loads the start words and dictionary exactly like the interactive game.
  2) Fixes the root word (--root) or picks one with --seed.
  3) Submits every line of the submissions file in order.
  4) Prints a summary and writes:
       - CSV:  one row per attempt (word, result, points, running score, message)
       - JSON: manifest with config, root word, totals, git commit

Usage:
    python -m apps.cli.replay --submissions words.txt --root silkworm \
        --dictionary wordlist --words my_words.txt
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from packages.datasets import WordListError, read_lines
from packages.harness import run_script, write_csv, write_manifest
from packages.harness.io import git_commit_or_unknown, timestamp_id

from apps.cli.play import build_parser, make_session


def main(argv: Optional[list] = None) -> None:
    ap = build_parser()
    ap.description = "Word Scramble: replay scripted submissions"
    ap.add_argument("--submissions", required=True, help="file with one submission per line")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    args = ap.parse_args(argv)

    session = make_session(args)
    try:
        submissions = read_lines(args.submissions)
    except WordListError as e:
        ap.exit(1, f"error: {e}\n")

    results = run_script(session, submissions)
    accepted = [s for s in results if s.accepted]

    for s in results:
        mark = "+" if s.accepted else "x"
        print(f"{mark} {s.word:<12} {s.result.value:<12} {s.score:>4}")
    print(f"root={session.root_word} | attempts={len(results)} | accepted={len(accepted)} "
          f"| score={session.score}")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(session.rows(), str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "root_word": session.root_word,
        "score": session.score,
        "accepted": list(session.used_words),
        "attempts": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
