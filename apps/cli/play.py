# apps/cli/play.py
"""
Interactive terminal game.

This script:
  1) Loads the start-word list (fatal if it can't be loaded).
  2) Builds the requested dictionary oracle.
  3) Runs the game loop: shows the root word, reads words, prints
     rejections as "title: message", and keeps the list of accepted words
     (with their lengths) and the score on screen.

Commands at the prompt:
  :reset   start over with a new root word
  :quit    leave (Ctrl-D works too)

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --seed 7 --dictionary wordlist --words my_words.txt
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional

from packages.datasets import DEFAULT_START_WORDS, WordListError, load_start_words
from packages.dictionary import DEFAULT_DICTIONARY, build_dictionary, get_dictionary_ids
from packages.harness import GameSession

PROMPT = "> "
RESET_COMMAND = ":reset"
QUIT_COMMAND = ":quit"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Word Scramble: make words from the root word")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="file path or http(s) URL of the root-word list")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY, choices=get_dictionary_ids(),
                    help="spell-check oracle used to decide if a word is real")
    ap.add_argument("--words", help="word file for the 'wordlist' dictionary")
    ap.add_argument("--min-zipf", type=float,
                    help="frequency threshold for the 'wordfreq' dictionary")
    ap.add_argument("--language", default="en", help="dictionary language code")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word picks")
    ap.add_argument("--root", help="play with this root word instead of a random one")
    return ap


def make_session(args: argparse.Namespace) -> GameSession:
    """
    Load words and dictionary from parsed args.
    Exits with status 1 if either can't be loaded: no game can begin.
    """
    try:
        start_words = load_start_words(args.start_words)
        dictionary = build_dictionary(
            args.dictionary, words=args.words, language=args.language, min_zipf=args.min_zipf,
        )
    except (WordListError, FileNotFoundError, ValueError) as e:
        sys.stderr.write(f"error: {e}\n")
        raise SystemExit(1)

    session = GameSession(start_words, dictionary, language=args.language, seed=args.seed)
    if args.root:
        session.use_root(args.root)
    return session


def render(session: GameSession) -> str:
    """Root word, accepted words (with lengths, most recent first) and score."""
    lines = [f"== {session.root_word} =="]
    for word in session.used_words:
        lines.append(f"  ({len(word)}) {word}")
    lines.append(f"Score: {session.score}")
    return "\n".join(lines)


def play(session: GameSession, read: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> int:
    """
    Run the loop until :quit or end of input. Returns the final score.
    `read`/`write` are swappable for tests.
    """
    write(render(session))
    while True:
        try:
            text = read(PROMPT)
        except EOFError:
            break

        command = text.strip().lower()
        if command == QUIT_COMMAND:
            break
        if command == RESET_COMMAND:
            session.reset()
            write(render(session))
            continue

        sub = session.submit(text)
        if sub is None:
            continue
        if sub.accepted:
            write(f"+{sub.points}")
            write(render(session))
        else:
            write(f"{sub.title} {sub.message}")

    write(f"Final score: {session.score}")
    return session.score


def main(argv: Optional[list] = None) -> None:
    args = build_parser().parse_args(argv)
    session = make_session(args)
    play(session)


if __name__ == "__main__":
    main()
