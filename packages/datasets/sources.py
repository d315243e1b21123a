"""
Start-word sources.

The game needs a newline-delimited list of candidate root words before it
can begin. The list may live in a local file (the bundled data/start.txt by
default) or behind an http(s) URL.

Any failure to produce at least one usable word raises WordListError; there
is no game without a root word, so front-ends treat it as fatal at startup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import requests

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_START_WORDS = DATA_DIR / "start.txt"

FETCH_TIMEOUT = 30  # seconds


class WordListError(RuntimeError):
    """The start-word list could not be loaded or has no usable words."""


def clean_words(lines: Iterable[str]) -> List[str]:
    """
    Normalize raw lines: strip whitespace, lowercase, drop blanks.
    Order is preserved; duplicates are kept (see script/clean_wordlist.py).
    """
    return [ln.strip().lower() for ln in lines if ln.strip()]


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_lines(url: str, timeout: float = FETCH_TIMEOUT) -> List[str]:
    """
    Download a plain-text word list and split it into lines.
    Raises WordListError on connection problems or non-2xx responses.
    """
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise WordListError(f"Could not fetch word list from {url}: {e}") from e
    return r.text.splitlines()


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises WordListError if the path doesn't exist or can't be decoded.
    """
    p = Path(p)
    if not p.is_file():
        raise WordListError(f"Word list file not found: {p}")
    try:
        return p.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Could not read word list {p}: {e}") from e


def load_start_words(source: Path | str = DEFAULT_START_WORDS) -> List[str]:
    """
    Load candidate root words from a file path or an http(s) URL.

    Returns:
      Lowercased, non-blank words in file order.

    Raises:
      WordListError if the source is unreachable or yields no words.
    """
    src = str(source)
    lines = fetch_lines(src) if _is_url(src) else read_lines(src)
    words = clean_words(lines)
    if not words:
        raise WordListError(f"Word list {src} contains no words")
    return words


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write words one per line (UTF-8), ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)
