"""
Word-list dictionary.

A closed word set for a single language, loaded from memory or from a
newline-delimited file. Handy as a fake oracle in tests and for playing
against a curated list (e.g. a Scrabble word list).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Set

from .base import BaseDictionary, register


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Word List"

    def __init__(self, words: Optional[Iterable[str]] = None, language: str = "en"):
        self.language = language
        # Store lowercase, skip blanks
        self._words: Set[str] = {w.strip().lower() for w in (words or ()) if w.strip()}

    @classmethod
    def from_file(cls, path: Path | str, language: str = "en") -> "WordListDictionary":
        """
        Build from a UTF-8 text file with one word per line.
        Raises FileNotFoundError if the path doesn't exist.
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(p)
        return cls(p.read_text(encoding="utf-8").splitlines(), language=language)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self._words

    def is_valid_word(self, word: str, language: str) -> bool:
        if language != self.language or not word:
            return False
        return word in self
