"""
Frequency-based dictionary backed by the `wordfreq` library.

A word counts as "real" in a language when wordfreq has seen it often
enough: its Zipf frequency (log10 of occurrences per billion words) must be
at least `min_zipf`.

  zipf  ~7   : the most common words ("the", "and")
  zipf  3-5  : everyday vocabulary ("silk", "worm")
  zipf   0   : never seen (typos, made-up words)

The default threshold of 2.0 admits uncommon-but-real words while rejecting
noise; raise it for an easier, more everyday vocabulary.
"""

from __future__ import annotations

from wordfreq import available_languages, zipf_frequency

from .base import BaseDictionary, register

DEFAULT_MIN_ZIPF = 2.0


@register
class WordFreqDictionary(BaseDictionary):
    id = "wordfreq"
    name = "wordfreq (Zipf threshold)"

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.min_zipf = float(min_zipf)
        self._languages = set(available_languages())

    def zipf(self, word: str, language: str) -> float:
        """Raw Zipf frequency of `word` in `language` (0.0 if unseen)."""
        return zipf_frequency(word, language)

    def is_valid_word(self, word: str, language: str) -> bool:
        # Single alphabetic tokens only; wordfreq would otherwise
        # tokenize phrases and score them as a whole
        if not word or not word.isalpha():
            return False
        if language not in self._languages:
            return False
        return self.zipf(word, language) >= self.min_zipf
