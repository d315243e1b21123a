"""
Point awards for accepted words.

Every accepted word earns a fixed bonus of 1 plus one point per letter:

  award("silk")     -> 5
  award("silkworm") -> 9   (never accepted in practice: equals the root)

There is no letter weighting and no combo bonus; a session's score is the
plain sum of its awards.
"""

from typing import Iterable

# Flat bonus granted for every accepted word, on top of its length.
WORD_BONUS = 1


def award(word: str) -> int:
    """Points for a single accepted word."""
    return WORD_BONUS + len(word)


def total_score(words: Iterable[str]) -> int:
    """Sum of awards across `words` (e.g. a session's accepted words)."""
    return sum(award(w) for w in words)
