"""
Game state and its transitions.

A game is three pieces of data: the root word, the accepted words
(most recent first) and the running score. GameState is immutable; every
transition returns a new value, so the same functions can back a terminal
loop, a test, or any other front-end.

  state = start_game(words, rng=random.Random(7))
  state, result = submit(state, "silk", dictionary)
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple

from .scoring import award
from .validation import DEFAULT_LANGUAGE, ValidationResult, normalize, validate

# Used when the start-word list has no usable entries.
DEFAULT_ROOT_WORD = "silkworm"


@dataclass(frozen=True)
class GameState:
    root_word: str
    used_words: Tuple[str, ...] = ()
    score: int = 0


def _pick_root(word_list: Iterable[str], rng: random.Random) -> str:
    pool: List[str] = [w.strip().lower() for w in word_list if w.strip()]
    if not pool:
        return DEFAULT_ROOT_WORD
    return rng.choice(pool)


def start_game(word_list: Iterable[str], rng: Optional[random.Random] = None) -> GameState:
    """
    Begin a game with a root word drawn uniformly from `word_list`.

    Blank entries are ignored; if nothing remains the root falls back to
    DEFAULT_ROOT_WORD. Pass a seeded `rng` for reproducible picks.
    """
    rng = rng if rng is not None else random.Random()
    return GameState(root_word=_pick_root(word_list, rng))


def reset(word_list: Iterable[str], rng: Optional[random.Random] = None) -> GameState:
    """Discard the current game and start a new one (same as start_game)."""
    return start_game(word_list, rng)


def accept(state: GameState, word: str) -> GameState:
    """Record an accepted word: prepend it and add its award to the score."""
    return replace(
        state,
        used_words=(word,) + state.used_words,
        score=state.score + award(word),
    )


def submit(
        state: GameState,
        candidate: str,
        dictionary,
        language: str = DEFAULT_LANGUAGE,
) -> Tuple[GameState, Optional[ValidationResult]]:
    """
    Validate `candidate` and apply it if accepted.

    Returns:
      (new_state, result). For rejections and empty input the original
      `state` object is returned untouched; result is None for empty input.
    """
    result = validate(candidate, state, dictionary, language)
    if result is ValidationResult.ACCEPTED:
        return accept(state, normalize(candidate)), result
    return state, result
