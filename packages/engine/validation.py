"""
Word validation pipeline.

This module answers the question: "Should this submission be accepted?"
A candidate is normalized (stripped, lowercased) and then run through four
checks in a fixed order, stopping at the first failure:

  1) originality  - not already among the accepted words     -> DUPLICATE
  2) feasibility  - spellable from the root word's letters    -> NOT_SUBSET
  3) realness     - recognized by the dictionary oracle       -> NOT_REAL
  4) complexity   - longer than 3 letters and not the root    -> TOO_TRIVIAL

The order matters because each failure carries its own message for the player.
An empty candidate is not a rejection: `validate` returns None and the
submission is simply ignored.

The dictionary is any object with `is_valid_word(word, language) -> bool`
(see packages.dictionary); nothing here knows how spelling is decided.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from .letters import is_subset_of_letters

if TYPE_CHECKING:
    from .state import GameState

# Words must be strictly longer than this to count.
MIN_WORD_LENGTH = 3

DEFAULT_LANGUAGE = "en"


class ValidationResult(Enum):
    ACCEPTED = "accepted"
    DUPLICATE = "duplicate"
    NOT_SUBSET = "not_subset"
    NOT_REAL = "not_real"
    TOO_TRIVIAL = "too_trivial"

    @property
    def accepted(self) -> bool:
        return self is ValidationResult.ACCEPTED


# (title, message) shown to the player for each rejection.
# '{root}' is filled in with the current root word.
_REJECTIONS = {
    ValidationResult.DUPLICATE: (
        "Word used already!",
        "Be more original.",
    ),
    ValidationResult.NOT_SUBSET: (
        "Word not possible!",
        "You can't spell that word from '{root}'!",
    ),
    ValidationResult.NOT_REAL: (
        "Word not recognized!",
        "You can't just make them up, you know!",
    ),
    ValidationResult.TOO_TRIVIAL: (
        "Word too easy!",
        "Words should be longer than 3 characters and not the starting word.",
    ),
}


def normalize(candidate: str) -> str:
    """Lowercase and strip surrounding whitespace/newlines."""
    return candidate.lower().strip()


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    return is_subset_of_letters(word, root_word)


def is_real(word: str, dictionary, language: str = DEFAULT_LANGUAGE) -> bool:
    return bool(dictionary.is_valid_word(word, language))


def is_not_too_easy(word: str, root_word: str) -> bool:
    return len(word) > MIN_WORD_LENGTH and word != root_word


def validate(
        candidate: str,
        state: "GameState",
        dictionary,
        language: str = DEFAULT_LANGUAGE,
) -> Optional[ValidationResult]:
    """
    Run the pipeline for one submission against the current game state.

    Args:
      candidate  : raw player input (normalized here)
      state      : current GameState (read only; never modified)
      dictionary : spell-check capability with is_valid_word(word, language)
      language   : language code handed to the dictionary

    Returns:
      A ValidationResult, or None if the normalized candidate is empty.
    """
    word = normalize(candidate)
    if not word:
        return None

    if not is_original(word, state.used_words):
        return ValidationResult.DUPLICATE
    if not is_possible(word, state.root_word):
        return ValidationResult.NOT_SUBSET
    if not is_real(word, dictionary, language):
        return ValidationResult.NOT_REAL
    if not is_not_too_easy(word, state.root_word):
        return ValidationResult.TOO_TRIVIAL

    return ValidationResult.ACCEPTED


def rejection_message(result: ValidationResult, root_word: str) -> Tuple[str, str]:
    """
    Return the (title, message) pair explaining a rejection.

    Raises:
      ValueError if `result` is ACCEPTED (there is nothing to explain).
    """
    try:
        title, message = _REJECTIONS[result]
    except KeyError as e:
        raise ValueError(f"No rejection message for result: {result}") from e
    return title, message.format(root=root_word)
