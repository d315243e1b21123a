from __future__ import annotations
from typing import List
from .base import BaseDictionary, REGISTRY, register

from . import wordlist  # noqa: F401
from . import frequency  # noqa: F401

DEFAULT_DICTIONARY = "wordfreq"


def create_dictionary(dictionary_id: str = DEFAULT_DICTIONARY, **kwargs) -> BaseDictionary:
    """
    Factory: instantiate a registered dictionary by id.
    Keyword arguments are passed to the dictionary's constructor.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_dictionary_ids() -> List[str]:
    """
    Return all registered dictionary ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


def build_dictionary(
        dictionary_id: str = DEFAULT_DICTIONARY,
        *,
        words: str | None = None,
        language: str = "en",
        min_zipf: float | None = None,
) -> BaseDictionary:
    """
    Convenience wrapper used by the CLIs.

    - "wordlist" requires `words` (path to a newline-delimited file).
    - "wordfreq" accepts an optional `min_zipf` threshold.
    """
    if dictionary_id == wordlist.WordListDictionary.id:
        if not words:
            raise ValueError("the 'wordlist' dictionary needs a words file")
        return wordlist.WordListDictionary.from_file(words, language=language)
    if dictionary_id == frequency.WordFreqDictionary.id and min_zipf is not None:
        return create_dictionary(dictionary_id, min_zipf=min_zipf)
    return create_dictionary(dictionary_id)
