"""
Letter arithmetic for derived words.

A candidate can be spelled from a root word iff every letter of the candidate
appears in the root at least as many times as it appears in the candidate
(the candidate's letters form a sub-multiset of the root's letters).

Comparing letter-frequency tables gives the same answer as consuming one
occurrence per candidate letter from a copy of the root, left to right.
"""

from collections import Counter


def letter_counts(word: str) -> Counter:
    """
    Frequency table of the letters in `word` (case-normalized).

    Example:
      letter_counts("silk") -> Counter({'s': 1, 'i': 1, 'l': 1, 'k': 1})
    """
    return Counter(word.strip().lower())


def is_subset_of_letters(candidate: str, root: str) -> bool:
    """
    Return True if `candidate` can be spelled using the letters of `root`.

    Examples:
      is_subset_of_letters("cat", "tacos")  -> True
      is_subset_of_letters("coo", "cost")   -> False   (only one 'o')
    """
    available = letter_counts(root)
    for letter, needed in letter_counts(candidate).items():
        if available[letter] < needed:
            return False
    return True
