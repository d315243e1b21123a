import pytest
from packages.dictionary.wordlist import WordListDictionary

# Small English word set for "silkworm" games; stands in for a real spell checker.
WORDS = [
    "silk", "silkworm", "worm", "worms", "milk", "mild", "owl", "ilk",
    "slow", "mols", "limo", "lorm", "silo", "swirl", "moil", "roil", "wilk",
    "cat", "taco", "tacos", "coast", "mix",
]


@pytest.fixture
def dictionary():
    return WordListDictionary(WORDS, language="en")
