from .validator import validate_start_words, pretty_summary
from .sources import (
    DEFAULT_START_WORDS, WordListError, clean_words, load_start_words, read_lines, write_words,
)

__all__ = [
    "validate_start_words", "pretty_summary",
    "DEFAULT_START_WORDS", "WordListError", "clean_words", "load_start_words",
    "read_lines", "write_words",
]
