from .letters import letter_counts, is_subset_of_letters
from .scoring import award, total_score
from .validation import ValidationResult, validate, rejection_message, normalize
from .state import GameState, DEFAULT_ROOT_WORD, start_game, reset, submit, accept

__all__ = [
    "letter_counts", "is_subset_of_letters",
    "award", "total_score",
    "ValidationResult", "validate", "rejection_message", "normalize",
    "GameState", "DEFAULT_ROOT_WORD", "start_game", "reset", "submit", "accept",
]
