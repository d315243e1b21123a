"""
Session harness.

- GameSession: one player's game. Owns the GameState, the RNG used to pick
  root words, and the dictionary; turns raw input into Submission records.
- run_script:  feed a sequence of submissions through a session.

These are intentionally UI-agnostic so they can be reused by the terminal
game, the replay CLI, tests, or a future service (one session per player;
sessions share nothing).
"""

from __future__ import annotations

import random
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Optional

from packages.engine import (
    GameState, ValidationResult, award, normalize, rejection_message, reset, start_game, submit,
)
from packages.engine.validation import DEFAULT_LANGUAGE


@dataclass(frozen=True)
class Submission:
    """Outcome of one non-empty submission, as shown to the player."""
    turn: int
    word: str
    result: ValidationResult
    points: int      # awarded for this word (0 when rejected)
    score: int       # running score after this submission
    title: str = ""
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.result.accepted

    def as_row(self) -> Dict:
        row = asdict(self)
        row["result"] = self.result.value
        return row


class GameSession:
    def __init__(
            self,
            word_list: Iterable[str],
            dictionary,
            *,
            language: str = DEFAULT_LANGUAGE,
            seed: Optional[int] = None,
    ):
        self.word_list: List[str] = list(word_list)
        self.dictionary = dictionary
        self.language = language
        self.rng = random.Random(seed)
        self.history: List[Submission] = []
        self.state: GameState = start_game(self.word_list, self.rng)

    @property
    def root_word(self) -> str:
        return self.state.root_word

    @property
    def used_words(self):
        return self.state.used_words

    @property
    def score(self) -> int:
        return self.state.score

    def start(self) -> GameState:
        """Pick a fresh root word and clear words, score and history."""
        self.state = start_game(self.word_list, self.rng)
        self.history = []
        return self.state

    def reset(self) -> GameState:
        self.state = reset(self.word_list, self.rng)
        self.history = []
        return self.state

    def use_root(self, root_word: str) -> GameState:
        """Start over with a specific root word instead of a random pick."""
        self.state = GameState(root_word=normalize(root_word))
        self.history = []
        return self.state

    def submit(self, text: str) -> Optional[Submission]:
        """
        Validate and apply one raw input.

        Returns:
          A Submission, or None when the input is blank (nothing happens).
        """
        root = self.state.root_word
        self.state, result = submit(self.state, text, self.dictionary, self.language)
        if result is None:
            return None

        word = normalize(text)
        if result.accepted:
            points, title, message = award(word), "", ""
        else:
            points = 0
            title, message = rejection_message(result, root)

        sub = Submission(
            turn=len(self.history) + 1,
            word=word,
            result=result,
            points=points,
            score=self.state.score,
            title=title,
            message=message,
        )
        self.history.append(sub)
        return sub

    def rows(self) -> List[Dict]:
        """Flattened history (one dict per attempt) for CSV export."""
        return [s.as_row() for s in self.history]


def run_script(session: GameSession, submissions: Iterable[str]) -> List[Submission]:
    """
    Submit each entry in order; blank entries are skipped like blank input.
    Returns only the recorded (non-empty) submissions.
    """
    out: List[Submission] = []
    for text in submissions:
        sub = session.submit(text)
        if sub is not None:
            out.append(sub)
    return out
