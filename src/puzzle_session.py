"""One play-through of a generated puzzle: found words, completion, hints."""

from __future__ import annotations

import random
from enum import Enum

from grid_generator import generate
from models import GeneratedPuzzle, GeneratorOptions, InvalidWordError, WordEntry
from selection_validator import MIN_SELECTION, validate_selection


class SessionState(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class SelectionResult(Enum):
    MATCH = "MATCH"
    ALREADY_FOUND = "ALREADY_FOUND"
    NO_MATCH = "NO_MATCH"
    IGNORED = "IGNORED"


class PuzzleSession:
    """Tracks which words of one GeneratedPuzzle the player has found.

    Found ids and cells are frozensets, rebound on every match. A session
    never goes back to IN_PROGRESS; restarting means calling ``start`` again.
    """

    def __init__(self, puzzle: GeneratedPuzzle, words: list[WordEntry]) -> None:
        if {w.id for w in words} != set(puzzle.placements):
            raise InvalidWordError("Session words do not match the puzzle placements")
        self.puzzle = puzzle
        self.words = list(words)
        self.found_ids: frozenset[str] = frozenset()
        self.found_indices: frozenset[int] = frozenset()

    @classmethod
    def start(
        cls,
        words: list[WordEntry],
        options: GeneratorOptions | None = None,
        rng: random.Random | None = None,
    ) -> PuzzleSession:
        """Generate a new puzzle and open a fresh session on it."""
        return cls(generate(words, options, rng), words)

    @property
    def state(self) -> SessionState:
        if len(self.found_ids) == len(self.puzzle.placements):
            return SessionState.COMPLETED
        return SessionState.IN_PROGRESS

    @property
    def is_completed(self) -> bool:
        return self.state is SessionState.COMPLETED

    def submit(self, selection: list[int]) -> SelectionResult:
        if self.is_completed or len(selection) < MIN_SELECTION:
            return SelectionResult.IGNORED

        word_id = validate_selection(selection, self.puzzle.placements)
        if word_id is None:
            return SelectionResult.NO_MATCH
        if word_id in self.found_ids:
            return SelectionResult.ALREADY_FOUND

        cells = {p.index for p in self.puzzle.placements[word_id]}
        self.found_ids = self.found_ids | {word_id}
        self.found_indices = self.found_indices | cells
        return SelectionResult.MATCH

    def remaining_words(self) -> list[WordEntry]:
        return [w for w in self.words if w.id not in self.found_ids]

    def progress_label(self) -> str:
        return f"{len(self.found_ids)} / {len(self.words)} words found"

    def hint_index(self, rng: random.Random | None = None) -> int | None:
        """First cell of a randomly chosen unfound word, None once all are found."""
        remaining = self.remaining_words()
        if not remaining:
            return None
        word = (rng or random.Random()).choice(remaining)
        return self.puzzle.placements[word.id][0].index
