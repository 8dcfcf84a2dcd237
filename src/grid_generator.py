"""Word search generation: randomized placement over a range of grid sizes.

Words are placed longest first. Each attempt fills a fresh grid; if any word
runs out of placement draws the whole attempt is thrown away and the next one
starts from scratch. The first attempt that places every word is filled with
random letters and returned.
"""

from __future__ import annotations

import logging
import random
from types import MappingProxyType

from models import (
    ALPHABET,
    DIRECTIONS,
    EMPTY,
    CellPosition,
    GeneratedPuzzle,
    GenerationFailure,
    GeneratorOptions,
    InvalidOptionsError,
    InvalidWordError,
    WordEntry,
    WorkingGrid,
    canonical_value,
)
from word_placer import can_place_word, create_empty_grid, place_word

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 2
SIZE_HEADROOM = 6


def generate(
    words: list[WordEntry],
    options: GeneratorOptions | None = None,
    rng: random.Random | None = None,
) -> GeneratedPuzzle:
    """Hide every word in a square grid and fill the rest with random letters.

    Raises InvalidWordError for unusable input, InvalidOptionsError for
    attempt counts below 1, and GenerationFailure when every size/attempt
    combination is exhausted.
    """
    options = options or GeneratorOptions()
    if options.attempts < 1 or options.placement_attempts < 1:
        raise InvalidOptionsError("attempts and placement_attempts must be at least 1")
    rng = rng or random.Random()

    prepared = sorted(prepare_words(words), key=lambda w: len(w.value), reverse=True)
    min_size, max_size = resolve_size_range(prepared, options)

    for size in range(min_size, max_size + 1):
        for attempt in range(1, options.attempts + 1):
            result = _single_attempt(prepared, size, options.placement_attempts, rng)
            if result is None:
                continue
            working, placements = result
            logger.debug("Placed %d words in %dx%d grid on attempt %d",
                         len(prepared), size, size, attempt)
            _fill_empty_cells(working, rng)
            return GeneratedPuzzle(
                grid=tuple(tuple(row) for row in working),
                size=size,
                placements=MappingProxyType(placements),
            )
        logger.debug("Size %d exhausted after %d attempts", size, options.attempts)

    raise GenerationFailure(
        f"Unable to place {len(prepared)} words in grids of size "
        f"{min_size}..{max_size}. Try increasing the grid size."
    )


def prepare_words(words: list[WordEntry]) -> list[WordEntry]:
    """Canonicalize word values and reject lists that cannot be hidden."""
    if not words:
        raise InvalidWordError("Word list is empty")

    prepared: list[WordEntry] = []
    seen_ids: set[str] = set()
    seen_values: set[str] = set()

    for word in words:
        value = canonical_value(word.value)
        if len(value) < MIN_WORD_LENGTH:
            raise InvalidWordError(
                f"Word '{word.display}' has fewer than {MIN_WORD_LENGTH} letters"
            )
        bad = sorted({c for c in value if c not in ALPHABET})
        if bad:
            raise InvalidWordError(
                f"Word '{word.display}' contains letters outside A-Z: {''.join(bad)}"
            )
        if word.id in seen_ids:
            raise InvalidWordError(f"Duplicate word id '{word.id}'")
        if value in seen_values:
            raise InvalidWordError(f"Duplicate word '{value}'")
        seen_ids.add(word.id)
        seen_values.add(value)
        prepared.append(WordEntry(id=word.id, value=value, display=word.display))

    return prepared


def resolve_size_range(
    prepared: list[WordEntry], options: GeneratorOptions,
) -> tuple[int, int]:
    """Smallest size fits the longest word; largest defaults to a few rows more."""
    longest = max(len(w.value) for w in prepared)
    min_size = max(options.min_size or longest, longest)
    max_size = options.max_size if options.max_size is not None else min_size + SIZE_HEADROOM
    return min_size, max_size


def start_bounds(size: int, length: int, step: int) -> tuple[int, int]:
    """Inclusive range of start coordinates that keeps the word on the grid."""
    if step > 0:
        return 0, size - length
    if step < 0:
        return length - 1, size - 1
    return 0, size - 1


def _single_attempt(
    prepared: list[WordEntry],
    size: int,
    placement_attempts: int,
    rng: random.Random,
) -> tuple[WorkingGrid, dict[str, tuple[CellPosition, ...]]] | None:
    """Place every word into a fresh grid, or None as soon as one does not fit."""
    working = create_empty_grid(size)
    placements: dict[str, tuple[CellPosition, ...]] = {}

    for word in prepared:
        positions = _try_place(working, word.value, size, placement_attempts, rng)
        if positions is None:
            return None
        placements[word.id] = tuple(positions)

    return working, placements


def _try_place(
    working: WorkingGrid,
    value: str,
    size: int,
    placement_attempts: int,
    rng: random.Random,
) -> list[CellPosition] | None:
    length = len(value)
    for _ in range(placement_attempts):
        direction = rng.choice(DIRECTIONS)
        row_lo, row_hi = start_bounds(size, length, direction.row)
        col_lo, col_hi = start_bounds(size, length, direction.col)
        start_row = rng.randint(row_lo, row_hi)
        start_col = rng.randint(col_lo, col_hi)
        if can_place_word(working, value, start_row, start_col, direction):
            return place_word(working, value, start_row, start_col, direction)
    return None


def _fill_empty_cells(working: WorkingGrid, rng: random.Random) -> None:
    for row in working:
        for c, letter in enumerate(row):
            if letter == EMPTY:
                row[c] = rng.choice(ALPHABET)
