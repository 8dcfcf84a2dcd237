"""Data models for the word search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple

EMPTY = ""
ALPHABET = string.ascii_uppercase


class Direction(NamedTuple):
    """Unit step between consecutive letters of a placed word."""

    row: int
    col: int


DIRECTIONS: tuple[Direction, ...] = (
    Direction(0, 1),
    Direction(0, -1),
    Direction(1, 0),
    Direction(-1, 0),
    Direction(1, 1),
    Direction(-1, -1),
    Direction(1, -1),
    Direction(-1, 1),
)

DIRECTION_NAMES: dict[Direction, str] = {
    Direction(0, 1): "E",
    Direction(0, -1): "W",
    Direction(1, 0): "S",
    Direction(-1, 0): "N",
    Direction(1, 1): "SE",
    Direction(-1, -1): "NW",
    Direction(1, -1): "SW",
    Direction(-1, 1): "NE",
}

WorkingGrid = list[list[str]]


def canonical_value(raw: str) -> str:
    """Uppercase, strip everything that is not a letter."""
    return "".join(c for c in raw.upper() if c.isalpha())


@dataclass(frozen=True)
class CellPosition:
    """A grid cell; ``index`` is the flattened ``row * size + col``."""

    row: int
    col: int
    index: int


@dataclass(frozen=True)
class WordEntry:
    """A word to hide. ``value`` is matched, ``display`` is shown to players."""

    id: str
    value: str
    display: str = ""

    def __post_init__(self) -> None:
        if not self.display:
            object.__setattr__(self, "display", self.value)


@dataclass
class GeneratorOptions:
    """Search tuning. Unset sizes are derived from the longest word."""

    min_size: int | None = None
    max_size: int | None = None
    attempts: int = 200
    placement_attempts: int = 140


@dataclass(frozen=True)
class GeneratedPuzzle:
    """A fully filled grid plus where every word was hidden."""

    grid: tuple[tuple[str, ...], ...]
    size: int
    placements: Mapping[str, tuple[CellPosition, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __hash__(self) -> int:
        # placements is a read-only mapping; equal puzzles share grid and size
        return hash((self.grid, self.size))

    @property
    def word_ids(self) -> list[str]:
        return list(self.placements)

    def letter_at(self, row: int, col: int) -> str:
        return self.grid[row][col]

    def letter_at_index(self, index: int) -> str:
        row, col = divmod(index, self.size)
        return self.grid[row][col]

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.grid]

    def hidden_indices(self) -> set[int]:
        """Flattened indices covered by at least one hidden word."""
        return {p.index for positions in self.placements.values() for p in positions}


class WordSearchError(Exception):
    """Base class for word search errors."""


class GenerationFailure(WordSearchError):
    """No (size, attempt) combination managed to place every word."""


class InvalidWordError(WordSearchError):
    """A word list that cannot be hidden in a grid."""


class PlacementError(WordSearchError):
    """A placement was written without fitting the grid."""


class InvalidOptionsError(WordSearchError, ValueError):
    """Generator tuning that leaves nothing to search."""
