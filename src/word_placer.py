"""Primitive grid operations: feasibility check and placement write."""

from __future__ import annotations

from models import EMPTY, CellPosition, Direction, PlacementError, WorkingGrid


def create_empty_grid(size: int) -> WorkingGrid:
    return [[EMPTY] * size for _ in range(size)]


def in_bounds(size: int, row: int, col: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def can_place_word(
    grid: WorkingGrid, word: str, start_row: int, start_col: int, direction: Direction,
) -> bool:
    """True if every letter lands in bounds on an empty or identical cell."""
    size = len(grid)
    for i, letter in enumerate(word):
        r = start_row + direction.row * i
        c = start_col + direction.col * i
        if not in_bounds(size, r, c):
            return False
        existing = grid[r][c]
        if existing != EMPTY and existing != letter:
            return False
    return True


def place_word(
    grid: WorkingGrid, word: str, start_row: int, start_col: int, direction: Direction,
) -> list[CellPosition]:
    """Write *word* into *grid* and return its cells from first to last letter.

    Raises PlacementError, leaving the grid untouched, if the placement
    would leave the grid or overwrite a different letter.
    """
    if not can_place_word(grid, word, start_row, start_col, direction):
        raise PlacementError(
            f"Cannot place '{word}' at ({start_row},{start_col}) "
            f"heading ({direction.row},{direction.col}) in {len(grid)}x{len(grid)} grid"
        )

    size = len(grid)
    positions: list[CellPosition] = []
    for i, letter in enumerate(word):
        r = start_row + direction.row * i
        c = start_col + direction.col * i
        grid[r][c] = letter
        positions.append(CellPosition(r, c, r * size + c))
    return positions
