"""Match a player's cell path against the hidden words."""

from __future__ import annotations

from typing import Mapping, Sequence

from models import CellPosition

MIN_SELECTION = 2


def validate_selection(
    selection: Sequence[int],
    placements: Mapping[str, Sequence[CellPosition]],
) -> str | None:
    """Return the id of the word whose cells equal *selection*, read either way."""
    if len(selection) < MIN_SELECTION:
        return None

    forward = list(selection)
    backward = forward[::-1]

    for word_id, positions in placements.items():
        if len(positions) != len(forward):
            continue
        indices = [p.index for p in positions]
        if indices == forward or indices == backward:
            return word_id
    return None


def selection_path(start_index: int, end_index: int, size: int) -> list[int]:
    """Snap a drag from *start_index* to *end_index* onto a straight line.

    Rows, columns and exact diagonals are kept as drawn; any other drag
    follows whichever axis moved further.
    """
    cells = size * size
    for index in (start_index, end_index):
        if not 0 <= index < cells:
            raise ValueError(f"Cell index {index} outside {size}x{size} grid")

    start_row, start_col = divmod(start_index, size)
    end_row, end_col = divmod(end_index, size)
    d_row = end_row - start_row
    d_col = end_col - start_col

    if d_row == 0 and d_col == 0:
        return [start_index]

    step_row = _sign(d_row)
    step_col = _sign(d_col)
    if abs(d_row) > abs(d_col):
        step_col = 0
    elif abs(d_col) > abs(d_row):
        step_row = 0
    length = max(abs(d_row), abs(d_col))

    return [
        (start_row + step_row * i) * size + (start_col + step_col * i)
        for i in range(length + 1)
    ]


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)
