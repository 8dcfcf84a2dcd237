"""Write a word search answer key to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Font, PatternFill

from models import DIRECTION_NAMES, Direction, GeneratedPuzzle, WordEntry


def write_answer_key_xlsx(
    puzzle: GeneratedPuzzle,
    words: list[WordEntry],
    output_path: str,
) -> None:
    """Write placements and the letter grid to an Excel workbook.

    Sheet "Words": one row per word with 1-based start/end cells.
    Sheet "Grid": the letters, with hidden-word cells shaded.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Words"

    header_font = Font(bold=True, size=12)
    for col, label in enumerate(("Word", "Letters", "Start", "End", "Direction"), start=1):
        ws.cell(row=1, column=col, value=label).font = header_font

    for row, word in enumerate(words, start=2):
        positions = puzzle.placements[word.id]
        first, last = positions[0], positions[-1]
        ws.cell(row=row, column=1, value=word.display)
        ws.cell(row=row, column=2, value="".join(
            puzzle.letter_at(p.row, p.col) for p in positions
        ))
        ws.cell(row=row, column=3, value=f"R{first.row + 1}C{first.col + 1}")
        ws.cell(row=row, column=4, value=f"R{last.row + 1}C{last.col + 1}")
        ws.cell(row=row, column=5, value=_direction_name(positions))

    ws.column_dimensions["A"].width = 24
    ws.column_dimensions["B"].width = 18

    ws2 = wb.create_sheet(title="Grid")
    shaded = PatternFill(fill_type="solid", start_color="FFD966", end_color="FFD966")
    hidden = puzzle.hidden_indices()
    for r, letters in enumerate(puzzle.grid):
        for c, letter in enumerate(letters):
            cell = ws2.cell(row=r + 1, column=c + 1, value=letter)
            if r * puzzle.size + c in hidden:
                cell.fill = shaded

    wb.save(output_path)


def _direction_name(positions) -> str:
    first, second = positions[0], positions[1]
    return DIRECTION_NAMES[Direction(second.row - first.row, second.col - first.col)]
