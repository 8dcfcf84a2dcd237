"""Tests for xlsx_writer.py."""

import os
import tempfile
from types import MappingProxyType

import openpyxl

from models import CellPosition, GeneratedPuzzle, WordEntry
from xlsx_writer import write_answer_key_xlsx


def _sample_puzzle():
    """3x3 grid: CRT along the diagonal, TOE up the last column."""
    grid = (("C", "A", "E"), ("Q", "R", "O"), ("X", "Y", "T"))
    placements = MappingProxyType({
        "CRT": (CellPosition(0, 0, 0), CellPosition(1, 1, 4), CellPosition(2, 2, 8)),
        "TOE": (CellPosition(2, 2, 8), CellPosition(1, 2, 5), CellPosition(0, 2, 2)),
    })
    words = [WordEntry("CRT", "CRT"), WordEntry("TOE", "TOE", "Toe")]
    return GeneratedPuzzle(grid=grid, size=3, placements=placements), words


def _write(puzzle, words):
    with tempfile.NamedTemporaryFile(suffix=".xlsx", delete=False) as f:
        path = f.name
    write_answer_key_xlsx(puzzle, words, path)
    return path


class TestWriteAnswerKeyXlsx:
    def test_creates_valid_xlsx(self):
        puzzle, words = _sample_puzzle()
        path = _write(puzzle, words)
        try:
            assert os.path.exists(path)
            wb = openpyxl.load_workbook(path)
            assert wb.sheetnames == ["Words", "Grid"]
        finally:
            os.unlink(path)

    def test_words_sheet(self):
        puzzle, words = _sample_puzzle()
        path = _write(puzzle, words)
        try:
            ws = openpyxl.load_workbook(path)["Words"]
            assert ws.cell(row=1, column=1).value == "Word"
            assert ws.cell(row=3, column=1).value == "Toe"
            assert ws.cell(row=3, column=2).value == "TOE"
            assert ws.cell(row=3, column=3).value == "R3C3"
            assert ws.cell(row=3, column=4).value == "R1C3"
            assert ws.cell(row=3, column=5).value == "N"
            assert ws.cell(row=2, column=2).value == "CRT"
            assert ws.cell(row=2, column=5).value == "SE"
        finally:
            os.unlink(path)

    def test_grid_sheet(self):
        puzzle, words = _sample_puzzle()
        path = _write(puzzle, words)
        try:
            ws = openpyxl.load_workbook(path)["Grid"]
            letters = ["".join(ws.cell(row=r, column=c).value for c in range(1, 4))
                       for r in range(1, 4)]
            assert letters == ["CAE", "QRO", "XYT"]
            assert ws.cell(row=1, column=1).fill.fill_type == "solid"
            assert ws.cell(row=3, column=1).fill.fill_type is None
        finally:
            os.unlink(path)
