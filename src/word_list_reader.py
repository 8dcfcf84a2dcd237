"""Read a word list from an XLSX workbook."""

from __future__ import annotations

import sys
from pathlib import Path

import openpyxl

from models import ALPHABET, InvalidWordError, WordEntry, WordSearchError, canonical_value

HEADER_LABEL = "word"


def read_words(path: str | Path, max_length: int | None = None) -> list[WordEntry]:
    """Open *path*, skip an optional header, return the usable word entries.

    Column A holds the word as shown to players, column B an optional id.
    """
    path = Path(path)
    if not path.exists():
        raise WordSearchError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    ws = wb.active

    entries: list[WordEntry] = []
    for row in ws.iter_rows(min_row=_first_data_row(ws), values_only=True):
        if not row or row[0] is None:
            continue
        display = str(row[0]).strip()
        value = canonical_value(display)
        if not value:
            continue
        word_id = str(row[1]).strip() if len(row) > 1 and row[1] is not None else value
        entries.append(WordEntry(id=word_id, value=value, display=display))

    wb.close()
    return _validate_and_filter(entries, max_length)


def _first_data_row(sheet) -> int:
    """Row 2 if A1 is a ``Word`` header, else row 1."""
    for row in sheet.iter_rows(min_row=1, max_row=1, max_col=1, values_only=True):
        if row and isinstance(row[0], str) and row[0].strip().lower() == HEADER_LABEL:
            return 2
    return 1


def _validate_and_filter(
    entries: list[WordEntry], max_length: int | None
) -> list[WordEntry]:
    """Drop short, long, non A-Z and duplicate words; error if none remain."""
    seen_values: set[str] = set()
    seen_ids: set[str] = set()
    result: list[WordEntry] = []

    for entry in entries:
        if len(entry.value) < 2:
            print(
                f"Warning: skipping '{entry.display}' (too short, <2 letters)",
                file=sys.stderr,
            )
            continue
        if max_length is not None and len(entry.value) > max_length:
            print(
                f"Warning: skipping '{entry.display}' (longer than {max_length} letters)",
                file=sys.stderr,
            )
            continue
        if any(c not in ALPHABET for c in entry.value):
            print(
                f"Warning: skipping '{entry.display}' (letters outside A-Z)",
                file=sys.stderr,
            )
            continue
        if entry.value in seen_values or entry.id in seen_ids:
            print(
                f"Warning: duplicate word '{entry.display}', skipping",
                file=sys.stderr,
            )
            continue
        seen_values.add(entry.value)
        seen_ids.add(entry.id)
        result.append(entry)

    if not result:
        raise InvalidWordError("No valid words after filtering")

    return result
