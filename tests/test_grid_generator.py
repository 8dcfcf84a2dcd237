"""Tests for grid_generator.py."""

import random

import pytest

from grid_generator import generate, prepare_words, resolve_size_range, start_bounds
from models import (
    ALPHABET,
    DIRECTIONS,
    Direction,
    GenerationFailure,
    GeneratorOptions,
    InvalidOptionsError,
    InvalidWordError,
    WordEntry,
    WordSearchError,
)
from word_bank import get_word_list


def _make_words(values: list[str]) -> list[WordEntry]:
    """Helper to create WordEntry list from word strings."""
    return [WordEntry(id=v.upper(), value=v) for v in values]


_ANIMALS = _make_words([
    "ELEPHANT", "GIRAFFE", "DOLPHIN", "PANTHER", "SPARROW",
    "MONKEY", "RABBIT", "TURTLE", "BEAVER", "OTTER",
    "TIGER", "ZEBRA", "HORSE", "CAMEL", "EAGLE",
])


class TestGenerate:
    def test_determinism(self):
        """Same seed produces the same puzzle."""
        a = generate(_ANIMALS, rng=random.Random(123))
        b = generate(_ANIMALS, rng=random.Random(123))
        assert a.grid == b.grid
        assert a.size == b.size
        assert dict(a.placements) == dict(b.placements)

    def test_every_cell_is_a_letter(self):
        puzzle = generate(_ANIMALS, rng=random.Random(7))
        assert len(puzzle.grid) == puzzle.size
        for row in puzzle.grid:
            assert len(row) == puzzle.size
            for letter in row:
                assert len(letter) == 1
                assert letter in ALPHABET

    def test_placements_spell_every_word(self):
        puzzle = generate(_ANIMALS, rng=random.Random(7))
        assert set(puzzle.placements) == {w.id for w in _ANIMALS}
        for word in _ANIMALS:
            positions = puzzle.placements[word.id]
            assert len(positions) == len(word.value)
            assert "".join(puzzle.letter_at(p.row, p.col) for p in positions) == word.value
            for p in positions:
                assert p.index == p.row * puzzle.size + p.col

    def test_placements_are_straight_lines(self):
        puzzle = generate(_ANIMALS, rng=random.Random(11))
        for positions in puzzle.placements.values():
            step = Direction(positions[1].row - positions[0].row,
                             positions[1].col - positions[0].col)
            assert step in DIRECTIONS
            for prev, cur in zip(positions, positions[1:]):
                assert (cur.row - prev.row, cur.col - prev.col) == step

    def test_size_at_least_longest_word(self):
        puzzle = generate(_ANIMALS, rng=random.Random(3))
        assert puzzle.size >= len("ELEPHANT")
        assert puzzle.size <= len("ELEPHANT") + 6

    def test_canonicalizes_values(self):
        words = [WordEntry(id="ic", value="ice cream", display="Ice Cream"),
                 WordEntry(id="wk", value="well-known")]
        puzzle = generate(words, rng=random.Random(5))
        letters = "".join(puzzle.letter_at(p.row, p.col) for p in puzzle.placements["ic"])
        assert letters == "ICECREAM"
        assert len(puzzle.placements["wk"]) == len("WELLKNOWN")

    def test_boundary_min_size_equals_longest(self):
        """A word as long as the grid still gets placed across the full span."""
        words = _make_words(["ABCDE"])
        puzzle = generate(words, GeneratorOptions(min_size=5, max_size=5),
                          rng=random.Random(1))
        assert puzzle.size == 5
        positions = puzzle.placements["ABCDE"]
        assert len(positions) == 5
        rows = {p.row for p in positions}
        cols = {p.col for p in positions}
        assert len(rows) == 5 or len(cols) == 5

    def test_configured_min_size_is_raised_to_longest(self):
        puzzle = generate(_make_words(["ABCDEF"]), GeneratorOptions(min_size=3, max_size=6),
                          rng=random.Random(2))
        assert puzzle.size == 6

    def test_default_word_bank(self):
        words = get_word_list()
        puzzle = generate(words, rng=random.Random(2024))
        assert set(puzzle.placements) == {w.id for w in words}

    def test_unseeded_rng(self):
        puzzle = generate(_make_words(["CAT", "DOG"]))
        assert set(puzzle.placements) == {"CAT", "DOG"}

    def test_exhausted_search_raises(self):
        """Three disjoint 2-letter words cannot share a 2x2 grid."""
        words = _make_words(["AB", "CD", "EF"])
        options = GeneratorOptions(min_size=2, max_size=2, attempts=5, placement_attempts=10)
        with pytest.raises(GenerationFailure, match="Unable to place 3 words"):
            generate(words, options, rng=random.Random(0))

    def test_max_size_below_min_size_raises(self):
        options = GeneratorOptions(max_size=3)
        with pytest.raises(GenerationFailure):
            generate(_make_words(["HELLO"]), options, rng=random.Random(0))

    def test_invalid_attempt_counts(self):
        with pytest.raises(InvalidOptionsError):
            generate(_make_words(["CAT"]), GeneratorOptions(attempts=0))
        with pytest.raises(WordSearchError):
            generate(_make_words(["CAT"]), GeneratorOptions(placement_attempts=0))


class TestPrepareWords:
    def test_empty_list(self):
        with pytest.raises(InvalidWordError, match="empty"):
            prepare_words([])

    def test_too_short(self):
        with pytest.raises(InvalidWordError, match="fewer than 2"):
            prepare_words([WordEntry(id="G700", value="G700")])

    def test_accented_letters(self):
        with pytest.raises(InvalidWordError, match="outside A-Z"):
            prepare_words([WordEntry(id="cafe", value="café")])

    def test_duplicate_values(self):
        words = [WordEntry(id="a", value="cat"), WordEntry(id="b", value="CAT")]
        with pytest.raises(InvalidWordError, match="Duplicate word"):
            prepare_words(words)

    def test_duplicate_ids(self):
        words = [WordEntry(id="a", value="cat"), WordEntry(id="a", value="dog")]
        with pytest.raises(InvalidWordError, match="Duplicate word id"):
            prepare_words(words)

    def test_keeps_id_and_display(self):
        [entry] = prepare_words([WordEntry(id="WM", value="W Motors", display="W Motors")])
        assert entry.id == "WM"
        assert entry.value == "WMOTORS"
        assert entry.display == "W Motors"


class TestResolveSizeRange:
    def test_defaults(self):
        prepared = prepare_words(_make_words(["HELLO", "HI"]))
        assert resolve_size_range(prepared, GeneratorOptions()) == (5, 11)

    def test_explicit(self):
        prepared = prepare_words(_make_words(["HELLO"]))
        assert resolve_size_range(prepared, GeneratorOptions(min_size=8, max_size=9)) == (8, 9)


class TestStartBounds:
    def test_positive_step(self):
        assert start_bounds(10, 4, 1) == (0, 6)

    def test_negative_step(self):
        assert start_bounds(10, 4, -1) == (3, 9)

    def test_zero_step(self):
        assert start_bounds(10, 4, 0) == (0, 9)

    def test_full_span(self):
        assert start_bounds(5, 5, 1) == (0, 0)
        assert start_bounds(5, 5, -1) == (4, 4)
