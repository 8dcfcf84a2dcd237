#!/usr/bin/env python3
"""CLI entry point for word search generation.

Reads words from an XLSX file (or uses the built-in word list), hides them
in a grid, and writes PDF, XLSX answer key, puzzle SVG and answer SVG into
an 'output' folder next to the requested output path.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from models import GeneratedPuzzle, GeneratorOptions, WordEntry, WordSearchError


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a word search puzzle PDF."
    )
    p.add_argument("input", nargs="?", default=None,
                   help="Path to XLSX word list (default: built-in word list)")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output PDF path (default: wordsearch.pdf or input with .pdf extension)",
    )
    p.add_argument("--min-size", type=int, default=None,
                   help="Smallest grid size to try (default: longest word)")
    p.add_argument("--max-size", type=int, default=None,
                   help="Largest grid size to try (default: min size + 6)")
    p.add_argument("--attempts", type=int, default=200,
                   help="Attempts per grid size (default: 200)")
    p.add_argument("--placement-attempts", type=int, default=140,
                   help="Random placement draws per word (default: 140)")
    p.add_argument("--title", default="WORD SEARCH",
                   help='Title text (default: "WORD SEARCH")')
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log search progress")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    seed = args.seed if args.seed is not None else random.randint(0, 2**31)
    t0 = time.time()

    try:
        _run(args, seed, t0)
    except WordSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run(args, seed: int, t0: float) -> None:
    from grid_generator import generate

    if args.input is not None:
        from word_list_reader import read_words

        input_path = Path(args.input)
        output_path = args.output or str(input_path.with_suffix(".pdf"))
        words = read_words(input_path, max_length=args.max_size)
        print(f"Read {len(words)} valid words", file=sys.stderr)
    else:
        from word_bank import get_word_list

        output_path = args.output or "wordsearch.pdf"
        words = get_word_list()

    options = GeneratorOptions(
        min_size=args.min_size,
        max_size=args.max_size,
        attempts=args.attempts,
        placement_attempts=args.placement_attempts,
    )

    print(f"Generating word search for {len(words)} words (seed={seed})...",
          file=sys.stderr)

    puzzle = generate(words, options, random.Random(seed))

    _output_all(puzzle, words, args.title, output_path)

    elapsed = time.time() - t0
    hidden_cells = len(puzzle.hidden_indices())
    density = hidden_cells / (puzzle.size * puzzle.size) * 100

    print(
        f"Hid {len(puzzle.placements)} words in {puzzle.size}x{puzzle.size} grid, "
        f"word coverage {density:.0f}%, "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


def _output_all(
    puzzle: GeneratedPuzzle,
    words: list[WordEntry],
    title: str,
    output_path: str,
) -> None:
    """Generate all output files in an 'output' folder: PDF, XLSX, puzzle SVG, answer SVG."""
    from pdf_renderer import render_pdf
    from xlsx_writer import write_answer_key_xlsx
    from svg_renderer import render_puzzle_svg, render_answer_svg

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_answers.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    render_pdf(puzzle, words, title, pdf_path)
    write_answer_key_xlsx(puzzle, words, xlsx_path)
    render_puzzle_svg(puzzle, puzzle_svg_path)
    render_answer_svg(puzzle, answer_svg_path)

    print(f"Output: {pdf_path}", file=sys.stderr)
    print(f"Output: {xlsx_path}", file=sys.stderr)
    print(f"Output: {puzzle_svg_path}", file=sys.stderr)
    print(f"Output: {answer_svg_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
