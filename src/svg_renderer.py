"""Render a word search grid as standalone SVG."""

from __future__ import annotations

from models import GeneratedPuzzle

HIGHLIGHT = "#ffd966"


def render_svg(
    puzzle: GeneratedPuzzle,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the letter grid to an SVG file; answers shade the hidden words."""
    if cell_size is None:
        cell_size = _default_cell_size(puzzle.size)

    letter_font = cell_size * 0.55
    grid_dim = cell_size * puzzle.size
    hidden = puzzle.hidden_indices() if show_answers else set()

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{grid_dim}" height="{grid_dim}" '
        f'viewBox="0 0 {grid_dim} {grid_dim}">\n'
    )

    for r in range(puzzle.size):
        for c in range(puzzle.size):
            x = c * cell_size
            y = r * cell_size
            fill = HIGHLIGHT if r * puzzle.size + c in hidden else "white"
            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="{fill}" '
                f'stroke="black" stroke-width="0.5"/>\n'
            )
            parts.append(
                f'  <text x="{x + cell_size / 2}" y="{y + cell_size / 2}" '
                f'text-anchor="middle" dominant-baseline="central" '
                f'font-family="Helvetica, Arial, sans-serif" '
                f'font-size="{letter_font}" '
                f'fill="black">{puzzle.letter_at(r, c)}</text>\n'
            )

    # Outer border
    parts.append(
        f'  <rect x="0" y="0" width="{grid_dim}" height="{grid_dim}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def render_puzzle_svg(puzzle: GeneratedPuzzle, output_path: str) -> None:
    """Render the puzzle grid (no highlighting) to SVG."""
    render_svg(puzzle, output_path, show_answers=False)


def render_answer_svg(puzzle: GeneratedPuzzle, output_path: str) -> None:
    """Render the grid with hidden words highlighted to SVG."""
    render_svg(puzzle, output_path, show_answers=True)


def _default_cell_size(grid_size: int) -> float:
    if grid_size <= 12:
        return 28.0
    elif grid_size <= 16:
        return 24.0
    else:
        return 20.0
