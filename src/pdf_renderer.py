"""Render a word search to a printable PDF using ReportLab.

Layout: title banner, letter grid centered below it, the word list in
balanced columns under the grid. Page 2 repeats the grid as an answer key
with the hidden words shaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from models import GeneratedPuzzle, WordEntry

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
HIGHLIGHT_RGB = (1.0, 0.85, 0.4)


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN
    usable_h: float = PAGE_H - 2 * MARGIN

    # Grid
    grid_size: int = 15
    cell_size: float = 26.0
    grid_dim: float = 0.0
    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0

    # Word list
    word_font_size: float = 11.0
    word_leading: float = 13.0
    word_zone_y: float = 0.0  # top of word list area
    word_cols: int = 3
    word_gutter: float = 12.0
    word_col_w: float = 0.0

    title: str = "WORD SEARCH"


def render_pdf(
    puzzle: GeneratedPuzzle,
    words: list[WordEntry],
    title: str,
    output_path: str,
) -> None:
    """Compute layout, adaptive fit, draw page 1 (puzzle) + page 2 (answer key)."""
    from reportlab.pdfgen.canvas import Canvas

    layout = _compute_layout(puzzle.size, words, title)
    layout = _adaptive_fit(words, layout)

    c = Canvas(output_path, pagesize=letter)

    # --- Page 1: Puzzle ---
    _draw_title_banner(c, layout)
    _draw_grid(c, puzzle, layout, show_answers=False)
    _draw_word_zone(c, words, layout)
    c.showPage()

    # --- Page 2: Answer Key ---
    _draw_answer_key_page(c, puzzle, layout)
    c.showPage()

    c.save()


def _compute_layout(
    grid_size: int,
    words: list[WordEntry],
    title: str,
) -> LayoutParams:
    """Calculate all positions and sizes."""
    lp = LayoutParams(grid_size=grid_size, title=title)

    # Largest cell that keeps the grid within the usable width
    lp.cell_size = min(30.0, lp.usable_w / grid_size)

    lp.word_cols = 3 if len(words) <= 15 else 4

    _recompute_positions(lp)
    return lp


def _recompute_positions(lp: LayoutParams) -> None:
    """(Re)calculate derived positions from current params."""
    lp.grid_dim = lp.cell_size * lp.grid_size

    lp.banner_y = lp.page_h - lp.margin - lp.banner_h

    lp.grid_x = (lp.page_w - lp.grid_dim) / 2
    lp.grid_y = lp.banner_y - 12

    lp.word_zone_y = lp.grid_y - lp.grid_dim - 18

    total_gutter = lp.word_gutter * (lp.word_cols - 1)
    lp.word_col_w = (lp.usable_w - total_gutter) / lp.word_cols


def _adaptive_fit(words: list[WordEntry], layout: LayoutParams) -> LayoutParams:
    """Step through adjustments until the word list fits under the grid."""
    for _ in range(20):
        if _content_fits(words, layout):
            return layout

        # Step 1: reduce font
        if layout.word_font_size > 7.0:
            layout.word_font_size -= 0.5
            layout.word_leading = layout.word_font_size + 2
            continue

        # Step 2: add a column
        if layout.word_cols < 5:
            layout.word_cols += 1
            _recompute_positions(layout)
            continue

        # Step 3: reduce cell size
        if layout.cell_size > 14:
            layout.cell_size -= 1
            _recompute_positions(layout)
            continue

        break

    return layout


def _content_fits(words: list[WordEntry], layout: LayoutParams) -> bool:
    col_heights = _column_heights(words, layout)
    max_col_h = max(col_heights) if col_heights else 0
    available = layout.word_zone_y - layout.margin
    return max_col_h <= available


def _column_heights(words: list[WordEntry], layout: LayoutParams) -> list[float]:
    """Column heights when words are dealt top-to-bottom, left-to-right."""
    style = _word_style(layout)
    per_col = _words_per_column(len(words), layout.word_cols)
    heights = [0.0] * layout.word_cols
    for i, word in enumerate(words):
        p = Paragraph(escape(word.display), style)
        _, h = p.wrap(layout.word_col_w, 10000)
        heights[min(i // per_col, layout.word_cols - 1)] += h
    return heights


def _words_per_column(count: int, cols: int) -> int:
    return max(1, -(-count // cols))


def _word_style(layout: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "WordStyle",
        fontName="Helvetica",
        fontSize=layout.word_font_size,
        leading=layout.word_leading,
    )


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    tx = x + (w - text_w) / 2
    ty = y + (h - 16) / 2 + 2
    c.drawString(tx, ty, layout.title)


def _draw_grid(c, puzzle: GeneratedPuzzle, layout: LayoutParams, show_answers: bool) -> None:
    """Draw the letter grid; the answer key shades cells of hidden words."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size
    size = puzzle.size
    hidden = puzzle.hidden_indices() if show_answers else set()
    font_size = cs * 0.55

    for r in range(size):
        for col in range(size):
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs

            if r * size + col in hidden:
                c.setFillColorRGB(*HIGHLIGHT_RGB)
            else:
                c.setFillColorRGB(1, 1, 1)
            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.5)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            ch = puzzle.letter_at(r, col)
            c.setFillColorRGB(0, 0, 0)
            c.setFont("Helvetica", font_size)
            lw = stringWidth(ch, "Helvetica", font_size)
            c.drawString(cx + (cs - lw) / 2, cy + cs / 2 - font_size * 0.35, ch)

    # Outer border
    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, y0 - size * cs, size * cs, size * cs, fill=0, stroke=1)


def _draw_word_zone(c, words: list[WordEntry], layout: LayoutParams) -> None:
    """Draw the word list in columns below the grid."""
    style = _word_style(layout)
    per_col = _words_per_column(len(words), layout.word_cols)

    for col_idx in range(layout.word_cols):
        col_x = layout.margin + col_idx * (layout.word_col_w + layout.word_gutter)
        current_y = layout.word_zone_y
        for word in words[col_idx * per_col:(col_idx + 1) * per_col]:
            p = Paragraph(escape(word.display), style)
            _, h = p.wrap(layout.word_col_w, 10000)
            p.drawOn(c, col_x, current_y - h)
            current_y -= h


def _draw_answer_key_page(c, puzzle: GeneratedPuzzle, layout: LayoutParams) -> None:
    """Draw the answer key page: banner + shaded grid centered on page."""
    ak_layout = LayoutParams(
        grid_size=layout.grid_size,
        cell_size=layout.cell_size,
        title="ANSWER KEY",
    )
    _recompute_positions(ak_layout)

    _draw_title_banner(c, ak_layout)
    _draw_grid(c, puzzle, ak_layout, show_answers=True)
