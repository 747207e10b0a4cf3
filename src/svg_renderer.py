"""
SVG Renderer for word search puzzles.
Draws the letter grid with found, selected and hint cells, and the word list.
"""

from dataclasses import dataclass
from typing import Collection, Iterable, Optional, Set
from xml.sax.saxutils import escape

from models import Cell, Puzzle
from selection_tracker import highlighted_cells, hint_cells


@dataclass
class SVGConfig:
    """Configuration for SVG rendering."""
    cell_size: int = 36
    border_width: int = 2
    inner_border_width: int = 1

    # Colors
    background_color: str = "#FFFFFF"
    grid_color: str = "#B0B0B0"
    letter_color: str = "#1A1A1A"
    found_color: str = "#C8E6C9"
    selected_color: str = "#FFE0B2"
    hint_color: str = "#FFF59D"
    solution_color: str = "#BBDEFB"

    # Fonts
    font_family: str = "Arial, Helvetica, sans-serif"
    letter_font_size: int = 20
    word_font_size: int = 14

    # Word list below the grid
    word_line_height: int = 20
    word_columns: int = 3
    padding: int = 16


class SVGRenderer:
    """Renders word search puzzles as SVG."""

    def __init__(self, config: Optional[SVGConfig] = None):
        self.config = config or SVGConfig()

    def render(
        self,
        puzzle: Puzzle,
        found_words: Collection[str] = (),
        hints: bool = False,
        selection: Iterable[Cell] = (),
        show_solution: bool = False,
        title: str = "Word Search"
    ) -> str:
        """
        Render SVG for a puzzle.

        Cell styling precedence is found, selected, hint, solution.

        Args:
            puzzle: Puzzle to draw
            found_words: Words already found (highlighted, struck through)
            hints: Whether to mark the first letter of unfound words
            selection: Cells of an in-progress drag
            show_solution: Whether to shade every placed word's cells
            title: Heading above the grid

        Returns:
            SVG string
        """
        cfg = self.config
        size = puzzle.size

        found_cells = highlighted_cells(puzzle, found_words)
        selected_cells = set(selection)
        hinted_cells = hint_cells(puzzle, found_words, hints)
        solution_cells: Set[Cell] = set()
        if show_solution:
            for placement in puzzle.placements:
                solution_cells.update(placement.cells())

        grid_width = size * cfg.cell_size
        title_height = 40
        word_rows = -(-len(puzzle.placed_words) // cfg.word_columns)
        words_height = word_rows * cfg.word_line_height + cfg.padding
        total_width = grid_width + 2 * cfg.padding
        total_height = title_height + grid_width + words_height + 2 * cfg.padding

        svg_parts = []

        svg_parts.append(
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {total_width} {total_height}" '
            f'width="{total_width}" height="{total_height}">'
        )
        svg_parts.append(f'  <title>{escape(title)}</title>')

        svg_parts.append('  <style>')
        svg_parts.append(f'    .cell {{ fill: {cfg.background_color}; stroke: {cfg.grid_color}; stroke-width: {cfg.inner_border_width}; }}')
        svg_parts.append(f'    .found {{ fill: {cfg.found_color}; }}')
        svg_parts.append(f'    .selected {{ fill: {cfg.selected_color}; }}')
        svg_parts.append(f'    .hint {{ fill: {cfg.hint_color}; }}')
        svg_parts.append(f'    .solution {{ fill: {cfg.solution_color}; }}')
        svg_parts.append(f'    .letter {{ font-family: {cfg.font_family}; font-size: {cfg.letter_font_size}px; font-weight: bold; fill: {cfg.letter_color}; text-anchor: middle; dominant-baseline: central; }}')
        svg_parts.append(f'    .title {{ font-family: {cfg.font_family}; font-size: 20px; font-weight: bold; fill: {cfg.letter_color}; text-anchor: middle; }}')
        svg_parts.append(f'    .word {{ font-family: {cfg.font_family}; font-size: {cfg.word_font_size}px; fill: {cfg.letter_color}; }}')
        svg_parts.append('    .word.done { text-decoration: line-through; opacity: 0.5; }')
        svg_parts.append('  </style>')

        svg_parts.append(
            f'  <rect x="0" y="0" width="{total_width}" height="{total_height}" '
            f'fill="{cfg.background_color}" />'
        )
        svg_parts.append(
            f'  <text x="{total_width / 2}" y="{cfg.padding + 20}" class="title">{escape(title)}</text>'
        )

        grid_x = cfg.padding
        grid_y = cfg.padding + title_height

        for row in range(size):
            for col in range(size):
                x = grid_x + col * cfg.cell_size
                y = grid_y + row * cfg.cell_size
                cell = (row, col)

                classes = "cell"
                if cell in found_cells:
                    classes += " found"
                elif cell in selected_cells:
                    classes += " selected"
                elif cell in hinted_cells:
                    classes += " hint"
                elif cell in solution_cells:
                    classes += " solution"

                svg_parts.append(
                    f'  <rect x="{x}" y="{y}" '
                    f'width="{cfg.cell_size}" height="{cfg.cell_size}" '
                    f'class="{classes}" />'
                )
                svg_parts.append(
                    f'  <text x="{x + cfg.cell_size / 2}" y="{y + cfg.cell_size / 2}" '
                    f'class="letter">{puzzle.letter_at(row, col)}</text>'
                )

        # Outer border
        svg_parts.append(
            f'  <rect x="{grid_x}" y="{grid_y}" '
            f'width="{grid_width}" height="{grid_width}" '
            f'fill="none" stroke="{cfg.letter_color}" stroke-width="{cfg.border_width}" />'
        )

        words_y = grid_y + grid_width + cfg.padding + cfg.word_font_size
        column_width = grid_width / cfg.word_columns
        for i, word in enumerate(puzzle.placed_words):
            x = grid_x + (i % cfg.word_columns) * column_width
            y = words_y + (i // cfg.word_columns) * cfg.word_line_height
            classes = "word done" if word in found_words else "word"
            svg_parts.append(f'  <text x="{x}" y="{y}" class="{classes}">{word}</text>')

        svg_parts.append('</svg>')

        return '\n'.join(svg_parts)

    def save(self, svg_content: str, filepath: str):
        """Save SVG to file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(svg_content)
