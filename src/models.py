"""
Data models for the word search generator.
"""

from dataclasses import dataclass, field
from typing import Any, Collection, Dict, Iterable, List, Optional, Tuple
import string


ALPHABET = string.ascii_uppercase

Cell = Tuple[int, int]  # (row, col)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class WordPlacement:
    """A straight run of cells carrying a word's letters in order."""
    word: str
    start_row: int
    start_col: int
    end_row: int
    end_col: int

    @property
    def start(self) -> Cell:
        return (self.start_row, self.start_col)

    @property
    def end(self) -> Cell:
        return (self.end_row, self.end_col)

    @property
    def direction(self) -> Tuple[int, int]:
        """Unit step from start to end; (0, 0) for a one-letter word."""
        return (
            _sign(self.end_row - self.start_row),
            _sign(self.end_col - self.start_col),
        )

    def cells(self) -> List[Cell]:
        """All cells covered by this placement, start to end."""
        d_row, d_col = self.direction
        return [
            (self.start_row + i * d_row, self.start_col + i * d_col)
            for i in range(len(self.word))
        ]

    @classmethod
    def from_start(
        cls,
        word: str,
        row: int,
        col: int,
        direction: Tuple[int, int]
    ) -> 'WordPlacement':
        """Build a placement from its start cell and direction."""
        d_row, d_col = direction
        last = len(word) - 1
        return cls(
            word=word,
            start_row=row,
            start_col=col,
            end_row=row + last * d_row,
            end_col=col + last * d_col,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'start_row': self.start_row,
            'start_col': self.start_col,
            'end_row': self.end_row,
            'end_col': self.end_col,
        }


@dataclass
class Puzzle:
    """A generated word search: the letter grid and where the words are."""
    grid: List[List[str]]
    placed_words: List[str] = field(default_factory=list)
    placements: List[WordPlacement] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.grid)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def letter_at(self, row: int, col: int) -> str:
        return self.grid[row][col]

    def letters_along(self, path: Iterable[Cell]) -> str:
        """Concatenate the letters on a path of cells."""
        return "".join(self.grid[row][col] for row, col in path)

    def placement_for(self, word: str) -> Optional[WordPlacement]:
        """Placement of an exact word, or None if it was not placed."""
        for placement in self.placements:
            if placement.word == word:
                return placement
        return None

    def is_complete(self, found_words: Collection[str]) -> bool:
        """True once every placed word has been found."""
        if not self.placed_words:
            return False
        found = set(found_words)
        return all(word in found for word in self.placed_words)

    def to_string(self, solution_only: bool = False) -> str:
        """
        Text rendering of the grid, one row per line.

        With solution_only, cells not covered by a placement print as '.'.
        """
        covered = set()
        if solution_only:
            for placement in self.placements:
                covered.update(placement.cells())

        lines = []
        for row in range(self.size):
            letters = []
            for col in range(self.size):
                if solution_only and (row, col) not in covered:
                    letters.append(".")
                else:
                    letters.append(self.grid[row][col])
            lines.append(" ".join(letters))
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form for an external key-value store."""
        return {
            'grid': [list(row) for row in self.grid],
            'words': list(self.placed_words),
            'positions': [p.to_dict() for p in self.placements],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Puzzle':
        return cls(
            grid=[list(row) for row in data['grid']],
            placed_words=list(data.get('words', [])),
            placements=[
                WordPlacement(**position)
                for position in data.get('positions', [])
            ],
        )
