# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Puzzle Generator

Lays words into a square letter grid using randomized placement with a
bounded number of retries per word:
- Longest words first, while the grid is emptiest
- Words may cross where they share a letter
- No backtracking; a word that runs out of attempts is dropped
- Leftover cells are filled with random letters
"""

import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple

from difficulty import DifficultyConfig, DifficultyLike, get_difficulty_config
from models import ALPHABET, Puzzle, WordPlacement


logger = logging.getLogger(__name__)

EMPTY = ""


class PuzzleGenerator:
    """Generates word search puzzles for a difficulty tier."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize generator.

        Args:
            rng: Random source; a fresh unseeded one if not given
        """
        self.rng = rng if rng is not None else random.Random()
        self.stats: Dict[str, int] = {}

    def generate(
        self,
        words: Sequence[str],
        difficulty: DifficultyLike
    ) -> Optional[Puzzle]:
        """
        Generate a puzzle from pre-normalized words.

        Words are expected to be uppercase A-Z, deduplicated and already
        bounded by the tier's count and length limits.

        Args:
            words: Words to hide in the grid
            difficulty: Tier name, Difficulty member or DifficultyConfig

        Returns:
            Puzzle, or None if no words were given
        """
        if not words:
            return None

        config = get_difficulty_config(difficulty)
        size = config.grid_size_for(max(len(w) for w in words))
        grid: List[List[str]] = [[EMPTY] * size for _ in range(size)]

        self.stats = {"grid_size": size, "trials": 0, "placed": 0, "dropped": 0}
        placed_words: List[str] = []
        placements: List[WordPlacement] = []

        # sorted() is stable, so equal lengths keep their input order
        for word in sorted(words, key=len, reverse=True):
            placement = self._place_word(grid, word, config)
            if placement is None:
                self.stats["dropped"] += 1
                logger.warning(f"Could not place word: {word}")
                continue
            placements.append(placement)
            placed_words.append(word)
            self.stats["placed"] += 1

        self._fill_empty_cells(grid)

        logger.debug(
            f"Generated {size}x{size} {config.name} grid: "
            f"{self.stats['placed']} placed, {self.stats['dropped']} dropped, "
            f"{self.stats['trials']} trials"
        )

        return Puzzle(grid=grid, placed_words=placed_words, placements=placements)

    def _place_word(
        self,
        grid: List[List[str]],
        word: str,
        config: DifficultyConfig
    ) -> Optional[WordPlacement]:
        """Try random (direction, start) pairs until one fits or the budget runs out."""
        size = len(grid)
        for _ in range(config.placement_attempt_budget):
            self.stats["trials"] += 1
            direction = self.rng.choice(config.allowed_directions)
            row = self.rng.randrange(size)
            col = self.rng.randrange(size)

            if can_place_word(grid, word, row, col, direction):
                return place_word(grid, word, row, col, direction)
        return None

    def _fill_empty_cells(self, grid: List[List[str]]) -> None:
        for row in grid:
            for col, letter in enumerate(row):
                if letter == EMPTY:
                    row[col] = self.rng.choice(ALPHABET)


def can_place_word(
    grid: List[List[str]],
    word: str,
    row: int,
    col: int,
    direction: Tuple[int, int]
) -> bool:
    """
    Check whether a word fits at (row, col) running in direction.

    Every cell of the run must be inside the grid and either empty or
    already holding the letter the word needs there.
    """
    d_row, d_col = direction
    size = len(grid)
    end_row = row + (len(word) - 1) * d_row
    end_col = col + (len(word) - 1) * d_col

    if not (0 <= end_row < size and 0 <= end_col < size):
        return False

    for i, letter in enumerate(word):
        current = grid[row + i * d_row][col + i * d_col]
        if current != EMPTY and current != letter:
            return False

    return True


def place_word(
    grid: List[List[str]],
    word: str,
    row: int,
    col: int,
    direction: Tuple[int, int]
) -> WordPlacement:
    """Write a word into the grid and return its placement."""
    d_row, d_col = direction
    for i, letter in enumerate(word):
        grid[row + i * d_row][col + i * d_col] = letter
    return WordPlacement.from_start(word, row, col, direction)


def generate_puzzle(
    words: Sequence[str],
    difficulty: DifficultyLike,
    rng: Optional[random.Random] = None
) -> Optional[Puzzle]:
    """Convenience wrapper around PuzzleGenerator.generate()."""
    return PuzzleGenerator(rng=rng).generate(words, difficulty)
