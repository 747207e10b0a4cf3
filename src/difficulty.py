# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Difficulty tiers for word search puzzles.

Each tier is a fixed lookup of grid size range, word limits, allowed
placement directions and the per-word placement attempt budget.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union


Vector = Tuple[int, int]

# (row delta, col delta)
RIGHT: Vector = (0, 1)
LEFT: Vector = (0, -1)
DOWN: Vector = (1, 0)
UP: Vector = (-1, 0)
DOWN_RIGHT: Vector = (1, 1)
DOWN_LEFT: Vector = (1, -1)
UP_RIGHT: Vector = (-1, 1)
UP_LEFT: Vector = (-1, -1)

ORTHOGONAL_DIRECTIONS: Tuple[Vector, ...] = (RIGHT, LEFT, DOWN, UP)
ALL_DIRECTIONS: Tuple[Vector, ...] = ORTHOGONAL_DIRECTIONS + (
    DOWN_RIGHT, DOWN_LEFT, UP_RIGHT, UP_LEFT
)


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class UnknownDifficultyError(ValueError):
    """Raised when a difficulty name is not one of the known tiers."""
    pass


@dataclass(frozen=True)
class DifficultyConfig:
    """Placement parameters for one difficulty tier."""
    name: str
    grid_size_range: Tuple[int, int]  # (min, max), inclusive
    max_word_count: int
    max_word_length: int
    allowed_directions: Tuple[Vector, ...]
    placement_attempt_budget: int

    @property
    def min_grid_size(self) -> int:
        return self.grid_size_range[0]

    @property
    def max_grid_size(self) -> int:
        return self.grid_size_range[1]

    def grid_size_for(self, longest_word_length: int) -> int:
        """Side length for a grid whose longest word has the given length."""
        return max(
            self.min_grid_size,
            min(self.max_grid_size, longest_word_length + 3)
        )


DIFFICULTY_CONFIGS: Dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig(
        name="easy",
        grid_size_range=(8, 12),
        max_word_count=8,
        max_word_length=8,
        allowed_directions=ORTHOGONAL_DIRECTIONS,
        placement_attempt_budget=150,
    ),
    Difficulty.MEDIUM: DifficultyConfig(
        name="medium",
        grid_size_range=(10, 15),
        max_word_count=10,
        max_word_length=10,
        allowed_directions=ALL_DIRECTIONS,
        placement_attempt_budget=150,
    ),
    Difficulty.HARD: DifficultyConfig(
        name="hard",
        grid_size_range=(12, 18),
        max_word_count=14,
        max_word_length=12,
        allowed_directions=ALL_DIRECTIONS,
        placement_attempt_budget=200,
    ),
}

VALID_DIFFICULTIES = [d.value for d in Difficulty]

DifficultyLike = Union[str, Difficulty, DifficultyConfig]


def get_difficulty_config(difficulty: DifficultyLike) -> DifficultyConfig:
    """
    Resolve a tier name, enum member or config to a DifficultyConfig.

    Raises:
        UnknownDifficultyError: If a name does not match any tier
    """
    if isinstance(difficulty, DifficultyConfig):
        return difficulty
    if isinstance(difficulty, Difficulty):
        return DIFFICULTY_CONFIGS[difficulty]

    try:
        tier = Difficulty(str(difficulty).strip().lower())
    except ValueError:
        raise UnknownDifficultyError(
            f"Unknown difficulty '{difficulty}'. "
            f"Must be one of: {VALID_DIFFICULTIES}"
        )
    return DIFFICULTY_CONFIGS[tier]
