# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Selection Tracker

Interprets a drag gesture over the grid:
1. Gesture start records the start cell
2. Each move recomputes a straight-line path from start to the current cell
3. Gesture end reads the path forward and backward and reports a found word

Pixel-to-cell mapping belongs to the host; pass cells directly or give the
tracker a resolver (see grid_cell_resolver) so mouse and touch input share
one code path.
"""

import logging
import math
from enum import Enum
from typing import Any, Callable, Collection, List, Optional, Set

from models import Cell, Puzzle


logger = logging.getLogger(__name__)

Resolver = Callable[[Any], Optional[Cell]]
WordFoundCallback = Callable[[str], None]


class SelectionState(Enum):
    IDLE = "idle"
    SELECTING = "selecting"


def is_straight_line(start: Cell, end: Cell) -> bool:
    """Horizontal, vertical or 45-degree diagonal (a single cell counts)."""
    d_row = end[0] - start[0]
    d_col = end[1] - start[1]
    return d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)


def path_between(start: Cell, end: Cell) -> List[Cell]:
    """
    Cells from start to end inclusive, one per step along the dominant axis.

    A move that is not horizontal, vertical or diagonal collapses to
    [start] so it can never match a multi-letter word.
    """
    d_row = end[0] - start[0]
    d_col = end[1] - start[1]
    steps = max(abs(d_row), abs(d_col))

    if steps == 0 or not is_straight_line(start, end):
        return [start]

    row_step = d_row / steps
    col_step = d_col / steps
    return [
        (start[0] + round(row_step * i), start[1] + round(col_step * i))
        for i in range(steps + 1)
    ]


def match_path(
    puzzle: Puzzle,
    path: List[Cell],
    found_words: Collection[str] = ()
) -> Optional[str]:
    """
    Word spelled by a path, read forward first and then reversed.

    Returns None if neither reading is an unfound puzzle word. When both
    readings are unfound words, the forward reading wins.
    """
    if not path:
        return None

    candidate = puzzle.letters_along(path)
    for word in (candidate, candidate[::-1]):
        if word in puzzle.placed_words and word not in found_words:
            return word
    return None


def highlighted_cells(puzzle: Puzzle, found_words: Collection[str]) -> Set[Cell]:
    """Every cell on the run of an already-found word."""
    cells: Set[Cell] = set()
    for word in found_words:
        for placement in puzzle.placements:
            if placement.word == word:
                cells.update(path_between(placement.start, placement.end))
    return cells


def hint_cells(
    puzzle: Puzzle,
    found_words: Collection[str],
    enabled: bool = True
) -> Set[Cell]:
    """Start cell of every word not found yet; empty when hints are off."""
    if not enabled:
        return set()
    return {
        placement.start
        for placement in puzzle.placements
        if placement.word not in found_words
    }


def grid_cell_resolver(
    grid_size: int,
    width: float,
    height: Optional[float] = None,
    origin_x: float = 0.0,
    origin_y: float = 0.0
) -> Resolver:
    """
    Build a resolver mapping (x, y) pixel points to grid cells.

    Args:
        grid_size: Number of rows and columns
        width: Rendered grid width in pixels
        height: Rendered grid height; defaults to width (square cells)
        origin_x: Left edge of the grid in the pointer's coordinate space
        origin_y: Top edge of the grid in the pointer's coordinate space

    Returns:
        Callable returning (row, col), or None for points outside the grid
    """
    cell_width = width / grid_size
    cell_height = (height if height is not None else width) / grid_size

    def resolve(point: Any) -> Optional[Cell]:
        if point is None:
            return None
        x, y = point
        col = math.floor((x - origin_x) / cell_width)
        row = math.floor((y - origin_y) / cell_height)
        if 0 <= row < grid_size and 0 <= col < grid_size:
            return (row, col)
        return None

    return resolve


class SelectionTracker:
    """
    Gesture state machine for one puzzle.

    Matches are reported through on_word_found. The tracker remembers the
    words it has reported, so a repeated drag never reports a word twice;
    words the host found some other way can be passed to gesture_end().
    """

    def __init__(
        self,
        puzzle: Puzzle,
        on_word_found: Optional[WordFoundCallback] = None,
        resolver: Optional[Resolver] = None
    ):
        """
        Initialize tracker.

        Args:
            puzzle: Puzzle being played
            on_word_found: Called with the word when a drag spells one
            resolver: Maps raw gesture points to cells; points are taken
                to be (row, col) cells if not given
        """
        self._puzzle = puzzle
        self.on_word_found = on_word_found
        self.resolver = resolver
        self.found: Set[str] = set()

        self.state = SelectionState.IDLE
        self.start: Optional[Cell] = None
        self.current: Optional[Cell] = None
        self.path: List[Cell] = []

    @property
    def puzzle(self) -> Optional[Puzzle]:
        return self._puzzle

    @property
    def is_selecting(self) -> bool:
        return self.state == SelectionState.SELECTING

    def _resolve(self, point: Any) -> Optional[Cell]:
        puzzle = self.puzzle
        if puzzle is None:
            return None
        if self.resolver is not None:
            cell = self.resolver(point)
        else:
            cell = tuple(point) if point is not None else None
        if cell is None or not puzzle.in_bounds(*cell):
            return None
        return cell

    def gesture_start(self, point: Any) -> bool:
        """
        Begin a selection at a point.

        Returns:
            True if the point was over a grid cell and selection started
        """
        cell = self._resolve(point)
        if cell is None:
            return False

        self.state = SelectionState.SELECTING
        self.start = cell
        self.current = cell
        self.path = [cell]
        return True

    def gesture_move(self, point: Any) -> List[Cell]:
        """
        Extend the selection to a point.

        Moves outside the grid, onto the current cell, or while idle leave
        the path unchanged.

        Returns:
            The current selection path
        """
        if not self.is_selecting or self.start is None:
            return self.path

        cell = self._resolve(point)
        if cell is None or not self.is_selecting or cell == self.current:
            return self.path

        self.current = cell
        self.path = path_between(self.start, cell)
        return self.path

    def gesture_end(self, found_words: Collection[str] = ()) -> Optional[str]:
        """
        Finish the selection and check it against the puzzle.

        Safe to call from a global release handler: it always returns the
        tracker to idle, whether or not a selection was in progress.

        Args:
            found_words: Words the host has already recorded

        Returns:
            The matched word, or None
        """
        puzzle = self.puzzle
        path = self.path if self.is_selecting else []
        self._reset()

        if puzzle is None:
            return None

        word = match_path(puzzle, path, set(found_words) | self.found)
        if word is None:
            return None

        self.found.add(word)
        logger.debug(f"Selection matched {word} along {path}")
        if self.on_word_found is not None:
            self.on_word_found(word)
        return word

    def _reset(self) -> None:
        self.state = SelectionState.IDLE
        self.start = None
        self.current = None
        self.path = []
