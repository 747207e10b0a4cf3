# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Game session state owned by the host application.

Holds the current puzzle, the words found so far, the hints flag and the
play timer, and passes them into the generator and selection tracker as
plain arguments. Saving goes through any mutable mapping the host supplies
(a dict, a shelf, a key-value client wrapper).
"""

import logging
import random
import time
from typing import Any, Collection, List, MutableMapping, Optional, Sequence, Set, Tuple, Union

from difficulty import DifficultyLike, get_difficulty_config
from models import Cell, Puzzle
from puzzle_generator import PuzzleGenerator
from selection_tracker import (
    Resolver, SelectionTracker, highlighted_cells, hint_cells
)
from word_input import prepare_words


logger = logging.getLogger(__name__)

PUZZLE_KEY = 'current-puzzle'
FOUND_WORDS_KEY = 'found-words'
SHOW_HINTS_KEY = 'show-hints'
DIFFICULTY_KEY = 'difficulty'
STARTED_AT_KEY = 'started-at'
COMPLETED_AT_KEY = 'completed-at'


def format_elapsed(seconds: float) -> str:
    """Format a duration as MM:SS; minutes keep counting past 59."""
    total = max(0, int(seconds))
    minutes, remaining = divmod(total, 60)
    return f"{minutes:02d}:{remaining:02d}"


class GameSession:
    """One player's word search: puzzle, progress, hints and timer."""

    def __init__(
        self,
        store: Optional[MutableMapping[str, Any]] = None,
        difficulty: DifficultyLike = "medium",
        rng: Optional[random.Random] = None
    ):
        self.store = store
        self.difficulty = get_difficulty_config(difficulty)
        self.generator = PuzzleGenerator(rng=rng)

        self.puzzle: Optional[Puzzle] = None
        self.found_words: List[str] = []
        self.show_hints = False
        self.started_at: Optional[float] = None
        self.completed_at: Optional[float] = None

    @classmethod
    def load(
        cls,
        store: MutableMapping[str, Any],
        difficulty: Optional[DifficultyLike] = None,
        rng: Optional[random.Random] = None
    ) -> 'GameSession':
        """
        Restore a session from a store written by a previous session.

        The saved tier is used unless difficulty is given. The timer keeps
        its saved start and, for a finished puzzle, its saved stop.
        """
        if difficulty is None:
            difficulty = store.get(DIFFICULTY_KEY) or "medium"
        session = cls(store=store, difficulty=difficulty, rng=rng)
        puzzle_data = store.get(PUZZLE_KEY)
        if puzzle_data:
            session.puzzle = Puzzle.from_dict(puzzle_data)
            session.started_at = store.get(STARTED_AT_KEY) or time.time()
            session.completed_at = store.get(COMPLETED_AT_KEY)
        session.found_words = [
            w for w in store.get(FOUND_WORDS_KEY, [])
            if session.puzzle is not None and w in session.puzzle.placed_words
        ]
        session.show_hints = bool(store.get(SHOW_HINTS_KEY, False))
        return session

    def new_puzzle(
        self,
        raw_words: Union[str, Sequence[str]],
        difficulty: Optional[DifficultyLike] = None
    ) -> Optional[Puzzle]:
        """
        Replace the current puzzle with a fresh one.

        Args:
            raw_words: Comma-separated text or a sequence of entries
            difficulty: Tier to use; the session's tier if not given

        Returns:
            The new puzzle, or None if no usable words were given (the
            current puzzle is then left in place)
        """
        config = (
            get_difficulty_config(difficulty)
            if difficulty is not None else self.difficulty
        )
        words = prepare_words(raw_words, config)
        if not words:
            logger.info("No usable words given, keeping current puzzle")
            return None

        puzzle = self.generator.generate(words, config)
        if puzzle is None:
            return None

        self.difficulty = config
        self.puzzle = puzzle
        self.found_words = []
        self.show_hints = False
        self.started_at = time.time()
        self.completed_at = None
        logger.info(
            f"New {config.name} puzzle: {puzzle.size}x{puzzle.size}, "
            f"{len(puzzle.placed_words)}/{len(words)} words placed"
        )
        self._save()
        return puzzle

    def record_found(self, word: str) -> bool:
        """
        Record a found word.

        Returns:
            True if the word was added; False for words already found or
            not placed in the current puzzle
        """
        if self.puzzle is None or word not in self.puzzle.placed_words:
            return False
        if word in self.found_words:
            return False

        self.found_words.append(word)
        logger.info(f"Found {word} ({len(self.found_words)}/{len(self.puzzle.placed_words)})")
        if self.is_complete and self.completed_at is None:
            self.completed_at = time.time()
            logger.info(f"Puzzle complete in {format_elapsed(self.elapsed_seconds())}")
        self._save()
        return True

    def toggle_hints(self) -> bool:
        self.show_hints = not self.show_hints
        self._save()
        return self.show_hints

    def clear(self) -> None:
        """Discard the puzzle and all progress."""
        self.puzzle = None
        self.found_words = []
        self.show_hints = False
        self.started_at = None
        self.completed_at = None
        self._save()

    @property
    def is_complete(self) -> bool:
        return self.puzzle is not None and self.puzzle.is_complete(self.found_words)

    @property
    def progress(self) -> Tuple[int, int]:
        """(found, total placed) for the current puzzle."""
        if self.puzzle is None:
            return (0, 0)
        return (len(self.found_words), len(self.puzzle.placed_words))

    def tracker(self, resolver: Optional[Resolver] = None) -> 'SessionSelection':
        """Selection tracker for the current puzzle that records into this session."""
        if self.puzzle is None:
            raise RuntimeError("No puzzle to select on; call new_puzzle() first")
        return SessionSelection(self, resolver)

    def highlighted_cells(self) -> Set[Cell]:
        if self.puzzle is None:
            return set()
        return highlighted_cells(self.puzzle, self.found_words)

    def hint_cells(self) -> Set[Cell]:
        if self.puzzle is None:
            return set()
        return hint_cells(self.puzzle, self.found_words, self.show_hints)

    def elapsed_seconds(self, now: Optional[float] = None) -> float:
        """Seconds played; frozen once the puzzle is complete."""
        if self.started_at is None:
            return 0.0
        end = self.completed_at
        if end is None:
            end = now if now is not None else time.time()
        return max(0.0, end - self.started_at)

    def _save(self) -> None:
        if self.store is None:
            return
        self.store[PUZZLE_KEY] = self.puzzle.to_dict() if self.puzzle else None
        self.store[FOUND_WORDS_KEY] = list(self.found_words)
        self.store[SHOW_HINTS_KEY] = self.show_hints
        self.store[DIFFICULTY_KEY] = self.difficulty.name
        self.store[STARTED_AT_KEY] = self.started_at
        self.store[COMPLETED_AT_KEY] = self.completed_at


class SessionSelection(SelectionTracker):
    """SelectionTracker that follows a GameSession's current puzzle and found words."""

    def __init__(self, session: GameSession, resolver: Optional[Resolver] = None):
        self.session = session
        super().__init__(
            session.puzzle,
            on_word_found=session.record_found,
            resolver=resolver,
        )

    @property
    def puzzle(self) -> Optional[Puzzle]:
        current = self.session.puzzle
        if current is not self._puzzle:
            # A replaced puzzle drops any drag and any words reported on the old one
            self._puzzle = current
            self.found = set()
            self._reset()
        return current

    def gesture_end(self, found_words: Collection[str] = ()) -> Optional[str]:
        return super().gesture_end(set(found_words) | set(self.session.found_words))
