# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for game_session module."""

import os
import random
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from game_session import (
    COMPLETED_AT_KEY, DIFFICULTY_KEY, FOUND_WORDS_KEY, PUZZLE_KEY,
    SHOW_HINTS_KEY, STARTED_AT_KEY, GameSession, format_elapsed
)
from selection_tracker import SelectionState


class TestFormatElapsed(unittest.TestCase):
    """Tests for the MM:SS timer format."""

    def test_format(self):
        """Test common durations."""
        self.assertEqual(format_elapsed(0), "00:00")
        self.assertEqual(format_elapsed(75), "01:15")
        self.assertEqual(format_elapsed(59.9), "00:59")
        self.assertEqual(format_elapsed(3600), "60:00")

    def test_negative_clamped(self):
        """Test negative durations show as zero."""
        self.assertEqual(format_elapsed(-5), "00:00")


class TestGameSession(unittest.TestCase):
    """Tests for GameSession."""

    def setUp(self):
        self.store = {}
        self.session = GameSession(
            store=self.store, difficulty="easy", rng=random.Random(42)
        )

    def drag_word(self, tracker, word):
        placement = self.session.puzzle.placement_for(word)
        tracker.gesture_start(placement.start)
        tracker.gesture_move(placement.end)
        return tracker.gesture_end()

    def test_new_puzzle(self):
        """Test a puzzle is generated from raw comma-separated text."""
        puzzle = self.session.new_puzzle(" cat, Dog!, cat ")

        self.assertIsNotNone(puzzle)
        self.assertEqual(sorted(puzzle.placed_words), ["CAT", "DOG"])
        self.assertEqual(self.session.progress, (0, 2))
        self.assertFalse(self.session.is_complete)

    def test_new_puzzle_without_words(self):
        """Test empty input is declined and leaves state unchanged."""
        self.assertIsNone(self.session.new_puzzle(" , 123, !! "))
        self.assertIsNone(self.session.puzzle)

        self.session.new_puzzle("cat")
        current = self.session.puzzle
        self.assertIsNone(self.session.new_puzzle(""))
        self.assertIs(self.session.puzzle, current)

    def test_new_puzzle_resets_progress(self):
        """Test a new puzzle clears found words and hints."""
        self.session.new_puzzle("cat, dog")
        self.session.record_found("CAT")
        self.session.toggle_hints()

        self.session.new_puzzle("bird, fish")

        self.assertEqual(self.session.found_words, [])
        self.assertFalse(self.session.show_hints)

    def test_difficulty_override(self):
        """Test new_puzzle can switch tier."""
        puzzle = self.session.new_puzzle("cat", difficulty="hard")

        self.assertEqual(self.session.difficulty.name, "hard")
        self.assertEqual(puzzle.size, 12)

    def test_record_found_append_if_absent(self):
        """Test found words are recorded once and only if placed."""
        self.session.new_puzzle("cat, dog")

        self.assertTrue(self.session.record_found("CAT"))
        self.assertFalse(self.session.record_found("CAT"))
        self.assertFalse(self.session.record_found("EMU"))
        self.assertEqual(self.session.found_words, ["CAT"])

    def test_record_found_without_puzzle(self):
        """Test recording before any puzzle exists is ignored."""
        self.assertFalse(self.session.record_found("CAT"))

    def test_completion(self):
        """Test the puzzle completes when every placed word is found."""
        self.session.new_puzzle("cat, dog")
        self.session.record_found("CAT")
        self.session.record_found("DOG")

        self.assertTrue(self.session.is_complete)
        self.assertEqual(self.session.progress, (2, 2))
        self.assertIsNotNone(self.session.completed_at)

    def test_tracker_records_into_session(self):
        """Test drags through the session tracker record found words."""
        self.session.new_puzzle("cat, dog")
        tracker = self.session.tracker()

        self.assertEqual(self.drag_word(tracker, "CAT"), "CAT")
        self.assertIsNone(self.drag_word(tracker, "CAT"))
        self.assertEqual(self.session.found_words, ["CAT"])

        self.assertEqual(self.drag_word(tracker, "DOG"), "DOG")
        self.assertTrue(self.session.is_complete)

    def test_tracker_follows_new_puzzle(self):
        """Test a tracker made before new_puzzle() matches on the new grid."""
        self.session.new_puzzle("cat")
        tracker = self.session.tracker()

        self.session.new_puzzle("dog")

        self.assertEqual(self.drag_word(tracker, "DOG"), "DOG")
        self.assertEqual(self.session.found_words, ["DOG"])
        self.assertTrue(self.session.is_complete)

    def test_word_found_again_in_next_puzzle(self):
        """Test a word found on an old puzzle can be found on the next one."""
        self.session.new_puzzle("cat")
        tracker = self.session.tracker()
        self.assertEqual(self.drag_word(tracker, "CAT"), "CAT")

        self.session.new_puzzle("cat, dog")

        self.assertEqual(self.drag_word(tracker, "CAT"), "CAT")
        self.assertEqual(self.session.found_words, ["CAT"])

    def test_new_puzzle_cancels_drag(self):
        """Test a drag in progress when the puzzle is replaced matches nothing."""
        self.session.new_puzzle("cat")
        tracker = self.session.tracker()
        cat = self.session.puzzle.placement_for("CAT")
        tracker.gesture_start(cat.start)
        tracker.gesture_move(cat.end)

        self.session.new_puzzle("dog")

        self.assertIsNone(tracker.gesture_end())
        self.assertEqual(tracker.state, SelectionState.IDLE)
        self.assertEqual(self.session.found_words, [])

    def test_tracker_after_clear(self):
        """Test a tracker ignores gestures once the session is cleared."""
        self.session.new_puzzle("cat")
        tracker = self.session.tracker()

        self.session.clear()

        self.assertFalse(tracker.gesture_start((0, 0)))
        self.assertIsNone(tracker.gesture_end())

    def test_tracker_requires_puzzle(self):
        """Test a tracker cannot be made without a puzzle."""
        with self.assertRaises(RuntimeError):
            self.session.tracker()

    def test_hint_and_highlight_cells(self):
        """Test derived views follow the session state."""
        self.session.new_puzzle("cat, dog")
        cat = self.session.puzzle.placement_for("CAT")
        dog = self.session.puzzle.placement_for("DOG")

        self.assertEqual(self.session.hint_cells(), set())
        self.session.toggle_hints()
        self.assertEqual(self.session.hint_cells(), {cat.start, dog.start})

        self.session.record_found("CAT")
        self.assertEqual(self.session.hint_cells(), {dog.start})
        self.assertEqual(self.session.highlighted_cells(), set(cat.cells()))

    def test_elapsed_seconds(self):
        """Test the timer runs from the new puzzle and stops on completion."""
        self.assertEqual(self.session.elapsed_seconds(), 0.0)

        self.session.new_puzzle("cat")
        started = self.session.started_at
        self.assertEqual(self.session.elapsed_seconds(now=started + 90), 90)

        self.session.record_found("CAT")
        frozen = self.session.elapsed_seconds()
        self.assertEqual(self.session.elapsed_seconds(now=started + 1000), frozen)

    def test_clear(self):
        """Test clear discards everything."""
        self.session.new_puzzle("cat")
        self.session.toggle_hints()
        self.session.clear()

        self.assertIsNone(self.session.puzzle)
        self.assertEqual(self.session.found_words, [])
        self.assertFalse(self.session.show_hints)
        self.assertIsNone(self.store[PUZZLE_KEY])

    def test_state_written_to_store(self):
        """Test puzzle, found words and hints are saved as plain data."""
        self.session.new_puzzle("cat, dog")
        self.session.record_found("DOG")
        self.session.toggle_hints()

        self.assertEqual(self.store[FOUND_WORDS_KEY], ["DOG"])
        self.assertTrue(self.store[SHOW_HINTS_KEY])
        self.assertEqual(self.store[PUZZLE_KEY]['grid'], self.session.puzzle.grid)
        self.assertEqual(
            sorted(self.store[PUZZLE_KEY]['words']), ["CAT", "DOG"]
        )

    def test_load_from_store(self):
        """Test a session restores from a previously written store."""
        self.session.new_puzzle("cat, dog")
        self.session.record_found("CAT")

        restored = GameSession.load(self.store, difficulty="easy")

        self.assertEqual(restored.puzzle.grid, self.session.puzzle.grid)
        self.assertEqual(restored.puzzle.placements, self.session.puzzle.placements)
        self.assertEqual(restored.found_words, ["CAT"])
        self.assertFalse(restored.show_hints)

    def test_load_empty_store(self):
        """Test loading from an empty store gives an empty session."""
        restored = GameSession.load({})

        self.assertIsNone(restored.puzzle)
        self.assertEqual(restored.found_words, [])
        self.assertEqual(restored.progress, (0, 0))
        self.assertEqual(restored.difficulty.name, "medium")

    def test_load_restores_timer_and_tier(self):
        """Test the saved start, stop and tier survive a reload."""
        self.session.new_puzzle("cat")
        self.session.record_found("CAT")

        self.assertEqual(self.store[DIFFICULTY_KEY], "easy")
        self.assertEqual(self.store[STARTED_AT_KEY], self.session.started_at)
        self.assertEqual(self.store[COMPLETED_AT_KEY], self.session.completed_at)

        restored = GameSession.load(self.store)

        self.assertEqual(restored.difficulty.name, "easy")
        self.assertEqual(restored.started_at, self.session.started_at)
        self.assertEqual(restored.completed_at, self.session.completed_at)
        self.assertTrue(restored.is_complete)
        frozen = self.session.elapsed_seconds()
        self.assertEqual(restored.elapsed_seconds(now=restored.started_at + 5000), frozen)

    def test_load_difficulty_argument_wins(self):
        """Test an explicit tier overrides the saved one."""
        self.session.new_puzzle("cat")

        restored = GameSession.load(self.store, difficulty="hard")

        self.assertEqual(restored.difficulty.name, "hard")


if __name__ == '__main__':
    unittest.main()
