# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for word_input module."""

import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from word_input import normalize_word, prepare_words, split_word_text


class TestNormalizeWord(unittest.TestCase):
    """Tests for normalize_word."""

    def test_uppercases_and_strips(self):
        """Test letters are uppercased and everything else removed."""
        self.assertEqual(normalize_word("  ice cream "), "ICECREAM")
        self.assertEqual(normalize_word("rock'n'roll"), "ROCKNROLL")
        self.assertEqual(normalize_word("r2-d2"), "RD")

    def test_non_latin_removed(self):
        """Test characters outside A-Z are dropped."""
        self.assertEqual(normalize_word("café"), "CAF")
        self.assertEqual(normalize_word("单词"), "")


class TestSplitWordText(unittest.TestCase):
    """Tests for split_word_text."""

    def test_blank(self):
        """Test blank input gives no entries."""
        self.assertEqual(split_word_text(""), [])
        self.assertEqual(split_word_text("   "), [])

    def test_commas(self):
        """Test entries are split on commas."""
        self.assertEqual(split_word_text("a, b,c"), ["a", " b", "c"])


class TestPrepareWords(unittest.TestCase):
    """Tests for prepare_words."""

    def test_text_input(self):
        """Test comma-separated text is normalized in order."""
        self.assertEqual(
            prepare_words("cat, dog, bird", "easy"), ["CAT", "DOG", "BIRD"]
        )

    def test_sequence_input(self):
        """Test a sequence of entries is accepted."""
        self.assertEqual(prepare_words(["Cat", "dog"], "easy"), ["CAT", "DOG"])

    def test_deduplicates_keeping_first(self):
        """Test duplicates after normalization are removed."""
        self.assertEqual(
            prepare_words("dog, cat, DOG, c-a-t", "medium"), ["DOG", "CAT"]
        )

    def test_drops_empty_and_long_words(self):
        """Test entries that are empty or over the length limit are skipped."""
        words = prepare_words("cat, , 42, elephants", "easy")

        # easy allows at most 8 letters
        self.assertEqual(words, ["CAT"])

    def test_limits_word_count(self):
        """Test only the first max_word_count words are kept."""
        raw = ", ".join(f"w{c}" for c in "abcdefghijklmnop")

        self.assertEqual(len(prepare_words(raw, "easy")), 8)
        self.assertEqual(len(prepare_words(raw, "medium")), 10)
        self.assertEqual(len(prepare_words(raw, "hard")), 14)
        self.assertEqual(prepare_words(raw, "easy")[0], "WA")

    def test_empty(self):
        """Test empty input gives no words."""
        self.assertEqual(prepare_words("", "easy"), [])
        self.assertEqual(prepare_words([], "hard"), [])


if __name__ == '__main__':
    unittest.main()
