# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for ai_limiter module."""

import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ai_limiter import AICallbackLimiter


class TestAICallbackLimiter(unittest.TestCase):
    """Tests for AICallbackLimiter class."""

    def test_default_limits(self):
        """Test default limiter limits."""
        limiter = AICallbackLimiter()

        self.assertEqual(limiter.max_total, 10)
        self.assertEqual(limiter.total_calls, 0)
        self.assertEqual(limiter.total_tokens, 0)
        self.assertEqual(limiter.limits, {})

    def test_can_call_within_limit(self):
        """Test can_call returns True when within limits."""
        limiter = AICallbackLimiter(max_total=3)

        self.assertTrue(limiter.can_call('theme_word_list'))

    def test_can_call_at_limit(self):
        """Test can_call returns False when at limit."""
        limiter = AICallbackLimiter(max_total=2)

        limiter.record_call('theme_word_list')
        limiter.record_call('theme_word_list')

        self.assertFalse(limiter.can_call('theme_word_list'))
        self.assertFalse(limiter.can_call('other'))

    def test_can_call_type_limit(self):
        """Test can_call respects type-specific limits."""
        limiter = AICallbackLimiter(max_total=10, limits={'theme_word_list': 1})

        limiter.record_call('theme_word_list')

        self.assertFalse(limiter.can_call('theme_word_list'))
        self.assertTrue(limiter.can_call('other'))

    def test_zero_budget(self):
        """Test a zero budget blocks every call."""
        limiter = AICallbackLimiter(max_total=0)

        self.assertFalse(limiter.can_call('theme_word_list'))
        self.assertTrue(limiter.is_exhausted())

    def test_record_call(self):
        """Test recording calls updates counters."""
        limiter = AICallbackLimiter()

        limiter.record_call('theme_word_list', tokens_used=120)
        limiter.record_call('theme_word_list', tokens_used=80, success=False)

        self.assertEqual(limiter.total_calls, 2)
        self.assertEqual(limiter.total_tokens, 200)
        self.assertEqual(limiter.counts['theme_word_list'], 2)
        self.assertEqual(limiter.failed_calls, 1)
        self.assertIsNotNone(limiter.last_call_at)

    def test_get_remaining(self):
        """Test remaining call counts."""
        limiter = AICallbackLimiter(max_total=5, limits={'theme_word_list': 2})

        limiter.record_call('theme_word_list')

        self.assertEqual(limiter.get_remaining(), 4)
        self.assertEqual(limiter.get_remaining('theme_word_list'), 1)
        self.assertEqual(limiter.get_remaining('other'), 4)

    def test_get_stats(self):
        """Test usage statistics."""
        limiter = AICallbackLimiter(max_total=5)
        limiter.record_call('theme_word_list', tokens_used=50)
        limiter.record_call('theme_word_list', success=False)

        stats = limiter.get_stats()

        self.assertEqual(stats['total_calls'], 2)
        self.assertEqual(stats['total_tokens'], 50)
        self.assertEqual(stats['remaining_calls'], 3)
        self.assertEqual(stats['calls_by_type'], {'theme_word_list': 2})
        self.assertEqual(stats['failed_calls'], 1)
        self.assertAlmostEqual(stats['success_rate'], 0.5)
        self.assertGreaterEqual(stats['elapsed_seconds'], 0)

    def test_success_rate_without_calls(self):
        """Test success rate defaults to 1.0 with no history."""
        self.assertEqual(AICallbackLimiter().get_stats()['success_rate'], 1.0)

    def test_reset(self):
        """Test reset clears all counters."""
        limiter = AICallbackLimiter(max_total=1)
        limiter.record_call('theme_word_list', tokens_used=10)

        limiter.reset()

        self.assertEqual(limiter.total_calls, 0)
        self.assertEqual(limiter.total_tokens, 0)
        self.assertEqual(limiter.failed_calls, 0)
        self.assertIsNone(limiter.last_call_at)
        self.assertTrue(limiter.can_call('theme_word_list'))

    def test_is_exhausted(self):
        """Test is_exhausted flips when total limit is reached."""
        limiter = AICallbackLimiter(max_total=1)

        self.assertFalse(limiter.is_exhausted())
        limiter.record_call('theme_word_list')
        self.assertTrue(limiter.is_exhausted())

    def test_from_config(self):
        """Test creating limiter from an ai config mapping."""
        limiter = AICallbackLimiter.from_config({
            'max_ai_callbacks': 3,
            'limits': {'theme_word_list': 2},
        })

        self.assertEqual(limiter.max_total, 3)
        self.assertEqual(limiter.limits['theme_word_list'], 2)

    def test_from_empty_config(self):
        """Test from_config defaults."""
        limiter = AICallbackLimiter.from_config({})

        self.assertEqual(limiter.max_total, 10)
        self.assertEqual(limiter.limits, {})


if __name__ == '__main__':
    unittest.main()
