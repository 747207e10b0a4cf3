# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
AI call limiter for theme word generation.

Caps how many Claude requests a run may make, in total and per request
type, and keeps the counters reported in the end-of-run summary.
"""

import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class AICallbackLimiter:
    """
    Tracks and enforces AI call limits.

    Check can_call() before every request and record_call() after it,
    whether or not the request succeeded.

    Usage:
        limiter = AICallbackLimiter(max_total=5, limits={'theme_word_list': 3})

        if limiter.can_call('theme_word_list'):
            words = ask_claude(theme)
            limiter.record_call('theme_word_list', tokens_used=420)
        else:
            words = preset_words(theme)
    """
    max_total: int = 10
    limits: Dict[str, int] = field(default_factory=dict)
    counts: Counter = field(default_factory=Counter)
    total_calls: int = 0
    total_tokens: int = 0
    failed_calls: int = 0
    last_call_at: Optional[float] = None
    start_time: float = field(default_factory=time.time)

    def _type_limit(self, request_type: str) -> int:
        return self.limits.get(request_type, self.max_total)

    def can_call(self, request_type: str) -> bool:
        """True while neither the overall nor the per-type budget is spent."""
        return self.get_remaining(request_type) > 0

    def record_call(
        self,
        request_type: str,
        tokens_used: int = 0,
        success: bool = True
    ) -> None:
        self.counts[request_type] += 1
        self.total_calls += 1
        self.total_tokens += tokens_used
        if not success:
            self.failed_calls += 1
        self.last_call_at = time.time()

    def get_remaining(self, request_type: Optional[str] = None) -> int:
        """Remaining calls allowed, overall or for one request type."""
        remaining = max(0, self.max_total - self.total_calls)
        if request_type is None:
            return remaining
        type_remaining = self._type_limit(request_type) - self.counts[request_type]
        return max(0, min(type_remaining, remaining))

    def is_exhausted(self) -> bool:
        return self.total_calls >= self.max_total

    def get_stats(self) -> Dict[str, Any]:
        """Usage statistics for logging."""
        if self.total_calls:
            success_rate = (self.total_calls - self.failed_calls) / self.total_calls
        else:
            success_rate = 1.0
        return {
            'total_calls': self.total_calls,
            'total_tokens': self.total_tokens,
            'failed_calls': self.failed_calls,
            'remaining_calls': self.get_remaining(),
            'calls_by_type': dict(self.counts),
            'elapsed_seconds': time.time() - self.start_time,
            'success_rate': success_rate,
        }

    def reset(self) -> None:
        """Start counting again from zero, keeping the limits."""
        self.counts = Counter()
        self.total_calls = 0
        self.total_tokens = 0
        self.failed_calls = 0
        self.last_call_at = None
        self.start_time = time.time()

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'AICallbackLimiter':
        """Create limiter from an 'ai' configuration mapping."""
        return cls(
            max_total=config.get('max_ai_callbacks', 10),
            limits=dict(config.get('limits') or {}),
        )
