# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Theme word lists for word search puzzles.

Preset themes cover the common cases without any network access. Other
themes are sent to the Anthropic Claude API, with call limiting, caching
and a generic fallback list when AI is unavailable or fails.
"""

import json
import logging
import os
import re
from typing import Dict, List, Optional, Tuple

import anthropic

from ai_limiter import AICallbackLimiter


THEME_PROMPT_TYPE = 'theme_word_list'

PRESET_THEMES: Dict[str, List[str]] = {
    'Animals': ['CAT', 'DOG', 'BIRD', 'FISH', 'LION'],
    'Colors': ['RED', 'BLUE', 'GREEN', 'PINK', 'BROWN'],
    'Food': ['PIZZA', 'APPLE', 'BREAD', 'CAKE', 'SOUP'],
    'Family': ['MOM', 'DAD', 'BABY', 'UNCLE', 'AUNT'],
}

FALLBACK_WORDS = [
    'PUZZLE', 'SEARCH', 'LETTER', 'HIDDEN', 'GRID', 'WORD', 'FIND', 'CLUE',
]


def find_preset_theme(theme: str) -> Optional[str]:
    """Name of the preset matching a theme, case-insensitively."""
    wanted = theme.strip().lower()
    for name in PRESET_THEMES:
        if name.lower() == wanted:
            return name
    return None


class ThemeWordGenerator:
    """
    Supplies word lists for a theme.

    Features:
    - Built-in preset themes
    - Claude-generated lists for any other theme
    - Per-theme caching
    - Call limiting through AICallbackLimiter
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "claude-sonnet-4-20250514",
        limiter: Optional[AICallbackLimiter] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the theme word generator.

        Args:
            api_key: Anthropic API key (or set ANTHROPIC_API_KEY env var)
            model: Claude model to use
            limiter: Optional AICallbackLimiter for tracking limits
            logger: Logger instance (uses module logger if not provided)
        """
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        self.model = model
        self.limiter = limiter or AICallbackLimiter()
        self.logger = logger if logger else logging.getLogger(__name__)

        if self.api_key:
            self.client = anthropic.Anthropic(api_key=self.api_key)
        else:
            self.client = None

        self._theme_cache: Dict[str, List[str]] = {}
        self.stats = {
            "api_calls": 0,
            "cache_hits": 0,
            "words_generated": 0,
            "tokens_used": 0,
        }

    def is_available(self) -> bool:
        """Check if AI generation is available."""
        return self.client is not None

    def generate_theme_words(
        self,
        theme: str,
        count: int = 8,
        max_length: int = 10
    ) -> List[str]:
        """
        Get uppercase words for a theme.

        Args:
            theme: Theme name, e.g. "Animals" or "Space Exploration"
            count: Number of words wanted
            max_length: Longest word allowed

        Returns:
            Up to count words
        """
        preset = find_preset_theme(theme)
        if preset:
            return self._bounded(PRESET_THEMES[preset], count, max_length)

        cache_key = f"{theme.strip().lower()}:{count}:{max_length}"
        if cache_key in self._theme_cache:
            self.stats["cache_hits"] += 1
            return self._theme_cache[cache_key]

        if not self.client:
            self.logger.info(f"AI unavailable, using fallback words for '{theme}'")
            return self._bounded(FALLBACK_WORDS, count, max_length)

        system_prompt, user_prompt = self._build_theme_prompts(
            theme, count, max_length
        )
        response = self._make_request(system_prompt, user_prompt)
        words = self._parse_word_list_response(response, max_length) if response else []

        if not words:
            self.logger.warning(f"No usable AI words for '{theme}', using fallback")
            return self._bounded(FALLBACK_WORDS, count, max_length)

        words = words[:count]
        self.stats["words_generated"] += len(words)
        self._theme_cache[cache_key] = words
        return words

    def _make_request(self, system_prompt: str, user_prompt: str) -> Optional[str]:
        """
        Make an API request with rate limiting.

        Returns:
            Response text or None if limited/failed
        """
        if not self.limiter.can_call(THEME_PROMPT_TYPE):
            self.logger.warning(f"AI limit reached for {THEME_PROMPT_TYPE}")
            return None

        try:
            self.stats["api_calls"] += 1
            response = self.client.messages.create(
                model=self.model,
                max_tokens=1024,
                temperature=0.7,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}]
            )

            text = response.content[0].text
            tokens = response.usage.input_tokens + response.usage.output_tokens
            self.stats["tokens_used"] += tokens
            self.limiter.record_call(THEME_PROMPT_TYPE, tokens_used=tokens)
            return text

        except anthropic.APIError as e:
            self.logger.error(f"AI request error: {e}", exc_info=True)
            self.limiter.record_call(THEME_PROMPT_TYPE, success=False)
            return None

    def _build_theme_prompts(
        self,
        theme: str,
        count: int,
        max_length: int
    ) -> Tuple[str, str]:
        """Build theme word list prompts."""
        system_prompt = (
            "You write word lists for children's word search puzzles. "
            "Words are common, family-friendly and clearly tied to the theme."
        )

        user_prompt = f"""List {count} words for a word search with the theme: "{theme}"

Requirements:
- Single words of 3 to {max_length} letters
- Letters A-Z only: no spaces, hyphens, digits or accents
- No duplicates

Respond with ONLY a JSON array of strings, no other text:
["ROCKET", "ORBIT", "COMET"]"""

        return system_prompt, user_prompt

    def _parse_word_list_response(self, text: str, max_length: int) -> List[str]:
        """Parse the JSON array from a theme word response."""
        json_match = re.search(r'\[.*\]', text, re.DOTALL)
        if not json_match:
            return []

        try:
            data = json.loads(json_match.group())
        except json.JSONDecodeError:
            self.logger.debug(f"Unparseable AI word list: {text[:200]}")
            return []

        words: List[str] = []
        for item in data:
            if not isinstance(item, str):
                continue
            word = item.strip().upper()
            if word.isascii() and word.isalpha() and len(word) <= max_length:
                if word not in words:
                    words.append(word)
        return words

    def _bounded(self, words: List[str], count: int, max_length: int) -> List[str]:
        return [w for w in words if len(w) <= max_length][:count]

    def get_stats(self) -> Dict:
        """Get usage statistics."""
        stats = self.stats.copy()
        stats['limiter'] = self.limiter.get_stats()
        return stats
