# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word input preparation.

Turns raw user input into the word list the puzzle generator expects:
uppercase A-Z only, no duplicates, bounded by the difficulty tier.
"""

import re
from typing import List, Sequence, Union

from difficulty import DifficultyLike, get_difficulty_config


NON_LETTERS = re.compile(r'[^A-Z]')


def split_word_text(text: str) -> List[str]:
    """Split comma-separated input into raw entries."""
    if not text or not text.strip():
        return []
    return text.split(',')


def normalize_word(raw: str) -> str:
    """Uppercase a raw entry and strip everything outside A-Z."""
    return NON_LETTERS.sub('', raw.strip().upper())


def prepare_words(
    raw: Union[str, Sequence[str]],
    difficulty: DifficultyLike
) -> List[str]:
    """
    Normalize and bound raw words for a difficulty tier.

    Args:
        raw: Comma-separated string or a sequence of entries
        difficulty: Tier whose word count and length limits apply

    Returns:
        Words in input order, first occurrence kept, at most
        max_word_count of them
    """
    config = get_difficulty_config(difficulty)
    entries = split_word_text(raw) if isinstance(raw, str) else list(raw)

    words: List[str] = []
    for entry in entries:
        word = normalize_word(entry)
        if not word or len(word) > config.max_word_length:
            continue
        if word in words:
            continue
        words.append(word)

    return words[:config.max_word_count]
