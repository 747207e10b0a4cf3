#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word Search Generator

Builds word search puzzles:
1. Words from the command line, a YAML config, or a theme (preset or AI)
2. Input normalized and bounded for the difficulty tier
3. Randomized placement with bounded retries per word
4. SVG puzzle and answer pages plus a plain-text grid

Usage:
    # Words on the command line:
    python word_search.py --words "cat, dog, bird" --difficulty easy

    # Theme words:
    python word_search.py --theme "Space Exploration" --difficulty hard

    # With YAML configuration:
    python word_search.py --config puzzle.yaml
"""

import logging
import os
import random
import re
import sys
import time
from typing import Dict, List, Optional

from ai_limiter import AICallbackLimiter
from ai_word_generator import ThemeWordGenerator
from config import (
    WordSearchConfig, create_argument_parser, load_config,
    discover_api_key, get_model, ConfigValidationError
)
from difficulty import get_difficulty_config
from logging_config import setup_logging
from models import Puzzle
from puzzle_generator import PuzzleGenerator
from svg_renderer import SVGRenderer
from word_input import prepare_words


class WordSearchBuilder:
    """
    Word search puzzle builder.

    Workflow:
    1. Resolve the word list (explicit words or theme words)
    2. Prepare words for the difficulty tier
    3. Generate the grid
    4. Render the requested output formats
    """

    def __init__(self, config: WordSearchConfig):
        """
        Initialize the builder.

        Args:
            config: WordSearchConfig instance with all settings
        """
        self.config = config
        self.start_time = time.time()
        self.difficulty = get_difficulty_config(config.difficulty)

        self.log_file_path = setup_logging(
            output_dir=config.output.directory,
            log_level=config.output.log_level,
            log_file_prefix=config.output.log_file_prefix,
            enable_console=config.output.enable_console_logging,
        )
        self.logger = logging.getLogger(__name__)
        self.logger.info(f"Initialized WordSearchBuilder, difficulty: {self.difficulty.name}")
        self.logger.debug(f"Log file: {self.log_file_path}")

        self.limiter = AICallbackLimiter(max_total=config.ai.max_ai_callbacks)
        api_key = None if config.ai.no_ai else discover_api_key(config)
        self.theme_words = ThemeWordGenerator(
            api_key=api_key,
            model=get_model(config),
            limiter=self.limiter,
            logger=self.logger,
        )

        rng = random.Random(config.seed) if config.seed is not None else None
        self.generator = PuzzleGenerator(rng=rng)
        self.renderer = SVGRenderer()
        self.puzzle: Optional[Puzzle] = None

    def build(self) -> Optional[Dict[str, str]]:
        """
        Build a puzzle and write its output files.

        Returns:
            Dict of output name to file path, or None if no usable words
        """
        self.logger.info("=" * 60)
        self.logger.info("WORD SEARCH GENERATOR")
        self.logger.info("=" * 60)

        self.logger.info("Step 1: Building word list...")
        raw_words = self._resolve_words()
        words = prepare_words(raw_words, self.difficulty)
        if not words:
            self.logger.error("   X No usable words (letters A-Z, "
                              f"at most {self.difficulty.max_word_length} long)")
            return None
        skipped = len(raw_words) - len(words)
        self.logger.info(f"   - {len(words)} words: {', '.join(words)}")
        if skipped > 0:
            self.logger.info(f"   - {skipped} entries skipped (empty, too long, duplicate or over the limit)")

        self.logger.info("Step 2: Placing words...")
        self.puzzle = self.generator.generate(words, self.difficulty)
        stats = self.generator.stats
        self.logger.info(f"   - Grid: {self.puzzle.size}x{self.puzzle.size}")
        self.logger.info(f"   - Placed {stats['placed']}/{len(words)} words in {stats['trials']} trials")

        self.logger.info("Step 3: Rendering output...")
        output_files = self._render_output(self.puzzle)

        elapsed = time.time() - self.start_time
        self.logger.info("=" * 60)
        self.logger.info("GENERATION COMPLETE!")
        self.logger.info("=" * 60)
        for name, path in output_files.items():
            self.logger.info(f"   {name}: {path}")
        if self.theme_words.is_available():
            ai_stats = self.theme_words.get_stats()
            self.logger.info(f"AI calls: {ai_stats['api_calls']}, tokens: {ai_stats['tokens_used']}")
        self.logger.info(f"Generation time: {elapsed:.2f} seconds")

        return output_files

    def _resolve_words(self) -> List[str]:
        if self.config.words:
            return list(self.config.words)

        theme = self.config.theme or ""
        self.logger.info(f"   - Using theme: {theme}")
        return self.theme_words.generate_theme_words(
            theme,
            count=self.difficulty.max_word_count,
            max_length=self.difficulty.max_word_length,
        )

    def _base_name(self) -> str:
        source = self.config.theme or self.config.title
        slug = re.sub(r'[^a-z0-9]+', '_', source.lower()).strip('_')
        return (slug or "word_search")[:30]

    def _render_output(self, puzzle: Puzzle) -> Dict[str, str]:
        """Write each requested format into the output directory."""
        os.makedirs(self.config.output.directory, exist_ok=True)
        base = os.path.join(self.config.output.directory, self._base_name())
        files: Dict[str, str] = {}

        for fmt in self.config.output.formats:
            if fmt == "svg_puzzle":
                path = f"{base}_puzzle.svg"
                svg = self.renderer.render(
                    puzzle, hints=self.config.show_hints, title=self.config.title
                )
                self.renderer.save(svg, path)
            elif fmt == "svg_solution":
                path = f"{base}_solution.svg"
                svg = self.renderer.render(
                    puzzle, show_solution=True, title=f"{self.config.title} - Answers"
                )
                self.renderer.save(svg, path)
            elif fmt == "text":
                path = f"{base}.txt"
                with open(path, 'w', encoding='utf-8') as f:
                    f.write(f"{self.config.title}\n\n")
                    f.write(puzzle.to_string())
                    f.write("\n\nWords: " + ", ".join(puzzle.placed_words) + "\n")
            else:
                self.logger.warning(f"Unknown output format skipped: {fmt}")
                continue
            files[fmt] = path

        return files


def main():
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args()

    try:
        config = load_config(args)

        if args.dry_run:
            print("Configuration valid:")
            print(f"  Words: {', '.join(config.words) or '(from theme)'}")
            print(f"  Theme: {config.theme}")
            print(f"  Difficulty: {config.difficulty}")
            print(f"  Formats: {', '.join(config.output.formats)}")
            print(f"  Output Directory: {config.output.directory}")
            return

        builder = WordSearchBuilder(config)
        if builder.build() is None:
            sys.exit(1)

        print()
        print(builder.puzzle.to_string())

    except ConfigValidationError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGeneration cancelled.")
        sys.exit(0)


if __name__ == "__main__":
    main()
