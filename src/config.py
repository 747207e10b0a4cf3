# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for the word search generator.

Puzzle, output and AI settings come from an optional YAML file and the
command line; command-line values win where both set something.
"""

import argparse
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import yaml

from difficulty import VALID_DIFFICULTIES
from word_input import split_word_text


# Default model for AI operations
DEFAULT_MODEL = "claude-sonnet-4-20250514"

VALID_OUTPUT_FORMATS = ["svg_puzzle", "svg_solution", "text"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class OutputConfig:
    """Configuration for output."""
    directory: str = "./output"
    formats: List[str] = field(default_factory=lambda: [
        "svg_puzzle", "svg_solution", "text"
    ])
    log_level: str = "INFO"
    log_file_prefix: str = "word_search"
    enable_console_logging: bool = True


@dataclass
class AIConfig:
    """Configuration for AI theme word generation."""
    model: Optional[str] = None
    api_key: Optional[str] = None
    api_key_env: str = "ANTHROPIC_API_KEY"
    model_env: str = "ANTHROPIC_MODEL"
    max_ai_callbacks: int = 5
    no_ai: bool = False


@dataclass
class WordSearchConfig:
    """Complete configuration for puzzle generation."""
    # Puzzle settings
    words: List[str] = field(default_factory=list)
    theme: Optional[str] = None
    difficulty: str = "medium"
    title: str = "Word Search"
    show_hints: bool = False
    seed: Optional[int] = None

    # Sub-configurations
    output: OutputConfig = field(default_factory=OutputConfig)
    ai: AIConfig = field(default_factory=AIConfig)

    # Dotted names of settings given explicitly on the command line
    cli_overrides: Set[str] = field(default_factory=set, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Convert dicts to dataclass instances and word text to a list."""
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)
        if isinstance(self.ai, dict):
            self.ai = AIConfig(**self.ai)
        if isinstance(self.words, str):
            self.words = [w.strip() for w in split_word_text(self.words)]

    @classmethod
    def from_yaml(cls, path: str) -> 'WordSearchConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            WordSearchConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"No such config file: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Could not parse {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"{path} must hold a mapping of settings, got {type(data).__name__}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'WordSearchConfig':
        """Create WordSearchConfig from dictionary."""
        puzzle_data = data.get('puzzle', {}) or {}

        try:
            config = cls(
                words=puzzle_data.get('words') or [],
                theme=puzzle_data.get('theme'),
                difficulty=str(puzzle_data.get('difficulty', cls.difficulty)),
                title=puzzle_data.get('title', cls.title),
                show_hints=bool(puzzle_data.get('show_hints', cls.show_hints)),
                seed=puzzle_data.get('seed'),
            )
            if 'output' in data:
                config.output = OutputConfig(**{**asdict(config.output), **data['output']})
            if 'ai' in data:
                config.ai = AIConfig(**{**asdict(config.ai), **data['ai']})
        except TypeError as e:
            raise ConfigValidationError(f"Unknown configuration key: {e}")

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'WordSearchConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            WordSearchConfig instance
        """
        config = cls()

        if getattr(args, 'words', None):
            config.words = [w.strip() for w in split_word_text(args.words)]
        if getattr(args, 'theme', None):
            config.theme = args.theme
        if getattr(args, 'difficulty', None):
            config.difficulty = args.difficulty
            config.cli_overrides.add("difficulty")
        if getattr(args, 'title', None):
            config.title = args.title
            config.cli_overrides.add("title")
        if getattr(args, 'hints', False):
            config.show_hints = True
        if getattr(args, 'seed', None) is not None:
            config.seed = args.seed
        if getattr(args, 'output', None):
            config.output.directory = args.output
            config.cli_overrides.add("output.directory")
        if getattr(args, 'format', None):
            config.output.formats = [f.strip() for f in args.format.split(',')]
            config.cli_overrides.add("output.formats")
        if getattr(args, 'verbose', False):
            config.output.log_level = "DEBUG"
            config.cli_overrides.add("output.log_level")
        if getattr(args, 'api_key', None):
            config.ai.api_key = args.api_key
        if getattr(args, 'model', None):
            config.ai.model = args.model
        if getattr(args, 'max_ai_callbacks', None) is not None:
            config.ai.max_ai_callbacks = args.max_ai_callbacks
            config.cli_overrides.add("ai.max_ai_callbacks")
        if getattr(args, 'no_ai', False):
            config.ai.no_ai = True

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'WordSearchConfig',
        cli_config: 'WordSearchConfig'
    ) -> 'WordSearchConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments

        Returns:
            Merged WordSearchConfig instance
        """
        merged = WordSearchConfig(
            words=list(yaml_config.words),
            theme=yaml_config.theme,
            difficulty=yaml_config.difficulty,
            title=yaml_config.title,
            show_hints=yaml_config.show_hints,
            seed=yaml_config.seed,
            output=OutputConfig(**asdict(yaml_config.output)),
            ai=AIConfig(**asdict(yaml_config.ai)),
        )

        # Override with CLI values given explicitly or differing from the defaults
        default = cls()
        given = cli_config.cli_overrides

        if cli_config.words:
            merged.words = list(cli_config.words)
        if cli_config.theme:
            merged.theme = cli_config.theme
        if "difficulty" in given or cli_config.difficulty != default.difficulty:
            merged.difficulty = cli_config.difficulty
        if "title" in given or cli_config.title != default.title:
            merged.title = cli_config.title
        if cli_config.show_hints:
            merged.show_hints = True
        if cli_config.seed is not None:
            merged.seed = cli_config.seed
        if ("output.directory" in given
                or cli_config.output.directory != default.output.directory):
            merged.output.directory = cli_config.output.directory
        if ("output.formats" in given
                or cli_config.output.formats != default.output.formats):
            merged.output.formats = list(cli_config.output.formats)
        if ("output.log_level" in given
                or cli_config.output.log_level != default.output.log_level):
            merged.output.log_level = cli_config.output.log_level
        if cli_config.ai.api_key:
            merged.ai.api_key = cli_config.ai.api_key
        if cli_config.ai.model:
            merged.ai.model = cli_config.ai.model
        if ("ai.max_ai_callbacks" in given
                or cli_config.ai.max_ai_callbacks != default.ai.max_ai_callbacks):
            merged.ai.max_ai_callbacks = cli_config.ai.max_ai_callbacks
        if cli_config.ai.no_ai:
            merged.ai.no_ai = True

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.words and not (self.theme and self.theme.strip()):
            errors.append("Either words or a theme must be given")

        if self.difficulty.lower() not in VALID_DIFFICULTIES:
            errors.append(
                f"Invalid difficulty '{self.difficulty}'. "
                f"Must be one of: {VALID_DIFFICULTIES}"
            )

        if self.seed is not None and not isinstance(self.seed, int):
            errors.append(f"Seed must be an integer, got {self.seed!r}")

        for fmt in self.output.formats:
            if fmt not in VALID_OUTPUT_FORMATS:
                errors.append(
                    f"Invalid output format '{fmt}'. "
                    f"Must be one of: {VALID_OUTPUT_FORMATS}"
                )

        if self.output.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.output.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        if self.ai.max_ai_callbacks < 0:
            errors.append("max_ai_callbacks must be non-negative")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'puzzle': {
                'words': list(self.words),
                'theme': self.theme,
                'difficulty': self.difficulty,
                'title': self.title,
                'show_hints': self.show_hints,
                'seed': self.seed,
            },
            'output': asdict(self.output),
            'ai': asdict(self.ai),
        }


def discover_api_key(config: WordSearchConfig) -> Optional[str]:
    """
    API key for theme word generation: the configured key (CLI or YAML)
    first, then the environment variable named by ai.api_key_env.

    Returns:
        API key string or None if neither is set
    """
    if config.ai.api_key and config.ai.api_key != "null":
        return config.ai.api_key

    return os.environ.get(config.ai.api_key_env or "ANTHROPIC_API_KEY") or None


def get_model(config: WordSearchConfig) -> str:
    """
    Get AI model from config with fallback chain.

    Priority order:
    1. Config ai.model field (from CLI or config file)
    2. Environment variable (ANTHROPIC_MODEL or custom)
    3. Default model
    """
    if config.ai.model and config.ai.model != "null":
        return config.ai.model

    env_var = config.ai.model_env or "ANTHROPIC_MODEL"
    if os.environ.get(env_var):
        return os.environ[env_var]

    return DEFAULT_MODEL


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Generate word search puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Words on the command line
  word-search --words "cat, dog, bird" --difficulty easy

  # Preset or AI-generated theme
  word-search --theme Animals
  word-search --theme "Space Exploration" --difficulty hard

  # YAML configuration, CLI arguments override it
  word-search --config puzzle.yaml --difficulty hard
"""
    )

    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Puzzle settings
    parser.add_argument(
        "--words", "-w",
        metavar="TEXT",
        help="Comma-separated words to hide"
    )
    parser.add_argument(
        "--theme", "-t",
        metavar="TEXT",
        help="Theme to take words from when --words is not given"
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=VALID_DIFFICULTIES,
        help="Difficulty level (default: medium)"
    )
    parser.add_argument(
        "--title",
        metavar="TEXT",
        help="Puzzle title"
    )
    parser.add_argument(
        "--hints",
        action="store_true",
        help="Mark the first letter of each word on the puzzle page"
    )
    parser.add_argument(
        "--seed",
        type=int,
        metavar="INT",
        help="Random seed for a reproducible grid"
    )

    # Output settings
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Output directory"
    )
    parser.add_argument(
        "--format",
        metavar="FORMATS",
        help=f"Comma-separated output formats ({', '.join(VALID_OUTPUT_FORMATS)})"
    )

    # AI settings
    parser.add_argument(
        "--api-key",
        metavar="KEY",
        help="Anthropic API key"
    )
    parser.add_argument(
        "--model",
        metavar="MODEL",
        help="AI model to use"
    )
    parser.add_argument(
        "--max-ai-callbacks",
        type=int,
        metavar="INT",
        help="Maximum AI API calls allowed (default: 5)"
    )
    parser.add_argument(
        "--no-ai",
        action="store_true",
        help="Never call the AI; unknown themes use fallback words"
    )

    # Other options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config without generating"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> WordSearchConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved WordSearchConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = WordSearchConfig.from_yaml(args.config)

    cli_config = WordSearchConfig.from_args(args)

    if yaml_config:
        config = WordSearchConfig.merge(yaml_config, cli_config)
    else:
        config = cli_config

    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config
