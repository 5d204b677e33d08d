"""Core configuration settings for resemblance."""

import re
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Union, Pattern, Mapping
from dataclasses import dataclass, field, fields, replace
from enum import Enum

from resemblance.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_N = 3
DEFAULT_CHARACTER_REMOVAL_PATTERN = r"[^a-zA-Z0-9 ]"

PatternLike = Union[str, Pattern[str]]

class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

class EvaluationMethod(Enum):
    """Tokenization granularity used to build shingles."""
    NGRAPH = "ngraph"   # one token per character
    NGRAM = "ngram"     # one token per whitespace-delimited word

    @property
    def default_token_separator(self) -> str:
        if self is EvaluationMethod.NGRAM:
            return r"\s+"
        return r"\s*"

    @classmethod
    def coerce(cls, value: Union[str, "EvaluationMethod"]) -> "EvaluationMethod":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown evaluation method: {value}",
                config_field="evaluation_method"
            ).add_suggestion(f"Use one of: {[m.value for m in cls]}") from e


def _compile(pattern: PatternLike, config_field: str) -> Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except (re.error, TypeError) as e:
        raise ConfigurationError(
            f"Invalid regular expression: {pattern!r} ({e})",
            config_field=config_field
        ) from e


@dataclass(frozen=True)
class ShingleOptions:
    """Tokenization and scoring options shared by every shingle set in a run."""
    character_removal_pattern: PatternLike = DEFAULT_CHARACTER_REMOVAL_PATTERN
    token_separator: Optional[PatternLike] = None  # None -> evaluation method default
    n: int = DEFAULT_N
    use_variable_n: bool = False
    evaluation_method: EvaluationMethod = EvaluationMethod.NGRAPH
    variable_n: int = 4
    variable_n_text_size: int = 1200
    variable_n_entry_size: int = 900
    strict: bool = False

    def __post_init__(self):
        object.__setattr__(
            self, "evaluation_method", EvaluationMethod.coerce(self.evaluation_method)
        )

    @property
    def removal_regex(self) -> Pattern[str]:
        return _compile(self.character_removal_pattern, "character_removal_pattern")

    @property
    def separator_regex(self) -> Pattern[str]:
        separator = self.token_separator
        if separator is None:
            separator = self.evaluation_method.default_token_separator
        return _compile(separator, "token_separator")

    def validate(self) -> None:
        """Validate shingle options."""
        for name in ("n", "variable_n"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(
                    f"{name} must be a positive integer, got {value!r}",
                    config_field=f"shingles.{name}"
                )

        for name in ("variable_n_text_size", "variable_n_entry_size"):
            if getattr(self, name) < 0:
                raise ConfigurationError(
                    f"{name} must be non-negative",
                    config_field=f"shingles.{name}"
                )

        # compile eagerly so bad patterns fail here rather than mid-run
        self.removal_regex
        self.separator_regex

    def with_n(self, n: int) -> "ShingleOptions":
        return replace(self, n=n)

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "ShingleOptions":
        """Build options from a plain dict such as ``{"n": 4, "use_variable_n": True}``."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(
                f"Unrecognized option(s): {', '.join(unknown)}",
                config_field="options"
            ).add_suggestion(f"Recognized options: {', '.join(sorted(known))}")

        built = cls(**dict(options))
        built.validate()
        return built


@dataclass
class ClusteringSettings:
    """Clustering-related configuration."""
    cluster_count: int = 5
    r_threshold: float = 0.2
    random_state: Optional[int] = 0
    n_init: int = 10

    def validate(self) -> None:
        """Validate clustering settings."""
        if self.cluster_count <= 0:
            raise ConfigurationError(
                "cluster_count must be positive",
                config_field="clustering.cluster_count"
            )

        if not 0.0 <= self.r_threshold <= 1.0:
            raise ConfigurationError(
                f"r_threshold must be within [0, 1], got {self.r_threshold}",
                config_field="clustering.r_threshold"
            )

        if self.n_init <= 0:
            raise ConfigurationError(
                "n_init must be positive",
                config_field="clustering.n_init"
            )

@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: LogLevel = LogLevel.WARNING
    log_dir: Optional[Path] = None
    console_output: bool = True

    def validate(self) -> None:
        """Validate logging settings."""
        if self.log_dir and self.log_dir.exists() and not self.log_dir.is_dir():
            raise ConfigurationError(
                f"Log path is not a directory: {self.log_dir}",
                config_field="logging.log_dir"
            ).add_suggestion("Point --log-dir at a directory")

@dataclass
class Settings:
    """Main configuration settings for resemblance."""

    shingles: ShingleOptions = field(default_factory=lambda: ShingleOptions(use_variable_n=True))
    clustering: ClusteringSettings = field(default_factory=ClusteringSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    # Runtime settings
    corpus_path: Optional[Path] = None
    debug_mode: bool = False
    show_progress: bool = True

    def validate(self) -> None:
        """Validate all configuration settings."""
        try:
            self.shingles.validate()
            self.clustering.validate()
            self.logging.validate()
            self._validate_corpus_path()

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Configuration validation failed: {str(e)}"
            ) from e

    def _validate_corpus_path(self) -> None:
        if self.corpus_path is None:
            raise ConfigurationError(
                "A corpus file must be specified",
                config_field="corpus_path"
            ).add_suggestion("Pass the path to a YAML file mapping names to texts")

        if not self.corpus_path.is_file():
            raise ConfigurationError(
                f"Corpus file does not exist: {self.corpus_path}",
                config_field="corpus_path"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for debugging."""
        return {
            'shingles': {
                'n': self.shingles.n,
                'evaluation_method': self.shingles.evaluation_method.value,
                'use_variable_n': self.shingles.use_variable_n,
                'strict': self.shingles.strict,
            },
            'clustering': {
                'cluster_count': self.clustering.cluster_count,
                'r_threshold': self.clustering.r_threshold,
                'random_state': self.clustering.random_state,
            },
            'runtime': {
                'corpus_path': str(self.corpus_path) if self.corpus_path else None,
                'debug_mode': self.debug_mode,
                'show_progress': self.show_progress,
            }
        }
