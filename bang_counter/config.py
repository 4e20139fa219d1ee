"""Configuration constants, .env loading, and the validated BangConfig.

WHY: The keyword, dedup window, and overlap threshold are fixed for this
channel but must stay configurable so the same engine can count other
keywords. Centralizing them here keeps defaults in one place and gives
every workflow the same validation.

HOW: python-dotenv loads the .env file on import. Defaults are read from
environment variables. BangConfig is a frozen dataclass that validates
itself in __post_init__; load_config() builds one from the environment
with explicit overrides (typically CLI flags) applied on top.

RULES:
- Blank keyword, negative or non-finite window, or threshold outside [0, 1] raise ConfigError
- A custom regex pattern must compile, otherwise ConfigError
- Non-numeric numeric env values raise ConfigError, not a bare ValueError
- Overrides whose value is None are ignored (flag not given)
"""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv

# BANG_* overrides come from the nearest .env file, if any
load_dotenv()

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_KEYWORD = "bang"
DEFAULT_DEDUP_WINDOW_SECONDS = 5.0
DEFAULT_OVERLAP_THRESHOLD = 0.5
DEFAULT_STORE_PATH = "videos.json"
DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(ValueError):
    """Raised when the keyword pipeline is configured with unusable values."""


@dataclass(frozen=True)
class BangConfig:
    """Validated settings for keyword matching and deduplication.

    WHY: An empty keyword would make every cue match nothing meaningfully,
    and a negative window would silently disable deduplication. Both must
    be caught at the boundary rather than deep in the pipeline.

    RULES:
    - keyword: non-blank stem, matched case-insensitively inside words
    - dedup_window_seconds: finite and >= 0, inclusive proximity window
    - overlap_threshold: in [0, 1], strict lower bound for word overlap
    - pattern: optional regex replacing the default stem pattern
    """

    keyword: str = DEFAULT_KEYWORD
    dedup_window_seconds: float = DEFAULT_DEDUP_WINDOW_SECONDS
    overlap_threshold: float = DEFAULT_OVERLAP_THRESHOLD
    pattern: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.keyword or not self.keyword.strip():
            raise ConfigError("Keyword must be a non-empty string.")
        if not math.isfinite(self.dedup_window_seconds) or self.dedup_window_seconds < 0:
            raise ConfigError(
                "Dedup window must be a finite non-negative number, got {}.".format(self.dedup_window_seconds)
            )
        if not 0 <= self.overlap_threshold <= 1:
            raise ConfigError(
                "Overlap threshold must be between 0 and 1, got {}.".format(self.overlap_threshold)
            )
        if self.pattern is not None:
            try:
                re.compile(self.pattern)
            except re.error as e:
                raise ConfigError("Invalid keyword pattern {!r}: {}".format(self.pattern, e)) from e


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError("{} must be a number, got {!r}.".format(name, raw)) from e


def load_config(**overrides: Any) -> BangConfig:
    """Build a BangConfig from the environment, with overrides applied.

    WHY: The CLI and tests both need a config that respects .env values
    but lets explicit arguments win.

    HOW: Reads BANG_KEYWORD, BANG_DEDUP_WINDOW_SECONDS, BANG_OVERLAP_THRESHOLD
    and BANG_KEYWORD_PATTERN, then replaces any field given in ``overrides``
    with a non-None value.

    Args:
        **overrides: BangConfig field names mapped to values; None is skipped.

    Returns:
        A validated BangConfig.

    Raises:
        ConfigError: If any resulting value is invalid.
    """
    values: dict = {
        "keyword": os.getenv("BANG_KEYWORD", DEFAULT_KEYWORD),
        "dedup_window_seconds": _env_float(
            "BANG_DEDUP_WINDOW_SECONDS", DEFAULT_DEDUP_WINDOW_SECONDS
        ),
        "overlap_threshold": _env_float("BANG_OVERLAP_THRESHOLD", DEFAULT_OVERLAP_THRESHOLD),
        "pattern": os.getenv("BANG_KEYWORD_PATTERN") or None,
    }
    for key, value in overrides.items():
        if key not in values:
            raise ConfigError("Unknown configuration option: {}".format(key))
        if value is not None:
            values[key] = value
    return BangConfig(**values)


def store_path() -> str:
    """Path of the JSON video store (BANG_STORE_PATH, default videos.json)."""
    return os.getenv("BANG_STORE_PATH", DEFAULT_STORE_PATH)


def log_level() -> str:
    return os.getenv("BANG_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
