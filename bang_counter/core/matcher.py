"""Keyword matcher: counts words containing a keyword stem.

WHY: Viewers say "bang", "Bang!", "banger", "BANGBANG" and all of them
should count. Matching a word that *contains* the stem, rather than an
exact token, catches inflected and compound forms.

HOW: The default pattern is ``\\b\\w*<stem>\\w*\\b`` compiled with
re.IGNORECASE. Callers may pass their own regex to reuse the engine for
other keyword domains; it is compiled case-insensitively too.

RULES:
- One match per word containing the stem, however often the stem repeats
- Blank keyword raises ConfigError at construction
- has_match(text) is exactly count_occurrences(text) > 0
"""

from __future__ import annotations

import re
from typing import Optional

from bang_counter.config import BangConfig, ConfigError


def stem_pattern(keyword: str) -> str:
    """Regex source matching any word that contains ``keyword``."""
    return r"\b\w*" + re.escape(keyword) + r"\w*\b"


class KeywordMatcher:
    """Case-insensitive matcher for one keyword stem or custom pattern.

    Instances are immutable after construction and safe to share across
    threads.
    """

    def __init__(self, keyword: str, pattern: Optional[str] = None) -> None:
        if not keyword or not keyword.strip():
            raise ConfigError("Keyword must be a non-empty string.")
        self.keyword = keyword.strip()
        source = pattern if pattern is not None else stem_pattern(self.keyword)
        try:
            self._regex = re.compile(source, re.IGNORECASE)
        except re.error as e:
            raise ConfigError("Invalid keyword pattern {!r}: {}".format(source, e)) from e

    @classmethod
    def from_config(cls, config: BangConfig) -> "KeywordMatcher":
        return cls(config.keyword, pattern=config.pattern)

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    def count_occurrences(self, text: str) -> int:
        """Number of keyword words in ``text``.

        ``count_occurrences("That was a BANGER")`` is 1;
        ``count_occurrences("no match here")`` is 0.
        """
        if not text:
            return 0
        return sum(1 for _ in self._regex.finditer(text))

    def has_match(self, text: str) -> bool:
        if not text:
            return False
        return self._regex.search(text) is not None

    def __repr__(self) -> str:
        return "KeywordMatcher({!r}, pattern={!r})".format(self.keyword, self.pattern)
