"""
Delimiter Configuration

A DelimiterConfig is the start/end pair that decides what counts as a
placeholder token ("{name}") and how neutral markers ("{0}") are written.
It is a plain immutable value: build one when the configuration is loaded and
pass it to every normalize/restore call of a batch.
"""

import re
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Optional

DEFAULT_START_DELIMITER = "{"
DEFAULT_END_DELIMITER = "}"

# Longest index a neutral marker can carry
MAX_MARKER_DIGITS = 9


@lru_cache(maxsize=32)
def _compile_token_pattern(start: str, end: str) -> re.Pattern:
    # Non-greedy so "{a}{b}" yields two tokens, not one
    return re.compile(re.escape(start) + r"(.*?)" + re.escape(end))


@lru_cache(maxsize=32)
def _compile_marker_pattern(start: str, end: str) -> re.Pattern:
    # Canonical indexes only: "{05}" and over-long digit runs are not markers
    digits = r"(0|[1-9][0-9]{0,%d})" % (MAX_MARKER_DIGITS - 1)
    return re.compile(re.escape(start) + digits + re.escape(end))


@dataclass(frozen=True)
class DelimiterConfig:
    """Start and end delimiters of placeholder tokens."""
    start: str = DEFAULT_START_DELIMITER
    end: str = DEFAULT_END_DELIMITER

    def with_start(self, value: Optional[str]) -> "DelimiterConfig":
        """Return a copy using value as start delimiter. Empty values keep the current one."""
        if not value:
            return self
        return replace(self, start=value)

    def with_end(self, value: Optional[str]) -> "DelimiterConfig":
        """Return a copy using value as end delimiter. Empty values keep the current one."""
        if not value:
            return self
        return replace(self, end=value)

    @property
    def is_usable(self) -> bool:
        """False when either delimiter is empty; such a pair matches nothing."""
        return bool(self.start) and bool(self.end)

    def marker(self, index: int) -> str:
        """
        Build the neutral marker for a token index.

        Example:
            >>> DelimiterConfig().marker(2)
            '{2}'
        """
        return f"{self.start}{index}{self.end}"

    @property
    def token_pattern(self) -> re.Pattern:
        """Pattern matching start + shortest span + end."""
        return _compile_token_pattern(self.start, self.end)

    @property
    def marker_pattern(self) -> re.Pattern:
        """Pattern matching start + canonical index + end. Group 1 holds the digits."""
        return _compile_marker_pattern(self.start, self.end)


DEFAULT_DELIMITERS = DelimiterConfig()
