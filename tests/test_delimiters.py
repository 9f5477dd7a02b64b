"""
Unit tests for the delimiter configuration
"""
import dataclasses

import pytest

from autotranslate.placeholders import DEFAULT_DELIMITERS, DelimiterConfig


class TestDelimiterConfig:
    """Test the delimiter value object"""

    def test_defaults_are_curly_braces(self):
        assert DEFAULT_DELIMITERS.start == "{"
        assert DEFAULT_DELIMITERS.end == "}"

    def test_marker_format(self):
        """Neutral markers are start + index + end"""
        assert DelimiterConfig().marker(0) == "{0}"
        assert DelimiterConfig().marker(12) == "{12}"
        assert DelimiterConfig("[[", "]]").marker(3) == "[[3]]"

    def test_with_start_and_end_return_copies(self):
        custom = DEFAULT_DELIMITERS.with_start("[[").with_end("]]")
        assert custom == DelimiterConfig("[[", "]]")
        assert DEFAULT_DELIMITERS == DelimiterConfig("{", "}")

    def test_empty_values_keep_previous_delimiter(self):
        """Only supplied values override the current pair"""
        custom = DelimiterConfig("[[", "]]")
        assert custom.with_start("") is custom
        assert custom.with_end(None) is custom

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_DELIMITERS.start = "<"

    def test_patterns_are_cached_per_pair(self):
        assert DelimiterConfig("[[", "]]").token_pattern is DelimiterConfig("[[", "]]").token_pattern
        assert DelimiterConfig().marker_pattern is DEFAULT_DELIMITERS.marker_pattern

    def test_regex_characters_are_literal(self):
        """Delimiters are escaped before building patterns"""
        delimiters = DelimiterConfig("$(", ")")
        assert delimiters.token_pattern.findall("a $(x) b (y) c") == ["x"]
        assert delimiters.marker_pattern.findall("$(0) and (1)") == ["0"]
