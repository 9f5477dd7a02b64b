"""
Translation Validation Module

Contains validation functions for checking what a provider did to the
neutral markers:
- Marker preservation checks
- Translation content validation
"""

from typing import List, Optional, Tuple

from autotranslate.placeholders.delimiters import DEFAULT_DELIMITERS, DelimiterConfig


def find_marker_indexes(text: str, delimiters: DelimiterConfig = DEFAULT_DELIMITERS) -> List[int]:
    """
    Find neutral marker indexes in text, in order of appearance.

    Only canonical markers count: "{05}" is not marker 5.

    Example:
        >>> find_marker_indexes("{1} then {0} and {1}")
        [1, 0, 1]
    """
    if not delimiters.is_usable:
        return []
    return [int(match.group(1)) for match in delimiters.marker_pattern.finditer(text)]


def validate_markers_preserved(
    marker_count: int,
    translated_text: str,
    delimiters: DelimiterConfig = DEFAULT_DELIMITERS,
) -> Tuple[bool, Optional[str]]:
    """
    Check that every marker sent to the provider came back, and nothing else.

    Args:
        marker_count: Number of tokens recorded by normalize()
        translated_text: Provider output, before restore()
        delimiters: The delimiter pair used for normalize()

    Returns:
        Tuple of (is_valid, error_reason)
    """
    found = set(find_marker_indexes(translated_text, delimiters))
    expected = set(range(marker_count))

    missing = sorted(expected - found)
    if missing:
        return False, f"markers_lost:{','.join(str(i) for i in missing)}"

    extra = sorted(found - expected)
    if extra:
        return False, f"markers_added:{','.join(str(i) for i in extra)}"

    return True, None


def is_translation_valid(
    source_text: str,
    translated_text: str,
    marker_count: int = 0,
    delimiters: DelimiterConfig = DEFAULT_DELIMITERS,
) -> Tuple[bool, Optional[str]]:
    """
    Validate a provider result before restoration.

    Checks:
    1. Not empty - Translation must contain actual content (unless the source was blank)
    2. Markers - Neutral markers must be preserved

    Returns:
        Tuple of (is_valid: bool, error_reason: Optional[str])
    """
    if not translated_text or not translated_text.strip():
        if source_text and source_text.strip():
            return False, "empty"

    return validate_markers_preserved(marker_count, translated_text or "", delimiters)
