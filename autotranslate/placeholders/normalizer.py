"""
Token Normalizer

Replaces delimiter-wrapped tokens with positional neutral markers before a
string is sent to a translation provider:

    "Hello {name}, you have {count} messages"
    -> markers ["{name}", "{count}"], "Hello {0}, you have {1} messages"
"""

from typing import List, NamedTuple

from autotranslate.logger import get_logger
from autotranslate.placeholders.delimiters import DEFAULT_DELIMITERS, DelimiterConfig

logger = get_logger(__name__)


class NormalizationResult(NamedTuple):
    """Original tokens (index = marker number) and the translation-safe text."""
    markers: List[str]
    normalized_text: str


def normalize(text: str, delimiters: DelimiterConfig = DEFAULT_DELIMITERS) -> NormalizationResult:
    """
    Replace every token in text with a neutral marker.

    Tokens are numbered from 0 in order of appearance. Identical tokens are
    recorded once per occurrence. Unbalanced delimiters are left as they are, and
    a pair with an empty delimiter matches nothing.

    Args:
        text: Source text
        delimiters: Delimiter pair defining tokens and markers

    Returns:
        NormalizationResult(markers, normalized_text)

    Example:
        >>> normalize("{x} plus {x}")
        NormalizationResult(markers=['{x}', '{x}'], normalized_text='{0} plus {1}')
    """
    if not delimiters.is_usable:
        return NormalizationResult([], text)

    markers: List[str] = []

    def _to_marker(match) -> str:
        markers.append(match.group(0))
        return delimiters.marker(len(markers) - 1)

    # One pass over the match spans: each occurrence gets exactly one marker
    normalized_text = delimiters.token_pattern.sub(_to_marker, text)

    if markers:
        logger.debug(f"Replaced {len(markers)} tokens with markers: {text[:50]}... -> {normalized_text[:50]}...")

    return NormalizationResult(markers, normalized_text)
