"""
Token Restorer

Puts the original tokens back into a translated string. Providers may move,
duplicate or drop markers; whatever survives is restored, anything else is
left alone.
"""

from typing import Sequence

from autotranslate.placeholders.delimiters import DEFAULT_DELIMITERS, DelimiterConfig


def restore(
    markers: Sequence[str],
    translated_text: str,
    delimiters: DelimiterConfig = DEFAULT_DELIMITERS,
) -> str:
    """
    Replace neutral markers with the original tokens.

    Every occurrence of marker i (0 <= i < len(markers)) becomes markers[i].
    Markers outside that range, or written with leading zeros, are passed
    through verbatim. Restored tokens are never substituted again, so a
    source like "{1} {0}" comes back intact.

    Args:
        markers: Original tokens as returned by normalize()
        translated_text: Provider output containing neutral markers
        delimiters: The delimiter pair used for normalize()

    Returns:
        Text with original tokens restored
    """
    if not markers or not delimiters.is_usable:
        return translated_text

    def _to_token(match) -> str:
        index = int(match.group(1))
        if index < len(markers):
            return markers[index]
        return match.group(0)

    return delimiters.marker_pattern.sub(_to_token, translated_text)
