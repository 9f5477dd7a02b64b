"""
auto-translate-json placeholder engine

Prepares strings containing named placeholders ("{name}") for machine
translation and restores the placeholders afterwards.
"""

from autotranslate.placeholders import (
    DEFAULT_DELIMITERS,
    DelimiterConfig,
    NormalizationResult,
    normalize,
    restore,
)
from autotranslate.exceptions import TranslationError
from autotranslate.translation import TranslationProgress, translate_pairs, translate_text

__version__ = "1.0.0"

__all__ = [
    'DEFAULT_DELIMITERS',
    'DelimiterConfig',
    'NormalizationResult',
    'TranslationError',
    'TranslationProgress',
    'normalize',
    'restore',
    'translate_pairs',
    'translate_text',
]
