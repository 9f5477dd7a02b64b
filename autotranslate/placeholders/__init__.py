"""
Placeholders module - Token extraction and restoration

This module provides:
- DelimiterConfig: start/end delimiter pair
- normalize: replace tokens with neutral markers before translation
- restore: put the original tokens back after translation
"""

from autotranslate.placeholders.delimiters import (
    DEFAULT_DELIMITERS,
    DEFAULT_END_DELIMITER,
    DEFAULT_START_DELIMITER,
    DelimiterConfig,
)
from autotranslate.placeholders.normalizer import NormalizationResult, normalize
from autotranslate.placeholders.restorer import restore
