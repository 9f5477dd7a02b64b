"""
Translation module - Placeholder-safe translation helpers

This module provides:
- translate_text / translate_pairs: provider calls wrapped with normalize/restore
- TranslationProgress: Progress tracking dataclass
- Validation functions for neutral marker preservation
"""

from autotranslate.translation.progress import TranslationProgress
from autotranslate.translation.validator import (
    find_marker_indexes,
    validate_markers_preserved,
    is_translation_valid,
)
from autotranslate.translation.processor import (
    TranslateFn,
    translate_text,
    translate_pairs,
)
