"""
Translation Progress Data Class

Contains the TranslationProgress dataclass for tracking batch translation progress.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class TranslationProgress:
    """Progress information for an ongoing batch translation."""
    source_locale: str
    target_locale: str
    current_item: int
    total_items: int
    current_key: str
    success_count: int = 0
    failure_count: int = 0
    skipped_count: int = 0       # Ignored keys and non-translatable values
    phase: str = "translating"   # "translating", "completed", "cancelled"
    failed_keys: List[str] = field(default_factory=list)
