"""
Translation Processing Module

Contains functions that wrap a translation provider call with placeholder
protection:
- Single string translation (normalize, translate, restore)
- Sequential key/value translation with progress and graceful fallback

A provider is any callable translate(text, source_locale, target_locale) -> text.
"""

from dataclasses import replace
from typing import Any, Callable, List, Optional, Sequence, Tuple

from autotranslate.exceptions import TranslationError
from autotranslate.logger import get_logger
from autotranslate.placeholders import DEFAULT_DELIMITERS, DelimiterConfig, normalize, restore
from autotranslate.translation.progress import TranslationProgress
from autotranslate.translation.validator import is_translation_valid

logger = get_logger(__name__)

TranslateFn = Callable[[str, str, str], str]


def translate_text(
    text: str,
    translate_fn: TranslateFn,
    source_locale: str,
    target_locale: str,
    delimiters: DelimiterConfig = DEFAULT_DELIMITERS,
) -> str:
    """
    Translate one string without letting the provider see its tokens.

    Args:
        text: Source text, may contain delimiter-wrapped tokens
        translate_fn: Provider callable
        source_locale: Source locale code
        target_locale: Target locale code
        delimiters: Delimiter pair defining tokens

    Returns:
        Translated text with original tokens restored

    Raises:
        TranslationError: If the provider fails or returns no usable text
    """
    markers, normalized_text = normalize(text, delimiters)

    try:
        translated = translate_fn(normalized_text, source_locale, target_locale)
    except TranslationError:
        raise
    except Exception as e:
        raise TranslationError(
            f"Translation provider failed: {e}",
            code="provider_failed",
            details={"source_locale": source_locale, "target_locale": target_locale}
        ) from e

    if not isinstance(translated, str):
        raise TranslationError(
            f"Translation provider returned {type(translated).__name__}, expected str",
            code="invalid_provider_response",
            details={"source_locale": source_locale, "target_locale": target_locale}
        )

    is_valid, reason = is_translation_valid(normalized_text, translated, len(markers), delimiters)
    if reason == "empty":
        raise TranslationError(
            "Translation provider returned empty text",
            code="empty_translation",
            details={"source_locale": source_locale, "target_locale": target_locale}
        )
    if not is_valid:
        # Restoration is best effort: whatever markers survived are put back
        logger.warning(f"Provider changed markers ({reason}): {normalized_text[:50]}... -> {translated[:50]}...")

    return restore(markers, translated, delimiters)


def _snapshot(progress: TranslationProgress) -> TranslationProgress:
    return replace(progress, failed_keys=list(progress.failed_keys))


def _is_translatable(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def translate_pairs(
    pairs: Sequence[Tuple[str, Any]],
    translate_fn: TranslateFn,
    source_locale: str,
    target_locale: str,
    delimiters: DelimiterConfig = DEFAULT_DELIMITERS,
    ignore_prefix: str = "",
    cancel_check: Optional[Callable[[], bool]] = None,
    progress_callback: Optional[Callable[[TranslationProgress], bool]] = None,
) -> List[Tuple[str, Any]]:
    """
    Translate (key, value) pairs sequentially.

    Returns one pair per input pair, same order. Values that fail to
    translate keep their original text (graceful degradation). Keys starting
    with ignore_prefix and values that are not non-blank strings are copied
    untouched.

    Cancellation: when cancel_check() or progress_callback(progress) returns
    True, the remaining pairs are copied untouched.

    Args:
        pairs: List of (key, value) tuples
        translate_fn: Provider callable
        source_locale: Source locale code
        target_locale: Target locale code
        delimiters: Delimiter pair defining tokens
        ignore_prefix: Key prefix of entries that must not be translated
        cancel_check: Optional function to check for cancellation
        progress_callback: Optional callback for progress updates

    Returns:
        List of (key, translated_value) tuples
    """
    results: List[Tuple[str, Any]] = []
    progress = TranslationProgress(
        source_locale=source_locale,
        target_locale=target_locale,
        current_item=0,
        total_items=len(pairs),
        current_key="",
    )

    logger.info(f"Translating {len(pairs)} entries from {source_locale} to {target_locale}")

    for idx, (key, value) in enumerate(pairs):
        # Check for cancellation
        if cancel_check and cancel_check():
            logger.info(f"Translation cancelled at entry {idx + 1}/{len(pairs)}")
            results.extend(pairs[idx:])
            progress.phase = "cancelled"
            break

        if ignore_prefix and key.startswith(ignore_prefix):
            logger.debug(f"Skipping ignored key: {key}")
            results.append((key, value))
            progress.skipped_count += 1
        elif not _is_translatable(value):
            results.append((key, value))
            progress.skipped_count += 1
        else:
            try:
                translated = translate_text(value, translate_fn, source_locale, target_locale, delimiters)
                results.append((key, translated))
                progress.success_count += 1
            except Exception as e:
                logger.error(f"Entry '{key}' translation failed: {e}. Keeping original.")
                results.append((key, value))  # Graceful fallback
                progress.failure_count += 1
                progress.failed_keys.append(key)

        progress.current_item = idx + 1
        progress.current_key = key

        if progress_callback and progress_callback(_snapshot(progress)):
            # Cancellation requested
            logger.info(f"Translation cancelled after entry {idx + 1}/{len(pairs)}")
            results.extend(pairs[idx + 1:])
            progress.phase = "cancelled"
            break

    if progress.phase != "cancelled":
        progress.phase = "completed"
        if progress_callback:
            progress_callback(_snapshot(progress))

    logger.info(
        f"Translation finished: {progress.success_count} translated, "
        f"{progress.failure_count} failed, {progress.skipped_count} skipped"
    )
    return results
