"""Non-English indicator predicates.

Each predicate wraps one pattern family so it can be tested alone.
``has_obvious_non_english_indicators`` applies them cheapest first.
"""

from __future__ import annotations

from detection.patterns import (
    NON_ENGLISH_CHARACTER_PATTERN,
    NON_ENGLISH_FUNCTION_WORD_PATTERN,
    NON_ENGLISH_SUFFIX_PATTERN,
    NON_ENGLISH_VOCABULARY_PATTERNS,
)


def has_non_english_characters(text: str) -> bool:
    """Return True if text contains a European diacritic or special letter."""
    return NON_ENGLISH_CHARACTER_PATTERN.search(text) is not None


def has_non_english_suffix(text: str) -> bool:
    """Return True if text ends with a suffix typical of other languages."""
    return NON_ENGLISH_SUFFIX_PATTERN.search(text) is not None


def matches_non_english_vocabulary(text: str) -> bool:
    """Return True if text is a known non-English vocabulary word."""
    return any(pattern.fullmatch(text) for pattern in NON_ENGLISH_VOCABULARY_PATTERNS)


def is_non_english_function_word(text: str) -> bool:
    """Return True if text is a non-English article or preposition."""
    return NON_ENGLISH_FUNCTION_WORD_PATTERN.fullmatch(text) is not None


def has_obvious_non_english_indicators(text: object) -> bool:
    """Screen a word or short phrase for obvious non-English signals.

    Character and suffix checks apply to single words only. Vocabulary and
    function-word checks apply regardless of spaces.

    Args:
        text: Word or phrase to inspect.

    Returns:
        True if any indicator fires.
    """
    if not isinstance(text, str) or len(text) < 2:
        return False
    if " " not in text and (has_non_english_characters(text) or has_non_english_suffix(text)):
        return True
    return matches_non_english_vocabulary(text) or is_non_english_function_word(text)
