"""Text preprocessing for language detection.

Cleaning runs in a fixed order. Document identifiers go first so no later
pattern matches inside them, and character filtering goes last so it never
mangles a partially matched identifier.
"""

from __future__ import annotations

import re
from typing import Iterable

from core.constants import KEPT_PUNCTUATION
from detection.document_patterns import normalize_whitespace, remove_document_patterns
from detection.geo_terms import remove_geo_terms


def preprocess_text(
    text: str,
    geo_term_patterns: Iterable[re.Pattern[str]],
    custom_patterns: Iterable[re.Pattern[str]] = (),
    exclude_words: Iterable[str] = (),
) -> str:
    """Strip noise from raw text before word and trigram analysis.

    Args:
        text: Raw input text.
        geo_term_patterns: Precompiled geo-term patterns.
        custom_patterns: Caller patterns whose matches are removed.
        exclude_words: Caller words removed as whole words, ignoring case.

    Returns:
        Cleaned text with single-space separators.
    """
    processed = remove_document_patterns(text)
    processed = remove_geo_terms(processed, geo_term_patterns)
    for pattern in custom_patterns:
        processed = pattern.sub("", processed)
    for word in exclude_words:
        processed = _exclude_word_pattern(word).sub("", processed)
    processed = strip_non_letters(processed)
    return normalize_whitespace(processed)


def strip_non_letters(text: str) -> str:
    """Replace everything but letters, whitespace, and kept punctuation with spaces.

    Args:
        text: Input text.

    Returns:
        Text of Unicode letters, whitespace, and ``. , ! ? : ; ' " ( ) -``.
    """
    return "".join(
        character
        if character.isalpha() or character.isspace() or character in KEPT_PUNCTUATION
        else " "
        for character in text
    )


def _exclude_word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)
