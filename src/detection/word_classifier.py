"""Single-word English classification.

Verdicts come from an ordered series of guard clauses; the first one that
decides returns. Results are memoized per word and word options.
"""

from __future__ import annotations

from core.types import WordOptions
from detection.bounded_cache import BoundedCache
from detection.indicators import has_obvious_non_english_indicators
from detection.patterns import ENGLISH_CHARACTERS_PATTERN, NUMBER_PATTERN

WordCacheKey = tuple[str, bool, bool]


def classify_word(word: str, options: WordOptions, dictionary: frozenset[str]) -> bool:
    """Decide whether one lowercase word is English.

    Args:
        word: Lowercase candidate word.
        options: Number handling options.
        dictionary: Known English words.

    Returns:
        True if the word is recognized as English.
    """
    if ENGLISH_CHARACTERS_PATTERN.fullmatch(word) is None:
        return False
    if options.allow_numbers and NUMBER_PATTERN.fullmatch(word):
        return True
    if has_obvious_non_english_indicators(word):
        return False
    if word in dictionary:
        return True
    if "'" in word:
        contraction_stem = word.split("'", 1)[0]
        if contraction_stem in dictionary:
            return True
    return False


class WordClassifier:
    """Cached word classifier bound to one dictionary."""

    def __init__(self, dictionary: frozenset[str], cache: BoundedCache[WordCacheKey, bool]) -> None:
        self._dictionary = dictionary
        self._cache = cache

    def is_english_word(self, word: str, options: WordOptions) -> bool:
        """Classify a lowercase word, consulting the verdict cache first.

        Args:
            word: Lowercase candidate word.
            options: Word-level options, part of the cache key.

        Returns:
            True if the word is recognized as English.
        """
        cache_key = (word, options.allow_numbers, options.allow_abbreviations)
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached
        verdict = classify_word(word, options, self._dictionary)
        self._cache.set(cache_key, verdict)
        return verdict
