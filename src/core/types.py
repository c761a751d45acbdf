"""Shared typed models.

This module defines immutable data models passed between the
preprocessor, classifiers, decision engine, SDK, and CLI layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Iterable

from core.constants import DEFAULT_ENGLISH_THRESHOLD, DEFAULT_MIN_WORD_LENGTH
from core.errors import EnglishGateConfigError


@dataclass(frozen=True)
class DetectionOptions:
    """Caller-facing configuration for one detection call.

    Attributes:
        english_threshold: Minimum ratio of English words, in [0, 1].
        min_word_length: Words shorter than this are skipped.
        allow_numbers: Whether standalone numbers count as English.
        allow_abbreviations: Whether uppercase abbreviations count as English.
        custom_patterns: Regular expressions stripped before validation.
            Strings are compiled when the options are constructed.
        exclude_words: Words removed case-insensitively as whole words.
    """

    english_threshold: float = DEFAULT_ENGLISH_THRESHOLD
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    allow_numbers: bool = True
    allow_abbreviations: bool = True
    custom_patterns: tuple[re.Pattern[str], ...] = field(default_factory=tuple)
    exclude_words: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not 0.0 <= self.english_threshold <= 1.0:
            raise EnglishGateConfigError(
                f"english_threshold must be within [0, 1], got {self.english_threshold}."
            )
        if self.min_word_length < 0:
            raise EnglishGateConfigError(
                f"min_word_length must be >= 0, got {self.min_word_length}."
            )
        object.__setattr__(self, "custom_patterns", _compile_patterns(self.custom_patterns))
        object.__setattr__(self, "exclude_words", _validate_exclude_words(self.exclude_words))

    @property
    def word_options(self) -> "WordOptions":
        """Return the subset of options the word classifier depends on."""
        return WordOptions(
            allow_numbers=self.allow_numbers,
            allow_abbreviations=self.allow_abbreviations,
        )


@dataclass(frozen=True)
class WordOptions:
    """Options that change a single word verdict.

    Attributes:
        allow_numbers: Whether all-digit words are accepted.
        allow_abbreviations: Carried into the cache key for verdict isolation.
    """

    allow_numbers: bool = True
    allow_abbreviations: bool = True


@dataclass(frozen=True)
class LanguageResult:
    """One ranked candidate from n-gram language identification.

    Attributes:
        language: ISO 639-1 language code.
        confidence: Identifier confidence in [0, 1].
    """

    language: str
    confidence: float


@dataclass(frozen=True)
class DetectionReport:
    """Full decision trace for one detection call.

    Attributes:
        is_non_english: Final verdict.
        decided_by: Pipeline stage that produced the verdict.
        cleaned_text: Preprocessed text, empty for short-circuited input.
        token_count: Whitespace tokens in the cleaned text.
        relevant_word_count: Tokens that passed the minimum length.
        english_word_count: Relevant tokens classified as English.
        english_ratio: English share of relevant tokens.
        effective_threshold: Threshold applied after short-text relaxation.
        trigram_result: N-gram result when the fallback was consulted.
    """

    is_non_english: bool
    decided_by: str
    cleaned_text: str = ""
    token_count: int = 0
    relevant_word_count: int = 0
    english_word_count: int = 0
    english_ratio: float = 1.0
    effective_threshold: float = DEFAULT_ENGLISH_THRESHOLD
    trigram_result: LanguageResult | None = None

    @property
    def is_english(self) -> bool:
        """Return the inverse verdict."""
        return not self.is_non_english


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of bounded cache counters.

    Attributes:
        size: Entries currently stored.
        capacity: Maximum number of entries.
        hits: Lookups answered from the cache.
        misses: Lookups that found no entry.
        evictions: Entries removed to make room.
    """

    size: int
    capacity: int
    hits: int
    misses: int
    evictions: int


def _compile_patterns(patterns: Iterable[re.Pattern[str] | str]) -> tuple[re.Pattern[str], ...]:
    """Compile string patterns so invalid expressions fail at construction.

    Args:
        patterns: Compiled patterns or pattern strings.

    Returns:
        Tuple of compiled patterns in caller order.

    Raises:
        EnglishGateConfigError: If a pattern string cannot be compiled.
    """
    if isinstance(patterns, (str, re.Pattern)):
        raise EnglishGateConfigError(
            "custom_patterns must be a sequence of patterns, not a single pattern."
        )
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
            continue
        try:
            compiled.append(re.compile(pattern))
        except (re.error, TypeError) as error:
            raise EnglishGateConfigError(
                f"Invalid custom pattern {pattern!r}: {error}. "
                "Provide a compiled re.Pattern or a valid regular expression string."
            ) from error
    return tuple(compiled)


def _validate_exclude_words(words: Iterable[str]) -> tuple[str, ...]:
    if isinstance(words, str):
        raise EnglishGateConfigError(
            "exclude_words must be a sequence of strings, not a single string."
        )
    validated = tuple(words)
    for word in validated:
        if not isinstance(word, str):
            raise EnglishGateConfigError(
                f"exclude_words entries must be strings, got {type(word).__name__}."
            )
    return validated
