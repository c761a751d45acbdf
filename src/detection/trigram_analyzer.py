"""Statistical n-gram fallback analysis.

The analyzer wraps a language identifier that ranks candidate languages
for a text. High-confidence English inside the top candidates wins over
the overall top guess. Outcomes are memoized per cleaned text.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from core.constants import (
    ENGLISH_LANGUAGE_CODE,
    TRIGRAM_CANDIDATE_SCAN_LIMIT,
    TRIGRAM_RESCUE_MIN_CONFIDENCE,
)
from core.errors import EnglishGateDependencyError, EnglishGateDetectionError
from core.types import LanguageResult
from detection.bounded_cache import BoundedCache

LanguageIdentifier = Callable[[str], Sequence[tuple[str, float]]]


def select_language_result(candidates: Sequence[tuple[str, float]]) -> LanguageResult:
    """Pick the result from a ranked candidate list.

    Args:
        candidates: ``(language, confidence)`` pairs, best first.

    Returns:
        First high-confidence English candidate among the top ranks,
        otherwise the top-ranked candidate.

    Raises:
        EnglishGateDetectionError: If the ranking is empty.
    """
    if not candidates:
        raise EnglishGateDetectionError("Language identifier returned an empty ranking.")
    for language, confidence in candidates[:TRIGRAM_CANDIDATE_SCAN_LIMIT]:
        if language == ENGLISH_LANGUAGE_CODE and confidence >= TRIGRAM_RESCUE_MIN_CONFIDENCE:
            return LanguageResult(language=language, confidence=confidence)
    language, confidence = candidates[0]
    return LanguageResult(language=language, confidence=confidence)


class TrigramAnalyzer:
    """Cached wrapper around an n-gram language identifier."""

    def __init__(
        self,
        identifier: LanguageIdentifier,
        cache: BoundedCache[str, LanguageResult],
    ) -> None:
        self._identifier = identifier
        self._cache = cache

    def analyze(self, cleaned_text: str) -> LanguageResult:
        """Identify the language of preprocessed text.

        Args:
            cleaned_text: Preprocessed, untokenized text.

        Returns:
            Selected language result.

        Raises:
            EnglishGateDetectionError: If the identifier fails or ranks nothing.
        """
        cached = self._cache.get(cleaned_text)
        if cached is not None:
            return cached
        result = select_language_result(self._identifier(cleaned_text))
        self._cache.set(cleaned_text, result)
        return result


def build_langdetect_identifier(seed: int) -> LanguageIdentifier:
    """Build an identifier backed by langdetect.

    Args:
        seed: Seed for langdetect's sampling, fixed for reproducible output.

    Returns:
        Callable returning ``(language, probability)`` pairs, best first.

    Raises:
        EnglishGateDependencyError: If langdetect is not installed.
    """
    langdetect = _import_langdetect()
    langdetect.DetectorFactory.seed = seed

    def identify(text: str) -> list[tuple[str, float]]:
        try:
            candidates = langdetect.detect_langs(text)
        except langdetect.LangDetectException as error:
            raise EnglishGateDetectionError(
                f"langdetect could not rank languages: {error}"
            ) from error
        return [(candidate.lang, candidate.prob) for candidate in candidates]

    return identify


def _import_langdetect() -> Any:
    """Import the langdetect library with a clear error on failure."""
    try:
        import langdetect
    except ImportError as error:
        raise EnglishGateDependencyError(
            "Trigram fallback analysis requires the langdetect library. "
            "Install with: pip install langdetect"
        ) from error
    return langdetect
