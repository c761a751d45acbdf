"""English / non-English decision engine.

A detector owns two bounded caches and borrows immutable resources. Each
call is otherwise a pure function: preprocess, classify every relevant
token, compare the English ratio to the threshold, and fall back to
n-gram analysis only when the ratio test fails.
"""

from __future__ import annotations

from dataclasses import replace

from core.config import EnglishGateConfig
from core.constants import (
    DEFAULT_TRIGRAM_CACHE_SIZE,
    DEFAULT_WORD_CACHE_SIZE,
    ENGLISH_LANGUAGE_CODE,
    SHORT_TEXT_ENGLISH_THRESHOLD,
    SHORT_TEXT_MAX_TOKENS,
    TRIGRAM_RESCUE_MIN_CONFIDENCE,
    TRIGRAM_RESCUE_MIN_RATIO,
)
from core.errors import EnglishGateDetectionError
from core.logging_config import get_logger
from core.types import CacheStats, DetectionOptions, DetectionReport, LanguageResult
from detection.bounded_cache import BoundedCache
from detection.patterns import ABBREVIATION_PATTERN, WORD_PUNCTUATION_PATTERN
from detection.preprocessing import preprocess_text
from detection.resources import DetectorResources, load_detector_resources
from detection.trigram_analyzer import TrigramAnalyzer
from detection.word_classifier import WordCacheKey, WordClassifier

_LOGGER = get_logger(__name__)
_DEFAULT_OPTIONS = DetectionOptions()


class LanguageDetector:
    """Layered heuristic detector for predominantly English text."""

    def __init__(
        self,
        resources: DetectorResources,
        trigram_cache_size: int = DEFAULT_TRIGRAM_CACHE_SIZE,
        word_cache_size: int = DEFAULT_WORD_CACHE_SIZE,
    ) -> None:
        self._resources = resources
        self._trigram_cache: BoundedCache[str, LanguageResult] = BoundedCache(trigram_cache_size)
        self._word_cache: BoundedCache[WordCacheKey, bool] = BoundedCache(word_cache_size)
        self._word_classifier = WordClassifier(resources.dictionary, self._word_cache)
        self._trigram_analyzer = TrigramAnalyzer(resources.identifier, self._trigram_cache)

    @classmethod
    def from_config(cls, config: EnglishGateConfig) -> "LanguageDetector":
        """Build a detector with freshly loaded resources.

        Args:
            config: Validated runtime configuration.

        Returns:
            Detector with empty caches sized from config.
        """
        return cls(
            load_detector_resources(config),
            trigram_cache_size=config.trigram_cache_size,
            word_cache_size=config.word_cache_size,
        )

    def detect_non_english_text(
        self,
        text: object,
        options: DetectionOptions | None = None,
    ) -> bool:
        """Return True when text is not predominantly English.

        Null, non-string, empty, and whitespace-only input yields False.
        """
        return self.analyze(text, options).is_non_english

    def is_english(self, text: object, options: DetectionOptions | None = None) -> bool:
        """Return True when text is predominantly English."""
        return not self.detect_non_english_text(text, options)

    def analyze(self, text: object, options: DetectionOptions | None = None) -> DetectionReport:
        """Run the full pipeline and return its decision trace.

        Args:
            text: Raw input; anything but a non-blank string short-circuits.
            options: Detection options, defaults when omitted.

        Returns:
            Report carrying the verdict and the stage that decided it.
        """
        options = options or _DEFAULT_OPTIONS
        if not isinstance(text, str) or not text.strip():
            return DetectionReport(
                is_non_english=False,
                decided_by="empty_input",
                effective_threshold=options.english_threshold,
            )
        cleaned_text = preprocess_text(
            text,
            self._resources.geo_term_patterns,
            options.custom_patterns,
            options.exclude_words,
        )
        tokens = cleaned_text.split()
        if not tokens:
            return DetectionReport(
                is_non_english=False,
                decided_by="no_tokens",
                cleaned_text=cleaned_text,
                effective_threshold=options.english_threshold,
            )
        threshold = options.english_threshold
        if len(tokens) <= SHORT_TEXT_MAX_TOKENS:
            threshold = SHORT_TEXT_ENGLISH_THRESHOLD
        relevant_count, english_count = self._count_english_words(tokens, options)
        english_ratio = english_count / relevant_count if relevant_count else 1.0
        report = DetectionReport(
            is_non_english=False,
            decided_by="word_ratio",
            cleaned_text=cleaned_text,
            token_count=len(tokens),
            relevant_word_count=relevant_count,
            english_word_count=english_count,
            english_ratio=english_ratio,
            effective_threshold=threshold,
        )
        if english_ratio >= threshold:
            return report
        return self._apply_trigram_fallback(report)

    def clear_caches(self) -> None:
        """Empty both caches. Verdicts are unaffected."""
        self._trigram_cache.clear()
        self._word_cache.clear()
        _LOGGER.debug("language_detector_caches_cleared")

    def cache_stats(self) -> dict[str, CacheStats]:
        """Return counters for the trigram and word caches."""
        return {
            "trigram": self._trigram_cache.stats(),
            "word": self._word_cache.stats(),
        }

    def _count_english_words(
        self,
        tokens: list[str],
        options: DetectionOptions,
    ) -> tuple[int, int]:
        """Count length-qualifying tokens and the English ones among them.

        Args:
            tokens: Whitespace tokens of the cleaned text.
            options: Detection options.

        Returns:
            ``(relevant_count, english_count)``.
        """
        word_options = options.word_options
        relevant_count = 0
        english_count = 0
        for token in tokens:
            clean_word = WORD_PUNCTUATION_PATTERN.sub("", token).strip()
            if len(clean_word) < options.min_word_length:
                continue
            relevant_count += 1
            # Abbreviations are checked on original casing, before lowercasing.
            if options.allow_abbreviations and ABBREVIATION_PATTERN.fullmatch(clean_word):
                english_count += 1
            elif self._word_classifier.is_english_word(clean_word.lower(), word_options):
                english_count += 1
        return relevant_count, english_count

    def _apply_trigram_fallback(self, report: DetectionReport) -> DetectionReport:
        """Decide a ratio-test failure with n-gram evidence.

        Args:
            report: Report of the failed ratio test.

        Returns:
            Final report; identifier failures fail closed as non-English.
        """
        _LOGGER.debug(
            "trigram_fallback_used",
            english_ratio=round(report.english_ratio, 4),
            effective_threshold=report.effective_threshold,
            token_count=report.token_count,
        )
        try:
            result = self._trigram_analyzer.analyze(report.cleaned_text)
        except EnglishGateDetectionError as error:
            _LOGGER.warning("trigram_analysis_failed", error=str(error))
            return replace(report, is_non_english=True, decided_by="trigram_unavailable")
        rescued = (
            result.language == ENGLISH_LANGUAGE_CODE
            and result.confidence >= TRIGRAM_RESCUE_MIN_CONFIDENCE
            and report.english_ratio >= TRIGRAM_RESCUE_MIN_RATIO
        )
        if rescued:
            return replace(
                report, is_non_english=False, decided_by="trigram_rescue", trigram_result=result
            )
        return replace(
            report, is_non_english=True, decided_by="trigram_rejected", trigram_result=result
        )

