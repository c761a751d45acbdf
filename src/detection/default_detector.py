"""Process-wide default detector and module-level operations.

The default detector is built on first use from environment config, so
importing this module stays cheap. Later calls share its resources and
caches.
"""

from __future__ import annotations

import threading

from core.config import EnglishGateConfig
from core.types import DetectionOptions, DetectionReport
from detection.decision_engine import LanguageDetector
from detection.document_patterns import matches_document_pattern as _matches_document_pattern

_DEFAULT_DETECTOR: LanguageDetector | None = None
_DEFAULT_DETECTOR_LOCK = threading.Lock()


def get_default_detector() -> LanguageDetector:
    """Return the shared detector, building it once on first use.

    Returns:
        Process-wide detector.

    Raises:
        EnglishGateConfigError: If environment configuration is invalid.
        EnglishGateDependencyError: If wordfreq or langdetect is missing.
    """
    global _DEFAULT_DETECTOR
    if _DEFAULT_DETECTOR is None:
        with _DEFAULT_DETECTOR_LOCK:
            if _DEFAULT_DETECTOR is None:
                _DEFAULT_DETECTOR = LanguageDetector.from_config(EnglishGateConfig.from_env())
    return _DEFAULT_DETECTOR


def set_default_detector(detector: LanguageDetector | None) -> None:
    """Replace the shared detector; None rebuilds it lazily on next use."""
    global _DEFAULT_DETECTOR
    with _DEFAULT_DETECTOR_LOCK:
        _DEFAULT_DETECTOR = detector


def detect_non_english_text(text: object, options: DetectionOptions | None = None) -> bool:
    """Return True when text is not predominantly English.

    Args:
        text: Input text. None, non-string, empty, or blank input is English.
        options: Detection options.

    Returns:
        True for non-English text.
    """
    return get_default_detector().detect_non_english_text(text, options)


def is_english(text: object, options: DetectionOptions | None = None) -> bool:
    """Return True when text is predominantly English."""
    return get_default_detector().is_english(text, options)


def explain_detection(text: object, options: DetectionOptions | None = None) -> DetectionReport:
    """Return the full decision trace for text."""
    return get_default_detector().analyze(text, options)


def matches_document_pattern(text: object) -> bool:
    """Return True if text contains a document identifier."""
    return _matches_document_pattern(text)


def clear_language_detector_caches() -> None:
    """Empty the default detector's caches, if it has been built."""
    detector = _DEFAULT_DETECTOR
    if detector is not None:
        detector.clear_caches()
