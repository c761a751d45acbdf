"""Public SDK surface for englishgate.

This module provides a stable import path for library users.
It re-exports the detection operations and typed option models.
"""

from __future__ import annotations

from core.config import EnglishGateConfig
from core.errors import (
    EnglishGateConfigError,
    EnglishGateDependencyError,
    EnglishGateDetectionError,
    EnglishGateError,
)
from core.types import CacheStats, DetectionOptions, DetectionReport, LanguageResult
from detection.decision_engine import LanguageDetector
from detection.default_detector import (
    clear_language_detector_caches,
    detect_non_english_text,
    explain_detection,
    get_default_detector,
    is_english,
    matches_document_pattern,
)
from detection.resources import DetectorResources, load_detector_resources

__all__ = [
    "CacheStats",
    "DetectionOptions",
    "DetectionReport",
    "DetectorResources",
    "EnglishGateConfig",
    "EnglishGateConfigError",
    "EnglishGateDependencyError",
    "EnglishGateDetectionError",
    "EnglishGateError",
    "LanguageDetector",
    "LanguageResult",
    "clear_language_detector_caches",
    "detect_non_english_text",
    "explain_detection",
    "get_default_detector",
    "is_english",
    "load_detector_resources",
    "matches_document_pattern",
]
