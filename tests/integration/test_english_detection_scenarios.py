"""Integration tests for detection with the wordfreq dictionary and langdetect."""

from __future__ import annotations

import pytest

from core.config import EnglishGateConfig
from core.types import DetectionOptions
from detection.decision_engine import LanguageDetector
from detection.document_patterns import matches_document_pattern


@pytest.fixture(scope="module")
def detector() -> LanguageDetector:
    return LanguageDetector.from_config(EnglishGateConfig())


@pytest.mark.parametrize(
    "text",
    [
        "The quick brown fox jumps over the lazy dog",
        "I don't think we are ready for the release",
        "NATO FBI CIA are important organizations",
        "We visited München and Zürich last summer",
        "The AEM01-WI-DSU06-SD01 document is ready for review",
    ],
)
def test_english_scenarios(detector: LanguageDetector, text: str) -> None:
    """English sentences should pass on word evidence alone."""
    report = detector.analyze(text)

    assert report.is_english
    assert report.decided_by == "word_ratio"


@pytest.mark.parametrize(
    "text",
    [
        "Ceci est une phrase en français",
        "Der schnelle braune Fuchs springt über den faulen Hund",
        "El rápido zorro marrón salta sobre el perro perezoso",
        "Hola muy buenos amigos",
        "Bonjour merci beaucoup mon ami",
        "Ciao grazie molto bella",
        "Ich habe heute gut gegessen",
    ],
)
def test_non_english_scenarios(detector: LanguageDetector, text: str) -> None:
    """Foreign sentences fall below the rescue ratio whatever n-grams say."""
    assert detector.is_english(text) is False


def test_custom_patterns_and_exclude_words(detector: LanguageDetector) -> None:
    """Caller options should apply on top of the real dictionary."""
    options = DetectionOptions(custom_patterns=[r"PROJ-\d+"], exclude_words=["the"])

    report = detector.analyze("Fix the bug PROJ-1234 in the login flow", options)

    assert report.cleaned_text == "Fix bug in login flow"
    assert report.is_english


def test_blank_input_is_english(detector: LanguageDetector) -> None:
    """Blank input never reaches the dictionary or the identifier."""
    assert detector.detect_non_english_text("   ") is False
    assert detector.detect_non_english_text(None) is False


def test_document_pattern_scenarios() -> None:
    """Document identifiers match, ordinary text does not."""
    assert matches_document_pattern("AEM01-WI-DSU06-SD01") is True
    assert matches_document_pattern("Hello world") is False
    assert matches_document_pattern(42) is False


def test_disabling_abbreviations_rejects_uppercase_nonsense(detector: LanguageDetector) -> None:
    """Unknown uppercase tokens only pass while abbreviations are allowed."""
    text = "QXZV WVKQ PLMX are important organizations"

    assert detector.is_english(text) is True
    assert detector.is_english(text, DetectionOptions(allow_abbreviations=False)) is False


def test_foreign_words_are_missing_from_dictionary(detector: LanguageDetector) -> None:
    """Words owned by other languages fail classification despite wordfreq's web text."""
    report = detector.analyze("Hola muy buenos amigos")

    assert report.decided_by != "word_ratio"
    assert report.is_non_english
