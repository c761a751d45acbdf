"""Unit tests for the English / non-English decision engine."""

from __future__ import annotations

import re

import pytest

from core.types import DetectionOptions
from tests.detector_fixtures import FailingIdentifier, ScriptedIdentifier, build_test_detector

# Eight tokens, six of them English: ratio 0.75 sits between the rescue
# floor and the default threshold.
_BORDERLINE_TEXT = "The quick brown fox jumps over zorbly blorf"


@pytest.mark.parametrize("text", [None, "", "   \t\n", 123, ["hello"]])
def test_empty_or_non_string_input_is_english(text: object) -> None:
    """Blank and non-string input should never be reported as non-English."""
    detector = build_test_detector()

    report = detector.analyze(text)

    assert report.is_non_english is False
    assert report.decided_by == "empty_input"
    assert detector.is_english(text) is True


def test_english_sentence_passes_word_ratio() -> None:
    """A fully recognized sentence should be decided without n-gram analysis."""
    identifier = ScriptedIdentifier()
    detector = build_test_detector(identifier)

    report = detector.analyze("The quick brown fox jumps over the lazy dog")

    assert report.is_english
    assert report.decided_by == "word_ratio"
    assert report.english_ratio == 1.0
    assert identifier.calls == []


def test_french_sentence_is_non_english() -> None:
    """French function words and diacritics should sink the ratio."""
    detector = build_test_detector()

    assert detector.is_english("Ceci est une phrase en français") is False


def test_german_sentence_is_rejected_even_when_ngrams_say_english() -> None:
    """A ratio under the rescue floor stays non-English whatever the identifier says."""
    detector = build_test_detector(ScriptedIdentifier([("en", 0.99)]))

    report = detector.analyze("Der schnelle braune Fuchs springt über den faulen Hund")

    assert report.is_non_english
    assert report.decided_by == "trigram_rejected"
    assert report.english_ratio == 0.0


def test_high_confidence_english_rescues_borderline_ratio() -> None:
    """Confident English n-grams should rescue a ratio of at least 0.7."""
    identifier = ScriptedIdentifier([("en", 0.95)])
    detector = build_test_detector(identifier)

    report = detector.analyze(_BORDERLINE_TEXT)

    assert report.english_ratio == pytest.approx(0.75)
    assert report.is_english
    assert report.decided_by == "trigram_rescue"
    assert identifier.calls == [_BORDERLINE_TEXT]


def test_english_found_below_top_rank_still_rescues() -> None:
    """High-confidence English anywhere in the top candidates is selected."""
    detector = build_test_detector(ScriptedIdentifier([("de", 0.97), ("en", 0.92)]))

    report = detector.analyze(_BORDERLINE_TEXT)

    assert report.is_english
    assert report.trigram_result is not None
    assert report.trigram_result.language == "en"


@pytest.mark.parametrize("ranking", [[("de", 0.99)], [("en", 0.85)]])
def test_weak_or_foreign_ngrams_reject_borderline_ratio(ranking: list[tuple[str, float]]) -> None:
    """Foreign or low-confidence English n-grams should not rescue."""
    detector = build_test_detector(ScriptedIdentifier(ranking))

    report = detector.analyze(_BORDERLINE_TEXT)

    assert report.is_non_english
    assert report.decided_by == "trigram_rejected"


def test_identifier_failure_fails_closed() -> None:
    """An identifier error should yield a non-English verdict, not an exception."""
    detector = build_test_detector(FailingIdentifier())

    report = detector.analyze(_BORDERLINE_TEXT)

    assert report.is_non_english
    assert report.decided_by == "trigram_unavailable"
    assert report.trigram_result is None


def test_empty_ranking_fails_closed() -> None:
    """An empty identifier ranking should also be non-English."""
    detector = build_test_detector(ScriptedIdentifier([]))

    assert detector.detect_non_english_text(_BORDERLINE_TEXT) is True


def test_short_text_uses_relaxed_threshold() -> None:
    """Four tokens or fewer are judged against 0.6, even above a stricter option."""
    detector = build_test_detector(FailingIdentifier())
    options = DetectionOptions(english_threshold=0.95)

    report = detector.analyze("Hello big zorbly", options)

    assert report.effective_threshold == 0.6
    assert report.english_ratio == pytest.approx(2 / 3)
    assert report.is_english


def test_five_tokens_keep_configured_threshold() -> None:
    """The relaxation stops at four tokens."""
    detector = build_test_detector(FailingIdentifier())

    report = detector.analyze("hello big nice zorbly blorf")

    assert report.effective_threshold == 0.8
    assert report.is_non_english


def test_raising_threshold_only_moves_toward_non_english() -> None:
    """Verdicts should be monotonic in the threshold."""
    detector = build_test_detector(FailingIdentifier())
    thresholds = [0.0, 0.5, 0.7, 0.75, 0.8, 0.9, 1.0]

    verdicts = [
        detector.detect_non_english_text(_BORDERLINE_TEXT, DetectionOptions(english_threshold=value))
        for value in thresholds
    ]

    assert verdicts == sorted(verdicts)
    assert verdicts[0] is False and verdicts[-1] is True


def test_abbreviations_count_as_english_by_default() -> None:
    """Uppercase abbreviations are accepted on their original casing."""
    detector = build_test_detector(FailingIdentifier())
    disabled = DetectionOptions(allow_abbreviations=False)

    assert detector.is_english("NATO FBI CIA are important organizations")
    assert detector.is_english("QXZ WVK PLM are important organizations", disabled) is False


def test_contractions_resolve_after_apostrophe_stripping() -> None:
    """Contractions lose their apostrophe and still count as English."""
    detector = build_test_detector(FailingIdentifier())

    report = detector.analyze("I don't think we are ready")

    assert report.english_word_count == report.relevant_word_count == 5


def test_min_word_length_controls_relevant_words() -> None:
    """Words shorter than the minimum are left out of the ratio."""
    detector = build_test_detector()

    default_report = detector.analyze("I am a big dog")
    all_words_report = detector.analyze("I am a big dog", DetectionOptions(min_word_length=0))

    assert default_report.relevant_word_count == 3
    assert all_words_report.relevant_word_count == 5


def test_no_relevant_words_yields_ratio_one() -> None:
    """When every token is too short the ratio defaults to 1.0."""
    detector = build_test_detector(FailingIdentifier())

    report = detector.analyze("zq xv wk", DetectionOptions(min_word_length=3))

    assert report.relevant_word_count == 0
    assert report.english_ratio == 1.0
    assert report.is_english


def test_text_without_letters_has_no_tokens() -> None:
    """Digits and symbols alone clean down to nothing and stay English."""
    detector = build_test_detector()

    report = detector.analyze("12345 @@@ ###")

    assert report.decided_by == "no_tokens"
    assert report.is_english


def test_exclude_words_are_removed_before_scoring() -> None:
    """Excluded words should not count against the ratio."""
    detector = build_test_detector(FailingIdentifier())
    text = "zorbly blorf quick brown fox"

    assert detector.is_english(text) is False
    assert detector.is_english(text, DetectionOptions(exclude_words=("ZORBLY", "blorf")))


def test_custom_patterns_strip_noise() -> None:
    """Caller patterns should remove project-specific tokens."""
    detector = build_test_detector(FailingIdentifier())
    text = "Review the zorbly123 and zorblyabc project"

    assert detector.is_english(text) is False
    assert detector.is_english(text, DetectionOptions(custom_patterns=(r"zorbly\w*",)))
    assert detector.is_english(
        "Fix bug PROJ-1234 in login flow",
        DetectionOptions(custom_patterns=(re.compile(r"PROJ-\d+"),)),
    )


def test_document_ids_and_geo_terms_are_ignored() -> None:
    """Document identifiers and place names should not look foreign."""
    detector = build_test_detector(FailingIdentifier())

    document_report = detector.analyze("The AEM01-WI-DSU06-SD01 document is ready")
    geo_report = detector.analyze("We visited München and Zürich today")

    assert document_report.cleaned_text == "The document is ready"
    assert document_report.is_english
    assert geo_report.cleaned_text == "We visited and today"
    assert geo_report.is_english


def test_repeated_calls_and_cache_clears_do_not_change_verdicts() -> None:
    """Caches should save work without ever changing an answer."""
    identifier = ScriptedIdentifier([("en", 0.95)])
    detector = build_test_detector(identifier)
    texts = [_BORDERLINE_TEXT, "Ceci est une phrase en français", "Hello world"]

    first = [detector.detect_non_english_text(text) for text in texts]
    second = [detector.detect_non_english_text(text) for text in texts]
    detector.clear_caches()
    third = [detector.detect_non_english_text(text) for text in texts]

    assert first == second == third
    assert identifier.calls.count(_BORDERLINE_TEXT) == 2


def test_cache_stats_report_hits_and_misses() -> None:
    """Word lookups should miss once, then hit."""
    detector = build_test_detector()

    detector.analyze("hello world")
    detector.analyze("hello world")

    stats = detector.cache_stats()
    assert stats["word"].misses == 2
    assert stats["word"].hits == 2
    assert stats["trigram"].size == 0


def test_word_cache_evicts_at_capacity() -> None:
    """The word cache should hold at most its capacity of verdicts."""
    detector = build_test_detector(word_cache_size=2)

    detector.analyze("hello world")
    detector.analyze("great team")

    stats = detector.cache_stats()["word"]
    assert stats.size == 2
    assert stats.evictions == 2
