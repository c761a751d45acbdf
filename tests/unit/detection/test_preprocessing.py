"""Unit tests for text preprocessing."""

from __future__ import annotations

import re

from detection.geo_terms import compile_geo_term_patterns
from detection.preprocessing import preprocess_text, strip_non_letters

_GEO_PATTERNS = compile_geo_term_patterns([("Hamburg", True), ("München", True), ("Brno", False)])


def test_preprocess_removes_geo_terms_and_plurals() -> None:
    """Geo terms and their plural forms should be stripped case-insensitively."""
    cleaned = preprocess_text("Two Hamburgs and one MÜNCHEN trip", _GEO_PATTERNS)

    assert cleaned == "Two and one trip"


def test_preprocess_keeps_plural_when_flag_is_false() -> None:
    """Terms flagged without plural should only strip the exact term."""
    cleaned = preprocess_text("Brno and Brnos", _GEO_PATTERNS)

    assert cleaned == "and Brnos"


def test_exclude_words_are_whole_word_and_case_insensitive() -> None:
    """Excluding 'the' must not corrupt 'theater'."""
    cleaned = preprocess_text("The theater is THE best", (), exclude_words=("the",))

    assert cleaned == "theater is best"


def test_custom_patterns_run_after_document_id_removal() -> None:
    """Custom patterns should see text with document identifiers already removed."""
    cleaned = preprocess_text(
        "AEM01 Fix bug PROJ-1234 in login flow",
        (),
        custom_patterns=(re.compile(r"PROJ-\d+"),),
    )

    assert cleaned == "Fix bug in login flow"


def test_document_ids_are_removed_before_geo_terms() -> None:
    """A geo term never matches inside a document identifier."""
    patterns = compile_geo_term_patterns([("SD", True)])

    cleaned = preprocess_text("AEM01-WI-DSU06-SD01 ready", patterns)

    assert cleaned == "ready"


def test_strip_non_letters_keeps_letters_and_kept_punctuation() -> None:
    """Digits and symbols become spaces; letters of any script stay."""
    cleaned = preprocess_text("Price: 42€ #tag (naïve) 東京!", ())

    assert cleaned == "Price: tag (naïve) 東京!"


def test_strip_non_letters_replaces_digits_with_spaces() -> None:
    """Digits are not letters and should be replaced."""
    assert strip_non_letters("a1b") == "a b"


def test_geo_terms_are_removed_once_per_term() -> None:
    """Only the first occurrence of a geo term is stripped."""
    cleaned = preprocess_text("Hamburg meets hamburg", _GEO_PATTERNS)

    assert cleaned == "meets hamburg"
