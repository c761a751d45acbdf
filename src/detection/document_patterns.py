"""Document identifier matching and removal.

Internal document codes such as AEM01-WI-DSU06-SD01 carry no language
signal. Callers can test for them directly, and the preprocessor strips
them before any other cleaning step.
"""

from __future__ import annotations

from detection.patterns import DOCUMENT_ID_MATCH_PATTERNS, DOCUMENT_ID_REMOVAL_PATTERNS


def matches_document_pattern(text: object) -> bool:
    """Check whether text contains a document identifier.

    Args:
        text: Candidate value. Non-string and empty values never match.

    Returns:
        True if any document identifier shape is found.
    """
    if not isinstance(text, str) or not text:
        return False
    return any(pattern.search(text) for pattern in DOCUMENT_ID_MATCH_PATTERNS)


def remove_document_patterns(text: str) -> str:
    """Strip every document identifier and normalize whitespace.

    Args:
        text: Input text.

    Returns:
        Text without document identifiers.
    """
    cleaned = text
    for pattern in DOCUMENT_ID_REMOVAL_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return normalize_whitespace(cleaned)


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""
    return " ".join(text.split())
