"""Core constants used across englishgate modules.

This module centralizes thresholds, cache limits, and defaults.
Keeping values here avoids magic literals in detection logic.
"""

from __future__ import annotations

ENGLISH_LANGUAGE_CODE = "en"
DEFAULT_ENGLISH_THRESHOLD = 0.8
DEFAULT_MIN_WORD_LENGTH = 2
SHORT_TEXT_MAX_TOKENS = 4
SHORT_TEXT_ENGLISH_THRESHOLD = 0.6
TRIGRAM_RESCUE_MIN_CONFIDENCE = 0.9
TRIGRAM_RESCUE_MIN_RATIO = 0.7
TRIGRAM_CANDIDATE_SCAN_LIMIT = 5
DEFAULT_TRIGRAM_CACHE_SIZE = 1000
DEFAULT_WORD_CACHE_SIZE = 5000
DEFAULT_TRIGRAM_SEED = 0
DEFAULT_DICTIONARY_LANGUAGE = "en"
DEFAULT_DICTIONARY_WORDLIST = "large"
SUPPORTED_DICTIONARY_WORDLISTS = ("best", "large", "small")
DEFAULT_DICTIONARY_SIZE = 350_000
DICTIONARY_RIVAL_LANGUAGES = ("de", "es", "fr", "it", "nl", "pt")
DICTIONARY_FOREIGN_ZIPF_MARGIN = 1.5
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
KEPT_PUNCTUATION = ".,!?:;'\"()-"
