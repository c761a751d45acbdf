"""Runtime configuration model for englishgate.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_DICTIONARY_SIZE,
    DEFAULT_DICTIONARY_WORDLIST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TRIGRAM_CACHE_SIZE,
    DEFAULT_TRIGRAM_SEED,
    DEFAULT_WORD_CACHE_SIZE,
    SUPPORTED_DICTIONARY_WORDLISTS,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import EnglishGateConfigError


@dataclass(frozen=True)
class EnglishGateConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level for structured log events.
        dictionary_wordlist: wordfreq list used to build the dictionary.
        dictionary_size: Maximum number of words taken from the list.
        trigram_seed: Seed that makes n-gram identification deterministic.
        trigram_cache_size: Capacity of the trigram result cache.
        word_cache_size: Capacity of the per-word verdict cache.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    dictionary_wordlist: str = DEFAULT_DICTIONARY_WORDLIST
    dictionary_size: int = DEFAULT_DICTIONARY_SIZE
    trigram_seed: int = DEFAULT_TRIGRAM_SEED
    trigram_cache_size: int = DEFAULT_TRIGRAM_CACHE_SIZE
    word_cache_size: int = DEFAULT_WORD_CACHE_SIZE

    @classmethod
    def from_env(cls) -> "EnglishGateConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            EnglishGateConfigError: If environment values are invalid.
        """
        wordlist = os.getenv("ENGLISHGATE_DICTIONARY_WORDLIST", DEFAULT_DICTIONARY_WORDLIST)
        return cls(
            log_level=resolve_log_level(os.getenv("ENGLISHGATE_LOG_LEVEL")),
            dictionary_wordlist=_parse_wordlist(wordlist),
            dictionary_size=_parse_positive_int(
                "ENGLISHGATE_DICTIONARY_SIZE", DEFAULT_DICTIONARY_SIZE
            ),
            trigram_seed=_parse_int("ENGLISHGATE_TRIGRAM_SEED", DEFAULT_TRIGRAM_SEED),
            trigram_cache_size=_parse_positive_int(
                "ENGLISHGATE_TRIGRAM_CACHE_SIZE", DEFAULT_TRIGRAM_CACHE_SIZE
            ),
            word_cache_size=_parse_positive_int(
                "ENGLISHGATE_WORD_CACHE_SIZE", DEFAULT_WORD_CACHE_SIZE
            ),
        )


def resolve_log_level(level_name: str | None = None) -> str:
    """Normalize a log level name, reading the environment when omitted.

    Args:
        level_name: Optional explicit level name.

    Returns:
        Upper-case supported level name.

    Raises:
        EnglishGateConfigError: If the level is not supported.
    """
    raw_value = level_name if level_name is not None else os.getenv("ENGLISHGATE_LOG_LEVEL")
    normalized = (raw_value or DEFAULT_LOG_LEVEL).strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise EnglishGateConfigError(
            f"Unsupported log level '{raw_value}'. Choose one of: {supported}."
        )
    return normalized


def _parse_wordlist(raw_value: str) -> str:
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_DICTIONARY_WORDLISTS:
        supported = ", ".join(SUPPORTED_DICTIONARY_WORDLISTS)
        raise EnglishGateConfigError(
            f"Invalid ENGLISHGATE_DICTIONARY_WORDLIST value '{raw_value}'. "
            f"Choose one of: {supported}."
        )
    return normalized


def _parse_int(variable_name: str, default: int) -> int:
    """Parse an integer environment value.

    Args:
        variable_name: Environment variable to read.
        default: Value used when the variable is unset.

    Returns:
        Parsed integer.

    Raises:
        EnglishGateConfigError: If value cannot be parsed into int.
    """
    raw_value = os.getenv(variable_name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError as error:
        raise EnglishGateConfigError(
            f"Invalid {variable_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {variable_name} to a numeric value."
        ) from error


def _parse_positive_int(variable_name: str, default: int) -> int:
    value = _parse_int(variable_name, default)
    if value <= 0:
        raise EnglishGateConfigError(
            f"Invalid {variable_name} value: expected a positive integer, got {value}."
        )
    return value
