"""Process-wide detector resources.

The dictionary, geo-term patterns, and language identifier are built once
and injected into detectors, instead of living in hidden module globals.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from core.config import EnglishGateConfig
from core.logging_config import get_logger
from detection.dictionary import load_english_dictionary
from detection.geo_terms import GEO_TERMS, compile_geo_term_patterns
from detection.trigram_analyzer import LanguageIdentifier, build_langdetect_identifier

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class DetectorResources:
    """Immutable collaborators shared by detectors.

    Attributes:
        dictionary: Known lowercase English words.
        geo_term_patterns: Compiled geo-term patterns, in list order.
        identifier: N-gram language identifier.
    """

    dictionary: frozenset[str]
    geo_term_patterns: tuple[re.Pattern[str], ...]
    identifier: LanguageIdentifier


def load_detector_resources(config: EnglishGateConfig) -> DetectorResources:
    """Build detector resources from runtime configuration.

    Args:
        config: Validated runtime configuration.

    Returns:
        Resources ready for injection.

    Raises:
        EnglishGateDependencyError: If wordfreq or langdetect is missing.
    """
    dictionary = load_english_dictionary(config.dictionary_wordlist, config.dictionary_size)
    geo_term_patterns = compile_geo_term_patterns(GEO_TERMS)
    identifier = build_langdetect_identifier(config.trigram_seed)
    _LOGGER.info(
        "detector_resources_loaded",
        dictionary_words=len(dictionary),
        geo_terms=len(geo_term_patterns),
        dictionary_wordlist=config.dictionary_wordlist,
    )
    return DetectorResources(
        dictionary=dictionary,
        geo_term_patterns=geo_term_patterns,
        identifier=identifier,
    )
