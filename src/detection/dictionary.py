"""English word dictionary provider.

This module builds the immutable set of known English words from the
wordfreq English word list. Loading costs a few seconds once per process;
the resulting frozenset is shared read-only afterwards.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from core.constants import (
    DEFAULT_DICTIONARY_LANGUAGE,
    DEFAULT_DICTIONARY_SIZE,
    DEFAULT_DICTIONARY_WORDLIST,
    DICTIONARY_FOREIGN_ZIPF_MARGIN,
    DICTIONARY_RIVAL_LANGUAGES,
)
from core.errors import EnglishGateDependencyError

# Tokens lose their apostrophes before classification, so both the stems
# and the merged spellings must resolve.
CONTRACTION_STEMS = frozenset(
    {
        "ain",
        "aren",
        "can",
        "couldn",
        "didn",
        "doesn",
        "don",
        "hadn",
        "hasn",
        "haven",
        "isn",
        "mustn",
        "needn",
        "shan",
        "shouldn",
        "wasn",
        "weren",
        "won",
        "wouldn",
    }
)

MERGED_CONTRACTIONS = frozenset(
    {
        "aint",
        "arent",
        "cant",
        "couldnt",
        "didnt",
        "doesnt",
        "dont",
        "hadnt",
        "hasnt",
        "havent",
        "hes",
        "im",
        "isnt",
        "itll",
        "ive",
        "lets",
        "mustnt",
        "shes",
        "shouldnt",
        "thats",
        "theres",
        "theyre",
        "theyve",
        "wasnt",
        "werent",
        "weve",
        "whats",
        "wont",
        "wouldnt",
        "youd",
        "youll",
        "youre",
        "youve",
    }
)


def build_dictionary(words: Iterable[str]) -> frozenset[str]:
    """Build the lowercase dictionary from raw words plus contraction forms.

    Args:
        words: Candidate words in any case.

    Returns:
        Immutable lowercase word set.
    """
    normalized = {word.strip().lower() for word in words if word and word.strip()}
    return frozenset(normalized | CONTRACTION_STEMS | MERGED_CONTRACTIONS)


def drop_foreign_words(
    words: Iterable[str],
    english_frequencies: Mapping[str, float],
    rival_frequencies: Sequence[Mapping[str, float]],
    zipf_margin: float = DICTIONARY_FOREIGN_ZIPF_MARGIN,
) -> list[str]:
    """Remove words that are far more frequent in another language.

    wordfreq's English lists come from web text and carry common foreign
    words such as "hola" or "merci". A word is dropped when some rival
    language uses it at least ``zipf_margin`` Zipf units more often.

    Args:
        words: Candidate English words.
        english_frequencies: English word frequencies.
        rival_frequencies: Word frequencies of competing languages.
        zipf_margin: Allowed Zipf gap before a word counts as foreign.

    Returns:
        Words kept, in input order.
    """
    ratio_limit = 10**zipf_margin
    kept: list[str] = []
    for word in words:
        english_frequency = english_frequencies.get(word, 0.0)
        rival_frequency = max(
            (frequencies.get(word, 0.0) for frequencies in rival_frequencies),
            default=0.0,
        )
        if rival_frequency > 0.0 and rival_frequency >= english_frequency * ratio_limit:
            continue
        kept.append(word)
    return kept


def load_english_dictionary(
    wordlist: str = DEFAULT_DICTIONARY_WORDLIST,
    size: int = DEFAULT_DICTIONARY_SIZE,
) -> frozenset[str]:
    """Load the English dictionary from wordfreq.

    Args:
        wordlist: wordfreq list name ("best", "large", or "small").
        size: Maximum number of most frequent words to consider.

    Returns:
        Immutable lowercase word set without words that belong to
        another language.

    Raises:
        EnglishGateDependencyError: If wordfreq is not installed.
    """
    wordfreq = _import_wordfreq()
    words = wordfreq.top_n_list(DEFAULT_DICTIONARY_LANGUAGE, size, wordlist=wordlist)
    english_frequencies = wordfreq.get_frequency_dict(
        DEFAULT_DICTIONARY_LANGUAGE, wordlist=wordlist
    )
    rival_frequencies = [
        wordfreq.get_frequency_dict(language) for language in DICTIONARY_RIVAL_LANGUAGES
    ]
    return build_dictionary(drop_foreign_words(words, english_frequencies, rival_frequencies))


def _import_wordfreq() -> Any:
    """Import the wordfreq library with a clear error on failure."""
    try:
        import wordfreq
    except ImportError as error:
        raise EnglishGateDependencyError(
            "The English dictionary requires the wordfreq library. "
            "Install with: pip install wordfreq"
        ) from error
    return wordfreq
