"""Pattern library for the detection pipeline.

Every regular expression family lives here as data: a named spec with
its purpose, compiled once at import. Vocabulary lists are plain word
tuples joined into anchored alternations.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Iterable


@dataclass(frozen=True)
class PatternSpec:
    """Named regular expression with its role in the pipeline.

    Attributes:
        name: Stable identifier used in tests and reports.
        purpose: Short description of what the pattern finds.
        expression: Python regular expression source.
        flags: ``re`` flags applied when compiling.
    """

    name: str
    purpose: str
    expression: str
    flags: int = 0

    def compile(self) -> re.Pattern[str]:
        """Compile the expression with its flags."""
        return re.compile(self.expression, self.flags)


def word_list_expression(words: Iterable[str]) -> str:
    """Build a non-capturing alternation from literal words."""
    return "(?:" + "|".join(re.escape(word) for word in words) + ")"


def compile_specs(specs: Iterable[PatternSpec]) -> tuple[re.Pattern[str], ...]:
    """Compile pattern specs in order."""
    return tuple(spec.compile() for spec in specs)


DOCUMENT_ID_MATCH_SPECS = (
    PatternSpec(
        name="segmented_document_id",
        purpose="Prefix code followed by one to three hyphen-joined segments",
        expression=r"\b[A-Z]{2,6}\d{1,4}(?:-[A-Z]{1,3}\d{1,4}){1,3}\b",
    ),
    PatternSpec(
        name="two_part_document_id",
        purpose="Prefix code with one suffix segment, e.g. AURG340-SF06",
        expression=r"\b[A-Z]{2,6}\d{2,4}-[A-Z]{1,3}\d{1,3}\b",
    ),
    PatternSpec(
        name="simple_document_id",
        purpose="Bare prefix code, e.g. AEM01",
        expression=r"\b[A-Z]{2,6}\d{1,4}\b",
    ),
)

DOCUMENT_ID_REMOVAL_SPECS = (
    PatternSpec(
        name="segmented_document_id",
        purpose="Prefix code and up to four segments with optional digits",
        expression=r"\b[A-Z]{2,6}\d{0,4}(?:-[A-Z]{2,6}\d{0,4}){1,4}\b",
    ),
    PatternSpec(
        name="two_part_document_id",
        purpose="Prefix code with one suffix segment",
        expression=r"\b[A-Z]{2,6}\d{2,4}-[A-Z]{1,3}\d{1,3}\b",
    ),
    PatternSpec(
        name="simple_document_id",
        purpose="Bare prefix code",
        expression=r"\b[A-Z]{2,6}\d{1,4}\b",
    ),
    PatternSpec(
        name="letter_prefixed_document_id",
        purpose="Letter code joined to a numbered letter code, e.g. WI-DSU06",
        expression=r"\b[A-Z]{2,4}-[A-Z]{2,4}\d{2,4}\b",
    ),
)

# Both cases are listed instead of using IGNORECASE: Unicode case folding
# makes dotless "ı" match ASCII "i" and "I".
NON_ENGLISH_LOWERCASE_LETTERS = "äöüßéèêëàâçùûÿæœáíóúñìòåøąćęłńśźżşğı"
NON_ENGLISH_UPPERCASE_LETTERS = "ÄÖÜÉÈÊËÀÂÇÙÛŸÆŒÁÍÓÚÑÌÒÅØĄĆĘŁŃŚŹŻŞĞİ"

NON_ENGLISH_CHARACTER_SPEC = PatternSpec(
    name="non_english_characters",
    purpose="German, French, Spanish, Italian, Scandinavian, Polish and Turkish letters",
    expression=f"[{NON_ENGLISH_LOWERCASE_LETTERS}{NON_ENGLISH_UPPERCASE_LETTERS}¡¿]",
)

NON_ENGLISH_SUFFIXES = (
    "keit",
    "schaft",
    "ción",
    "zione",
    "mente",
    "baar",
    "lijk",
    "eur",
    "agem",
    "ção",
)

NON_ENGLISH_SUFFIX_SPEC = PatternSpec(
    name="non_english_suffixes",
    purpose="Word endings typical of German, Spanish, Italian, Dutch, Portuguese, French",
    expression=word_list_expression(NON_ENGLISH_SUFFIXES) + r"\Z",
    flags=re.IGNORECASE,
)

# Entries of the word lists below that are also everyday English words.
# They are left out of every list so the screen never rejects them.
ENGLISH_HOMOGRAPHS = frozenset(
    {
        "al", "ben", "biz", "come", "con", "dare", "den", "die", "dig", "din",
        "dine", "dire", "door", "dove", "fare", "ham", "hun", "lo", "met", "min",
        "mine", "op", "sin", "size", "um", "want",
    }
)


def without_english_homographs(words: Iterable[str]) -> tuple[str, ...]:
    """Drop English homographs and repeated entries, keeping first-seen order."""
    kept: list[str] = []
    for word in words:
        if word.lower() not in ENGLISH_HOMOGRAPHS and word not in kept:
            kept.append(word)
    return tuple(kept)


NON_ENGLISH_FUNCTION_WORDS = without_english_homographs(
    (
        "le", "la", "les", "du", "des", "dans", "avec", "sans", "sur", "sous", "entre",
        "el", "los", "las", "del", "al", "con", "sin", "por",
        "der", "die", "das", "den", "dem", "des", "ein", "eine", "einen", "einem",
        "einer", "eines", "mit",
        "il", "lo", "gli",
        "het", "een", "op", "aan", "voor", "met", "door",
        "os", "dos", "das", "nos", "nas", "um", "uma",
    )
)

NON_ENGLISH_FUNCTION_WORD_SPEC = PatternSpec(
    name="non_english_function_words",
    purpose="Articles and prepositions of several European languages",
    expression=word_list_expression(NON_ENGLISH_FUNCTION_WORDS),
    flags=re.IGNORECASE,
)

_VOCABULARY_SOURCE = {
    "german": (
        "und", "oder", "wann", "aber", "kann", "wenn", "weil", "dass", "ob", "für",
        "nicht", "kein", "keine", "nur", "sehr", "schon", "noch", "jetzt", "immer",
        "wieder", "möchte", "würde", "hätte", "könnte", "sollte", "müsste", "dürfte",
    ),
    "spanish": (
        "que", "como", "porque", "pero", "cuando", "donde", "quien", "cual", "este",
        "esta", "estos", "estas", "ese", "esa", "esos", "esas", "aquel", "aquella",
        "aquellos", "aquellas",
    ),
    "french": (
        "est", "sont", "était", "être", "avoir", "faire", "dire", "voir", "pouvoir",
        "vouloir", "devoir", "falloir", "savoir", "quand", "où", "pourquoi", "qui",
        "quel", "quelle", "quels", "quelles", "ce", "cette", "ces", "cet",
    ),
    "italian": (
        "sono", "sei", "è", "siamo", "siete", "essere", "avere", "fare", "dire",
        "andare", "vedere", "dare", "sapere", "potere", "volere", "come", "quando",
        "dove", "perché", "chi", "quale", "quali",
    ),
    "dutch": (
        "en", "hoe", "es", "er", "wanneer", "je", "stel", "kritiek", "et", "kritisk",
        "maar", "want", "omdat", "hoewel", "terwijl", "tenzij", "indien", "toen",
        "totdat", "voordat", "nadat", "zodat", "mits", "toch", "dus", "immers",
        "namelijk",
    ),
    "portuguese": (
        "eu", "tu", "ele", "ela", "nós", "vós", "eles", "elas", "isto", "isso",
        "aquilo", "mesmo", "mesma", "mesmos", "mesmas", "próprio", "própria",
        "próprios", "próprias",
    ),
    "turkish": (
        "ben", "sen", "biz", "siz", "onlar", "bana", "sana", "ona", "bize", "size",
        "onlara", "benim", "senin", "onun", "bizim", "sizin", "onların",
    ),
    "scandinavian": (
        "jeg", "mig", "min", "mit", "mine", "dig", "din", "dit", "dine", "han", "ham",
        "hans", "hun", "hende", "hendes", "den", "det", "de", "dem", "deres", "denne",
        "dette", "disse",
    ),
}

NON_ENGLISH_VOCABULARY = {
    language: without_english_homographs(words)
    for language, words in _VOCABULARY_SOURCE.items()
}


NON_ENGLISH_VOCABULARY_SPECS = tuple(
    PatternSpec(
        name=f"{language}_vocabulary",
        purpose=f"Common {language.capitalize()} words absent from English",
        expression=word_list_expression(words),
        flags=re.IGNORECASE,
    )
    for language, words in NON_ENGLISH_VOCABULARY.items()
)

ENGLISH_CHARACTERS_SPEC = PatternSpec(
    name="english_characters",
    purpose="Only ASCII letters, digits, apostrophes and hyphens",
    expression=r"[a-zA-Z0-9'-]+",
)

NUMBER_SPEC = PatternSpec(
    name="number",
    purpose="Standalone ASCII digit run",
    expression=r"[0-9]+",
)

ABBREVIATION_SPEC = PatternSpec(
    name="abbreviation",
    purpose="Two or more uppercase letters with optional trailing digits",
    expression=r"[A-Z]{2,}[0-9]*",
)

WORD_PUNCTUATION_SPEC = PatternSpec(
    name="word_punctuation",
    purpose="Punctuation stripped from each token before classification",
    expression=r"""['‘’\-"“”`~!@#$%^&*()+={}\[\]|\\:;<>?,./]""",
)

DOCUMENT_ID_MATCH_PATTERNS = compile_specs(DOCUMENT_ID_MATCH_SPECS)
DOCUMENT_ID_REMOVAL_PATTERNS = compile_specs(DOCUMENT_ID_REMOVAL_SPECS)
NON_ENGLISH_CHARACTER_PATTERN = NON_ENGLISH_CHARACTER_SPEC.compile()
NON_ENGLISH_SUFFIX_PATTERN = NON_ENGLISH_SUFFIX_SPEC.compile()
NON_ENGLISH_FUNCTION_WORD_PATTERN = NON_ENGLISH_FUNCTION_WORD_SPEC.compile()
NON_ENGLISH_VOCABULARY_PATTERNS = compile_specs(NON_ENGLISH_VOCABULARY_SPECS)
ENGLISH_CHARACTERS_PATTERN = ENGLISH_CHARACTERS_SPEC.compile()
NUMBER_PATTERN = NUMBER_SPEC.compile()
ABBREVIATION_PATTERN = ABBREVIATION_SPEC.compile()
WORD_PUNCTUATION_PATTERN = WORD_PUNCTUATION_SPEC.compile()
