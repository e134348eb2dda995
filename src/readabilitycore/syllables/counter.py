"""
Syllable counting strategies and the cache-backed counter that dispatches
between them.

Three strategies approximate syllables for scoring purposes; none of them
claims true linguistic syllabification:

- english: vowel groups with corrections for silent endings and a small
  table of irregular words;
- hyphenation: one syllable per segment returned by the language's pyphen
  dictionary (german, french, spanish, italian, dutch);
- generic: runs of Unicode vowels, for any other language and whenever a
  hyphenation dictionary cannot be loaded.
"""

from __future__ import annotations

import re
import unicodedata
from functools import lru_cache
from typing import Dict, Optional

import structlog

from readabilitycore.protocols import Hyphenator, SyllableStrategy
from readabilitycore.syllables.cache import SyllableCache
from readabilitycore.syllables.hyphenation import HYPHENATION_LOCALES, HyphenationLoader

logger = structlog.get_logger(__name__)

ENGLISH_EXCEPTIONS: Dict[str, int] = {
    "every": 3,
    "somewhere": 2,
    "through": 1,
    "business": 2,
    "area": 3,
    "idea": 3,
    "create": 2,
    "science": 2,
    "poem": 2,
}

_ENGLISH_VOWELS = "aeiouy"
_ENGLISH_VOWEL_GROUP = re.compile(r"[aeiouy]+")
_NON_ASCII_LETTER = re.compile(r"[^a-z]")
_CONSONANT_LE = re.compile(r"[^aeiouy]le$")
_VOWEL_ING = re.compile(r"[aeiouy]ing$")

# Base letters (after stripping diacritics) treated as vowels by the
# generic counter: Latin, Greek and Cyrillic.
_GENERIC_VOWELS = frozenset("aeiouyæøœåɑɛɪɔʊəαεηιουωаеёиоуыэюяіїєө")
_WORD_JOINERS = "'’-"


@lru_cache(maxsize=None)
def resolve_strategy(language: str) -> SyllableStrategy:
    """Map a normalized language name to its counting strategy."""
    language = language.lower()
    if language == "english":
        return SyllableStrategy.ENGLISH
    if language in HYPHENATION_LOCALES:
        return SyllableStrategy.HYPHENATION
    return SyllableStrategy.GENERIC


def _strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))


def _is_letter_or_mark(ch: str) -> bool:
    return unicodedata.category(ch)[0] in "LM"


def count_english_syllables(word: str) -> int:
    """Rule-based english syllable count; 0 only for words without letters."""
    lowered = unicodedata.normalize("NFC", word.lower())
    cleaned = _NON_ASCII_LETTER.sub("", _strip_diacritics(lowered))
    if not cleaned:
        return count_generic_syllables(word)

    if cleaned in ENGLISH_EXCEPTIONS:
        return ENGLISH_EXCEPTIONS[cleaned]
    if len(cleaned) <= 3:
        return 1

    # A leading "y" is a consonant (yellow, young).
    stem = cleaned[1:] if cleaned.startswith("y") else cleaned
    count = len(_ENGLISH_VOWEL_GROUP.findall(stem))

    if cleaned.endswith("e"):
        # Silent final "e", except in vowel pairs (agree, true), after
        # consonant + "le" (apple, simple) and when accented (café, résumé).
        if (
            cleaned[-2] not in _ENGLISH_VOWELS
            and not _CONSONANT_LE.search(cleaned)
            and not lowered.endswith("é")
        ):
            count -= 1
    elif cleaned.endswith("es"):
        if cleaned[-3] not in "aeiouycgsxzhl":
            count -= 1
    elif cleaned.endswith("ed"):
        if cleaned[-3] not in "aeiouytd":
            count -= 1

    # "being", "going": the vowel before "-ing" forms its own syllable.
    if _VOWEL_ING.search(cleaned):
        count += 1

    return max(count, 1)


def clean_for_hyphenation(word: str) -> str:
    """Keep letters, marks, apostrophes and hyphens."""
    return "".join(ch for ch in unicodedata.normalize("NFC", word) if _is_letter_or_mark(ch) or ch in _WORD_JOINERS)


def count_hyphenated_syllables(word: str, hyphenator: Hyphenator) -> int:
    """One syllable per hyphenation segment, with a floor of 1."""
    cleaned = clean_for_hyphenation(word).lower()
    if not any(ch.isalpha() for ch in cleaned):
        return 0
    return max(len(hyphenator(cleaned)) + 1, 1)


def count_generic_syllables(word: str) -> int:
    """Count runs of Unicode vowels; 0 for tokens without letters."""
    letters = [ch for ch in unicodedata.normalize("NFC", word) if _is_letter_or_mark(ch)]
    if not any(ch.isalpha() for ch in letters):
        return 0

    count = 0
    previous_was_vowel = False
    for ch in letters:
        if unicodedata.category(ch).startswith("M"):
            # A combining mark belongs to the preceding letter.
            continue
        is_vowel = _strip_diacritics(ch).lower() in _GENERIC_VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel
    return max(count, 1)


class SyllableCounter:
    """Counts syllables per (word, language), memoized in a bounded cache."""

    def __init__(self, cache: Optional[SyllableCache] = None, loader: Optional[HyphenationLoader] = None):
        self.cache = cache or SyllableCache()
        self.loader = loader or HyphenationLoader()

    async def count(self, word: str, language: str) -> int:
        """
        Return the syllable count of ``word`` in ``language``.

        Awaits only the first time a language's hyphenation dictionary is
        needed; everything afterwards is served synchronously.
        """
        language = language.lower()
        cached = self.cache.get(word, language)
        if cached is not None:
            return cached

        strategy = resolve_strategy(language)
        if strategy is SyllableStrategy.ENGLISH:
            count = count_english_syllables(word)
        elif strategy is SyllableStrategy.HYPHENATION:
            hyphenator = await self.loader.get_hyphenator(language)
            if hyphenator is None:
                count = count_generic_syllables(word)
            else:
                count = count_hyphenated_syllables(word, hyphenator)
        else:
            count = count_generic_syllables(word)

        if count > 0:
            self.cache.put(word, language, count)
        return count
