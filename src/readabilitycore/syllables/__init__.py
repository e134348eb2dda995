"""Syllable counting, its bounded cache and the hyphenation loader."""

from __future__ import annotations

from .cache import SyllableCache
from .counter import (
    ENGLISH_EXCEPTIONS,
    SyllableCounter,
    count_english_syllables,
    count_generic_syllables,
    count_hyphenated_syllables,
    resolve_strategy,
)
from .hyphenation import HYPHENATION_LOCALES, HyphenationLoader, load_pyphen

__all__ = [
    "ENGLISH_EXCEPTIONS",
    "HYPHENATION_LOCALES",
    "HyphenationLoader",
    "SyllableCache",
    "SyllableCounter",
    "count_english_syllables",
    "count_generic_syllables",
    "count_hyphenated_syllables",
    "load_pyphen",
    "resolve_strategy",
]
