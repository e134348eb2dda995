"""
Registry of the languages with a calibrated readability formula.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_LANGUAGE = "english"
UNKNOWN_LANGUAGE = "unknown"

# Plain-language pass mark. The per-language formulas already absorb the
# baseline differences between languages, so one target fits all of them.
TARGET_SCORE = 30

SUPPORTED_LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        "eng": "english",
        "deu": "german",
        "spa": "spanish",
        "ita": "italian",
        "fra": "french",
        "nld": "dutch",
    }
)

_LANGUAGE_NAMES = frozenset(SUPPORTED_LANGUAGES.values())


def _clean(value: Optional[str]) -> str:
    if not value or not isinstance(value, str):
        return ""
    return value.strip().lower()


def is_supported_language(value: Optional[str]) -> bool:
    """Check whether ``value`` is a known language code or name (any case)."""
    key = _clean(value)
    if not key:
        return False
    return key in SUPPORTED_LANGUAGES or key in _LANGUAGE_NAMES


def get_language_name(code: Optional[str]) -> str:
    """Convert a 3-letter language code to its name, or ``"unknown"``."""
    return SUPPORTED_LANGUAGES.get(_clean(code), UNKNOWN_LANGUAGE)


def get_target_score(language: Optional[str] = None) -> int:
    """Return the readability target; identical for every language."""
    return TARGET_SCORE


def normalize_language(language: Optional[str]) -> str:
    """
    Resolve a caller-supplied language to the name used internally.

    Codes map to names, names are lowercased, empty input defaults to
    english. Unknown values pass through lowercased so the generic
    syllable counter can still handle them.
    """
    key = _clean(language)
    if not key:
        return DEFAULT_LANGUAGE
    return SUPPORTED_LANGUAGES.get(key, key)
