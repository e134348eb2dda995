"""
Unified reading-ease formula with per-language coefficients.

Every language's established formula is rewritten into one shape::

    score = 100
            - words_per_sentence_weight * (words / sentences)
            - syllables_per_word_weight * (syllables / words)
            - syllables_per_100_words_weight * (100 * syllables / words)
            + intercept

and clamped to [0, 100].
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from readabilitycore.config.config import ScoreCoefficients
from readabilitycore.languages import DEFAULT_LANGUAGE
from readabilitycore.protocols import MAX_SCORE, MIN_SCORE

DEFAULT_COEFFICIENTS: Mapping[str, ScoreCoefficients] = MappingProxyType(
    {
        # Flesch: 206.835 - 1.015 ASL - 84.6 ASW
        "english": ScoreCoefficients(
            intercept=106.835, words_per_sentence_weight=1.015, syllables_per_word_weight=84.6
        ),
        # Amstad: 180 - ASL - 58.5 ASW
        "german": ScoreCoefficients(intercept=80.0, words_per_sentence_weight=1.0, syllables_per_word_weight=58.5),
        # Fernandez-Huerta: 206.84 - 1.02 ASL - 0.60 syllables per 100 words
        "spanish": ScoreCoefficients(
            intercept=106.84, words_per_sentence_weight=1.02, syllables_per_100_words_weight=0.60
        ),
        # Flesch-Vacca: 217 - 1.3 ASL - 0.6 syllables per 100 words
        "italian": ScoreCoefficients(
            intercept=117.0, words_per_sentence_weight=1.3, syllables_per_100_words_weight=0.6
        ),
        # Kandel-Moles: 207 - 1.015 ASL - 73.6 ASW
        "french": ScoreCoefficients(intercept=107.0, words_per_sentence_weight=1.015, syllables_per_word_weight=73.6),
        # Douma: 206.84 - 0.93 ASL - 0.77 syllables per 100 words
        "dutch": ScoreCoefficients(
            intercept=106.84, words_per_sentence_weight=0.93, syllables_per_100_words_weight=0.77
        ),
    }
)


def clamp_score(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


class ScoreCalculator:
    """Applies the unified formula with a language's coefficients."""

    def __init__(
        self,
        overrides: Optional[Mapping[str, ScoreCoefficients]] = None,
        default_language: str = DEFAULT_LANGUAGE,
    ):
        table = dict(DEFAULT_COEFFICIENTS)
        table.update({language.lower(): coefficients for language, coefficients in (overrides or {}).items()})
        self._coefficients: Mapping[str, ScoreCoefficients] = MappingProxyType(table)
        self.default_language = default_language

    def coefficients_for(self, language: str) -> ScoreCoefficients:
        """Coefficients for ``language``; unsupported languages use the default's."""
        return self._coefficients.get(language.lower(), self._coefficients[self.default_language])

    def calculate(self, sentences: int, words: int, syllables: int, language: str) -> float:
        """Return the clamped 0-100 score for the aggregate counts."""
        if sentences <= 0 or words <= 0:
            return MAX_SCORE

        c = self.coefficients_for(language)
        words_per_sentence = words / sentences
        syllables_per_word = syllables / words

        score = (
            MAX_SCORE
            - c.words_per_sentence_weight * words_per_sentence
            - (c.syllables_per_word_weight or 0.0) * syllables_per_word
            - (c.syllables_per_100_words_weight or 0.0) * (100 * syllables_per_word)
            + c.intercept
        )
        return clamp_score(score)
