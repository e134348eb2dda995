"""
Core contracts and dataclasses for the readability engine.

The data flows one way: raw text is segmented into sentences and words, each
unique word gets a syllable count (through the bounded cache and, for some
languages, a hyphenation dictionary), and the aggregate counts feed a
per-language linear formula.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from readabilitycore.languages import get_target_score

# Maps a cleaned word to the ordered positions where it may be hyphenated.
Hyphenator = Callable[[str], Sequence[int]]

MAX_SCORE = 100.0
MIN_SCORE = 0.0


class SyllableStrategy(Enum):
    """How syllables are counted for a language."""

    ENGLISH = "english"
    HYPHENATION = "hyphenation"
    GENERIC = "generic"


class Segmenter(Protocol):
    """Splits raw text into sentences and words."""

    name: str

    def sentences(self, text: str, language: str) -> List[str]:
        """Return the sentences of ``text``; never empty for text with letters."""
        ...

    def words(self, text: str, language: str) -> List[str]:
        """Return the word-like tokens of ``text`` in reading order."""
        ...


@dataclass(frozen=True)
class AnalysisResult:
    """Metrics and score for one block of text."""

    sentences: int = 0
    words: int = 0
    syllables: int = 0
    complex_words: int = 0
    score: float = MAX_SCORE

    @property
    def words_per_sentence(self) -> float:
        return self.words / self.sentences if self.sentences else 0.0

    @property
    def syllables_per_word(self) -> float:
        return self.syllables / self.words if self.words else 0.0

    def meets_target(self, target: Optional[float] = None) -> bool:
        """True when the score reaches the plain-language target."""
        threshold = get_target_score() if target is None else target
        return self.score >= threshold

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return asdict(self)


EMPTY_RESULT = AnalysisResult()
