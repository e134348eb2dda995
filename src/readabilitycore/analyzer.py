"""
Readability analysis entry point.

``ReadabilityAnalyzer`` runs one segmentation pass over the text, counts
syllables once per unique word, aggregates per occurrence and scores the
result. The module-level coroutines delegate to a process-wide analyzer
built lazily from ``readabilitycore.config.settings``; its syllable cache
and hyphenation table live for the lifetime of the process.
"""

from __future__ import annotations

import asyncio
import threading
import time
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field

from readabilitycore import observability
from readabilitycore.config.config import ReadabilityConfig, settings
from readabilitycore.languages import is_supported_language, normalize_language
from readabilitycore.protocols import EMPTY_RESULT, AnalysisResult, Segmenter
from readabilitycore.scoring.calculator import ScoreCalculator
from readabilitycore.syllables.cache import SyllableCache
from readabilitycore.syllables.counter import SyllableCounter
from readabilitycore.syllables.hyphenation import HyphenationLoader
from readabilitycore.text.segmenter import has_letter, select_segmenter

logger = structlog.get_logger(__name__)

DEFAULT_COMPLEX_THRESHOLD = 3


class AnalysisOptions(BaseModel):
    """Per-call options. ``complex_threshold`` only affects ``complex_words``."""

    model_config = ConfigDict(frozen=True)

    complex_threshold: Optional[int] = Field(default=None, ge=1)


OptionsLike = Union[AnalysisOptions, Dict[str, Any], None]


class ReadabilityAnalyzer:
    """Computes sentence, word, syllable and complex-word counts and the score."""

    def __init__(
        self,
        segmenter: Optional[Segmenter] = None,
        counter: Optional[SyllableCounter] = None,
        calculator: Optional[ScoreCalculator] = None,
        complex_threshold: int = DEFAULT_COMPLEX_THRESHOLD,
    ):
        if complex_threshold < 1:
            raise ValueError("complex_threshold must be a positive integer")
        self.segmenter = segmenter or select_segmenter("auto")
        self.counter = counter or SyllableCounter()
        self.calculator = calculator or ScoreCalculator()
        self.complex_threshold = complex_threshold

    @classmethod
    def from_config(
        cls,
        config: ReadabilityConfig,
        cache: Optional[SyllableCache] = None,
        loader: Optional[HyphenationLoader] = None,
    ) -> ReadabilityAnalyzer:
        observability.set_metrics_enabled(config.monitoring.metrics_enabled)
        counter = SyllableCounter(
            cache=cache or SyllableCache(config.syllables.cache_size),
            loader=loader or HyphenationLoader(),
        )
        return cls(
            segmenter=select_segmenter(config.segmentation.backend),
            counter=counter,
            calculator=ScoreCalculator(config.scoring.coefficients),
            complex_threshold=config.analysis.complex_threshold,
        )

    def _threshold(self, options: OptionsLike) -> int:
        if options is None:
            return self.complex_threshold
        if not isinstance(options, AnalysisOptions):
            options = AnalysisOptions.model_validate(options)
        return options.complex_threshold or self.complex_threshold

    async def analyze(
        self,
        text: Optional[str],
        language: Optional[str] = None,
        options: OptionsLike = None,
    ) -> AnalysisResult:
        """
        Analyze one block of text.

        Args:
            text: Text to analyze; None, blank or letterless text scores 100.
            language: Language name or 3-letter code, any case. Defaults to english.
            options: ``AnalysisOptions`` or a mapping with ``complex_threshold``.

        Returns:
            AnalysisResult with all counts and the clamped 0-100 score.
        """
        threshold = self._threshold(options)
        language = normalize_language(language)

        if not text or not isinstance(text, str) or not has_letter(text):
            return EMPTY_RESULT

        started = time.perf_counter()
        sentences = self.segmenter.sentences(text, language)
        words = self.segmenter.words(text, language)
        if not sentences or not words:
            return EMPTY_RESULT

        frequencies = Counter(word.lower() for word in words)
        syllables = 0
        complex_words = 0
        for word, occurrences in frequencies.items():
            count = await self._count_syllables(word, language)
            syllables += count * occurrences
            if count >= threshold:
                complex_words += occurrences

        score = self.calculator.calculate(len(sentences), len(words), syllables, language)
        result = AnalysisResult(
            sentences=len(sentences),
            words=len(words),
            syllables=syllables,
            complex_words=complex_words,
            score=score,
        )

        label = {"language": _metric_language(language)}
        observability.increment("analyses", labels=label)
        observability.histogram("analysis_latency", time.perf_counter() - started, labels=label)
        logger.debug("Readability analyzed", language=language, segmenter=self.segmenter.name, **result.to_dict())
        return result

    async def score(self, text: Optional[str], language: Optional[str] = None) -> float:
        """Return only the score of ``analyze``."""
        result = await self.analyze(text, language)
        return result.score

    async def analyze_many(
        self,
        texts: Iterable[Optional[str]],
        language: Optional[str] = None,
        options: OptionsLike = None,
    ) -> List[AnalysisResult]:
        """Analyze several text blocks concurrently, preserving input order."""
        return list(await asyncio.gather(*(self.analyze(text, language, options) for text in texts)))

    async def _count_syllables(self, word: str, language: str) -> int:
        try:
            return await self.counter.count(word, language)
        except Exception as e:
            logger.warning("Syllable count failed, word contributes zero", word=word, language=language, error=str(e))
            observability.increment("syllable_errors", labels={"language": _metric_language(language)})
            return 0


def _metric_language(language: str) -> str:
    return language if is_supported_language(language) else "other"


# --- Process-wide analyzer ---

_analyzer: Optional[ReadabilityAnalyzer] = None
_analyzer_lock = threading.Lock()


def get_analyzer() -> ReadabilityAnalyzer:
    """Return the shared analyzer, building it from settings on first use."""
    global _analyzer
    if _analyzer is None:
        with _analyzer_lock:
            if _analyzer is None:
                _analyzer = ReadabilityAnalyzer.from_config(settings)
    return _analyzer


def reset_caches() -> None:
    """Clear the shared syllable cache and hyphenation table. Intended for tests."""
    analyzer = get_analyzer()
    analyzer.counter.cache.clear()
    analyzer.counter.loader.reset()


async def analyze_readability(
    text: Optional[str],
    language: Optional[str] = None,
    options: OptionsLike = None,
) -> AnalysisResult:
    return await get_analyzer().analyze(text, language, options)


async def calculate_readability_score(text: Optional[str], language: Optional[str] = None) -> float:
    return await get_analyzer().score(text, language)


async def analyze_many(
    texts: Iterable[Optional[str]],
    language: Optional[str] = None,
    options: OptionsLike = None,
) -> List[AnalysisResult]:
    return await get_analyzer().analyze_many(texts, language, options)
