"""
ReadabilityCore - multilingual readability scoring.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .analyzer import (
    AnalysisOptions,
    ReadabilityAnalyzer,
    analyze_many,
    analyze_readability,
    calculate_readability_score,
    get_analyzer,
    reset_caches,
)
from .config import ReadabilityConfig, ScoreCoefficients
from .languages import (
    SUPPORTED_LANGUAGES,
    get_language_name,
    get_target_score,
    is_supported_language,
    normalize_language,
)
from .protocols import AnalysisResult, SyllableStrategy

__all__ = [
    "__version__",
    "AnalysisOptions",
    "AnalysisResult",
    "ReadabilityAnalyzer",
    "ReadabilityConfig",
    "SUPPORTED_LANGUAGES",
    "ScoreCoefficients",
    "SyllableStrategy",
    "analyze_many",
    "analyze_readability",
    "calculate_readability_score",
    "get_analyzer",
    "get_language_name",
    "get_target_score",
    "is_supported_language",
    "normalize_language",
    "reset_caches",
]
