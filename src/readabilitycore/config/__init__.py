"""Configuration models and the lazily loaded process-wide settings."""

from __future__ import annotations

from .config import (
    AnalysisConfig,
    LazyConfig,
    MonitoringConfig,
    ReadabilityConfig,
    ScoreCoefficients,
    ScoringConfig,
    SegmentationConfig,
    SyllableConfig,
    find_config_file,
    settings,
)

__all__ = [
    "AnalysisConfig",
    "LazyConfig",
    "MonitoringConfig",
    "ReadabilityConfig",
    "ScoreCoefficients",
    "ScoringConfig",
    "SegmentationConfig",
    "SyllableConfig",
    "find_config_file",
    "settings",
]
