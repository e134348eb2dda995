"""Readability score calculation."""

from __future__ import annotations

from .calculator import DEFAULT_COEFFICIENTS, ScoreCalculator, clamp_score

__all__ = ["DEFAULT_COEFFICIENTS", "ScoreCalculator", "clamp_score"]
