"""Sentence and word segmentation."""

from __future__ import annotations

from .abbreviations import ABBREVIATIONS, abbreviations_for
from .segmenter import NltkSegmenter, RegexSegmenter, has_letter, punkt_available, select_segmenter, split_words

__all__ = [
    "ABBREVIATIONS",
    "abbreviations_for",
    "NltkSegmenter",
    "RegexSegmenter",
    "has_letter",
    "punkt_available",
    "select_segmenter",
    "split_words",
]
