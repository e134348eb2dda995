"""
Benchmarking utilities for ReadabilityCore performance testing.

This package contains tools for measuring analysis throughput and syllable
cache behaviour across batches of text blocks.
"""

__version__ = "0.1.0"
