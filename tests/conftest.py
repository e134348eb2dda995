"""
Test configuration for ReadabilityCore.

Analyzer fixtures pin the regex segmenter so results do not depend on which
NLTK data happens to be installed, and the process-wide caches are reset
after every test.
"""

# Standard library imports
import asyncio
import os
from typing import AsyncGenerator, List

# Third-party imports
import pytest
import pytest_asyncio

# Pin the shared analyzer to the deterministic backend before it is built.
os.environ["READABILITY_SEGMENTATION__BACKEND"] = "regex"

# Local imports
from readabilitycore import analyzer as analyzer_module
from readabilitycore.analyzer import ReadabilityAnalyzer
from readabilitycore.syllables import HyphenationLoader, SyllableCache, SyllableCounter
from readabilitycore.text import RegexSegmenter

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "slow: Tests that take >10 seconds")


@pytest_asyncio.fixture(autouse=True)
async def cleanup_tasks() -> AsyncGenerator[None, None]:
    """Cancel any asyncio task a test leaves behind."""
    tasks_before = asyncio.all_tasks()
    yield
    new_tasks = asyncio.all_tasks() - tasks_before

    for task in new_tasks:
        if not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass


@pytest.fixture(autouse=True)
def reset_shared_caches():
    """Start every test with an empty shared syllable cache and hyphenation table."""
    yield
    if analyzer_module._analyzer is not None:
        analyzer_module.reset_caches()


# ============================================================================
# Core Test Fixtures
# ============================================================================


@pytest.fixture
def segmenter() -> RegexSegmenter:
    return RegexSegmenter()


@pytest.fixture
def syllable_cache() -> SyllableCache:
    return SyllableCache(max_size=2000)


@pytest.fixture
def hyphenation_loader() -> HyphenationLoader:
    return HyphenationLoader()


@pytest.fixture
def syllable_counter(syllable_cache, hyphenation_loader) -> SyllableCounter:
    return SyllableCounter(cache=syllable_cache, loader=hyphenation_loader)


@pytest.fixture
def analyzer(segmenter, syllable_counter) -> ReadabilityAnalyzer:
    """Provide an isolated analyzer with its own caches."""
    return ReadabilityAnalyzer(segmenter=segmenter, counter=syllable_counter)


@pytest.fixture
def all_languages() -> List[str]:
    return ["english", "german", "spanish", "italian", "french", "dutch"]


@pytest.fixture
def simple_english() -> str:
    return "The cat sits on the mat. It is a warm day. Birds sing in the trees."


@pytest.fixture
def complex_english() -> str:
    return (
        "The implementation necessitates comprehensive understanding of multifaceted "
        "algorithmic paradigms that demonstrate sophisticated computational methodologies."
    )
