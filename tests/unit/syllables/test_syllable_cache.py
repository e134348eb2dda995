"""Unit tests for the bounded syllable cache."""

from __future__ import annotations

import threading

import pytest
from readabilitycore.syllables import SyllableCache


class TestSyllableCache:
    def test_miss_then_hit(self, syllable_cache):
        assert syllable_cache.get("apple", "english") is None
        syllable_cache.put("apple", "english", 2)
        assert syllable_cache.get("apple", "english") == 2

    def test_key_is_case_insensitive(self, syllable_cache):
        syllable_cache.put("Apple", "English", 2)
        assert syllable_cache.get("APPLE", "english") == 2
        assert ("apple", "ENGLISH") in syllable_cache

    def test_languages_are_separate_keys(self, syllable_cache):
        syllable_cache.put("mode", "english", 1)
        syllable_cache.put("mode", "german", 2)
        assert syllable_cache.get("mode", "english") == 1
        assert syllable_cache.get("mode", "german") == 2

    def test_size_is_bounded(self):
        cache = SyllableCache(max_size=3)
        for i, word in enumerate(["one", "two", "three", "four", "five"]):
            cache.put(word, "english", i + 1)
            assert len(cache) <= 3

        assert len(cache) == 3
        assert cache.get("one", "english") is None
        assert cache.get("five", "english") == 5
        assert cache.stats()["evictions"] == 2

    def test_overwriting_existing_key_does_not_evict(self):
        cache = SyllableCache(max_size=2)
        cache.put("one", "english", 1)
        cache.put("two", "english", 1)
        cache.put("one", "english", 1)

        assert len(cache) == 2
        assert cache.stats()["evictions"] == 0

    def test_stats_and_clear(self, syllable_cache):
        syllable_cache.get("x", "english")
        syllable_cache.put("x", "english", 1)
        syllable_cache.get("x", "english")

        stats = syllable_cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["size"] == 1
        assert stats["max_size"] == 2000

        syllable_cache.clear()
        assert len(syllable_cache) == 0
        assert syllable_cache.stats()["hits"] == 0

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            SyllableCache(max_size=0)

    def test_concurrent_puts_stay_bounded(self):
        cache = SyllableCache(max_size=50)

        def writer(offset: int) -> None:
            for i in range(200):
                cache.put(f"word{offset}-{i}", "english", 1)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 50
