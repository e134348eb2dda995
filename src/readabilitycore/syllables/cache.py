"""
Bounded memoization of syllable counts keyed by (word, language).
"""

from __future__ import annotations

import threading
from typing import Dict, Optional, Tuple

from readabilitycore import observability

CacheKey = Tuple[str, str]


class SyllableCache:
    """
    Thread-safe size-bounded map of syllable counts.

    When full, the oldest inserted entry is evicted before a new one is
    stored. This bounds memory; it is not an LRU.
    """

    def __init__(self, max_size: int = 2000):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._entries: Dict[CacheKey, int] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @staticmethod
    def key(word: str, language: str) -> CacheKey:
        return word.lower(), language.lower()

    def get(self, word: str, language: str) -> Optional[int]:
        key = self.key(word, language)
        with self._lock:
            count = self._entries.get(key)
            if count is None:
                self._misses += 1
            else:
                self._hits += 1
        observability.increment("syllable_cache_misses" if count is None else "syllable_cache_hits")
        return count

    def put(self, word: str, language: str, count: int) -> None:
        key = self.key(word, language)
        evicted = False
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_size:
                del self._entries[next(iter(self._entries))]
                self._evictions += 1
                evicted = True
            self._entries[key] = count
        if evicted:
            observability.increment("syllable_cache_evictions")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = self._misses = self._evictions = 0

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {
                "size": len(self._entries),
                "max_size": self.max_size,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
            }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: CacheKey) -> bool:
        return self.key(*item) in self._entries
