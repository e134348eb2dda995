"""
Defines Prometheus metrics for the readability engine.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Reloading this module (as test suites do) must reuse the collectors that
# are already registered instead of raising "Duplicated timeseries".


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        # Counters register under their "_total"-stripped name as well.
        for key in (name, f"{name}_total"):
            existing = _PROM_REGISTRY._names_to_collectors.get(key)
            if existing is not None:
                return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            return _PROM_REGISTRY._names_to_collectors[f"{name}_total"]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]


def _create_metrics() -> Dict[str, Any]:
    return {
        "analyses": Counter(
            "readabilitycore_analyses",
            "Total number of readability analyses performed",
            ["language"],
        ),
        "analysis_latency": Histogram(
            "readabilitycore_analysis_latency_seconds",
            "Time spent analyzing one block of text",
            ["language"],
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0),
        ),
        "syllable_cache_hits": Counter(
            "readabilitycore_syllable_cache_hits",
            "Syllable counts served from the cache",
        ),
        "syllable_cache_misses": Counter(
            "readabilitycore_syllable_cache_misses",
            "Syllable counts that had to be computed",
        ),
        "syllable_cache_evictions": Counter(
            "readabilitycore_syllable_cache_evictions",
            "Entries evicted to keep the syllable cache bounded",
        ),
        "syllable_errors": Counter(
            "readabilitycore_syllable_errors",
            "Words whose syllable count failed and contributed zero",
            ["language"],
        ),
        "hyphenation_loads": Counter(
            "readabilitycore_hyphenation_loads",
            "Hyphenation dictionary loads by outcome",
            ["language", "status"],
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()
