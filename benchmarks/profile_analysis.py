#!/usr/bin/env python3
"""
Benchmark script for profiling readability analysis over 1000 text blocks.

Mirrors how a page audit scores every text element of a page concurrently:
blocks are analyzed in batches through ``analyze_many`` with one shared
analyzer, so the syllable cache and hyphenation tables warm up as they would
in a long-running process.
"""

import asyncio
import json
import time
from pathlib import Path
from typing import Dict, List

from readabilitycore import ReadabilityAnalyzer, ReadabilityConfig
from readabilitycore.config import MonitoringConfig
from readabilitycore.observability import configure_logging

SAMPLES: Dict[str, List[str]] = {
    "english": [
        "The quick brown fox jumps over the lazy dog. Pack my box with five dozen liquor jugs.",
        "Comprehensive documentation facilitates the understanding of sophisticated systems.",
    ],
    "german": [
        "Der schnelle braune Fuchs springt über den faulen Hund.",
        "Die Kraftfahrzeughaftpflichtversicherung ist in Deutschland verpflichtend.",
    ],
    "spanish": ["El veloz murciélago hindú comía feliz cardillo y kiwi. La cigüeña tocaba el saxofón."],
    "italian": ["Ma la volpe, col suo balzo, ha raggiunto il quieto Fido. Il sole splende oggi."],
    "french": ["Portez ce vieux whisky au juge blond qui fume. M. Dupont est arrivé hier."],
    "dutch": ["Pa's wijze lynx bezag vroom het fikse aquaduct. Het regent vandaag niet."],
}


def generate_blocks(count: int = 1000) -> List[tuple]:
    """Generate (text, language) pairs cycling through every language."""
    pairs = [(text, language) for language, texts in SAMPLES.items() for text in texts]
    return [(f"{pairs[i % len(pairs)][0]} Block {i}.", pairs[i % len(pairs)][1]) for i in range(count)]


async def run_benchmark(count: int = 1000, batch_size: int = 50) -> Dict[str, object]:
    """Run the benchmark and return performance metrics."""
    config = ReadabilityConfig(segmentation={"backend": "regex"}, monitoring={"metrics_enabled": False})
    analyzer = ReadabilityAnalyzer.from_config(config)
    blocks = generate_blocks(count)

    by_language: Dict[str, List[str]] = {}
    for text, language in blocks:
        by_language.setdefault(language, []).append(text)

    start_time = time.perf_counter()
    analyzed = 0
    for language, texts in by_language.items():
        for i in range(0, len(texts), batch_size):
            results = await analyzer.analyze_many(texts[i : i + batch_size], language)
            analyzed += len(results)
    duration = time.perf_counter() - start_time

    return {
        "duration_seconds": duration,
        "total_blocks": count,
        "analyzed_count": analyzed,
        "throughput_blocks_per_second": analyzed / duration if duration > 0 else 0,
        "avg_time_per_block_ms": (duration / analyzed) * 1000 if analyzed > 0 else 0,
        "syllable_cache": analyzer.counter.cache.stats(),
    }


async def main():
    """Run benchmark and save results."""
    configure_logging(MonitoringConfig(log_level="WARNING"))
    print("Running readability benchmark with 1000 text blocks...")

    metrics = await run_benchmark()

    print("\nBenchmark Results:")
    print(f"  Duration: {metrics['duration_seconds']:.2f} seconds")
    print(f"  Throughput: {metrics['throughput_blocks_per_second']:.2f} blocks/second")
    print(f"  Avg time per block: {metrics['avg_time_per_block_ms']:.2f} ms")
    print(f"  Analyzed: {metrics['analyzed_count']}/{metrics['total_blocks']}")
    print(f"  Syllable cache: {metrics['syllable_cache']}")

    results_file = Path(__file__).parent / "benchmark_results.json"
    with open(results_file, "w") as f:
        json.dump(metrics, f, indent=2)

    print(f"\nResults saved to: {results_file}")

    return metrics


if __name__ == "__main__":
    asyncio.run(main())
