"""Developer tools for identifier creation.

Provides round-trip benchmarking of character set creators.
"""

from .benchmarks import (
    BenchmarkCase,
    BenchmarkResult,
    BenchmarkSuite,
    CodecBenchmark,
)

__all__ = [
    "BenchmarkCase",
    "BenchmarkResult",
    "BenchmarkSuite",
    "CodecBenchmark",
]
