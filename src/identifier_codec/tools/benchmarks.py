"""Performance benchmarking for identifier creation.

This module measures the throughput and memory cost of creating strings
from values and decoding them back, with and without a tweak, so that
performance regressions in the transformer and creator can be tracked.
"""

import gc
import statistics
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import psutil

from ..character.creator import CharacterSetCreator
from ..character.exclusion import Exclusion
from ..numeric.range import Range
from ..shared.logging import get_logger

DEFAULT_VALUE_COUNT = 1000


@dataclass
class BenchmarkResult:
    """Result of a single benchmark run."""

    creator_name: str
    test_case: str
    processing_time_ms: float
    memory_used_mb: float
    values_processed: int
    success: bool
    error_message: Optional[str] = None

    @property
    def values_per_second(self) -> float:
        """Calculate values round-tripped per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.values_processed * 1000.0) / self.processing_time_ms


@dataclass
class BenchmarkSuite:
    """Collection of benchmark results with statistical analysis."""

    results: List[BenchmarkResult] = field(default_factory=list)
    suite_name: str = "Identifier Benchmark"
    timestamp: float = field(default_factory=time.time)

    def add_result(self, result: BenchmarkResult) -> None:
        """Add a benchmark result to the suite."""
        self.results.append(result)

    def get_results_by_creator(self, creator_name: str) -> List[BenchmarkResult]:
        """Get all results for a specific creator."""
        return [r for r in self.results if r.creator_name == creator_name]

    def get_results_by_test_case(self, test_case: str) -> List[BenchmarkResult]:
        """Get all results for a specific test case."""
        return [r for r in self.results if r.test_case == test_case]

    def get_statistics(self, creator_name: str, metric: str) -> Dict[str, float]:
        """Get statistical analysis for a creator and metric."""
        values = [
            getattr(result, metric)
            for result in self.get_results_by_creator(creator_name)
            if result.success and hasattr(result, metric)
        ]

        if not values:
            return {}

        return {
            "min": min(values),
            "max": max(values),
            "mean": statistics.mean(values),
            "median": statistics.median(values),
            "stdev": statistics.stdev(values) if len(values) > 1 else 0.0,
            "count": len(values)
        }

    def generate_report(self) -> Dict[str, Any]:
        """Generate benchmark report."""
        creators = sorted(set(r.creator_name for r in self.results))
        test_cases = sorted(set(r.test_case for r in self.results))

        report: Dict[str, Any] = {
            "suite_name": self.suite_name,
            "timestamp": self.timestamp,
            "total_results": len(self.results),
            "creators": creators,
            "test_cases": test_cases,
            "summary": {},
        }

        for creator in creators:
            creator_results = self.get_results_by_creator(creator)
            successful_results = [r for r in creator_results if r.success]

            report["summary"][creator] = {
                "total_runs": len(creator_results),
                "successful_runs": len(successful_results),
                "success_rate": len(successful_results) / len(creator_results),
                "performance": self.get_statistics(creator, "values_per_second"),
                "memory": self.get_statistics(creator, "memory_used_mb")
            }

        return report


@dataclass(frozen=True)
class BenchmarkCase:
    """A named creation workload."""

    name: str
    length: int
    exclusion: Exclusion = Exclusion.NONE
    tweak: Optional[int] = None
    value_count: int = DEFAULT_VALUE_COUNT


class CodecBenchmark:
    """Round-trip benchmark for a character set creator."""

    def __init__(
        self,
        creator: CharacterSetCreator,
        creator_name: str,
        correlation_id: Optional[str] = None,
        warmup_runs: int = 1,
        benchmark_runs: int = 3
    ) -> None:
        """Initialize benchmark.

        Args:
            creator: Creator to benchmark
            creator_name: Name reported in results
            correlation_id: Optional correlation ID for tracking
            warmup_runs: Number of warmup runs before benchmarking
            benchmark_runs: Number of benchmark runs per case
        """
        if warmup_runs < 0:
            raise ValueError("warmup_runs must be >= 0")
        if benchmark_runs <= 0:
            raise ValueError("benchmark_runs must be > 0")

        self.creator = creator
        self.creator_name = creator_name
        self.warmup_runs = warmup_runs
        self.benchmark_runs = benchmark_runs
        self.logger = get_logger(__name__, correlation_id, "benchmark")

    def default_cases(self, length: int = 6) -> List[BenchmarkCase]:
        """Create a sequential and a tweaked case for every supported exclusion."""
        cases = []
        for exclusion in (Exclusion.NONE,) + self.creator.exclusion_support:
            label = exclusion.name.lower()
            cases.append(BenchmarkCase(f"{label}_sequential", length, exclusion))
            cases.append(BenchmarkCase(f"{label}_tweaked", length, exclusion, tweak=123456))
        return cases

    def _measure_memory_usage(self) -> float:
        """Get current memory usage in MB."""
        process = psutil.Process()
        return process.memory_info().rss / 1024 / 1024

    def _round_trip(self, case: BenchmarkCase) -> Tuple[int, Optional[str]]:
        """Create strings for a range of values and decode each one back."""
        domain = self.creator.exclusion_domain(case.length, case.exclusion)
        count = min(case.value_count, domain)

        processed = 0
        for value, s in enumerate(
            self.creator.create(case.length, Range(0, count), case.exclusion, case.tweak)
        ):
            decoded = self.creator.value_for(s, case.exclusion, case.tweak)
            if decoded != value:
                return processed, f"Value {value} decoded as {decoded} from {s!r}"
            processed += 1

        return processed, None

    def run_case(self, case: BenchmarkCase) -> BenchmarkResult:
        """Benchmark a single case."""
        gc.collect()
        memory_before = self._measure_memory_usage()

        start_time = time.perf_counter()

        try:
            processed, error_message = self._round_trip(case)
            success = error_message is None
        except ValueError as e:
            processed = 0
            success = False
            error_message = str(e)

        processing_time = (time.perf_counter() - start_time) * 1000

        memory_after = self._measure_memory_usage()

        if not success:
            self.logger.warning(
                f"Benchmark case {case.name} failed: {error_message}",
                extra={"creator": self.creator_name}
            )

        return BenchmarkResult(
            creator_name=self.creator_name,
            test_case=case.name,
            processing_time_ms=processing_time,
            memory_used_mb=max(0.0, memory_after - memory_before),
            values_processed=processed,
            success=success,
            error_message=error_message
        )

    def run(self, cases: Optional[List[BenchmarkCase]] = None) -> BenchmarkSuite:
        """Run the benchmark over the given cases (all default cases if omitted)."""
        cases = cases if cases is not None else self.default_cases()
        suite = BenchmarkSuite(suite_name=f"{self.creator_name} round trip")

        self.logger.info(
            f"Running {len(cases)} benchmark cases",
            extra={"creator": self.creator_name, "runs": self.benchmark_runs}
        )

        for case in cases:
            for _ in range(self.warmup_runs):
                self.run_case(case)
            for _ in range(self.benchmark_runs):
                suite.add_result(self.run_case(case))

        return suite
