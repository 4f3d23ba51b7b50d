"""Tests for identifier creation benchmarking.

This module tests the round-trip benchmark, its result aggregation and the
memory measurement hook.
"""

import pytest
from unittest.mock import Mock, patch

from identifier_codec.character import ALPHABETIC_CREATOR, HEXADECIMAL_CREATOR, Exclusion
from identifier_codec.tools.benchmarks import (
    BenchmarkCase,
    BenchmarkResult,
    BenchmarkSuite,
    CodecBenchmark,
)


def make_result(creator_name="hex", test_case="none_sequential", time_ms=100.0,
                memory_mb=1.0, values=1000, success=True):
    """Build a benchmark result with sensible defaults."""
    return BenchmarkResult(
        creator_name=creator_name,
        test_case=test_case,
        processing_time_ms=time_ms,
        memory_used_mb=memory_mb,
        values_processed=values,
        success=success,
        error_message=None if success else "failed"
    )


class TestBenchmarkResult:
    """Test benchmark result data structure."""

    def test_benchmark_result_creation(self):
        """Test basic benchmark result creation."""
        result = make_result()

        assert result.creator_name == "hex"
        assert result.test_case == "none_sequential"
        assert result.processing_time_ms == 100.0
        assert result.memory_used_mb == 1.0
        assert result.values_processed == 1000
        assert result.success is True
        assert result.error_message is None

    def test_values_per_second(self):
        """Test calculated throughput."""
        # 1000 values / 0.1 seconds = 10000 values/sec
        assert make_result().values_per_second == 10000.0

    def test_zero_time(self):
        """Test that zero time gives zero throughput."""
        assert make_result(time_ms=0.0).values_per_second == 0.0


class TestBenchmarkSuite:
    """Test benchmark suite aggregation."""

    def test_filtering(self):
        """Test filtering by creator and test case."""
        suite = BenchmarkSuite()
        suite.add_result(make_result("hex", "a"))
        suite.add_result(make_result("hex", "b"))
        suite.add_result(make_result("alpha", "a"))

        assert len(suite.get_results_by_creator("hex")) == 2
        assert len(suite.get_results_by_test_case("a")) == 2

    def test_statistics(self):
        """Test statistics over successful results only."""
        suite = BenchmarkSuite()
        suite.add_result(make_result(time_ms=100.0))
        suite.add_result(make_result(time_ms=200.0))
        suite.add_result(make_result(time_ms=50.0, success=False))

        stats = suite.get_statistics("hex", "processing_time_ms")

        assert stats["min"] == 100.0
        assert stats["max"] == 200.0
        assert stats["mean"] == 150.0
        assert stats["count"] == 2

    def test_statistics_empty(self):
        """Test statistics for an unknown creator."""
        assert BenchmarkSuite().get_statistics("missing", "processing_time_ms") == {}

    def test_generate_report(self):
        """Test report structure."""
        suite = BenchmarkSuite(suite_name="report")
        suite.add_result(make_result("hex", "a"))
        suite.add_result(make_result("hex", "b", success=False))

        report = suite.generate_report()

        assert report["suite_name"] == "report"
        assert report["total_results"] == 2
        assert report["creators"] == ["hex"]
        assert report["test_cases"] == ["a", "b"]
        assert report["summary"]["hex"]["success_rate"] == 0.5
        assert report["summary"]["hex"]["performance"]["count"] == 1


class TestCodecBenchmark:
    """Test the round-trip benchmark."""

    def test_invalid_run_counts(self):
        """Test run count validation."""
        with pytest.raises(ValueError, match="warmup_runs"):
            CodecBenchmark(HEXADECIMAL_CREATOR, "hex", warmup_runs=-1)

        with pytest.raises(ValueError, match="benchmark_runs"):
            CodecBenchmark(HEXADECIMAL_CREATOR, "hex", benchmark_runs=0)

    def test_default_cases(self):
        """Test a sequential and tweaked case per supported exclusion."""
        benchmark = CodecBenchmark(HEXADECIMAL_CREATOR, "hex")

        cases = benchmark.default_cases(4)

        assert [case.name for case in cases] == [
            "none_sequential", "none_tweaked",
            "first_zero_sequential", "first_zero_tweaked",
            "all_numeric_sequential", "all_numeric_tweaked",
        ]
        assert all(case.length == 4 for case in cases)
        assert cases[1].tweak == 123456

    def test_default_cases_without_exclusions(self):
        """Test that a creator without exclusions only gets NONE cases."""
        cases = CodecBenchmark(ALPHABETIC_CREATOR, "alpha").default_cases()

        assert [case.exclusion for case in cases] == [Exclusion.NONE, Exclusion.NONE]

    @patch("identifier_codec.tools.benchmarks.psutil.Process")
    def test_memory_measurement(self, mock_process):
        """Test memory usage reading."""
        mock_process.return_value.memory_info.return_value = Mock(rss=100 * 1024 * 1024)

        benchmark = CodecBenchmark(HEXADECIMAL_CREATOR, "hex")

        assert benchmark._measure_memory_usage() == 100.0

    def test_run_case_success(self):
        """Test a successful round trip."""
        benchmark = CodecBenchmark(HEXADECIMAL_CREATOR, "hex")

        with patch.object(benchmark, "_measure_memory_usage", return_value=10.0):
            result = benchmark.run_case(
                BenchmarkCase("all_numeric_tweaked", 3, Exclusion.ALL_NUMERIC, 123456, 50)
            )

        assert result.success is True
        assert result.values_processed == 50
        assert result.memory_used_mb == 0.0
        assert result.test_case == "all_numeric_tweaked"

    def test_run_case_limited_by_domain(self):
        """Test that the value count is capped by the domain."""
        benchmark = CodecBenchmark(HEXADECIMAL_CREATOR, "hex")

        with patch.object(benchmark, "_measure_memory_usage", return_value=10.0):
            result = benchmark.run_case(BenchmarkCase("tiny", 1, value_count=100))

        assert result.success is True
        assert result.values_processed == 16

    def test_run_case_failure(self):
        """Test that creation errors are reported as failed results."""
        benchmark = CodecBenchmark(ALPHABETIC_CREATOR, "alpha")

        with patch.object(benchmark, "_measure_memory_usage", return_value=10.0):
            result = benchmark.run_case(BenchmarkCase("bad", 3, Exclusion.FIRST_ZERO))

        assert result.success is False
        assert result.values_processed == 0
        assert "not supported" in result.error_message

    def test_run(self):
        """Test warmup and benchmark run counts."""
        benchmark = CodecBenchmark(
            HEXADECIMAL_CREATOR, "hex", warmup_runs=1, benchmark_runs=2
        )
        cases = [BenchmarkCase("short", 2, value_count=10)]

        with patch.object(benchmark, "_measure_memory_usage", return_value=10.0):
            with patch.object(benchmark, "run_case", wraps=benchmark.run_case) as run_case:
                suite = benchmark.run(cases)

        assert run_case.call_count == 3
        assert len(suite.results) == 2
        assert all(result.success for result in suite.results)
        assert suite.suite_name == "hex round trip"
