"""
cadgeo Benchmark
================

Bounded Context: Backend timing comparison.

Usage:

    from cadgeo_bench import run_comparison, format_report

    results = run_comparison(engine, iterations=1000)
    print(format_report(results))
"""

from cadgeo_bench.runner import (
    BenchmarkResult,
    COMPARISON_WORKLOADS,
    WORKLOADS,
    compare,
    run_comparison,
    run_single,
    run_workloads,
    time_workload,
)
from cadgeo_bench.report import format_report, format_ms, format_ratio

__all__ = [
    "BenchmarkResult",
    "COMPARISON_WORKLOADS",
    "WORKLOADS",
    "compare",
    "run_comparison",
    "run_single",
    "run_workloads",
    "time_workload",
    "format_report",
    "format_ms",
    "format_ratio",
]
