"""
Benchmark Runner
================

Bounded Context: Timing the performance backend against the reference backend.

Each measurement runs the same workload through one backend object
directly (never through the facade, so no fallback can blur the numbers)
and records wall time with time.perf_counter. Results are raw
measurements; the harness makes no claim about which backend is faster.
"""

import time
from functools import partial
from dataclasses import dataclass, asdict
from typing import Callable, Dict, Optional

from cadgeo_engine import GeometryEngine, Point
from cadgeo_engine.backends.base import GeometryBackend
from cadgeo_logging import LogEvent, StructuredLogger, create_logger


TimedBody = Callable[[], None]

# A workload prepares its inputs on one backend and returns the body to time.
Workload = Callable[[GeometryBackend], TimedBody]


@dataclass(frozen=True)
class BenchmarkResult:
    """
    One comparison.

    Attributes:
        performance_backend_ms: Total time on the performance backend
        reference_backend_ms: Total time on the reference backend
        ratio: reference_backend_ms / performance_backend_ms (0.0 when the
            performance time is zero)
    """

    performance_backend_ms: float
    reference_backend_ms: float
    ratio: float

    def __post_init__(self):
        if self.performance_backend_ms < 0 or self.reference_backend_ms < 0:
            raise ValueError(
                f"Timings must be >= 0, got performance={self.performance_backend_ms}, "
                f"reference={self.reference_backend_ms}"
            )

    @classmethod
    def from_timings(cls, performance_ms: float, reference_ms: float) -> "BenchmarkResult":
        ratio = reference_ms / performance_ms if performance_ms > 0 else 0.0
        return cls(
            performance_backend_ms=performance_ms,
            reference_backend_ms=reference_ms,
            ratio=ratio,
        )

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def time_workload(backend: GeometryBackend, workload: Workload, iterations: int) -> float:
    """
    Milliseconds spent running the body of `workload` `iterations` times on
    `backend`. Preparation happens once, before the clock starts.
    """
    body = workload(backend)
    start = time.perf_counter()
    for _ in range(iterations):
        body()
    return (time.perf_counter() - start) * 1000.0


def compare(engine: GeometryEngine, workload: Workload, iterations: int) -> BenchmarkResult:
    """
    Time a workload on both backends.

    Without a performance backend both columns measure the reference
    backend; pass reference_only to format_report to label such results.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")

    reference = engine.reference_backend
    performance = engine.performance_backend or reference

    performance_ms = time_workload(performance, workload, iterations)
    reference_ms = time_workload(reference, workload, iterations)
    return BenchmarkResult.from_timings(performance_ms, reference_ms)


# ========== Workloads ==========

def metrics_workload(polygon_factory: Callable[[GeometryBackend], object]) -> Workload:
    """Area, perimeter and centroid of one polygon, built once per backend."""
    def prepare(backend: GeometryBackend) -> TimedBody:
        polygon = polygon_factory(backend)

        def run() -> None:
            backend.area(polygon)
            backend.perimeter(polygon)
            backend.centroid(polygon)

        return run

    return prepare


COMPARISON_WORKLOADS: Dict[str, Workload] = {
    "small": metrics_workload(lambda b: b.square(1)),
    "medium": metrics_workload(lambda b: b.square(10)),
    "large": metrics_workload(lambda b: b.square(100)),
    "complex": metrics_workload(lambda b: b.circle(Point(0, 0), 1, 100)),
}


def heavy_computation(backend: GeometryBackend) -> None:
    for i in range(50):
        polygon = backend.circle(Point(i, i), 10, 64)
        backend.area(polygon)
        backend.perimeter(polygon)
        backend.centroid(polygon)
        for _ in range(10):
            backend.area(polygon)


def memory_intensive(backend: GeometryBackend) -> None:
    polygon = backend.circle(Point(0, 0), 100, 1000)
    backend.area(polygon)
    backend.perimeter(polygon)
    backend.centroid(polygon)


def batch_processing(backend: GeometryBackend) -> None:
    for i in range(1000):
        backend.area(backend.square(i % 10 + 1))


def per_call(function: Callable[[GeometryBackend], None]) -> Workload:
    """Workload that builds its polygons inside the timed body."""
    return lambda backend: partial(function, backend)


WORKLOADS: Dict[str, Workload] = {
    "heavy_computation": per_call(heavy_computation),
    "memory_intensive": per_call(memory_intensive),
    "batch_processing": per_call(batch_processing),
}


# ========== Runs ==========

def _run_suite(
    engine: GeometryEngine,
    suite: str,
    workloads: Dict[str, Workload],
    iterations: int,
    logger: Optional[StructuredLogger],
) -> Dict[str, BenchmarkResult]:
    logger = logger or create_logger("benchmark")
    logger.info(
        event=LogEvent.BENCHMARK_STARTED,
        message=f"Running {suite} benchmark",
        metadata={
            'suite': suite,
            'iterations': iterations,
            'performance_backend': getattr(engine.performance_backend, 'name', None),
        },
    )

    results = {name: compare(engine, workload, iterations) for name, workload in workloads.items()}

    logger.info(
        event=LogEvent.BENCHMARK_COMPLETED,
        message=f"{suite.capitalize()} benchmark completed",
        metadata={'suite': suite, 'results': {name: r.to_dict() for name, r in results.items()}},
    )
    return results


def run_comparison(
    engine: GeometryEngine,
    iterations: int = 1000,
    logger: Optional[StructuredLogger] = None,
) -> Dict[str, BenchmarkResult]:
    """
    Compare backends on small, medium, large and complex polygons.

    small/medium/large are squares of side 1, 10 and 100; complex is a
    100-gon circle of radius 1.
    """
    return _run_suite(engine, "comparison", COMPARISON_WORKLOADS, iterations, logger)


def run_single(
    engine: GeometryEngine,
    iterations: int = 1000,
    logger: Optional[StructuredLogger] = None,
) -> BenchmarkResult:
    """Compare backends on square(1) metrics."""
    results = _run_suite(engine, "single", {"single": COMPARISON_WORKLOADS["small"]}, iterations, logger)
    return results["single"]


def run_workloads(
    engine: GeometryEngine,
    iterations: int = 100,
    logger: Optional[StructuredLogger] = None,
) -> Dict[str, BenchmarkResult]:
    """Compare backends on heavy_computation, memory_intensive and batch_processing."""
    return _run_suite(engine, "workload", WORKLOADS, iterations, logger)
