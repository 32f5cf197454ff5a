"""Plain-text benchmark report."""

from typing import Dict

from cadgeo_bench.runner import BenchmarkResult


def format_ms(value: float) -> str:
    return f"{value:.2f}ms"


def format_ratio(value: float) -> str:
    return f"{value:.3f}x"


REFERENCE_ONLY_NOTE = "(no performance backend: both columns time the reference backend)"


def format_report(
    results: Dict[str, BenchmarkResult],
    title: str = "Benchmark",
    reference_only: bool = False,
) -> str:
    """
    Table with one row per category.

    Example:
        Benchmark
        category    performance    reference    ratio
        small            1.20ms       3.45ms   2.875x

    With reference_only set, a note under the title says both columns
    measure the reference backend.
    """
    width = max([len("category")] + [len(name) for name in results])
    lines = [title]
    if reference_only:
        lines.append(REFERENCE_ONLY_NOTE)
    lines.append(f"{'category':<{width}}  {'performance':>12}  {'reference':>12}  {'ratio':>9}")
    for name, result in results.items():
        lines.append(
            f"{name:<{width}}  "
            f"{format_ms(result.performance_backend_ms):>12}  "
            f"{format_ms(result.reference_backend_ms):>12}  "
            f"{format_ratio(result.ratio):>9}"
        )
    return "\n".join(lines)
