from cadgeo_bench import format_report, run_comparison, run_single, run_workloads
from cadgeo_engine import GeometryEngine

ITERATIONS = 1000
WORKLOAD_ITERATIONS = 100


def main():
    engine = GeometryEngine.initialize()
    print(f"Backend: {engine.active_backend_name} (available: {engine.is_backend_available()})")
    reference_only = not engine.is_backend_available()

    single = run_single(engine, ITERATIONS)
    print(f"Single square(1): performance {single.performance_backend_ms:.2f}ms, "
          f"reference {single.reference_backend_ms:.2f}ms, ratio {single.ratio:.3f}x")
    print()

    print(format_report(
        run_comparison(engine, ITERATIONS),
        title=f"Comparison ({ITERATIONS} iterations)",
        reference_only=reference_only,
    ))
    print()
    print(format_report(
        run_workloads(engine, WORKLOAD_ITERATIONS),
        title=f"Workloads ({WORKLOAD_ITERATIONS} iterations)",
        reference_only=reference_only,
    ))


if __name__ == "__main__":
    main()
