"""
cadgeo CLI - Main entry point.

Provides command-line access to the geometry engine, the benchmark harness
and the headless editor (rendering and scenario replay).
"""

import argparse
import math
import sys
from typing import List, Optional

import supervision as sv

from cadgeo_bench import format_report, run_comparison, run_workloads
from cadgeo_editor import (
    EditorConfig,
    EditorService,
    SteppedClock,
    load_scenario,
    run_scenario,
)
from cadgeo_engine import GeometryEngine, Point, TransformParams

from .utils import get_target_run_folder


def load_editor_config(config_path: Optional[str]) -> EditorConfig:
    if config_path is None:
        return EditorConfig.default()
    return EditorConfig.from_yaml(config_path)


def build_engine(config: EditorConfig) -> GeometryEngine:
    backend = config.backend
    return GeometryEngine.initialize(
        performance_backend=backend.performance_backend if backend.enabled else None,
    )


# ========== Commands ==========

def cmd_benchmark(args) -> None:
    config = load_editor_config(args.config)
    engine = build_engine(config)

    iterations = args.iterations or config.benchmark.iterations
    print(f"Backend: {engine.active_backend_name} (available: {engine.is_backend_available()})")
    reference_only = not engine.is_backend_available()
    print(format_report(
        run_comparison(engine, iterations),
        title=f"Comparison ({iterations} iterations)",
        reference_only=reference_only,
    ))

    if args.workloads:
        workload_iterations = args.workload_iterations or config.benchmark.workload_iterations
        print()
        print(format_report(
            run_workloads(engine, workload_iterations),
            title=f"Workloads ({workload_iterations} iterations)",
            reference_only=reference_only,
        ))


def cmd_metrics(args) -> None:
    engine = GeometryEngine.initialize()

    if args.kind == "square":
        local = engine.square(args.size)
    elif args.kind == "triangle":
        local = engine.triangle(args.base, args.height)
    elif args.kind == "circle":
        local = engine.circle(Point(0, 0), args.radius, args.segments)
    else:
        local = engine.rectangle(args.width, args.height)

    params = TransformParams(
        translate=Point(*args.translate),
        rotate=math.radians(args.rotate),
        scale=Point(args.scale, args.scale),
    )
    world = engine.world_polygon(local, params)
    centroid = engine.centroid(world)

    print(f"kind:      {args.kind}")
    print(f"vertices:  {len(world)}")
    print(f"area:      {engine.area(world):.4f}")
    print(f"perimeter: {engine.perimeter(world):.4f}")
    print(f"centroid:  ({centroid.x:.4f}, {centroid.y:.4f})")


def cmd_render(args) -> None:
    config = load_editor_config(args.config)
    service = EditorService(config, seed=args.seed)

    for kind in args.shapes:
        service.add_shape(kind)
    if service.store.shapes:
        service.store.select(service.store.shapes[-1].id)

    target_run_folder = get_target_run_folder(application_name="render")
    with sv.ImageSink(target_dir_path=target_run_folder, overwrite=True) as sink:
        sink.save_image(image=service.render(), image_name="canvas.png")

    print(f"Rendered {len(service.store)} shapes to {target_run_folder}/canvas.png")


def cmd_replay(args) -> None:
    config = load_editor_config(args.config)
    steps = load_scenario(args.scenario)
    service = EditorService(config, seed=args.seed, clock=SteppedClock(args.step_ms))

    target_run_folder = get_target_run_folder(application_name="replay")
    with sv.ImageSink(
        target_dir_path=target_run_folder,
        overwrite=True,
        image_name_pattern="frame_{:05d}.png",
    ) as sink:
        frames = run_scenario(service, steps, on_frame=lambda index, frame: sink.save_image(image=frame))

    print(f"Replayed {len(steps)} steps, saved {frames} frames to {target_run_folder}")
    properties = service.selected_properties()
    if properties is not None:
        print(f"Selected: {properties}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cadgeo-cli",
        description="cadgeo CLI - geometry metrics, backend benchmarks, headless canvas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compare backends
  cadgeo-cli benchmark --iterations 500 --workloads

  # Metrics of a transformed shape
  cadgeo-cli metrics square --size 50 --translate 200 150 --rotate 45 --scale 2

  # Render a random scene
  cadgeo-cli render --shapes square triangle circle --seed 7

  # Replay a scripted session
  cadgeo-cli replay config/scenarios/drag_demo.yaml
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # benchmark command
    benchmark = subparsers.add_parser('benchmark', help='Compare performance and reference backends')
    benchmark.add_argument('--iterations', type=int, default=None, help='Iterations per category')
    benchmark.add_argument('--workloads', action='store_true', help='Also run the workload suite')
    benchmark.add_argument('--workload-iterations', type=int, default=None, help='Iterations per workload')
    benchmark.add_argument('--config', default=None, help='Editor config YAML')
    benchmark.set_defaults(handler=cmd_benchmark)

    # metrics command
    metrics = subparsers.add_parser('metrics', help='Area, perimeter and centroid of a shape')
    metrics.add_argument('kind', choices=['square', 'triangle', 'circle', 'rectangle'])
    metrics.add_argument('--size', type=float, default=50.0, help='Square side (default: 50)')
    metrics.add_argument('--base', type=float, default=60.0, help='Triangle base (default: 60)')
    metrics.add_argument('--height', type=float, default=40.0, help='Triangle/rectangle height (default: 40)')
    metrics.add_argument('--width', type=float, default=60.0, help='Rectangle width (default: 60)')
    metrics.add_argument('--radius', type=float, default=30.0, help='Circle radius (default: 30)')
    metrics.add_argument('--segments', type=int, default=32, help='Circle segments (default: 32)')
    metrics.add_argument('--translate', type=float, nargs=2, default=[0.0, 0.0], metavar=('X', 'Y'))
    metrics.add_argument('--rotate', type=float, default=0.0, help='Rotation in degrees')
    metrics.add_argument('--scale', type=float, default=1.0, help='Uniform scale factor')
    metrics.set_defaults(handler=cmd_metrics)

    # render command
    render = subparsers.add_parser('render', help='Render a scene to PNG')
    render.add_argument('--shapes', nargs='+', default=['square', 'triangle', 'circle'],
                        choices=['square', 'triangle', 'circle'])
    render.add_argument('--seed', type=int, default=None, help='Spawn position seed')
    render.add_argument('--config', default=None, help='Editor config YAML')
    render.set_defaults(handler=cmd_render)

    # replay command
    replay = subparsers.add_parser('replay', help='Replay a YAML scenario of editor commands')
    replay.add_argument('scenario', help='Path to scenario YAML')
    replay.add_argument('--step-ms', type=float, default=20.0, help='Clock step between events (default: 20)')
    replay.add_argument('--seed', type=int, default=None, help='Spawn position seed')
    replay.add_argument('--config', default=None, help='Editor config YAML')
    replay.set_defaults(handler=cmd_replay)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.handler(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
