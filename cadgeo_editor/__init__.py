"""
cadgeo Editor
=============

Bounded Context: Headless application shell around the canvas.

    config.py    # EditorConfig (frozen dataclasses, YAML)
    store.py     # ShapeStore (ordered shapes + selection)
    registry.py  # CommandRegistry (named editor actions)
    service.py   # EditorService (wires engine, store, canvas)
    replay.py    # YAML scenario replay
"""

from cadgeo_editor.config import (
    EditorConfig,
    CanvasConfig,
    InteractionConfig,
    ShapeDefaults,
    BackendConfig,
    BenchmarkConfig,
)
from cadgeo_editor.store import ShapeStore
from cadgeo_editor.registry import CommandRegistry, CommandNotAvailableError
from cadgeo_editor.service import EditorService
from cadgeo_editor.replay import SteppedClock, load_scenario, parse_steps, run_scenario

__all__ = [
    "EditorConfig",
    "CanvasConfig",
    "InteractionConfig",
    "ShapeDefaults",
    "BackendConfig",
    "BenchmarkConfig",
    "ShapeStore",
    "CommandRegistry",
    "CommandNotAvailableError",
    "EditorService",
    "SteppedClock",
    "load_scenario",
    "parse_steps",
    "run_scenario",
]
