"""
Configuration schema for the canvas editor.

This module defines the configuration structure for the editor: canvas
surface and grid, interaction limits, default shape dimensions, backend
selection and benchmark iteration counts.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union
import yaml


@dataclass(frozen=True)
class CanvasConfig:
    """Canvas surface and grid configuration."""

    width: int = 600
    height: int = 400
    grid_spacing: int = 20
    show_grid: bool = True
    margin: float = 10.0

    def __post_init__(self):
        """Validate canvas configuration."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas must have positive dimensions, got {self.width}x{self.height}"
            )

        if self.width > 4096 or self.height > 4096:
            raise ValueError(
                f"Canvas dimensions too large (max 4096x4096), got {self.width}x{self.height}"
            )

        if self.grid_spacing <= 0:
            raise ValueError(
                f"grid_spacing must be > 0, got {self.grid_spacing}"
            )

        if self.margin < 0 or 2 * self.margin >= min(self.width, self.height):
            raise ValueError(
                f"margin must be in [0, {min(self.width, self.height) / 2}), got {self.margin}"
            )

    @property
    def size(self):
        return (self.width, self.height)


@dataclass(frozen=True)
class InteractionConfig:
    """Pointer interaction limits."""

    throttle_ms: float = 16.0
    min_scale: float = 0.1
    max_scale: float = 5.0

    def __post_init__(self):
        """Validate interaction configuration."""
        if self.throttle_ms < 0:
            raise ValueError(
                f"throttle_ms must be >= 0, got {self.throttle_ms}"
            )

        if not 0 < self.min_scale <= self.max_scale:
            raise ValueError(
                f"Scale bounds must satisfy 0 < min_scale <= max_scale, "
                f"got [{self.min_scale}, {self.max_scale}]"
            )


@dataclass(frozen=True)
class ShapeDefaults:
    """
    Dimensions and spawn area for newly added shapes.

    New shapes are placed at spawn_min + U[0, spawn_range) on each axis.
    """

    size: float = 50.0
    base: float = 60.0
    height: float = 40.0
    radius: float = 30.0
    circle_segments: int = 32
    spawn_min: float = 100.0
    spawn_range: float = 200.0

    def __post_init__(self):
        """Validate shape defaults."""
        for name in ("size", "base", "height", "radius"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be > 0, got {value}")

        if self.circle_segments < 3:
            raise ValueError(
                f"circle_segments must be >= 3, got {self.circle_segments}"
            )

        if self.spawn_range < 0:
            raise ValueError(
                f"spawn_range must be >= 0, got {self.spawn_range}"
            )


@dataclass(frozen=True)
class BackendConfig:
    """Performance backend selection."""

    performance_backend: str = "cadgeo_engine.backends.vectorized"
    enabled: bool = True

    def __post_init__(self):
        """Validate backend configuration."""
        if self.enabled and not self.performance_backend:
            raise ValueError("performance_backend cannot be empty when enabled")


@dataclass(frozen=True)
class BenchmarkConfig:
    """Benchmark iteration counts."""

    iterations: int = 1000
    workload_iterations: int = 100

    def __post_init__(self):
        """Validate benchmark configuration."""
        if self.iterations < 1:
            raise ValueError(
                f"iterations must be >= 1, got {self.iterations}"
            )

        if self.workload_iterations < 1:
            raise ValueError(
                f"workload_iterations must be >= 1, got {self.workload_iterations}"
            )


@dataclass(frozen=True)
class EditorConfig:
    """
    Main configuration for the editor.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    shapes: ShapeDefaults = field(default_factory=ShapeDefaults)
    backend: BackendConfig = field(default_factory=BackendConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)

    @classmethod
    def default(cls) -> "EditorConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> "EditorConfig":
        """Build from a parsed mapping; missing sections take their defaults."""
        data = data or {}

        known = {"canvas", "interaction", "shapes", "backend", "benchmark"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown configuration sections: {sorted(unknown)}. "
                f"Must be among {sorted(known)}"
            )

        return cls(
            canvas=CanvasConfig(**data.get("canvas", {})),
            interaction=InteractionConfig(**data.get("interaction", {})),
            shapes=ShapeDefaults(**data.get("shapes", {})),
            backend=BackendConfig(**data.get("backend", {})),
            benchmark=BenchmarkConfig(**data.get("benchmark", {})),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "EditorConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            canvas:
              width: 600
              height: 400
              grid_spacing: 20
              show_grid: true

            interaction:
              throttle_ms: 16
              min_scale: 0.1
              max_scale: 5.0

            backend:
              performance_backend: "cadgeo_engine.backends.vectorized"
              enabled: true
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {yaml_path}\n"
                f"Create it from config/editor.yaml or pass --config"
            )

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        if data is not None and not isinstance(data, dict):
            raise ValueError(
                f"Config root must be a mapping, got {type(data).__name__}"
            )

        return cls.from_dict(data)
