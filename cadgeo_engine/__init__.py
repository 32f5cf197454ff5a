"""
cadgeo Geometry Engine
======================

Bounded Context: 2D polygon geometry behind a dual-backend facade.

Architecture:

    cadgeo_engine/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── types.py       # Point, Polygon, Matrix, TransformParams
    │   ├── primitives.py  # square, triangle, circle, rectangle
    │   ├── transforms.py  # create_matrix, compose, transform
    │   ├── metrics.py     # area, perimeter, centroid, bounding_box
    │   └── hit_testing.py # point_in_polygon (even-odd)
    │
    ├── backends/          # Interchangeable implementations
    │   ├── reference.py   # Plain Python
    │   ├── vectorized.py  # numpy (performance backend)
    │   ├── loader.py      # Import + capability probe
    │   └── facade.py      # GeometryEngine (per-call fallback)
    │
    └── errors.py

Usage:

    from cadgeo_engine import GeometryEngine, Point, TransformParams

    engine = GeometryEngine.initialize()
    local = engine.square(50)
    world = engine.world_polygon(local, TransformParams(translate=Point(200, 150)))

    engine.area(world)                          # 2500.0
    engine.point_in_polygon(Point(210, 160), world)  # True
"""

from cadgeo_engine.geometry import (
    Point,
    Polygon,
    Matrix,
    TransformParams,
    ORIGIN,
)
from cadgeo_engine.backends import (
    GeometryEngine,
    ReferenceBackend,
    VectorizedBackend,
    load_backend,
    DEFAULT_PERFORMANCE_BACKEND,
)
from cadgeo_engine.errors import GeometryEngineError, BackendUnavailableError

__all__ = [
    # Geometry
    "Point",
    "Polygon",
    "Matrix",
    "TransformParams",
    "ORIGIN",
    # Backends
    "GeometryEngine",
    "ReferenceBackend",
    "VectorizedBackend",
    "load_backend",
    "DEFAULT_PERFORMANCE_BACKEND",
    # Errors
    "GeometryEngineError",
    "BackendUnavailableError",
]

__version__ = "1.0.0"
