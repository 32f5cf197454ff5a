"""
Backend Interface
=================

The function set every geometry backend provides. The facade probes a
performance backend against OPERATIONS and routes each operation
independently.
"""

from typing import Protocol, Tuple, runtime_checkable

from cadgeo_engine.geometry.types import Matrix, Point, Polygon


OPERATIONS: Tuple[str, ...] = (
    "area",
    "perimeter",
    "centroid",
    "transform",
    "point_in_polygon",
    "square",
    "triangle",
    "circle",
    "rectangle",
)


@runtime_checkable
class GeometryBackend(Protocol):
    """Protocol for interchangeable geometry implementations."""

    name: str

    def area(self, polygon: Polygon) -> float:
        ...

    def perimeter(self, polygon: Polygon) -> float:
        ...

    def centroid(self, polygon: Polygon) -> Point:
        ...

    def transform(self, polygon: Polygon, matrix: Matrix) -> Polygon:
        ...

    def point_in_polygon(self, point: Point, polygon: Polygon) -> bool:
        ...

    def square(self, size: float) -> Polygon:
        ...

    def triangle(self, base: float, height: float) -> Polygon:
        ...

    def circle(self, center: Point, radius: float, segments: int = 32) -> Polygon:
        ...

    def rectangle(self, width: float, height: float) -> Polygon:
        ...


def missing_operations(backend: object) -> Tuple[str, ...]:
    """Names from OPERATIONS that `backend` does not expose as callables."""
    return tuple(op for op in OPERATIONS if not callable(getattr(backend, op, None)))
