"""
Reference Backend
=================

Plain-Python implementation. Always available; the facade answers with it
whenever the performance backend is missing or raises.
"""

from cadgeo_engine.geometry import hit_testing, metrics, primitives, transforms
from cadgeo_engine.geometry.types import Matrix, Point, Polygon


class ReferenceBackend:
    """Loops over Point objects, one vertex at a time."""

    name = "reference"

    def area(self, polygon: Polygon) -> float:
        return metrics.area(polygon)

    def perimeter(self, polygon: Polygon) -> float:
        return metrics.perimeter(polygon)

    def centroid(self, polygon: Polygon) -> Point:
        return metrics.centroid(polygon)

    def transform(self, polygon: Polygon, matrix: Matrix) -> Polygon:
        return transforms.transform(polygon, matrix)

    def point_in_polygon(self, point: Point, polygon: Polygon) -> bool:
        return hit_testing.point_in_polygon(point, polygon)

    def square(self, size: float) -> Polygon:
        return primitives.square(size)

    def triangle(self, base: float, height: float) -> Polygon:
        return primitives.triangle(base, height)

    def circle(self, center: Point, radius: float, segments: int = primitives.DEFAULT_CIRCLE_SEGMENTS) -> Polygon:
        return primitives.circle(center, radius, segments)

    def rectangle(self, width: float, height: float) -> Polygon:
        return primitives.rectangle(width, height)


BACKEND_CLASS = ReferenceBackend
