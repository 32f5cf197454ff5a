"""
Vectorized Backend
==================

numpy implementation of the geometry function set; the performance
backend the facade loads by default.

Results match the reference backend to floating-point tolerance, including
the degenerate-polygon rules (N < 3 area, N == 2 perimeter, empty centroid)
and the half-open boundary rule of the crossing test.
"""

import numpy as np

from cadgeo_engine.geometry.primitives import DEFAULT_CIRCLE_SEGMENTS
from cadgeo_engine.geometry.types import Matrix, Point, Polygon


class VectorizedBackend:
    """Operates on Nx2 float64 arrays."""

    name = "vectorized"

    def area(self, polygon: Polygon) -> float:
        if len(polygon) < 3:
            return 0.0
        xy = polygon.to_array()
        x, y = xy[:, 0], xy[:, 1]
        x_next, y_next = np.roll(x, -1), np.roll(y, -1)
        return float(abs(np.sum(x * y_next - x_next * y)) / 2)

    def perimeter(self, polygon: Polygon) -> float:
        n = len(polygon)
        if n < 2:
            return 0.0
        xy = polygon.to_array()
        if n == 2:
            return float(np.hypot(*(xy[1] - xy[0])))
        edges = np.roll(xy, -1, axis=0) - xy
        return float(np.sum(np.hypot(edges[:, 0], edges[:, 1])))

    def centroid(self, polygon: Polygon) -> Point:
        if len(polygon) == 0:
            return Point(0.0, 0.0)
        cx, cy = polygon.to_array().mean(axis=0)
        return Point(float(cx), float(cy))

    def transform(self, polygon: Polygon, matrix: Matrix) -> Polygon:
        if len(polygon) == 0:
            return Polygon(())
        mapped = polygon.to_array() @ matrix.linear.T + matrix.translation
        return Polygon.from_array(mapped)

    def point_in_polygon(self, point: Point, polygon: Polygon) -> bool:
        if len(polygon) < 3:
            return False
        xy = polygon.to_array()
        xi, yi = xy[:, 0], xy[:, 1]
        # Edge (i, i - 1)
        xj, yj = np.roll(xi, 1), np.roll(yi, 1)

        straddles = (yi > point.y) != (yj > point.y)
        with np.errstate(divide="ignore", invalid="ignore"):
            x_cross = (xj - xi) * (point.y - yi) / (yj - yi) + xi
        crossings = np.count_nonzero(straddles & (point.x < x_cross))
        return bool(crossings % 2)

    def square(self, size: float) -> Polygon:
        half = size / 2
        unit = np.array([[-1.0, -1.0], [1.0, -1.0], [1.0, 1.0], [-1.0, 1.0]])
        return Polygon.from_array(unit * half)

    def triangle(self, base: float, height: float) -> Polygon:
        corners = np.array([[0.0, -1.0], [-1.0, 1.0], [1.0, 1.0]])
        return Polygon.from_array(corners * np.array([base / 2, height / 2]))

    def circle(self, center: Point, radius: float, segments: int = DEFAULT_CIRCLE_SEGMENTS) -> Polygon:
        if segments < 3:
            raise ValueError(f"A regular polygon needs at least 3 sides, got {segments}")
        angles = np.arange(segments) * (2 * np.pi / segments)
        xy = np.column_stack((np.cos(angles), np.sin(angles))) * radius + (center.x, center.y)
        return Polygon.from_array(xy)

    def rectangle(self, width: float, height: float) -> Polygon:
        unit = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
        return Polygon.from_array(unit * np.array([width, height]))


BACKEND_CLASS = VectorizedBackend
