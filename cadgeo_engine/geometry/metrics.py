"""
Metric Calculators
==================

Area, perimeter, centroid and bounding box over a vertex list.
All O(N), pure.
"""

import math
from typing import Tuple

from cadgeo_engine.geometry.types import Point, Polygon


def area(polygon: Polygon) -> float:
    """
    Shoelace area: |sum(x_i * y_{i+1} - x_{i+1} * y_i)| / 2.

    Returns 0 for fewer than 3 vertices.
    """
    vertices = polygon.vertices
    n = len(vertices)
    if n < 3:
        return 0.0

    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        total += vertices[i].x * vertices[j].y
        total -= vertices[j].x * vertices[i].y

    return abs(total) / 2


def perimeter(polygon: Polygon) -> float:
    """
    Length of the closed loop.

    Two vertices form a single segment, counted once.
    """
    vertices = polygon.vertices
    n = len(vertices)
    if n < 2:
        return 0.0
    if n == 2:
        return vertices[0].distance_to(vertices[1])

    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        total += math.hypot(vertices[j].x - vertices[i].x, vertices[j].y - vertices[i].y)

    return total


def centroid(polygon: Polygon) -> Point:
    """
    Arithmetic mean of the vertices.

    Not the area-weighted centroid: exact only for symmetric shapes.
    """
    vertices = polygon.vertices
    if not vertices:
        return Point(0.0, 0.0)

    cx = 0.0
    cy = 0.0
    for vertex in vertices:
        cx += vertex.x
        cy += vertex.y

    return Point(cx / len(vertices), cy / len(vertices))


def bounding_box(polygon: Polygon) -> Tuple[float, float, float, float]:
    """
    Axis-aligned bounds as (min_x, min_y, max_x, max_y).

    Raises:
        ValueError: If the polygon has no vertices
    """
    if not polygon.vertices:
        raise ValueError("Cannot compute bounding box of an empty polygon")

    xs = [v.x for v in polygon.vertices]
    ys = [v.y for v in polygon.vertices]
    return min(xs), min(ys), max(xs), max(ys)
