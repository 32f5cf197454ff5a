"""
Polygon Primitives
==================

Shape constructors in local space. Pure functions, no shared state.

Coordinate convention:
- square, triangle, circle are origin-centered, so rotation and scaling
  pivot on the shape center and TransformParams.translate is that center.
- rectangle is corner-anchored at (0, 0).
"""

import math

from cadgeo_engine.geometry.types import Point, Polygon, ORIGIN


DEFAULT_CIRCLE_SEGMENTS = 32


def square(size: float) -> Polygon:
    """Axis-aligned square centered on the origin."""
    half = size / 2
    return Polygon((
        Point(-half, -half),
        Point(half, -half),
        Point(half, half),
        Point(-half, half),
    ))


def triangle(base: float, height: float) -> Polygon:
    """
    Isosceles triangle centered on the origin.

    The apex sits at (0, -height/2), which is "up" on a y-down canvas.
    """
    half_base = base / 2
    half_height = height / 2
    return Polygon((
        Point(0.0, -half_height),
        Point(-half_base, half_height),
        Point(half_base, half_height),
    ))


def regular_polygon(center: Point, circumradius: float, sides: int) -> Polygon:
    """
    Regular N-gon with its first vertex at angle 0.

    Raises:
        ValueError: If sides < 3
    """
    if sides < 3:
        raise ValueError(f"A regular polygon needs at least 3 sides, got {sides}")

    step = 2 * math.pi / sides
    return Polygon(tuple(
        Point(
            center.x + circumradius * math.cos(i * step),
            center.y + circumradius * math.sin(i * step),
        )
        for i in range(sides)
    ))


def circle(center: Point = ORIGIN, radius: float = 1.0, segments: int = DEFAULT_CIRCLE_SEGMENTS) -> Polygon:
    """Circle approximated by `segments` evenly spaced vertices."""
    return regular_polygon(center, radius, segments)


def rectangle(width: float, height: float) -> Polygon:
    """Rectangle anchored at (0, 0), extending to (width, height)."""
    return Polygon((
        Point(0.0, 0.0),
        Point(width, 0.0),
        Point(width, height),
        Point(0.0, height),
    ))
