"""
Geometry Value Types
====================

Immutable value objects shared by every backend.

Design:
- Frozen dataclasses (values, no identity)
- Tuples of Points inside Polygon (order defines edges i -> i+1 mod N)
- numpy conversion helpers for the vectorized backend
"""

import math
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    """2D point (or vector) in canvas coordinates, y pointing down."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Polygon:
    """
    Ordered vertex loop.

    Polygons with fewer than 3 vertices are degenerate (a point or a
    segment). They are valid values; metrics and hit-testing return zero or
    False for them instead of raising.

    Attributes:
        vertices: Tuple of Points; vertex i connects to vertex (i + 1) mod N
    """

    vertices: Tuple[Point, ...] = ()

    def __post_init__(self):
        """Normalize vertices to a tuple of Points."""
        vertices = tuple(
            v if isinstance(v, Point) else Point(float(v[0]), float(v[1]))
            for v in self.vertices
        )
        object.__setattr__(self, 'vertices', vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    @property
    def is_degenerate(self) -> bool:
        return len(self.vertices) < 3

    @classmethod
    def from_points(cls, points: Iterable[Tuple[float, float]]) -> "Polygon":
        """Build a polygon from (x, y) pairs."""
        return cls(tuple(Point(float(x), float(y)) for x, y in points))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Polygon":
        """
        Build a polygon from an Nx2 array.

        Raises:
            ValueError: If the array is not Nx2
        """
        array = np.asarray(array, dtype=np.float64)
        if array.size == 0:
            return cls(())
        if array.ndim != 2 or array.shape[1] != 2:
            raise ValueError(f"vertices must be Nx2 array, got shape {array.shape}")
        return cls(tuple(Point(float(x), float(y)) for x, y in array))

    def to_array(self) -> np.ndarray:
        """Nx2 float64 array of the vertices (0x2 when empty)."""
        if not self.vertices:
            return np.zeros((0, 2), dtype=np.float64)
        return np.array([(v.x, v.y) for v in self.vertices], dtype=np.float64)


@dataclass(frozen=True)
class Matrix:
    """
    2D affine transform.

        x' = m11 * x + m12 * y + dx
        y' = m21 * x + m22 * y + dy
    """

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def identity(cls) -> "Matrix":
        return cls()

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Compose two transforms: the result applies `other` first, then self.
        """
        return Matrix(
            m11=self.m11 * other.m11 + self.m12 * other.m21,
            m12=self.m11 * other.m12 + self.m12 * other.m22,
            m21=self.m21 * other.m11 + self.m22 * other.m21,
            m22=self.m21 * other.m12 + self.m22 * other.m22,
            dx=self.m11 * other.dx + self.m12 * other.dy + self.dx,
            dy=self.m21 * other.dx + self.m22 * other.dy + self.dy,
        )

    def apply(self, point: Point) -> Point:
        """Map a single point."""
        return Point(
            self.m11 * point.x + self.m12 * point.y + self.dx,
            self.m21 * point.x + self.m22 * point.y + self.dy,
        )

    @property
    def linear(self) -> np.ndarray:
        """2x2 linear part as an array."""
        return np.array([[self.m11, self.m12], [self.m21, self.m22]], dtype=np.float64)

    @property
    def translation(self) -> np.ndarray:
        return np.array([self.dx, self.dy], dtype=np.float64)


@dataclass(frozen=True)
class TransformParams:
    """
    Placement of a shape: scale first, then rotate (radians), then translate.

    Owned by exactly one Shape. Updates produce a new value (with_* helpers),
    so a params object handed to a callback can never be changed under it.
    """

    translate: Point = ORIGIN
    rotate: float = 0.0
    scale: Point = Point(1.0, 1.0)

    def with_translate(self, translate: Point) -> "TransformParams":
        return replace(self, translate=translate)

    def with_rotate(self, rotate: float) -> "TransformParams":
        return replace(self, rotate=float(rotate))

    def with_uniform_scale(self, factor: float) -> "TransformParams":
        return replace(self, scale=Point(float(factor), float(factor)))
