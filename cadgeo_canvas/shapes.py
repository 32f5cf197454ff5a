"""
Canvas Shapes
=============

Shapes placed on the canvas: sizing fields in local space plus the
TransformParams that put them into world space.

Design:
- Mutable record owned by the shape collection (the editor store)
- Transform replaced as a whole value, never edited field by field
- Local/world polygons computed through the injected GeometryEngine
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from cadgeo_engine import GeometryEngine, Point, Polygon, TransformParams, ORIGIN
from cadgeo_engine.geometry.primitives import DEFAULT_CIRCLE_SEGMENTS


DEFAULT_SIZE = 50.0
DEFAULT_TRIANGLE_BASE = 60.0
DEFAULT_TRIANGLE_HEIGHT = 40.0
DEFAULT_RADIUS = 30.0


class ShapeKind(str, Enum):
    """Kinds of shape the canvas can place."""

    SQUARE = "square"
    TRIANGLE = "triangle"
    CIRCLE = "circle"


def new_shape_id() -> str:
    """Fresh unique shape id."""
    return f"shape-{uuid.uuid4().hex[:12]}"


@dataclass
class Shape:
    """
    A rigid shape on the canvas.

    Attributes:
        id: Unique identifier
        kind: square, triangle or circle
        size: Square side length
        base, height: Triangle dimensions
        radius, center: Circle radius and local-space center
        transform: Placement in world space
    """

    id: str
    kind: ShapeKind
    size: float = DEFAULT_SIZE
    base: Optional[float] = None
    height: Optional[float] = None
    radius: Optional[float] = None
    center: Optional[Point] = None
    transform: TransformParams = field(default_factory=TransformParams)

    def __post_init__(self):
        self.kind = ShapeKind(self.kind)

    def local_polygon(
        self,
        engine: GeometryEngine,
        circle_segments: int = DEFAULT_CIRCLE_SEGMENTS,
    ) -> Polygon:
        """Vertices before the shape's transform is applied."""
        if self.kind is ShapeKind.SQUARE:
            return engine.square(self.size)

        if self.kind is ShapeKind.TRIANGLE:
            base = self.base if self.base is not None else DEFAULT_TRIANGLE_BASE
            height = self.height if self.height is not None else DEFAULT_TRIANGLE_HEIGHT
            return engine.triangle(base, height)

        radius = self.radius if self.radius is not None else DEFAULT_RADIUS
        center = self.center if self.center is not None else ORIGIN
        return engine.circle(center, radius, circle_segments)

    def world_polygon(
        self,
        engine: GeometryEngine,
        circle_segments: int = DEFAULT_CIRCLE_SEGMENTS,
    ) -> Polygon:
        """Vertices in canvas coordinates (what hit-testing and drawing use)."""
        return engine.world_polygon(self.local_polygon(engine, circle_segments), self.transform)
