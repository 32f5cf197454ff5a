"""
Geometry Layer
==============

Bounded Context: Pure 2D geometry.

Responsibilities:
- Value types (Point, Polygon, Matrix, TransformParams)
- Shape primitives in local space
- Affine transforms
- Area / perimeter / centroid
- Point-in-polygon tests
- NO state, NO backends, NO drawing
"""

from cadgeo_engine.geometry.types import Point, Polygon, Matrix, TransformParams, ORIGIN
from cadgeo_engine.geometry.primitives import (
    square,
    triangle,
    circle,
    rectangle,
    regular_polygon,
    DEFAULT_CIRCLE_SEGMENTS,
)
from cadgeo_engine.geometry.transforms import (
    create_matrix,
    translate_by,
    rotate_by,
    scale_by,
    compose,
    matrix_from_params,
    transform,
)
from cadgeo_engine.geometry.metrics import area, perimeter, centroid, bounding_box
from cadgeo_engine.geometry.hit_testing import point_in_polygon

__all__ = [
    "Point",
    "Polygon",
    "Matrix",
    "TransformParams",
    "ORIGIN",
    "square",
    "triangle",
    "circle",
    "rectangle",
    "regular_polygon",
    "DEFAULT_CIRCLE_SEGMENTS",
    "create_matrix",
    "translate_by",
    "rotate_by",
    "scale_by",
    "compose",
    "matrix_from_params",
    "transform",
    "area",
    "perimeter",
    "centroid",
    "bounding_box",
    "point_in_polygon",
]
