"""
Affine Transform Engine
=======================

Matrix builders and polygon mapping.

Composition order for create_matrix: scale, then rotate, then translate.
Rotation uses the standard matrix [[cos, -sin], [sin, cos]]. On a y-down
canvas a positive angle therefore turns shapes clockwise on screen.
"""

import math
from typing import Optional

from cadgeo_engine.geometry.types import Matrix, Point, Polygon, TransformParams


def create_matrix(
    translate: Optional[Point] = None,
    rotate: Optional[float] = None,
    scale: Optional[Point] = None,
) -> Matrix:
    """
    Build an affine matrix. With no arguments the identity is returned.

    Args:
        translate: Offset applied last
        rotate: Angle in radians
        scale: Per-axis factors applied first
    """
    m11, m12, m21, m22 = 1.0, 0.0, 0.0, 1.0

    if scale is not None:
        m11 *= scale.x
        m22 *= scale.y

    if rotate is not None:
        cos_a = math.cos(rotate)
        sin_a = math.sin(rotate)
        # R @ current linear part
        m11, m12, m21, m22 = (
            cos_a * m11 - sin_a * m21,
            cos_a * m12 - sin_a * m22,
            sin_a * m11 + cos_a * m21,
            sin_a * m12 + cos_a * m22,
        )

    dx, dy = (translate.x, translate.y) if translate is not None else (0.0, 0.0)
    return Matrix(m11=m11, m12=m12, m21=m21, m22=m22, dx=dx, dy=dy)


def translate_by(dx: float, dy: float) -> Matrix:
    return create_matrix(translate=Point(dx, dy))


def rotate_by(angle: float) -> Matrix:
    return create_matrix(rotate=angle)


def scale_by(sx: float, sy: float) -> Matrix:
    return create_matrix(scale=Point(sx, sy))


def compose(outer: Matrix, inner: Matrix) -> Matrix:
    """Matrix that applies `inner` first, then `outer`."""
    return outer.multiply(inner)


def matrix_from_params(params: TransformParams) -> Matrix:
    """Matrix placing a local-space shape into world space."""
    return create_matrix(
        translate=params.translate,
        rotate=params.rotate,
        scale=params.scale,
    )


def transform(polygon: Polygon, matrix: Matrix) -> Polygon:
    """Map every vertex through `matrix`. The input polygon is not modified."""
    return Polygon(tuple(matrix.apply(v) for v in polygon.vertices))
