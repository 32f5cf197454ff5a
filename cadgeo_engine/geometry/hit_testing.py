"""
Hit Testing
===========

Even-odd point-in-polygon test.

Callers must pass world-space vertices (already transformed); testing a
pointer against local-space vertices of a rotated or scaled shape is wrong.

Boundary rule:
    The crossing test is half-open. For an axis-aligned box, points on the
    minimum-x or minimum-y edge count as inside, points on the maximum-x or
    maximum-y edge count as outside. Adjacent shapes sharing an edge
    therefore never both claim a boundary point.
"""

from cadgeo_engine.geometry.types import Point, Polygon


def point_in_polygon(point: Point, polygon: Polygon) -> bool:
    """
    Ray-cast along +x from `point` and count edge crossings.

    Returns False for fewer than 3 vertices.
    """
    vertices = polygon.vertices
    n = len(vertices)
    if n < 3:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        vi = vertices[i]
        vj = vertices[j]
        if (vi.y > point.y) != (vj.y > point.y):
            x_cross = (vj.x - vi.x) * (point.y - vi.y) / (vj.y - vi.y) + vi.x
            if point.x < x_cross:
                inside = not inside
        j = i

    return inside
