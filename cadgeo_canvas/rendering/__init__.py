"""
Rendering Layer
===============

Bounded Context: Canvas drawing.

Responsibilities:
- Paint a fresh frame (background, grid)
- Draw shapes (fill, outline, selection highlight, centroid marker)

Non-responsibilities:
- Geometry (handled by cadgeo_engine)
- Pointer handling (handled by interaction)

Design:
- Stateless drawing functions
- Uses supervision.draw.utils
- Configurable styles
"""

from cadgeo_canvas.rendering.visualizer import CanvasRenderer, to_pixels

__all__ = [
    "CanvasRenderer",
    "to_pixels",
]
