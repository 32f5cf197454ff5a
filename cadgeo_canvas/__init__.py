"""
cadgeo Canvas
=============

Bounded Context: Shapes on a surface and the pointer interactions that move them.

Architecture:

    cadgeo_canvas/
    ├── shapes.py        # Shape, ShapeKind (local sizing + TransformParams)
    ├── interaction.py   # InteractionController, DragSession, Tool
    ├── rendering/       # CanvasRenderer (supervision drawing)
    └── view.py          # CanvasView (owned surface: resize, redraw)

Usage:

    from cadgeo_canvas import CanvasView, InteractionController, Shape, ShapeKind, Tool

    controller = InteractionController(engine, store.select, store.update_shape)
    view = CanvasView(engine, controller, size=(600, 400))
    frame = view.redraw(store.shapes, store.selected_id)
"""

from cadgeo_canvas.shapes import (
    Shape,
    ShapeKind,
    new_shape_id,
    DEFAULT_SIZE,
    DEFAULT_TRIANGLE_BASE,
    DEFAULT_TRIANGLE_HEIGHT,
    DEFAULT_RADIUS,
)
from cadgeo_canvas.interaction import InteractionController, DragSession, Tool
from cadgeo_canvas.rendering import CanvasRenderer
from cadgeo_canvas.view import CanvasView

__all__ = [
    # Shapes
    "Shape",
    "ShapeKind",
    "new_shape_id",
    "DEFAULT_SIZE",
    "DEFAULT_TRIANGLE_BASE",
    "DEFAULT_TRIANGLE_HEIGHT",
    "DEFAULT_RADIUS",
    # Interaction
    "InteractionController",
    "DragSession",
    "Tool",
    # Rendering
    "CanvasRenderer",
    "CanvasView",
]
